"""Command-line interface for dagpath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from dagpath.algorithms.types import AlgorithmCounters, PathResult
from dagpath.analysis import AnalysisResult, analyze
from dagpath.graph.io import load_graph
from dagpath.graph.model import Graph
from dagpath.logging import configure_cli_logging, get_logger

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[Any]], min_width: int = 6) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + [[str(item) for item in row] for row in rows]
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in all_data[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _format_distance(result: PathResult, vertex: int) -> str:
    if not result.is_reachable(vertex):
        return "-"
    return str(result.distances[vertex])


def _print_graph_summary(graph: Graph) -> None:
    self_loops = sum(1 for e in graph.edges if e.u == e.v)
    print(f"   Vertices: {graph.n:,}")
    print(f"   Edges: {graph.num_edges:,}")
    print(f"   Directed: {graph.directed}")
    print(f"   Source: {graph.source}")
    print(f"   Weight model: {graph.weight_model or '-'}")
    if self_loops:
        print(f"   Self-loops: {self_loops:,}")


def _print_analysis(result: AnalysisResult, counters: AlgorithmCounters) -> None:
    scc = result.scc
    sizes = scc.component_sizes()
    print("\n📊 Strongly connected components")
    print(f"   Components: {scc.num_components:,}")
    print(f"   Largest component: {max(sizes) if sizes else 0}")
    print(f"   Condensation edges: {scc.condensation_graph.num_edges:,}")
    nontrivial = [list(c) for c in scc.components if len(c) > 1]
    if nontrivial:
        print(f"   Non-trivial components: {nontrivial}")

    print("\n📊 Topological order")
    print(f"   Components: {list(result.topo.component_order or ())}")
    print(f"   Vertices: {list(result.topo.vertex_order or ())}")
    if result.order_valid is not None:
        print(f"   Order validated: {result.order_valid}")

    print(f"\n📊 Paths from vertex {result.source}")
    rows = [
        [
            v,
            _format_distance(result.shortest, v),
            _format_distance(result.longest, v),
            result.shortest.reconstruct_path(v) or "-",
        ]
        for v in range(result.graph.n)
    ]
    print(_format_table(["Vertex", "Shortest", "Longest", "Shortest path"], rows))
    for path_result in (result.shortest, result.longest):
        print(
            f"   Critical path ({path_result.mode.value}): "
            f"{list(path_result.critical_path)} "
            f"length {path_result.critical_path_length}"
        )

    print("\n📊 Counters")
    for name, value in counters.to_dict().items():
        print(f"   {name.replace('_', ' ').capitalize()}: {value:,}")


def _run_graph(
    path: Path,
    source: Optional[int] = None,
    results_path: Optional[Path] = None,
    stdout: bool = False,
) -> None:
    """Load a graph file, run the pipeline and report results."""
    start_time = perf_counter()
    logger.info(f"Loading graph from: {path}")

    try:
        graph = load_graph(path)
        counters = AlgorithmCounters()
        result = analyze(graph, source, counters=counters)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"❌ ERROR: Graph file not found: {path}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to analyze graph: {e}")
        print(f"❌ ERROR: Failed to analyze graph: {e}")
        sys.exit(1)

    elapsed = perf_counter() - start_time
    print(f"✅ Analyzed {path.name} in {_format_duration(elapsed)}")
    _print_graph_summary(graph)
    _print_analysis(result, counters)

    if results_path is not None or stdout:
        payload = result.to_dict()
        payload["counters"] = counters.to_dict()
        json_str = json.dumps(payload, indent=2)
        if results_path is not None:
            results_path.parent.mkdir(parents=True, exist_ok=True)
            results_path.write_text(json_str)
            logger.info(f"Results written to: {results_path}")
            print(f"✅ Results written to: {results_path}")
        if stdout:
            print(json_str)


def _inspect_graph(path: Path) -> None:
    """Load a graph file and print its structure without running paths."""
    try:
        graph = load_graph(path)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"❌ ERROR: Graph file not found: {path}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid graph: {e}")
        print(f"❌ ERROR: Invalid graph: {e}")
        sys.exit(1)

    print(f"✅ Graph {path.name} is valid")
    _print_graph_summary(graph)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``dagpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="dagpath",
        description="Analyze SCCs, topological order and DAG paths of a graph.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Analyze a graph file")
    run_parser.add_argument("graph", type=Path, help="Path to graph JSON/YAML")
    run_parser.add_argument(
        "--source",
        "-s",
        type=int,
        default=None,
        help="Source vertex (default: the file's source)",
    )
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export results to this JSON file",
    )
    run_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print JSON results to stdout",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a graph file and show its structure"
    )
    inspect_parser.add_argument("graph", type=Path, help="Path to graph JSON/YAML")

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if configure_cli_logging(args.verbose, args.quiet) == logging.DEBUG:
        logger.debug("Debug logging enabled")

    if args.command == "run":
        _run_graph(
            path=args.graph,
            source=args.source,
            results_path=args.results,
            stdout=args.stdout,
        )
    elif args.command == "inspect":
        _inspect_graph(args.graph)


if __name__ == "__main__":
    main()
