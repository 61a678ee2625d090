"""End-to-end analysis pipeline.

`analyze()` validates a graph and runs the three stages in order:

    Graph -> find_components -> topological_order -> shortest/longest paths

Each stage is a pure function of its inputs; the pipeline only wires them
together, optionally runs the order validators, and bundles the results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from dagpath.algorithms.paths import longest_paths, shortest_paths
from dagpath.algorithms.scc import find_components
from dagpath.algorithms.topo import (
    topological_order,
    validate_component_order,
    validate_vertex_order,
)
from dagpath.algorithms.types import (
    AlgorithmCounters,
    PathResult,
    SCCResult,
    TopoResult,
)
from dagpath.config import ANALYSIS_CONFIG, AnalysisConfig
from dagpath.graph.model import Graph
from dagpath.logging import get_logger, log_counters

logger = get_logger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Outputs of all pipeline stages for one graph and source.

    Attributes:
        graph: Analyzed graph.
        source: Start vertex used for both path modes.
        scc: Component partition and condensation.
        topo: Topological order of the condensation.
        shortest: Shortest-mode path result.
        longest: Longest-mode path result.
        order_valid: Outcome of the order validators, None when skipped.
    """

    graph: Graph
    source: int
    scc: SCCResult
    topo: TopoResult
    shortest: PathResult
    longest: PathResult
    order_valid: Optional[bool] = None

    @property
    def paths(self) -> Dict[str, PathResult]:
        return {"shortest": self.shortest, "longest": self.longest}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "graph": {
                "directed": self.graph.directed,
                "n": self.graph.n,
                "edges": self.graph.num_edges,
                "source": self.source,
                "weight_model": self.graph.weight_model,
            },
            "scc": self.scc.to_dict(),
            "topo": self.topo.to_dict(),
            "order_valid": self.order_valid,
            "paths": {mode: r.to_dict() for mode, r in self.paths.items()},
        }


def analyze(
    graph: Graph,
    source: Optional[int] = None,
    *,
    counters: Optional[AlgorithmCounters] = None,
    config: Optional[AnalysisConfig] = None,
) -> AnalysisResult:
    """Run SCC decomposition, topological ordering and both path modes.

    Args:
        graph: Graph to analyze; must pass ``graph.validate()``.
        source: Start vertex, defaults to ``graph.source``.
        counters: Optional work counters shared by all stages.
        config: Pipeline configuration, defaults to ``ANALYSIS_CONFIG``.

    Returns:
        AnalysisResult bundling every stage's output.

    Raises:
        ValueError: If the graph is invalid, ``source`` is out of range, or
            the condensation could not be ordered.
    """
    cfg = config or ANALYSIS_CONFIG
    if not graph.validate():
        raise ValueError(f"Invalid graph structure: {graph!r}")
    start = graph.source if source is None else source

    scc = find_components(graph, counters)
    topo = topological_order(scc.condensation_graph, scc, counters)
    if not topo.is_valid():
        logger.error(
            "Internal inconsistency: condensation of %r is not acyclic", graph
        )
        raise ValueError("Condensation graph could not be topologically ordered")

    order_valid: Optional[bool] = None
    if cfg.self_check:
        assert topo.vertex_order is not None and topo.component_order is not None
        order_valid = validate_component_order(
            scc.condensation_graph, topo.component_order
        ) and validate_vertex_order(graph, topo.vertex_order, scc)
        if not order_valid:
            logger.error("Topological order failed validation for %r", graph)

    shortest = shortest_paths(graph, topo, start, counters)
    longest = longest_paths(graph, topo, start, counters)

    logger.info(
        "Analyzed graph with %d vertices: %d components, "
        "shortest critical length %d, longest critical length %d",
        graph.n,
        scc.num_components,
        shortest.critical_path_length,
        longest.critical_path_length,
    )
    log_counters(logger, "analysis", counters)
    return AnalysisResult(
        graph=graph,
        source=start,
        scc=scc,
        topo=topo,
        shortest=shortest,
        longest=longest,
        order_valid=order_valid,
    )
