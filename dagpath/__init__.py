"""dagpath: SCC decomposition, topological order and DAG path analysis.

dagpath analyzes a finite directed, integer-weighted graph in three linked
stages: Tarjan strongly connected components, Kahn topological ordering of
the condensation, and single-source shortest/longest path relaxation over the
resulting vertex order, including critical-path extraction.

Primary API:
    analyze() - Run the whole pipeline on a validated Graph
    Graph, Edge - Integer-indexed graph model
    find_components(), topological_order(), shortest_paths(), longest_paths()
    load_graph() - Read a graph record from JSON/YAML
    from_networkx() / to_networkx() - NetworkX interoperability

Example:
    from dagpath import Edge, Graph, analyze

    graph = Graph(directed=True, n=3, edges=[Edge(0, 1, 5), Edge(1, 2, 3)])
    result = analyze(graph)
    result.longest.critical_path  # (0, 1, 2)
"""

from __future__ import annotations

from dagpath import cli, logging
from dagpath.algorithms.base import UNBOUNDED, UNREACHABLE, PathMode
from dagpath.algorithms.paths import (
    compute_all_paths,
    longest_paths,
    reconstruct_path,
    shortest_paths,
)
from dagpath.algorithms.scc import find_components
from dagpath.algorithms.topo import (
    order_from_scc,
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
from dagpath.analysis import AnalysisResult, analyze
from dagpath.config import ANALYSIS_CONFIG, AnalysisConfig
from dagpath.graph.convert import NodeMap, from_networkx, to_networkx
from dagpath.graph.io import graph_from_dict, load_graph, save_graph
from dagpath.graph.model import Edge, Graph

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Edge",
    "Graph",
    # Pipeline
    "analyze",
    "AnalysisResult",
    # Algorithms
    "find_components",
    "topological_order",
    "order_from_scc",
    "validate_vertex_order",
    "validate_component_order",
    "shortest_paths",
    "longest_paths",
    "compute_all_paths",
    "reconstruct_path",
    # Types
    "SCCResult",
    "TopoResult",
    "PathResult",
    "AlgorithmCounters",
    "PathMode",
    "UNREACHABLE",
    "UNBOUNDED",
    # Config
    "AnalysisConfig",
    "ANALYSIS_CONFIG",
    # I/O and NetworkX
    "graph_from_dict",
    "load_graph",
    "save_graph",
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
