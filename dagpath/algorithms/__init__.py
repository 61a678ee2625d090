"""Graph algorithms: SCC decomposition, topological order and DAG paths."""

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

__all__ = [
    "UNBOUNDED",
    "UNREACHABLE",
    "PathMode",
    "AlgorithmCounters",
    "SCCResult",
    "TopoResult",
    "PathResult",
    "find_components",
    "topological_order",
    "order_from_scc",
    "validate_vertex_order",
    "validate_component_order",
    "shortest_paths",
    "longest_paths",
    "compute_all_paths",
    "reconstruct_path",
]
