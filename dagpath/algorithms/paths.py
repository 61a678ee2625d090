"""Single-source shortest and longest paths over a topological vertex order.

Both modes relax edges in ``TopoResult.vertex_order`` and run in
``O(V + E)``. Distances are plain ints kept inside the signed 64-bit range:
a relaxation whose sum would reach either bound is skipped and the target
keeps its previous distance. Self-loops are never relaxed.

Notes:
    The critical path ends at the reachable vertex, other than the source,
    with the largest distance (lowest id on ties). Vertices still holding the
    mode's sentinel never qualify.

    Vertices of a cycle reachable from the source are relaxed once each in
    order, so longest mode may record a non-simple distance and a cyclic
    predecessor chain there. Such a critical path cannot be rebuilt and
    falls back to the source with length 0.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from dagpath.algorithms.base import PathMode, fits_distance
from dagpath.algorithms.types import AlgorithmCounters, PathResult, TopoResult
from dagpath.graph.model import Graph
from dagpath.logging import get_logger

logger = get_logger(__name__)


def reconstruct_path(
    predecessors: Sequence[Optional[int]], source: int, target: int
) -> List[int]:
    """Walk predecessors back from ``target`` to ``source``.

    Args:
        predecessors: ``predecessors[v]`` is the vertex ``v`` was last relaxed
            from, or None.
        source: Start vertex of the walk's result.
        target: End vertex of the walk's result.

    Returns:
        ``[source, ..., target]``, ``[source]`` when ``target == source``, or
        an empty list when ``target`` has no predecessor or the chain breaks
        before reaching ``source``.
    """
    if target == source:
        return [source]
    if not 0 <= target < len(predecessors) or predecessors[target] is None:
        return []

    path = [target]
    current = predecessors[target]
    # A chain longer than the vertex count cannot end at source
    for _ in range(len(predecessors)):
        if current is None:
            return []
        path.append(current)
        if current == source:
            path.reverse()
            return path
        current = predecessors[current]
    return []


def _check_preconditions(
    graph: Graph, topo_result: Optional[TopoResult], source: int
) -> None:
    if topo_result is None or not topo_result.is_valid():
        raise ValueError(
            "Invalid input: a valid, acyclic topological order is required"
        )
    if not graph.validate():
        raise ValueError(f"Invalid graph structure: {graph!r}")
    order = topo_result.vertex_order
    assert order is not None
    if len(order) != graph.n or set(order) != set(range(graph.n)):
        raise ValueError(
            f"Invalid input: vertex order of length {len(order)} is not a "
            f"permutation of the {graph.n} graph vertices"
        )
    if not 0 <= source < graph.n:
        raise ValueError(f"Source vertex {source} is out of range [0, {graph.n})")


def _critical_path(
    distances: Sequence[int],
    predecessors: Sequence[Optional[int]],
    source: int,
    mode: PathMode,
) -> Tuple[List[int], int]:
    sentinel = mode.sentinel
    best_vertex: Optional[int] = None
    best_distance = 0
    for vertex, distance in enumerate(distances):
        if vertex == source or distance == sentinel:
            continue
        if best_vertex is None or distance > best_distance:
            best_vertex = vertex
            best_distance = distance

    if best_vertex is None:
        return [source], 0

    path = reconstruct_path(predecessors, source, best_vertex)
    if not path:
        logger.debug(
            "Broken predecessor chain to vertex %d; critical path falls back to source",
            best_vertex,
        )
        return [source], 0
    return path, best_distance


def _relax(
    graph: Graph,
    topo_result: Optional[TopoResult],
    source: int,
    mode: PathMode,
    counters: Optional[AlgorithmCounters],
) -> PathResult:
    _check_preconditions(graph, topo_result, source)
    assert topo_result is not None and topo_result.vertex_order is not None

    sentinel = mode.sentinel
    distances = [sentinel] * graph.n
    predecessors: List[Optional[int]] = [None] * graph.n
    distances[source] = 0

    processed = 0
    relaxed = 0
    skipped = 0

    for u in topo_result.vertex_order:
        processed += 1
        du = distances[u]
        if du == sentinel:
            continue
        for edge in graph.outgoing_edges(u):
            relaxed += 1
            if edge.v == u:
                # Self-loops never lie on a simple path
                continue
            candidate = du + edge.w
            if not fits_distance(candidate):
                skipped += 1
                continue
            if mode.improves(candidate, distances[edge.v]):
                distances[edge.v] = candidate
                predecessors[edge.v] = u

    if skipped:
        logger.debug(
            "%s paths: skipped %d relaxations outside the int64 range",
            mode.value,
            skipped,
        )
    if counters is not None:
        counters.vertices_visited += processed
        counters.edges_relaxed += relaxed
        counters.overflow_skips += skipped

    critical_path, critical_length = _critical_path(
        distances, predecessors, source, mode
    )
    logger.debug(
        "%s paths from %d: critical path %s (length %d)",
        mode.value,
        source,
        critical_path,
        critical_length,
    )
    return PathResult(
        distances=tuple(distances),
        predecessors=tuple(predecessors),
        critical_path=tuple(critical_path),
        critical_path_length=critical_length,
        source=source,
        is_shortest_path=mode is PathMode.SHORTEST,
    )


def shortest_paths(
    graph: Graph,
    topo_result: Optional[TopoResult],
    source: int,
    counters: Optional[AlgorithmCounters] = None,
) -> PathResult:
    """Compute shortest distances from ``source``.

    Unreachable vertices keep ``UNREACHABLE``.

    Args:
        graph: Original graph.
        topo_result: Topological order of ``graph``'s condensation.
        source: Start vertex.
        counters: Optional work counters to add to.

    Returns:
        PathResult in shortest mode.

    Raises:
        ValueError: If ``topo_result`` is missing, not valid or does not
            cover every vertex of ``graph``, if ``graph`` fails
            ``validate()``, or if ``source`` is out of range.
    """
    return _relax(graph, topo_result, source, PathMode.SHORTEST, counters)


def longest_paths(
    graph: Graph,
    topo_result: Optional[TopoResult],
    source: int,
    counters: Optional[AlgorithmCounters] = None,
) -> PathResult:
    """Compute longest distances from ``source``.

    Unreached vertices keep ``UNBOUNDED``. Same arguments and errors as
    `shortest_paths`.
    """
    return _relax(graph, topo_result, source, PathMode.LONGEST, counters)


def compute_all_paths(
    graph: Graph,
    topo_result: Optional[TopoResult],
    source: int,
    counters: Optional[AlgorithmCounters] = None,
) -> Dict[str, PathResult]:
    """Run both modes; results are keyed ``"shortest"`` and ``"longest"``."""
    return {
        PathMode.SHORTEST.value: shortest_paths(graph, topo_result, source, counters),
        PathMode.LONGEST.value: longest_paths(graph, topo_result, source, counters),
    }
