"""Topological ordering of a condensation graph (Kahn) and order validators.

Components are ordered with a FIFO queue seeded with every zero in-degree
component in ascending id order. The vertex order is derived from the
component order by listing each component's members ascending by id: edges
inside a component may form cycles, so the graph itself does not determine
an order there and the ascending id order is the fixed convention.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence

from dagpath.algorithms.types import AlgorithmCounters, SCCResult, TopoResult
from dagpath.graph.model import Graph
from dagpath.logging import get_logger

logger = get_logger(__name__)


def derive_vertex_order(
    component_order: Sequence[int], scc_result: SCCResult
) -> List[int]:
    """Expand a component order into an order over the original vertices."""
    vertex_order: List[int] = []
    for comp_idx in component_order:
        vertex_order.extend(sorted(scc_result.components[comp_idx]))
    return vertex_order


def topological_order(
    condensation: Graph,
    scc_result: SCCResult,
    counters: Optional[AlgorithmCounters] = None,
) -> TopoResult:
    """Order the components of ``condensation`` topologically.

    ``has_cycle`` is set when fewer components were dequeued than exist. A
    correct SCC result never produces a cyclic condensation; the flag reports
    that internal inconsistency instead of raising.

    Args:
        condensation: Condensation graph, vertices are component ids.
        scc_result: Partition the condensation was built from.
        counters: Optional work counters to add to.

    Returns:
        TopoResult with component and vertex orders.
    """
    n = max(condensation.n, 0)
    successors: List[List[int]] = [[] for _ in range(n)]
    in_degree = [0] * n
    for edge in condensation.edges:
        successors[edge.u].append(edge.v)
        in_degree[edge.v] += 1

    queue = deque(c for c in range(n) if in_degree[c] == 0)
    queue_ops = len(queue)
    component_order: List[int] = []

    while queue:
        c = queue.popleft()
        queue_ops += 1
        component_order.append(c)
        for succ in successors[c]:
            in_degree[succ] -= 1
            if in_degree[succ] == 0:
                queue.append(succ)
                queue_ops += 1

    has_cycle = len(component_order) < n
    if has_cycle:
        logger.warning(
            "Condensation is not acyclic: ordered %d of %d components",
            len(component_order),
            n,
        )

    vertex_order = derive_vertex_order(component_order, scc_result)

    if counters is not None:
        counters.queue_operations += queue_ops
        counters.edges_relaxed += condensation.num_edges

    logger.debug(
        "Topological order: %d components, %d vertices",
        len(component_order),
        len(vertex_order),
    )
    return TopoResult(
        component_order=tuple(component_order),
        vertex_order=tuple(vertex_order),
        has_cycle=has_cycle,
    )


def order_from_scc(
    scc_result: SCCResult, counters: Optional[AlgorithmCounters] = None
) -> TopoResult:
    """Order ``scc_result``'s own condensation graph."""
    return topological_order(scc_result.condensation_graph, scc_result, counters)


def _positions(order: Sequence[int]) -> Dict[int, int]:
    return {item: pos for pos, item in enumerate(order)}


def validate_vertex_order(
    graph: Graph, vertex_order: Sequence[int], scc_result: SCCResult
) -> bool:
    """Check ``vertex_order`` against every edge crossing two components.

    Edges inside one component are exempt since no linear order can satisfy
    a cycle. A cross-component edge whose endpoint is missing from the order
    counts as a violation.

    Returns:
        True if every crossing edge points forward in the order.
    """
    position = _positions(vertex_order)
    for edge in graph.edges:
        comp_u = scc_result.component_of(edge.u)
        comp_v = scc_result.component_of(edge.v)
        if comp_u == comp_v:
            continue
        pos_u = position.get(edge.u)
        pos_v = position.get(edge.v)
        if pos_u is None or pos_v is None:
            logger.warning(
                "Order violation: edge %d -> %d has a vertex missing from the order",
                edge.u,
                edge.v,
            )
            return False
        if pos_u > pos_v:
            logger.warning(
                "Order violation: edge %d -> %d (components %d -> %d) "
                "but %d comes after %d",
                edge.u,
                edge.v,
                comp_u,
                comp_v,
                edge.u,
                edge.v,
            )
            return False
    return True


def validate_component_order(
    condensation: Graph, component_order: Sequence[int]
) -> bool:
    """Check ``component_order`` against every condensation edge.

    Returns:
        True if every condensation edge points forward in the order.
    """
    position = _positions(component_order)
    for edge in condensation.edges:
        pos_u = position.get(edge.u)
        pos_v = position.get(edge.v)
        if pos_u is None or pos_v is None or pos_u > pos_v:
            logger.warning(
                "Component order violation: edge %d -> %d", edge.u, edge.v
            )
            return False
    return True
