"""Strongly connected components (Tarjan) and condensation construction.

The depth-first search runs on an explicit work-stack of
``(vertex, edge_cursor)`` frames, so traversal depth is bounded by memory
rather than by the interpreter recursion limit. The low-link rule and the
component-closing condition are those of the recursive formulation:

- a tree edge ``v -> w`` lowers ``low[v]`` to ``low[w]`` once ``w``'s frame
  finishes;
- an edge to a vertex ``w`` still on the Tarjan stack lowers ``low[v]`` to
  ``index[w]``;
- ``v`` closes a component when ``low[v] == index[v]``.

Components are emitted in the order their roots close, which is a reverse
topological order of the condensation graph.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Set, Tuple

from dagpath.algorithms.base import UNVISITED
from dagpath.algorithms.types import AlgorithmCounters, SCCResult
from dagpath.graph.model import Edge, Graph
from dagpath.logging import get_logger

logger = get_logger(__name__)


def _tarjan(
    graph: Graph, counters: Optional[AlgorithmCounters] = None
) -> List[Tuple[int, ...]]:
    """Return the strongly connected components of ``graph``."""
    n = max(graph.n, 0)
    adjacency = graph.adjacency()

    index = [UNVISITED] * n
    low = [UNVISITED] * n
    on_stack = [False] * n
    stack: List[int] = []
    components: List[Tuple[int, ...]] = []
    next_index = 0

    visited = 0
    edges_seen = 0
    stack_ops = 0

    for root in range(n):
        if index[root] != UNVISITED:
            continue

        index[root] = low[root] = next_index
        next_index += 1
        stack.append(root)
        on_stack[root] = True
        visited += 1
        stack_ops += 1
        work: List[Tuple[int, int]] = [(root, 0)]

        while work:
            v, cursor = work[-1]
            out_edges = adjacency[v]

            if cursor < len(out_edges):
                work[-1] = (v, cursor + 1)
                w = out_edges[cursor].v
                edges_seen += 1
                if index[w] == UNVISITED:
                    index[w] = low[w] = next_index
                    next_index += 1
                    stack.append(w)
                    on_stack[w] = True
                    visited += 1
                    stack_ops += 1
                    work.append((w, 0))
                elif on_stack[w]:
                    low[v] = min(low[v], index[w])
                continue

            # All edges of v explored
            work.pop()
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[v])

            if low[v] == index[v]:
                component: List[int] = []
                while True:
                    w = stack.pop()
                    on_stack[w] = False
                    stack_ops += 1
                    component.append(w)
                    if w == v:
                        break
                components.append(tuple(component))

    if counters is not None:
        counters.vertices_visited += visited
        counters.edges_relaxed += edges_seen
        counters.stack_operations += stack_ops
    return components


def build_component_ids(
    components: Sequence[Sequence[int]], n: int
) -> Tuple[int, ...]:
    """Map every vertex to the index of its component."""
    component_id = [UNVISITED] * n
    for comp_idx, members in enumerate(components):
        for vertex in members:
            component_id[vertex] = comp_idx
    return tuple(component_id)


def build_condensation(
    graph: Graph,
    components: Sequence[Sequence[int]],
    component_id: Sequence[int],
) -> Graph:
    """Collapse each component of ``graph`` into a single vertex.

    One scan over the original edge list keeps every edge whose endpoints
    lie in different components. Repeated ``(a, b)`` pairs collapse to the
    first one seen, so only the first crossing edge's weight survives.
    """
    seen: Set[Tuple[int, int]] = set()
    condensed: List[Edge] = []
    for edge in graph.edges:
        a = component_id[edge.u]
        b = component_id[edge.v]
        if a == b or (a, b) in seen:
            continue
        seen.add((a, b))
        condensed.append(Edge(a, b, edge.w))

    source = component_id[graph.source] if 0 <= graph.source < len(component_id) else 0
    return Graph(
        directed=True,
        n=len(components),
        edges=condensed,
        source=source,
        weight_model=graph.weight_model,
    )


def find_components(
    graph: Graph, counters: Optional[AlgorithmCounters] = None
) -> SCCResult:
    """Decompose ``graph`` into strongly connected components.

    Total over any graph whose edges lie in ``[0, n)``, including the empty
    graph (zero components, zero-vertex condensation). Isolated vertices
    become singleton components; self-loops and parallel edges do not affect
    the partition.

    Args:
        graph: Graph to decompose.
        counters: Optional work counters to add to.

    Returns:
        SCCResult with components, vertex-to-component map and condensation.
    """
    components = _tarjan(graph, counters)
    component_id = build_component_ids(components, max(graph.n, 0))
    condensation = build_condensation(graph, components, component_id)

    logger.debug(
        "SCC: %d vertices -> %d components, condensation has %d edges",
        graph.n,
        len(components),
        condensation.num_edges,
    )
    return SCCResult(
        components=tuple(components),
        component_id=component_id,
        condensation_graph=condensation,
    )
