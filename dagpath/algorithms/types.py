"""Types and data structures for algorithm results.

Defines immutable result containers for the three pipeline stages and the
optional counters object callers pass in to observe algorithm work.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from dagpath.algorithms.base import PathMode
from dagpath.graph.model import Graph


@dataclass
class AlgorithmCounters:
    """Work counters filled in by the algorithms when supplied by the caller.

    One instance may be shared across several stages; each stage only adds to
    the counts. The algorithms never keep a reference after returning.

    Attributes:
        vertices_visited: Vertices discovered (SCC) or processed (paths).
        edges_relaxed: Edges examined during traversal or relaxation.
        stack_operations: Pushes and pops on the Tarjan vertex stack.
        queue_operations: Enqueues and dequeues in Kahn's queue.
        overflow_skips: Relaxations skipped because the sum left int64 range.
    """

    vertices_visited: int = 0
    edges_relaxed: int = 0
    stack_operations: int = 0
    queue_operations: int = 0
    overflow_skips: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class SCCResult:
    """Strongly connected component partition of a graph.

    Attributes:
        components: Vertex tuples in the order their roots closed, which is a
            reverse topological order of the condensation.
        component_id: ``component_id[v]`` is the index of the component
            containing vertex ``v``.
        condensation_graph: Directed graph over component indices with one
            edge per distinct crossing ``(a, b)`` pair.
    """

    components: Tuple[Tuple[int, ...], ...]
    component_id: Tuple[int, ...]
    condensation_graph: Graph

    @property
    def num_components(self) -> int:
        return len(self.components)

    def component_of(self, vertex: int) -> int:
        """Return the component index of ``vertex``.

        Raises:
            ValueError: If ``vertex`` is not a vertex of the graph.
        """
        if not 0 <= vertex < len(self.component_id):
            raise ValueError(f"Invalid vertex: {vertex}")
        return self.component_id[vertex]

    def component_sizes(self) -> List[int]:
        return [len(c) for c in self.components]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "components": [list(c) for c in self.components],
            "component_id": list(self.component_id),
            "condensation": self.condensation_graph.to_dict(),
        }


@dataclass(frozen=True)
class TopoResult:
    """Topological order of a condensation and the derived vertex order.

    Attributes:
        component_order: Condensation vertex ids, every edge pointing forward.
        vertex_order: Original vertices, component by component, each
            component's members ascending by id.
        has_cycle: True when Kahn's pass could not order every component.
    """

    component_order: Optional[Tuple[int, ...]]
    vertex_order: Optional[Tuple[int, ...]]
    has_cycle: bool

    def is_valid(self) -> bool:
        return (
            not self.has_cycle
            and self.component_order is not None
            and self.vertex_order is not None
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "component_order": (
                list(self.component_order)
                if self.component_order is not None
                else None
            ),
            "vertex_order": (
                list(self.vertex_order) if self.vertex_order is not None else None
            ),
            "has_cycle": self.has_cycle,
        }


@dataclass(frozen=True)
class PathResult:
    """Single-source distances in one relaxation mode.

    Attributes:
        distances: Distance per vertex; the mode's sentinel marks vertices
            that were never reached.
        predecessors: Predecessor per vertex, ``None`` for vertices no edge
            relaxation ever updated (always the case for unreachable ones).
        critical_path: Vertices from ``source`` to the reachable non-source
            vertex of maximum distance, or ``(source,)``.
        critical_path_length: Distance of the critical path's last vertex,
            0 when the path is just the source.
        source: Start vertex.
        is_shortest_path: True for shortest mode, False for longest mode.
    """

    distances: Tuple[int, ...]
    predecessors: Tuple[Optional[int], ...]
    critical_path: Tuple[int, ...]
    critical_path_length: int
    source: int
    is_shortest_path: bool

    @property
    def mode(self) -> PathMode:
        return PathMode.SHORTEST if self.is_shortest_path else PathMode.LONGEST

    def is_reachable(self, vertex: int) -> bool:
        return self.distances[vertex] != self.mode.sentinel

    def predecessor_map(self) -> Dict[int, int]:
        """Return the sparse ``vertex -> predecessor`` view."""
        return {v: p for v, p in enumerate(self.predecessors) if p is not None}

    def reconstruct_path(self, target: int) -> List[int]:
        """Return the recorded path from ``source`` to ``target``.

        See `dagpath.algorithms.paths.reconstruct_path`.
        """
        # Import here to avoid circular import
        from dagpath.algorithms.paths import reconstruct_path

        return reconstruct_path(self.predecessors, self.source, target)

    def to_dict(self) -> Dict[str, Any]:
        """Return JSON-safe primitives; sentinel distances become ``None``."""
        sentinel = self.mode.sentinel
        return {
            "mode": self.mode.value,
            "source": self.source,
            "distances": [None if d == sentinel else d for d in self.distances],
            "predecessors": list(self.predecessors),
            "critical_path": list(self.critical_path),
            "critical_path_length": self.critical_path_length,
        }
