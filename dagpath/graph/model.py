"""Integer-indexed weighted graph with a cached adjacency index.

`Graph` holds vertices ``0..n-1``, an ordered edge tuple, a designated source
vertex and an opaque weight-model tag. The outgoing adjacency index is built
lazily on first use and rebuilt whenever the edge list is replaced. For
undirected graphs each edge is mirrored into the reverse direction when the
index is built; the edge list itself is never mirrored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed weighted edge ``u -> v`` with integer weight ``w``.

    Self-loops (``u == v``) and parallel edges are legal.
    """

    u: int
    v: int
    w: int

    def __post_init__(self) -> None:
        for name in ("u", "v", "w"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"Edge.{name} must be an int, got {type(value).__name__}"
                )

    def reversed(self) -> Edge:
        """Return the mirrored edge ``v -> u`` with the same weight."""
        return Edge(self.v, self.u, self.w)

    def __repr__(self) -> str:
        return f"Edge({self.u} -> {self.v}, w={self.w})"


class Graph:
    """Finite integer-weighted graph over vertices ``0..n-1``.

    The graph is treated as immutable once handed to an algorithm. Replacing
    ``edges`` invalidates the adjacency index; callers must not do so while
    another reader is running an algorithm over the same instance.

    Attributes:
        directed: False means every edge is mirrored in the adjacency index.
        n: Number of vertices.
        source: Designated start vertex.
        weight_model: Opaque tag carried through unchanged.
    """

    def __init__(
        self,
        directed: bool,
        n: int,
        edges: Optional[Iterable[Edge]] = None,
        source: int = 0,
        weight_model: Optional[str] = None,
    ) -> None:
        """Initialize a Graph.

        Args:
            directed: Whether edges are one-way.
            n: Vertex count.
            edges: Edges in insertion order. ``(u, v, w)`` triples are
                converted to `Edge`.
            source: Start vertex for path analysis.
            weight_model: Opaque weight-model tag.

        Raises:
            TypeError: If ``n`` or ``source`` is not an int, or an edge
                cannot be converted.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"n must be an int, got {type(n).__name__}")
        if isinstance(source, bool) or not isinstance(source, int):
            raise TypeError(f"source must be an int, got {type(source).__name__}")
        self.directed = bool(directed)
        self.n = n
        self.source = source
        self.weight_model = weight_model
        self._edges: Tuple[Edge, ...] = ()
        self._adjacency: Optional[Tuple[Tuple[Edge, ...], ...]] = None
        self.edges = edges if edges is not None else ()

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Edges in insertion order."""
        return self._edges

    @edges.setter
    def edges(self, edges: Iterable[Edge]) -> None:
        self._edges = tuple(
            e if isinstance(e, Edge) else Edge(*e) for e in edges
        )
        self._adjacency = None

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def validate(self) -> bool:
        """Return True if the graph can be handed to the algorithms.

        A graph is valid when ``n > 0``, ``0 <= source < n`` and every edge
        endpoint lies in ``[0, n)``.
        """
        if self.n <= 0:
            return False
        if not 0 <= self.source < self.n:
            return False
        for edge in self._edges:
            if not (0 <= edge.u < self.n and 0 <= edge.v < self.n):
                return False
        return True

    def build_adjacency(self) -> None:
        """Rebuild the outgoing adjacency index from the edge list.

        Edges with an endpoint outside ``[0, n)`` are left out of the index.
        """
        n = max(self.n, 0)
        out: List[List[Edge]] = [[] for _ in range(n)]
        for edge in self._edges:
            if not (0 <= edge.u < n and 0 <= edge.v < n):
                continue
            out[edge.u].append(edge)
            if not self.directed:
                out[edge.v].append(edge.reversed())
        self._adjacency = tuple(tuple(bucket) for bucket in out)

    def adjacency(self) -> Tuple[Tuple[Edge, ...], ...]:
        """Return the outgoing edges of every vertex, indexed by vertex id."""
        if self._adjacency is None:
            self.build_adjacency()
        assert self._adjacency is not None
        return self._adjacency

    def outgoing_edges(self, vertex: int) -> Tuple[Edge, ...]:
        """Return the edges leaving ``vertex``.

        Vertices outside ``[0, n)`` have no outgoing edges.
        """
        adjacency = self.adjacency()
        if 0 <= vertex < len(adjacency):
            return adjacency[vertex]
        return ()

    def to_dict(self) -> Dict[str, Any]:
        """Return the persisted-record form of the graph."""
        return {
            "directed": self.directed,
            "n": self.n,
            "edges": [{"u": e.u, "v": e.v, "w": e.w} for e in self._edges],
            "source": self.source,
            "weight_model": self.weight_model,
        }

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self.directed}, n={self.n}, "
            f"edges={len(self._edges)}, source={self.source}, "
            f"weight_model={self.weight_model!r})"
        )
