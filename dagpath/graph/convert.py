"""Graph conversion utilities between `Graph` and NetworkX graphs.

`to_networkx` exposes a `Graph` to NetworkX algorithms; `from_networkx` maps
an arbitrary NetworkX graph with hashable node names onto contiguous integer
vertex ids and returns the `NodeMap` needed to interpret results.

Example:
    >>> import networkx as nx
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=5)
    >>> G.add_edge("B", "C", weight=3)
    >>> graph, node_map = from_networkx(G, source="A")
    >>> node_map.to_name[graph.n - 1]
    'C'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx

from dagpath.graph.model import Edge, Graph


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer vertex ids.

    Attributes:
        to_index: Maps original node names to vertex ids.
        to_name: Maps vertex ids back to original node names.
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in vertex-id order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, vertices: List[int]) -> List[Hashable]:
        """Translate a vertex sequence (e.g. a path) back to node names."""
        return [self.to_name[v] for v in vertices]

    def __len__(self) -> int:
        return len(self.to_index)


def to_networkx(graph: Graph, weight_attr: str = "weight") -> nx.MultiDiGraph:
    """Convert a `Graph` to a NetworkX MultiDiGraph.

    Nodes are ``0..n-1``; parallel edges are kept. For an undirected `Graph`
    each edge is added in both directions, matching the adjacency index.

    Args:
        graph: Graph to convert.
        weight_attr: Edge attribute name receiving the weight.

    Returns:
        MultiDiGraph with graph attributes ``source`` and ``weight_model``.
    """
    nx_graph = nx.MultiDiGraph(source=graph.source, weight_model=graph.weight_model)
    nx_graph.add_nodes_from(range(max(graph.n, 0)))
    for edge in graph.edges:
        nx_graph.add_edge(edge.u, edge.v, **{weight_attr: edge.w})
        if not graph.directed and edge.u != edge.v:
            nx_graph.add_edge(edge.v, edge.u, **{weight_attr: edge.w})
    return nx_graph


def from_networkx(
    G: Any,
    source: Hashable,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
    weight_model: Optional[str] = None,
) -> Tuple[Graph, NodeMap]:
    """Convert a NetworkX graph to a `Graph`.

    Node names are numbered in ``G.nodes`` iteration order. Undirected NetworkX
    graphs produce an undirected `Graph` whose edges are mirrored by the
    adjacency index.

    Args:
        G: NetworkX Graph, DiGraph, MultiGraph or MultiDiGraph.
        source: Name of the start node.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.
        weight_model: Opaque tag stored on the result.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        KeyError: If ``source`` is not a node of ``G``.
        TypeError: If an edge weight is not an int.
    """
    node_map = NodeMap.from_names(list(G.nodes))
    if source not in node_map.to_index:
        raise KeyError(f"Source node '{source}' is not in the graph.")

    edges: List[Edge] = []
    for u, v, data in G.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise TypeError(
                f"Edge ({u!r}, {v!r}) has non-integer {weight_attr}={weight!r}"
            )
        edges.append(Edge(node_map.to_index[u], node_map.to_index[v], weight))

    graph = Graph(
        directed=G.is_directed(),
        n=len(node_map),
        edges=edges,
        source=node_map.to_index[source],
        weight_model=weight_model,
    )
    return graph, node_map
