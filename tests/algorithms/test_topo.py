import logging
import random

import networkx as nx
import pytest

from dagpath.algorithms.scc import find_components
from dagpath.algorithms.topo import (
    derive_vertex_order,
    order_from_scc,
    topological_order,
    validate_component_order,
    validate_vertex_order,
)
from dagpath.algorithms.types import AlgorithmCounters, SCCResult, TopoResult
from dagpath.graph.model import Edge, Graph


def _sort(graph):
    scc = find_components(graph)
    return scc, topological_order(scc.condensation_graph, scc)


class TestTopologicalOrder:
    def test_chain(self, chain):
        scc, topo = _sort(chain)
        assert topo.component_order == (2, 1, 0)
        assert topo.vertex_order == (0, 1, 2)
        assert not topo.has_cycle
        assert topo.is_valid()

    def test_diamond(self, diamond):
        scc, topo = _sort(diamond)
        assert topo.vertex_order == (0, 1, 2, 3)
        assert validate_component_order(scc.condensation_graph, topo.component_order)

    def test_cycle_members_ascending(self, cycle_and_chain):
        scc, topo = _sort(cycle_and_chain)
        assert topo.component_order == (0, 1, 5, 4, 3, 2)
        assert topo.vertex_order == (0, 1, 2, 3, 4, 5, 6, 7)

    def test_single_vertex(self, single_vertex):
        _, topo = _sort(single_vertex)
        assert topo.component_order == (0,)
        assert topo.vertex_order == (0,)

    def test_empty_graph(self, empty_graph):
        _, topo = _sort(empty_graph)
        assert topo.component_order == ()
        assert topo.vertex_order == ()
        assert topo.is_valid()

    def test_order_from_scc(self, two_cycles_linked):
        scc = find_components(two_cycles_linked)
        topo = order_from_scc(scc)
        assert topo.vertex_order == (0, 1, 2, 3, 4, 5)
        assert validate_vertex_order(two_cycles_linked, topo.vertex_order, scc)

    def test_pure_dag_has_singletons(self):
        n = 12
        edges = [Edge(u, v, 1) for u in range(n) for v in range(u + 1, n) if (u + v) % 3 == 0]
        graph = Graph(directed=True, n=n, edges=edges)
        scc, topo = _sort(graph)
        assert all(len(c) == 1 for c in scc.components)
        assert len(topo.vertex_order) == n

    def test_cyclic_condensation_sets_flag(self):
        # A broken partition whose "condensation" contains a cycle
        scc = SCCResult(
            components=((0,), (1,)),
            component_id=(0, 1),
            condensation_graph=Graph(
                directed=True, n=2, edges=[Edge(0, 1, 1), Edge(1, 0, 1)]
            ),
        )
        topo = topological_order(scc.condensation_graph, scc)
        assert topo.has_cycle
        assert not topo.is_valid()
        assert topo.component_order == ()

    def test_counters(self, chain):
        scc = find_components(chain)
        counters = AlgorithmCounters()
        topological_order(scc.condensation_graph, scc, counters)
        # Three enqueues and three dequeues
        assert counters.queue_operations == 6

    @pytest.mark.parametrize("seed", range(6))
    def test_random_graphs(self, seed):
        rng = random.Random(seed)
        g = nx.gnp_random_graph(35, 0.07, seed=seed, directed=True)
        graph = Graph(
            directed=True,
            n=35,
            edges=[Edge(u, v, rng.randint(0, 9)) for u, v in g.edges()],
        )
        scc, topo = _sort(graph)
        assert not topo.has_cycle
        assert sorted(topo.vertex_order) == list(range(35))
        assert validate_component_order(scc.condensation_graph, topo.component_order)
        assert validate_vertex_order(graph, topo.vertex_order, scc)


class TestTopoResult:
    def test_missing_orders_are_invalid(self):
        assert not TopoResult(None, (0,), False).is_valid()
        assert not TopoResult((0,), None, False).is_valid()
        assert TopoResult((0,), (0,), False).is_valid()

    def test_to_dict(self):
        assert TopoResult((1, 0), (2, 0, 1), False).to_dict() == {
            "component_order": [1, 0],
            "vertex_order": [2, 0, 1],
            "has_cycle": False,
        }


class TestValidators:
    def test_reversed_vertex_order_fails(self, chain, caplog):
        scc = find_components(chain)
        with caplog.at_level(logging.WARNING, logger="dagpath"):
            assert not validate_vertex_order(chain, [2, 1, 0], scc)
        assert "Order violation" in caplog.text

    def test_intra_component_edges_are_exempt(self, cycle_and_chain):
        scc = find_components(cycle_and_chain)
        # Any permutation of the cycle members is acceptable
        assert validate_vertex_order(
            cycle_and_chain, [0, 3, 1, 2, 4, 5, 6, 7], scc
        )

    def test_missing_vertex_fails(self, chain):
        scc = find_components(chain)
        assert not validate_vertex_order(chain, [0, 1], scc)

    def test_component_order_violation(self, chain, caplog):
        scc = find_components(chain)
        with caplog.at_level(logging.WARNING, logger="dagpath"):
            assert not validate_component_order(scc.condensation_graph, [0, 1, 2])
        assert "Component order violation" in caplog.text

    def test_derive_vertex_order_sorts_members(self):
        scc = SCCResult(
            components=((3, 1, 2), (0,)),
            component_id=(1, 0, 0, 0),
            condensation_graph=Graph(directed=True, n=2, edges=[Edge(1, 0, 1)]),
        )
        assert derive_vertex_order([1, 0], scc) == [0, 1, 2, 3]
