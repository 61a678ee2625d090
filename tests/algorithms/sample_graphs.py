import pytest

from dagpath.graph.model import Edge, Graph


@pytest.fixture
def chain():
    #    [5]    [3]
    #  0 ───► 1 ───► 2
    return Graph(
        directed=True,
        n=3,
        edges=[Edge(0, 1, 5), Edge(1, 2, 3)],
        source=0,
        weight_model="edge",
    )


@pytest.fixture
def diamond():
    #       [2]       [1]
    #   ┌───────► 1 ───────┐
    #   │                  ▼
    #   0                  3
    #   │                  ▲
    #   └───────► 2 ───────┘
    #       [5]       [2]
    return Graph(
        directed=True,
        n=4,
        edges=[Edge(0, 1, 2), Edge(0, 2, 5), Edge(1, 3, 1), Edge(2, 3, 2)],
        source=0,
        weight_model="edge",
    )


@pytest.fixture
def cycle_and_chain():
    # Isolated 0, cycle 1 -> 2 -> 3 -> 1, chain 4 -> 5 -> 6 -> 7
    return Graph(
        directed=True,
        n=8,
        edges=[
            Edge(1, 2, 1),
            Edge(2, 3, 1),
            Edge(3, 1, 1),
            Edge(4, 5, 2),
            Edge(5, 6, 2),
            Edge(6, 7, 2),
        ],
        source=4,
        weight_model="edge",
    )


@pytest.fixture
def single_vertex():
    return Graph(directed=True, n=1, edges=[], source=0)


@pytest.fixture
def empty_graph():
    return Graph(directed=True, n=0, edges=[], source=0)


@pytest.fixture
def loops_and_parallel():
    # Self-loop on 0, parallel edges 0 -> 1 and 1 -> 2
    return Graph(
        directed=True,
        n=3,
        edges=[
            Edge(0, 0, 4),
            Edge(0, 1, 3),
            Edge(0, 1, 1),
            Edge(1, 2, 2),
            Edge(1, 2, 7),
        ],
        source=0,
    )


@pytest.fixture
def negative_dag():
    #        [-3]
    #   0 ─────────► 1
    #   │            ▲
    #   │ [2]        │ [-10]
    #   └──► 2 ──────┘
    return Graph(
        directed=True,
        n=3,
        edges=[Edge(0, 1, -3), Edge(0, 2, 2), Edge(2, 1, -10)],
        source=0,
    )


@pytest.fixture
def two_cycles_linked():
    # Cycle {0, 1} feeds cycle {2, 3, 4}, which feeds sink 5.
    # Duplicate crossing edges 1 -> 2 and 0 -> 3 collapse in the condensation.
    return Graph(
        directed=True,
        n=6,
        edges=[
            Edge(0, 1, 1),
            Edge(1, 0, 1),
            Edge(1, 2, 4),
            Edge(0, 3, 9),
            Edge(2, 3, 1),
            Edge(3, 4, 1),
            Edge(4, 2, 1),
            Edge(4, 5, 3),
        ],
        source=0,
    )
