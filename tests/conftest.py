"""Shared graph fixtures.

Small hand-built graphs covering the reference scenarios, plus a factory for
seeded random graphs used by the property tests.
"""

from __future__ import annotations

import random
from typing import Callable

import pytest

from depgraph.graph.model import Graph


@pytest.fixture
def diamond_dag() -> Graph:
    #       [5]      [2]
    #   ┌────────►1────────┐
    #   │                  ▼
    #   0                  3
    #   │                  ▲
    #   │   [3]      [7]   │
    #   └────────►2────────┘
    g = Graph(4, directed=True)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 2, 3)
    g.add_edge(1, 3, 2)
    g.add_edge(2, 3, 7)
    return g


@pytest.fixture
def cycle_with_tail() -> Graph:
    # 0 -> 1 -> 2 -> 0 cycle, then 2 -[4]-> 3 -[6]-> 4
    g = Graph(5, directed=True)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 0, 1)
    g.add_edge(2, 3, 4)
    g.add_edge(3, 4, 6)
    return g


@pytest.fixture
def pure_cycle() -> Graph:
    g = Graph(3, directed=True)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 0, 1)
    return g


@pytest.fixture
def schedule_dag() -> Graph:
    #       [3]      [4]
    #   ┌────────►1────────┐
    #   │                  ▼    [2]
    #   0                  3────────►4
    #   │                  ▲
    #   │   [2]      [1]   │
    #   └────────►2────────┘
    g = Graph(5, directed=True)
    g.add_edge(0, 1, 3)
    g.add_edge(0, 2, 2)
    g.add_edge(1, 3, 4)
    g.add_edge(2, 3, 1)
    g.add_edge(3, 4, 2)
    return g


@pytest.fixture
def two_cycles() -> Graph:
    # 0 <-> 1 and 2 <-> 3, no link between the pairs
    g = Graph(4, directed=True)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 0, 1)
    g.add_edge(2, 3, 1)
    g.add_edge(3, 2, 1)
    return g


@pytest.fixture
def make_random_graph() -> Callable[..., Graph]:
    """Return ``make(seed, n, density)`` building a reproducible random digraph.

    Graphs may contain self-loops and parallel arcs.
    """

    def _make(seed: int, n: int, density: float = 0.2) -> Graph:
        rng = random.Random(seed)
        g = Graph(n, directed=True)
        for u in range(n):
            for v in range(n):
                if rng.random() < density:
                    g.add_edge(u, v, rng.randint(1, 9))
        # a few parallel arcs with different weights
        for _ in range(n // 3):
            u, v = rng.randrange(n), rng.randrange(n)
            g.add_edge(u, v, rng.randint(1, 9))
        return g

    return _make
