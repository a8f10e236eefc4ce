"""Topological sorting strategies and the component-aware task order.

Two interchangeable strategies implement :class:`TopologicalSorter`:

- :class:`KahnSorter`: in-degree elimination with a FIFO queue.
- :class:`DFSSorter`: reversed DFS postorder with back-edge detection.

Both return a :class:`TopoResult`; ``is_dag`` is reliable for both.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Deque, List, Optional

from depgraph.graph.model import Graph
from depgraph.logging import get_logger
from depgraph.metrics import Metrics

if TYPE_CHECKING:
    from depgraph.algorithms.condensation import CondensationGraph

logger = get_logger(__name__)


class SortAlg(IntEnum):
    """Available topological sort strategies."""

    KAHN = 1
    DFS = 2


@dataclass
class TopoResult:
    """Outcome of a topological sort.

    Attributes:
        order: Vertex ids in topological order. For Kahn's strategy on a cyclic
            graph, vertices on or behind a cycle are omitted.
        is_dag: True if the graph has no directed cycle.
        metrics: Operation count and timing of the run.
    """

    order: List[int] = field(default_factory=list)
    is_dag: bool = True
    metrics: Metrics = field(default_factory=Metrics)


class TopologicalSorter(ABC):
    """Strategy interface: ``sort(graph) -> TopoResult``."""

    alg: SortAlg

    @abstractmethod
    def sort(self, graph: Graph) -> TopoResult:
        """Order the vertices of ``graph`` consistently with all its arcs."""


class KahnSorter(TopologicalSorter):
    """
    Kahn's algorithm.

    The queue is seeded with zero in-degree vertices in ascending id order;
    afterwards vertices are emitted in the order they reach in-degree zero.
    The graph is a DAG iff every vertex gets emitted.
    """

    alg = SortAlg.KAHN

    def sort(self, graph: Graph) -> TopoResult:
        n = graph.num_vertices
        metrics = Metrics()
        order: List[int] = []

        with metrics.timed():
            in_degree = [0] * n
            for _, dst, _ in graph.arcs():
                in_degree[dst] += 1
                metrics.increment()

            queue: Deque[int] = deque()
            for v in range(n):
                if in_degree[v] == 0:
                    queue.append(v)
                    metrics.increment()

            while queue:
                u = queue.popleft()
                order.append(u)
                metrics.increment()
                for edge in graph.edges_from(u):
                    in_degree[edge.destination] -= 1
                    metrics.increment()
                    if in_degree[edge.destination] == 0:
                        queue.append(edge.destination)

        is_dag = len(order) == n
        if not is_dag:
            logger.debug(f"Kahn sort: {n - len(order)} vertices left on cycles")
        return TopoResult(order=order, is_dag=is_dag, metrics=metrics)


_WHITE, _GRAY, _BLACK = 0, 1, 2


class DFSSorter(TopologicalSorter):
    """
    Reversed DFS postorder.

    Roots are tried in ascending id order. Every vertex appears in the
    order, even on cyclic input; an arc to a vertex still on the DFS work
    stack marks the graph as cyclic.
    """

    alg = SortAlg.DFS

    def sort(self, graph: Graph) -> TopoResult:
        n = graph.num_vertices
        metrics = Metrics()
        state = [_WHITE] * n
        postorder: List[int] = []
        has_cycle = False

        with metrics.timed():
            for root in range(n):
                if state[root] != _WHITE:
                    continue
                state[root] = _GRAY
                metrics.increment()
                work: List[List[int]] = [[root, 0]]

                while work:
                    frame = work[-1]
                    u, edge_idx = frame
                    edges = graph.edges_from(u)
                    if edge_idx < len(edges):
                        frame[1] = edge_idx + 1
                        v = edges[edge_idx].destination
                        metrics.increment()
                        if state[v] == _WHITE:
                            state[v] = _GRAY
                            metrics.increment()
                            work.append([v, 0])
                        elif state[v] == _GRAY:
                            has_cycle = True
                        continue
                    work.pop()
                    state[u] = _BLACK
                    postorder.append(u)

        postorder.reverse()
        return TopoResult(order=postorder, is_dag=not has_cycle, metrics=metrics)


def sorter_for(alg: SortAlg) -> TopologicalSorter:
    """Return a sorter instance for the given strategy."""
    if alg == SortAlg.KAHN:
        return KahnSorter()
    if alg == SortAlg.DFS:
        return DFSSorter()
    raise ValueError(f"Unsupported sort algorithm: {alg}")


@dataclass
class ComponentTopoResult:
    """Component order plus the derived order of original vertices.

    Attributes:
        component_order: Component ids in topological order.
        task_order: Original vertex ids, component by component, ascending
            within each component.
        is_dag: Whether the condensation graph is acyclic.
        metrics: Operation count and timing of the component sort.
    """

    component_order: List[int] = field(default_factory=list)
    task_order: List[int] = field(default_factory=list)
    is_dag: bool = True
    metrics: Metrics = field(default_factory=Metrics)


def sort_components(
    condensation: CondensationGraph,
    sorter: Optional[TopologicalSorter] = None,
) -> ComponentTopoResult:
    """
    Topologically sort a condensation and expand it into a task order.

    Cyclic clusters are treated as atomic units: each component contributes
    its member vertices as one contiguous block.

    Args:
        condensation: Condensation of the original graph.
        sorter: Strategy to use (default: :class:`KahnSorter`).

    Returns:
        ComponentTopoResult with both orders.
    """
    sorter = sorter or KahnSorter()
    metrics = Metrics()
    task_order: List[int] = []

    with metrics.timed():
        topo = sorter.sort(condensation.graph)
        metrics.merge(topo.metrics)
        for comp_id in topo.order:
            task_order.extend(condensation.members(comp_id))

    logger.debug(
        f"Component sort ({sorter.alg.name}): {len(topo.order)} components, "
        f"{len(task_order)} tasks, is_dag={topo.is_dag}"
    )
    return ComponentTopoResult(
        component_order=topo.order,
        task_order=task_order,
        is_dag=topo.is_dag,
        metrics=metrics,
    )
