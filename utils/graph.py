"""
Functions related to graphs
"""

from collections.abc import Iterable
from typing import Callable, TypeVar

T = TypeVar("T")


def collect_reachable(
    start: T,
    node_to_neighbours: Callable[[T], Iterable[T]],
    seen: set[T],
) -> frozenset[T]:
    """
    Collect every node reachable from `start` that is not already in `seen`.

    `seen` is updated in place so that successive calls partition the graph.
    The DFS frontier is an explicit stack, so arbitrarily large components
    never touch the recursion limit.
    """
    component: set[T] = set()
    stack: list[T] = [start]

    while stack:
        current = stack.pop()

        # Avoid cycles
        if current in seen:
            continue

        seen.add(current)
        component.add(current)
        stack.extend(n for n in node_to_neighbours(current) if n not in seen)

    return frozenset(component)


def nodes_to_connected_components(
    nodes: Iterable[T],
    node_to_neighbours: Callable[[T], Iterable[T]],
) -> tuple[frozenset[T], ...]:
    """
    Extract connected components from an undirected graph structure.

    Args:
        nodes: nodes of the graph, in the order components should be discovered.
        node_to_neighbours: Function returning the nodes a given node is linked to.

    Returns:
        tuple[frozenset[T], ...]: connected components of the graph,
        ordered by the position of their first node in `nodes`.
    """
    seen: set[T] = set()
    components: list[frozenset[T]] = []

    # Guarantees all the nodes are at least visited once
    for node in nodes:
        # Avoid visiting an already seen component
        if node in seen:
            continue

        components.append(collect_reachable(node, node_to_neighbours, seen))

    return tuple(components)
