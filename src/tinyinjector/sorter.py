"""Topological ordering of a dependency graph."""

import logging
from collections import deque

from tinyinjector.domain import Node, TypeIdentity
from tinyinjector.errors import CyclicDependencyError
from tinyinjector.graph import DependencyGraph

__all__ = ["sort"]

logger = logging.getLogger(__name__)


def sort(graph: DependencyGraph) -> list[TypeIdentity]:
    """
    Order the graph's identities so that every dependency precedes its dependents.

    Kahn's algorithm is run from the consumers inwards: indegree counts the
    dependents of a node, so the initial queue holds the nodes nothing depends on.
    Each time a node's last dependent has been processed, it is inserted at the
    head of the result, ahead of everything that depends on it.

    Args:
        graph: The dependency graph to order.

    Returns:
        The identities of all nodes in construction order.

    Raises:
        CyclicDependencyError: If some nodes could not be ordered because they
            take part in, or depend on, a cycle.
    """
    indegree: dict[Node, int] = {node: 0 for node in graph}
    for node in graph:
        for neighbor in node.neighbors:
            indegree[neighbor] += 1

    ordered: deque[TypeIdentity] = deque()
    ready: deque[Node] = deque()

    for node in graph:
        if indegree[node] == 0:
            ready.append(node)
            ordered.append(node.value)

    while ready:
        for neighbor in ready.popleft().neighbors:
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                ready.append(neighbor)
                ordered.appendleft(neighbor.value)

    if len(ordered) != len(graph):
        unresolved = [node.value for node in graph if indegree[node] > 0]
        raise CyclicDependencyError(unresolved)

    logger.debug("Construction order: %s", list(ordered))
    return list(ordered)
