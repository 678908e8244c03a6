"""Construction of the dependency graph from component descriptors."""

import logging
from typing import Iterable, Iterator

from tinyinjector.domain import Node, TypeDescriptor, TypeIdentity
from tinyinjector.errors import DuplicateComponentError

__all__ = ["DependencyGraph", "build_graph"]

logger = logging.getLogger(__name__)


class DependencyGraph:
    """
    Directed graph of component dependencies, with one node per type identity.

    An edge from a node to one of its neighbors means "depends on". Nodes are kept
    in the order their identities were first encountered, which fixes tie-breaking
    when the graph is sorted. A graph is populated only by :meth:`build` and cannot
    be changed afterwards.
    """

    def __init__(self):
        self._nodes: dict[TypeIdentity, Node] = {}
        self._neighbors: dict[TypeIdentity, list[Node]] = {}

    @classmethod
    def build(cls, descriptors: Iterable[TypeDescriptor]) -> "DependencyGraph":
        """
        Build a dependency graph from a sequence of component descriptors.

        Every parameter type gets a node, even if no descriptor for it was supplied.
        Such nodes have no neighbors of their own; they are caught later, when a
        component that needs them is constructed.

        Args:
            descriptors: The discovered component descriptors.

        Returns:
            The dependency graph.

        Raises:
            DuplicateComponentError: If two descriptors share an identity.
        """
        graph = cls()
        described: set[TypeIdentity] = set()

        for descriptor in descriptors:
            if descriptor.identity in described:
                raise DuplicateComponentError(descriptor.identity)
            described.add(descriptor.identity)
            graph._add_dependencies(descriptor.identity, descriptor.parameters)

        graph._neighbors = {}
        logger.debug(
            "Built dependency graph with %d nodes for %d components",
            len(graph),
            len(described),
        )
        return graph

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __contains__(self, identity: TypeIdentity) -> bool:
        return identity in self._nodes

    def node(self, identity: TypeIdentity) -> Node:
        return self._nodes[identity]

    def dependencies_of(self, identity: TypeIdentity) -> tuple[TypeIdentity, ...]:
        """Return the identities the given node depends on, in parameter order."""
        return tuple(neighbor.value for neighbor in self._nodes[identity].neighbors)

    def _add_dependencies(
        self, dependent: TypeIdentity, dependencies: Iterable[TypeIdentity]
    ):
        self._get_or_create(dependent)
        self._neighbors[dependent].extend(
            self._get_or_create(dependency) for dependency in dependencies
        )

    def _get_or_create(self, identity: TypeIdentity) -> Node:
        node = self._nodes.get(identity)
        if node is None:
            neighbors = self._neighbors[identity] = []
            node = self._nodes[identity] = Node(identity, neighbors)
        return node


def build_graph(descriptors: Iterable[TypeDescriptor]) -> DependencyGraph:
    """Build a dependency graph; see :meth:`DependencyGraph.build`."""
    return DependencyGraph.build(descriptors)
