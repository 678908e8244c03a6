"""Domain models used throughout the injector."""

from dataclasses import dataclass
from typing import Hashable, Optional

__all__ = ["TypeIdentity", "TypeDescriptor", "Node"]


TypeIdentity = Hashable
"""Type alias for the handle naming a component type.

Any hashable value will do; components discovered from packages are
identified by their class.
"""


@dataclass(frozen=True)
class TypeDescriptor:
    """Describes a component type and the types its constructor requires.

    Attributes:
        identity: The identity of the component type.
        parameters: Identities of the constructor parameters, in declaration order.
            Arguments are passed to the constructor in exactly this order.
    """

    identity: TypeIdentity
    parameters: tuple[TypeIdentity, ...] = ()

    def __post_init__(self):
        if isinstance(self.parameters, str):
            raise TypeError(
                f"Parameters of {self.identity!r} must be a sequence of identities, "
                f"not the string {self.parameters!r}"
            )
        object.__setattr__(self, "parameters", tuple(self.parameters))


class Node:
    """A vertex in the dependency graph.

    Nodes are created and linked by :class:`~tinyinjector.graph.DependencyGraph`;
    their edges are read-only to everyone else.

    Attributes:
        value: The identity this node stands for.
        neighbors: The nodes this node depends on, one entry per constructor parameter.
    """

    __slots__ = ("_value", "_neighbors")

    def __init__(self, value: TypeIdentity, neighbors: Optional[list["Node"]] = None):
        self._value = value
        self._neighbors = [] if neighbors is None else neighbors

    @property
    def value(self) -> TypeIdentity:
        return self._value

    @property
    def neighbors(self) -> tuple["Node", ...]:
        return tuple(self._neighbors)

    def __repr__(self):
        return f"Node({self._value!r}, {[n.value for n in self._neighbors]!r})"
