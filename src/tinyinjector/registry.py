"""Read-only access to the singletons produced by a scan."""

from types import MappingProxyType
from typing import Any, Iterator, Mapping

from tinyinjector.domain import TypeIdentity
from tinyinjector.errors import UnknownComponentError

__all__ = ["Registry"]


class Registry:
    """
    The singletons built by a successful scan, keyed by type identity.

    A registry is assembled in full before it is handed out and offers no way to
    change its contents afterwards, so it may be read from any number of threads.

    Example:
        >>> registry = make_registry([TypeDescriptor(Foo), TypeDescriptor(Bar, (Foo,))])
        >>> registry.retrieve(Bar).foo is registry[Foo]
        True
    """

    def __init__(self, instances: Mapping[TypeIdentity, Any]):
        self._instances = MappingProxyType(dict(instances))

    def retrieve(self, identity: TypeIdentity) -> Any:
        """Return the singleton for the given identity.

        Raises:
            UnknownComponentError: If no component with that identity was built.
        """
        try:
            return self._instances[identity]
        except KeyError:
            raise UnknownComponentError(identity) from None

    def __getitem__(self, identity: TypeIdentity) -> Any:
        return self.retrieve(identity)

    def __contains__(self, identity: TypeIdentity) -> bool:
        return identity in self._instances

    def __iter__(self) -> Iterator[TypeIdentity]:
        return iter(self._instances)

    def __len__(self) -> int:
        return len(self._instances)

    @property
    def identities(self) -> tuple[TypeIdentity, ...]:
        """The identities of all registered components, in construction order."""
        return tuple(self._instances)
