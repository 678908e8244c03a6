"""Strategies for turning a component identity and its arguments into an instance."""

from typing import Any, Callable, Mapping

from tinyinjector.domain import TypeIdentity

__all__ = ["Construct", "instantiate", "factory_constructor"]


Construct = Callable[[TypeIdentity, tuple[Any, ...]], Any]
"""Type alias for a construction strategy.

Called with a component identity and its constructor arguments, ordered as the
component's descriptor declares its parameters. Returns the new instance, or raises.
"""


def instantiate(identity: TypeIdentity, arguments: tuple[Any, ...]) -> Any:
    """Construct a component by calling its class with positional arguments."""
    return identity(*arguments)


def factory_constructor(factories: Mapping[TypeIdentity, Callable[..., Any]]) -> Construct:
    """Create a construction strategy that delegates to one factory per identity.

    Args:
        factories: Mapping of component identities to callables building them. Each
            factory receives the component's dependencies as positional arguments.

    Returns:
        A strategy suitable for :class:`~tinyinjector.engine.InstantiationEngine`.

    Example:
        >>> construct = factory_constructor({
        ...     Database: lambda: Database("sqlite://"),
        ...     Service: Service,
        ... })
    """

    def construct(identity: TypeIdentity, arguments: tuple[Any, ...]) -> Any:
        try:
            factory = factories[identity]
        except KeyError:
            raise LookupError(f"No factory registered for {identity}") from None
        return factory(*arguments)

    return construct
