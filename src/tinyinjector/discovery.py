"""
Discovery of marked component classes beneath a package.

Classes opt in by carrying a marker, typically applied as a class decorator:

    >>> from tinyinjector.discovery import component
    >>>
    >>> @component
    ... class Database:
    ...     pass
    >>>
    >>> @component
    ... class UserService:
    ...     def __init__(self, db: Database):
    ...         self.db = db

Scanning the package that contains these modules yields one descriptor per class,
whose parameters are the annotated types of its constructor arguments.
"""

import importlib
import inspect
import logging
import pkgutil
from typing import Annotated, Any, Iterator, get_args, get_origin, get_type_hints

from tinyinjector.domain import TypeDescriptor
from tinyinjector.errors import DiscoveryError

__all__ = ["Marker", "component", "describe", "discover"]

logger = logging.getLogger(__name__)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class Marker:
    """A class decorator tagging classes as components.

    Markers are not inherited: a subclass of a marked class is only a component
    if it carries the marker itself.
    """

    def __init__(self, name: str):
        self.name = name
        self._attribute = f"__tinyinjector_{name}__"

    def __call__(self, cls: type) -> type:
        if not inspect.isclass(cls):
            raise DiscoveryError(f"{cls} is not a class")
        setattr(cls, self._attribute, True)
        return cls

    def is_present(self, obj: Any) -> bool:
        return inspect.isclass(obj) and vars(obj).get(self._attribute, False)

    def __repr__(self):
        return f"Marker({self.name!r})"


component = Marker("component")


def describe(cls: type) -> TypeDescriptor:
    """Describe a class by the annotated types of its constructor parameters.

    Args:
        cls: The class to describe.

    Returns:
        A descriptor identifying the class, with parameters in declaration order.

    Raises:
        DiscoveryError: If a constructor parameter is not annotated or cannot be
            passed positionally.

    Example:
        >>> class Service:
        ...     def __init__(self, db: Database, cache: Annotated[Cache, "redis"]):
        ...         ...
        >>> describe(Service)
        TypeDescriptor(identity=<class 'Service'>, parameters=(<class 'Database'>, <class 'Cache'>))
    """
    try:
        signature = inspect.signature(cls)
        hints = _constructor_hints(cls)
    except (TypeError, ValueError, NameError) as e:
        raise DiscoveryError(f"Cannot inspect constructor of {cls}: {e}") from e

    parameters = []
    for name, parameter in signature.parameters.items():
        if parameter.kind not in _POSITIONAL:
            raise DiscoveryError(
                f"Parameter <{name}> of component <{cls.__qualname__}> cannot be passed positionally"
            )
        try:
            annotation = hints[name]
        except KeyError:
            raise DiscoveryError(
                "Dependency <%s> of component <%s> is not annotated"
                % (name, cls.__qualname__)
            ) from None

        if get_origin(annotation) is Annotated:
            annotation = get_args(annotation)[0]
        parameters.append(annotation)

    return TypeDescriptor(cls, tuple(parameters))


def _constructor_hints(cls: type) -> dict[str, Any]:
    # Classes built through __new__ (NamedTuple and friends) declare their
    # fields on the class body; __init__ annotations win where both exist.
    sources = [cls.__new__, cls.__init__]
    if cls.__init__ is object.__init__:
        sources.insert(0, cls)

    hints: dict[str, Any] = {}
    for source in sources:
        hints.update(get_type_hints(source, include_extras=True))
    return hints


def discover(package: str, marker: Marker = component) -> list[TypeDescriptor]:
    """Find and describe every marked class defined in a package or its submodules.

    Classes are reported once, from the module that defines them, in module walk
    order and then by name.

    Args:
        package: Dotted name of the package (or single module) to scan.
        marker: The marker components carry.

    Returns:
        Descriptors of the discovered components.

    Raises:
        DiscoveryError: If a module cannot be imported or a component cannot be described.
    """
    descriptors = []
    for module in _iter_modules(package):
        for _name, obj in inspect.getmembers(module, marker.is_present):
            if obj.__module__ != module.__name__:
                continue
            logger.debug("Discovered component %s in %s", obj.__qualname__, module.__name__)
            descriptors.append(describe(obj))
    return descriptors


def _iter_modules(package: str) -> Iterator[Any]:
    root = _import(package)
    yield root

    path = getattr(root, "__path__", None)
    if path is None:
        return
    for _finder, module_name, _ispkg in pkgutil.walk_packages(path, root.__name__ + "."):
        yield _import(module_name)


def _import(module_name: str) -> Any:
    try:
        return importlib.import_module(module_name)
    except Exception as e:
        raise DiscoveryError(f"Could not import module {module_name}: {e}") from e
