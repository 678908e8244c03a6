"""Tiny constructor-injection container.

tinyinjector discovers component classes carrying a marker, orders them so that
every dependency is built before the components needing it, and constructs exactly
one instance of each. Dependencies are declared as annotated constructor parameters;
nothing is resolved lazily and no proxies are involved.

Key Features:
    - Component discovery by class decorator beneath a package
    - Constructor injection using standard type hints
    - Static dependency ordering with cycle detection
    - Pluggable construction, including per-type factories
    - Read-only registries safe for concurrent retrieval

Basic Usage:
    >>> from tinyinjector import Injector, component
    >>>
    >>> @component
    ... class Database:
    ...     pass
    >>>
    >>> @component
    ... class UserService:
    ...     def __init__(self, db: Database):
    ...         self.db = db
    >>>
    >>> injector = Injector()
    >>> injector.scan("my_app")
    >>> injector.retrieve(UserService).db is injector.retrieve(Database)
    True

The package consists of several modules:
    - injector: The one-shot scan and retrieve lifecycle
    - builders: Stateless registry construction
    - discovery: Component markers and package scanning
    - graph, sorter, engine: Dependency graph, ordering and instantiation
    - registry: Read-only access to constructed singletons
    - errors: Injector-specific exceptions
"""

import logging

from tinyinjector.builders import make_registry
from tinyinjector.construction import factory_constructor, instantiate
from tinyinjector.discovery import Marker, component, describe, discover
from tinyinjector.domain import TypeDescriptor
from tinyinjector.errors import (
    AlreadyScannedError,
    ConstructionError,
    CyclicDependencyError,
    DiscoveryError,
    DuplicateComponentError,
    InjectorError,
    MissingDependencyError,
    NotScannedError,
    RetrieveError,
    ScanError,
    UnknownComponentError,
)
from tinyinjector.injector import Injector
from tinyinjector.registry import Registry

__all__ = [
    "Injector",
    "Registry",
    "TypeDescriptor",
    "Marker",
    "component",
    "describe",
    "discover",
    "make_registry",
    "instantiate",
    "factory_constructor",
    "InjectorError",
    "ScanError",
    "AlreadyScannedError",
    "CyclicDependencyError",
    "MissingDependencyError",
    "ConstructionError",
    "DuplicateComponentError",
    "DiscoveryError",
    "RetrieveError",
    "NotScannedError",
    "UnknownComponentError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
