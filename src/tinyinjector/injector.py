"""
The one-shot injector: scan components once, then retrieve their singletons.

An :class:`Injector` owns the whole lifecycle of a set of singletons. It can be
scanned exactly once; until a scan has succeeded, nothing can be retrieved from it.
"""

import logging
import threading
from typing import Any, Iterable, Optional, Union

from tinyinjector.builders import make_registry
from tinyinjector.construction import Construct, instantiate
from tinyinjector.discovery import Marker, component, discover
from tinyinjector.domain import TypeDescriptor, TypeIdentity
from tinyinjector.errors import AlreadyScannedError, NotScannedError
from tinyinjector.registry import Registry

__all__ = ["Injector", "ScanSource"]

logger = logging.getLogger(__name__)


ScanSource = Union[str, Iterable[TypeDescriptor]]
"""Type alias for what an injector can scan.

Either the dotted name of a package to discover marked components in, or the
component descriptors themselves.
"""


class Injector:
    """
    A container for process-lifetime singletons, populated by a single scan.

    Example:
        >>> injector = Injector()
        >>> injector.scan("my_app.components")
        >>> service = injector.retrieve(UserService)
    """

    def __init__(self, construct: Construct = instantiate, marker: Marker = component):
        self._construct = construct
        self._marker = marker
        self._lock = threading.Lock()
        self._claimed = False
        self._registry: Optional[Registry] = None

    def scan(self, source: ScanSource) -> Registry:
        """Discover components and construct one singleton for each.

        A scan may only be attempted once per injector, whether or not the attempt
        succeeds. If it fails, the injector stays empty and unusable.

        Args:
            source: A package name to discover marked components in, or an iterable
                of component descriptors.

        Returns:
            The registry of constructed singletons.

        Raises:
            AlreadyScannedError: If this injector has been scanned before.
            ScanError: If discovery, ordering or construction fails.
        """
        with self._lock:
            if self._claimed:
                raise AlreadyScannedError()
            self._claimed = True

        if isinstance(source, str):
            logger.debug("Scanning package %s for %r", source, self._marker)
            descriptors = discover(source, self._marker)
        else:
            descriptors = list(source)

        registry = make_registry(descriptors, self._construct)
        self._registry = registry
        logger.info("Scan completed with %d components", len(registry))
        return registry

    def retrieve(self, identity: TypeIdentity) -> Any:
        """Return the singleton for the given identity.

        Raises:
            NotScannedError: If no scan has completed successfully.
            UnknownComponentError: If the identity was not registered by the scan.
        """
        registry = self._registry
        if registry is None:
            raise NotScannedError()
        return registry.retrieve(identity)

    @property
    def scanned(self) -> bool:
        """True once a scan has completed successfully."""
        return self._registry is not None
