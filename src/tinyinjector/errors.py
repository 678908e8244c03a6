__all__ = [
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


class InjectorError(Exception):
    """Base class for all errors raised by the injector."""

    pass


class ScanError(InjectorError):
    """Raised when a scan cannot produce a complete registry."""

    pass


class AlreadyScannedError(ScanError):
    """Raised when an injector is asked to scan a second time."""

    def __init__(self):
        super().__init__("Components have already been scanned")


class CyclicDependencyError(ScanError):
    """Raised when the dependency graph contains a cycle.

    Attributes:
        unresolved: The identities that could not be placed in the build order.
    """

    def __init__(self, unresolved):
        self.unresolved = unresolved
        super().__init__(f"Cyclic dependencies detected among {unresolved}")


class MissingDependencyError(ScanError):
    """Raised when a component requires an identity that has not been built.

    Attributes:
        identity: The required identity with no built instance.
        dependent: The component that required it.
    """

    def __init__(self, identity, dependent):
        self.identity = identity
        self.dependent = dependent
        super().__init__(f"Missing dependency {identity} required by {dependent}")


class ConstructionError(ScanError):
    """Raised when constructing a component fails. The cause is chained."""

    def __init__(self, identity, cause: BaseException):
        self.identity = identity
        super().__init__(f"Constructing {identity} failed: {cause!r}")


class DuplicateComponentError(ScanError):
    def __init__(self, identity):
        self.identity = identity
        super().__init__(f"Duplicate component {identity}")


class DiscoveryError(ScanError):
    """Raised when candidate components cannot be discovered or described."""

    pass


class RetrieveError(InjectorError):
    pass


class NotScannedError(RetrieveError):
    def __init__(self):
        super().__init__("Retrieve called before components were scanned")


class UnknownComponentError(RetrieveError, KeyError):
    def __init__(self, identity):
        self.identity = identity
        super().__init__(f"No such component {identity}")

    def __str__(self):
        return self.args[0]
