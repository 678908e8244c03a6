from typing import Iterable

from tinyinjector.construction import Construct, instantiate
from tinyinjector.domain import TypeDescriptor
from tinyinjector.engine import InstantiationEngine
from tinyinjector.graph import build_graph
from tinyinjector.registry import Registry
from tinyinjector.sorter import sort

__all__ = ["make_registry"]


def make_registry(
    descriptors: Iterable[TypeDescriptor],
    construct: Construct = instantiate,
) -> Registry:
    """
    Construct and return a registry holding one singleton per described component.

    The function builds the dependency graph of the given components, orders it so
    that dependencies come first, and constructs each component in that order. Every
    call builds a fresh set of singletons.

    Args:
        descriptors: The components to construct.
        construct: The strategy used to create each instance from its arguments.

    Returns:
        A read-only registry of the constructed components.

    Raises:
        ScanError: If components are duplicated, cyclic, missing dependencies,
            or fail to construct.
    """
    descriptors = list(descriptors)
    order = sort(build_graph(descriptors))
    engine = InstantiationEngine(construct)
    instances = engine.run(
        order, {descriptor.identity: descriptor for descriptor in descriptors}
    )
    return Registry(instances)
