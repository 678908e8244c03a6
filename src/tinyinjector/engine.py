"""Materialisation of singletons in construction order."""

import logging
from typing import Any, Iterable, Mapping

from tinyinjector.construction import Construct, instantiate
from tinyinjector.domain import TypeDescriptor, TypeIdentity
from tinyinjector.errors import ConstructionError, MissingDependencyError

__all__ = ["InstantiationEngine"]

logger = logging.getLogger(__name__)


class InstantiationEngine:
    """Build one instance per component, feeding each the instances it depends on."""

    def __init__(self, construct: Construct = instantiate):
        self._construct = construct

    def run(
        self,
        order: Iterable[TypeIdentity],
        descriptors: Mapping[TypeIdentity, TypeDescriptor],
    ) -> dict[TypeIdentity, Any]:
        """Construct every described component, following the given order.

        Identities in the order that have no descriptor are parameter types that
        were never discovered as components. They are not constructed, so any
        component requiring one fails with :class:`MissingDependencyError`.

        Args:
            order: Identities with every dependency ahead of its dependents.
            descriptors: Mapping of component identities to their descriptors.

        Returns:
            A new dictionary mapping each component identity to its instance.

        Raises:
            MissingDependencyError: If a required identity has not been built.
            ConstructionError: If the construction strategy raises.
        """
        built: dict[TypeIdentity, Any] = {}

        for identity in order:
            descriptor = descriptors.get(identity)
            if descriptor is None:
                logger.debug("Skipping %s, it is not a component", identity)
                continue

            arguments = tuple(
                _lookup(built, parameter, identity) for parameter in descriptor.parameters
            )
            try:
                instance = self._construct(identity, arguments)
            except Exception as e:
                raise ConstructionError(identity, e) from e

            logger.debug("Constructed %s", identity)
            built[identity] = instance

        return built


def _lookup(built: dict[TypeIdentity, Any], parameter: TypeIdentity, dependent: TypeIdentity) -> Any:
    try:
        return built[parameter]
    except KeyError:
        raise MissingDependencyError(parameter, dependent) from None
