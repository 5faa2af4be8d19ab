"""
Component Registry

Explicit, ordered registration of component types. The registration order is
the composition order.
"""

import logging
from typing import Mapping, Optional, Sequence

from ..error_handling import CompositionError, ErrorCodes, ErrorContext
from .base_component import BaseComponent
from .common import Common
from .zync import Zync
from .zync_cron import ZyncCron

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """Ordered registry of component classes, keyed by component name."""

    def __init__(self):
        self._components: dict[str, type[BaseComponent]] = {}

    def register(self, component_class: type[BaseComponent]) -> None:
        """Register a component class under its ``name``."""
        name = component_class.name
        if name in self._components:
            raise CompositionError(
                f"Component '{name}' is already registered",
                error_code=ErrorCodes.DUPLICATE_COMPONENT,
                context=ErrorContext(component_name=name, operation="register"),
            )
        self._components[name] = component_class

    def names(self) -> list[str]:
        return list(self._components.keys())

    def get(self, name: str) -> type[BaseComponent]:
        try:
            return self._components[name]
        except KeyError:
            raise CompositionError(
                f"Unknown component '{name}'",
                error_code=ErrorCodes.UNKNOWN_COMPONENT,
                context=ErrorContext(
                    component_name=name,
                    operation="lookup",
                    additional_info={"registered": self.names()},
                ),
            ) from None

    def create_components(
        self,
        names: Optional[Sequence[str]] = None,
        values: Optional[Mapping[str, str]] = None,
    ) -> list[BaseComponent]:
        """Instantiate components in registration order.

        Args:
            names: Components to include; all registered ones when omitted.
            values: Literal option values. When omitted, components use
                template placeholders.
        """
        if names is None:
            selected = set(self._components)
        else:
            for name in names:
                self.get(name)
            selected = set(names)

        components = []
        for name, component_class in self._components.items():
            if name not in selected:
                continue
            if values is None:
                components.append(component_class())
            else:
                components.append(component_class.from_values(values))

        logger.debug(f"Created components: {[c.name for c in components]}")
        return components

    def __contains__(self, name: str) -> bool:
        return name in self._components


def build_default_registry() -> ComponentRegistry:
    """Registry with every built-in component, in composition order."""
    registry = ComponentRegistry()
    registry.register(Common)
    registry.register(Zync)
    registry.register(ZyncCron)
    return registry
