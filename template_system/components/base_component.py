"""
Base Component

Abstract base class for components contributing to a template.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterator, Mapping, Optional, Sequence

from ..error_handling import ConstructionError, ErrorCodes, ErrorContext
from ..options.providers import OptionsProvider
from ..template import Parameter, Template, TemplateObject

logger = logging.getLogger(__name__)


class Siblings:
    """Read-only, name-keyed view of the components in a composition."""

    def __init__(self, components: Sequence["BaseComponent"]):
        self._components = list(components)

    def get(self, name: str) -> Optional["BaseComponent"]:
        for component in self._components:
            if component.name == name:
                return component
        return None

    def require(self, name: str, requested_by: str) -> "BaseComponent":
        """Get a sibling by name or fail the requesting component."""
        component = self.get(name)
        if component is None:
            raise ConstructionError(
                f"Component '{requested_by}' requires component '{name}', "
                f"which is not part of this composition",
                error_code=ErrorCodes.SIBLING_NOT_FOUND,
                context=ErrorContext(
                    component_name=requested_by, operation="post_process"
                ),
            )
        return component

    def names(self) -> list[str]:
        return [component.name for component in self._components]

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __iter__(self) -> Iterator["BaseComponent"]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)


class BaseComponent(ABC):
    """A deployable piece of the system.

    ``assemble`` adds parameters and then objects to a shared template,
    ``post_process`` runs after every component has assembled, and
    ``get_objects`` returns this component's objects without a template.
    Options are obtained fresh from the provider on every call.
    """

    name: str = ""
    # name of the secret this component shares with its siblings, if any
    secret_name: Optional[str] = None

    def __init__(self, options_provider: Optional[OptionsProvider] = None):
        self.options_provider = options_provider
        self.options: Any = None

    @classmethod
    def from_values(cls, values: Mapping[str, str]) -> "BaseComponent":
        """Create the component with literal option values."""
        return cls()

    def assemble(self, template: Template, siblings: Siblings) -> None:
        """Append this component's parameters, then its objects."""
        self.options = self._load_options()
        parameters = self.build_parameters()
        objects = self.build_objects(self.options)
        template.add_parameters(parameters)
        template.add_objects(objects)
        logger.debug(
            f"Assembled {self.name}: {len(parameters)} parameter(s), "
            f"{len(objects)} object(s)"
        )

    def post_process(self, template: Template, siblings: Siblings) -> None:
        """Decorate objects already in the template. No-op by default."""
        pass

    def get_objects(self) -> list[TemplateObject]:
        """Build this component's objects without touching a template."""
        self.options = self._load_options()
        return self.build_objects(self.options)

    @abstractmethod
    def build_parameters(self) -> list[Parameter]:
        """Parameter declarations contributed by this component."""
        pass

    @abstractmethod
    def build_objects(self, options: Any) -> list[TemplateObject]:
        """Objects built from validated options, in declared order."""
        pass

    def _load_options(self) -> Any:
        if self.options_provider is None:
            return None
        return self.options_provider.get_options()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
