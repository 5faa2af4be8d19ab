"""
Template Composer

Runs every component against one shared template: all ``assemble`` calls in
registration order, then all ``post_process`` calls.
"""

import logging
from typing import Any, Sequence

from .components.base_component import BaseComponent, Siblings
from .error_handling import (
    AssemblySystemError,
    CompositionError,
    ErrorCodes,
    ErrorContext,
)
from .template import Template, TemplateObject

logger = logging.getLogger(__name__)


class TemplateComposer:
    """Composition driver for a fixed, ordered list of components."""

    def __init__(
        self,
        components: Sequence[BaseComponent],
        template_name: str = "3scale-api-management",
        description: str = "",
        message: str = "",
    ):
        self.components = list(components)
        self.template_name = template_name
        self.description = description
        self.message = message

    def compose(self) -> Template:
        """Assemble a fresh template from all components.

        Any error aborts the composition and is re-raised unchanged.
        """
        template = Template(self.template_name, self.description, self.message)
        logger.info(
            f"Composing template {self.template_name} from "
            f"{len(self.components)} component(s)"
        )

        for index, component in enumerate(self.components):
            # only components that have already assembled are visible
            siblings = Siblings(self.components[:index])
            self._run(component, "assemble", template, siblings)

        for component in self.components:
            siblings = Siblings([c for c in self.components if c is not component])
            self._run(component, "post_process", template, siblings)

        duplicates = template.duplicate_parameter_names()
        if duplicates:
            logger.warning(f"Template declares duplicate parameters: {duplicates}")

        logger.info(
            f"Composed template {self.template_name}: "
            f"{len(template.parameters)} parameter(s), {len(template.objects)} object(s)"
        )
        return template

    def _run(
        self,
        component: BaseComponent,
        step: str,
        template: Template,
        siblings: Siblings,
    ) -> None:
        try:
            getattr(component, step)(template, siblings)
        except Exception as e:
            if isinstance(e, AssemblySystemError) and not e.context.component_name:
                e.context.component_name = component.name
            logger.error(f"{step} failed for component {component.name}: {e}")
            raise

    def get_objects(self, name: str) -> list[TemplateObject]:
        """Objects of a single component, without composing a template."""
        for component in self.components:
            if component.name == name:
                return component.get_objects()
        raise CompositionError(
            f"Component '{name}' is not part of this composition",
            error_code=ErrorCodes.UNKNOWN_COMPONENT,
            context=ErrorContext(component_name=name, operation="get_objects"),
        )

    def get_composition_summary(self, template: Template) -> dict[str, Any]:
        """Summary of what a composed template contains."""
        return {
            "template": template.name,
            "components": [component.name for component in self.components],
            "parameter_count": len(template.parameters),
            "object_count": len(template.objects),
            "duplicate_parameters": template.duplicate_parameter_names(),
            "objects": [
                {"kind": obj.KIND, "name": obj.name} for obj in template.objects
            ],
        }
