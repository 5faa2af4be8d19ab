"""
Template Accumulator

Ordered container for the parameters and objects contributed by components.
"""

import logging
from collections import Counter
from typing import Any, Iterable, Optional

from .objects import TemplateObject
from .parameter import Parameter

logger = logging.getLogger(__name__)

API_VERSION = "template.openshift.io/v1"


class Template:
    """Append-only, ordered sequences of parameters and objects.

    Appending never deduplicates: two parameters with the same name produce
    two entries, in the order they were added.
    """

    def __init__(
        self,
        name: str = "3scale-api-management",
        description: str = "",
        message: str = "",
    ):
        self.name = name
        self.description = description
        self.message = message
        self.parameters: list[Parameter] = []
        self.objects: list[TemplateObject] = []

    def add_parameters(self, parameters: Iterable[Parameter]) -> None:
        """Append parameters in the given order."""
        parameters = list(parameters)
        self.parameters.extend(parameters)
        logger.debug(f"Added {len(parameters)} parameter(s) to template {self.name}")

    def add_objects(self, objects: Iterable[TemplateObject]) -> None:
        """Append objects in the given order."""
        objects = list(objects)
        self.objects.extend(objects)
        logger.debug(f"Added {len(objects)} object(s) to template {self.name}")

    def find_object(
        self, name: str, kind: Optional[type] = None
    ) -> Optional[TemplateObject]:
        """Find the first object with the given name, optionally of a given type."""
        for obj in self.objects:
            if obj.name == name and (kind is None or isinstance(obj, kind)):
                return obj
        return None

    def objects_of(self, kind: type) -> list[TemplateObject]:
        """List objects of the given type, in template order."""
        return [obj for obj in self.objects if isinstance(obj, kind)]

    def parameter_names(self) -> list[str]:
        return [parameter.name for parameter in self.parameters]

    def duplicate_parameter_names(self) -> list[str]:
        """Names declared more than once, in first-occurrence order."""
        counts = Counter(self.parameter_names())
        return [name for name, count in counts.items() if count > 1]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the platform template layout."""
        metadata: dict[str, Any] = {"name": self.name}
        if self.description:
            metadata["annotations"] = {"description": self.description}

        result: dict[str, Any] = {
            "apiVersion": API_VERSION,
            "kind": "Template",
            "metadata": metadata,
        }
        if self.message:
            result["message"] = self.message
        result["parameters"] = [parameter.to_dict() for parameter in self.parameters]
        result["objects"] = [obj.to_dict() for obj in self.objects]
        return result

    def __repr__(self) -> str:
        return (
            f"Template(name={self.name!r}, parameters={len(self.parameters)}, "
            f"objects={len(self.objects)})"
        )
