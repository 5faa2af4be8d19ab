"""
Common Component

Declares parameters shared by every other component.
"""

from typing import Any, Mapping

from ..options.providers import APP_LABEL
from ..template import Parameter, TemplateObject
from .base_component import BaseComponent

DEFAULT_APP_LABEL = "3scale-api-management"


class Common(BaseComponent):
    """Contributes the APP_LABEL parameter and no objects."""

    name = "common"

    def __init__(self, app_label: str = DEFAULT_APP_LABEL):
        super().__init__()
        self.app_label = app_label

    @classmethod
    def from_values(cls, values: Mapping[str, str]) -> "Common":
        return cls(values.get(APP_LABEL) or DEFAULT_APP_LABEL)

    def build_parameters(self) -> list[Parameter]:
        return [
            Parameter(
                name=APP_LABEL,
                description="Used for object app labels",
                value=self.app_label,
                required=True,
            )
        ]

    def build_objects(self, options: Any) -> list[TemplateObject]:
        return []
