"""
Assembly Configuration Models

Defines the settings of one template composition.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AssemblyConfig:
    """Settings for composing and rendering a template."""

    template_name: str = "3scale-api-management"
    description: str = "3scale API Management main system"
    message: str = ""
    components: Optional[list[str]] = None
    output_format: str = "yaml"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.template_name:
            raise ValueError("Template name is required")

        if self.output_format not in ["yaml", "json"]:
            raise ValueError("Output format must be 'yaml' or 'json'")

        if self.components is not None and (
            not isinstance(self.components, list)
            or not all(isinstance(name, str) for name in self.components)
        ):
            raise ValueError("Components must be a list of component names")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "template_name": self.template_name,
            "description": self.description,
            "message": self.message,
            "components": self.components,
            "output_format": self.output_format,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AssemblyConfig":
        """Create from dictionary, using defaults for missing keys."""
        defaults = cls()
        return cls(
            template_name=data.get("template_name", defaults.template_name),
            description=data.get("description", defaults.description),
            message=data.get("message", defaults.message),
            components=data.get("components"),
            output_format=data.get("output_format", defaults.output_format),
        )
