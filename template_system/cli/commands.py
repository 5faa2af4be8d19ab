"""
CLI Commands

Command-line interface for template assembly.
"""

from typing import Optional

from ..components import build_default_registry
from ..composer import TemplateComposer
from ..config import ConfigurationManager
from ..template import TemplateSerializer


class AssemblyCLI:
    """Command-line interface for template assembly."""

    def __init__(self, config_dir: str = "config", environment: Optional[str] = None):
        self.config_manager = ConfigurationManager(config_dir, environment)
        self.config = self.config_manager.get_assembly_config()
        self.registry = build_default_registry()

    def _create_composer(self, resolved: bool) -> TemplateComposer:
        values = self.config_manager.get_resolved_values() if resolved else None
        components = self.registry.create_components(self.config.components, values)
        return TemplateComposer(
            components,
            template_name=self.config.template_name,
            description=self.config.description,
            message=self.config.message,
        )

    def generate(
        self,
        resolved: bool = False,
        output_format: Optional[str] = None,
        output_path: Optional[str] = None,
    ) -> str:
        """Compose the template and return (or write) its serialized form."""
        template = self._create_composer(resolved).compose()
        serializer = TemplateSerializer(output_format or self.config.output_format)
        if output_path:
            serializer.write(template, output_path)
        return serializer.dumps(template)

    def get_objects(
        self,
        component_name: str,
        resolved: bool = False,
        output_format: Optional[str] = None,
    ) -> str:
        """Serialize the objects of one component without a template."""
        objects = self._create_composer(resolved).get_objects(component_name)
        serializer = TemplateSerializer(output_format or self.config.output_format)
        return serializer.dumps(objects)

    def list_components(self) -> list[dict]:
        """List registered components and whether they are enabled."""
        enabled = self.config.components
        return [
            {
                "name": name,
                "enabled": enabled is None or name in enabled,
            }
            for name in self.registry.names()
        ]

    def get_summary(self, resolved: bool = False) -> dict:
        composer = self._create_composer(resolved)
        template = composer.compose()
        return composer.get_composition_summary(template)
