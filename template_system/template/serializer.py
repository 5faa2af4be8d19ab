"""
Template Serializer

Renders assembled templates and object lists as YAML or JSON.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Union

import yaml

from ..error_handling import ErrorCodes, ErrorContext, SerializationError
from .objects import TemplateObject
from .template import Template

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("yaml", "json")


class TemplateSerializer:
    """Serializes templates for the downstream deployment engine."""

    def __init__(self, output_format: str = "yaml"):
        if output_format not in SUPPORTED_FORMATS:
            raise SerializationError(
                f"Unsupported output format: {output_format}",
                error_code=ErrorCodes.UNSUPPORTED_FORMAT,
                context=ErrorContext(operation="serialize"),
            )
        self.output_format = output_format

    def dumps(self, source: Union[Template, Iterable[TemplateObject]]) -> str:
        """Render a template, or a plain list of objects, to text."""
        if isinstance(source, Template):
            data: Any = source.to_dict()
        else:
            data = [obj.to_dict() for obj in source]

        if self.output_format == "json":
            return json.dumps(data, indent=2)
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    def write(
        self, source: Union[Template, Iterable[TemplateObject]], output_path: str
    ) -> Path:
        """Render and write to a file, creating parent directories."""
        path = Path(output_path)
        content = self.dumps(source)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise SerializationError(
                f"Failed to write template to {output_path}: {e}",
                error_code=ErrorCodes.OUTPUT_WRITE_FAILED,
                context=ErrorContext(file_path=output_path, operation="write"),
                cause=e,
            ) from e

        logger.info(f"Wrote {self.output_format} output to {path}")
        return path
