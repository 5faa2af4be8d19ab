"""
Template Assembly System

Composes deployable components into a single template of parameters and
resource descriptors for the downstream deployment engine.
"""

from .components import (
    BaseComponent,
    ComponentRegistry,
    Siblings,
    Zync,
    ZyncCron,
    build_default_registry,
)
from .composer import TemplateComposer
from .config import AssemblyConfig, ConfigurationManager
from .error_handling import (
    AssemblySystemError,
    ConstructionError,
    MissingRequiredConfigurationError,
)
from .template import Parameter, Template, TemplateSerializer

__version__ = "1.0.0"

__all__ = [
    "Template",
    "Parameter",
    "TemplateSerializer",
    "TemplateComposer",
    "BaseComponent",
    "Siblings",
    "Zync",
    "ZyncCron",
    "ComponentRegistry",
    "build_default_registry",
    "AssemblyConfig",
    "ConfigurationManager",
    "AssemblySystemError",
    "MissingRequiredConfigurationError",
    "ConstructionError",
]
