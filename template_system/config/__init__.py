"""
Configuration Management Module

Handles assembly settings and literal option values.
"""

from .assembly_config import AssemblyConfig
from .manager import ConfigurationManager

__all__ = [
    "AssemblyConfig",
    "ConfigurationManager",
]
