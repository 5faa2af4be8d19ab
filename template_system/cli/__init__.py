"""
Command Line Interface Module

Provides CLI commands for template assembly.
"""

from .commands import AssemblyCLI
from .main import main

__all__ = ["AssemblyCLI", "main"]
