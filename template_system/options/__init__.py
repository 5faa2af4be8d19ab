"""
Options Module

Validated component options, their builders and providers.
"""

from .builder import BuildResult, OptionsBuilder
from .providers import (
    OptionsProvider,
    ResolvedZyncCronOptionsProvider,
    ResolvedZyncOptionsProvider,
    TemplateZyncCronOptionsProvider,
    TemplateZyncOptionsProvider,
)
from .zync_cron_options import ZyncCronOptions, ZyncCronOptionsBuilder
from .zync_options import ZyncOptions, ZyncOptionsBuilder

__all__ = [
    "OptionsBuilder",
    "BuildResult",
    "OptionsProvider",
    "ZyncOptions",
    "ZyncOptionsBuilder",
    "ZyncCronOptions",
    "ZyncCronOptionsBuilder",
    "TemplateZyncOptionsProvider",
    "ResolvedZyncOptionsProvider",
    "TemplateZyncCronOptionsProvider",
    "ResolvedZyncCronOptionsProvider",
]
