"""
Components Module

Deployable components, the component contract and the component registry.
"""

from .base_component import BaseComponent, Siblings
from .common import Common
from .registry import ComponentRegistry, build_default_registry
from .zync import Zync
from .zync_cron import ZyncCron

__all__ = [
    "BaseComponent",
    "Siblings",
    "Common",
    "Zync",
    "ZyncCron",
    "ComponentRegistry",
    "build_default_registry",
]
