"""
Options Providers

Supply raw values to options builders. Template providers supply deployment
time placeholders so the generated template stays portable; resolved
providers supply literal values for direct application.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Mapping, Optional, TypeVar

from ..error_handling import MissingRequiredConfigurationError
from .zync_cron_options import ZyncCronOptions, ZyncCronOptionsBuilder
from .zync_options import ZyncOptions, ZyncOptionsBuilder

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT")

# Keys shared by template placeholders and resolved value mappings
APP_LABEL = "APP_LABEL"
ZYNC_AUTHENTICATION_TOKEN = "ZYNC_AUTHENTICATION_TOKEN"
ZYNC_DATABASE_PASSWORD = "ZYNC_DATABASE_PASSWORD"
ZYNC_SECRET_KEY_BASE = "ZYNC_SECRET_KEY_BASE"
ZYNC_DATABASE_URL = "ZYNC_DATABASE_URL"
ZYNC_REDIS_URL = "ZYNC_REDIS_URL"
ZYNC_QUEUES_URL = "ZYNC_QUEUES_URL"


def placeholder(name: str) -> str:
    return f"${{{name}}}"


class OptionsProvider(ABC, Generic[OptionsT]):
    """Source of validated options for one component."""

    component_name: str = ""

    @abstractmethod
    def get_options(self) -> OptionsT:
        """Build fresh options.

        Raises:
            MissingRequiredConfigurationError: if a required value is missing.
        """
        pass

    def _build(self, builder) -> OptionsT:
        try:
            return builder.build()
        except MissingRequiredConfigurationError as e:
            e.context.component_name = self.component_name
            logger.error(f"Unable to create {self.component_name} options - {e}")
            raise


class TemplateZyncOptionsProvider(OptionsProvider[ZyncOptions]):
    """Zync options referencing template parameters."""

    component_name = "zync"

    def get_options(self) -> ZyncOptions:
        builder = ZyncOptionsBuilder()
        builder.app_label(placeholder(APP_LABEL))
        builder.authentication_token(placeholder(ZYNC_AUTHENTICATION_TOKEN))
        builder.database_password(placeholder(ZYNC_DATABASE_PASSWORD))
        builder.secret_key_base(placeholder(ZYNC_SECRET_KEY_BASE))
        return self._build(builder)


class ResolvedZyncOptionsProvider(OptionsProvider[ZyncOptions]):
    """Zync options from literal values."""

    component_name = "zync"

    def __init__(
        self,
        app_label: str,
        authentication_token: str,
        database_password: str,
        secret_key_base: str,
        database_url: Optional[str] = None,
    ):
        self.app_label = app_label
        self.authentication_token = authentication_token
        self.database_password = database_password
        self.secret_key_base = secret_key_base
        self.database_url = database_url

    @classmethod
    def from_values(cls, values: Mapping[str, str]) -> "ResolvedZyncOptionsProvider":
        """Create from environment-style keys (``ZYNC_DATABASE_PASSWORD``, ...)."""
        return cls(
            app_label=values.get(APP_LABEL, ""),
            authentication_token=values.get(ZYNC_AUTHENTICATION_TOKEN, ""),
            database_password=values.get(ZYNC_DATABASE_PASSWORD, ""),
            secret_key_base=values.get(ZYNC_SECRET_KEY_BASE, ""),
            database_url=values.get(ZYNC_DATABASE_URL) or None,
        )

    def get_options(self) -> ZyncOptions:
        builder = ZyncOptionsBuilder()
        builder.app_label(self.app_label)
        builder.authentication_token(self.authentication_token)
        builder.database_password(self.database_password)
        builder.secret_key_base(self.secret_key_base)
        if self.database_url is not None:
            builder.database_url(self.database_url)
        return self._build(builder)


class TemplateZyncCronOptionsProvider(OptionsProvider[ZyncCronOptions]):
    component_name = "zync-cron"

    def get_options(self) -> ZyncCronOptions:
        builder = ZyncCronOptionsBuilder()
        builder.app_label(placeholder(APP_LABEL))
        return self._build(builder)


class ResolvedZyncCronOptionsProvider(OptionsProvider[ZyncCronOptions]):
    component_name = "zync-cron"

    def __init__(
        self,
        app_label: str,
        redis_url: Optional[str] = None,
        queues_url: Optional[str] = None,
    ):
        self.app_label = app_label
        self.redis_url = redis_url
        self.queues_url = queues_url

    @classmethod
    def from_values(
        cls, values: Mapping[str, str]
    ) -> "ResolvedZyncCronOptionsProvider":
        return cls(
            app_label=values.get(APP_LABEL, ""),
            redis_url=values.get(ZYNC_REDIS_URL) or None,
            queues_url=values.get(ZYNC_QUEUES_URL) or None,
        )

    def get_options(self) -> ZyncCronOptions:
        builder = ZyncCronOptionsBuilder()
        builder.app_label(self.app_label)
        if self.redis_url is not None:
            builder.redis_url(self.redis_url)
        if self.queues_url is not None:
            builder.queues_url(self.queues_url)
        return self._build(builder)
