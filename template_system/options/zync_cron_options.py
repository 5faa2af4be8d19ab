"""
Zync Cron Options

Configuration of the Zync cron worker.
"""

from dataclasses import dataclass
from typing import Any

from .builder import OptionsBuilder

DEFAULT_REDIS_URL = "redis://zync-redis:6379/0"
DEFAULT_QUEUES_URL = "redis://zync-redis:6379/1"


@dataclass(frozen=True)
class ZyncCronOptions:
    app_label: str
    redis_url: str
    queues_url: str


class ZyncCronOptionsBuilder(OptionsBuilder[ZyncCronOptions]):
    REQUIRED_FIELDS = (("app_label", "AppLabel"),)

    def app_label(self, app_label: str) -> None:
        self._set("app_label", app_label)

    def redis_url(self, redis_url: str) -> None:
        self._set("redis_url", redis_url)

    def queues_url(self, queues_url: str) -> None:
        self._set("queues_url", queues_url)

    def _non_required_defaults(self, values: dict[str, Any]) -> dict[str, Any]:
        return {"redis_url": DEFAULT_REDIS_URL, "queues_url": DEFAULT_QUEUES_URL}

    def _create_options(self, values: dict[str, Any]) -> ZyncCronOptions:
        return ZyncCronOptions(
            app_label=values["app_label"],
            redis_url=values["redis_url"],
            queues_url=values["queues_url"],
        )
