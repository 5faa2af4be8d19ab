"""
Zync Cron Component

Periodic Zync worker. Its credentials come from the secret created by the
Zync component; post-processing checks that the secret provides them.
"""

import logging
from typing import Mapping, Optional

from ..error_handling import ConstructionError, ErrorCodes, ErrorContext
from ..options.providers import (
    OptionsProvider,
    ResolvedZyncCronOptionsProvider,
    TemplateZyncCronOptionsProvider,
)
from ..options.zync_cron_options import ZyncCronOptions
from ..template import (
    Container,
    DeploymentStrategy,
    DeploymentTrigger,
    EnvVar,
    ObjectMeta,
    Parameter,
    PodTemplate,
    ResourceRequirements,
    RollingParams,
    Secret,
    Template,
    TemplateObject,
    Workload,
)
from .base_component import BaseComponent, Siblings
from .zync import (
    DATABASE_URL_KEY,
    SECRET_KEY_BASE_KEY,
    SECRET_NAME,
    SERVICE_ACCOUNT,
    ZYNC_IMAGE,
)

logger = logging.getLogger(__name__)

CRON_NAME = "zync-cron"

# env var name -> key in the zync secret
SHARED_SECRET_BINDINGS = {
    "DATABASE_URL": DATABASE_URL_KEY,
    "SECRET_KEY_BASE": SECRET_KEY_BASE_KEY,
}


class ZyncCron(BaseComponent):
    name = CRON_NAME
    depends_on = "zync"

    def __init__(self, options_provider: Optional[OptionsProvider] = None):
        super().__init__(options_provider or TemplateZyncCronOptionsProvider())

    @classmethod
    def from_values(cls, values: Mapping[str, str]) -> "ZyncCron":
        return cls(ResolvedZyncCronOptionsProvider.from_values(values))

    def build_parameters(self) -> list[Parameter]:
        return []

    def build_objects(self, options: ZyncCronOptions) -> list[TemplateObject]:
        return [self.build_deployment(options)]

    def build_deployment(self, options: ZyncCronOptions) -> Workload:
        labels = {
            "app": options.app_label,
            "3scale.component": "zync",
            "3scale.component-element": "cron",
        }
        container = Container(
            name=CRON_NAME,
            image=ZYNC_IMAGE,
            args=[CRON_NAME],
            env=[
                EnvVar("CONFIG_REDIS_PROXY", options.redis_url),
                EnvVar("CONFIG_REDIS_SENTINEL_HOSTS"),
                EnvVar("CONFIG_REDIS_SENTINEL_ROLE"),
                EnvVar("CONFIG_QUEUES_MASTER_NAME", options.queues_url),
                EnvVar("CONFIG_QUEUES_SENTINEL_HOSTS"),
                EnvVar("CONFIG_QUEUES_SENTINEL_ROLE"),
                EnvVar("RACK_ENV", "production"),
                *(
                    EnvVar.from_secret(env_name, SECRET_NAME, key)
                    for env_name, key in SHARED_SECRET_BINDINGS.items()
                ),
            ],
            resources=ResourceRequirements(
                limits={"cpu": "150m"},
                requests={"cpu": "50m"},
            ),
            image_pull_policy="IfNotPresent",
        )

        return Workload(
            metadata=ObjectMeta(CRON_NAME, labels),
            pod_template=PodTemplate(
                labels={"name": CRON_NAME, **labels},
                containers=[container],
                service_account_name=SERVICE_ACCOUNT,
            ),
            replicas=1,
            selector={"name": CRON_NAME},
            triggers=[
                DeploymentTrigger(),
                DeploymentTrigger.image_change(ZYNC_IMAGE, [CRON_NAME]),
            ],
            strategy=DeploymentStrategy(
                type="Rolling", rolling_params=RollingParams()
            ),
        )

    def post_process(self, template: Template, siblings: Siblings) -> None:
        """Check the Zync secret provides the bound keys and rebind to it."""
        zync = siblings.require(self.depends_on, self.name)
        secret = template.find_object(zync.secret_name, Secret)
        if secret is None:
            raise ConstructionError(
                f"Secret '{zync.secret_name}' not found in template",
                error_code=ErrorCodes.OBJECT_NOT_FOUND,
                context=ErrorContext(
                    component_name=self.name,
                    object_name=zync.secret_name,
                    operation="post_process",
                ),
            )

        workload = template.find_object(CRON_NAME, Workload)
        container = workload.get_container(CRON_NAME) if workload else None
        if container is None:
            raise ConstructionError(
                f"Workload '{CRON_NAME}' not found in template",
                error_code=ErrorCodes.OBJECT_NOT_FOUND,
                context=ErrorContext(
                    component_name=self.name,
                    object_name=CRON_NAME,
                    operation="post_process",
                ),
            )

        for env_name, key in SHARED_SECRET_BINDINGS.items():
            if key not in secret.string_data:
                raise ConstructionError(
                    f"Secret '{secret.name}' has no key '{key}'",
                    error_code=ErrorCodes.OBJECT_NOT_FOUND,
                    context=ErrorContext(
                        component_name=self.name,
                        object_name=secret.name,
                        operation="post_process",
                    ),
                )
            container.set_env(EnvVar.from_secret(env_name, secret.name, key))

        logger.debug(f"Wired secret {secret.name} into {CRON_NAME}")
