"""
Zync Component

Builds the Zync workload, its PostgreSQL database, their services and the
shared secret holding Zync credentials.
"""

from typing import Mapping, Optional

from ..options.providers import (
    OptionsProvider,
    ResolvedZyncOptionsProvider,
    TemplateZyncOptionsProvider,
)
from ..options.zync_options import ZyncOptions
from ..template import (
    AuxiliaryWorkload,
    Container,
    ContainerPort,
    DeploymentStrategy,
    DeploymentTrigger,
    EnvVar,
    ExecAction,
    HTTPGetAction,
    NetworkEndpoint,
    ObjectMeta,
    Parameter,
    PodTemplate,
    Probe,
    ResourceRequirements,
    Secret,
    ServicePort,
    TCPSocketAction,
    TemplateObject,
    Volume,
    VolumeMount,
    Workload,
)
from .base_component import BaseComponent

ZYNC_IMAGE = "amp-zync:latest"
POSTGRESQL_IMAGE = "postgresql:9.5"
SERVICE_ACCOUNT = "amp"

ZYNC_PORT = 8080
DATABASE_PORT = 5432
DATABASE_NAME = "zync-database"
DATABASE_USER = "zync"
DATABASE_DB = "zync_production"

SECRET_NAME = "zync"
SECRET_KEY_BASE_KEY = "SECRET_KEY_BASE"
DATABASE_URL_KEY = "DATABASE_URL"
DATABASE_PASSWORD_KEY = "ZYNC_DATABASE_PASSWORD"
AUTHENTICATION_TOKEN_KEY = "ZYNC_AUTHENTICATION_TOKEN"


class Zync(BaseComponent):
    """The Zync synchronisation service."""

    name = "zync"
    secret_name = SECRET_NAME

    def __init__(self, options_provider: Optional[OptionsProvider] = None):
        super().__init__(options_provider or TemplateZyncOptionsProvider())

    @classmethod
    def from_values(cls, values: Mapping[str, str]) -> "Zync":
        return cls(ResolvedZyncOptionsProvider.from_values(values))

    def build_parameters(self) -> list[Parameter]:
        return [
            Parameter.generated(
                "ZYNC_DATABASE_PASSWORD",
                display_name="PostgreSQL Connection Password",
                description="Password for the PostgreSQL connection user.",
            ),
            Parameter.generated("ZYNC_SECRET_KEY_BASE"),
            Parameter.generated("ZYNC_AUTHENTICATION_TOKEN"),
        ]

    def build_objects(self, options: ZyncOptions) -> list[TemplateObject]:
        return [
            self.build_deployment(options),
            self.build_database_deployment(options),
            self.build_service(options),
            self.build_database_service(options),
            self.build_secret(options),
        ]

    def _labels(self, options: ZyncOptions) -> dict[str, str]:
        return {"app": options.app_label, "3scale.component": "zync"}

    def _database_labels(self, options: ZyncOptions) -> dict[str, str]:
        labels = self._labels(options)
        labels["3scale.component-element"] = "database"
        return labels

    def build_deployment(self, options: ZyncOptions) -> Workload:
        pod_labels = self._labels(options)
        pod_labels["deploymentConfig"] = "zync"

        init_container = Container(
            name="zync-db-svc",
            image=ZYNC_IMAGE,
            command=[
                "bash",
                "-c",
                'bundle exec sh -c "until rake boot:db; do sleep $SLEEP_SECONDS; done"',
            ],
            env=[
                EnvVar("SLEEP_SECONDS", "1"),
                EnvVar.from_secret("DATABASE_URL", SECRET_NAME, DATABASE_URL_KEY),
            ],
        )
        container = Container(
            name="zync",
            image=ZYNC_IMAGE,
            ports=[ContainerPort(ZYNC_PORT)],
            env=[
                EnvVar("RAILS_LOG_TO_STDOUT", "true"),
                EnvVar("RAILS_ENV", "production"),
                EnvVar.from_secret("DATABASE_URL", SECRET_NAME, DATABASE_URL_KEY),
                EnvVar.from_secret(
                    "SECRET_KEY_BASE", SECRET_NAME, SECRET_KEY_BASE_KEY
                ),
                EnvVar.from_secret(
                    "ZYNC_AUTHENTICATION_TOKEN", SECRET_NAME, AUTHENTICATION_TOKEN_KEY
                ),
            ],
            liveness_probe=Probe(
                HTTPGetAction(path="/status/live", port=ZYNC_PORT),
                initial_delay_seconds=10,
                timeout_seconds=60,
                period_seconds=10,
                success_threshold=1,
                failure_threshold=10,
            ),
            readiness_probe=Probe(
                HTTPGetAction(path="/status/ready", port=ZYNC_PORT),
                initial_delay_seconds=100,
                timeout_seconds=10,
                period_seconds=10,
                success_threshold=1,
                failure_threshold=3,
            ),
            resources=ResourceRequirements(
                limits={"cpu": "1", "memory": "512Mi"},
                requests={"cpu": "150m", "memory": "250M"},
            ),
        )

        return Workload(
            metadata=ObjectMeta("zync", self._labels(options)),
            pod_template=PodTemplate(
                labels=pod_labels,
                init_containers=[init_container],
                containers=[container],
                service_account_name=SERVICE_ACCOUNT,
            ),
            replicas=1,
            selector={"deploymentConfig": "zync"},
            triggers=[
                DeploymentTrigger(),
                DeploymentTrigger.image_change(ZYNC_IMAGE, ["zync-db-svc", "zync"]),
            ],
        )

    def build_database_deployment(self, options: ZyncOptions) -> AuxiliaryWorkload:
        pod_labels = self._database_labels(options)
        pod_labels["deploymentConfig"] = DATABASE_NAME

        container = Container(
            name="postgresql",
            # resolved by the ImageChange trigger
            image=" ",
            ports=[ContainerPort(DATABASE_PORT)],
            volume_mounts=[
                VolumeMount("zync-database-data", "/var/lib/pgsql/data"),
            ],
            image_pull_policy="IfNotPresent",
            env=[
                EnvVar("POSTGRESQL_USER", DATABASE_USER),
                EnvVar.from_secret(
                    "POSTGRESQL_PASSWORD", SECRET_NAME, DATABASE_PASSWORD_KEY
                ),
                EnvVar("POSTGRESQL_DATABASE", DATABASE_DB),
            ],
            liveness_probe=Probe(
                TCPSocketAction(port=DATABASE_PORT),
                initial_delay_seconds=30,
                timeout_seconds=1,
            ),
            readiness_probe=Probe(
                ExecAction(
                    [
                        "/bin/sh",
                        "-i",
                        "-c",
                        f"psql -h 127.0.0.1 -U {DATABASE_USER} -q "
                        f"-d {DATABASE_DB} -c 'SELECT 1'",
                    ]
                ),
                initial_delay_seconds=5,
                timeout_seconds=1,
            ),
            resources=ResourceRequirements(
                limits={"cpu": "250m", "memory": "2G"},
                requests={"cpu": "50m", "memory": "250M"},
            ),
        )

        return AuxiliaryWorkload(
            metadata=ObjectMeta(DATABASE_NAME, self._database_labels(options)),
            pod_template=PodTemplate(
                labels=pod_labels,
                containers=[container],
                volumes=[Volume("zync-database-data")],
                restart_policy="Always",
            ),
            replicas=1,
            selector={"deploymentConfig": DATABASE_NAME},
            triggers=[
                DeploymentTrigger(),
                DeploymentTrigger.image_change(POSTGRESQL_IMAGE, ["postgresql"]),
            ],
            strategy=DeploymentStrategy(type="Recreate"),
        )

    def build_service(self, options: ZyncOptions) -> NetworkEndpoint:
        return NetworkEndpoint(
            metadata=ObjectMeta("zync", self._labels(options)),
            ports=[ServicePort("8080-tcp", ZYNC_PORT, ZYNC_PORT)],
            selector={"deploymentConfig": "zync"},
        )

    def build_database_service(self, options: ZyncOptions) -> NetworkEndpoint:
        return NetworkEndpoint(
            metadata=ObjectMeta(DATABASE_NAME, self._database_labels(options)),
            ports=[ServicePort("postgresql", DATABASE_PORT, DATABASE_PORT)],
            selector={"deploymentConfig": DATABASE_NAME},
        )

    def build_secret(self, options: ZyncOptions) -> Secret:
        return Secret(
            metadata=ObjectMeta(SECRET_NAME, self._labels(options)),
            string_data={
                SECRET_KEY_BASE_KEY: options.secret_key_base,
                DATABASE_URL_KEY: options.database_url,
                DATABASE_PASSWORD_KEY: options.database_password,
                AUTHENTICATION_TOKEN_KEY: options.authentication_token,
            },
        )
