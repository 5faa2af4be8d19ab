"""
Template Objects

Resource descriptors appended to a template: workloads, network endpoints and
secrets, together with the container-level structures they are built from.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, TypeVar, Union

T = TypeVar("T")


def clone_object(obj: T) -> T:
    """Return a structural deep copy of any descriptor."""
    return copy.deepcopy(obj)


@dataclass
class ObjectMeta:
    """Name and labels of a template object."""

    name: str
    labels: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.labels:
            result["labels"] = dict(self.labels)
        return result


@dataclass
class SecretKeyRef:
    """Reference to one key of a named secret."""

    secret_name: str
    key: str

    def to_dict(self) -> dict[str, Any]:
        return {"secretKeyRef": {"name": self.secret_name, "key": self.key}}


@dataclass
class EnvVar:
    """Environment binding, either literal or sourced from a secret."""

    name: str
    value: Optional[str] = None
    secret_ref: Optional[SecretKeyRef] = None

    @classmethod
    def from_secret(cls, name: str, secret_name: str, key: str) -> "EnvVar":
        return cls(name=name, secret_ref=SecretKeyRef(secret_name, key))

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.secret_ref:
            result["valueFrom"] = self.secret_ref.to_dict()
        elif self.value is not None:
            result["value"] = self.value
        return result


@dataclass
class ContainerPort:
    container_port: int
    protocol: str = "TCP"

    def to_dict(self) -> dict[str, Any]:
        return {"containerPort": self.container_port, "protocol": self.protocol}


@dataclass
class HTTPGetAction:
    path: str
    port: int
    scheme: str = "HTTP"

    def to_dict(self) -> dict[str, Any]:
        return {"httpGet": {"path": self.path, "port": self.port, "scheme": self.scheme}}


@dataclass
class TCPSocketAction:
    port: int

    def to_dict(self) -> dict[str, Any]:
        return {"tcpSocket": {"port": self.port}}


@dataclass
class ExecAction:
    command: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {"exec": {"command": list(self.command)}}


ProbeHandler = Union[HTTPGetAction, TCPSocketAction, ExecAction]


@dataclass
class Probe:
    """Health check with its timing."""

    handler: ProbeHandler
    initial_delay_seconds: int = 0
    timeout_seconds: int = 1
    period_seconds: Optional[int] = None
    success_threshold: Optional[int] = None
    failure_threshold: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        result = self.handler.to_dict()
        result["initialDelaySeconds"] = self.initial_delay_seconds
        result["timeoutSeconds"] = self.timeout_seconds
        if self.period_seconds is not None:
            result["periodSeconds"] = self.period_seconds
        if self.success_threshold is not None:
            result["successThreshold"] = self.success_threshold
        if self.failure_threshold is not None:
            result["failureThreshold"] = self.failure_threshold
        return result


@dataclass
class ResourceRequirements:
    """Resource limits and requests, keyed by resource name (cpu, memory)."""

    limits: dict[str, str] = field(default_factory=dict)
    requests: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result = {}
        if self.limits:
            result["limits"] = dict(self.limits)
        if self.requests:
            result["requests"] = dict(self.requests)
        return result


@dataclass
class VolumeMount:
    name: str
    mount_path: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "mountPath": self.mount_path}


@dataclass
class Volume:
    """Pod volume backed by an empty directory."""

    name: str
    medium: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "emptyDir": {"medium": self.medium}}


@dataclass
class Container:
    name: str
    image: str
    command: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)
    ports: list[ContainerPort] = field(default_factory=list)
    env: list[EnvVar] = field(default_factory=list)
    resources: Optional[ResourceRequirements] = None
    liveness_probe: Optional[Probe] = None
    readiness_probe: Optional[Probe] = None
    volume_mounts: list[VolumeMount] = field(default_factory=list)
    image_pull_policy: Optional[str] = None

    def get_env(self, name: str) -> Optional[EnvVar]:
        """Get an environment binding by name."""
        for env_var in self.env:
            if env_var.name == name:
                return env_var
        return None

    def set_env(self, env_var: EnvVar) -> None:
        """Add an environment binding, replacing one with the same name."""
        for index, existing in enumerate(self.env):
            if existing.name == env_var.name:
                self.env[index] = env_var
                return
        self.env.append(env_var)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name, "image": self.image}
        if self.command:
            result["command"] = list(self.command)
        if self.args:
            result["args"] = list(self.args)
        if self.ports:
            result["ports"] = [port.to_dict() for port in self.ports]
        if self.env:
            result["env"] = [env_var.to_dict() for env_var in self.env]
        if self.resources:
            result["resources"] = self.resources.to_dict()
        if self.liveness_probe:
            result["livenessProbe"] = self.liveness_probe.to_dict()
        if self.readiness_probe:
            result["readinessProbe"] = self.readiness_probe.to_dict()
        if self.volume_mounts:
            result["volumeMounts"] = [mount.to_dict() for mount in self.volume_mounts]
        if self.image_pull_policy:
            result["imagePullPolicy"] = self.image_pull_policy
        return result


@dataclass
class PodTemplate:
    labels: dict[str, str] = field(default_factory=dict)
    containers: list[Container] = field(default_factory=list)
    init_containers: list[Container] = field(default_factory=list)
    volumes: list[Volume] = field(default_factory=list)
    service_account_name: Optional[str] = None
    restart_policy: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        spec: dict[str, Any] = {}
        if self.service_account_name:
            spec["serviceAccountName"] = self.service_account_name
        if self.restart_policy:
            spec["restartPolicy"] = self.restart_policy
        if self.init_containers:
            spec["initContainers"] = [c.to_dict() for c in self.init_containers]
        spec["containers"] = [c.to_dict() for c in self.containers]
        if self.volumes:
            spec["volumes"] = [volume.to_dict() for volume in self.volumes]
        return {"metadata": {"labels": dict(self.labels)}, "spec": spec}


@dataclass
class DeploymentTrigger:
    """ConfigChange trigger, or ImageChange trigger when ``image`` is set."""

    type: str = "ConfigChange"
    container_names: list[str] = field(default_factory=list)
    image: Optional[str] = None
    automatic: bool = True

    @classmethod
    def image_change(cls, image: str, container_names: list[str]) -> "DeploymentTrigger":
        return cls(type="ImageChange", container_names=container_names, image=image)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.type}
        if self.image:
            result["imageChangeParams"] = {
                "automatic": self.automatic,
                "containerNames": list(self.container_names),
                "from": {"kind": "ImageStreamTag", "name": self.image},
            }
        return result


@dataclass
class RollingParams:
    update_period_seconds: int = 1
    interval_seconds: int = 1
    timeout_seconds: int = 600
    max_unavailable: str = "25%"
    max_surge: str = "25%"

    def to_dict(self) -> dict[str, Any]:
        return {
            "updatePeriodSeconds": self.update_period_seconds,
            "intervalSeconds": self.interval_seconds,
            "timeoutSeconds": self.timeout_seconds,
            "maxUnavailable": self.max_unavailable,
            "maxSurge": self.max_surge,
        }


@dataclass
class DeploymentStrategy:
    type: str = "Rolling"
    rolling_params: Optional[RollingParams] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.type}
        if self.rolling_params:
            result["rollingParams"] = self.rolling_params.to_dict()
        return result


@dataclass
class Workload:
    """Primary deployable workload of a component."""

    KIND: ClassVar[str] = "DeploymentConfig"
    API_VERSION: ClassVar[str] = "apps.openshift.io/v1"

    metadata: ObjectMeta
    pod_template: PodTemplate
    replicas: int = 1
    selector: dict[str, str] = field(default_factory=dict)
    triggers: list[DeploymentTrigger] = field(default_factory=list)
    strategy: Optional[DeploymentStrategy] = None

    @property
    def name(self) -> str:
        return self.metadata.name

    def get_container(self, name: str) -> Optional[Container]:
        """Get a container (init containers included) by name."""
        for container in self.pod_template.init_containers + self.pod_template.containers:
            if container.name == name:
                return container
        return None

    def to_dict(self) -> dict[str, Any]:
        spec: dict[str, Any] = {}
        if self.strategy:
            spec["strategy"] = self.strategy.to_dict()
        spec["triggers"] = [trigger.to_dict() for trigger in self.triggers]
        spec["replicas"] = self.replicas
        spec["selector"] = dict(self.selector)
        spec["template"] = self.pod_template.to_dict()
        return {
            "apiVersion": self.API_VERSION,
            "kind": self.KIND,
            "metadata": self.metadata.to_dict(),
            "spec": spec,
        }


@dataclass
class AuxiliaryWorkload(Workload):
    """Supporting workload (for example a database) backing a primary one."""


@dataclass
class ServicePort:
    name: str
    port: int
    target_port: int
    protocol: str = "TCP"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "protocol": self.protocol,
            "port": self.port,
            "targetPort": self.target_port,
        }


@dataclass
class NetworkEndpoint:
    """Service exposing a workload's ports."""

    KIND: ClassVar[str] = "Service"
    API_VERSION: ClassVar[str] = "v1"

    metadata: ObjectMeta
    ports: list[ServicePort] = field(default_factory=list)
    selector: dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.metadata.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": self.API_VERSION,
            "kind": self.KIND,
            "metadata": self.metadata.to_dict(),
            "spec": {
                "ports": [port.to_dict() for port in self.ports],
                "selector": dict(self.selector),
            },
        }


@dataclass
class Secret:
    """Key-value secret material."""

    KIND: ClassVar[str] = "Secret"
    API_VERSION: ClassVar[str] = "v1"

    metadata: ObjectMeta
    string_data: dict[str, str] = field(default_factory=dict)
    type: str = "Opaque"

    @property
    def name(self) -> str:
        return self.metadata.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": self.API_VERSION,
            "kind": self.KIND,
            "metadata": self.metadata.to_dict(),
            "stringData": dict(self.string_data),
            "type": self.type,
        }


TemplateObject = Union[Workload, AuxiliaryWorkload, NetworkEndpoint, Secret]
