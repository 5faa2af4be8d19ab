"""
Template Module

Parameters, resource descriptors, the template accumulator and its serializer.
"""

from .objects import (
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
    PodTemplate,
    Probe,
    ResourceRequirements,
    RollingParams,
    Secret,
    SecretKeyRef,
    ServicePort,
    TCPSocketAction,
    TemplateObject,
    Volume,
    VolumeMount,
    Workload,
    clone_object,
)
from .parameter import Parameter
from .serializer import TemplateSerializer
from .template import Template

__all__ = [
    "Template",
    "Parameter",
    "TemplateSerializer",
    "TemplateObject",
    "Workload",
    "AuxiliaryWorkload",
    "NetworkEndpoint",
    "Secret",
    "ObjectMeta",
    "PodTemplate",
    "Container",
    "ContainerPort",
    "EnvVar",
    "SecretKeyRef",
    "Probe",
    "HTTPGetAction",
    "TCPSocketAction",
    "ExecAction",
    "ResourceRequirements",
    "Volume",
    "VolumeMount",
    "DeploymentTrigger",
    "DeploymentStrategy",
    "RollingParams",
    "ServicePort",
    "clone_object",
]
