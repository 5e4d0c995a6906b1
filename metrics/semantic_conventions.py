"""OpenTelemetry semantic convention names used for resource labels"""
from enum import Enum


class MetricUnit(Enum):
    """Metric units used by the descriptor catalog"""
    COUNT = "1"
    DIMENSIONLESS = ""


# Container attributes
ATTRIBUTE_CONTAINER_ID = "container.id"
ATTRIBUTE_CONTAINER_IMAGE = "container.image.name"

# Kubernetes attributes
ATTRIBUTE_K8S_CLUSTER_NAME = "k8s.cluster.name"
ATTRIBUTE_K8S_NAMESPACE_NAME = "k8s.namespace.name"
ATTRIBUTE_K8S_NODE_NAME = "k8s.node.name"
ATTRIBUTE_K8S_POD_NAME = "k8s.pod.name"
ATTRIBUTE_K8S_POD_UID = "k8s.pod.uid"

# Resource type attribute used when a typed resource is flattened to attributes
ATTRIBUTE_RESOURCE_TYPE = "opencensus.resourcetype"
