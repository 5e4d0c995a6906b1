"""Keys and type tags shared by every Kubernetes entity translator"""
from metrics.semantic_conventions import (
    ATTRIBUTE_CONTAINER_ID,
    ATTRIBUTE_CONTAINER_IMAGE,
    ATTRIBUTE_K8S_CLUSTER_NAME,
    ATTRIBUTE_K8S_NAMESPACE_NAME,
    ATTRIBUTE_K8S_NODE_NAME,
    ATTRIBUTE_K8S_POD_NAME,
    ATTRIBUTE_K8S_POD_UID,
)

# Resource type of container envelopes
CONTAINER_TYPE = "container"

# Identity keys. Metadata records are joined on these across entity kinds.
CONTAINER_KEY_ID = ATTRIBUTE_CONTAINER_ID
CONTAINER_KEY_SPEC_NAME = "container.spec.name"
CONTAINER_KEY_IMAGE = ATTRIBUTE_CONTAINER_IMAGE
K8S_KEY_POD_UID = ATTRIBUTE_K8S_POD_UID
K8S_KEY_POD_NAME = ATTRIBUTE_K8S_POD_NAME
K8S_KEY_NAMESPACE_NAME = ATTRIBUTE_K8S_NAMESPACE_NAME
K8S_KEY_NODE_NAME = ATTRIBUTE_K8S_NODE_NAME
K8S_KEY_CLUSTER_NAME = ATTRIBUTE_K8S_CLUSTER_NAME
K8S_POD_LABEL_PREFIX = "k8s.pod.label."

# Label key of request/limit series
RESOURCE_LABEL_KEY = "resource"

# Container metadata properties
CONTAINER_KEY_STATUS = "container.status"
CONTAINER_KEY_STATUS_REASON = "container.status.reason"

CONTAINER_STATUS_RUNNING = "running"
CONTAINER_STATUS_WAITING = "waiting"
CONTAINER_STATUS_TERMINATED = "terminated"

# Resource names with special unit handling
RESOURCE_CPU = "cpu"
