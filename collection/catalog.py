"""Descriptors of the container metrics

Descriptors are built once at import time and shared by every metric
produced for them. They are frozen dataclasses; the index is read-only.
"""
from types import MappingProxyType
from metrics.models import MetricDescriptor, MetricType
from metrics.semantic_conventions import MetricUnit
from .constants import RESOURCE_LABEL_KEY


CONTAINER_RESTARTS = MetricDescriptor(
    name="kubernetes/container/restarts",
    description=(
        "How many times the container has restarted in the recent past. "
        "This value is pulled directly from the K8s API and the value can go indefinitely high"
        " and be reset to 0 at any time depending on how your kubelet is configured to prune"
        " dead containers. It is best to not depend too much on the exact value but rather look"
        " at it as either == 0, in which case you can conclude there were no restarts in the recent"
        " past, or > 0, in which case you can conclude there were restarts in the recent past, and"
        " not try and analyze the value beyond that."
    ),
    unit=MetricUnit.COUNT.value,
    metric_type=MetricType.GAUGE_INT64,
)

CONTAINER_READY = MetricDescriptor(
    name="kubernetes/container/ready",
    description="Whether a container has passed its readiness probe (0 for no, 1 for yes)",
    unit=MetricUnit.DIMENSIONLESS.value,
    metric_type=MetricType.GAUGE_INT64,
)

CONTAINER_REQUEST = MetricDescriptor(
    name="kubernetes/container/request",
    description="Resource requested for the container",
    unit=MetricUnit.DIMENSIONLESS.value,
    metric_type=MetricType.GAUGE_INT64,
    label_keys=(RESOURCE_LABEL_KEY,),
)

CONTAINER_LIMIT = MetricDescriptor(
    name="kubernetes/container/limit",
    description="Maximum resource limit set for the container",
    unit=MetricUnit.DIMENSIONLESS.value,
    metric_type=MetricType.GAUGE_INT64,
    label_keys=(RESOURCE_LABEL_KEY,),
)

CATALOG = MappingProxyType({
    descriptor.name: descriptor
    for descriptor in (CONTAINER_RESTARTS, CONTAINER_READY, CONTAINER_REQUEST, CONTAINER_LIMIT)
})