"""Metrics, resource and metadata for a single Kubernetes container"""
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional
from metrics.models import Metric, Resource
from metrics.timeseries import get_int64_timeseries, get_int64_timeseries_with_labels
from logging_config import get_logger, bind_container, log_container_translation
from .catalog import CONTAINER_LIMIT, CONTAINER_READY, CONTAINER_REQUEST, CONTAINER_RESTARTS
from .constants import (
    CONTAINER_KEY_ID,
    CONTAINER_KEY_IMAGE,
    CONTAINER_KEY_SPEC_NAME,
    CONTAINER_KEY_STATUS,
    CONTAINER_KEY_STATUS_REASON,
    CONTAINER_STATUS_RUNNING,
    CONTAINER_STATUS_TERMINATED,
    CONTAINER_STATUS_WAITING,
    CONTAINER_TYPE,
    RESOURCE_CPU,
    RESOURCE_LABEL_KEY,
)
from .metadata import KubernetesMetadata
from .models import ContainerSpec, ContainerStatus, Running, Terminated, Waiting
from .quantity import quantity_milli_value, quantity_value
from .utils import clone_string_map, strip_container_id


logger = get_logger(__name__)


@dataclass
class ContainerTranslation:
    """Everything produced for one container"""
    metrics: List[Metric]
    resource: Resource
    metadata: KubernetesMetadata
    dropped: List[str] = field(default_factory=list)


def get_status_metrics_for_container(status: ContainerStatus) -> List[Metric]:
    """Restart count and readiness of the container"""
    return [
        Metric(CONTAINER_RESTARTS, [get_int64_timeseries(int(status.restart_count))]),
        Metric(CONTAINER_READY, [get_int64_timeseries(1 if status.ready else 0)]),
    ]


def get_status_properties(status: ContainerStatus) -> Dict[str, str]:
    """Lifecycle properties; empty when the state is unknown"""
    state = status.state
    if isinstance(state, Running):
        return {CONTAINER_KEY_STATUS: CONTAINER_STATUS_RUNNING}
    if isinstance(state, Terminated):
        return {
            CONTAINER_KEY_STATUS: CONTAINER_STATUS_TERMINATED,
            CONTAINER_KEY_STATUS_REASON: state.reason,
        }
    if isinstance(state, Waiting):
        return {
            CONTAINER_KEY_STATUS: CONTAINER_STATUS_WAITING,
            CONTAINER_KEY_STATUS_REASON: state.reason,
        }
    return {}


def get_spec_metrics_for_container(spec: ContainerSpec, dropped: Optional[List[str]] = None) -> List[Metric]:
    """Request and limit metrics with one series per declared resource.

    CPU is reported in millicores, every other resource in base units.
    Quantities that cannot be parsed or do not fit in int64 are skipped
    and their ``"<metric>/<resource>"`` names appended to ``dropped``
    when given.
    """
    metrics = []

    for descriptor, resource_list in (
        (CONTAINER_REQUEST, spec.resources.requests),
        (CONTAINER_LIMIT, spec.resources.limits),
    ):
        metric = Metric(descriptor)
        for resource_name, quantity in (resource_list or {}).items():
            try:
                if resource_name == RESOURCE_CPU:
                    value = quantity_milli_value(quantity)
                else:
                    value = quantity_value(quantity)
            except (ValueError, ArithmeticError) as e:
                logger.warning(
                    "Skipping unusable resource quantity",
                    container_name=spec.name,
                    metric=descriptor.name,
                    resource=resource_name,
                    quantity=str(quantity),
                    error=str(e),
                    event_type="quantity_dropped",
                )
                if dropped is not None:
                    dropped.append(f"{descriptor.name}/{resource_name}")
                continue

            metric.add(get_int64_timeseries_with_labels(value, [(RESOURCE_LABEL_KEY, resource_name)]))
        metrics.append(metric)

    return metrics


def get_all_container_labels(status: ContainerStatus, dims: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Container labels layered over the inherited (pod) dimensions"""
    out = clone_string_map(dims)

    out[CONTAINER_KEY_ID] = strip_container_id(status.container_id)
    out[CONTAINER_KEY_SPEC_NAME] = status.name
    out[CONTAINER_KEY_IMAGE] = status.image

    return out


def get_resource_for_container(labels: Mapping[str, str]) -> Resource:
    return Resource(type=CONTAINER_TYPE, labels=labels)


def get_metadata_for_container(status: ContainerStatus) -> KubernetesMetadata:
    return KubernetesMetadata(
        resource_id_key=CONTAINER_KEY_ID,
        resource_id=strip_container_id(status.container_id),
        properties=get_status_properties(status),
    )


def translate_container(
    status: ContainerStatus,
    spec: Optional[ContainerSpec] = None,
    dims: Optional[Mapping[str, str]] = None,
) -> ContainerTranslation:
    """Status and spec metrics plus the resource and metadata of one container"""
    log = bind_container(logger, status.name, strip_container_id(status.container_id))

    dropped: List[str] = []
    metrics = get_status_metrics_for_container(status)
    if spec is not None:
        metrics.extend(get_spec_metrics_for_container(spec, dropped))

    if status.state is None:
        log.debug("Container state unknown, no status property recorded")

    translation = ContainerTranslation(
        metrics=metrics,
        resource=get_resource_for_container(get_all_container_labels(status, dims)),
        metadata=get_metadata_for_container(status),
        dropped=dropped,
    )

    log_container_translation(
        log,
        container_name=status.name,
        metrics_count=len(metrics),
        timeseries_count=sum(len(m.timeseries) for m in metrics),
        dropped=len(dropped),
    )
    return translation
