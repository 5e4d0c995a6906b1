"""Conversion from kubernetes.client objects to the translator models

The generated client models mirror the API and change with it. Only this
module touches them; the translators work on ``collection.models``.
"""
from typing import Optional
from kubernetes.client import V1Container, V1ContainerState, V1ContainerStatus
from logging_config import get_logger
from .models import (
    ContainerResources,
    ContainerSpec,
    ContainerState,
    ContainerStatus,
    Running,
    Terminated,
    Waiting,
)


logger = get_logger(__name__)


def container_state_from_k8s(state: Optional[V1ContainerState], container_name: str = "") -> Optional[ContainerState]:
    """Exactly one of running/waiting/terminated, or None"""
    if state is None:
        return None

    markers = []
    if state.running is not None:
        markers.append(Running())
    if state.waiting is not None:
        markers.append(Waiting(reason=state.waiting.reason or ""))
    if state.terminated is not None:
        markers.append(Terminated(reason=state.terminated.reason or ""))

    if len(markers) == 1:
        return markers[0]

    logger.warning(
        "Container state does not have exactly one marker",
        container_name=container_name,
        markers=[type(marker).__name__.lower() for marker in markers],
        event_type="container_state_ambiguous",
    )
    return None


def container_status_from_k8s(status: V1ContainerStatus) -> ContainerStatus:
    return ContainerStatus(
        name=status.name or "",
        container_id=status.container_id or "",
        image=status.image or "",
        restart_count=status.restart_count if status.restart_count is not None else 0,
        ready=bool(status.ready),
        state=container_state_from_k8s(status.state, status.name or ""),
    )


def container_spec_from_k8s(container: V1Container) -> ContainerSpec:
    resources = container.resources
    return ContainerSpec(
        name=container.name or "",
        resources=ContainerResources(
            requests=dict(resources.requests or {}) if resources is not None else {},
            limits=dict(resources.limits or {}) if resources is not None else {},
        ),
    )
