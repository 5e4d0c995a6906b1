"""Translation of Kubernetes container state into metrics and metadata"""
from .containers import (
    ContainerTranslation,
    get_all_container_labels,
    get_metadata_for_container,
    get_resource_for_container,
    get_spec_metrics_for_container,
    get_status_metrics_for_container,
    translate_container,
)
from .metadata import KubernetesMetadata
from .models import ContainerResources, ContainerSpec, ContainerStatus, Running, Terminated, Waiting

__all__ = [
    'ContainerTranslation',
    'get_all_container_labels',
    'get_metadata_for_container',
    'get_resource_for_container',
    'get_spec_metrics_for_container',
    'get_status_metrics_for_container',
    'translate_container',
    'KubernetesMetadata',
    'ContainerResources',
    'ContainerSpec',
    'ContainerStatus',
    'Running',
    'Terminated',
    'Waiting',
]
