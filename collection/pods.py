"""Per-pod fan out over the containers of a Kubernetes pod"""
from typing import Dict, List, Optional
from kubernetes.client import V1Pod
from config import Config
from logging_config import get_logger, log_error
from .adapters import container_spec_from_k8s, container_status_from_k8s
from .constants import (
    K8S_KEY_CLUSTER_NAME,
    K8S_KEY_NAMESPACE_NAME,
    K8S_KEY_NODE_NAME,
    K8S_KEY_POD_NAME,
    K8S_KEY_POD_UID,
    K8S_POD_LABEL_PREFIX,
)
from .containers import ContainerTranslation, translate_container


logger = get_logger(__name__)


def get_pod_dimensions(pod: V1Pod, config: Optional[Config] = None) -> Dict[str, str]:
    """Labels every container of the pod inherits"""
    dims: Dict[str, str] = {}
    metadata = pod.metadata
    spec = pod.spec

    if config is not None and config.cluster_name:
        dims[K8S_KEY_CLUSTER_NAME] = config.cluster_name

    if metadata is not None:
        include_labels = config.include_pod_labels if config is not None else True
        if include_labels:
            for key, value in (metadata.labels or {}).items():
                dims[K8S_POD_LABEL_PREFIX + key] = value
        if metadata.uid:
            dims[K8S_KEY_POD_UID] = metadata.uid
        if metadata.name:
            dims[K8S_KEY_POD_NAME] = metadata.name
        if metadata.namespace:
            dims[K8S_KEY_NAMESPACE_NAME] = metadata.namespace

    if spec is not None and spec.node_name:
        dims[K8S_KEY_NODE_NAME] = spec.node_name

    return dims


def get_container_translations(pod: V1Pod, config: Optional[Config] = None) -> List[ContainerTranslation]:
    """Translate every container that has a reported status.

    Specs are matched to statuses by container name. A container that fails
    to translate is logged and skipped.
    """
    statuses = (pod.status.container_statuses if pod.status is not None else None) or []
    containers = (pod.spec.containers if pod.spec is not None else None) or []
    specs = {container.name: container for container in containers}
    dims = get_pod_dimensions(pod, config)

    translations = []
    for k8s_status in statuses:
        try:
            status = container_status_from_k8s(k8s_status)
            k8s_spec = specs.get(status.name)
            spec = container_spec_from_k8s(k8s_spec) if k8s_spec is not None else None
            translations.append(translate_container(status, spec, dims))
        except Exception as e:
            log_error(logger, e, {
                "pod": dims.get(K8S_KEY_POD_NAME, ""),
                "container": getattr(k8s_status, "name", ""),
            })

    logger.debug(
        "Pod containers translated",
        pod=dims.get(K8S_KEY_POD_NAME, ""),
        containers=len(translations),
        statuses=len(statuses),
        event_type="pod_translation",
    )
    return translations
