"""Small helpers shared by the Kubernetes translators"""
import re
from typing import Dict, Mapping, Optional

# Runtime scheme in front of a container ID, e.g. docker:// or cri-o://
_CONTAINER_ID_PREFIX = re.compile(r'^[\w-]+://')


def strip_container_id(container_id: Optional[str]) -> str:
    """Remove the runtime scheme from a container ID"""
    if not container_id:
        return ""
    return _CONTAINER_ID_PREFIX.sub("", container_id, count=1)


def clone_string_map(source: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Independent copy of a string mapping"""
    if not source:
        return {}
    return dict(source)
