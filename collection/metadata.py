"""Identity and property records used to correlate Kubernetes entities"""
from dataclasses import dataclass, field
from typing import Dict


@dataclass
class KubernetesMetadata:
    """Properties of one entity keyed by its identity.

    ``resource_id_key`` is one of the shared identity keys in
    ``collection.constants`` so records from pods, containers and nodes can
    be joined on (key, id).
    """
    resource_id_key: str
    resource_id: str
    properties: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.properties = dict(self.properties)
