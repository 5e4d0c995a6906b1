"""Container status and spec as seen by the translators"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional, Union


@dataclass(frozen=True)
class Running:
    """Container is running"""


@dataclass(frozen=True)
class Waiting:
    """Container is waiting to start"""
    reason: str = ""


@dataclass(frozen=True)
class Terminated:
    """Container has terminated"""
    reason: str = ""


ContainerState = Union[Running, Waiting, Terminated]

Quantity = Union[str, int, float, Decimal]


@dataclass(frozen=True)
class ContainerStatus:
    """Runtime status of one container.

    ``state`` is None when the lifecycle state is unknown.
    """
    name: str
    container_id: str = ""
    image: str = ""
    restart_count: int = 0
    ready: bool = False
    state: Optional[ContainerState] = None


@dataclass
class ContainerResources:
    """Declared resource requests and limits keyed by resource name"""
    requests: Dict[str, Quantity] = field(default_factory=dict)
    limits: Dict[str, Quantity] = field(default_factory=dict)


@dataclass
class ContainerSpec:
    """Declared spec of one container"""
    name: str
    resources: ContainerResources = field(default_factory=ContainerResources)
