"""Vendor-neutral metric models"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple


class MetricType(Enum):
    """Value types a descriptor can declare"""
    GAUGE_INT64 = "gauge_int64"


@dataclass(frozen=True)
class MetricDescriptor:
    """Name, unit, type and label schema shared by every series of a metric"""
    name: str
    description: str
    unit: str = ""
    metric_type: MetricType = MetricType.GAUGE_INT64
    label_keys: Tuple[str, ...] = ()

    def __post_init__(self):
        # Lists passed by callers are frozen into tuples
        object.__setattr__(self, "label_keys", tuple(self.label_keys))


@dataclass(frozen=True)
class LabelKeyValue:
    """A label value paired with the key it belongs to"""
    key: str
    value: str


@dataclass(frozen=True)
class TimeSeries:
    """One observed value plus its ordered labels"""
    value: int
    labels: Tuple[LabelKeyValue, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "labels", tuple(self.labels))

    @property
    def label_keys(self) -> Tuple[str, ...]:
        return tuple(label.key for label in self.labels)

    @property
    def label_values(self) -> Tuple[str, ...]:
        return tuple(label.value for label in self.labels)


@dataclass
class Metric:
    """A descriptor and the time series observed for it"""
    descriptor: MetricDescriptor
    timeseries: List[TimeSeries] = field(default_factory=list)

    def __post_init__(self):
        self.timeseries = list(self.timeseries)
        for ts in self.timeseries:
            self._check_labels(ts)

    def _check_labels(self, ts: TimeSeries) -> None:
        if ts.label_keys != self.descriptor.label_keys:
            raise ValueError(
                f"Time series labels {ts.label_keys} do not match "
                f"{self.descriptor.name} label keys {self.descriptor.label_keys}"
            )

    def add(self, ts: TimeSeries) -> None:
        """Append a time series after checking it against the descriptor"""
        self._check_labels(ts)
        self.timeseries.append(ts)


@dataclass
class Resource:
    """Entity type plus the labels identifying it"""
    type: str
    labels: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Never share the caller's mapping
        self.labels = dict(self.labels)
