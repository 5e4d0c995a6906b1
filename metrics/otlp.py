"""Conversion of translated metrics into OTLP protobuf messages

Only builds messages; sending them is the exporter's job.
"""
import time
from typing import Dict, Iterable, List, Optional
from opentelemetry.proto.collector.metrics.v1 import metrics_service_pb2
from opentelemetry.proto.common.v1 import common_pb2
from opentelemetry.proto.metrics.v1 import metrics_pb2
from opentelemetry.proto.resource.v1 import resource_pb2
from config import Config
from logging_config import get_logger
from .models import Metric, Resource
from .semantic_conventions import ATTRIBUTE_RESOURCE_TYPE


logger = get_logger(__name__)


def _convert_labels_to_attributes(labels: Dict[str, str]) -> List[common_pb2.KeyValue]:
    """Convert labels to OTLP attributes"""
    return [
        common_pb2.KeyValue(key=key, value=common_pb2.AnyValue(string_value=str(value)))
        for key, value in labels.items()
    ]


def to_otlp_metric(metric: Metric, timestamp: Optional[float] = None) -> Optional[metrics_pb2.Metric]:
    """OTLP gauge for a metric, None when it has no time series"""
    if not metric.timeseries:
        return None

    time_unix_nano = int((timestamp or time.time()) * 1_000_000_000)
    descriptor = metric.descriptor

    data_points = []
    for ts in metric.timeseries:
        attributes = _convert_labels_to_attributes({label.key: label.value for label in ts.labels})
        data_points.append(metrics_pb2.NumberDataPoint(
            attributes=attributes,
            time_unix_nano=time_unix_nano,
            as_int=int(ts.value),
        ))

    return metrics_pb2.Metric(
        name=descriptor.name,
        description=descriptor.description,
        unit=descriptor.unit,
        gauge=metrics_pb2.Gauge(data_points=data_points),
    )


def to_otlp_resource(resource: Resource) -> resource_pb2.Resource:
    """OTLP resource; the type tag becomes an attribute"""
    attributes = dict(resource.labels)
    attributes[ATTRIBUTE_RESOURCE_TYPE] = resource.type
    return resource_pb2.Resource(attributes=_convert_labels_to_attributes(attributes))


def to_resource_metrics(
    metrics: Iterable[Metric],
    resource: Resource,
    config: Optional[Config] = None,
    timestamp: Optional[float] = None,
) -> metrics_pb2.ResourceMetrics:
    """Metrics of one resource grouped under a single instrumentation scope"""
    metrics = list(metrics)
    otlp_metrics = []
    for metric in metrics:
        otlp_metric = to_otlp_metric(metric, timestamp)
        if otlp_metric is not None:
            otlp_metrics.append(otlp_metric)

    scope = (config or Config()).get_otlp_scope()

    logger.debug(
        "Built OTLP resource metrics",
        resource_type=resource.type,
        metric_count=len(metrics),
        otlp_metric_count=len(otlp_metrics),
        event_type="otlp_convert",
    )

    return metrics_pb2.ResourceMetrics(
        resource=to_otlp_resource(resource),
        scope_metrics=[
            metrics_pb2.ScopeMetrics(
                scope=common_pb2.InstrumentationScope(name=scope["name"], version=scope["version"]),
                metrics=otlp_metrics,
            )
        ],
    )


def build_export_request(resource_metrics: Iterable[metrics_pb2.ResourceMetrics]) -> metrics_service_pb2.ExportMetricsServiceRequest:
    return metrics_service_pb2.ExportMetricsServiceRequest(resource_metrics=list(resource_metrics))
