"""Vendor-neutral metric model and OTLP conversion"""
from .models import LabelKeyValue, Metric, MetricDescriptor, MetricType, Resource, TimeSeries

__all__ = [
    'LabelKeyValue',
    'Metric',
    'MetricDescriptor',
    'MetricType',
    'Resource',
    'TimeSeries',
]
