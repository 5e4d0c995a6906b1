"""Helpers that wrap scalar values into time series"""
from typing import Iterable, Tuple
from .models import LabelKeyValue, TimeSeries


def get_int64_timeseries(value: int) -> TimeSeries:
    """Unlabeled time series holding a single integer value"""
    return TimeSeries(value=int(value))


def get_int64_timeseries_with_labels(value: int, labels: Iterable[Tuple[str, str]]) -> TimeSeries:
    """Integer time series with ordered (key, value) label pairs"""
    return TimeSeries(
        value=int(value),
        labels=tuple(LabelKeyValue(key=key, value=str(label_value)) for key, label_value in labels),
    )
