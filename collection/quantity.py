"""Integer views of Kubernetes resource quantities"""
from decimal import ROUND_UP, Decimal
from kubernetes.utils import parse_quantity
from .models import Quantity

_MILLI = Decimal(1000)

# Series values are int64 gauges
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _parse(quantity: Quantity) -> Decimal:
    # Floats go through repr so 0.1 parses as exactly 0.1
    if isinstance(quantity, float):
        quantity = repr(quantity)
    return parse_quantity(quantity)


def _to_int64(value: Decimal) -> int:
    result = int(value.to_integral_value(rounding=ROUND_UP))
    if not INT64_MIN <= result <= INT64_MAX:
        raise ValueError(f"{result} does not fit in int64")
    return result


def quantity_value(quantity: Quantity) -> int:
    """Quantity in base units, rounded away from zero.

    Raises ValueError when the quantity cannot be parsed or exceeds int64.
    """
    return _to_int64(_parse(quantity))


def quantity_milli_value(quantity: Quantity) -> int:
    """Quantity in thousandths of a unit, rounded away from zero.

    Raises ValueError when the quantity cannot be parsed or exceeds int64.
    """
    return _to_int64(_parse(quantity) * _MILLI)
