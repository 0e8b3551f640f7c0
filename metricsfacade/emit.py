"""Emission of counter, gauge and histogram updates to the installed recorder."""

from __future__ import annotations

import numbers

from metricsfacade.common import GaugeValue, into_f64
from metricsfacade.key import KeyData
from metricsfacade.recorder import recorder

_U64_MAX = 2**64 - 1


def _build_key(name: object, labels: object) -> KeyData:
    return KeyData.from_parts(name, labels)


def _counter_value(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(
            f"counter values must be integers, got {type(value).__name__}"
        )
    count = int(value)
    if not 0 <= count <= _U64_MAX:
        raise ValueError(f"counter value {count} is outside the unsigned 64-bit range")
    return count


def _gauge_value(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"gauge values must be numbers, got {type(value).__name__}")
    return float(value)


def increment_counter(name: object, labels: object = None) -> None:
    """Increments a counter by one."""
    recorder().increment_counter(_build_key(name, labels), 1)


def counter(name: object, value: int, labels: object = None) -> None:
    """Increments a counter by ``value``, a non-negative integer."""
    amount = _counter_value(value)
    recorder().increment_counter(_build_key(name, labels), amount)


def gauge(name: object, value: float, labels: object = None) -> None:
    """Sets a gauge to ``value``."""
    update = GaugeValue.absolute(_gauge_value(value))
    recorder().update_gauge(_build_key(name, labels), update)


def increment_gauge(name: object, value: float, labels: object = None) -> None:
    """Increments a gauge by ``value``."""
    update = GaugeValue.increment(_gauge_value(value))
    recorder().update_gauge(_build_key(name, labels), update)


def decrement_gauge(name: object, value: float, labels: object = None) -> None:
    """Decrements a gauge by ``value``."""
    update = GaugeValue.decrement(_gauge_value(value))
    recorder().update_gauge(_build_key(name, labels), update)


def histogram(name: object, value: object, labels: object = None) -> None:
    """Records one histogram observation.

    ``value`` may be a number or a ``timedelta``, which is recorded in seconds.
    """
    observation = into_f64(value)
    recorder().record_histogram(_build_key(name, labels), observation)