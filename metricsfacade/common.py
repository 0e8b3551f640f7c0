"""Shared value types: gauge updates, metric units and histogram value coercion."""

from __future__ import annotations

import enum
import numbers
from dataclasses import dataclass
from datetime import timedelta


class GaugeOp(enum.Enum):
    """The kind of change a gauge update applies."""

    ABSOLUTE = "absolute"
    INCREMENT = "increment"
    DECREMENT = "decrement"


@dataclass(frozen=True)
class GaugeValue:
    """A single gauge operation: set, increment or decrement by ``value``."""

    op: GaugeOp
    value: float

    @classmethod
    def absolute(cls, value: float) -> GaugeValue:
        """Sets the gauge to ``value``."""
        return cls(GaugeOp.ABSOLUTE, float(value))

    @classmethod
    def increment(cls, value: float) -> GaugeValue:
        """Increments the gauge by ``value``."""
        return cls(GaugeOp.INCREMENT, float(value))

    @classmethod
    def decrement(cls, value: float) -> GaugeValue:
        """Decrements the gauge by ``value``."""
        return cls(GaugeOp.DECREMENT, float(value))

    def update_value(self, input: float) -> float:
        """Returns the gauge value that results from applying this operation to ``input``."""
        if self.op is GaugeOp.ABSOLUTE:
            return self.value
        if self.op is GaugeOp.INCREMENT:
            return input + self.value
        return input - self.value


_CANONICAL_LABELS = {
    "count": "",
    "percent": "%",
    "seconds": "s",
    "milliseconds": "ms",
    "microseconds": "μs",
    "nanoseconds": "ns",
    "tebibytes": "TiB",
    "gigibytes": "GiB",
    "mebibytes": "MiB",
    "kibibytes": "KiB",
    "bytes": "B",
    "terabits_per_second": "Tbps",
    "gigabits_per_second": "Gbps",
    "megabits_per_second": "Mbps",
    "kilobits_per_second": "kbps",
    "bits_per_second": "bps",
    "count_per_second": "/s",
}


class Unit(enum.Enum):
    """Units a metric can be registered with."""

    COUNT = "count"
    PERCENT = "percent"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"
    TEBIBYTES = "tebibytes"
    GIGIBYTES = "gigibytes"
    MEBIBYTES = "mebibytes"
    KIBIBYTES = "kibibytes"
    BYTES = "bytes"
    TERABITS_PER_SECOND = "terabits_per_second"
    GIGABITS_PER_SECOND = "gigabits_per_second"
    MEGABITS_PER_SECOND = "megabits_per_second"
    KILOBITS_PER_SECOND = "kilobits_per_second"
    BITS_PER_SECOND = "bits_per_second"
    COUNT_PER_SECOND = "count_per_second"

    def as_str(self) -> str:
        """The string form of this unit."""
        return self.value

    def canonical_label(self) -> str:
        """The short display label for this unit; empty where none is meaningful."""
        return _CANONICAL_LABELS[self.value]

    @classmethod
    def from_string(cls, s: str) -> Unit | None:
        """Parses the output of :meth:`as_str` back into a unit, or returns ``None``."""
        try:
            return cls(s)
        except ValueError:
            return None

    def is_time_based(self) -> bool:
        """Whether this unit measures time."""
        return self in _TIME_UNITS

    def is_data_based(self) -> bool:
        """Whether this unit measures data."""
        return self in _DATA_UNITS

    def is_data_rate_based(self) -> bool:
        """Whether this unit measures a data rate."""
        return self in _DATA_RATE_UNITS


_TIME_UNITS = frozenset(
    {Unit.SECONDS, Unit.MILLISECONDS, Unit.MICROSECONDS, Unit.NANOSECONDS}
)
_DATA_RATE_UNITS = frozenset(
    {
        Unit.TERABITS_PER_SECOND,
        Unit.GIGABITS_PER_SECOND,
        Unit.MEGABITS_PER_SECOND,
        Unit.KILOBITS_PER_SECOND,
        Unit.BITS_PER_SECOND,
    }
)
_DATA_UNITS = frozenset(
    {Unit.TEBIBYTES, Unit.GIGIBYTES, Unit.MEBIBYTES, Unit.KIBIBYTES, Unit.BYTES}
) | _DATA_RATE_UNITS


def into_f64(value: object) -> float:
    """Converts a histogram value to a float.

    Numbers pass through as floats, a ``timedelta`` becomes its length in seconds,
    and any other object that defines ``__float__`` is converted with ``float()``.
    """
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, bool) or isinstance(value, (str, bytes, bytearray)):
        raise TypeError(f"cannot use {type(value).__name__} as a histogram value")
    if isinstance(value, numbers.Real) or hasattr(type(value), "__float__"):
        return float(value)  # type: ignore[arg-type]
    raise TypeError(f"cannot use {type(value).__name__} as a histogram value")