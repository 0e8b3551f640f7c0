"""Registration of counters, gauges and histograms with the installed recorder."""

from __future__ import annotations

from metricsfacade.common import Unit
from metricsfacade.key import KeyData
from metricsfacade.recorder import recorder


def _build_key(name: object, labels: object) -> KeyData:
    return KeyData.from_parts(name, labels)


def _check_metadata(unit: object, description: object) -> None:
    if unit is not None and not isinstance(unit, Unit):
        raise TypeError(f"unit must be a Unit or None, got {type(unit).__name__}")
    if description is not None and not isinstance(description, str):
        raise TypeError(
            f"description must be a string or None, got {type(description).__name__}"
        )


def register_counter(
    name: object,
    unit: Unit | None = None,
    description: str | None = None,
    labels: object = None,
) -> None:
    """Registers a counter with the installed recorder.

    Counters only ever go up and start at zero. ``unit``, ``description`` and
    ``labels`` are all optional.
    """
    _check_metadata(unit, description)
    key = _build_key(name, labels)
    recorder().register_counter(key, unit, description)


def register_gauge(
    name: object,
    unit: Unit | None = None,
    description: str | None = None,
    labels: object = None,
) -> None:
    """Registers a gauge with the installed recorder.

    Gauges can go up or down and start at zero. ``unit``, ``description`` and
    ``labels`` are all optional.
    """
    _check_metadata(unit, description)
    key = _build_key(name, labels)
    recorder().register_gauge(key, unit, description)


def register_histogram(
    name: object,
    unit: Unit | None = None,
    description: str | None = None,
    labels: object = None,
) -> None:
    """Registers a histogram with the installed recorder.

    Histograms start with no observations. ``unit``, ``description`` and
    ``labels`` are all optional.
    """
    _check_metadata(unit, description)
    key = _build_key(name, labels)
    recorder().register_histogram(key, unit, description)