"""A recorder that prints every registration and update, and a demonstration."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from metricsfacade.common import GaugeValue, Unit
from metricsfacade.emit import (
    counter,
    decrement_gauge,
    gauge,
    histogram,
    increment_counter,
    increment_gauge,
)
from metricsfacade.key import KeyData
from metricsfacade.recorder import Recorder, clear_recorder, set_recorder
from metricsfacade.register import (
    register_counter,
    register_gauge,
    register_histogram,
)


def _describe_unit(unit: Unit | None) -> str:
    return "None" if unit is None else f"Unit.{unit.name}"


def _describe_gauge(value: GaugeValue) -> str:
    return f"{value.op.name.capitalize()}({value.value!r})"


class PrintRecorder(Recorder):
    """Writes a line for every metric operation to ``stream`` (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _emit(self, line: str) -> None:
        print(line, file=self._stream if self._stream is not None else sys.stdout)

    def _register(
        self, kind: str, key: KeyData, unit: Unit | None, description: str | None
    ) -> None:
        self._emit(
            f"({kind}) registered key {key} with unit {_describe_unit(unit)} "
            f"and description {description!r}"
        )

    def register_counter(
        self, key: KeyData, unit: Unit | None, description: str | None
    ) -> None:
        self._register("counter", key, unit, description)

    def register_gauge(
        self, key: KeyData, unit: Unit | None, description: str | None
    ) -> None:
        self._register("gauge", key, unit, description)

    def register_histogram(
        self, key: KeyData, unit: Unit | None, description: str | None
    ) -> None:
        self._register("histogram", key, unit, description)

    def increment_counter(self, key: KeyData, value: int) -> None:
        self._emit(f"(counter) got value {value} for key {key}")

    def update_gauge(self, key: KeyData, value: GaugeValue) -> None:
        self._emit(f"(gauge) got value {_describe_gauge(value)} for key {key}")

    def record_histogram(self, key: KeyData, value: float) -> None:
        self._emit(f"(histogram) got value {value} for key {key}")


def _demonstrate(server_name: str) -> None:
    common_labels = [("listener", "frontend")]

    register_counter("requests_processed", description="number of requests processed")
    register_counter("bytes_sent", Unit.BYTES)
    register_gauge("connection_count", labels=common_labels)
    register_histogram(
        "svc.execution_time", Unit.MILLISECONDS, "execution time of request handler"
    )
    register_gauge("unused_gauge", labels={"service": "backend"})
    register_histogram(
        "unused_histogram", Unit.SECONDS, "unused histo", {"service": "middleware"}
    )

    increment_counter("requests_processed")
    increment_counter("requests_processed", {"request_type": "admin"})
    increment_counter(
        "requests_processed", {"request_type": "admin", "server": server_name}
    )
    increment_counter("requests_processed", common_labels)

    counter("bytes_sent", 64)
    counter("bytes_sent", 64, {"listener": "frontend"})
    counter("bytes_sent", 64, {"listener": "frontend", "server": server_name})
    counter("bytes_sent", 64, common_labels)

    for update in (gauge, increment_gauge, decrement_gauge):
        update("connection_count", 300.0)
        update("connection_count", 300.0, {"listener": "frontend"})
        update(
            "connection_count", 300.0, {"listener": "frontend", "server": server_name}
        )
        update("connection_count", 300.0, common_labels)

    histogram("svc.execution_time", 70.0)
    histogram("svc.execution_time", 70.0, {"type": "users"})
    histogram("svc.execution_time", 70.0, {"type": "users", "server": server_name})
    histogram("svc.execution_time", 70.0, common_labels)


def main(argv: list[str] | None = None) -> int:
    """Installs a :class:`PrintRecorder` and exercises every registration and emission call."""
    parser = argparse.ArgumentParser(
        description="Print every metric registration and update to standard output."
    )
    parser.add_argument("--server-name", default="web03", help="value of the server label")
    args = parser.parse_args(argv)

    set_recorder(PrintRecorder())
    try:
        _demonstrate(args.server_name)
    finally:
        clear_recorder()
    return 0


if __name__ == "__main__":
    sys.exit(main())