"""The recorder interface and the process-wide recorder slot."""

from __future__ import annotations

import abc
import threading

from metricsfacade.common import GaugeValue, Unit
from metricsfacade.key import KeyData

_SET_RECORDER_ERROR = (
    "attempted to set a recorder after the metrics system was already initialized"
)


class Recorder(abc.ABC):
    """Interface between metric emission and the exporter that stores the values."""

    @abc.abstractmethod
    def register_counter(
        self, key: KeyData, unit: Unit | None, description: str | None
    ) -> None:
        """Registers a counter, optionally with a unit and a description."""

    @abc.abstractmethod
    def register_gauge(
        self, key: KeyData, unit: Unit | None, description: str | None
    ) -> None:
        """Registers a gauge, optionally with a unit and a description."""

    @abc.abstractmethod
    def register_histogram(
        self, key: KeyData, unit: Unit | None, description: str | None
    ) -> None:
        """Registers a histogram, optionally with a unit and a description."""

    @abc.abstractmethod
    def increment_counter(self, key: KeyData, value: int) -> None:
        """Increments a counter by ``value``."""

    @abc.abstractmethod
    def update_gauge(self, key: KeyData, value: GaugeValue) -> None:
        """Applies a gauge operation."""

    @abc.abstractmethod
    def record_histogram(self, key: KeyData, value: float) -> None:
        """Records one histogram observation."""


class NoopRecorder(Recorder):
    """A recorder that discards everything; used while none is installed."""

    def register_counter(
        self, key: KeyData, unit: Unit | None, description: str | None
    ) -> None:
        pass

    def register_gauge(
        self, key: KeyData, unit: Unit | None, description: str | None
    ) -> None:
        pass

    def register_histogram(
        self, key: KeyData, unit: Unit | None, description: str | None
    ) -> None:
        pass

    def increment_counter(self, key: KeyData, value: int) -> None:
        pass

    def update_gauge(self, key: KeyData, value: GaugeValue) -> None:
        pass

    def record_histogram(self, key: KeyData, value: float) -> None:
        pass


class SetRecorderError(RuntimeError):
    """Raised when a recorder is installed while another one already is."""

    def __init__(self, message: str = _SET_RECORDER_ERROR) -> None:
        super().__init__(message)


class _RecorderSlot:
    """Holds the installed recorder, guarded by a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._recorder: Recorder | None = None

    def set(self, new: Recorder) -> None:
        with self._lock:
            if self._recorder is not None:
                raise SetRecorderError()
            self._recorder = new

    def clear(self) -> None:
        with self._lock:
            self._recorder = None

    def get(self) -> Recorder | None:
        return self._recorder


_SLOT = _RecorderSlot()
_NOOP = NoopRecorder()


def set_recorder(recorder: Recorder) -> None:
    """Installs ``recorder`` as the global recorder.

    Raises :class:`SetRecorderError` if a recorder is already installed.
    """
    if not isinstance(recorder, Recorder):
        raise TypeError(f"expected a Recorder, got {type(recorder).__name__}")
    _SLOT.set(recorder)


def clear_recorder() -> None:
    """Removes the installed recorder, so that a new one can be set."""
    _SLOT.clear()


def recorder() -> Recorder:
    """Returns the installed recorder, or a no-op recorder if none is installed."""
    installed = _SLOT.get()
    return _NOOP if installed is None else installed


def try_recorder() -> Recorder | None:
    """Returns the installed recorder, or ``None`` if none is installed."""
    return _SLOT.get()