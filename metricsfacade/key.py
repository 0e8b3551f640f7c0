"""Metric identifiers: name parts plus an ordered set of labels."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator

from metricsfacade.label import Label, into_labels


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"name parts must be strings, got {type(value).__name__}")
    return value


@functools.total_ordering
class NameParts:
    """The parts that make up a metric name."""

    __slots__ = ("_parts",)

    def __init__(self, parts: Iterable[str]) -> None:
        if isinstance(parts, str):
            raise TypeError("name parts must be an iterable of strings, not a string")
        self._parts: tuple[str, ...] = tuple(_require_str(part) for part in parts)

    @classmethod
    def from_name(cls, name: str) -> NameParts:
        """Builds name parts holding the single part ``name``."""
        return cls((_require_str(name),))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> NameParts:
        """Builds name parts from several parts, kept in order."""
        return cls(names)

    def append(self, part: str) -> NameParts:
        """Returns new name parts with ``part`` added at the end."""
        return NameParts((*self._parts, _require_str(part)))

    def prepend(self, part: str) -> NameParts:
        """Returns new name parts with ``part`` added at the front."""
        return NameParts((_require_str(part), *self._parts))

    def parts(self) -> Iterator[str]:
        """Iterates over the parts of this name."""
        return iter(self._parts)

    def __str__(self) -> str:
        return "".join(self._parts)

    def __repr__(self) -> str:
        return f"NameParts({list(self._parts)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NameParts):
            return NotImplemented
        return self._parts == other._parts

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NameParts):
            return NotImplemented
        return self._parts < other._parts

    def __hash__(self) -> int:
        return hash(self._parts)


def _coerce_name(name: object) -> NameParts:
    if isinstance(name, NameParts):
        return name
    if isinstance(name, str):
        return NameParts.from_name(name)
    if isinstance(name, Iterable):
        return NameParts.from_names(name)
    raise TypeError(f"cannot use {type(name).__name__} as a metric name")


@functools.total_ordering
class KeyData:
    """A metric identifier: its name parts and its labels, in insertion order."""

    __slots__ = ("_name", "_labels")

    def __init__(self, name: object, labels: object = None) -> None:
        self._name = _coerce_name(name)
        self._labels: tuple[Label, ...] = tuple(into_labels(labels))

    @classmethod
    def from_name(cls, name: str) -> KeyData:
        """Builds a key from a single name with no labels."""
        return cls(NameParts.from_name(name))

    @classmethod
    def from_parts(cls, name: object, labels: object) -> KeyData:
        """Builds a key from a name (string, parts or :class:`NameParts`) and labels."""
        return cls(name, labels)

    @classmethod
    def coerce(cls, value: object) -> KeyData:
        """Converts a key, a name, name parts or a ``(name, labels)`` tuple into a key."""
        if isinstance(value, KeyData):
            return value
        if isinstance(value, (str, NameParts)):
            return cls(value)
        if isinstance(value, tuple) and len(value) == 2:
            name, labels = value
            return cls(name, labels)
        raise TypeError(f"cannot convert {type(value).__name__} into a key")

    @property
    def name(self) -> NameParts:
        """The name parts of this key."""
        return self._name

    def labels(self) -> Iterator[Label]:
        """Iterates over the labels of this key."""
        return iter(self._labels)

    def append_name(self, part: str) -> KeyData:
        """Returns a key whose name has ``part`` appended."""
        return KeyData(self._name.append(part), self._labels)

    def prepend_name(self, part: str) -> KeyData:
        """Returns a key whose name has ``part`` prepended."""
        return KeyData(self._name.prepend(part), self._labels)

    def into_parts(self) -> tuple[NameParts, list[Label]]:
        """Returns the name parts and a list of the labels."""
        return self._name, list(self._labels)

    def with_extra_labels(self, extra_labels: object) -> KeyData:
        """Returns a key with ``extra_labels`` added after the existing labels."""
        extra = into_labels(extra_labels)
        if not extra:
            return self
        return KeyData(self._name, [*self._labels, *extra])

    def _sort_key(self) -> tuple[NameParts, tuple[Label, ...]]:
        return self._name, self._labels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyData):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, KeyData):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __str__(self) -> str:
        if not self._labels:
            return f"KeyData({self._name})"
        rendered = ", ".join(f"{label.key} = {label.value}" for label in self._labels)
        return f"KeyData({self._name}, [{rendered}])"

    def __repr__(self) -> str:
        return f"KeyData(name={self._name!r}, labels={list(self._labels)!r})"