"""Key/value labels attached to metric keys."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Label:
    """A key/value pair of metadata about a metric."""

    key: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not isinstance(self.value, str):
            raise TypeError("label key and value must be strings")

    @classmethod
    def from_pair(cls, pair: tuple[str, str]) -> Label:
        """Builds a label from a ``(key, value)`` pair."""
        try:
            key, value = pair
        except (TypeError, ValueError) as exc:
            raise TypeError(f"expected a (key, value) pair, got {pair!r}") from exc
        return cls(key, value)

    def into_parts(self) -> tuple[str, str]:
        """Returns the key and value as a tuple."""
        return self.key, self.value


def into_labels(labels: object) -> list[Label]:
    """Normalises labels into a list of :class:`Label`.

    Accepts ``None``, a mapping of keys to values, or an iterable whose items are
    labels or ``(key, value)`` pairs.
    """
    if labels is None:
        return []
    if isinstance(labels, Label):
        return [labels]
    if isinstance(labels, Mapping):
        return [Label(key, value) for key, value in labels.items()]
    if isinstance(labels, (str, bytes)) or not isinstance(labels, Iterable):
        raise TypeError(f"cannot convert {type(labels).__name__} into labels")
    return [item if isinstance(item, Label) else Label.from_pair(item) for item in labels]