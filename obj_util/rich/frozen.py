"""Immutable rich mapping implementation."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any, Self, override

from .protocol import RichMapping


def _freeze(value: Any) -> Any:
    if isinstance(value, RichMapping):
        return value
    if isinstance(value, Mapping):
        return FrozenMapping.from_plain(value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, RichMapping):
        return value.to_plain()
    if isinstance(value, (list, tuple)):
        return [_thaw(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    return value


class FrozenMapping(RichMapping):
    """Insertion-ordered mapping that never changes after construction.

    Every "modifying" method returns a new instance. Nested values are kept
    as given by the constructor; use ``from_plain`` to freeze a nested
    structure of dicts and lists in one go.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        super().__init__()
        merged: dict[str, Any] = dict(data) if data is not None else {}
        merged.update(kwargs)
        self._data = merged

    @classmethod
    def from_plain(cls, data: Mapping[str, Any]) -> Self:
        """Build a mapping from plain data, freezing nested mappings and sequences.

        Nested mappings become ``FrozenMapping`` instances and lists or tuples
        become tuples. ``to_plain`` turns them back into dicts and lists.
        """
        return cls({key: _freeze(value) for key, value in data.items()})

    @override
    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    @override
    def __len__(self) -> int:
        return len(self._data)

    @override
    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    @override
    def get_property(self, name: str) -> Any:
        return self._data.get(name)

    @override
    def to_plain(self) -> dict[str, Any]:
        return {key: _thaw(value) for key, value in self._data.items()}

    @override
    def filter_entries(self, predicate: Callable[[Any, str], bool]) -> Self:
        return type(self)({key: value for key, value in self._data.items() if predicate(value, key)})

    @override
    def merge_empty(self) -> Self:
        return self.merge()

    def merge(self, *others: Mapping[str, Any]) -> Self:
        """Return a new mapping with entries of others layered on top, left to right."""
        merged = dict(self._data)
        for other in others:
            merged.update(other)
        return type(self)(merged)

    def set(self, key: str, value: Any) -> Self:
        """Return a new mapping with key bound to value."""
        return self.merge({key: value})

    def remove(self, key: str) -> Self:
        """Return a new mapping without key.

        Raises
        ------
        KeyError
            When key does not exist.
        """
        if key not in self._data:
            raise KeyError(key)
        return self.filter_entries(lambda _value, candidate: candidate != key)
