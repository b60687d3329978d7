"""Rich mapping interface definitions."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class PlainConvertible(Protocol):
    """Anything that knows how to turn itself into plain Python data."""

    def to_plain(self) -> Any: ...


class RichMapping(Mapping[str, Any]):
    """Read-only mapping with accessor, conversion and filtering capabilities."""

    __slots__ = ()

    @abstractmethod
    def get_property(self, name: str) -> Any:
        """Return the value stored under name, or None when name does not exist."""

    @abstractmethod
    def to_plain(self) -> dict[str, Any]:
        """Return a plain dict, converting nested rich values recursively."""

    @abstractmethod
    def filter_entries(self, predicate: Callable[[Any, str], bool]) -> Self:
        """Return a new mapping with the entries for which predicate(value, key) holds."""

    @abstractmethod
    def merge_empty(self) -> Self:
        """Return a new mapping holding the same entries."""
