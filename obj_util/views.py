"""Uniform access to plain and rich mappings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Container, Mapping
from typing import Any, override

from obj_util.rich import RichMapping


class MappingView(ABC):
    """Capabilities shared by the plain and rich mapping variants."""

    @abstractmethod
    def get_property(self, name: str) -> Any:
        """Return the value for name, or None when name does not exist."""

    @abstractmethod
    def own_keys(self) -> list[str]:
        """Return the mapping's own keys in enumeration order."""

    @abstractmethod
    def to_plain(self) -> dict[str, Any]:
        """Return the mapping as a plain dict."""

    @abstractmethod
    def filter_by_key_set(self, key_set: Container[str]) -> Mapping[str, Any]:
        """Return a new mapping of the same variant restricted to key_set."""

    @abstractmethod
    def shallow_clone(self) -> Mapping[str, Any]:
        """Return a new mapping of the same variant with the same entries."""


class PlainView(MappingView):
    """View over an ordinary mapping."""

    def __init__(self, mapping: Mapping[str, Any]) -> None:
        super().__init__()
        self.mapping = mapping

    @override
    def get_property(self, name: str) -> Any:
        return self.mapping.get(name)

    @override
    def own_keys(self) -> list[str]:
        return list(self.mapping)

    @override
    def to_plain(self) -> dict[str, Any]:
        return dict(self.mapping)

    @override
    def filter_by_key_set(self, key_set: Container[str]) -> dict[str, Any]:
        return {key: value for key, value in self.mapping.items() if key in key_set}

    @override
    def shallow_clone(self) -> dict[str, Any]:
        return dict(self.mapping)


class RichView(MappingView):
    """View over a ``RichMapping``."""

    def __init__(self, mapping: RichMapping) -> None:
        super().__init__()
        self.mapping = mapping

    @override
    def get_property(self, name: str) -> Any:
        return self.mapping.get_property(name)

    @override
    def own_keys(self) -> list[str]:
        return list(self.mapping)

    @override
    def to_plain(self) -> dict[str, Any]:
        return self.mapping.to_plain()

    @override
    def filter_by_key_set(self, key_set: Container[str]) -> RichMapping:
        return self.mapping.filter_entries(lambda _value, key: key in key_set)

    @override
    def shallow_clone(self) -> RichMapping:
        return self.mapping.merge_empty()


def view_of(mapping: Mapping[str, Any]) -> MappingView:
    """Wrap mapping in the view matching its variant."""
    if isinstance(mapping, RichMapping):
        return RichView(mapping)
    return PlainView(mapping)
