"""Shallow diffing, key filtering and plain conversion helpers for mappings."""

from __future__ import annotations

import math
from collections.abc import Callable, Container, Iterable, Mapping, Sequence
from typing import Any, TypedDict

from loguru import logger

from obj_util.errors import ConfigurationError
from obj_util.rich import PlainConvertible, RichMapping
from obj_util.views import view_of


KeySetFactory = Callable[[Sequence[str]], Container[str]]

KeyOptions = TypedDict("KeyOptions", {"not": Sequence[str]}, total=False)

_PRIMITIVES = (type(None), bool, int, float, complex, str, bytes)


def strict_equals(left: Any, right: Any) -> bool:
    """Compare primitives by value and everything else by identity.

    Booleans never equal numbers and ``nan`` never equals itself.
    """
    if isinstance(left, _PRIMITIVES) and isinstance(right, _PRIMITIVES):
        if isinstance(left, bool) != isinstance(right, bool):
            return False
        if isinstance(left, float) and math.isnan(left):
            return False
        return bool(left == right)
    return left is right


class ObjectUtilities:
    """Mapping helpers bound to an optional key-set factory.

    The factory builds the membership container used when picking keys out
    of a ``RichMapping``. It can be given at construction time or later via
    ``register_immutable``.
    """

    def __init__(self, key_set_factory: KeySetFactory | None = None) -> None:
        super().__init__()
        self.key_set_factory = key_set_factory

    def register_immutable(self, key_set_factory: KeySetFactory | None) -> None:
        """Store the key-set factory; the last registration wins."""
        self.key_set_factory = key_set_factory
        logger.debug("Registered key set factory", factory=repr(key_set_factory))

    def diff(
        self,
        a: Mapping[str, Any] | None,
        b: Mapping[str, Any] | None,
        names: Iterable[str] | Mapping[str, Any] | None = None,
    ) -> list[str] | bool | None:
        """Return the names whose values differ between a and b, or None.

        Values are compared with ``strict_equals``, so nested containers only
        count as unchanged when they are the same object. When exactly one of
        a and b is None the result is ``True`` instead of a list.

        Parameters
        ----------
        a, b
            Plain or rich mappings to compare.
        names
            Names to compare, in order. A mapping contributes its keys. When
            omitted, the keys of a followed by the unseen keys of b are used.
        """
        if names is not None:
            names = list(names.keys()) if isinstance(names, Mapping) else list(names)
        if a is None and b is not None:
            return True
        if a is not None and b is None:
            return True
        if a is None or b is None:
            return None

        left = view_of(a)
        right = view_of(b)
        if names is None:
            a_keys = list(left.to_plain())
            seen = set(a_keys)
            names = a_keys + [key for key in right.to_plain() if key not in seen]

        changed: list[str] = []
        for name in names:
            if name in changed:
                continue
            if not strict_equals(left.get_property(name), right.get_property(name)):
                changed.append(name)
        return changed or None

    def values(self, obj: Mapping[str, Any]) -> list[Any]:
        """Return the values of all own keys. Callers must not rely on the order."""
        view = view_of(obj)
        return [view.get_property(key) for key in view.own_keys()]

    def keys(self, obj: Mapping[str, Any], options: KeyOptions | None = None) -> list[str]:
        """Like ``list(obj)``, but drops the names listed in ``options["not"]``.

        >>> ObjectUtilities().keys({"a": 1, "on_click": print}, {"not": ["on_click"]})
        ['a']
        """
        own_keys = view_of(obj).own_keys()
        excluded = (options or {}).get("not")
        if not excluded:
            return own_keys
        excluded_set = set(excluded)
        return [key for key in own_keys if key not in excluded_set]

    def rest(self, obj: Mapping[str, Any], options: KeyOptions | None = None) -> dict[str, Any]:
        """Return a new dict with every entry except those named in ``options["not"]``."""
        return {key: obj[key] for key in self.keys(obj, options)}

    def pick(self, obj: Mapping[str, Any] | None, keys: Sequence[str] | None = None) -> Mapping[str, Any] | None:
        """Return a new mapping holding only keys, keeping the variant of obj.

        Without keys the result is a shallow clone. Plain results follow the
        order of keys and skip names missing from obj.

        Raises
        ------
        ConfigurationError
            When obj is a ``RichMapping``, keys are given and no key-set
            factory has been registered.
        """
        if obj is None:
            return None
        view = view_of(obj)
        if not keys:
            return view.shallow_clone()

        if isinstance(obj, RichMapping):
            if self.key_set_factory is None:
                logger.debug("pick() on a rich mapping without a key set factory", keys=list(keys))
                msg = (
                    "collaborator not registered: call register_immutable(factory) before "
                    "pick() with keys on a rich mapping, e.g. register_immutable(frozenset)"
                )
                raise ConfigurationError(msg)
            return view.filter_by_key_set(self.key_set_factory(keys))

        return {key: obj[key] for key in keys if key in obj}

    def to_plain_deep(self, value: Any) -> Any:
        """Convert a possibly rich value into plain dicts, lists and tuples.

        Objects with a ``to_plain()`` method are trusted to return plain data
        and are not walked further.
        """
        if value is None or isinstance(value, _PRIMITIVES):
            return value
        if isinstance(value, PlainConvertible):
            return value.to_plain()
        if isinstance(value, list):
            return [self.to_plain_deep(item) for item in value]
        if isinstance(value, tuple):
            return tuple(self.to_plain_deep(item) for item in value)
        if isinstance(value, Mapping):
            return {key: self.to_plain_deep(item) for key, item in value.items()}
        return value

    pojo = to_plain_deep


default_utilities = ObjectUtilities()

register_immutable = default_utilities.register_immutable
diff = default_utilities.diff
values = default_utilities.values
keys = default_utilities.keys
rest = default_utilities.rest
pick = default_utilities.pick
to_plain_deep = default_utilities.to_plain_deep
pojo = default_utilities.to_plain_deep
