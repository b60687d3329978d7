"""Rich mapping contract and the bundled immutable implementation."""

from .frozen import FrozenMapping
from .protocol import PlainConvertible, RichMapping


__all__ = ["FrozenMapping", "PlainConvertible", "RichMapping"]
