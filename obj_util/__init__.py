"""obj-util - shallow diff, key filtering and plain conversion helpers for mappings"""

from loguru import logger

from ._version import version as __version__
from .errors import ConfigurationError, ObjUtilError
from .rich import FrozenMapping, PlainConvertible, RichMapping
from .utilities import (
    KeyOptions,
    KeySetFactory,
    ObjectUtilities,
    default_utilities,
    diff,
    keys,
    pick,
    pojo,
    register_immutable,
    rest,
    strict_equals,
    to_plain_deep,
    values,
)


logger.disable("obj_util")

__all__ = [
    "ConfigurationError",
    "FrozenMapping",
    "KeyOptions",
    "KeySetFactory",
    "ObjUtilError",
    "ObjectUtilities",
    "PlainConvertible",
    "RichMapping",
    "__version__",
    "default_utilities",
    "diff",
    "keys",
    "pick",
    "pojo",
    "register_immutable",
    "rest",
    "strict_equals",
    "to_plain_deep",
    "values",
]
