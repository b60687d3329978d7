"""Interface for ``python -m obj_util``."""

from __future__ import annotations

import json
import sys
from argparse import ArgumentParser, ArgumentTypeError
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version
from .utilities import diff


__all__ = ["main"]


def _json_object(text: str) -> dict[str, Any] | None:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as error:
        msg = f"invalid JSON: {error}"
        raise ArgumentTypeError(msg) from error
    if value is not None and not isinstance(value, dict):
        msg = "expected a JSON object or null"
        raise ArgumentTypeError(msg)
    return value


def main(args: Sequence[str] | None = None) -> int:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="obj-util")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    subparsers = parser.add_subparsers(dest="command")

    diff_parser = subparsers.add_parser("diff", help="print the names whose values differ between two JSON objects")
    _ = diff_parser.add_argument("left", type=_json_object, help="JSON object literal, or null")
    _ = diff_parser.add_argument("right", type=_json_object, help="JSON object literal, or null")
    _ = diff_parser.add_argument("--names", nargs="+", default=None, help="only compare these names")

    parsed = parser.parse_args(args)
    if parsed.command != "diff":
        parser.print_help()
        return 0

    result = diff(parsed.left, parsed.right, parsed.names)
    _ = sys.stdout.write(json.dumps(result) + "\n")
    return 0 if result is None else 1


if __name__ == "__main__":
    sys.exit(main())
