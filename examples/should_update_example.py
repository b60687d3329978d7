"""Minimal example deciding whether a component needs to re-render."""

from obj_util import FrozenMapping, diff, pick, register_immutable, rest, to_plain_deep


def main() -> None:
    """Compare two prop snapshots and derive child props from them."""
    register_immutable(frozenset)

    previous = FrozenMapping.from_plain({"name": "alice", "address": "main st", "on_click": None})
    current = previous.set("address", "side st")

    changed = diff(previous, current, ["name", "address"])
    print("changed:", changed)
    if changed:
        print("re-render with:", to_plain_deep(pick(current, ["name", "address"])))

    plain_props = {"label": "ok", "on_click": print, "disabled": False}
    print("forwarded props:", rest(plain_props, {"not": ["on_click"]}))


if __name__ == "__main__":
    main()
