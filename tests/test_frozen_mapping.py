import pytest

from obj_util.rich import FrozenMapping, PlainConvertible, RichMapping


def test_frozen_mapping_is_a_read_only_rich_mapping() -> None:
    mapping = FrozenMapping({"a": 1}, b=2)
    assert isinstance(mapping, RichMapping)
    assert isinstance(mapping, PlainConvertible)
    assert dict(mapping) == {"a": 1, "b": 2}
    assert len(mapping) == 2
    with pytest.raises(TypeError):
        mapping["c"] = 3  # type: ignore[index]


def test_get_property_returns_none_for_missing_names() -> None:
    mapping = FrozenMapping(a=1)
    assert mapping.get_property("a") == 1
    assert mapping.get_property("missing") is None
    with pytest.raises(KeyError):
        _ = mapping["missing"]


def test_from_plain_freezes_nested_structures_and_to_plain_thaws_them() -> None:
    data = {"user": {"name": "alice", "tags": ["x", {"y": 1}]}}
    mapping = FrozenMapping.from_plain(data)
    assert isinstance(mapping["user"], FrozenMapping)
    assert mapping["user"]["tags"][0] == "x"
    assert isinstance(mapping["user"]["tags"], tuple)
    assert isinstance(mapping["user"]["tags"][1], FrozenMapping)
    assert mapping.to_plain() == data


def test_filter_entries_passes_value_then_key() -> None:
    mapping = FrozenMapping(a=1, b=2, c=3)
    filtered = mapping.filter_entries(lambda value, key: value > 1 and key != "c")
    assert filtered == {"b": 2}
    assert mapping == {"a": 1, "b": 2, "c": 3}


def test_merge_empty_returns_equal_new_instance() -> None:
    mapping = FrozenMapping(a=1)
    clone = mapping.merge_empty()
    assert clone == mapping
    assert clone is not mapping


def test_set_merge_and_remove_leave_original_untouched() -> None:
    mapping = FrozenMapping(a=1)
    assert mapping.set("b", 2) == {"a": 1, "b": 2}
    assert mapping.merge({"a": 5}, {"c": 3}) == {"a": 5, "c": 3}
    assert mapping.set("b", 2).remove("a") == {"b": 2}
    assert mapping == {"a": 1}
    with pytest.raises(KeyError):
        _ = mapping.remove("missing")


def test_hash_follows_contents() -> None:
    assert hash(FrozenMapping(a=1, b=2)) == hash(FrozenMapping(b=2, a=1))
    with pytest.raises(TypeError):
        _ = hash(FrozenMapping(a=[1]))


def test_to_plain_converts_rich_values_inside_plain_dicts() -> None:
    mapping = FrozenMapping(a={"b": FrozenMapping(c=1)}, d=[{"e": FrozenMapping(f=2)}])
    plain = mapping.to_plain()
    assert plain == {"a": {"b": {"c": 1}}, "d": [{"e": {"f": 2}}]}
    assert type(plain["a"]["b"]) is dict
    assert type(plain["d"][0]["e"]) is dict


def test_instances_reject_new_attributes() -> None:
    mapping = FrozenMapping(a=1)
    assert not hasattr(mapping, "__dict__")
    with pytest.raises(AttributeError):
        mapping.extra = 1  # type: ignore[attr-defined]


def test_repr_shows_contents() -> None:
    assert repr(FrozenMapping(a=1)) == "FrozenMapping({'a': 1})"
