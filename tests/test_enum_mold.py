from __future__ import annotations

import enum

import pytest

from seedforge.mold import EnumProperties, enum_mold
from seedforge.utils.errors import (
    DomainExhaustionError,
    InvalidConfigurationError,
    InvalidOverrideError,
)

STATUSES = ("active", "inactive", "pending")


class Color(enum.Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


def test_selects_by_seed_modulo() -> None:
    mold = enum_mold(STATUSES)
    assert [mold.pour({}, seed) for seed in range(6)] == list(STATUSES) * 2


def test_enum_class_members() -> None:
    mold = enum_mold(Color)
    assert mold.pour({}, 0) is Color.RED
    assert mold.pour({}, 4) is Color.GREEN
    for seed in range(20):
        assert isinstance(mold.pour({}, seed), Color)


def test_exclusion_set_leaves_pending() -> None:
    mold = enum_mold(STATUSES)
    for seed in range(100):
        assert mold.pour({"exclusion": {"active", "inactive"}}, seed) == "pending"


def test_single_value_exclusion() -> None:
    mold = enum_mold(STATUSES)
    assert mold.pour({"exclusion": "active"}, 4) == "inactive"
    assert mold.pour({"exclusion": "active"}, 5) == "pending"
    for seed in range(50):
        assert mold.pour({"exclusion": "active"}, seed) != "active"


def test_frozenset_exclusion_with_enum() -> None:
    mold = enum_mold(Color)
    excluded = frozenset({Color.RED})
    for seed in range(30):
        assert mold.pour({"exclusion": excluded}, seed) in (Color.GREEN, Color.BLUE)


def test_all_excluded_raises() -> None:
    mold = enum_mold(STATUSES)
    for seed in range(20):
        with pytest.raises(DomainExhaustionError):
            mold.pour({"exclusion": set(STATUSES)}, seed)


def test_exhaustion_only_when_nothing_left() -> None:
    mold = enum_mold(STATUSES)
    for excluded in ({"active"}, {"active", "pending"}, set()):
        remaining = set(STATUSES) - excluded
        for seed in range(10):
            assert mold.pour({"exclusion": excluded}, seed) in remaining


def test_exhaustion_is_lookup_error() -> None:
    with pytest.raises(LookupError):
        enum_mold(["only"]).pour({"exclusion": "only"}, 0)


def test_value_override_bypasses_selection() -> None:
    mold = enum_mold(STATUSES)
    assert mold.pour({"value": "pending"}, 0) == "pending"
    assert mold.pour({"value": "archived"}, 1) == "archived"
    assert mold.pour({"value": "active", "exclusion": set(STATUSES)}, 2) == "active"


def test_resolve_keeps_exclusion() -> None:
    mold = enum_mold(STATUSES)
    props = mold.resolve({"exclusion": "active"}, 0)
    assert props == EnumProperties(value="inactive", exclusion="active")


def test_duplicates_are_dropped() -> None:
    mold = enum_mold(["a", "a", "b"])
    assert [mold.pour({}, seed) for seed in range(4)] == ["a", "b", "a", "b"]


def test_empty_choices() -> None:
    with pytest.raises(InvalidConfigurationError):
        enum_mold([])


def test_deterministic() -> None:
    mold = enum_mold(STATUSES)
    assert mold.pour({"exclusion": "pending"}, 77) == mold.pour({"exclusion": "pending"}, 77)


def test_list_exclusion_is_rejected() -> None:
    mold = enum_mold(STATUSES)
    with pytest.raises(InvalidOverrideError, match="set of candidates"):
        mold.pour({"exclusion": ["active", "inactive"]}, 0)


def test_dict_keys_exclusion_is_a_set() -> None:
    mold = enum_mold(STATUSES)
    excluded = {"active": 1, "inactive": 2}.keys()
    for seed in range(10):
        assert mold.pour({"exclusion": excluded}, seed) == "pending"


def test_tuple_exclusion_is_one_candidate() -> None:
    mold = enum_mold([("a", 1), ("b", 2)])
    for seed in range(10):
        assert mold.pour({"exclusion": ("a", 1)}, seed) == ("b", 2)
