"""Tests for stateless naming operations."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from graphnames.core.naming import (
    allocate_index,
    format_display_name,
    group_key,
    is_default_name,
    split_index_suffix,
)

# Index allocation


@pytest.mark.parametrize(
    ("used", "expected"),
    [
        ([], 0),
        ([0], 1),
        ([1], 0),
        ([0, 1, 3], 2),
        ([3, 0, 1], 2),
        ([0, 1, 2], 3),
        ([2, 5], 0),
    ],
)
def test_allocate_index_lowest_free(used, expected):
    assert allocate_index(used) == expected


@given(st.sets(st.integers(min_value=0, max_value=64)))
def test_allocate_index_is_lowest_missing_natural(used):
    """Allocated index is unused and every smaller index is taken."""
    index = allocate_index(used)

    assert index not in used
    assert all(i in used for i in range(index))


def test_allocate_index_accepts_any_iterable():
    assert allocate_index(i for i in (1, 0)) == 2


# Grouping


@pytest.mark.parametrize("name", ["", None, "System"])
def test_default_names_share_group(name):
    assert is_default_name(name)
    assert group_key(name) == "System"


def test_group_key_respects_custom_default():
    assert group_key("Effect", default="Effect") == "Effect"
    assert group_key("", default="Effect") == "Effect"
    assert not is_default_name("System", default="Effect")


def test_group_key_is_case_sensitive():
    assert group_key("fire") != group_key("Fire")


# Formatting


def test_zero_index_has_no_suffix():
    assert format_display_name("Fire", 0) == "Fire"


def test_nonzero_index_is_parenthesized():
    assert format_display_name("Particle System", 2) == "Particle System (2)"


def test_empty_base_uses_default():
    assert format_display_name("", 0) == "System"
    assert format_display_name("", 3) == "System (3)"
    assert format_display_name("", 1, default="Effect") == "Effect (1)"


# Suffix parsing


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Fire (2)", ("Fire", 2)),
        ("Fire (12)", ("Fire", 12)),
        ("Fire (1) (3)", ("Fire (1)", 3)),
        ("Fire", ("Fire", 0)),
        ("Fire(2)", ("Fire(2)", 0)),
        ("Fire ()", ("Fire ()", 0)),
        ("Fire (2) ", ("Fire (2) ", 0)),
        ("Fire (x)", ("Fire (x)", 0)),
    ],
)
def test_split_index_suffix(name, expected):
    assert split_index_suffix(name) == expected


@given(
    st.text(alphabet=st.characters(blacklist_characters="()"), max_size=12),
    st.integers(min_value=1, max_value=10_000),
)
def test_split_recovers_formatted_index(base, index):
    """Splitting a formatted display name recovers its parts."""
    if not base:
        base = "System"

    assert split_index_suffix(format_display_name(base, index)) == (base, index)
