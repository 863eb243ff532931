"""Tests for NameResult values."""

import pytest

from graphnames.core.naming import NameErrorKind, NameResult


def test_success_is_ok():
    result = NameResult.success("Fire")

    assert result.ok
    assert result.error is None
    assert result.unwrap_or("?") == "Fire"


def test_failure_without_value_unwraps_to_default():
    result = NameResult.failure(NameErrorKind.UNKNOWN_MODEL, "gone")

    assert not result.ok
    assert result.error is NameErrorKind.UNKNOWN_MODEL
    assert result.message == "gone"
    assert result.unwrap_or("") == ""


def test_failure_keeps_fallback_value():
    result = NameResult.failure(NameErrorKind.NOT_REGISTERED, "stale", value="Fire")

    assert not result.ok
    assert result.unwrap_or("") == "Fire"


def test_results_are_immutable():
    result = NameResult.success("Fire")

    with pytest.raises(AttributeError):
        result.value = "Smoke"  # type: ignore[misc]
