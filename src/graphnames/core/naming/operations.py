"""Stateless naming operations: grouping, formatting and index allocation."""

from __future__ import annotations

import re
from collections.abc import Iterable

DEFAULT_SYSTEM_NAME = "System"

_INDEX_SUFFIX = re.compile(r" \((\d+)\)\Z")


def is_default_name(name: str | None, default: str = DEFAULT_SYSTEM_NAME) -> bool:
    """Check if a base name falls into the default group.

    Args:
        name: Base name to test.
        default: Label shown for unnamed systems.

    Returns:
        True for empty names and for names equal to ``default``.
    """
    return not name or name == default


def group_key(name: str | None, default: str = DEFAULT_SYSTEM_NAME) -> str:
    """Normalize a base name to the key of its allocation group."""
    if is_default_name(name, default):
        return default
    return name  # type: ignore[return-value]


def format_display_name(base: str, index: int, default: str = DEFAULT_SYSTEM_NAME) -> str:
    """Build the display name of a system.

    Args:
        base: System base name, possibly empty.
        index: Index assigned within the base-name group.
        default: Label substituted for an empty base name.

    Returns:
        ``base`` for index 0, ``"base (index)"`` otherwise.
    """
    if not base:
        base = default
    if index == 0:
        return base
    return f"{base} ({index})"


def allocate_index(used: Iterable[int]) -> int:
    """Find the lowest non-negative integer not in ``used``.

    Walks the sorted indices; the first position whose value differs from
    the position is free. Without a gap the index after the maximum is free.

    Args:
        used: Indices already taken within a group. Expected unique.

    Returns:
        Lowest free index, 0 for an empty group.
    """
    taken = sorted(used)
    if not taken:
        return 0
    for position, value in enumerate(taken):
        if position != value:
            return position
    return taken[-1] + 1


def split_index_suffix(name: str) -> tuple[str, int]:
    """Split a trailing ``" (N)"`` suffix off a display name.

    Args:
        name: Display name, e.g. ``"Fire (2)"``.

    Returns:
        (base, index). Names without a suffix return (name, 0).
    """
    match = _INDEX_SUFFIX.search(name)
    if match is None:
        return name, 0
    return name[: match.start()], int(match.group(1))
