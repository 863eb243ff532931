"""Naming functionality: result values and stateless name operations."""

from graphnames.core.naming.models import NameErrorKind, NameResult
from graphnames.core.naming.operations import (
    DEFAULT_SYSTEM_NAME,
    allocate_index,
    format_display_name,
    group_key,
    is_default_name,
    split_index_suffix,
)

__all__ = [
    # Models
    "NameErrorKind",
    "NameResult",
    # Operations
    "DEFAULT_SYSTEM_NAME",
    "is_default_name",
    "group_key",
    "format_display_name",
    "allocate_index",
    "split_index_suffix",
]
