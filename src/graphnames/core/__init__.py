"""Core functionalities: stateless primitives.

Architecture Note:
    core/ contains pure, stateless functionalities. Models describe graph
    variants and naming results; operations compute over them without
    touching any graph or registry. For stateful services, see storage/ and
    naming/.
"""

from graphnames.core.identity import ModelHandle
from graphnames.core.model import (
    ContextModel,
    ContextType,
    DataModel,
    Model,
    ModelKind,
    Resolver,
    kind_of,
    label_target,
    read_label,
    resolve_data,
    system_of,
    write_label,
)
from graphnames.core.naming import (
    DEFAULT_SYSTEM_NAME,
    NameErrorKind,
    NameResult,
    allocate_index,
    format_display_name,
    group_key,
    is_default_name,
    split_index_suffix,
)

__all__ = [
    # Identity
    "ModelHandle",
    # Model
    "Model",
    "ModelKind",
    "ContextType",
    "DataModel",
    "ContextModel",
    "Resolver",
    "kind_of",
    "resolve_data",
    "system_of",
    "label_target",
    "read_label",
    "write_label",
    # Naming
    "DEFAULT_SYSTEM_NAME",
    "NameErrorKind",
    "NameResult",
    "is_default_name",
    "group_key",
    "format_display_name",
    "allocate_index",
    "split_index_suffix",
]
