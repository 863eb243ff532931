"""Model functionality: graph variants and their capability queries."""

from graphnames.core.model.models import (
    ContextModel,
    ContextType,
    DataModel,
    Model,
    ModelKind,
)
from graphnames.core.model.operations import (
    Resolver,
    kind_of,
    label_target,
    read_label,
    resolve_data,
    system_of,
    write_label,
)

__all__ = [
    # Models
    "Model",
    "ModelKind",
    "ContextType",
    "DataModel",
    "ContextModel",
    # Operations
    "Resolver",
    "kind_of",
    "resolve_data",
    "system_of",
    "label_target",
    "read_label",
    "write_label",
]
