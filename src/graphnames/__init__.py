"""graphnames: unique display names for the systems of a node graph.

Usage:
    from graphnames import ContextType, LocalGraph, SystemNamer

    graph = LocalGraph()
    fire = graph.add_data("Fire")
    other = graph.add_data("Fire")
    graph.add_context(ContextType.INIT, data=fire)
    graph.add_context(ContextType.INIT, data=other)

    namer = SystemNamer(graph)
    namer.sync()
    namer.get_unique_display_name(other).value  # "Fire (1)"
"""

__version__ = "0.1.0"

# Core primitives
from graphnames.core import (
    DEFAULT_SYSTEM_NAME,
    ContextModel,
    ContextType,
    DataModel,
    Model,
    ModelHandle,
    ModelKind,
    NameErrorKind,
    NameResult,
    allocate_index,
    format_display_name,
    split_index_suffix,
)

# Configuration
from graphnames.config import NamerSettings

# Naming service
from graphnames.naming import SystemNamer

# Graph backends
from graphnames.storage import (
    LocalGraph,
    ModelGraph,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "ModelHandle",
    "Model",
    "ModelKind",
    "ContextType",
    "DataModel",
    "ContextModel",
    "NameErrorKind",
    "NameResult",
    "DEFAULT_SYSTEM_NAME",
    "allocate_index",
    "format_display_name",
    "split_index_suffix",
    # Config
    "NamerSettings",
    # Naming
    "SystemNamer",
    # Storage
    "ModelGraph",
    "LocalGraph",
]
