"""Graph model variants: data containers and contexts.

The set of variants is closed. Callers dispatch on ``model.kind`` rather
than on the class hierarchy.

Usage:
    particles = DataModel(title="Fire")
    spawn = ContextModel(ContextType.SPAWNER, label="Burst")
    update = ContextModel(ContextType.UPDATE, data=particles_handle)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar

from graphnames.core.identity import ModelHandle


class ModelKind(Enum):
    """Variant tag of a graph model."""

    DATA = auto()
    CONTEXT = auto()


class ContextType(Enum):
    """Stage a context occupies in a system."""

    SPAWNER = auto()  # Systems in their own right
    EVENT = auto()
    INIT = auto()
    UPDATE = auto()
    OUTPUT = auto()


@dataclass(slots=True)
class DataModel:
    """Data container shared by the contexts of one system.

    Attributes:
        title: User-editable system label. May be empty.
    """

    kind: ClassVar[ModelKind] = ModelKind.DATA

    title: str = ""


@dataclass(slots=True)
class ContextModel:
    """Processing stage in the graph.

    Attributes:
        context_type: Stage this context occupies.
        label: User-editable label, used as the system name for spawners.
        data: Handle of the data container this context operates on, if any.
    """

    kind: ClassVar[ModelKind] = ModelKind.CONTEXT

    context_type: ContextType
    label: str = ""
    data: ModelHandle | None = None

    def is_spawner(self) -> bool:
        """Check if this context is a spawner.

        Returns:
            True if context_type is SPAWNER.
        """
        return self.context_type is ContextType.SPAWNER


Model = DataModel | ContextModel
