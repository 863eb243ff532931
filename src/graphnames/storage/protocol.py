"""Graph protocol for swappable model backends.

The naming service only needs two things from a graph: enumerate the models
reachable from it, and resolve a handle to its model. Editors with their own
object model implement this protocol; LocalGraph is the in-memory default.

Usage:
    graph = LocalGraph()
    namer = SystemNamer(graph)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from graphnames.core.identity import ModelHandle
from graphnames.core.model import Model


@runtime_checkable
class ModelGraph(Protocol):
    """Abstract graph interface consumed by the naming service."""

    def collect_dependencies(self) -> Iterable[ModelHandle]:
        """Enumerate every model reachable from the graph.

        The order must be stable for an unmodified graph. Duplicates are
        allowed.
        """
        ...

    def resolve(self, handle: ModelHandle) -> Model | object | None:
        """Get the live model behind a handle, None if it is gone.

        Host graphs may return objects other than DataModel and ContextModel;
        the naming service ignores them.
        """
        ...
