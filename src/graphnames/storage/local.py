"""Local in-memory graph implementation.

Simple arena of models keyed by handle, suitable for tests, examples and
embedders without a graph model of their own.

Usage:
    graph = LocalGraph()
    fire = graph.add_data("Fire")
    graph.add_context(ContextType.INIT, data=fire)
    graph.add_context(ContextType.SPAWNER, label="Burst")
"""

from __future__ import annotations

from collections.abc import Iterator

from graphnames.core.identity import ModelHandle
from graphnames.core.model import ContextModel, ContextType, DataModel, Model, ModelKind
from graphnames.storage.allocator import HandleAllocator


class LocalGraph:
    """Simple in-memory graph using a handle-keyed dict.

    Structure:
        _models[handle] = model

    Insertion order of ``_models`` is the enumeration order reported by
    collect_dependencies().
    """

    def __init__(self) -> None:
        """Initialize an empty graph with its own handle allocator."""
        self._allocator = HandleAllocator()
        self._models: dict[ModelHandle, Model] = {}

    def _require(self, handle: ModelHandle) -> Model:
        model = self._models.get(handle)
        if model is None:
            raise KeyError(f"Unknown model {handle}")
        return model

    def _insert(self, model: Model) -> ModelHandle:
        handle = self._allocator.allocate()
        self._models[handle] = model
        return handle

    def add_data(self, title: str = "") -> ModelHandle:
        """Add a data container.

        Args:
            title: Initial system label.

        Returns:
            Handle of the new model.
        """
        return self._insert(DataModel(title=title))

    def add_context(
        self,
        context_type: ContextType,
        label: str = "",
        data: ModelHandle | None = None,
    ) -> ModelHandle:
        """Add a context, optionally attached to a data container.

        Args:
            context_type: Stage of the new context.
            label: Initial context label.
            data: Data container to attach to.

        Returns:
            Handle of the new model.

        Raises:
            KeyError: If ``data`` is unknown.
            TypeError: If ``data`` is not a data container.
        """
        if data is not None:
            self._require_data(data)
        return self._insert(ContextModel(context_type=context_type, label=label, data=data))

    def _require_data(self, handle: ModelHandle) -> DataModel:
        model = self._require(handle)
        if model.kind is not ModelKind.DATA:
            raise TypeError(f"Model {handle} is not a data container")
        return model  # type: ignore[return-value]

    def link(self, context: ModelHandle, data: ModelHandle | None) -> None:
        """Attach a context to a data container, or detach it with None.

        Raises:
            KeyError: If either handle is unknown.
            TypeError: If the handles have the wrong variants.
        """
        model = self._require(context)
        if model.kind is not ModelKind.CONTEXT:
            raise TypeError(f"Model {context} is not a context")
        if data is not None:
            self._require_data(data)
        model.data = data  # type: ignore[union-attr]

    def remove(self, handle: ModelHandle) -> None:
        """Remove a model, detaching contexts that referenced it.

        Raises:
            KeyError: If the handle is unknown.
        """
        self._require(handle)
        for model in self._models.values():
            if model.kind is ModelKind.CONTEXT and model.data == handle:  # type: ignore[union-attr]
                model.data = None  # type: ignore[union-attr]
        del self._models[handle]
        self._allocator.deallocate(handle)

    def resolve(self, handle: ModelHandle) -> Model | None:
        """Get the live model behind a handle.

        Args:
            handle: Handle to resolve.

        Returns:
            The model, or None if the handle is stale or unknown.
        """
        return self._models.get(handle)

    def collect_dependencies(self) -> Iterator[ModelHandle]:
        """Enumerate the dependency closure of the graph.

        Each model is followed by the data container it references, so
        contexts and the data they share come out adjacent.

        Yields:
            Handles in stable order, without duplicates.
        """
        seen: set[ModelHandle] = set()
        for handle, model in list(self._models.items()):
            data = None
            if model.kind is ModelKind.CONTEXT:
                data = model.data  # type: ignore[union-attr]
            for dependency in (handle, data):
                if dependency is None or dependency in seen:
                    continue
                seen.add(dependency)
                yield dependency

    def __contains__(self, handle: object) -> bool:
        return handle in self._models

    def __len__(self) -> int:
        return len(self._models)
