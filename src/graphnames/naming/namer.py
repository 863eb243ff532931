"""SystemNamer: unique display names for the systems of a graph.

Usage:
    graph = LocalGraph()
    fire = graph.add_data("Fire")
    graph.add_context(ContextType.INIT, data=fire)

    namer = SystemNamer(graph)
    namer.sync()
    namer.get_unique_display_name(fire).value  # "Fire"

    namer.set_base_name(fire, "Smoke")
    namer.sync()  # Required after renames and structural edits
"""

from __future__ import annotations

import logging
from collections import defaultdict

from graphnames.config import NamerSettings
from graphnames.core.identity import ModelHandle
from graphnames.core.model import (
    Model,
    ModelKind,
    kind_of,
    label_target,
    read_label,
    system_of,
    write_label,
)
from graphnames.core.naming import (
    NameErrorKind,
    NameResult,
    allocate_index,
    format_display_name,
    group_key,
)
from graphnames.storage.protocol import ModelGraph

logger = logging.getLogger(__name__)


class SystemNamer:
    """Registry of disambiguating indices for the systems of one graph.

    Systems sharing a base name get the lowest free index of their group;
    index 0 displays without a suffix. Empty names and the default label
    form one group. The registry is rebuilt by sync() and never patched
    incrementally, so callers re-sync after renames and structural edits.

    Naming operations never raise on inconsistent graph state. They return a
    NameResult carrying the error kind and a best-effort fallback value.

    Args:
        graph: Graph collaborator supplying and resolving models.
        settings: Naming configuration (defaults loaded from environment).
    """

    def __init__(self, graph: ModelGraph, settings: NamerSettings | None = None):
        """Initialize an empty registry bound to a graph.

        Args:
            graph: Graph collaborator supplying and resolving models.
            settings: Naming configuration (defaults loaded from environment).
        """
        self._graph = graph
        self._settings = settings or NamerSettings()
        self._system_to_index: dict[ModelHandle, int] = {}

    @property
    def graph(self) -> ModelGraph:
        return self._graph

    @property
    def settings(self) -> NamerSettings:
        return self._settings

    def _fail(
        self,
        kind: NameErrorKind,
        message: str,
        value: str | None = None,
        log: bool = True,
    ) -> NameResult:
        if log and self._settings.log_errors:
            logger.error("%s: %s", kind.name, message)
        return NameResult.failure(kind, message, value=value)

    def _label_model(self, handle: ModelHandle, log: bool = True) -> Model | NameResult:
        """Find the model backing a system label, or the failure explaining why not."""
        model = self._graph.resolve(handle)
        if model is None:
            return self._fail(
                NameErrorKind.UNKNOWN_MODEL, f"model {handle} not found in graph", log=log
            )
        target = label_target(model, self._graph.resolve)
        if target is None:
            return self._fail(
                NameErrorKind.NOT_A_SYSTEM,
                f"model {handle} not associated to a system",
                log=log,
            )
        return target

    def get_base_name(self, handle: ModelHandle) -> NameResult:
        """Read the user-assigned label of a system.

        Data containers report their title, spawners their label, other
        contexts the title of their data container.

        Args:
            handle: Model to read.

        Returns:
            Success with the label, or UNKNOWN_MODEL / NOT_A_SYSTEM failure
            with value None.
        """
        target = self._label_model(handle)
        if isinstance(target, NameResult):
            return target
        return NameResult.success(read_label(target))

    def set_base_name(self, handle: ModelHandle, name: str) -> NameResult:
        """Write the user-assigned label of a system.

        No uniqueness check is made; collisions are resolved in display
        names after the next sync().

        Args:
            handle: Model to rename.
            name: New base name.

        Returns:
            Success with ``name``, or the same failures as get_base_name()
            with the graph left untouched.
        """
        target = self._label_model(handle)
        if isinstance(target, NameResult):
            return target
        write_label(target, name)
        return NameResult.success(name)

    def get_unique_display_name(self, handle: ModelHandle) -> NameResult:
        """Get the disambiguated display name of a registered system.

        Args:
            handle: System handle as registered by the last sync().

        Returns:
            Success with e.g. ``"Fire (2)"``. For a system missing from the
            registry, a NOT_REGISTERED failure whose value is the raw base
            name.
        """
        index = self._system_to_index.get(handle)
        if index is None:
            # Fallback value only; the NOT_REGISTERED line is the one logged
            target = self._label_model(handle, log=False)
            raw = None if isinstance(target, NameResult) else read_label(target)
            return self._fail(
                NameErrorKind.NOT_REGISTERED, f"model {handle} not registered", value=raw
            )
        base = self.get_base_name(handle)
        if not base.ok:
            return base
        return NameResult.success(
            format_display_name(base.value or "", index, self._settings.default_system_name)
        )

    def sync(self, graph: ModelGraph | None = None) -> None:
        """Rebuild the registry from a fresh traversal of the graph.

        Args:
            graph: Replacement collaborator. Keeps the current graph if None.
        """
        if graph is not None:
            self._graph = graph

        resolve = self._graph.resolve
        systems: dict[ModelHandle, None] = {}
        for handle in self._graph.collect_dependencies():
            model = resolve(handle)
            if kind_of(model) is not ModelKind.CONTEXT:
                continue
            system = system_of(handle, resolve)
            if system is not None:
                systems[system] = None

        default = self._settings.default_system_name
        keys = {system: group_key(self.get_base_name(system).value, default) for system in systems}
        # A suffixed display name must not shadow another system's literal base name
        reserved = set(keys.values())

        self._system_to_index.clear()
        used: defaultdict[str, set[int]] = defaultdict(set)
        for system, key in keys.items():
            taken = used[key]
            index = allocate_index(taken)
            while index and format_display_name(key, index, default) in reserved:
                taken.add(index)
                index = allocate_index(taken)
            taken.add(index)
            self._system_to_index[system] = index

        logger.debug("Synced %d systems", len(self._system_to_index))

    def index_of(self, handle: ModelHandle) -> int | None:
        """Get the index assigned to a system by the last sync()."""
        return self._system_to_index.get(handle)

    @property
    def systems(self) -> tuple[ModelHandle, ...]:
        """Registered systems in registration order."""
        return tuple(self._system_to_index)

    def display_names(self) -> dict[ModelHandle, str]:
        """Get display names of all registered systems.

        Returns:
            Mapping of system handle to display name, using the fallback
            value for systems whose name could not be computed.
        """
        return {
            handle: self.get_unique_display_name(handle).unwrap_or("")
            for handle in self._system_to_index
        }

    def __contains__(self, handle: object) -> bool:
        return handle in self._system_to_index

    def __len__(self) -> int:
        return len(self._system_to_index)
