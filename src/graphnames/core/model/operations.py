"""Capability queries over graph model variants.

All functions are pure: they take a resolver mapping handles to models and
never hold on to graph state. Resolvers may hand back objects outside the
two recognized variants (operators, blocks, slots of a host editor); every
query treats those as "not part of a system" instead of failing.
"""

from __future__ import annotations

from collections.abc import Callable

from graphnames.core.identity import ModelHandle
from graphnames.core.model.models import ContextModel, DataModel, Model, ModelKind

Resolver = Callable[[ModelHandle], object | None]


def kind_of(model: object) -> ModelKind | None:
    """Get the variant tag of a resolved object.

    Args:
        model: Object returned by a graph resolver.

    Returns:
        The ModelKind of a DataModel or ContextModel, None for anything else.
    """
    if isinstance(model, (DataModel, ContextModel)):
        return model.kind
    return None


def resolve_data(context: ContextModel, resolve: Resolver) -> DataModel | None:
    """Get the data container a context operates on.

    Args:
        context: Context to inspect.
        resolve: Handle resolver of the owning graph.

    Returns:
        The associated DataModel, or None if the context has no data or the
        handle no longer resolves to a data container.
    """
    if context.data is None:
        return None
    data = resolve(context.data)
    if not isinstance(data, DataModel):
        return None
    return data


def system_of(handle: ModelHandle, resolve: Resolver) -> ModelHandle | None:
    """Map a model to the system it stands for.

    Spawners and data containers are systems themselves. Any other context is
    represented by its shared data container.

    Args:
        handle: Model to map.
        resolve: Handle resolver of the owning graph.

    Returns:
        Handle of the system, or None if the model is not part of one.
    """
    model = resolve(handle)
    if isinstance(model, DataModel):
        return handle
    if not isinstance(model, ContextModel):
        return None
    if model.is_spawner():
        return handle
    if resolve_data(model, resolve) is None:
        return None
    return model.data


def label_target(model: object, resolve: Resolver) -> Model | None:
    """Find the model whose field backs the system label of ``model``.

    Returns:
        The data container for data and non-spawner contexts, the context
        itself for spawners, None for unrecognized variants and contexts
        without resolvable data.
    """
    if isinstance(model, DataModel):
        return model
    if not isinstance(model, ContextModel):
        return None
    if model.is_spawner():
        return model
    return resolve_data(model, resolve)


def read_label(model: Model) -> str:
    if isinstance(model, DataModel):
        return model.title
    return model.label


def write_label(model: Model, name: str) -> None:
    if isinstance(model, DataModel):
        model.title = name
    else:
        model.label = name
