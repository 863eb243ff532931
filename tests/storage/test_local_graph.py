"""Unit tests for the LocalGraph backend."""

import pytest

from graphnames.core.identity import ModelHandle
from graphnames.core.model import ContextType, DataModel, ModelKind
from graphnames.storage import LocalGraph, ModelGraph


def test_local_graph_satisfies_protocol(graph):
    assert isinstance(graph, ModelGraph)


def test_add_and_resolve(graph):
    data = graph.add_data("Fire")
    spawner = graph.add_context(ContextType.SPAWNER, label="Burst")

    assert graph.resolve(data) == DataModel(title="Fire")
    assert graph.resolve(spawner).kind is ModelKind.CONTEXT
    assert graph.resolve(spawner).label == "Burst"
    assert len(graph) == 2
    assert data in graph


def test_collect_dependencies_is_stable_and_unique(graph):
    data = graph.add_data("Fire")
    init = graph.add_context(ContextType.INIT, data=data)
    update = graph.add_context(ContextType.UPDATE, data=data)

    first = list(graph.collect_dependencies())

    assert first == [data, init, update]
    assert list(graph.collect_dependencies()) == first


def test_collect_dependencies_follows_data_links(graph):
    """A context added before its data still pulls the data in right after it."""
    context = graph.add_context(ContextType.INIT)
    data = graph.add_data("Fire")
    graph.link(context, data)

    assert list(graph.collect_dependencies()) == [context, data]


def test_remove_detaches_contexts_and_invalidates_handle(graph):
    data = graph.add_data("Fire")
    init = graph.add_context(ContextType.INIT, data=data)

    graph.remove(data)

    assert graph.resolve(data) is None
    assert graph.resolve(init).data is None

    replacement = graph.add_data("Smoke")
    assert replacement.index == data.index
    assert replacement != data
    assert graph.resolve(data) is None


def test_link_and_unlink(graph):
    data = graph.add_data()
    init = graph.add_context(ContextType.INIT)

    graph.link(init, data)
    assert graph.resolve(init).data == data

    graph.link(init, None)
    assert graph.resolve(init).data is None


def test_graph_editing_errors_raise(graph):
    data = graph.add_data()
    spawner = graph.add_context(ContextType.SPAWNER)
    missing = ModelHandle(index=99)

    with pytest.raises(KeyError):
        graph.remove(missing)
    with pytest.raises(KeyError):
        graph.add_context(ContextType.INIT, data=missing)
    with pytest.raises(TypeError, match="not a data container"):
        graph.add_context(ContextType.INIT, data=spawner)
    with pytest.raises(TypeError, match="not a context"):
        graph.link(data, data)


def test_fresh_graphs_are_independent():
    left = LocalGraph()
    right = LocalGraph()

    handle = left.add_data("Fire")

    assert right.resolve(handle) is None
