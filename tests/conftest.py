"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from graphnames import ContextType, LocalGraph, ModelHandle, NamerSettings, SystemNamer


@pytest.fixture
def graph():
    """Fresh LocalGraph instance."""
    return LocalGraph()


@pytest.fixture
def settings():
    """Settings with defaults, independent of the environment."""
    return NamerSettings(default_system_name="System", log_errors=True)


@pytest.fixture
def namer(graph, settings):
    """SystemNamer bound to the graph fixture."""
    return SystemNamer(graph, settings=settings)


def _add_system(graph: LocalGraph, title: str = "") -> ModelHandle:
    """Add a data container driven by an init and an update context."""
    data = graph.add_data(title)
    graph.add_context(ContextType.INIT, data=data)
    graph.add_context(ContextType.UPDATE, data=data)
    return data


@pytest.fixture
def add_system():
    """Factory adding a data-backed system to a graph."""
    return _add_system


@pytest.fixture
def add_spawner():
    """Factory adding a spawner context to a graph."""

    def _add(graph: LocalGraph, label: str = "") -> ModelHandle:
        return graph.add_context(ContextType.SPAWNER, label=label)

    return _add
