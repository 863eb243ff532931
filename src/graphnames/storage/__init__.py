"""Graph backends."""

from graphnames.storage.allocator import HandleAllocator
from graphnames.storage.local import LocalGraph
from graphnames.storage.protocol import ModelGraph

__all__ = [
    "ModelGraph",
    "LocalGraph",
    "HandleAllocator",
]
