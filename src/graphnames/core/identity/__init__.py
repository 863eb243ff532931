"""Model identity functionality: lightweight handles into a graph arena."""

from graphnames.core.identity.models import ModelHandle

__all__ = [
    "ModelHandle",
]
