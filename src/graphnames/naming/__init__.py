"""Naming service: the stateful registry of system display names.

Architecture Note:
    naming/ is a stateful service layer. It reads and writes labels through
    a ModelGraph and keeps the index registry rebuilt by sync(). The
    allocation and formatting rules themselves live in core.naming.
"""

from graphnames.naming.namer import SystemNamer

__all__ = [
    "SystemNamer",
]
