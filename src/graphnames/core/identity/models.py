"""Model identity models.

Usage:
    handle = ModelHandle(index=42, generation=1)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ModelHandle:
    """Lightweight model identifier with generation for safe slot reuse.

    Handles are plain values: two handles naming the same slot and generation
    compare equal no matter where they came from.
    """

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))

    def __str__(self) -> str:
        return f"#{self.index}.{self.generation}"
