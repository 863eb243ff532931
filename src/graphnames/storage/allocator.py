"""Model handle allocation service.

HandleAllocator is a stateful service that manages model handle lifecycle.
"""

from __future__ import annotations

from graphnames.core.identity import ModelHandle


class HandleAllocator:
    """Allocates model handles with generation tracking for recycling.

    Maintains a free list of released slot indices with incremented
    generations so a handle to a removed model never aliases its successor.
    """

    def __init__(self) -> None:
        """Initialize an allocator whose first handle is slot 0, generation 0."""
        self._next_index = 0
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}

    def allocate(self) -> ModelHandle:
        """Allocate a new handle, reusing recycled slots when available.

        Returns:
            Newly allocated ModelHandle.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
            self._generations[index] = gen
            return ModelHandle(index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return ModelHandle(index=index, generation=0)

    def deallocate(self, handle: ModelHandle) -> None:
        """Return a handle's slot for reuse with incremented generation.

        Args:
            handle: Handle to release.

        Raises:
            ValueError: If the handle is not alive.
        """
        if not self.is_alive(handle):
            raise ValueError(f"Cannot deallocate stale handle {handle}")

        # -1 marks the slot free until it is handed out again
        self._generations[handle.index] = -1
        self._free_list.append((handle.index, handle.generation + 1))

    def is_alive(self, handle: ModelHandle) -> bool:
        """Check if a handle is still valid (not recycled).

        Args:
            handle: Handle to check.

        Returns:
            True if the handle's generation matches its slot's generation.
        """
        current_gen = self._generations.get(handle.index, -1)
        return current_gen >= 0 and current_gen == handle.generation
