"""Tracking of resources whose assets must finish loading before use."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable

InsertLoadedResource = Callable[[Any], None]


class ResourceHandles:
    """Queue of asset handles that become resources once fully loaded."""

    def __init__(self) -> None:
        self._waiting: deque[tuple[Any, InsertLoadedResource]] = deque()
        self.finished: list[Any] = []

    @property
    def waiting(self) -> tuple[Any, ...]:
        """Handles still waiting to load, in queue order."""
        return tuple(handle for handle, _ in self._waiting)

    def load_resource(self, handle: Any, insert: InsertLoadedResource) -> ResourceHandles:
        """Queue ``handle``; ``insert`` is called with it once it has loaded."""
        self._waiting.append((handle, insert))
        return self

    def is_all_done(self) -> bool:
        """True when every requested asset has loaded and been inserted."""
        return not self._waiting

    def process(self, is_loaded: Callable[[Any], bool]) -> list[Any]:
        """Cycle once through the queue, inserting every loaded handle.

        Returns the handles that finished during this pass.
        """
        done: list[Any] = []
        for _ in range(len(self._waiting)):
            handle, insert = self._waiting.popleft()
            if is_loaded(handle):
                insert(handle)
                self.finished.append(handle)
                done.append(handle)
            else:
                self._waiting.append((handle, insert))
        return done