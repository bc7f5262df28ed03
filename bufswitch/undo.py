"""Index undo stack — restores the selection when filter characters are deleted."""
from collections import deque
from typing import Optional


class IndexUndoStack:
    """One entry per filter-extending edit: the selection index before it.

    Entries may be None when nothing was selected at the time.
    """

    def __init__(self):
        self._stack: deque[Optional[int]] = deque()

    def push(self, index: Optional[int]):
        self._stack.append(index)

    def pop(self) -> Optional[int]:
        if self._stack:
            return self._stack.pop()
        return None

    def clear(self):
        self._stack.clear()

    @property
    def size(self) -> int:
        return len(self._stack)
