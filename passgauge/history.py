"""
passgauge.history
Recently generated passwords, newest first. Owned by the caller (CLI, API
session, ...); the generator itself keeps no state.
"""

from collections import deque
from typing import Deque, Iterator, List

DEFAULT_HISTORY_SIZE = 5
DISPLAY_WIDTH = 20


class PasswordHistory:
    def __init__(self, maxlen: int = DEFAULT_HISTORY_SIZE) -> None:
        if maxlen < 1:
            raise ValueError("history size must be > 0")
        self._items: Deque[str] = deque(maxlen=maxlen)

    @property
    def maxlen(self) -> int:
        return self._items.maxlen or 0

    def add(self, password: str) -> None:
        # appendleft on a bounded deque drops the oldest entry
        self._items.appendleft(password)

    def clear(self) -> None:
        self._items.clear()

    def items(self) -> List[str]:
        return list(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


def truncate_for_display(password: str, width: int = DISPLAY_WIDTH) -> str:
    """Shorten long passwords to `width` chars plus '...'."""
    if len(password) > width:
        return password[:width] + "..."
    return password
