"""Key bindings and a bounded queue that dispatches them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Optional

KEY_MAX = 0x2FF
MAX_INPUT_BUFFER_SIZE = 256


@dataclass(frozen=True)
class Input:
    """A key code bound to the action it triggers."""

    key: int
    execute: Callable[[], Any]


def make_input(key: int, execute: Callable[[], Any]) -> Input:
    """Bind ``execute`` to ``key``; keys above ``KEY_MAX`` are rejected."""
    if key > KEY_MAX:
        raise ValueError(f"key code {key} exceeds the maximum of {KEY_MAX}")
    return Input(key, execute)


class InputHandler:
    """Queues inputs for an owner and runs them one per update.

    A queue of size ``n`` holds at most ``n - 1`` pending inputs; further
    inputs are dropped. An input whose key matches the last one run is
    consumed without running again.
    """

    def __init__(self, owner: Any, buffer_size: int) -> None:
        buffer_size = min(buffer_size, MAX_INPUT_BUFFER_SIZE)
        if buffer_size < 1:
            raise ValueError("buffer size must be at least 1")
        self.owner = owner
        self.buffer_size = buffer_size
        self.last_input: Optional[Input] = None
        self._pending: deque[Input] = deque()

    @property
    def capacity(self) -> int:
        """The number of inputs that can wait at once."""
        return self.buffer_size - 1

    def __len__(self) -> int:
        return len(self._pending)

    def add(self, item: Input) -> bool:
        """Queue ``item``; return False if the queue was full and it was dropped."""
        if len(self._pending) >= self.capacity:
            return False
        self._pending.append(item)
        return True

    def update(self) -> None:
        """Take the oldest pending input and run it unless it repeats the last key."""
        if not self._pending:
            return
        next_input = self._pending.popleft()
        if self.last_input is None or next_input.key != self.last_input.key:
            next_input.execute()
            self.last_input = next_input