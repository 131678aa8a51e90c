"""The game container: entities, input handlers and keyboard state."""

from __future__ import annotations

import os
import struct
import sys
from typing import Iterable, Iterator, Optional, TextIO

from dungeon.entity import Entity
from dungeon.inputs import KEY_MAX, InputHandler

MAX_NUM_ENTITIES = 999
MAX_NUM_INPUT_HANDLERS = 4
DEFAULT_DEVICE = "/dev/input/event15"

EV_KEY = 0x01
_EVENT = struct.Struct("llHHi")


def _read_events(fd: int) -> Iterator[tuple[int, int, int]]:
    """Yield ``(type, code, value)`` for each whole event readable from ``fd``."""
    pending = b""
    while True:
        try:
            chunk = os.read(fd, _EVENT.size * 64)
        except BlockingIOError:
            break
        if not chunk:
            break
        pending += chunk
        whole = len(pending) - len(pending) % _EVENT.size
        for _sec, _usec, ev_type, code, value in _EVENT.iter_unpack(pending[:whole]):
            yield ev_type, code, value
        pending = pending[whole:]


class Game:
    """Holds everything in play and runs one step of the game loop at a time."""

    def __init__(
        self,
        entities: Iterable[Entity] = (),
        input_handlers: Iterable[InputHandler] = (),
        out: Optional[TextIO] = None,
    ) -> None:
        self.entities = list(entities)
        self.input_handlers = list(input_handlers)
        if len(self.entities) > MAX_NUM_ENTITIES:
            raise ValueError(f"a game holds at most {MAX_NUM_ENTITIES} entities")
        if len(self.input_handlers) > MAX_NUM_INPUT_HANDLERS:
            raise ValueError(
                f"a game holds at most {MAX_NUM_INPUT_HANDLERS} input handlers"
            )
        self.keys = [0] * KEY_MAX
        self.out = out if out is not None else sys.stdout

    def poll_input(self, device_path: str = DEFAULT_DEVICE) -> None:
        """Read pending key events from an input device into ``keys``.

        Autorepeat events (value 2) are ignored. Raises ``OSError`` if the
        device cannot be opened.
        """
        fd = os.open(device_path, os.O_RDONLY | getattr(os, "O_NONBLOCK", 0))
        try:
            for ev_type, code, value in _read_events(fd):
                if ev_type == EV_KEY and code < KEY_MAX and value < 2:
                    self.keys[code] = value
        finally:
            os.close(fd)

    def update(self) -> None:
        """Dispatch queued inputs, then update every entity."""
        for handler in self.input_handlers:
            handler.update()
        for entity in self.entities:
            entity.update()

    def render(self) -> None:
        """Draw every entity to the output stream."""
        for entity in self.entities:
            entity.draw(self.out)
        self.out.flush()