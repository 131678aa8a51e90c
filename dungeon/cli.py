"""Terminal front end: draws the dungeon walls and runs the game loop."""

from __future__ import annotations

import argparse
import os
import sys
import time
from typing import Callable, Optional, Sequence, TextIO

HEIGHT = 30
WIDTH = 80
CENTRE_X = HEIGHT // 2
CENTRE_Y = WIDTH // 2

WALL = "#"
S_HEAD = "S"
S_BODY = "o"
APPLE = "@"

FRAMES = 10
PAUSE_SECONDS = 4


def draw_frame(out: TextIO) -> None:
    """Clear the screen and draw the walled playing field."""
    out.write("\033[H")
    out.write("\033[1J")
    out.write("\033[0m")
    out.flush()
    rows = []
    for y in range(HEIGHT):
        if y in (0, HEIGHT - 1):
            rows.append(WALL * WIDTH)
        else:
            rows.append(WALL + " " * (WIDTH - 2) + WALL)
    out.write("\n".join(rows))


def _banner(out: TextIO, text: str) -> None:
    out.write(f"\033[{CENTRE_X};{CENTRE_Y - 4}H")
    out.write(f"\033[5m{text}")
    out.flush()


def run(
    out: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
    terminal_size: Optional[Callable[[], os.terminal_size]] = None,
) -> int:
    """Play one session and return the exit status."""
    if out is None:
        out = sys.stdout
    if terminal_size is None:
        stream = out
        terminal_size = lambda: os.get_terminal_size(stream.fileno())  # noqa: E731

    try:
        initial = terminal_size()
    except OSError:
        out.write("Bad init code: -1\n")
        out.flush()
        return -1

    out.write(f"\033[8;{HEIGHT};{WIDTH}t")
    out.flush()
    draw_frame(out)
    _banner(out, "GAME START")
    sleep(PAUSE_SECONDS)

    for _ in range(FRAMES):
        draw_frame(out)

    _banner(out, "GAME OVER")
    sleep(PAUSE_SECONDS)

    out.write(f"\033[8;{initial.columns};{initial.lines}t")
    out.write("\033[H")
    out.write("\033[1J")
    out.flush()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point."""
    parser = argparse.ArgumentParser(
        prog="dungeon",
        description="Crawl around a dungeon, growing a party of adventurers.",
    )
    parser.parse_args(argv)
    return run()


if __name__ == "__main__":
    sys.exit(main())