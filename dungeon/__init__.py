"""A terminal dungeon crawler and the vector, state machine, input and entity pieces it is built from."""

__version__ = "0.1.0"