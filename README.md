# dungeon

A game about crawling around a dungeon and slowly growing a party of
adventurers over time. It starts out as a snake-like and is meant to work
upward to more complex game styles.

## Installing

```
pip install .
```

## Playing

```
dungeon
```

The command resizes the terminal to 80×30 with an ANSI escape sequence, draws
a walled arena of `#` characters, shows a blinking `GAME START` banner for four
seconds, redraws the arena ten times, shows `GAME OVER` for four seconds, and
then asks the terminal to go back to the size it had before and clears the
screen. It takes no options other than `--help`.

If the size of the terminal cannot be read (for example when standard output
is not a terminal), it prints `Bad init code: -1` and exits with a non-zero
status.

The same session can be run from Python with `dungeon.cli.run(out, sleep,
terminal_size)`, which writes to any text stream, takes the function used to
pause and the function that reports the starting terminal size, and returns
the exit status. `dungeon.cli.draw_frame(out)` writes a single cleared and
walled frame.

## What it does not do yet

The command does not read the keyboard, and there is no snake, apple or
anything else that moves in the arena: the frames it draws are the empty
walled field. The building blocks below are not yet wired into the command.

## Building blocks

- `dungeon.vector2.Vector2`: an immutable integer 2D vector. `+` and `-` work
  between vectors; `*` and `/` by a number truncate each component toward
  zero, and dividing by zero raises `ZeroDivisionError`.
- `dungeon.state_machine`: `Transition`, `State` and a hierarchical
  `StateMachine`. `transition(next_state)` runs the old state's exit hooks
  (its nested machine first) and the new state's enter hooks (its nested
  machine after). `update()` ticks the nested machine, then the state's
  `on_update`, then takes the first transition whose condition is true.
- `dungeon.inputs`: `Input` binds a key code to an action; `make_input(key,
  execute)` raises `ValueError` for key codes above `KEY_MAX`.
  `InputHandler(owner, buffer_size)` queues inputs: the buffer size is capped
  at 256 and at most `buffer_size - 1` inputs can wait, so `add()` returns
  `False` when an input is dropped. Each `update()` takes the oldest input and
  runs it, unless its key is the same as the last input that ran.
- `dungeon.entity.Entity`: a one-character sprite with a position, velocity,
  optional state machine and an `active` flag. `update()` ticks the state
  machine and moves by the velocity; `draw(out)` writes a cursor move and the
  sprite. Inactive entities do neither.
- `dungeon.game.Game`: holds up to 999 entities, up to 4 input handlers and a
  table of key states. `poll_input(device_path)` reads pending key events from
  a Linux input device (by default `/dev/input/event15`) into `keys`, ignoring
  autorepeat, and raises `OSError` if the device cannot be opened. `update()`
  runs every input handler and then every entity; `render()` draws every
  entity to the game's output stream.

## Running the tests

```
pip install .[test]
pytest
```