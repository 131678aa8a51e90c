"""A small hierarchical finite state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

Callback = Callable[[Any], None]
Condition = Callable[[Any], bool]


@dataclass(eq=False)
class Transition:
    """A move to ``next_state`` taken when ``condition(owner)`` is true."""

    condition: Optional[Condition]
    next_state: Optional["State"]


@dataclass(eq=False)
class State:
    """A state with optional hooks, outgoing transitions and a nested machine."""

    on_enter: Optional[Callback] = None
    on_update: Optional[Callback] = None
    on_exit: Optional[Callback] = None
    transitions: list[Transition] = field(default_factory=list)
    sub_machine: Optional["StateMachine"] = None


@dataclass(eq=False)
class StateMachine:
    """Tracks the current state for an owner and drives its hooks."""

    owner: Any = None
    current_state: Optional[State] = None

    def transition(self, next_state: Optional[State]) -> None:
        """Leave the current state and enter ``next_state``.

        Leaving a state first shuts down its nested machine; entering a state
        re-enters its nested machine's current state after ``on_enter``.
        """
        current = self.current_state
        if current is not None:
            if current.sub_machine is not None:
                current.sub_machine.transition(None)
            if current.on_exit is not None:
                current.on_exit(self.owner)

        self.current_state = next_state
        if next_state is not None:
            if next_state.on_enter is not None:
                next_state.on_enter(self.owner)
            sub = next_state.sub_machine
            if sub is not None:
                sub.transition(sub.current_state)

    def update(self) -> None:
        """Run one tick: nested machine, then ``on_update``, then transitions.

        The first transition whose condition holds is taken; the rest are
        not checked.
        """
        state = self.current_state
        if state is None:
            return

        if state.sub_machine is not None:
            state.sub_machine.update()

        if state.on_update is not None:
            state.on_update(self.owner)

        state = self.current_state
        if state is None:
            return
        for candidate in state.transitions:
            if candidate.condition is not None and candidate.condition(self.owner):
                self.transition(candidate.next_state)
                break