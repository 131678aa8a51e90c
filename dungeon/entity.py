"""Game entities with a sprite, a position and optional behaviour."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, TextIO

from dungeon.state_machine import StateMachine
from dungeon.vector2 import Vector2


@dataclass(eq=False)
class Entity:
    """Something in the dungeon that moves, thinks and can be drawn.

    Inactive entities are neither drawn nor updated.
    """

    owner: Any
    sprite: str
    position: Vector2 = field(default_factory=Vector2)
    state_machine: Optional[StateMachine] = None
    velocity: Vector2 = field(default_factory=Vector2)
    active: bool = False

    def __post_init__(self) -> None:
        if len(self.sprite) != 1:
            raise ValueError("an entity sprite must be a single character")

    def draw(self, out: TextIO) -> None:
        """Write the sprite at the entity's position as a terminal cursor move."""
        if self.active:
            out.write(f"\033[{self.position.x};{self.position.y}H")
            out.write(self.sprite)

    def update(self) -> None:
        """Tick the state machine, then move by the current velocity."""
        if not self.active:
            return
        if self.state_machine is not None:
            self.state_machine.update()
        self.position = self.position + self.velocity