"""A die with a sprite-sheet frame for each face."""

from __future__ import annotations

import random
from typing import NamedTuple

from .movement import Entity, Vec2

SHEET_SIZE = (384.0, 448.0)
SHEET_FRAMES = (6, 7)
FACE_ROW = 5


class UvRect(NamedTuple):
    """A rectangle on the sprite sheet, in whole pixels."""

    left: int
    top: int
    width: int
    height: int


class DiceAnimation:
    """Steps through the die faces of one row of a sprite sheet."""

    def __init__(
        self,
        size: Vec2 = SHEET_SIZE,
        image_count: tuple[int, int] = SHEET_FRAMES,
        switch_time: float = 0.01,
    ) -> None:
        self.image_count = image_count
        self.switch_time = switch_time
        self.total_time = 0.0
        self.current = (0, 0)
        self.uv_rect = UvRect(
            0, 0, int(size[0] / image_count[0]), int(size[1] / image_count[1])
        )

    def _place(self, column: int, row: int) -> None:
        self.current = (column, row)
        self.uv_rect = self.uv_rect._replace(
            left=column * self.uv_rect.width, top=row * self.uv_rect.height
        )

    def update(self, dt: float) -> None:
        """Advance to the next face once enough time has passed."""
        column = self.current[0]
        self.total_time += dt
        if self.total_time >= self.switch_time:
            self.total_time -= self.switch_time
            column += 1
            if column >= self.image_count[0]:
                column = 0
        self._place(column, FACE_ROW)

    def set_frame(self, pos: int) -> None:
        """Show the face with ``pos`` pips."""
        self._place(pos - 1, FACE_ROW)


class Dice(Entity):
    """A six-sided die that can be clicked and rolled."""

    sides = 6

    def __init__(self, x: float, y: float, rng: random.Random | None = None) -> None:
        super().__init__(position=(x, y), size=SHEET_SIZE, scale=(0.1, 0.1))
        self._rng = rng if rng is not None else random.Random()
        self.animation = DiceAnimation(SHEET_SIZE, SHEET_FRAMES, 0.01)
        self.animation.update(0.1)

    @property
    def uv_rect(self) -> UvRect:
        """The sheet rectangle currently shown."""
        return self.animation.uv_rect

    def roll(self) -> int:
        """Roll the die, show the result and return it."""
        value = self._rng.randint(1, self.sides)
        self.animation.set_frame(value)
        return value

    def update(self, dt: float, mouse_pos: Vec2, mouse_pressed: bool) -> None:
        """Track whether the die is being clicked."""
        super().update(dt, mouse_pos, mouse_pressed)