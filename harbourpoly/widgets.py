"""Clickable buttons and text boxes drawn on the game screen."""

from __future__ import annotations

from enum import IntEnum

from .movement import Vec2

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
RED: Color = (255, 0, 0, 255)
GREEN: Color = (0, 255, 0, 255)

IDLE_COLOR: Color = (70, 70, 70, 200)
HOVER_COLOR: Color = (150, 150, 150, 255)
ACTIVE_COLOR: Color = (20, 20, 20, 200)
READY_COLOR: Color = (153, 206, 143, 255)
BLOCK_COLOR: Color = (245, 80, 76, 255)

BUTTON_CHARACTER_SIZE = 12


class ButtonState(IntEnum):
    """What a button shows: idle, hovered, pressed, ready or blocked."""

    IDLE = 0
    HOVER = 1
    ACTIVE = 2
    READY = 3
    BLOCK = 4


class Button:
    """A rectangular button that reacts to the mouse."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        text: str,
        idle_color: Color = IDLE_COLOR,
        hover_color: Color = HOVER_COLOR,
        active_color: Color = ACTIVE_COLOR,
        ready_color: Color = READY_COLOR,
        block_color: Color = BLOCK_COLOR,
    ) -> None:
        self.position: Vec2 = (float(x), float(y))
        self.size: Vec2 = (float(width), float(height))
        self.text = text
        self.text_color = WHITE
        self.character_size = BUTTON_CHARACTER_SIZE
        self.colors: dict[ButtonState, Color] = {
            ButtonState.IDLE: idle_color,
            ButtonState.HOVER: hover_color,
            ButtonState.ACTIVE: active_color,
            ButtonState.READY: ready_color,
            ButtonState.BLOCK: block_color,
        }
        self.state = ButtonState.IDLE
        self.blocked = False
        self.active = False
        self.hover = False
        self.fill_color: Color = idle_color

    @property
    def pressed(self) -> bool:
        """Whether the button is being clicked."""
        return self.state is ButtonState.ACTIVE

    def _contains(self, point: Vec2) -> bool:
        x, y = point
        left, top = self.position
        width, height = self.size
        return left <= x < left + width and top <= y < top + height

    def toggle(self) -> None:
        """Flip between blocked and active."""
        self.blocked = not self.blocked
        self.active = not self.blocked

    def set_color(self, state: int) -> None:
        """Fill the button with the colour of ``state``; red for an unknown one."""
        try:
            self.fill_color = self.colors[ButtonState(state)]
        except ValueError:
            self.fill_color = RED

    def update(self, mouse_pos: Vec2, mouse_pressed: bool) -> None:
        """Work out hover and press from the mouse and recolour the button."""
        self.state = ButtonState.IDLE
        if self._contains(mouse_pos):
            self.state = ButtonState.HOVER
            if mouse_pressed:
                self.state = ButtonState.ACTIVE

        if self.blocked:
            self.set_color(ButtonState.BLOCK)
        elif self.state is ButtonState.IDLE:
            if self.active:
                self.set_color(ButtonState.READY)
            elif self.hover:
                self.set_color(ButtonState.HOVER)
            else:
                self.set_color(ButtonState.IDLE)
        else:
            self.set_color(self.state)


class Textbox:
    """A line of text centred in a box."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        font_size: int,
        text: str,
        idle_color: Color = IDLE_COLOR,
        text_color: Color = WHITE,
    ) -> None:
        self.position: Vec2 = (float(x), float(y))
        self.size: Vec2 = (float(width), float(height))
        self.font_size = font_size
        self.text = text
        self.idle_color = idle_color
        self.text_color = text_color


class MoneyBalanceTextbox(Textbox):
    """A text box showing the last change of a player's money."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        font_size: int,
        text: str,
        idle_color: Color = IDLE_COLOR,
    ) -> None:
        super().__init__(x, y, width, height, font_size, text, idle_color)
        self.hidden = True

    def set_balance(self, balance: int) -> None:
        """Show a gain in green or a loss in red; zero leaves the box as is."""
        if balance > 0:
            self.text = f"+{balance}$"
            self.text_color = GREEN
        elif balance < 0:
            self.text = f"{balance}$"
            self.text_color = RED