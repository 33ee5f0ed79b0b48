"""The row of buttons the players use during a game."""

from __future__ import annotations

from .movement import Vec2
from .widgets import Button

# (key, x, y, width, height, text)
_LAYOUT: tuple[tuple[str, float, float, float, float, str], ...] = (
    ("ROLL", 1103, 880, 150, 50, "Roll"),
    ("TRADE", 1253, 880, 150, 50, "Trade"),
    ("PRISONEXIT", 1403, 880, 150, 50, "Exit Prison"),
    ("BUY", 1103, 950, 150, 50, "Buy"),
    ("UPGRADE", 1253, 950, 150, 50, "Upgrade"),
    ("ENDTURN", 1403, 950, 150, 50, "End turn"),
    ("PLAYERS1", 1100, 1018, 30, 50, "1"),
    ("PLAYERS2", 1143, 1018, 30, 50, "2"),
    ("PLAYERS3", 1176, 1018, 30, 50, "3"),
    ("PLAYERS4", 1209, 1018, 30, 50, "4"),
    ("RENT_COLLECT", 1253, 1018, 150, 50, "Collect rental fees"),
    ("NULLA", 1403, 1018, 150, 50, "NULLA"),
)

_BLOCKED_BY_DEFAULT = ("ENDTURN", "UPGRADE", "BUY", "PRISONEXIT", "TRADE", "RENT_COLLECT")


class GameButtons:
    """The game's action buttons, keyed by name."""

    def __init__(self) -> None:
        self.buttons: dict[str, Button] = {
            key: Button(x, y, w, h, text) for key, x, y, w, h, text in _LAYOUT
        }
        self.default_states()

    def default_states(self) -> None:
        """Unblock Roll and block the actions that need a roll first."""
        self.buttons["ROLL"].blocked = False
        self.buttons["ROLL"].active = True
        for key in _BLOCKED_BY_DEFAULT:
            self.buttons[key].blocked = True
            self.buttons[key].active = False

    def is_pressed(self, key: str) -> bool:
        """Whether the button ``key`` is being clicked."""
        return self.buttons[key].pressed

    def is_blocked(self, key: str) -> bool:
        """Whether the button ``key`` is blocked."""
        return self.buttons[key].blocked

    def set_blocked(self, key: str, value: bool) -> None:
        """Block or unblock the button ``key``."""
        self.buttons[key].blocked = bool(value)

    def set_active(self, key: str, value: bool) -> None:
        """Mark the button ``key`` ready or not."""
        self.buttons[key].active = bool(value)

    def update(self, mouse_pos: Vec2, mouse_pressed: bool) -> None:
        """Update every button from the mouse."""
        for button in self.buttons.values():
            button.update(mouse_pos, mouse_pressed)