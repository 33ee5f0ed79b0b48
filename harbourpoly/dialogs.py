"""Modal yes/no dialog boxes."""

from __future__ import annotations

from .movement import Vec2
from .widgets import Button

BACKGROUND_POSITION: Vec2 = (590.0, 250.0)
BACKGROUND_SIZE: Vec2 = (400.0, 250.0)


class DialogBox:
    """A message with a confirm button and, optionally, a cancel button."""

    def __init__(self, text: str, yes_text: str = "OK", no_text: str | None = None) -> None:
        self.text = text
        self.confirm = False
        self.cancel = False
        self.active = False
        self.paused = False
        if no_text is None:
            self.buttons = {"YES": Button(715, 365, 150, 50, yes_text)}
        else:
            self.buttons = {
                "YES": Button(715, 330, 150, 50, yes_text),
                "NO": Button(715, 400, 150, 50, no_text),
            }

    def reset_state(self) -> None:
        """Close the box and forget the answer."""
        self.active = False
        self.confirm = False
        self.cancel = False

    def update(self, mouse_pos: Vec2, mouse_pressed: bool) -> None:
        """Update the buttons and record a confirm or cancel click."""
        for button in self.buttons.values():
            button.update(mouse_pos, mouse_pressed)
        if self.buttons["YES"].pressed:
            self.confirm = True
        no = self.buttons.get("NO")
        if no is not None and no.pressed:
            self.cancel = True


class DialogBoxes:
    """The game's dialog boxes, keyed by name."""

    def __init__(self) -> None:
        self.boxes: dict[str, DialogBox] = {
            "EXIT": DialogBox("Are you sure to quit?", "YES", "NO"),
            "INCOME_TAX": DialogBox("You want to pay?", "$200", "10%"),
        }

    def __getitem__(self, key: str) -> DialogBox:
        return self.boxes[key]

    def is_confirm(self, key: str) -> bool:
        """Whether the box ``key`` was confirmed."""
        return self.boxes[key].confirm

    def is_cancel(self, key: str) -> bool:
        """Whether the box ``key`` was cancelled."""
        return self.boxes[key].cancel

    def is_active(self, key: str) -> bool:
        """Whether the box ``key`` is open."""
        return self.boxes[key].active

    def set_active(self, key: str, state: bool) -> None:
        """Open or close the box ``key``."""
        self.boxes[key].active = bool(state)

    def reset_state(self, key: str) -> None:
        """Close the box ``key`` and forget its answer."""
        self.boxes[key].reset_state()

    def update(self, mouse_pos: Vec2, mouse_pressed: bool) -> None:
        """Update the open boxes."""
        for box in self.boxes.values():
            if box.active:
                box.update(mouse_pos, mouse_pressed)