"""Players and the colour groups of the board."""

from __future__ import annotations

from .movement import Entity, Vec2

BOARD_SIZE = 40
STARTING_MONEY = 2500

_COLOR_GROUPS: tuple[tuple[int, ...], ...] = (
    (1, 3),
    (6, 8, 9),
    (11, 13, 14),
    (16, 18, 19),
    (21, 23, 24),
    (26, 27, 29),
    (31, 32, 34),
    (37, 39),
    (5, 15, 25, 35),  # cargo terminals
    (12, 28),  # utilities
)


def color_group(pos: int) -> tuple[int, ...]:
    """Return the board positions in the same group as ``pos``, or ()."""
    for group in _COLOR_GROUPS:
        if pos in group:
            return group
    return ()


class Player(Entity):
    """A player's token, money, location and owned spaces."""

    def __init__(self, x: float, y: float, size: Vec2 = (0.0, 0.0)) -> None:
        super().__init__(
            position=(x, y), size=size, scale=(0.07, 0.07), max_velocity=100.0
        )
        self.name = ""
        self.game_piece = ""
        self.game_piece_name = ""
        self.money = STARTING_MONEY
        self.location = 0
        self.alive = True
        self.diced = False
        self.jailed = False
        self._owned = [False] * BOARD_SIZE

    @staticmethod
    def _check_index(index: int) -> None:
        if not 0 <= index < BOARD_SIZE:
            raise IndexError(f"board index out of range: {index}")

    def set_owned_property(self, index: int, owned: bool) -> None:
        """Record whether the player owns the space at ``index``."""
        self._check_index(index)
        self._owned[index] = bool(owned)

    def is_property_owned(self, index: int) -> bool:
        """Whether the player owns the space at ``index``."""
        self._check_index(index)
        return self._owned[index]

    def owned_all_in_color(self, pos: int) -> bool:
        """Whether the player owns every space of the group holding ``pos``."""
        group = color_group(pos)
        return bool(group) and all(self._owned[i] for i in group)

    def owned_in_color(self, pos: int) -> int:
        """How many spaces of the group holding ``pos`` the player owns."""
        return sum(self._owned[i] for i in color_group(pos))

    def give_money(self, amount: int) -> None:
        """Add money to the player."""
        self.money += amount

    def take_money(self, amount: int) -> None:
        """Remove money from the player."""
        self.money -= amount

    def reset(self) -> None:
        """Take the player out of the game."""
        self.money = 0
        self.location = 0
        self.game_piece = " "
        self.alive = False