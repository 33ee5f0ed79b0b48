"""A single space on the board."""

from __future__ import annotations

from dataclasses import dataclass

MAX_HOUSES = 5


@dataclass
class Space:
    """A board space: property, card draw, tax, jail and so on."""

    name: tuple[str, str]
    space_type: str
    property_cost: int = 0
    free_parking: int = 0
    occupied: bool = False
    owner: int = -1
    mortgaged: bool = False
    houses: int = 0
    rent: int = 0
    tax: int = 0
    action_text: tuple[str, str] = ("", "")

    def upgrade(self) -> bool:
        """Add a house and double the rent; False once five houses stand."""
        if self.houses < MAX_HOUSES:
            self.rent *= 2
            self.houses += 1
            return True
        return False