"""Houses and hotels shown on property spaces."""

from __future__ import annotations

from typing import Any

from .movement import Entity, Vec2


class House(Entity):
    """A single house or hotel piece."""

    def __init__(
        self,
        coords: Vec2,
        texture: Any = None,
        rotation: float = 0.0,
        size: Vec2 = (0.0, 0.0),
    ) -> None:
        super().__init__(
            position=coords,
            size=size,
            scale=(0.04, 0.04),
            rotation=rotation,
            max_velocity=100.0,
        )
        self.texture = texture
        self.active = True


class SpaceHouses:
    """The three houses and one hotel that belong to a property space."""

    def __init__(
        self,
        house_texture: Any,
        hotel_texture: Any,
        house1: Vec2,
        house2: Vec2,
        house3: Vec2,
        rotation: float = 0.0,
    ) -> None:
        self.houses = [
            House(house1, house_texture, rotation),
            House(house2, house_texture, rotation),
            House(house3, house_texture, rotation),
            House(house2, hotel_texture, rotation),
        ]

    def is_house_active(self, index: int) -> bool:
        """Whether the piece at ``index`` is shown."""
        return self.houses[index].active

    def set_house_active(self, index: int, state: bool) -> None:
        """Show or hide the piece at ``index``."""
        self.houses[index].active = bool(state)

    def update(self, dt: float, mouse_pos: Vec2, mouse_pressed: bool) -> None:
        """Update the pieces that are shown."""
        for house in self.houses:
            if house.active:
                house.update(dt, mouse_pos, mouse_pressed)