"""Chance and Community Chest cards."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .bank import Bank
from .movement import Entity, Vec2
from .player import Player

CARD_SCALE = (0.6, 0.6)
CARD_MAX_VELOCITY = 1000.0


class Card(Entity, ABC):
    """A named card lying on the board."""

    def __init__(
        self,
        pos: Vec2,
        rotation: float,
        texture: Any,
        name: str,
        size: Vec2 = (0.0, 0.0),
    ) -> None:
        super().__init__(
            position=pos,
            size=size,
            scale=CARD_SCALE,
            rotation=rotation,
            max_velocity=CARD_MAX_VELOCITY,
        )
        self.texture = texture
        self.name = name
        self.text = ""
        self.amount = 0

    @abstractmethod
    def card_action(self, bank: Bank, player: Player) -> None:
        """Apply the card's effect to the bank and the player."""


class ChanceCard(Card):
    """A Chance card that can send the player to a board location."""

    def __init__(
        self,
        pos: Vec2,
        rotation: float,
        texture: Any,
        name: str,
        text: str,
        amount: int,
        size: Vec2 = (0.0, 0.0),
    ) -> None:
        super().__init__(pos, rotation, texture, name, size)
        self.text = text
        self.amount = amount
        self.location = -1

    def card_action(self, bank: Bank, player: Player) -> None:
        """Move the player to the card's location."""
        player.location = self.location


class CommunityCard(Card):
    """A Community Chest card that pays the player from the bank."""

    def __init__(
        self,
        pos: Vec2,
        rotation: float,
        texture: Any,
        name: str,
        text: str,
        amount: int,
        size: Vec2 = (0.0, 0.0),
    ) -> None:
        super().__init__(pos, rotation, texture, name, size)
        self.text = text
        self.amount = amount

    def card_action(self, bank: Bank, player: Player) -> None:
        """Pay the card's amount from the bank to the player."""
        bank.take_money(self.amount)
        player.give_money(self.amount)


class HugeCard(Card):
    """The enlarged card shown when a card is drawn; it has no effect."""

    def __init__(
        self, pos: Vec2, rotation: float, texture: Any, size: Vec2 = (0.0, 0.0)
    ) -> None:
        super().__init__(pos, rotation, texture, "Huge Card", size)

    def card_action(self, bank: Bank, player: Player) -> None:
        """Leave the bank and the player untouched."""
        return None