"""The Chance and Community Chest decks and the drawn-card animation."""

from __future__ import annotations

import random
from typing import NamedTuple

from .cards import Card, ChanceCard, CommunityCard, HugeCard
from .movement import Vec2
from .player import Player

COMMUNITY = 0
CHANCE = 1

COMMUNITY_ERROR = 10
CHANCE_ERROR = 10

DECK_SIZE = 10

DEFAULT_POSITION_COMMUNITY: Vec2 = (525.0, 425.0)
DEFAULT_POSITION_CHANCE: Vec2 = (562.0, 655.0)
DEFAULT_ROTATION_COMMUNITY = 135.0
DEFAULT_ROTATION_CHANCE = 315.0
CENTER_POSITION: Vec2 = (450.0, 450.0)

_COMMUNITY_NAMES = tuple(f"CARD_COMMUNITY{i}" for i in range(DECK_SIZE))
_CHANCE_NAMES = tuple(f"CARD_CHANCE{i}" for i in range(DECK_SIZE))

TEXTURES: dict[str, str] = {
    **{
        f"CARD_CHANCE{i}": f"Recources/Images/Sprites/Chance/chance{i}.png"
        for i in range(DECK_SIZE)
    },
    **{
        f"CARD_COMMUNITY{i}": f"Recources/Images/Sprites/CommunityChest/community{i}.png"
        for i in range(DECK_SIZE)
    },
}

_COMMUNITY_CARDS: tuple[tuple[str, int], ...] = (
    ("Collect $200!", 200),
    ("Collect $75!", 75),
    ("Collect $150!", 150),
    ("Go to 25!", 0),
    ("Collect $100!", 100),
    ("Collect $20!", 20),
    ("Go to 40!", 0),
    ("Collect $15!", 15),
    ("Collect $200!", 200),
    ("Collect $20!", 20),
)

_CHANCE_CARDS: tuple[tuple[str, int], ...] = (
    ("Go to start & collect $200!", 200),
    ("Go to 29!", 0),
    ("Collect $50!", 50),
    ("Go to 12!", 0),
    ("Collect $100!", 100),
    ("Collect $15!", 15),
    ("Go to 16!", 0),
    ("Collect $15!", 15),
    ("Go to 6!", 0),
    ("Collect $100!", 100),
)


class CardOutcome(NamedTuple):
    """Money paid by a drawn card and the steps it makes the player walk."""

    amount: int
    steps: int | None = None


def community_index(name: str) -> int:
    """Index of a Community Chest card name, or COMMUNITY_ERROR."""
    try:
        return _COMMUNITY_NAMES.index(name)
    except ValueError:
        return COMMUNITY_ERROR


def chance_index(name: str) -> int:
    """Index of a Chance card name, or CHANCE_ERROR."""
    try:
        return _CHANCE_NAMES.index(name)
    except ValueError:
        return CHANCE_ERROR


def _steps_to(location: int, target: int, wrap_target: int | None = None) -> int:
    if location < target:
        return target - location + 1
    return 40 + (target if wrap_target is None else wrap_target) - location + 1


class CardDeck:
    """Both card decks, shuffled, with the enlarged card shown on a draw."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.textures = dict(TEXTURES)
        self.next_community = 0
        self.next_chance = 0
        self.animation = False
        self.display = [False, False]
        self.card_type: int | None = None
        self.community_cards: list[Card] = [
            CommunityCard(
                DEFAULT_POSITION_COMMUNITY,
                DEFAULT_ROTATION_COMMUNITY,
                self.textures[name],
                name,
                text,
                amount,
            )
            for name, (text, amount) in zip(_COMMUNITY_NAMES, _COMMUNITY_CARDS)
        ]
        self.chance_cards: list[Card] = [
            ChanceCard(
                DEFAULT_POSITION_CHANCE,
                DEFAULT_ROTATION_CHANCE,
                self.textures[name],
                name,
                text,
                amount,
            )
            for name, (text, amount) in zip(_CHANCE_NAMES, _CHANCE_CARDS)
        ]
        self._huge = (
            HugeCard(
                DEFAULT_POSITION_COMMUNITY,
                DEFAULT_ROTATION_COMMUNITY,
                self.textures["CARD_COMMUNITY0"],
            ),
            HugeCard(
                DEFAULT_POSITION_CHANCE,
                DEFAULT_ROTATION_CHANCE,
                self.textures["CARD_CHANCE0"],
            ),
        )
        self._rng.shuffle(self.community_cards)
        self._rng.shuffle(self.chance_cards)

    def draw_card(self, kind: int) -> None:
        """Show the next card of the Community (0) or Chance (1) deck."""
        self.card_type = kind
        if kind == COMMUNITY:
            if self.next_community > DECK_SIZE - 1:
                self.next_community -= DECK_SIZE
            self._huge[0].texture = self.community_cards[self.next_community].texture
        elif kind == CHANCE:
            if self.next_chance > DECK_SIZE - 1:
                self.next_chance -= DECK_SIZE
            self._huge[1].texture = self.chance_cards[self.next_chance].texture

    def animate(self, dt: float) -> None:
        """Move the drawn card one step towards the centre of the board."""
        if self.card_type == COMMUNITY:
            card = self._huge[0]
            if card.position != CENTER_POSITION:
                card.rotation = (card.rotation + 9.0) % 360.0
                card.scale = (card.default_scale[0] + 0.4, card.default_scale[1] + 0.4)
                card.position = (card.position[0] - 3.0, card.position[1] + 1.0)
            else:
                self.animation = False
                self.next_community += 1
        elif self.card_type == CHANCE:
            card = self._huge[1]
            x, y = card.position
            cx, cy = CENTER_POSITION
            if not (x >= cx - 1 and y >= cy - 1 and y <= cy + 1):
                card.rotation = (card.rotation - 12.6) % 360.0
                card.scale = (card.default_scale[0] + 0.4, card.default_scale[1] + 0.4)
                card.position = (x - 4.48, y - 8.2)
            else:
                self.animation = False
                self.next_chance += 1

    def card_action(self, player: Player) -> CardOutcome:
        """Work out the effect of the drawn card on ``player``."""
        location = player.location
        if self.card_type == COMMUNITY:
            card = self.community_cards[self.next_community]
            index = community_index(card.name)
            if index == 0:
                return CardOutcome(0, 40 - location + 1)
            if index in (1, 2, 4, 5, 7, 8, 9):
                return CardOutcome(card.amount)
            if index == 3:
                return CardOutcome(0, _steps_to(location, 23, 24))
            if index == 6:
                return CardOutcome(0, _steps_to(location, 39))
        elif self.card_type == CHANCE:
            card = self.chance_cards[self.next_chance]
            index = chance_index(card.name)
            if index == 0:
                return CardOutcome(0, 40 - location + 1)
            if index in (2, 4, 5, 7, 9):
                return CardOutcome(card.amount)
            targets = {1: 28, 3: 11, 6: 15, 8: 5}
            if index in targets:
                return CardOutcome(0, _steps_to(location, targets[index]))
        return CardOutcome(0)

    def set_display(self, which: int, state: bool) -> None:
        """Show or hide the enlarged card; hiding puts it back in place."""
        index = 0 if not which else 1
        if not state:
            card = self._huge[index]
            if index == 0:
                card.rotation = DEFAULT_ROTATION_COMMUNITY
                card.position = DEFAULT_POSITION_COMMUNITY
            else:
                card.rotation = DEFAULT_ROTATION_CHANCE
                card.position = DEFAULT_POSITION_CHANCE
            card.scale = (0.6, 0.6)
        self.display[index] = bool(state)

    def is_displayed(self, which: int) -> bool:
        """Whether the enlarged Community (0) or Chance (1) card is shown."""
        return self.display[0] if not which else self.display[1]

    def huge(self, which: int) -> Card:
        """The enlarged Community (0) or Chance (1) card."""
        return self._huge[0] if not which else self._huge[1]

    def update(self, dt: float, mouse_pos: Vec2, mouse_pressed: bool) -> None:
        """Advance the animation and track clicks on the enlarged cards."""
        if self.animation:
            self.animate(dt)
        for card in self._huge:
            card.update(dt, mouse_pos, mouse_pressed)