"""The score board: money per player, the bank, the current space and turn markers."""

from __future__ import annotations

from collections.abc import Sequence

from .bank import Bank
from .player import Player
from .widgets import Color, MoneyBalanceTextbox, Textbox

POINTER_RED: Color = (250, 50, 50, 255)
POINTER_GREEN: Color = (100, 250, 50, 255)
POINTER_RADIUS = 10.0
MAX_PLAYERS = 4

_SCORE_FONT_SIZE = 20


def _player_key(index: int) -> str:
    return f"PLAYER{index + 1}"


class TurnPointers:
    """A circle per player, green for the player whose turn it is."""

    def __init__(self, total_players: int) -> None:
        self.total_players = total_players
        self.radius = POINTER_RADIUS
        self.positions: dict[str, tuple[float, float]] = {
            _player_key(i): (1155.0, 216.0 + 40.0 * i) for i in range(MAX_PLAYERS)
        }
        self.colors: dict[str, Color] = {
            key: POINTER_GREEN if i == 0 else POINTER_RED
            for i, key in enumerate(self.positions)
        }

    def update(self, player_turn: int) -> None:
        """Colour the pointer of ``player_turn`` green and the others red."""
        for i, key in enumerate(sorted(self.colors)):
            self.colors[key] = POINTER_GREEN if i == player_turn else POINTER_RED


class ScoreBoard:
    """Text boxes showing each player's money, recent changes and the current space."""

    def __init__(
        self,
        total_players: int,
        players: Sequence[Player],
        bank: Bank,
        player_turn: int = 0,
    ) -> None:
        if not 2 <= total_players <= MAX_PLAYERS:
            raise ValueError(f"unsupported number of players: {total_players}")
        if len(players) < total_players:
            raise ValueError("fewer players given than the game needs")
        self.total_players = total_players
        self.players = list(players)
        self.bank = bank
        self.player_turn = player_turn

        self.text_score: dict[str, Textbox] = {}
        for i in range(MAX_PLAYERS):
            money = self.players[i].money if i < total_players else 0
            self.text_score[_player_key(i)] = Textbox(
                1415, 206 + 40 * i, 100, 30, _SCORE_FONT_SIZE, str(money)
            )
        self.text_score["BANK"] = Textbox(
            1418, 164, 100, 30, _SCORE_FONT_SIZE, str(bank.amount)
        )
        self.text_score["SPACE_NAME"] = Textbox(
            1220, 450, 100, 40, _SCORE_FONT_SIZE, "START"
        )
        self.text_score["SPACE_OWNER"] = Textbox(
            1220, 500, 100, 40, _SCORE_FONT_SIZE, "Space owner: x"
        )

        self.balances: dict[str, MoneyBalanceTextbox] = {
            _player_key(i): MoneyBalanceTextbox(
                1315, 206 + 40 * i, 100, 30, _SCORE_FONT_SIZE, "0"
            )
            for i in range(MAX_PLAYERS)
        }
        self.pointers = TurnPointers(total_players)

    def update_amounts(self) -> None:
        """Refresh the money of the player on turn and of the bank."""
        if 0 <= self.player_turn < MAX_PLAYERS:
            self.text_score[_player_key(self.player_turn)].text = str(
                self.players[self.player_turn].money
            )
        self.text_score["BANK"].text = str(self.bank.amount)

    def update_names(self, space_name: str, space_owner: int) -> None:
        """Show the current space and its owner (numbered from one)."""
        self.text_score["SPACE_NAME"].text = space_name
        self.text_score["SPACE_OWNER"].text = f"Space owner: {space_owner + 1}"

    def update(
        self, dt: float, player_turn: int, space_name: str, space_owner: int
    ) -> None:
        """Refresh everything for the player whose turn it is."""
        self.player_turn = player_turn
        self.update_amounts()
        self.update_names(space_name, space_owner)
        self.pointers.update(player_turn)

    def change_score_balance(self, player_num: int, amount: int, hidden: bool) -> None:
        """Show a money change next to player ``player_num``; others are ignored."""
        if not 0 <= player_num < MAX_PLAYERS:
            return
        box = self.balances[_player_key(player_num)]
        box.hidden = bool(hidden)
        box.set_balance(amount)

    def reset_balances(self) -> None:
        """Hide every money change."""
        for i in range(MAX_PLAYERS):
            self.change_score_balance(i, 0, True)