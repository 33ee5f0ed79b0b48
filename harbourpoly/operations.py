"""Money transfers between players, the bank and the score board."""

from __future__ import annotations

from .bank import Bank
from .deck import CardDeck, CardOutcome
from .player import Player
from .scoreboard import ScoreBoard
from .space import Space


class OperationsComponent:
    """Moves money and property, keeping the score board's changes in step."""

    def __init__(
        self,
        bank: Bank,
        score_board: ScoreBoard,
        card_deck: CardDeck,
        max_players: int = 4,
    ) -> None:
        self.bank = bank
        self.score_board = score_board
        self.card_deck = card_deck
        self.max_players = max_players
        self.bought = False
        self.upgraded = False

    def buy_space(self, player: Player, space: Space, player_index: int) -> None:
        """Sell the space the player stands on to the player."""
        player.set_owned_property(player.location, True)
        self.player_to_bank(player, space.property_cost, player_index)
        space.occupied = True
        space.owner = player_index

    def player_to_bank(self, player: Player, amount: int, player_index: int) -> None:
        """Pay ``amount`` from the player to the bank."""
        player.take_money(amount)
        self.bank.give_money(amount)
        self.score_board.change_score_balance(player_index, -amount, False)

    def bank_to_player(self, player: Player, amount: int, player_index: int) -> None:
        """Pay ``amount`` from the bank to the player."""
        self.bank.take_money(amount)
        player.give_money(amount)
        self.score_board.change_score_balance(player_index, amount, False)

    def player_to_player(
        self,
        payer: Player,
        payee: Player,
        amount: int,
        payer_index: int,
        payee_index: int,
    ) -> None:
        """Pay ``amount`` from one player to another."""
        payer.take_money(amount)
        payee.give_money(amount)
        self.score_board.change_score_balance(payer_index, -amount, False)
        self.score_board.change_score_balance(payee_index, amount, False)

    def player_trade(
        self,
        buyer: Player,
        seller: Player,
        space: Space,
        amount: int,
        buyer_index: int,
        seller_index: int,
    ) -> None:
        """Hand ``space`` to the buyer, who pays the seller ``amount``."""
        space.occupied = True
        space.owner = buyer_index
        buyer.set_owned_property(buyer.location, True)
        self.player_to_player(buyer, seller, amount, buyer_index, seller_index)

    def card_to_player(self, player: Player, player_index: int) -> CardOutcome:
        """Apply the drawn card: pay its money and return its outcome."""
        outcome = self.card_deck.card_action(player)
        self.bank_to_player(player, outcome.amount, player_index)
        return outcome