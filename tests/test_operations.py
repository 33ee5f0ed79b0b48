import random

import pytest

from harbourpoly.bank import Bank
from harbourpoly.board import build_spaces
from harbourpoly.deck import COMMUNITY, CHANCE, CardDeck
from harbourpoly.operations import OperationsComponent
from harbourpoly.player import STARTING_MONEY, Player
from harbourpoly.scoreboard import ScoreBoard


@pytest.fixture
def setup():
    players = [Player(0, 0), Player(0, 0)]
    bank = Bank()
    board = ScoreBoard(2, players, bank)
    deck = CardDeck(random.Random(3))
    ops = OperationsComponent(bank, board, deck, 2)
    return ops, players, bank, board, deck


def test_buy_space(setup):
    ops, players, bank, board, _ = setup
    space = build_spaces()[1]
    player = players[0]
    player.location = 1
    ops.buy_space(player, space, 0)
    assert player.money == STARTING_MONEY - space.property_cost
    assert bank.amount == Bank().amount + space.property_cost
    assert space.owner == 0
    assert space.occupied is True
    assert player.is_property_owned(1)
    assert board.balances["PLAYER1"].hidden is False


def test_player_to_bank_and_back(setup):
    ops, players, bank, _, _ = setup
    start_bank = bank.amount
    ops.player_to_bank(players[1], 120, 1)
    ops.bank_to_player(players[1], 120, 1)
    assert players[1].money == STARTING_MONEY
    assert bank.amount == start_bank


def test_bank_to_player_shows_gain(setup):
    ops, players, _, board, _ = setup
    ops.bank_to_player(players[0], 200, 0)
    assert players[0].money == STARTING_MONEY + 200
    assert board.balances["PLAYER1"].text == "+200$"


def test_player_to_player_conserves_money(setup):
    ops, players, bank, board, _ = setup
    ops.player_to_player(players[0], players[1], 44, 0, 1)
    assert players[0].money + players[1].money == 2 * STARTING_MONEY
    assert players[1].money - players[0].money == 88
    assert bank.amount == Bank().amount
    assert not board.balances["PLAYER2"].hidden


def test_player_trade(setup):
    ops, players, _, _, _ = setup
    space = build_spaces()[6]
    buyer, seller = players
    buyer.location = 6
    ops.player_trade(buyer, seller, space, 150, 0, 1)
    assert space.owner == 0
    assert buyer.is_property_owned(6)
    assert buyer.money == STARTING_MONEY - 150
    assert seller.money == STARTING_MONEY + 150


@pytest.mark.parametrize("kind", [COMMUNITY, CHANCE])
def test_card_to_player_pays_outcome(setup, kind):
    ops, players, bank, _, deck = setup
    deck.draw_card(kind)
    player = players[0]
    player.location = 7
    outcome = ops.card_to_player(player, 0)
    assert player.money - STARTING_MONEY == outcome.amount
    assert Bank().amount - bank.amount == outcome.amount
    assert outcome.amount == 0 or outcome.steps is None