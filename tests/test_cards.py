import pytest

from harbourpoly.bank import Bank
from harbourpoly.cards import Card, ChanceCard, CommunityCard, HugeCard
from harbourpoly.player import Player


def test_card_is_abstract():
    with pytest.raises(TypeError):
        Card((0.0, 0.0), 0.0, None, "x")


def test_community_card_pays_from_bank():
    bank = Bank()
    player = Player(0, 0)
    before_bank, before_player = bank.amount, player.money
    card = CommunityCard((1.0, 2.0), 135.0, "tex", "CARD_COMMUNITY1", "Collect $75!", 75)
    card.card_action(bank, player)
    assert player.money - before_player == 75
    assert before_bank - bank.amount == 75
    assert bank.amount + player.money == before_bank + before_player


def test_community_card_amount_can_change():
    bank = Bank()
    player = Player(0, 0)
    card = CommunityCard((0.0, 0.0), 0.0, None, "CARD_COMMUNITY0", "Collect $200!", 200)
    card.amount = 30
    card.card_action(bank, player)
    assert bank.amount + player.money == Bank().amount + Player(0, 0).money
    assert player.money == Player(0, 0).money + 30


def test_chance_card_moves_player_to_location():
    player = Player(0, 0)
    player.location = 7
    card = ChanceCard((0.0, 0.0), 315.0, None, "CARD_CHANCE3", "Go to 12!", 0)
    assert card.location == -1
    card.location = 12
    card.card_action(Bank(), player)
    assert player.location == 12


def test_huge_card_has_no_effect():
    bank = Bank()
    player = Player(0, 0)
    card = HugeCard((5.0, 6.0), 45.0, "tex")
    card.card_action(bank, player)
    assert bank.amount == Bank().amount
    assert player.money == Player(0, 0).money
    assert card.name == "Huge Card"
    assert card.amount == 0
    assert card.text == ""


def test_card_keeps_position_rotation_and_scale():
    card = CommunityCard((525.0, 425.0), 135.0, "tex", "CARD_COMMUNITY2", "Collect $150!", 150)
    assert card.position == (525.0, 425.0)
    assert card.rotation == 135.0
    assert card.default_scale == (0.6, 0.6)
    assert card.name == "CARD_COMMUNITY2"
    assert card.text == "Collect $150!"
    assert card.movement is not None and card.movement.max_velocity == 1000.0