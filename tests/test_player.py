import pytest

from harbourpoly.player import Player, color_group


def test_defaults():
    player = Player(1000, 920)
    assert player.money == 2500
    assert player.location == 0
    assert player.alive is True
    assert player.diced is False
    assert player.jailed is False
    assert player.position == (1000, 920)


@pytest.mark.parametrize("pos", [1, 3])
def test_color_group_contains_position(pos):
    assert pos in color_group(pos)
    assert color_group(pos) == color_group(1)


@pytest.mark.parametrize("pos", [0, 2, 4, 7, 10, 20, 30, 38])
def test_non_group_positions(pos):
    assert color_group(pos) == ()
    player = Player(0, 0)
    assert player.owned_all_in_color(pos) is False
    assert player.owned_in_color(pos) == 0


def test_owned_property_round_trip():
    player = Player(0, 0)
    player.set_owned_property(6, True)
    assert player.is_property_owned(6) is True
    player.set_owned_property(6, False)
    assert player.is_property_owned(6) is False


@pytest.mark.parametrize("index", [-1, 40])
def test_owned_property_out_of_range(index):
    player = Player(0, 0)
    with pytest.raises(IndexError):
        player.set_owned_property(index, True)
    with pytest.raises(IndexError):
        player.is_property_owned(index)


@pytest.mark.parametrize("pos", [6, 8, 9, 5, 15, 25, 35, 12, 28, 37, 39])
def test_owned_all_in_color_requires_whole_group(pos):
    player = Player(0, 0)
    group = color_group(pos)
    for index in group[:-1]:
        player.set_owned_property(index, True)
    assert player.owned_all_in_color(pos) is False
    assert player.owned_in_color(pos) == len(group) - 1
    player.set_owned_property(group[-1], True)
    assert player.owned_all_in_color(pos) is True
    assert player.owned_in_color(pos) == len(group)


def test_ownership_outside_group_not_counted():
    player = Player(0, 0)
    player.set_owned_property(1, True)
    assert player.owned_in_color(6) == 0


def test_money_round_trip():
    player = Player(0, 0)
    player.take_money(300)
    player.give_money(300)
    assert player.money == 2500


def test_reset():
    player = Player(0, 0)
    player.location = 12
    player.reset()
    assert player.money == 0
    assert player.location == 0
    assert player.alive is False
    assert player.game_piece == " "