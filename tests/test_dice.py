import random

import pytest

from harbourpoly.dice import Dice, DiceAnimation


class _FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self.value


def test_animation_frame_size_divides_sheet():
    anim = DiceAnimation((384.0, 448.0), (6, 7), 0.01)
    assert anim.uv_rect.width * 6 == 384
    assert anim.uv_rect.height * 7 == 448


def test_animation_advances_after_switch_time():
    anim = DiceAnimation((384.0, 448.0), (6, 7), 0.5)
    anim.update(0.1)
    assert anim.uv_rect.left == 0
    anim.update(0.5)
    assert anim.uv_rect.left == anim.uv_rect.width
    assert anim.uv_rect.top == 5 * anim.uv_rect.height


def test_animation_wraps_to_first_column():
    anim = DiceAnimation((384.0, 448.0), (6, 7), 0.01)
    for _ in range(6):
        anim.update(0.01)
    assert anim.uv_rect.left == 0


def test_set_frame_selects_face():
    anim = DiceAnimation((384.0, 448.0), (6, 7), 0.01)
    anim.set_frame(1)
    assert anim.uv_rect.left == 0
    anim.set_frame(6)
    assert anim.uv_rect.left == 5 * anim.uv_rect.width


def test_roll_uses_one_to_six_and_shows_face():
    rng = _FixedRng(4)
    die = Dice(590.0, 400.0, rng=rng)
    assert die.roll() == 4
    assert rng.calls == [(1, 6)]
    assert die.uv_rect.left == 3 * die.uv_rect.width


@pytest.mark.parametrize("seed", range(10))
def test_roll_stays_in_range(seed):
    die = Dice(0.0, 0.0, rng=random.Random(seed))
    for _ in range(20):
        assert 1 <= die.roll() <= 6


def test_click_on_die():
    die = Dice(590.0, 400.0)
    die.update(0.1, (600.0, 410.0), True)
    assert die.pressed is True
    die.update(0.1, (10.0, 10.0), True)
    assert die.pressed is False