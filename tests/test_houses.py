import pytest

from harbourpoly.houses import House, SpaceHouses


def make_houses():
    return SpaceHouses("house", "hotel", (826, 904), (850, 904), (874, 904), 90)


def test_house_defaults():
    house = House((10, 20), "house", 180)
    assert house.active is True
    assert house.position == (10, 20)
    assert house.rotation == 180
    assert house.texture == "house"


def test_space_houses_layout():
    houses = make_houses()
    assert len(houses.houses) == 4
    assert [h.texture for h in houses.houses] == ["house", "house", "house", "hotel"]
    assert houses.houses[3].position == houses.houses[1].position
    assert houses.houses[0].position == (826, 904)
    assert all(h.rotation == 90 for h in houses.houses)


def test_all_active_initially():
    houses = make_houses()
    assert all(houses.is_house_active(i) for i in range(4))


def test_set_house_active_round_trip():
    houses = make_houses()
    houses.set_house_active(2, False)
    assert houses.is_house_active(2) is False
    houses.set_house_active(2, True)
    assert houses.is_house_active(2) is True


def test_invalid_index_raises():
    houses = make_houses()
    with pytest.raises(IndexError):
        houses.is_house_active(4)