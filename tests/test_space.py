from harbourpoly.space import Space


def make_space(rent=2):
    return Space(("Port of", "Lubeck"), "Property", property_cost=60, rent=rent)


def test_defaults_unowned():
    space = make_space()
    assert space.owner == -1
    assert space.houses == 0
    assert space.mortgaged is False


def test_upgrade_doubles_rent_each_time():
    space = make_space(rent=3)
    previous = space.rent
    for expected_houses in range(1, 6):
        assert space.upgrade() is True
        assert space.houses == expected_houses
        assert space.rent == previous * 2
        previous = space.rent


def test_upgrade_stops_at_five_houses():
    space = make_space()
    for _ in range(5):
        space.upgrade()
    rent = space.rent
    assert space.upgrade() is False
    assert space.houses == 5
    assert space.rent == rent


def test_name_parts():
    space = make_space()
    assert space.name[0] == "Port of"
    assert space.name[1] == "Lubeck"