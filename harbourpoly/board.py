"""The board: space locations, space parameters and house pieces."""

from __future__ import annotations

from dataclasses import dataclass

from .houses import SpaceHouses
from .movement import Vec2
from .space import Space

HOUSE_TEXTURE = "HOUSE_GREEN"
HOTEL_TEXTURE = "HOUSE_RED"


@dataclass(frozen=True)
class Area:
    """Two corner points that mark where a space lies on the board."""

    pos1: Vec2
    pos2: Vec2


_LOCATIONS: tuple[tuple[Vec2, Vec2], ...] = (
    # 1-10
    ((950, 920), (1020, 1000)),
    ((848, 950), (888, 1000)),
    ((768, 950), (808, 1000)),
    ((688, 950), (728, 1000)),
    ((608, 950), (648, 1000)),
    ((528, 950), (568, 1000)),
    ((448, 950), (488, 1000)),
    ((368, 950), (408, 1000)),
    ((288, 950), (328, 1000)),
    ((208, 950), (248, 1000)),
    # 11-20
    ((10, 930), (80, 930)),
    ((40, 810), (95, 855)),
    ((52, 724), (95, 780)),
    ((48, 643), (95, 685)),
    ((40, 557), (95, 605)),
    ((40, 472), (95, 527)),
    ((40, 383), (95, 446)),
    ((40, 300), (95, 370)),
    ((40, 230), (95, 286)),
    ((40, 150), (95, 205)),
    # 21-30
    ((40, 20), (110, 80)),
    ((180, 12), (180, 70)),
    ((260, 12), (260, 70)),
    ((350, 12), (350, 70)),
    ((430, 12), (430, 70)),
    ((511, 12), (511, 70)),
    ((595, 12), (595, 70)),
    ((680, 12), (680, 70)),
    ((760, 12), (760, 70)),
    ((840, 12), (840, 70)),
    # 31-40
    ((935, 12), (1000, 90)),
    ((940, 155), (1005, 200)),
    ((940, 240), (1005, 279)),
    ((940, 320), (1005, 360)),
    ((940, 400), (1005, 450)),
    ((940, 480), (1005, 524)),
    ((940, 564), (1005, 615)),
    ((940, 650), (1005, 695)),
    ((940, 730), (1005, 775)),
    ((940, 810), (1005, 860)),
)

_BLANK = "         "

# (name1, name2, type, cost, rent, tax, occupied, action1, action2)
_SPACES: tuple[tuple[str, str, str, int, int, int, bool, str, str], ...] = (
    # 1-10
    ("   GO!   ", _BLANK, "START", 0, 0, 0, True, "Pass Go! ", "Get $200 "),
    ("  Port of   ", "  Lubeck   ", "Property", 60, 2, 0, True, _BLANK, "   $60   "),
    ("Community", "  Chest  ", "Community Chest", 0, 0, 0, True, " Draw a  ", "  Card   "),
    (" Port of  ", " Rostock ", "Property", 70, 4, 0, True, _BLANK, "   $60   "),
    (" Income  ", "  Tax  ", "Tax", 0, 2, 200, True, _BLANK, "Pay $200 "),
    (" Gdansk Cargo  ", " Terminal ", "RailRoad", 200, 25, 0, True, _BLANK, "  $200   "),
    (" Port of  ", "  Szczecin   ", "Property", 100, 6, 0, True, _BLANK, "  $100   "),
    (" Chance  ", _BLANK, "Chance", 0, 0, 0, True, " Draw a  ", "  card   "),
    ("  Port of  ", "  Gdynia  ", "Property", 100, 6, 0, True, _BLANK, "  $100   "),
    (" Port of  ", " Gdansk   ", "Property", 120, 8, 0, True, _BLANK, "  $120   "),
    # 11-20
    (" Jail  ", _BLANK, "Jail", 0, 0, 0, True, "  Just   ", "Visiting "),
    (" Port of   ", " San Francisco  ", "Property", 140, 10, 0, True, _BLANK, "  $140   "),
    ("Charging ", "Station ", "Utility", 150, 10, 0, True, _BLANK, "  $150   "),
    ("Port of ", "  New Orleans   ", "Property", 140, 10, 0, True, _BLANK, "  $140   "),
    (" Port of ", " Saint-Petersburg   ", "Property", 160, 12, 0, True, _BLANK, "  $160   "),
    ("Gdansk Cargo ", "    Terminal     ", "RailRoad", 200, 25, 0, True, _BLANK, "  $200   "),
    ("  Port of ", "  Copenhagen ", "Property", 180, 14, 0, True, _BLANK, "  $180   "),
    ("Community", "  Chest  ", "Community Chest", 0, 0, 0, True, " Draw a  ", "  Card   "),
    ("  Karlaskrona", "  Port ", "Property", 180, 14, 0, True, _BLANK, "  $180   "),
    ("  Port of ", " New York and New Jersey", "Property", 200, 16, 0, True, _BLANK, "  $200   "),
    # 21-30
    ("Free", "   Parking   ", "FreeParking", 0, 0, 0, False, _BLANK, _BLANK),
    (" Port of ", "Hong Kong", "Property", 220, 18, 0, False, _BLANK, "  $220   "),
    (" Chance  ", _BLANK, "Chance", 0, 0, 0, False, " Draw a  ", "  Card   "),
    (" Port of ", " Rotterdam ", "Property", 220, 18, 0, False, _BLANK, "  $220   "),
    ("Port of ", " Stockholm   ", "Property", 240, 20, 0, False, _BLANK, "  $240   "),
    ("Singapore Cargo ", "   Terminal      ", "RailRoad", 200, 25, 0, False, _BLANK, "  $200   "),
    ("Port of ", "  Jebel Ali", "Property", 260, 22, 0, False, _BLANK, "  $260   "),
    (" Port   ", "Gruz", "Property", 260, 22, 0, False, _BLANK, "  $260   "),
    (" Water Refill ", " Station", "Utility", 150, 10, 0, False, _BLANK, "  $150   "),
    (" Port of ", " Barcelona ", "Property", 280, 22, 0, False, _BLANK, "  $280   "),
    # 31-40
    ("Go to ", " Jail  ", "GoJail", 0, 0, 0, False, _BLANK, _BLANK),
    ("Nagasaki ", "  Port ", "Property", 300, 26, 0, False, _BLANK, "  $300   "),
    ("  Port of ", " Nassau ", "Property", 300, 26, 0, False, _BLANK, "  $300   "),
    ("Community", "  Chest  ", "Community Chest", 0, 0, 0, False, " Draw a  ", "  Card   "),
    (" Port of ", " Tianjin ", "Property", 320, 28, 0, False, _BLANK, "  $320   "),
    ("   Shanghai Cargo", " Terminal ", "RailRoad", 200, 25, 0, False, _BLANK, "  $200   "),
    (" Chance ", _BLANK, "Chance", 0, 0, 0, False, " Draw a  ", "  Card   "),
    (" Port of ", " Istanbul ", "Property", 350, 35, 0, False, _BLANK, "  $350   "),
    (" Luxury  ", "  Tax   ", "Tax", 0, 0, 75, False, _BLANK, " Pay $75 "),
    ("Port of  ", "Singapore ", "Property", 400, 50, 0, False, _BLANK, "  $400   "),
)

# (house1, house2, house3, rotation)
_HOUSES: tuple[tuple[Vec2, Vec2, Vec2, float], ...] = (
    ((826, 904), (850, 904), (874, 904), 0),
    ((662, 904), (686, 904), (710, 904), 0),
    ((416, 904), (440, 904), (464, 904), 0),
    ((252, 904), (276, 904), (300, 904), 0),
    ((170, 904), (194, 904), (218, 904), 0),
    ((176, 826), (176, 850), (176, 874), 90),
    ((176, 664), (176, 688), (176, 712), 90),
    ((176, 580), (176, 604), (176, 628), 90),
    ((176, 418), (176, 442), (176, 466), 90),
    ((176, 254), (176, 278), (176, 302), 90),
    ((176, 170), (176, 194), (176, 218), 90),
    ((207, 176), (231, 176), (255, 176), 180),
    ((371, 176), (395, 176), (419, 176), 180),
    ((454, 176), (478, 176), (502, 176), 180),
    ((617, 176), (642, 176), (665, 176), 180),
    ((699, 176), (723, 176), (747, 176), 180),
    ((862, 176), (886, 176), (910, 176), 180),
    ((905, 207), (905, 231), (905, 255), 270),
    ((905, 289), (905, 313), (905, 337), 270),
    ((905, 454), (905, 478), (905, 502), 270),
    ((905, 698), (905, 722), (905, 746), 270),
    ((905, 862), (905, 886), (905, 910), 270),
)


def _vec(point: Vec2) -> Vec2:
    return (float(point[0]), float(point[1]))


def build_locations() -> list[Area]:
    """Return the on-screen area of each of the forty spaces, in board order."""
    return [Area(_vec(a), _vec(b)) for a, b in _LOCATIONS]


def build_spaces() -> list[Space]:
    """Return the forty spaces of the board, in board order."""
    return [
        Space(
            name=(name1, name2),
            space_type=kind,
            property_cost=cost,
            occupied=occupied,
            rent=rent,
            tax=tax,
            action_text=(action1, action2),
        )
        for name1, name2, kind, cost, rent, tax, occupied, action1, action2 in _SPACES
    ]


def build_houses() -> list[SpaceHouses]:
    """Return the house pieces for every space that can be built on."""
    return [
        SpaceHouses(
            HOUSE_TEXTURE, HOTEL_TEXTURE, _vec(h1), _vec(h2), _vec(h3), float(rotation)
        )
        for h1, h2, h3, rotation in _HOUSES
    ]


class BoardSpaces:
    """All spaces of the board with their locations and house pieces."""

    def __init__(self) -> None:
        self.locations = build_locations()
        self.spaces = build_spaces()
        self.houses = build_houses()

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.spaces):
            raise IndexError(f"board index out of range: {index}")

    def space_pos1(self, index: int) -> Vec2:
        """First corner of the area of the space at ``index``."""
        self._check(index)
        return self.locations[index].pos1

    def space_pos2(self, index: int) -> Vec2:
        """Second corner of the area of the space at ``index``."""
        self._check(index)
        return self.locations[index].pos2

    def space(self, index: int) -> Space:
        """The space at ``index``."""
        self._check(index)
        return self.spaces[index]

    def update(self, dt: float, mouse_pos: Vec2, mouse_pressed: bool) -> None:
        """Update every set of house pieces."""
        for house in self.houses:
            house.update(dt, mouse_pos, mouse_pressed)