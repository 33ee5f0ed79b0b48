# harbourpoly

Game logic for a property trading board game set in the world's harbours.
The board has forty spaces: ports to buy, cargo terminals, utilities, taxes,
Chance and Community Chest cards, jail, and the start square. Two to four
players take part.

The package holds the game's rules and state and draws nothing. Feed it the
mouse position, whether the mouse button is down, and the frame time. Then
read back positions, balances and widget states and draw them with whatever
library you like.

## Installing

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install .[test]
pytest
```

## What is inside

- `harbourpoly.movement`: `MovementComponent` (velocity and interpolation
  between two points) and `Entity`, a positioned, scaled and rotated rectangle
  that notices clicks.
- `harbourpoly.bank`: `Bank`, the money reserve. It starts at 100000.
- `harbourpoly.space`: `Space`, one square of the board, with its cost, rent,
  tax, owner and houses. `Space.upgrade` adds a house and doubles the rent,
  up to five houses.
- `harbourpoly.player`: `Player`, with money (2500 at the start), location,
  owned properties and jail state. `color_group` returns the board indexes of
  the group a given index belongs to.
- `harbourpoly.houses`: `House` and `SpaceHouses`, the three houses and one
  hotel marker of a property.
- `harbourpoly.board`: `BoardSpaces`, the forty spaces, their screen areas
  (`Area`) and the house markers. `build_locations`, `build_spaces` and
  `build_houses` return the fixed board data.
- `harbourpoly.dice`: `Dice`, which rolls 1 to 6 and shows the face, and
  `DiceAnimation`, which picks the face from a sprite sheet.
- `harbourpoly.cards`: `ChanceCard`, `CommunityCard` and `HugeCard`, the
  enlarged card shown after a draw.
- `harbourpoly.deck`: `CardDeck`, both decks shuffled, the draw animation,
  and `CardDeck.card_action`. It returns a `CardOutcome`, which holds the money
  the card pays and the number of steps it sends the player.
- `harbourpoly.operations`: `OperationsComponent`, which moves money between
  the bank and players, records purchases and trades, and shows each change on
  the score board.
- `harbourpoly.widgets`: `Button`, `ButtonState`, `Textbox` and
  `MoneyBalanceTextbox`.
- `harbourpoly.game_buttons`: `GameButtons`, the in-game action buttons
  (`ROLL`, `BUY`, `TRADE`, `ENDTURN` and others), keyed by name.
- `harbourpoly.dialogs`: `DialogBox` and `DialogBoxes`, the `EXIT` and
  `INCOME_TAX` yes/no boxes.
- `harbourpoly.scoreboard`: `ScoreBoard` and `TurnPointers`, the money
  read-outs, the current space and the turn markers.

## A short example

```python
import random

from harbourpoly.bank import Bank
from harbourpoly.board import BoardSpaces
from harbourpoly.deck import CardDeck
from harbourpoly.operations import OperationsComponent
from harbourpoly.player import Player
from harbourpoly.scoreboard import ScoreBoard

bank = Bank()
players = [Player(1000, 920), Player(980, 1000)]
board = BoardSpaces()
score_board = ScoreBoard(2, players, bank)
operations = OperationsComponent(bank, score_board, CardDeck(random.Random(7)))

buyer = players[0]
buyer.location = 1
operations.buy_space(buyer, board.space(1), 0)
print(buyer.money, bank.amount, board.space(1).owner)  # 2440 100060 0
```

## What it does not do

The package provides the building blocks of a game, not a playable game. It
has no turn loop and no object that decides what happens when a player lands
on a space. It also has no collection that manages the players of a game. It
draws nothing, plays no sound and reads no configuration files. It has no
command to start it. A front end has to roll the dice, move players, call the
operations and wire the buttons and dialogs together.