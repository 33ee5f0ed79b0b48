"""The bank that holds the game's money."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Bank:
    """A money pool starting at 100000."""

    amount: int = 100000

    def give_money(self, amount: int) -> None:
        """Add money to the bank."""
        self.amount += amount

    def take_money(self, amount: int) -> None:
        """Remove money from the bank."""
        self.amount -= amount