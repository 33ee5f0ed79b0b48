"""Game logic for a harbour-themed property trading board game: board, players, dice, cards, money and control state."""

__version__ = "0.1.0"