"""Chess rules engine with user accounts, balances, wagers, Elo ratings and clocks."""

__version__ = "0.1.0"

__all__ = [
    "board",
    "castling",
    "errors",
    "game",
    "pieces",
    "program",
    "square",
    "states",
    "timing",
    "user",
]