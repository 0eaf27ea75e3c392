"""Draw-offer and game-progress states."""

from __future__ import annotations

from enum import Enum

from chainchess.pieces import Color


class DrawState(Enum):
    """Who, if anyone, has offered a draw."""

    NEITHER = 0
    WHITE = 1
    BLACK = 2
    DRAW = 3

    @staticmethod
    def _offer_of(color: Color) -> DrawState:
        return DrawState.WHITE if color is Color.WHITE else DrawState.BLACK

    def color_offered(self, color: Color) -> bool:
        return self is DrawState._offer_of(color)

    def is_draw_with(self, color: Color) -> bool:
        """True if the opponent of ``color`` has an offer standing."""
        return self is DrawState._offer_of(color.opposite())

    def after_offer(self, color: Color) -> DrawState:
        """State after ``color`` offers (or accepts) a draw."""
        if self.is_draw_with(color):
            return DrawState.DRAW
        if self is DrawState.NEITHER:
            return DrawState._offer_of(color)
        return self


class GameState(Enum):
    """Where a game stands: waiting, whose turn, or its result."""

    WAITING = 0
    WHITE = 1
    BLACK = 2
    WHITE_WON = 3
    BLACK_WON = 4
    DRAW = 5

    def current_turn(self) -> Color:
        if self is GameState.WHITE:
            return Color.WHITE
        if self is GameState.BLACK:
            return Color.BLACK
        raise ValueError("Invalid Game State")

    def next_turn(self) -> GameState:
        if self is GameState.WHITE:
            return GameState.BLACK
        if self is GameState.BLACK:
            return GameState.WHITE
        raise ValueError("Invalid Game State")

    def is_still_going(self) -> bool:
        return self in (GameState.WHITE, GameState.BLACK)

    def is_waiting(self) -> bool:
        return self is GameState.WAITING

    def is_finished(self) -> bool:
        return self in (GameState.WHITE_WON, GameState.BLACK_WON, GameState.DRAW)