"""Clocks and the settings a game is created with."""

from __future__ import annotations

from dataclasses import dataclass

from chainchess.pieces import Color

_NO_MOVE = -1


@dataclass
class TimeControl:
    """Remaining time for each side, in seconds, and the time of the last move."""

    white_timer: int
    black_timer: int
    increment: int
    last_move: int = _NO_MOVE

    @classmethod
    def create(cls, timer: int, increment: int) -> TimeControl:
        """Both sides start with ``timer`` seconds and no move made."""
        return cls(white_timer=timer, black_timer=timer, increment=increment)

    def time_passed(self, now: int) -> int:
        return now - self.last_move

    def is_first_move(self) -> bool:
        return self.last_move == _NO_MOVE

    def has_time(self, color: Color, now: int) -> bool:
        """True if ``color`` still has time left at ``now``."""
        if self.is_first_move():
            return True
        timer = self.white_timer if color is Color.WHITE else self.black_timer
        return now - self.last_move < timer

    def update(self, color: Color, now: int) -> None:
        """Charge ``color`` for the move just made at ``now`` and add the increment."""
        if not self.is_first_move():
            spent = now - self.last_move
            timer = self.white_timer if color is Color.WHITE else self.black_timer
            if spent < 0 or spent > timer:
                raise ValueError(f"time spent {spent} is outside the remaining {timer}")
            remaining = timer - spent + self.increment
            if color is Color.WHITE:
                self.white_timer = remaining
            else:
                self.black_timer = remaining
        self.last_move = now


@dataclass(frozen=True)
class GameConfig:
    """How a game is played: clock, increment, rating and optional wager."""

    timer: int
    increment: int
    is_rated: bool = False
    wager: int | None = None

    def has_wager(self) -> bool:
        return self.wager is not None

    def time_control(self) -> TimeControl:
        return TimeControl.create(self.timer, self.increment)