"""Errors raised when an instruction breaks the rules of the game."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Every rule violation the program reports, with its number and message."""

    USER_ALREADY_IN_GAME = (6000, "User Already In Game")
    COLOR_NOT_AVAILABLE = (6001, "Color Not Available")
    INVALID_GAME_STATE = (6002, "Invalid Game State")
    NOT_USERS_TURN = (6003, "Not User's Turn")
    INVALID_MOVE = (6004, "Invalid Move")
    KING_IN_CHECK = (6005, "King in Check")
    INSUFFICIENT_BALANCE = (6006, "Insufficient Balance")
    NOT_IN_GAME = (6007, "Not In Game")
    GAME_ALREADY_STARTED = (6008, "Game Already Started")
    INVALID_ADVERSARY_USER_ACCOUNT = (6009, "Invalid Adversary User Account")
    ALREADY_IN_GAME = (6010, "User Already In Game")
    ALREADY_OFFERED_DRAW = (6011, "Already Offered Draw")
    TIME_HAS_RUN_OUT = (6012, "TimeHasRunOut")

    def __init__(self, number: int, message: str) -> None:
        self.number = number
        self.message = message


class ChessError(Exception):
    """Raised when an instruction is rejected; ``code`` says why."""

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(code.message)
        self.code = code