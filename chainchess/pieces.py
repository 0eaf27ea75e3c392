"""Colours and pieces of a chess board."""

from __future__ import annotations

from enum import Enum


class Color(Enum):
    """The side a piece or player belongs to."""

    WHITE = 0
    BLACK = 1

    def opposite(self) -> Color:
        """Return the other colour."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def pawn_direction(self) -> int:
        """Rank step of a pawn moving forward (white moves towards rank 0)."""
        return -1 if self is Color.WHITE else 1

    def starting_pawn_rank(self) -> int:
        """Rank on which this colour's pawns start."""
        return 6 if self is Color.WHITE else 1

    def queen(self) -> Piece:
        """The queen of this colour, used for promotion."""
        return Piece.WHITE_QUEEN if self is Color.WHITE else Piece.BLACK_QUEEN


class Piece(Enum):
    """Contents of a board square."""

    EMPTY = 0
    BLACK_PAWN = 1
    BLACK_ROOK = 2
    BLACK_KNIGHT = 3
    BLACK_BISHOP = 4
    BLACK_QUEEN = 5
    BLACK_KING = 6
    WHITE_PAWN = 7
    WHITE_ROOK = 8
    WHITE_KNIGHT = 9
    WHITE_BISHOP = 10
    WHITE_QUEEN = 11
    WHITE_KING = 12

    def color(self) -> Color:
        """Colour of the piece; an empty square has none."""
        if self is Piece.EMPTY:
            raise ValueError("Empty has no Color")
        return Color.WHITE if self.name.startswith("WHITE") else Color.BLACK

    def is_white(self) -> bool:
        return self.color() is Color.WHITE

    def is_black(self) -> bool:
        return self.color() is Color.BLACK

    def is_empty(self) -> bool:
        return self is Piece.EMPTY

    def is_pawn(self) -> bool:
        return self in (Piece.WHITE_PAWN, Piece.BLACK_PAWN)

    def is_rook(self) -> bool:
        return self in (Piece.WHITE_ROOK, Piece.BLACK_ROOK)

    def is_knight(self) -> bool:
        return self in (Piece.WHITE_KNIGHT, Piece.BLACK_KNIGHT)

    def is_bishop(self) -> bool:
        return self in (Piece.WHITE_BISHOP, Piece.BLACK_BISHOP)

    def is_queen(self) -> bool:
        return self in (Piece.WHITE_QUEEN, Piece.BLACK_QUEEN)

    def is_king(self) -> bool:
        return self in (Piece.WHITE_KING, Piece.BLACK_KING)