"""Castling rights of both players."""

from __future__ import annotations

from dataclasses import dataclass

from chainchess.pieces import Color
from chainchess.square import Square


@dataclass
class CastlingRights:
    """Which castles each side may still make."""

    white_kingside: bool = True
    white_queenside: bool = True
    black_kingside: bool = True
    black_queenside: bool = True

    def lose_all(self, color: Color) -> None:
        if color is Color.WHITE:
            self.white_kingside = self.white_queenside = False
        else:
            self.black_kingside = self.black_queenside = False

    def has_kingside(self, color: Color) -> bool:
        return self.white_kingside if color is Color.WHITE else self.black_kingside

    def has_queenside(self, color: Color) -> bool:
        return self.white_queenside if color is Color.WHITE else self.black_queenside

    def has_any(self, color: Color) -> bool:
        return self.has_kingside(color) or self.has_queenside(color)

    def _lose_corner(self, square: Square) -> bool:
        """Drop the right tied to a rook corner; True if ``square`` was one."""
        if square.is_top_rank():
            if square.is_left_file():
                self.black_queenside = False
                return True
            if square.is_right_file():
                self.black_kingside = False
                return True
        elif square.is_bottom_rank():
            if square.is_left_file():
                self.white_queenside = False
                return True
            if square.is_right_file():
                self.white_kingside = False
                return True
        return False

    def update(self, color: Color, from_square: Square, to_square: Square) -> None:
        """Adjust rights after ``color`` moves from one square to another."""
        if from_square.is_king_square(color):
            self.lose_all(color)
            return
        if self._lose_corner(from_square):
            return
        self._lose_corner(to_square)