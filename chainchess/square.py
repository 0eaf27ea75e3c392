"""Board coordinates and the geometry of moves between them.

Rank 0 is the top of the board (black's back rank), rank 7 the bottom
(white's back rank); file 0 is the left edge.
"""

from __future__ import annotations

from dataclasses import dataclass

from chainchess.pieces import Color

_SIZE = 8


@dataclass(frozen=True)
class Square:
    """A square on the board, addressed by rank and file."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not (0 <= self.rank < _SIZE and 0 <= self.file < _SIZE):
            raise ValueError(f"square off the board: rank={self.rank}, file={self.file}")

    def _shift(self, ranks: int, files: int) -> Square:
        return Square(self.rank + ranks, self.file + files)

    # single steps

    def up(self) -> Square:
        return self._shift(-1, 0)

    def down(self) -> Square:
        return self._shift(1, 0)

    def right(self) -> Square:
        return self._shift(0, 1)

    def left(self) -> Square:
        return self._shift(0, -1)

    def up_right(self) -> Square:
        return self._shift(-1, 1)

    def up_left(self) -> Square:
        return self._shift(-1, -1)

    def down_right(self) -> Square:
        return self._shift(1, 1)

    def down_left(self) -> Square:
        return self._shift(1, -1)

    # steps relative to a player's side

    def forward(self, color: Color) -> Square:
        return self.up() if color is Color.WHITE else self.down()

    def backward(self, color: Color) -> Square:
        return self.down() if color is Color.WHITE else self.up()

    def forward_right(self, color: Color) -> Square:
        if color is Color.WHITE:
            return self.up().right()
        return self.down().left()

    def forward_left(self, color: Color) -> Square:
        if color is Color.WHITE:
            return self.up().left()
        return self.down().right()

    def backward_right(self, color: Color) -> Square:
        if color is Color.WHITE:
            return self.down().right()
        return self.up().left()

    def backward_left(self, color: Color) -> Square:
        if color is Color.WHITE:
            return self.down().left()
        return self.up().right()

    def double_forward(self, color: Color) -> Square:
        if color is Color.WHITE:
            return self.up().up()
        return self.down().down()

    # position tests

    def is_starting_pawn_square(self, color: Color) -> bool:
        return self.rank == color.starting_pawn_rank()

    def is_top_rank(self) -> bool:
        return self.rank == 0

    def is_bottom_rank(self) -> bool:
        return self.rank == 7

    def is_left_file(self) -> bool:
        return self.file == 0

    def is_right_file(self) -> bool:
        return self.file == 7

    def is_left_file_relative(self, color: Color) -> bool:
        return self.is_left_file() if color is Color.WHITE else self.is_right_file()

    def is_right_file_relative(self, color: Color) -> bool:
        return self.is_right_file() if color is Color.WHITE else self.is_left_file()

    def is_double_forward(self, color: Color, from_square: Square) -> bool:
        """True if this square is a pawn's double step from ``from_square``."""
        return (
            from_square.rank == color.starting_pawn_rank()
            and from_square.double_forward(color) == self
        )

    # rays, nearest square first

    def upper_squares(self) -> list[Square]:
        return [Square(rank, self.file) for rank in range(self.rank - 1, -1, -1)]

    def lower_squares(self) -> list[Square]:
        return [Square(rank, self.file) for rank in range(self.rank + 1, _SIZE)]

    def right_squares(self) -> list[Square]:
        return [Square(self.rank, file) for file in range(self.file + 1, _SIZE)]

    def left_squares(self) -> list[Square]:
        return [Square(self.rank, file) for file in range(self.file - 1, -1, -1)]

    def _diagonal(self, ranks: int, files: int) -> list[Square]:
        squares = []
        rank, file = self.rank + ranks, self.file + files
        while 0 <= rank < _SIZE and 0 <= file < _SIZE:
            squares.append(Square(rank, file))
            rank += ranks
            file += files
        return squares

    def upper_right_squares(self) -> list[Square]:
        return self._diagonal(-1, 1)

    def upper_left_squares(self) -> list[Square]:
        return self._diagonal(-1, -1)

    def lower_right_squares(self) -> list[Square]:
        return self._diagonal(1, 1)

    def lower_left_squares(self) -> list[Square]:
        return self._diagonal(1, -1)

    # knight

    def _knight_upper_jumps(self) -> list[Square]:
        if self.is_starting_pawn_square(Color.BLACK) or self.is_top_rank():
            return []
        if self.is_left_file():
            return [self.up().up().right()]
        if self.is_right_file():
            return [self.up().up().left()]
        return [self.up().up().right(), self.up().up().left()]

    def _knight_lower_jumps(self) -> list[Square]:
        if self.is_starting_pawn_square(Color.WHITE) or self.is_bottom_rank():
            return []
        if self.is_left_file():
            return [self.down().down().right()]
        if self.is_right_file():
            return [self.down().down().left()]
        return [self.down().down().right(), self.down().down().left()]

    def _knight_right_jumps(self) -> list[Square]:
        if self.file >= 6:
            return []
        if self.is_top_rank():
            return [self.right().right().down()]
        if self.is_bottom_rank():
            return [self.right().right().up()]
        return [self.right().right().up(), self.right().right().down()]

    def _knight_left_jumps(self) -> list[Square]:
        if self.file <= 1:
            return []
        if self.is_top_rank():
            return [self.left().left().down()]
        if self.is_bottom_rank():
            return [self.left().left().up()]
        return [self.left().left().up(), self.left().left().down()]

    def knight_jumps(self) -> list[Square]:
        """Squares a knight on this square can reach."""
        return [
            *self._knight_upper_jumps(),
            *self._knight_lower_jumps(),
            *self._knight_right_jumps(),
            *self._knight_left_jumps(),
        ]

    # king and pawn

    def adjacent_squares(self) -> list[Square]:
        """The squares touching this one, without repeats."""
        squares = []
        if not self.is_top_rank():
            squares.append(self.up())
            if not self.is_right_file():
                squares.append(self.up_right())
            if not self.is_left_file():
                squares.append(self.up_left())
        if not self.is_bottom_rank():
            squares.append(self.down())
            if not self.is_right_file():
                squares.append(self.down_right())
            if not self.is_left_file():
                squares.append(self.down_left())
        if not self.is_right_file():
            squares.append(self.right())
        if not self.is_left_file():
            squares.append(self.left())
        return list(dict.fromkeys(squares))

    def pawn_attack_squares(self, color: Color) -> list[Square]:
        """Squares a pawn of ``color`` on this square attacks."""
        squares = []
        if not self.is_left_file_relative(color):
            squares.append(self.forward_left(color))
        if not self.is_right_file_relative(color):
            squares.append(self.forward_right(color))
        return squares

    # castling

    def is_king_square(self, color: Color) -> bool:
        return self == Square(7 if color is Color.WHITE else 0, 4)

    def is_kingside_castle_square(self, color: Color) -> bool:
        return self == Square.kingside_castle_king_square(color)

    def is_queenside_castle_square(self, color: Color) -> bool:
        return self == Square.queenside_castle_king_square(color)

    @staticmethod
    def kingside_castle_squares(color: Color) -> list[Square]:
        rank = 7 if color is Color.WHITE else 0
        return [Square(rank, 5), Square(rank, 6)]

    @staticmethod
    def queenside_castle_squares(color: Color) -> list[Square]:
        rank = 7 if color is Color.WHITE else 0
        return [Square(rank, 1), Square(rank, 2), Square(rank, 3)]

    @staticmethod
    def kingside_castle_king_square(color: Color) -> Square:
        return Square(7 if color is Color.WHITE else 0, 6)

    @staticmethod
    def queenside_castle_king_square(color: Color) -> Square:
        return Square(7 if color is Color.WHITE else 0, 2)

    def is_last_rank(self, color: Color) -> bool:
        """True on the promotion rank for ``color``."""
        return self.is_top_rank() if color is Color.WHITE else self.is_bottom_rank()