"""The chess board: piece placement and attack detection."""

from __future__ import annotations

from dataclasses import dataclass, field

from chainchess.pieces import Color, Piece
from chainchess.square import Square

_SIZE = 8

_BACK_RANK = ("ROOK", "KNIGHT", "BISHOP", "QUEEN", "KING", "BISHOP", "KNIGHT", "ROOK")


def _starting_grid() -> list[list[Piece]]:
    black_back = [Piece[f"BLACK_{name}"] for name in _BACK_RANK]
    white_back = [Piece[f"WHITE_{name}"] for name in _BACK_RANK]
    empty = [Piece.EMPTY] * _SIZE
    return [
        black_back,
        [Piece.BLACK_PAWN] * _SIZE,
        *(list(empty) for _ in range(4)),
        [Piece.WHITE_PAWN] * _SIZE,
        white_back,
    ]


@dataclass
class Board:
    """An 8x8 grid of pieces indexed as ``squares[rank][file]``."""

    squares: list[list[Piece]] = field(default_factory=_starting_grid)

    def __post_init__(self) -> None:
        if len(self.squares) != _SIZE or any(len(row) != _SIZE for row in self.squares):
            raise ValueError("a board must have 8 ranks of 8 files")
        self.squares = [list(row) for row in self.squares]

    def piece_at(self, square: Square) -> Piece:
        return self.squares[square.rank][square.file]

    def set_piece(self, piece: Piece, square: Square) -> None:
        self.squares[square.rank][square.file] = piece

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Move whatever stands on ``from_square`` onto ``to_square``."""
        piece = self.piece_at(from_square)
        self.set_piece(Piece.EMPTY, from_square)
        self.set_piece(piece, to_square)

    def remove_piece(self, square: Square) -> None:
        self.set_piece(Piece.EMPTY, square)

    def _all_squares(self):
        for rank in range(_SIZE):
            for file in range(_SIZE):
                yield Square(rank, file)

    def find_piece(self, piece: Piece) -> Square | None:
        """First square, scanning rank by rank, holding ``piece``."""
        return next((sq for sq in self._all_squares() if self.piece_at(sq) is piece), None)

    def king_square(self, color: Color) -> Square | None:
        king = Piece.WHITE_KING if color is Color.WHITE else Piece.BLACK_KING
        return self.find_piece(king)

    def open_squares(self, squares: list[Square]) -> list[Square]:
        """The leading run of empty squares along a ray."""
        run = []
        for square in squares:
            if not self.piece_at(square).is_empty():
                break
            run.append(square)
        return run

    def first_piece(self, squares: list[Square]) -> tuple[Piece, Square] | None:
        """The first occupied square along a ray, with its piece."""
        for square in squares:
            piece = self.piece_at(square)
            if not piece.is_empty():
                return piece, square
        return None

    def _first_pieces(self, rays: list[list[Square]]) -> list[tuple[Piece, Square]]:
        return [hit for hit in map(self.first_piece, rays) if hit is not None]

    def diagonal_pieces(self, square: Square) -> list[tuple[Piece, Square]]:
        """Nearest piece in each diagonal direction."""
        return self._first_pieces(
            [
                square.upper_right_squares(),
                square.upper_left_squares(),
                square.lower_right_squares(),
                square.lower_left_squares(),
            ]
        )

    def parallel_pieces(self, square: Square) -> list[tuple[Piece, Square]]:
        """Nearest piece along the rank and file in each direction."""
        return self._first_pieces(
            [
                square.upper_squares(),
                square.lower_squares(),
                square.right_squares(),
                square.left_squares(),
            ]
        )

    def knight_jump_pieces(self, square: Square) -> list[tuple[Piece, Square]]:
        """Pieces standing a knight's jump away."""
        return [
            (self.piece_at(jump), jump)
            for jump in square.knight_jumps()
            if not self.piece_at(jump).is_empty()
        ]

    def is_square_attacked(self, square: Square, color: Color) -> bool:
        """True if a piece of the colour opposing ``color`` attacks ``square``."""

        def hostile(piece: Piece) -> bool:
            return not piece.is_empty() and piece.color() is not color

        if any(
            self.piece_at(sq).is_pawn() and hostile(self.piece_at(sq))
            for sq in square.pawn_attack_squares(color)
        ):
            return True
        if any(
            self.piece_at(sq).is_king() and hostile(self.piece_at(sq))
            for sq in square.adjacent_squares()
        ):
            return True
        if any(
            hostile(piece) and (piece.is_bishop() or piece.is_queen())
            for piece, _ in self.diagonal_pieces(square)
        ):
            return True
        if any(
            hostile(piece) and (piece.is_rook() or piece.is_queen())
            for piece, _ in self.parallel_pieces(square)
        ):
            return True
        return any(
            hostile(piece) and piece.is_knight()
            for piece, _ in self.knight_jump_pieces(square)
        )

    def _can_castle_through(self, squares: list[Square], color: Color) -> bool:
        return all(
            self.piece_at(sq).is_empty() and not self.is_square_attacked(sq, color)
            for sq in squares
        )

    def can_kingside_castle(self, color: Color) -> bool:
        return self._can_castle_through(Square.kingside_castle_squares(color), color)

    def can_queenside_castle(self, color: Color) -> bool:
        return self._can_castle_through(Square.queenside_castle_squares(color), color)

    def apply_kingside_castle_rook(self, color: Color) -> None:
        rank = 7 if color is Color.WHITE else 0
        self.move_piece(Square(rank, 7), Square(rank, 5))

    def apply_queenside_castle_rook(self, color: Color) -> None:
        rank = 7 if color is Color.WHITE else 0
        self.move_piece(Square(rank, 0), Square(rank, 3))

    def color_pieces(self, color: Color) -> list[tuple[Piece, Square]]:
        """Every piece of ``color`` with its square, rank by rank."""
        return [
            (self.piece_at(sq), sq)
            for sq in self._all_squares()
            if not self.piece_at(sq).is_empty() and self.piece_at(sq).color() is color
        ]

    def undo_move(self, from_square: Square, to_square: Square, piece: Piece) -> None:
        """Reverse a move, restoring ``piece`` on the destination."""
        self.move_piece(to_square, from_square)
        self.set_piece(piece, to_square)