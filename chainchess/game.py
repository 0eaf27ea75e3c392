"""A game in progress: players, board, clocks and move legality."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field

from chainchess.board import Board
from chainchess.castling import CastlingRights
from chainchess.pieces import Color, Piece
from chainchess.square import Square
from chainchess.states import DrawState, GameState
from chainchess.timing import GameConfig, TimeControl

SEED_GAME = b"game"


def _derive_key(owner: str, game_id: int) -> str:
    seed = SEED_GAME + owner.encode() + game_id.to_bytes(8, "big")
    return hashlib.sha256(seed).hexdigest()


@dataclass
class Game:
    """One game between two players, created by ``owner`` as its ``id``-th game."""

    owner: str
    id: int
    game_config: GameConfig
    created_at: int = 0
    bump: int = 0
    board: Board = field(default_factory=Board)
    game_state: GameState = GameState.WAITING
    white: str | None = None
    black: str | None = None
    enpassant: Square | None = None
    castling_rights: CastlingRights = field(default_factory=CastlingRights)
    draw_state: DrawState = DrawState.NEITHER
    time_control: TimeControl | None = None

    def __post_init__(self) -> None:
        if self.time_control is None:
            self.time_control = self.game_config.time_control()

    def key(self) -> str:
        """Address of this game, fixed by its owner and id."""
        return _derive_key(self.owner, self.id)

    # move legality

    def is_valid_move(self, color: Color, from_square: Square, to_square: Square) -> bool:
        return to_square in self.piece_moves(color, from_square)

    def in_checkmate(self, color: Color) -> bool:
        """True if ``color`` is in check and no move gets it out."""
        if not self.in_check(color):
            return False
        for _, square in self.board.color_pieces(color):
            for target in self.piece_moves(color, square):
                captured = self.board.piece_at(target)
                self.board.move_piece(square, target)
                escaped = not self.in_check(color)
                self.board.undo_move(square, target, captured)
                if escaped:
                    return False
        return True

    def piece_moves(self, color: Color, square: Square) -> list[Square]:
        """Squares the piece on ``square`` may move to, ignoring checks."""
        piece = self.board.piece_at(square)
        if piece.is_pawn():
            return self.pawn_moves(color, square)
        if piece.is_rook():
            return self.rook_moves(color, square)
        if piece.is_knight():
            return self.knight_moves(color, square)
        if piece.is_bishop():
            return self.bishop_moves(color, square)
        if piece.is_queen():
            return self.queen_moves(color, square)
        if piece.is_king():
            return self.king_moves(color, square)
        return []

    def in_check(self, color: Color) -> bool:
        king = self.board.king_square(color)
        if king is None:
            raise ValueError(f"no {color.name.lower()} king on the board")
        return self.board.is_square_attacked(king, color)

    def _is_enemy(self, piece: Piece, color: Color) -> bool:
        return not piece.is_empty() and piece.color() is not color

    def pawn_moves(self, color: Color, square: Square) -> list[Square]:
        moves = []
        forward = square.forward(color)
        if self.board.piece_at(forward).is_empty():
            moves.append(forward)
            if not square.is_starting_pawn_square(color.opposite()):
                double = square.double_forward(color)
                if self.board.piece_at(double).is_empty() and square.is_starting_pawn_square(
                    color
                ):
                    moves.append(double)
        for target in square.pawn_attack_squares(color):
            if self._is_enemy(self.board.piece_at(target), color) or target == self.enpassant:
                moves.append(target)
        return moves

    def rook_moves(self, color: Color, square: Square) -> list[Square]:
        moves = [
            *self.board.open_squares(square.upper_squares()),
            *self.board.open_squares(square.lower_squares()),
            *self.board.open_squares(square.right_squares()),
            *self.board.open_squares(square.left_squares()),
        ]
        moves.extend(
            target
            for piece, target in self.board.parallel_pieces(square)
            if piece.color() is not color
        )
        return moves

    def knight_moves(self, color: Color, square: Square) -> list[Square]:
        return [
            jump
            for jump in square.knight_jumps()
            if self.board.piece_at(jump).is_empty()
            or self.board.piece_at(jump).color() is not color
        ]

    def bishop_moves(self, color: Color, square: Square) -> list[Square]:
        moves = [
            *self.board.open_squares(square.upper_right_squares()),
            *self.board.open_squares(square.lower_right_squares()),
            *self.board.open_squares(square.upper_left_squares()),
            *self.board.open_squares(square.lower_left_squares()),
        ]
        moves.extend(
            target
            for piece, target in self.board.diagonal_pieces(square)
            if piece.color() is not color
        )
        return moves

    def queen_moves(self, color: Color, square: Square) -> list[Square]:
        return [*self.rook_moves(color, square), *self.bishop_moves(color, square)]

    def king_moves(self, color: Color, square: Square) -> list[Square]:
        moves = [
            target
            for target in square.adjacent_squares()
            if self.board.piece_at(target).is_empty()
            or self.board.piece_at(target).color() is not color
        ]
        if self.castling_rights.has_kingside(color) and self.board.can_kingside_castle(color):
            moves.append(Square.kingside_castle_king_square(color))
        if self.castling_rights.has_queenside(color) and self.board.can_queenside_castle(color):
            moves.append(Square.queenside_castle_king_square(color))
        return moves

    def move_piece(self, color: Color, from_square: Square, to_square: Square) -> None:
        """Play a move, handling en passant, promotion, castling and castling rights."""
        current_enpassant = self.enpassant
        self.enpassant = None

        piece = self.board.piece_at(from_square)
        if piece.is_pawn():
            if current_enpassant is not None and to_square == current_enpassant:
                self.board.remove_piece(to_square.backward(color))
            elif to_square.is_double_forward(color, from_square):
                self.enpassant = from_square.forward(color)
            elif to_square.is_last_rank(color):
                self.board.set_piece(color.queen(), from_square)
        elif piece.is_king() and from_square.is_king_square(color):
            if to_square.is_kingside_castle_square(color):
                self.board.apply_kingside_castle_rook(color)
            elif to_square.is_queenside_castle_square(color):
                self.board.apply_queenside_castle_rook(color)

        if self.castling_rights.has_any(color):
            self.castling_rights.update(color, from_square, to_square)
        self.board.move_piece(from_square, to_square)

    # players and turns

    def _player(self, color: Color) -> str:
        player = self.white if color is Color.WHITE else self.black
        if player is None:
            raise ValueError(f"no {color.name.lower()} player has joined")
        return player

    def current_player(self) -> str:
        return self._player(self.game_state.current_turn())

    def current_color(self) -> Color:
        return self.game_state.current_turn()

    def join(self, player: str, color: Color) -> None:
        if color is Color.WHITE:
            self.white = player
        else:
            self.black = player

    def color_available(self, color: Color) -> bool:
        return (self.white if color is Color.WHITE else self.black) is None

    def is_full(self) -> bool:
        return self.white is not None and self.black is not None

    def start(self) -> None:
        self.game_state = GameState.WHITE

    def next_turn(self) -> None:
        self.game_state = self.game_state.next_turn()

    def set_winner(self, color: Color) -> None:
        self.game_state = GameState.WHITE_WON if color is Color.WHITE else GameState.BLACK_WON

    def has_wager(self) -> bool:
        return self.game_config.has_wager()

    def wager(self) -> int:
        if self.game_config.wager is None:
            raise ValueError("game has no wager")
        return self.game_config.wager

    def is_in_game(self, player: str) -> bool:
        return player in (self.white, self.black)

    def player_color(self, player: str) -> Color:
        return Color.WHITE if self.white == player else Color.BLACK

    def leave(self, color: Color) -> None:
        if color is Color.WHITE:
            self.white = None
        else:
            self.black = None

    def is_not_started(self) -> bool:
        return self.game_state.is_waiting()

    def is_still_going(self) -> bool:
        return self.game_state.is_still_going()

    def adversary(self, color: Color) -> str:
        return self._player(color.opposite())

    # draws, rating and clocks

    def is_draw(self) -> bool:
        return self.draw_state is DrawState.DRAW

    def update_draw_state(self, color: Color) -> None:
        self.draw_state = self.draw_state.after_offer(color)

    def set_draw(self) -> None:
        self.game_state = GameState.DRAW

    def reset_draw_state(self) -> None:
        self.draw_state = DrawState.NEITHER

    def has_offered_draw(self, color: Color) -> bool:
        return self.draw_state.color_offered(color)

    def is_rated(self) -> bool:
        return self.game_config.is_rated

    def has_time(self, color: Color, now: int) -> bool:
        return self.time_control.has_time(color, now)

    def update_time_control(self, color: Color, now: int) -> None:
        self.time_control.update(color, now)