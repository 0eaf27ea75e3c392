import pytest

from chainchess.board import Board
from chainchess.game import Game
from chainchess.pieces import Color, Piece
from chainchess.square import Square
from chainchess.states import DrawState, GameState
from chainchess.timing import GameConfig, TimeControl

W, B = Color.WHITE, Color.BLACK


def _empty_board():
    return Board([[Piece.EMPTY] * 8 for _ in range(8)])


def _game(board=None, wager=None, rated=False):
    config = GameConfig(timer=600, increment=5, is_rated=rated, wager=wager)
    if board is None:
        return Game(owner="alice", id=0, game_config=config)
    return Game(owner="alice", id=0, game_config=config, board=board)


def test_new_game_defaults():
    game = _game()
    assert game.game_state is GameState.WAITING
    assert game.time_control == TimeControl.create(600, 5)
    assert game.is_not_started()
    assert game.draw_state is DrawState.NEITHER


def test_key_depends_on_owner_and_id():
    config = GameConfig(timer=60, increment=0)
    a = Game(owner="alice", id=0, game_config=config)
    assert a.key() == Game(owner="alice", id=0, game_config=config).key()
    assert a.key() != Game(owner="alice", id=1, game_config=config).key()
    assert a.key() != Game(owner="bob", id=0, game_config=config).key()


def test_opening_pawn_moves():
    game = _game()
    start = Square(6, 4)
    assert set(game.pawn_moves(W, start)) == {start.forward(W), start.double_forward(W)}


def test_opening_knight_moves():
    game = _game()
    knight = Square(7, 1)
    expected = {knight.up().up().left(), knight.up().up().right()}
    assert set(game.piece_moves(W, knight)) == expected


def test_blocked_pieces_have_no_moves():
    game = _game()
    assert game.piece_moves(W, Square(7, 0)) == []
    assert game.piece_moves(W, Square(7, 2)) == []
    assert game.piece_moves(W, Square(4, 4)) == []


def test_invalid_move_rejected():
    game = _game()
    assert game.is_valid_move(W, Square(6, 4), Square(4, 4))
    assert not game.is_valid_move(W, Square(6, 4), Square(3, 4))


def test_double_step_sets_enpassant():
    game = _game()
    game.move_piece(W, Square(6, 4), Square(4, 4))
    assert game.enpassant == Square(6, 4).forward(W)
    game.move_piece(B, Square(1, 0), Square(2, 0))
    assert game.enpassant is None


def test_enpassant_capture():
    game = _game()
    game.move_piece(W, Square(6, 4), Square(4, 4))
    game.move_piece(B, Square(1, 0), Square(2, 0))
    game.move_piece(W, Square(4, 4), Square(3, 4))
    game.move_piece(B, Square(1, 3), Square(3, 3))
    target = Square(1, 3).forward(B)
    assert game.is_valid_move(W, Square(3, 4), target)
    game.move_piece(W, Square(3, 4), target)
    assert game.board.piece_at(target) is Piece.WHITE_PAWN
    assert game.board.piece_at(Square(3, 3)) is Piece.EMPTY


def test_promotion_and_rook_corner_rights():
    board = _empty_board()
    board.set_piece(Piece.WHITE_PAWN, Square(1, 0))
    board.set_piece(Piece.WHITE_KING, Square(7, 4))
    board.set_piece(Piece.BLACK_KING, Square(0, 4))
    game = _game(board)
    game.move_piece(W, Square(1, 0), Square(0, 0))
    assert game.board.piece_at(Square(0, 0)) is Piece.WHITE_QUEEN
    assert game.board.piece_at(Square(1, 0)) is Piece.EMPTY
    assert not game.castling_rights.has_queenside(B)
    assert game.castling_rights.has_kingside(B)


def test_kingside_castle():
    board = _empty_board()
    board.set_piece(Piece.WHITE_KING, Square(7, 4))
    board.set_piece(Piece.WHITE_ROOK, Square(7, 7))
    board.set_piece(Piece.BLACK_KING, Square(0, 4))
    game = _game(board)
    castle = Square.kingside_castle_king_square(W)
    assert castle in game.king_moves(W, Square(7, 4))
    game.move_piece(W, Square(7, 4), castle)
    assert game.board.piece_at(castle) is Piece.WHITE_KING
    assert game.board.piece_at(Square(7, 5)) is Piece.WHITE_ROOK
    assert game.board.piece_at(Square(7, 7)) is Piece.EMPTY
    assert not game.castling_rights.has_any(W)


def test_fools_mate_is_checkmate():
    game = _game()
    game.move_piece(W, Square(6, 5), Square(5, 5))
    game.move_piece(B, Square(1, 4), Square(3, 4))
    game.move_piece(W, Square(6, 6), Square(4, 6))
    game.move_piece(B, Square(0, 3), Square(4, 7))
    assert game.in_check(W)
    assert game.in_checkmate(W)
    assert not game.in_checkmate(B)


def test_escapable_check_is_not_mate():
    board = _empty_board()
    board.set_piece(Piece.WHITE_KING, Square(7, 4))
    board.set_piece(Piece.BLACK_ROOK, Square(0, 4))
    board.set_piece(Piece.BLACK_KING, Square(0, 0))
    game = _game(board)
    assert game.in_check(W)
    assert not game.in_checkmate(W)
    assert game.board.piece_at(Square(7, 4)) is Piece.WHITE_KING


def test_opening_position_not_in_check():
    game = _game()
    assert not game.in_check(W)
    assert not game.in_checkmate(W)


def test_in_check_without_king_raises():
    game = _game(_empty_board())
    with pytest.raises(ValueError):
        game.in_check(W)


def test_joining_and_turns():
    game = _game()
    assert game.color_available(W)
    game.join("alice", W)
    assert not game.color_available(W)
    assert not game.is_full()
    game.join("bob", B)
    assert game.is_full()
    game.start()
    assert game.is_still_going()
    assert game.current_color() is W
    assert game.current_player() == "alice"
    assert game.adversary(W) == "bob"
    game.next_turn()
    assert game.current_player() == "bob"
    assert game.adversary(B) == "alice"


def test_player_membership_and_leaving():
    game = _game()
    game.join("alice", W)
    assert game.is_in_game("alice")
    assert not game.is_in_game("bob")
    assert game.player_color("alice") is W
    assert game.player_color("bob") is B
    game.leave(W)
    assert not game.is_in_game("alice")


def test_missing_adversary_raises():
    game = _game()
    game.join("alice", W)
    with pytest.raises(ValueError):
        game.adversary(W)


def test_current_player_before_start_raises():
    game = _game()
    with pytest.raises(ValueError):
        game.current_player()


def test_set_winner():
    game = _game()
    game.start()
    game.set_winner(B)
    assert game.game_state is GameState.BLACK_WON
    assert not game.is_still_going()


def test_draw_agreement():
    game = _game()
    game.update_draw_state(W)
    assert game.has_offered_draw(W)
    assert not game.is_draw()
    game.update_draw_state(B)
    assert game.is_draw()
    game.set_draw()
    assert game.game_state is GameState.DRAW


def test_reset_draw_state():
    game = _game()
    game.update_draw_state(B)
    game.reset_draw_state()
    assert not game.has_offered_draw(B)


def test_wager_and_rating():
    game = _game(wager=250, rated=True)
    assert game.has_wager()
    assert game.wager() == 250
    assert game.is_rated()


def test_no_wager_raises():
    game = _game()
    assert not game.has_wager()
    with pytest.raises(ValueError):
        game.wager()


def test_clock_delegation():
    game = _game()
    game.update_time_control(W, 1000)
    assert game.has_time(B, 1599)
    assert not game.has_time(B, 1600)
    assert game.time_control.last_move == 1000