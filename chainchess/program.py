"""The chess program: instructions acting on user, game and vault accounts.

Every instruction runs as one transaction: if it raises, every account it
touched is restored to what it was before the call. Accounts handed out by
``user`` and ``game`` before a failed instruction should be fetched again.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from contextlib import contextmanager

from chainchess.errors import ChessError, ErrorCode
from chainchess.game import Game
from chainchess.pieces import Color
from chainchess.square import Square
from chainchess.timing import GameConfig
from chainchess.user import User

VAULT = "vault"


def _require(condition: bool, code: ErrorCode) -> None:
    if not condition:
        raise ChessError(code)


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"amount must not be negative: {amount}")


class ChessProgram:
    """Holds every account and runs the game's instructions against them."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._games: dict[str, Game] = {}
        self._lamports: dict[str, int] = {}

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        snapshot = copy.deepcopy((self._users, self._games, self._lamports))
        try:
            yield
        except BaseException:
            self._users, self._games, self._lamports = snapshot
            raise

    def _transfer(self, source: str, destination: str, amount: int) -> None:
        _check_amount(amount)
        available = self.lamports(source)
        if available < amount:
            raise ValueError(f"{source} holds {available} lamports, {amount} needed")
        self._lamports[source] = available - amount
        self._lamports[destination] = self.lamports(destination) + amount

    # accounts

    def airdrop(self, owner: str, amount: int) -> None:
        """Credit ``owner`` with ``amount`` lamports."""
        _check_amount(amount)
        self._lamports[owner] = self.lamports(owner) + amount

    def lamports(self, owner: str) -> int:
        """Lamports held by ``owner``; ``VAULT`` names the program's vault."""
        return self._lamports.get(owner, 0)

    def user(self, owner: str) -> User:
        try:
            return self._users[owner]
        except KeyError:
            raise KeyError(f"no user account for {owner!r}") from None

    def game(self, game_key: str) -> Game:
        try:
            return self._games[game_key]
        except KeyError:
            raise KeyError(f"no game account {game_key!r}") from None

    # instructions

    def initialize_user(self, payer: str) -> None:
        """Create the user account of ``payer`` with the starting rating."""
        if payer in self._users:
            raise ValueError(f"user account for {payer!r} already exists")
        self._users[payer] = User()

    def initialize_game(self, payer: str, config: GameConfig, now: int) -> str:
        """Create a new game owned by ``payer`` and return its key."""
        with self._transaction():
            user = self.user(payer)
            game = Game(owner=payer, id=user.games, game_config=config, created_at=now)
            key = game.key()
            if key in self._games:
                raise ValueError(f"game account {key!r} already exists")
            self._games[key] = game
            user.increment_games()
            return key

    def join_game(self, payer: str, game_key: str, color: Color) -> None:
        """Seat ``payer`` as ``color``, starting the game once both seats are taken."""
        with self._transaction():
            user = self.user(payer)
            game = self.game(game_key)
            _require(game.color_available(color), ErrorCode.COLOR_NOT_AVAILABLE)

            user.set_game(game_key)
            game.join(payer, color)
            if game.is_full():
                game.start()

            if game.has_wager():
                wager = game.wager()
                _require(user.has_sufficient(wager), ErrorCode.INSUFFICIENT_BALANCE)
                user.decrease_balance(wager)

    def move_piece(
        self,
        payer: str,
        adversary: str,
        game_key: str,
        from_square: Square,
        to_square: Square,
        now: int,
    ) -> None:
        """Play a move for the player whose turn it is."""
        with self._transaction():
            user = self.user(payer)
            adversary_user = self.user(adversary)
            game = self.game(game_key)
            color = game.current_color()

            _require(game.has_time(color, now), ErrorCode.TIME_HAS_RUN_OUT)
            _require(payer == game.current_player(), ErrorCode.NOT_USERS_TURN)
            _require(
                game.adversary(color) == adversary,
                ErrorCode.INVALID_ADVERSARY_USER_ACCOUNT,
            )
            _require(game.is_valid_move(color, from_square, to_square), ErrorCode.INVALID_MOVE)

            game.move_piece(color, from_square, to_square)
            _require(not game.in_check(color), ErrorCode.KING_IN_CHECK)

            game.next_turn()
            game.reset_draw_state()

            if game.in_checkmate(color.opposite()):
                game.set_winner(color)
                if game.has_wager():
                    user.increase_balance(game.wager() * 2)
                if game.is_rated():
                    user.won_against(adversary_user.elo)
                    adversary_user.lost_against(user.elo)

            game.update_time_control(color, now)

    def deposit(self, payer: str, amount: int) -> None:
        """Move lamports from ``payer`` into the vault and credit the user's balance."""
        with self._transaction():
            user = self.user(payer)
            self._transfer(payer, VAULT, amount)
            user.increase_balance(amount)

    def withdraw(self, payer: str, amount: int) -> None:
        """Pay lamports out of the vault against the user's balance."""
        with self._transaction():
            user = self.user(payer)
            _require(user.has_sufficient(amount), ErrorCode.INSUFFICIENT_BALANCE)
            self._transfer(VAULT, payer, amount)
            user.decrease_balance(amount)

    def leave_game(self, payer: str, game_key: str) -> None:
        """Give up a seat in a game that has not started, refunding the wager."""
        with self._transaction():
            user = self.user(payer)
            game = self.game(game_key)
            _require(game.is_not_started(), ErrorCode.GAME_ALREADY_STARTED)
            _require(game.is_in_game(payer), ErrorCode.NOT_IN_GAME)

            game.leave(game.player_color(payer))
            if game.has_wager():
                user.increase_balance(game.wager())

    def resign(self, payer: str, adversary: str, game_key: str) -> None:
        """Concede the game to the adversary."""
        with self._transaction():
            user = self.user(payer)
            adversary_user = self.user(adversary)
            game = self.game(game_key)
            color = game.player_color(payer)

            _require(game.is_in_game(payer), ErrorCode.NOT_IN_GAME)
            _require(game.is_still_going(), ErrorCode.INVALID_GAME_STATE)
            _require(
                game.adversary(color) == adversary,
                ErrorCode.INVALID_ADVERSARY_USER_ACCOUNT,
            )

            game.set_winner(color.opposite())
            if game.has_wager():
                adversary_user.increase_balance(game.wager() * 2)
            if game.is_rated():
                user.lost_against(adversary_user.elo)
                adversary_user.won_against(user.elo)

    def offer_draw(self, payer: str, adversary: str, game_key: str) -> None:
        """Offer a draw, or accept one the adversary has offered."""
        with self._transaction():
            user = self.user(payer)
            adversary_user = self.user(adversary)
            game = self.game(game_key)
            color = game.player_color(payer)

            _require(game.is_in_game(payer), ErrorCode.NOT_IN_GAME)
            _require(game.is_still_going(), ErrorCode.INVALID_GAME_STATE)
            _require(
                game.adversary(color) == adversary,
                ErrorCode.INVALID_ADVERSARY_USER_ACCOUNT,
            )
            _require(not game.has_offered_draw(color), ErrorCode.ALREADY_OFFERED_DRAW)

            game.update_draw_state(color)
            if game.is_draw():
                game.set_draw()
                if game.has_wager():
                    user.increase_balance(game.wager())
                    adversary_user.increase_balance(game.wager())
                if game.is_rated():
                    user.draw_against(adversary_user.elo)
                    adversary_user.draw_against(user.elo)

    def check_timer(self, user: str, adversary: str, game_key: str, now: int) -> bool:
        """End the game if the player to move has run out of time.

        Returns True if the clock had run out and the game was decided.
        """
        with self._transaction():
            player = self.user(user)
            adversary_user = self.user(adversary)
            game = self.game(game_key)
            color = game.current_color()

            _require(game.is_in_game(user), ErrorCode.NOT_IN_GAME)
            _require(game.is_in_game(game.adversary(color)), ErrorCode.NOT_IN_GAME)

            if game.has_time(color, now):
                return False

            game.set_winner(color.opposite())
            if game.has_wager():
                adversary_user.increase_balance(game.wager() * 2)
            if game.is_rated():
                player.lost_against(adversary_user.elo)
                adversary_user.won_against(player.elo)
            return True