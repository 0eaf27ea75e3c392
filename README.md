# chainchess

A chess rules engine for two players, wrapped in a small account model:
user accounts with Elo ratings and balances, a vault holding deposited
lamports, wagered and rated games, draw offers and per-player clocks.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

`chainchess.program.ChessProgram` holds every account in memory and runs
the instructions against them. Players, games and the vault are named by
plain strings; a game's key is returned by `initialize_game`.

```python
from chainchess.program import ChessProgram
from chainchess.timing import GameConfig
from chainchess.pieces import Color
from chainchess.square import Square

program = ChessProgram()
program.initialize_user("alice")
program.initialize_user("bob")

config = GameConfig(timer=600, increment=5, is_rated=True, wager=None)
game_key = program.initialize_game("alice", config, now=0)
program.join_game("alice", game_key, Color.WHITE)
program.join_game("bob", game_key, Color.BLACK)

# White pawn e2-e4: rank 0 is Black's back rank, rank 7 White's.
program.move_piece("alice", "bob", game_key,
                   Square(rank=6, file=4), Square(rank=4, file=4), now=10)

print(program.game(game_key).game_state)   # GameState.BLACK
```

### Instructions

- `initialize_user(payer)` creates a user at Elo 800 with a zero balance.
- `initialize_game(payer, config, now)` creates a game owned by the payer
  and returns its key.
- `join_game(payer, game_key, color)` takes a seat; the game starts (White
  to move) once both seats are taken. In a wagered game the wager is taken
  from the joining user's balance.
- `move_piece(payer, adversary, game_key, from_square, to_square, now)`
  plays a move for the player to move, applying en passant, castling and
  promotion (always to a queen), and declares the winner on checkmate.
- `leave_game(payer, game_key)` gives up a seat before the game starts and
  refunds the wager.
- `resign(payer, adversary, game_key)` concedes the game.
- `offer_draw(payer, adversary, game_key)` offers a draw, or accepts the
  adversary's standing offer. Any move withdraws a pending offer.
- `check_timer(user, adversary, game_key, now)` ends the game if the player
  to move has run out of time and returns whether it did.
- `airdrop(owner, amount)` credits lamports; `deposit(payer, amount)` moves
  lamports into the vault (`chainchess.program.VAULT`) and raises the user's
  balance; `withdraw(payer, amount)` pays them back out.
- `lamports(owner)`, `user(owner)` and `game(game_key)` read accounts.

A broken rule raises `chainchess.errors.ChessError`, whose `code` is an
`ErrorCode` carrying a `number` and a `message`. Missing accounts raise
`KeyError`; creating an account twice, negative amounts and too few
lamports raise `ValueError`. Each instruction is all-or-nothing: if it
raises, every account is restored to its state before the call, so
account objects fetched earlier should be fetched again.

### Results, wagers and ratings

The winner of a wagered game (by checkmate, resignation or time) is paid
twice the wager; a draw refunds the wager to both players. Rated games
update both ratings with a K-factor of 40, but a rating never goes down:
negative changes are treated as zero.

### Lower-level parts

The rules can be used without accounts: `pieces` (`Color`, `Piece`),
`square` (`Square`), `board` (`Board`), `castling` (`CastlingRights`),
`states` (`GameState`, `DrawState`), `timing` (`TimeControl`,
`GameConfig`), `user` (`User`) and `game` (`Game`, with move generation,
check and checkmate detection).

## What it does not do

- Nothing is stored: all accounts live in a `ChessProgram` object and
  are gone when it is.
- There is no command-line program, network service or board display.
- Stalemate, repetition and the fifty-move rule are not detected, and a
  pawn always promotes to a queen.