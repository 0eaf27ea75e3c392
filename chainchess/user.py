"""A player's account: rating, balance and current game."""

from __future__ import annotations

from dataclasses import dataclass

SEED_USER = b"user"
_ELO_FACTOR = 40.0


@dataclass
class User:
    """A registered player."""

    current_game: str | None = None
    elo: int = 800
    games: int = 0
    balance: int = 0

    def set_game(self, game: str) -> None:
        self.current_game = game

    def increment_games(self) -> None:
        self.games += 1

    def in_game(self) -> bool:
        return self.current_game is not None

    def increase_balance(self, amount: int) -> None:
        self.balance += amount

    def decrease_balance(self, amount: int) -> None:
        if not self.has_sufficient(amount):
            raise ValueError(f"balance {self.balance} is below {amount}")
        self.balance -= amount

    def has_sufficient(self, amount: int) -> bool:
        return amount <= self.balance

    def expected_score(self, adversary_elo: int) -> float:
        """Elo expected score against an opponent rated ``adversary_elo``."""
        return 1.0 / (1.0 + 10.0 ** ((adversary_elo - self.elo) / 400.0))

    def new_elo(self, adversary_elo: int, score: float) -> int:
        """Rating after scoring ``score``; negative changes are clamped to zero."""
        change = _ELO_FACTOR * (score - self.expected_score(adversary_elo))
        return self.elo + max(0, int(change))

    def won_against(self, adversary_elo: int) -> None:
        self.elo = self.new_elo(adversary_elo, 1.0)

    def draw_against(self, adversary_elo: int) -> None:
        self.elo = self.new_elo(adversary_elo, 0.5)

    def lost_against(self, adversary_elo: int) -> None:
        self.elo = self.new_elo(adversary_elo, 0.0)