"""Base agent class for blackjack players."""

from abc import ABC, abstractmethod

from blackjack.game import Outcome
from blackjack.table import Action, TableState


class BaseAgent(ABC):
    """Abstract base class for all player agents."""

    def __init__(self, name: str = "Agent") -> None:
        self.name = name
        self.games_played = 0
        self.wins = 0
        self.losses = 0
        self.pushes = 0

    @abstractmethod
    def decide(self, table_state: TableState) -> Action:
        """Decide whether to hit or stand.

        Args:
            table_state: Current state of the table including:
                - Player cards, total and softness
                - Dealer cards dealt so far
                - Valid actions

        Returns:
            Action to take.
        """
        ...

    def notify_result(self, outcome: Outcome) -> None:
        """Called after a game completes to record the outcome."""
        self.games_played += 1
        if outcome.player_won:
            self.wins += 1
        elif outcome.player_lost:
            self.losses += 1
        else:
            self.pushes += 1

    def reset_stats(self) -> None:
        """Reset statistics."""
        self.games_played = 0
        self.wins = 0
        self.losses = 0
        self.pushes = 0

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"
