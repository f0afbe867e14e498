"""Game runner for simulating blackjack sessions."""

import logging
from dataclasses import dataclass, field
from random import Random

import numpy as np
from tqdm import tqdm

from agents.base import BaseAgent
from blackjack.game import BlackjackGame, GameResult, Outcome
from config.settings import GameConfig

logger = logging.getLogger(__name__)


@dataclass
class SessionResult:
    """Aggregated results of many games played by one agent."""

    num_games: int
    outcomes: dict[Outcome, int] = field(default_factory=dict)
    scores: list[int] = field(default_factory=list)  # +1 / 0 / -1 per game
    player_totals: list[int] = field(default_factory=list)
    dealer_totals: list[int] = field(default_factory=list)
    player_hits: list[int] = field(default_factory=list)

    def add(self, result: GameResult) -> None:
        """Record one finished game."""
        self.outcomes[result.outcome] = self.outcomes.get(result.outcome, 0) + 1
        self.scores.append(result.outcome.score)
        self.player_totals.append(result.player_total)
        self.dealer_totals.append(result.dealer_total)
        self.player_hits.append(result.player_hits)

    def count(self, *outcomes: Outcome) -> int:
        return sum(self.outcomes.get(o, 0) for o in outcomes)

    @property
    def wins(self) -> int:
        return sum(n for o, n in self.outcomes.items() if o.player_won)

    @property
    def losses(self) -> int:
        return sum(n for o, n in self.outcomes.items() if o.player_lost)

    @property
    def pushes(self) -> int:
        return sum(n for o, n in self.outcomes.items() if o.is_push)

    def summary(self) -> dict:
        """Derived statistics for reporting."""
        played = len(self.scores)
        if played == 0:
            return {"num_games": 0}

        scores = np.array(self.scores)
        player_totals = np.array(self.player_totals)
        dealer_totals = np.array(self.dealer_totals)

        return {
            "num_games": played,
            "win_rate": self.wins / played,
            "loss_rate": self.losses / played,
            "push_rate": self.pushes / played,
            "mean_score": float(scores.mean()),
            "score_std": float(scores.std()),
            "player_bust_rate": self.count(Outcome.PLAYER_BUST) / played,
            "dealer_bust_rate": self.count(Outcome.PLAYER_WIN_DEALER_BUST) / played,
            "avg_player_total": float(player_totals.mean()),
            "avg_dealer_total": float(dealer_totals.mean()),
            "avg_player_hits": float(np.mean(self.player_hits)),
            "outcomes": {o.name.lower(): n for o, n in self.outcomes.items()},
        }


class GameRunner:
    """Run blackjack games for an agent."""

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config or GameConfig()
        if seed is None:
            seed = self.config.seed
        self.rng = Random(seed)

    def new_game(self) -> BlackjackGame:
        """Create a game with its own seed drawn from the runner's generator."""
        return BlackjackGame(
            seed=self.rng.randint(0, 2**31),
            dealer_stand_total=self.config.dealer_stand_total,
            dealer_hits_soft_17=self.config.dealer_hits_soft_17,
        )

    def run_game(self, agent: BaseAgent) -> GameResult:
        """Play a single game and notify the agent of the outcome."""
        result = self.new_game().play(agent)
        agent.notify_result(result.outcome)
        return result

    def run_session(
        self,
        agent: BaseAgent,
        num_games: int = 1000,
        show_progress: bool = True,
    ) -> SessionResult:
        """Play ``num_games`` games and collect statistics.

        Args:
            agent: Agent making the player's decisions
            num_games: Number of games to run
            show_progress: Show progress bar

        Returns:
            SessionResult with per-outcome counts and totals
        """
        session = SessionResult(num_games=num_games)

        iterator = range(num_games)
        if show_progress:
            iterator = tqdm(iterator, desc="Playing games", unit="games")

        for _ in iterator:
            session.add(self.run_game(agent))

        logger.info(
            "%s played %d games: %d wins, %d losses, %d pushes",
            agent.name, num_games, session.wins, session.losses, session.pushes,
        )
        return session
