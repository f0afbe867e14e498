"""Scripted agents for simulation and baselines."""

from random import Random

from agents.base import BaseAgent
from blackjack.hand import DEALER_STAND_TOTAL, dealer_should_hit
from blackjack.table import Action, TableState


class RandomAgent(BaseAgent):
    """Agent that hits or stands at random."""

    def __init__(self, name: str = "Random", seed: int | None = None, hit_probability: float = 0.5) -> None:
        super().__init__(name)
        if not 0.0 <= hit_probability <= 1.0:
            raise ValueError(f"hit_probability must be in [0, 1], got {hit_probability}")
        self._rng = Random(seed)
        self.hit_probability = hit_probability

    def decide(self, table_state: TableState) -> Action:
        if Action.HIT in table_state.valid_actions and self._rng.random() < self.hit_probability:
            return Action.HIT
        return Action.STAND


class DealerMimicAgent(BaseAgent):
    """Agent that plays the dealer's fixed policy on its own hand."""

    def __init__(
        self,
        name: str = "Dealer Mimic",
        stand_total: int = DEALER_STAND_TOTAL,
        hit_soft_17: bool = True,
    ) -> None:
        super().__init__(name)
        self.stand_total = stand_total
        self.hit_soft_17 = hit_soft_17

    def decide(self, table_state: TableState) -> Action:
        if dealer_should_hit(table_state.player, self.stand_total, self.hit_soft_17):
            return Action.HIT
        return Action.STAND


class StandAgent(BaseAgent):
    """Agent that always stands on the opening hand."""

    def __init__(self, name: str = "Stand") -> None:
        super().__init__(name)

    def decide(self, table_state: TableState) -> Action:
        return Action.STAND
