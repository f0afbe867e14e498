"""Blackjack game orchestration."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import TYPE_CHECKING

from blackjack.cards import Card, Deck, OutOfCardsError
from blackjack.hand import BLACKJACK, DEALER_STAND_TOTAL, Hand, dealer_should_hit
from blackjack.table import Action, TableState, create_table_state

if TYPE_CHECKING:
    from agents.base import BaseAgent

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Raised when a resolved game is asked to deal more cards."""


class GameNotOverError(RuntimeError):
    """Raised when the result of a game still in progress is requested."""


class GameAbortedError(RuntimeError):
    """Raised when the result of a game that ran out of cards is requested."""


class GameStatus(Enum):
    """Lifecycle of a single game."""

    ACTIVE = auto()  # Player still deciding
    RESOLVED = auto()  # Final; result is available
    ABORTED = auto()  # Final; deck ran out while the dealer drew, no result


class Outcome(Enum):
    """Final classification of a game from the player's point of view."""

    PLAYER_WIN_DEALER_BUST = auto()
    BLACKJACK_PUSH = auto()
    PLAYER_BUST = auto()
    DEALER_WIN = auto()
    PLAYER_WIN = auto()
    PUSH = auto()

    def __str__(self) -> str:
        messages = {
            Outcome.PLAYER_WIN_DEALER_BUST: "You win! Dealer bust.",
            Outcome.BLACKJACK_PUSH: "You both hit blackjack! You Tie.",
            Outcome.PLAYER_BUST: "You lose! You bust.",
            Outcome.DEALER_WIN: "You lose! Dealer has a higher score.",
            Outcome.PLAYER_WIN: "You win! You have a higher score.",
            Outcome.PUSH: "Push. You have the same score as the dealer.",
        }
        return messages[self]

    @property
    def player_won(self) -> bool:
        return self in (Outcome.PLAYER_WIN_DEALER_BUST, Outcome.PLAYER_WIN)

    @property
    def player_lost(self) -> bool:
        return self in (Outcome.PLAYER_BUST, Outcome.DEALER_WIN)

    @property
    def is_push(self) -> bool:
        return self in (Outcome.BLACKJACK_PUSH, Outcome.PUSH)

    @property
    def score(self) -> int:
        """+1 for a player win, -1 for a loss, 0 for a push."""
        if self.player_won:
            return 1
        if self.player_lost:
            return -1
        return 0


@dataclass
class GameResult:
    """Result of a completed game."""

    outcome: Outcome
    player_cards: tuple[Card, ...]
    dealer_cards: tuple[Card, ...]
    player_total: int
    dealer_total: int
    player_hits: int  # Cards drawn by the player after the opening deal


class BlackjackGame:
    """One round of blackjack between a player and the dealer.

    The game is ACTIVE until the player stands (the dealer then draws to
    its policy) or busts. Once RESOLVED no more cards can be dealt and
    ``result()`` is available. A deck that runs out while the dealer draws
    leaves the game ABORTED, with no result.
    """

    def __init__(
        self,
        rng: Random | None = None,
        seed: int | None = None,
        deck: Deck | None = None,
        dealer_stand_total: int = DEALER_STAND_TOTAL,
        dealer_hits_soft_17: bool = True,
    ) -> None:
        if deck is None:
            deck = Deck(rng=rng, seed=seed)
            deck.shuffle()
        self.deck = deck
        self.dealer = Hand()
        self.player = Hand()
        self.status = GameStatus.ACTIVE
        self.dealer_stand_total = dealer_stand_total
        self.dealer_hits_soft_17 = dealer_hits_soft_17

    @property
    def done(self) -> bool:
        return self.status != GameStatus.ACTIVE

    def _resolve(self) -> None:
        self.status = GameStatus.RESOLVED

    def _check_active(self) -> None:
        if self.done:
            raise GameOverError(f"Game is already {self.status.name.lower()}")

    def hit(self, hand: Hand) -> Card:
        """Deal one card to ``hand`` (the player's or the dealer's).

        A player hand that goes past 21 resolves the game immediately;
        the dealer does not draw.
        """
        self._check_active()
        if hand is not self.player and hand is not self.dealer:
            raise ValueError("Hand does not belong to this game")

        card = self.deck.deal_one()
        hand.add(card)

        if hand is self.player and hand.is_bust():
            logger.debug("Player busts with %d (%s)", hand.total, hand)
            self._resolve()
        return card

    def hit_player(self) -> Card:
        return self.hit(self.player)

    def deal_opening(self) -> None:
        """Deal two cards each, alternating player then dealer."""
        self._check_active()
        if len(self.player) or len(self.dealer):
            raise RuntimeError("Opening cards have already been dealt")
        for _ in range(2):
            self.hit(self.player)
            self.hit(self.dealer)
        logger.debug("Opening deal: player [%s], dealer [%s]", self.player, self.dealer)

    def stand(self) -> None:
        """End the player's turn and play out the dealer's hand."""
        self._check_active()
        self._resolve()
        # Hand.add directly: the game is already resolved for outside callers.
        try:
            while dealer_should_hit(self.dealer, self.dealer_stand_total, self.dealer_hits_soft_17):
                self.dealer.add(self.deck.deal_one())
        except OutOfCardsError:
            logger.warning("Deck ran out while the dealer drew; game aborted")
            self.status = GameStatus.ABORTED
            raise
        logger.debug("Dealer stands on %d (%s)", self.dealer.total, self.dealer)

    def result(self) -> Outcome:
        """Classify the finished game."""
        if self.status == GameStatus.ACTIVE:
            raise GameNotOverError("Game is still in progress")
        if self.status == GameStatus.ABORTED:
            raise GameAbortedError("Game was aborted before the dealer finished")

        player = self.player.total
        dealer = self.dealer.total

        if dealer > BLACKJACK:
            return Outcome.PLAYER_WIN_DEALER_BUST
        if player == BLACKJACK and dealer == BLACKJACK:
            return Outcome.BLACKJACK_PUSH
        if player > BLACKJACK:
            return Outcome.PLAYER_BUST
        if dealer > player:
            return Outcome.DEALER_WIN
        if dealer < player:
            return Outcome.PLAYER_WIN
        return Outcome.PUSH

    def table_state(self) -> TableState:
        return create_table_state(self)

    def play(self, agent: "BaseAgent") -> GameResult:
        """Play a complete game with ``agent`` making the player's decisions.

        Args:
            agent: Agent asked for HIT or STAND until the game resolves.

        Returns:
            GameResult with the outcome and final hands.
        """
        if not len(self.player) and not len(self.dealer):
            self.deal_opening()

        player_hits = 0
        while not self.done:
            state = self.table_state()
            action = agent.decide(state)
            if action not in state.valid_actions:
                logger.warning("Invalid action %r from %s, standing", action, agent)
                action = Action.STAND

            if action == Action.HIT:
                self.hit_player()
                player_hits += 1
            else:
                self.stand()

        outcome = self.result()
        logger.debug("Game over: %s", outcome.name)
        return GameResult(
            outcome=outcome,
            player_cards=self.player.cards,
            dealer_cards=self.dealer.cards,
            player_total=self.player.total,
            dealer_total=self.dealer.total,
            player_hits=player_hits,
        )
