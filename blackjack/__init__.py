"""Core blackjack rules engine."""

from blackjack.cards import Card, Deck, OutOfCardsError, Suit
from blackjack.game import BlackjackGame, GameAbortedError, GameNotOverError, GameOverError, GameResult, Outcome
from blackjack.hand import Hand, HandScore, score_cards
from blackjack.table import Action, TableState

__all__ = [
    "Action",
    "BlackjackGame",
    "Card",
    "Deck",
    "GameAbortedError",
    "GameNotOverError",
    "GameOverError",
    "GameResult",
    "Hand",
    "HandScore",
    "OutOfCardsError",
    "Outcome",
    "Suit",
    "TableState",
    "score_cards",
]
