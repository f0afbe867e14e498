"""Card, Deck, and Suit definitions for blackjack."""

import logging
from dataclasses import dataclass
from enum import IntEnum
from random import Random
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

NUM_RANKS = 13
NUM_CARDS = 52


class OutOfCardsError(ValueError):
    """Raised when more cards are requested than the deck holds."""

    def __init__(self, requested: int, remaining: int) -> None:
        super().__init__(f"Cannot deal {requested} cards, only {remaining} remaining")
        self.requested = requested
        self.remaining = remaining


class Suit(IntEnum):
    """Card suits, in deck construction order."""

    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3

    def __str__(self) -> str:
        symbols = {0: "♠", 1: "♥", 2: "♦", 3: "♣"}
        return symbols[self.value]


RANK_NAMES = {1: "A", 11: "J", 12: "Q", 13: "K"}


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card. Rank 1 is the Ace, 11-13 are J, Q, K."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not 1 <= self.rank <= NUM_RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")

    def __str__(self) -> str:
        return f"{RANK_NAMES.get(self.rank, str(self.rank))}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank})"

    @property
    def is_ace(self) -> bool:
        return self.rank == 1

    @property
    def value(self) -> int:
        """Point value before any soft adjustment (Ace counts 11)."""
        if self.rank == 1:
            return 11
        if self.rank > 10:
            return 10
        return self.rank

    def to_index(self) -> int:
        """Convert to 0-51 index in deck construction order.

        Index = suit * 13 + (rank - 1)
        """
        return self.suit * NUM_RANKS + (self.rank - 1)

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Create card from 0-51 index."""
        if not 0 <= index < NUM_CARDS:
            raise ValueError(f"Invalid card index: {index}")
        return cls(suit=Suit(index // NUM_RANKS), rank=(index % NUM_RANKS) + 1)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', '10h', 'Td', 'K♣'."""
        rank_map = {"A": 1, "T": 10, "J": 11, "Q": 12, "K": 13}
        suit_map = {
            "s": Suit.SPADES,
            "h": Suit.HEARTS,
            "d": Suit.DIAMONDS,
            "c": Suit.CLUBS,
            "♠": Suit.SPADES,
            "♥": Suit.HEARTS,
            "♦": Suit.DIAMONDS,
            "♣": Suit.CLUBS,
        }
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")
        rank_part = s[:-1].upper()
        suit_char = s[-1].lower()
        if suit_char not in suit_map:
            raise ValueError(f"Invalid suit: {s[-1]}")
        if rank_part in rank_map:
            rank = rank_map[rank_part]
        elif rank_part.isdigit() and 2 <= int(rank_part) <= 10:
            rank = int(rank_part)
        else:
            raise ValueError(f"Invalid rank: {rank_part}")
        return cls(suit=suit_map[suit_char], rank=rank)


class Deck:
    """A standard 52-card deck dealt from the front.

    The randomness source is injected: pass a ``Random`` instance or a seed.
    Without either, a fresh ``Random`` seeded from OS entropy is used.
    """

    def __init__(self, rng: Random | None = None, seed: int | None = None) -> None:
        self._rng = rng if rng is not None else Random(seed)
        self._cards: list[Card] = []
        self.reset()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """Build a deck holding exactly ``cards``, in order (a stacked deck)."""
        cards = list(cards)
        if len(set(cards)) != len(cards):
            raise ValueError("Deck cannot contain duplicate cards")
        deck = cls(rng=rng)
        deck._cards = cards
        return deck

    def reset(self) -> None:
        """Reset deck to full 52 cards, suit-major and rank-minor."""
        self._cards = [Card(suit, rank) for suit in Suit for rank in range(1, NUM_RANKS + 1)]

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place (Fisher-Yates)."""
        cards = self._cards
        for i in range(len(cards)):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]
        logger.debug("Shuffled %d cards", len(cards))

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the deck."""
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        if n > len(self._cards):
            raise OutOfCardsError(n, len(self._cards))
        dealt = self._cards[:n]
        self._cards = self._cards[n:]
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card."""
        return self.deal(1)[0]

    def remaining(self) -> int:
        """Number of cards remaining in deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
