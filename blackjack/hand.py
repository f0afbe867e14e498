"""Hand scoring and dealer policy for blackjack."""

from typing import TYPE_CHECKING, Iterator, NamedTuple, Sequence

from blackjack.cards import Card

if TYPE_CHECKING:
    from blackjack.table import HandView

BLACKJACK = 21
DEALER_STAND_TOTAL = 17


class HandScore(NamedTuple):
    """Total of a hand and whether an Ace is still counted as 11."""

    total: int
    soft: bool


def score_cards(cards: Sequence[Card]) -> HandScore:
    """Score a sequence of cards from scratch.

    Every Ace is first counted as 11 and marks the hand soft. If the sum
    then exceeds 21, a single Ace is demoted to 1. The demotion is applied
    at most once per evaluation, so [A, A] scores 12 and [A, A, A] scores
    23, both hard.
    """
    total = 0
    soft = False
    for card in cards:
        if card.rank == 1:
            total += 11
            soft = True
        elif card.rank > 10:
            total += 10
        else:
            total += card.rank

    if total > BLACKJACK and soft:
        total -= 10
        soft = False

    return HandScore(total, soft)


class Hand:
    """Cards held by one party, in deal order, with a derived score.

    ``total`` and ``soft`` are read-only; they are recomputed every time
    the card sequence changes.
    """

    def __init__(self, cards: Sequence[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)
        self._score = score_cards(self._cards)

    def add(self, card: Card) -> None:
        """Append a card and rescore."""
        self._cards.append(card)
        self._score = score_cards(self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def total(self) -> int:
        return self._score.total

    @property
    def soft(self) -> bool:
        return self._score.soft

    @property
    def score(self) -> HandScore:
        return self._score

    def is_bust(self) -> bool:
        return self.total > BLACKJACK

    def is_blackjack(self) -> bool:
        """Two-card 21."""
        return len(self._cards) == 2 and self.total == BLACKJACK

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand([{self}], total={self.total}, soft={self.soft})"


def dealer_should_hit(
    hand: "Hand | HandView",
    stand_total: int = DEALER_STAND_TOTAL,
    hit_soft_17: bool = True,
) -> bool:
    """Dealer draws below ``stand_total``, and on a soft ``stand_total`` if enabled."""
    if hand.total < stand_total:
        return True
    return hit_soft_17 and hand.total == stand_total and hand.soft
