"""Table state representation for blackjack."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from blackjack.cards import Card
from blackjack.hand import Hand

if TYPE_CHECKING:
    from blackjack.game import BlackjackGame


class Action(Enum):
    """Decisions available to the player."""

    HIT = auto()
    STAND = auto()

    def __str__(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class HandView:
    """Snapshot of one hand."""

    cards: tuple[Card, ...]
    total: int
    soft: bool

    @classmethod
    def from_hand(cls, hand: Hand) -> "HandView":
        return cls(cards=hand.cards, total=hand.total, soft=hand.soft)

    @property
    def is_bust(self) -> bool:
        return self.total > 21

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self.cards)


@dataclass
class TableState:
    """Everything the player (or the UI) can see between decisions."""

    player: HandView
    dealer: HandView
    done: bool
    cards_remaining: int
    valid_actions: list[Action] = field(default_factory=list)

    @property
    def dealer_upcard(self) -> Card | None:
        """First card dealt to the dealer, if any."""
        return self.dealer.cards[0] if self.dealer.cards else None


def create_table_state(game: "BlackjackGame") -> TableState:
    """Snapshot a game for agents and display."""
    return TableState(
        player=HandView.from_hand(game.player),
        dealer=HandView.from_hand(game.dealer),
        done=game.done,
        cards_remaining=game.deck.remaining(),
        valid_actions=[] if game.done else [Action.HIT, Action.STAND],
    )
