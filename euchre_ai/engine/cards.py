"""Card abstractions for the Euchre engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Tuple

__all__ = [
    "Suit",
    "Rank",
    "Card",
    "RANK_ORDER",
    "SAME_COLOR",
    "create_deck",
    "sort_cards",
]


class Suit(str, Enum):
    """Enumeration of the four suits."""

    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Suit({self.value})"

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(str, Enum):
    """Enumeration of the ranks in order from lowest to highest."""

    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Rank({self.value})"


RANK_ORDER: List[Rank] = [
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.ACE,
]

# Suit of the left bower for each trump suit.
SAME_COLOR: Dict[Suit, Suit] = {
    Suit.SPADES: Suit.CLUBS,
    Suit.CLUBS: Suit.SPADES,
    Suit.HEARTS: Suit.DIAMONDS,
    Suit.DIAMONDS: Suit.HEARTS,
}


@dataclass(frozen=True)
class Card:
    """Immutable representation of a single card."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        if self.rank not in RANK_ORDER:
            msg = f"Unknown rank: {self.rank}"
            raise ValueError(msg)

    def __repr__(self) -> str:
        return f"Card({self.rank.value}{self.suit.value})"

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    @property
    def index(self) -> int:
        """Stable index of the card within the 24-card deck."""

        suit_index = list(Suit).index(self.suit)
        return suit_index * len(RANK_ORDER) + RANK_ORDER.index(self.rank)


def create_deck() -> Tuple[Card, ...]:
    """Create a tuple representing the standard 24-card deck."""

    return tuple(Card(suit=suit, rank=rank) for suit in Suit for rank in RANK_ORDER)


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Return cards sorted by suit then rank following deck order."""

    return sorted(cards, key=lambda card: card.index)

