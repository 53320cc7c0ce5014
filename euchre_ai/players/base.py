"""Seat controller interface for Euchre."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..engine.cards import Card, Suit
from ..engine.phases.bidding import BidAction, BidDecision, BidOption
from ..engine.rules import DifficultyProfile
from ..engine.state import Play, Seat

__all__ = ["BidContext", "PlayContext", "Player"]


@dataclass(frozen=True)
class BidContext:
    """What a seat sees when asked to bid."""

    seat: Seat
    round: int
    dealer: Seat
    flipped: Card
    hand: Tuple[Card, ...]
    options: Tuple[BidOption, ...]

    @property
    def stuck(self) -> bool:
        """True when passing is not an option."""

        return not any(option.action is BidAction.PASS for option in self.options)


@dataclass(frozen=True)
class PlayContext:
    """What a seat sees when asked to play a card."""

    seat: Seat
    trump: Suit
    hand: Tuple[Card, ...]
    legal: Tuple[Card, ...]
    trick: Tuple[Play, ...]
    lone_seat: Optional[Seat] = None


class Player(ABC):
    """Abstract base class for anything that controls a seat."""

    name: str = "player"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return self.name

    @abstractmethod
    def request_bid(self, context: BidContext) -> BidDecision:
        """Return a bid chosen from ``context.options``."""

    @abstractmethod
    def request_discard(self, hand: Sequence[Card], trump: Suit) -> Card:
        """Return the card the dealer discards from a six-card hand."""

    @abstractmethod
    def request_card_play(self, context: PlayContext) -> Card:
        """Return the card to play, one of ``context.legal``."""

    def on_difficulty_changed(self, difficulty: str, profile: DifficultyProfile) -> None:
        """Hook called between hands when the difficulty changes."""
