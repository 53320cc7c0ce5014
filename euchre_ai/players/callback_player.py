"""Seat driven by an outside caller, typically a user interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from ..engine.cards import Card, Suit
from ..engine.phases.bidding import BidDecision
from .base import BidContext, PlayContext, Player

__all__ = ["CallbackPlayer"]


@dataclass
class CallbackPlayer(Player):
    """Forwards every decision to the callables supplied by the UI layer.

    The engine validates whatever comes back; an illegal answer surfaces as
    ``IllegalBid``/``IllegalPlay`` to the code driving the game.
    """

    bid: Callable[[BidContext], BidDecision]
    discard: Callable[[Sequence[Card], Suit], Card]
    card_play: Callable[[PlayContext], Card]
    name: str = "human"

    def request_bid(self, context: BidContext) -> BidDecision:
        return self.bid(context)

    def request_discard(self, hand: Sequence[Card], trump: Suit) -> Card:
        return self.discard(hand, trump)

    def request_card_play(self, context: PlayContext) -> Card:
        return self.card_play(context)
