"""Random baseline player."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from ..engine.cards import Card, Suit
from ..engine.phases.bidding import BidDecision
from .base import BidContext, PlayContext, Player

__all__ = ["RandomPlayer"]


@dataclass
class RandomPlayer(Player):
    """Picks uniformly among legal bids, discards and cards."""

    rng: random.Random = field(default_factory=random.Random)
    alone_chance: float = 0.1
    name: str = "random"

    def request_bid(self, context: BidContext) -> BidDecision:
        option = self.rng.choice(context.options)
        alone = option.suit is not None and self.rng.random() < self.alone_chance
        return BidDecision(option.action, option.suit, alone)

    def request_discard(self, hand: Sequence[Card], trump: Suit) -> Card:
        return self.rng.choice(list(hand))

    def request_card_play(self, context: PlayContext) -> Card:
        return self.rng.choice(context.legal)
