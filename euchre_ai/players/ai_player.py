"""Computer-controlled seat."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from ..engine.cards import Card, Suit
from ..engine.phases.bidding import BidDecision
from ..engine.rules import AIRules, AloneRules, DifficultyProfile
from ..engine.state import Seat, team_of
from . import policy
from .base import BidContext, PlayContext, Player

__all__ = ["AIPlayer"]


@dataclass
class AIPlayer(Player):
    """Plays a seat using the difficulty-scaled policy."""

    profile: DifficultyProfile
    alone: AloneRules = field(default_factory=AloneRules)
    partner_team: bool = False
    rng: random.Random = field(default_factory=random.Random)
    name: str = "ai"

    @classmethod
    def for_seat(cls, rules: AIRules, difficulty: str, seat: Seat, rng: random.Random) -> "AIPlayer":
        """Build the computer player for ``seat`` at ``difficulty``."""

        human_team = team_of(Seat(rules.human_seat))
        return cls(
            profile=rules.profile(difficulty),
            alone=rules.alone,
            partner_team=team_of(seat) is human_team,
            rng=rng,
            name=f"ai-{seat.value}",
        )

    def request_bid(self, context: BidContext) -> BidDecision:
        return policy.decide_bid(context, self.profile, self.alone, self.partner_team, self.rng)

    def request_discard(self, hand: Sequence[Card], trump: Suit) -> Card:
        return policy.choose_discard(hand, trump)

    def request_card_play(self, context: PlayContext) -> Card:
        return policy.choose_card(context, self.profile, self.rng)

    def on_difficulty_changed(self, difficulty: str, profile: DifficultyProfile) -> None:
        self.profile = profile
