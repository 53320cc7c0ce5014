"""Difficulty-scaled decision functions for computer seats.

Every function is pure apart from draws on the ``random.Random`` passed in.
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from ..engine.cards import RANK_ORDER, Card, Suit
from ..engine.phases.bidding import BidAction, BidDecision
from ..engine.phases.play import card_value, is_trump
from ..engine.rules import AloneRules, DifficultyProfile
from ..engine.state import Play
from .base import BidContext, PlayContext

__all__ = [
    "decide_order_up",
    "decide_call",
    "decide_alone",
    "stuck_dealer_suit",
    "decide_bid",
    "choose_card",
    "choose_discard",
]


def decide_order_up(profile: DifficultyProfile, rng: random.Random) -> bool:
    return rng.random() < profile.order_up


def decide_call(profile: DifficultyProfile, flipped_suit: Suit, rng: random.Random) -> Optional[Suit]:
    """Return a suit to name in round two, or None to pass."""

    if rng.random() < profile.call_trump:
        return stuck_dealer_suit(flipped_suit, rng)
    return None


def stuck_dealer_suit(flipped_suit: Suit, rng: random.Random) -> Suit:
    return rng.choice([suit for suit in Suit if suit is not flipped_suit])


def decide_alone(alone: AloneRules, round_number: int, partner_team: bool, rng: random.Random) -> bool:
    return rng.random() < alone.chance(round_number, partner_team)


def decide_bid(
    context: BidContext,
    profile: DifficultyProfile,
    alone: AloneRules,
    partner_team: bool,
    rng: random.Random,
) -> BidDecision:
    """Pick a bid for ``context``.

    ``partner_team`` marks seats on the human player's side, which go alone
    more readily than opponents. A stuck dealer names a random suit and never
    goes alone.
    """

    if context.stuck:
        return BidDecision(BidAction.CALL, stuck_dealer_suit(context.flipped.suit, rng))
    if context.round == 1:
        if not decide_order_up(profile, rng):
            return BidDecision.pass_()
        accept = context.options[0].action
        return BidDecision(accept, context.flipped.suit, decide_alone(alone, 1, partner_team, rng))
    suit = decide_call(profile, context.flipped.suit, rng)
    if suit is None:
        return BidDecision.pass_()
    return BidDecision(BidAction.CALL, suit, decide_alone(alone, 2, partner_team, rng))


def _strength(card: Card, trump: Suit) -> tuple:
    # Value as if the card's own suit were led; rank breaks ties between zeros.
    return card_value(card, trump, card.suit), RANK_ORDER.index(card.rank)


def choose_card(context: PlayContext, profile: DifficultyProfile, rng: random.Random) -> Card:
    """Follow with the lowest legal card; lead a card of middling rank.

    An unskilled draw (probability ``1 - play_skill``) plays any legal card.
    """

    legal: List[Card] = list(context.legal)
    if len(legal) == 1:
        return legal[0]
    if rng.random() >= profile.play_skill:
        return rng.choice(legal)
    if context.trick:
        return _lowest_follow(legal, context.trick, context.trump)
    ordered = sorted(legal, key=lambda card: _strength(card, context.trump))
    return ordered[len(ordered) // 2]


def _lowest_follow(legal: Sequence[Card], trick: Sequence[Play], trump: Suit) -> Card:
    lead_suit = trick[0][1].suit
    return min(legal, key=lambda card: (card_value(card, trump, lead_suit), RANK_ORDER.index(card.rank)))


def choose_discard(hand: Sequence[Card], trump: Suit) -> Card:
    """Return the weakest non-trump card, or the weakest trump if that is all."""

    pool = [card for card in hand if not is_trump(card, trump)] or list(hand)
    return min(pool, key=lambda card: _strength(card, trump))
