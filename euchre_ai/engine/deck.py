"""Shuffling and dealing.

Cards are dealt clockwise starting left of the dealer, five per seat, in two
batches of three-then-two or two-then-three. The next card is turned face up
for bidding and the last three form the kitty.
"""

from __future__ import annotations

import random
from typing import Dict, List, NamedTuple, Sequence

from .cards import Card, create_deck
from .exceptions import InvariantViolation
from .state import Seat, left_of, seats_from

__all__ = [
    "CARDS_PER_HAND",
    "Deal",
    "create_shuffled_deck",
    "deal",
    "first_to_act",
    "next_dealer",
]

CARDS_PER_HAND = 5


class Deal(NamedTuple):
    """Result of a deal. Hands are lists so they can be mutated during play."""

    hands: Dict[Seat, List[Card]]
    flipped: Card
    kitty: List[Card]
    first_batch: int


def create_shuffled_deck(rng: random.Random) -> List[Card]:
    """Return the 24-card deck shuffled with ``rng``."""

    deck = list(create_deck())
    rng.shuffle(deck)
    return deck


def first_to_act(dealer: Seat) -> Seat:
    """Player to the left of the dealer bids and leads first."""
    return left_of(dealer)


def next_dealer(dealer: Seat) -> Seat:
    """Deal passes clockwise."""
    return left_of(dealer)


def deal(deck: Sequence[Card], dealer: Seat, rng: random.Random) -> Deal:
    """Deal ``deck`` around the table for ``dealer``.

    Cards are drawn from the top (end) of ``deck``; the input is not modified.
    """

    full = create_deck()
    if len(deck) != len(full) or set(deck) != set(full):
        raise InvariantViolation("Deck must contain each of the 24 cards exactly once")

    pile = list(deck)
    order = seats_from(first_to_act(dealer))
    hands: Dict[Seat, List[Card]] = {seat: [] for seat in order}
    first_batch = 3 if rng.random() < 0.5 else 2
    for batch in (first_batch, CARDS_PER_HAND - first_batch):
        for seat in order:
            for _ in range(batch):
                hands[seat].append(pile.pop())

    flipped = pile.pop()
    result = Deal(hands=hands, flipped=flipped, kitty=pile, first_batch=first_batch)
    _check_deal(result)
    return result


def _check_deal(result: Deal) -> None:
    dealt = sum(len(cards) for cards in result.hands.values())
    if any(len(cards) != CARDS_PER_HAND for cards in result.hands.values()):
        raise InvariantViolation("Every seat must receive exactly five cards")
    if dealt + len(result.kitty) + 1 != len(create_deck()):
        raise InvariantViolation("Deal does not account for all 24 cards")
