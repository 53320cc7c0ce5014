"""Trick play logic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from ..cards import SAME_COLOR, Card, Rank, Suit
from ..exceptions import IllegalPlay, InvariantViolation, Reason
from ..state import CLOCKWISE, HandState, Play, Seat, left_of, partner_of

__all__ = [
    "TRICKS_PER_HAND",
    "TrickOutcome",
    "PlayPhase",
    "is_right_bower",
    "is_left_bower",
    "is_trump",
    "effective_suit",
    "can_follow",
    "is_legal",
    "legal_cards",
    "card_value",
    "evaluate_trick",
    "active_seats",
    "next_active_seat",
]

TRICKS_PER_HAND = 5

_TRUMP_VALUES = {Rank.ACE: 900, Rank.KING: 800, Rank.QUEEN: 700, Rank.TEN: 600, Rank.NINE: 500}
_LEAD_VALUES = {Rank.ACE: 400, Rank.KING: 300, Rank.QUEEN: 200, Rank.JACK: 150, Rank.TEN: 100, Rank.NINE: 50}
_RIGHT_BOWER = 1000
_LEFT_BOWER = 999


def is_right_bower(card: Card, trump: Suit) -> bool:
    return card.rank is Rank.JACK and card.suit is trump


def is_left_bower(card: Card, trump: Suit) -> bool:
    return card.rank is Rank.JACK and card.suit is SAME_COLOR[trump]


def is_trump(card: Card, trump: Suit) -> bool:
    return card.suit is trump or is_left_bower(card, trump)


def effective_suit(card: Card, trump: Optional[Suit]) -> Suit:
    """Return the suit the card counts as for following and ranking."""

    if trump is not None and is_trump(card, trump):
        return trump
    return card.suit


def can_follow(hand: Iterable[Card], lead_suit: Suit, trump: Suit) -> bool:
    return any(effective_suit(card, trump) is lead_suit for card in hand)


def is_legal(card: Card, hand: Sequence[Card], trick: Sequence[Play], trump: Suit) -> bool:
    """Return whether ``card`` may be played from ``hand`` onto ``trick``."""

    if not trick:
        return True
    lead_suit = effective_suit(trick[0][1], trump)
    if effective_suit(card, trump) is lead_suit:
        return True
    return not can_follow(hand, lead_suit, trump)


def legal_cards(hand: Sequence[Card], trick: Sequence[Play], trump: Suit) -> List[Card]:
    return [card for card in hand if is_legal(card, hand, trick, trump)]


def card_value(card: Card, trump: Suit, lead_suit: Optional[Suit]) -> int:
    """Rank a card within one trick. Higher wins; 0 can never win."""

    if is_right_bower(card, trump):
        return _RIGHT_BOWER
    if is_left_bower(card, trump):
        return _LEFT_BOWER
    if card.suit is trump:
        return _TRUMP_VALUES[card.rank]
    if card.suit is lead_suit:
        return _LEAD_VALUES[card.rank]
    return 0


def evaluate_trick(trick: Sequence[Play], trump: Suit) -> Seat:
    """Return the seat that wins ``trick``."""

    if len(trick) not in (3, 4):
        msg = f"Cannot evaluate a trick of {len(trick)} cards"
        raise InvariantViolation(msg)
    lead_suit = trick[0][1].suit
    best_seat, _ = max(trick, key=lambda play: card_value(play[1], trump, lead_suit))
    return best_seat


def active_seats(lone_seat: Optional[Seat]) -> List[Seat]:
    """Seats taking part in tricks this hand."""

    if lone_seat is None:
        return list(CLOCKWISE)
    return [seat for seat in CLOCKWISE if seat is not partner_of(lone_seat)]


def next_active_seat(seat: Seat, lone_seat: Optional[Seat]) -> Seat:
    """Return ``seat`` or the next clockwise seat that is not sitting out."""

    if lone_seat is not None and seat is partner_of(lone_seat):
        return left_of(seat)
    return seat


@dataclass
class TrickOutcome:
    """Result of a completed trick."""

    winner: Seat
    plays: List[Play]
    number: int

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"TrickOutcome(winner={self.winner}, number={self.number})"


@dataclass
class PlayPhase:
    """Trick play manager. Holds no state of its own."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "PlayPhase()"

    def start(self, hand: HandState) -> Seat:
        """Begin play with the seat left of the dealer, skipping a sitting-out partner."""

        hand.current_trick = []
        hand.to_act = next_active_seat(left_of(hand.dealer), hand.lone_seat)
        return hand.to_act

    def legal_cards(self, hand: HandState, seat: Seat) -> List[Card]:
        """Return legal cards for the seat for the current trick."""

        if hand.trump is None:
            return []
        return legal_cards(hand.hands[seat], hand.current_trick, hand.trump)

    def is_complete(self, hand: HandState) -> bool:
        return len(hand.tricks) == TRICKS_PER_HAND

    def play_card(self, hand: HandState, seat: Seat, card: Card) -> Optional[TrickOutcome]:
        """Play ``card`` for ``seat``. Returns the outcome when the trick completes."""

        self._validate(hand, seat, card)
        hand.hands[seat].remove(card)
        hand.current_trick.append((seat, card))
        logger.debug("{} plays {}", seat.value, card)

        if len(hand.current_trick) < len(active_seats(hand.lone_seat)):
            hand.to_act = next_active_seat(left_of(seat), hand.lone_seat)
            return None
        return self._complete_trick(hand)

    def check_open(self, hand: HandState) -> None:
        """Raise ``IllegalPlay`` unless a card may be played in ``hand`` now."""

        if hand.discard_pending:
            raise IllegalPlay(Reason.DISCARD_PENDING, "The dealer has not discarded yet")
        if hand.trump is None or not hand.is_playing:
            raise IllegalPlay(Reason.NOT_PLAYING, "Card play has not started")
        if self.is_complete(hand):
            raise IllegalPlay(Reason.NOT_PLAYING, "All five tricks have been played")

    def _validate(self, hand: HandState, seat: Seat, card: Card) -> None:
        self.check_open(hand)
        if seat is hand.sitting_out:
            raise IllegalPlay(Reason.SITTING_OUT, f"{seat.value} sits out while {hand.lone_seat.value} plays alone")
        if seat is not hand.to_act:
            raise IllegalPlay(Reason.NOT_YOUR_TURN, f"It is {hand.to_act.value}'s turn")
        if card not in hand.hands[seat]:
            raise IllegalPlay(Reason.CARD_NOT_IN_HAND, f"{card} is not in {seat.value}'s hand")
        if not is_legal(card, hand.hands[seat], hand.current_trick, hand.trump):
            lead = effective_suit(hand.current_trick[0][1], hand.trump)
            raise IllegalPlay(Reason.MUST_FOLLOW_SUIT, f"You must follow suit ({lead.value})")

    def _complete_trick(self, hand: HandState) -> TrickOutcome:
        if len(hand.current_trick) != hand.trick_size:
            raise InvariantViolation("Trick length does not match the number of active seats")
        winner = evaluate_trick(hand.current_trick, hand.trump)
        hand.trick_counts[winner] += 1
        plays = list(hand.current_trick)
        hand.tricks.append(plays)
        hand.current_trick = []
        hand.to_act = None if self.is_complete(hand) else next_active_seat(winner, hand.lone_seat)
        outcome = TrickOutcome(winner=winner, plays=plays, number=len(hand.tricks))
        logger.debug("trick {} won by {}", outcome.number, winner.value)
        return outcome
