"""Trump bidding phase implementation.

Round one offers the flipped card's suit to each seat in turn starting left
of the dealer. If all four pass, round two lets each seat name any other
suit. When the three seats before the dealer pass again, the dealer is stuck
and has to name trump. Whoever sets trump may go alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from loguru import logger

from ..cards import Card, Suit
from ..exceptions import IllegalBid, Reason
from ..state import BidStage, HandState, Seat, left_of, partner_of
from .play import next_active_seat

__all__ = ["BidAction", "Bid", "BidOption", "BidDecision", "BiddingPhase", "MAX_BID_ACTIONS"]

MAX_BID_ACTIONS = 8


class BidAction(str, Enum):
    """Kinds of bidding actions."""

    ORDER_UP = "order_up"
    # Ordering up by the dealer's partner; same effect as ORDER_UP.
    ASSIST = "assist"
    CALL = "call"
    PASS = "pass"


@dataclass
class Bid:
    """Represents a seat's bid as recorded in the hand history."""

    seat: Seat
    action: BidAction
    round: int
    suit: Optional[Suit] = None
    alone: bool = False

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Bid(seat={self.seat}, action={self.action}, suit={self.suit}, alone={self.alone})"


@dataclass(frozen=True)
class BidOption:
    """A bid the acting seat may make."""

    action: BidAction
    suit: Optional[Suit] = None


@dataclass(frozen=True)
class BidDecision:
    """A seat's answer to a bid request."""

    action: BidAction
    suit: Optional[Suit] = None
    alone: bool = False

    @classmethod
    def pass_(cls) -> "BidDecision":
        return cls(action=BidAction.PASS)


@dataclass
class BiddingPhase:
    """Manages trump selection for a single hand."""

    stick_the_dealer: bool = True

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"BiddingPhase(stick_the_dealer={self.stick_the_dealer})"

    def start(self, hand: HandState) -> None:
        """Prepare the bidding phase."""

        hand.trump = None
        hand.stage = BidStage.ROUND1
        hand.bidding_round = 1
        hand.passed = []
        hand.bids = []
        hand.caller = None
        hand.lone_seat = None
        hand.to_act = left_of(hand.dealer)

    def legal_options(self, hand: HandState) -> List[BidOption]:
        """Return the bids available to the seat whose turn it is."""

        if hand.stage is BidStage.ROUND1:
            accept = BidAction.ASSIST if hand.to_act is partner_of(hand.dealer) else BidAction.ORDER_UP
            return [BidOption(accept, hand.flipped.suit), BidOption(BidAction.PASS)]
        if hand.stage in (BidStage.ROUND2, BidStage.STUCK_DEALER):
            options = [BidOption(BidAction.CALL, suit) for suit in Suit if suit is not hand.flipped.suit]
            if hand.stage is BidStage.ROUND2:
                options.append(BidOption(BidAction.PASS))
            return options
        return []

    def apply(self, hand: HandState, seat: Seat, decision: BidDecision) -> None:
        """Dispatch a seat's decision to the matching bid."""

        if decision.action is BidAction.PASS:
            self.pass_(hand, seat)
        elif decision.action in (BidAction.ORDER_UP, BidAction.ASSIST):
            self.order_up(hand, seat, alone=decision.alone)
        else:
            if decision.suit is None:
                raise IllegalBid(Reason.MISSING_SUIT, "A call must name a suit")
            self.call(hand, seat, decision.suit, alone=decision.alone)

    def order_up(self, hand: HandState, seat: Seat, alone: bool = False) -> None:
        """Accept the flipped suit as trump."""

        self._check_turn(hand, seat)
        if hand.stage is not BidStage.ROUND1:
            raise IllegalBid(Reason.WRONG_ROUND, "The flipped card can only be ordered up in round one")
        action = BidAction.ASSIST if seat is partner_of(hand.dealer) else BidAction.ORDER_UP
        hand.bids.append(Bid(seat=seat, action=action, round=1, suit=hand.flipped.suit, alone=alone))
        hand.trump = hand.flipped.suit
        self._resolve(hand, seat, alone)
        # The dealer picks up even when sitting out for a lone partner.
        hand.hands[hand.dealer].append(hand.flipped)
        hand.flipped_picked_up = True
        hand.discard_pending = True

    def call(self, hand: HandState, seat: Seat, suit: Suit, alone: bool = False) -> None:
        """Name trump in round two or as the stuck dealer."""

        self._check_turn(hand, seat)
        if hand.stage is BidStage.ROUND1:
            raise IllegalBid(Reason.WRONG_ROUND, "Only the flipped suit can be ordered up in round one")
        if suit is hand.flipped.suit:
            raise IllegalBid(Reason.FLIPPED_SUIT, f"{suit.value} was turned down")
        hand.bids.append(Bid(seat=seat, action=BidAction.CALL, round=hand.bidding_round, suit=suit, alone=alone))
        hand.trump = suit
        self._resolve(hand, seat, alone)

    def pass_(self, hand: HandState, seat: Seat) -> None:
        """Register a pass and move the turn on."""

        self._check_turn(hand, seat)
        if hand.stage is BidStage.STUCK_DEALER:
            raise IllegalBid(Reason.DEALER_MUST_CALL, "Stick the dealer: the dealer must name trump")
        hand.bids.append(Bid(seat=seat, action=BidAction.PASS, round=hand.bidding_round))
        hand.passed.append(seat)
        logger.debug("{} passes in round {}", seat.value, hand.bidding_round)

        if hand.stage is BidStage.ROUND1 and len(hand.passed) == 4:
            hand.stage = BidStage.ROUND2
            hand.bidding_round = 2
            hand.passed = []
            hand.to_act = left_of(hand.dealer)
        elif hand.stage is BidStage.ROUND2 and len(hand.passed) == 3 and self.stick_the_dealer:
            hand.stage = BidStage.STUCK_DEALER
            hand.to_act = hand.dealer
            logger.debug("stick the dealer: {} must call", hand.dealer.value)
        elif hand.stage is BidStage.ROUND2 and len(hand.passed) == 4:
            hand.stage = BidStage.REDEAL
            hand.to_act = None
        else:
            hand.to_act = left_of(seat)

    def discard(self, hand: HandState, seat: Seat, card: Card) -> None:
        """Dealer discards one card after picking up the flipped card."""

        if not hand.discard_pending:
            raise IllegalBid(Reason.NO_DISCARD_OWED, "No discard is owed")
        if seat is not hand.dealer:
            raise IllegalBid(Reason.NOT_YOUR_TURN, "Only the dealer discards")
        if card not in hand.hands[seat]:
            raise IllegalBid(Reason.CARD_NOT_IN_HAND, f"{card} is not in {seat.value}'s hand")
        hand.hands[seat].remove(card)
        hand.discarded = card
        hand.discard_pending = False
        logger.debug("{} discards {}", seat.value, card)

    def _check_turn(self, hand: HandState, seat: Seat) -> None:
        if hand.stage in (BidStage.RESOLVED, BidStage.REDEAL):
            raise IllegalBid(Reason.BIDDING_CLOSED, "Bidding is over")
        if seat is not hand.to_act:
            raise IllegalBid(Reason.NOT_YOUR_TURN, f"It is {hand.to_act.value}'s turn to bid")

    def _resolve(self, hand: HandState, seat: Seat, alone: bool) -> None:
        hand.caller = seat
        hand.lone_seat = seat if alone else None
        hand.stage = BidStage.RESOLVED
        hand.passed = []
        hand.to_act = next_active_seat(left_of(hand.dealer), hand.lone_seat)
        logger.debug(
            "{} sets trump {}{}",
            seat.value,
            hand.trump.value,
            " and goes alone" if alone else "",
        )
