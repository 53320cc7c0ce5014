"""Exception hierarchy for the Euchre engine."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "Reason",
    "EuchreError",
    "InvalidActionError",
    "IllegalPlay",
    "IllegalBid",
    "InvariantViolation",
    "ConfigurationError",
]


class Reason(str, Enum):
    """Machine-readable reason attached to a rejected action."""

    NOT_YOUR_TURN = "not_your_turn"
    SITTING_OUT = "sitting_out"
    CARD_NOT_IN_HAND = "card_not_in_hand"
    MUST_FOLLOW_SUIT = "must_follow_suit"
    NOT_PLAYING = "not_playing"
    DISCARD_PENDING = "discard_pending"
    FLIPPED_SUIT = "flipped_suit"
    MISSING_SUIT = "missing_suit"
    WRONG_ROUND = "wrong_round"
    DEALER_MUST_CALL = "dealer_must_call"
    BIDDING_CLOSED = "bidding_closed"
    NO_DISCARD_OWED = "no_discard_owed"


class EuchreError(Exception):
    """Base exception for the project."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{self.__class__.__name__}({self.args})"


class InvalidActionError(EuchreError):
    """Raised when an invalid move is attempted. Game state is left unchanged."""

    def __init__(self, reason: Reason, message: str = "") -> None:
        super().__init__(message or reason.value)
        self.reason = reason


class IllegalPlay(InvalidActionError):
    """Raised when a card cannot be played."""


class IllegalBid(InvalidActionError):
    """Raised when a bid, pass or discard is not allowed by the rules."""


class InvariantViolation(EuchreError):
    """Raised when internal card bookkeeping is inconsistent."""


class ConfigurationError(EuchreError):
    """Raised for bad rules files or difficulty settings."""
