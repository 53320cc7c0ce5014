"""Game state models for Euchre."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .cards import Card, Suit, create_deck
from .exceptions import InvariantViolation
from .rules import RulesConfig

if TYPE_CHECKING:  # pragma: no cover
    from .phases.bidding import Bid

__all__ = [
    "Seat",
    "Team",
    "CLOCKWISE",
    "left_of",
    "partner_of",
    "team_of",
    "seats_from",
    "Play",
    "BidStage",
    "HandState",
    "GameStats",
    "GameState",
    "create_initial_state",
]


class Seat(str, Enum):
    """Seats around the table."""

    SOUTH = "south"
    WEST = "west"
    NORTH = "north"
    EAST = "east"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Seat({self.value})"


class Team(str, Enum):
    """The two partnerships."""

    NORTH_SOUTH = "north_south"
    EAST_WEST = "east_west"

    @property
    def opponent(self) -> "Team":
        return Team.EAST_WEST if self is Team.NORTH_SOUTH else Team.NORTH_SOUTH


CLOCKWISE: Tuple[Seat, ...] = (Seat.SOUTH, Seat.WEST, Seat.NORTH, Seat.EAST)

Play = Tuple[Seat, Card]


def left_of(seat: Seat) -> Seat:
    """Return the next seat clockwise."""

    return CLOCKWISE[(CLOCKWISE.index(seat) + 1) % 4]


def partner_of(seat: Seat) -> Seat:
    return CLOCKWISE[(CLOCKWISE.index(seat) + 2) % 4]


def team_of(seat: Seat) -> Team:
    return Team.NORTH_SOUTH if seat in (Seat.NORTH, Seat.SOUTH) else Team.EAST_WEST


def seats_from(start: Seat) -> List[Seat]:
    """Return all four seats clockwise beginning with ``start``."""

    idx = CLOCKWISE.index(start)
    return [CLOCKWISE[(idx + i) % 4] for i in range(4)]


class BidStage(str, Enum):
    """Stages of the trump bidding state machine."""

    ROUND1 = "round1"
    ROUND2 = "round2"
    STUCK_DEALER = "stuck_dealer"
    RESOLVED = "resolved"
    REDEAL = "redeal"


@dataclass
class HandState:
    """Everything scoped to a single deal."""

    dealer: Seat
    hands: Dict[Seat, List[Card]]
    flipped: Card
    kitty: List[Card]
    trump: Optional[Suit] = None
    stage: BidStage = BidStage.ROUND1
    bidding_round: int = 1
    to_act: Optional[Seat] = None
    passed: List[Seat] = field(default_factory=list)
    bids: List["Bid"] = field(default_factory=list)
    caller: Optional[Seat] = None
    lone_seat: Optional[Seat] = None
    flipped_picked_up: bool = False
    discard_pending: bool = False
    discarded: Optional[Card] = None
    trump_announced: bool = False
    current_trick: List[Play] = field(default_factory=list)
    tricks: List[List[Play]] = field(default_factory=list)
    trick_counts: Dict[Seat, int] = field(default_factory=lambda: {seat: 0 for seat in CLOCKWISE})

    def __repr__(self) -> str:  # pragma: no cover - simple
        return (
            f"HandState(dealer={self.dealer}, stage={self.stage}, trump={self.trump}, "
            f"to_act={self.to_act}, tricks={len(self.tricks)})"
        )

    @property
    def is_playing(self) -> bool:
        return self.stage is BidStage.RESOLVED and not self.discard_pending

    @property
    def trick_size(self) -> int:
        return 3 if self.lone_seat is not None else 4

    @property
    def sitting_out(self) -> Optional[Seat]:
        """Seat whose partner is playing alone, if any."""

        return partner_of(self.lone_seat) if self.lone_seat is not None else None

    @property
    def calling_team(self) -> Optional[Team]:
        return team_of(self.caller) if self.caller is not None else None

    def played_cards(self) -> List[Card]:
        cards = [card for trick in self.tricks for _, card in trick]
        cards.extend(card for _, card in self.current_trick)
        return cards

    def check_card_count(self) -> None:
        """Raise if the 24 cards are not all accounted for exactly once."""

        cards: List[Card] = [card for hand in self.hands.values() for card in hand]
        cards.extend(self.kitty)
        if not self.flipped_picked_up:
            cards.append(self.flipped)
        if self.discarded is not None:
            cards.append(self.discarded)
        cards.extend(self.played_cards())
        if len(cards) != len(create_deck()):
            msg = f"Expected 24 cards in play, found {len(cards)}"
            raise InvariantViolation(msg)
        if len(set(cards)) != len(cards):
            raise InvariantViolation("Duplicate card detected")


@dataclass
class GameStats:
    """Running statistics from the player team's point of view."""

    hands_played: int = 0
    games_won: int = 0
    games_lost: int = 0

    def model_dump(self) -> Dict[str, int]:
        return {
            "hands_played": self.hands_played,
            "games_won": self.games_won,
            "games_lost": self.games_lost,
        }

    @classmethod
    def model_validate(cls, data: Dict[str, Any]) -> "GameStats":
        return cls(
            hands_played=int(data.get("hands_played", 0)),
            games_won=int(data.get("games_won", 0)),
            games_lost=int(data.get("games_lost", 0)),
        )


@dataclass
class GameState:
    """Complete game state snapshot."""

    rules: RulesConfig
    dealer: Seat = Seat.SOUTH
    scores: Dict[Team, int] = field(default_factory=lambda: {Team.NORTH_SOUTH: 0, Team.EAST_WEST: 0})
    round: int = 1
    difficulty: str = "medium"
    hand: Optional[HandState] = None
    winner: Optional[Team] = None
    stats: GameStats = field(default_factory=GameStats)
    rng_seed: int = 0

    def __repr__(self) -> str:  # pragma: no cover - simple
        return (
            f"GameState(scores={self.scores}, dealer={self.dealer}, round={self.round}, "
            f"difficulty={self.difficulty})"
        )

    def reset_scores(self) -> None:
        self.scores = {Team.NORTH_SOUTH: 0, Team.EAST_WEST: 0}
        self.round = 1
        self.hand = None
        self.winner = None


def create_initial_state(rules: RulesConfig, seed: int = 0, difficulty: Optional[str] = None) -> GameState:
    """Create a fresh game state with initial metadata populated."""

    chosen = difficulty or rules.ai.default_difficulty
    rules.ai.profile(chosen)
    return GameState(rules=rules, difficulty=chosen, rng_seed=seed)
