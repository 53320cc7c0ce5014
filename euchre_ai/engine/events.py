"""Lifecycle hooks emitted by the game controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .phases.play import TrickOutcome
from .phases.scoring import HandScore
from .state import HandState, Team

__all__ = ["GameListener", "RecordingListener"]


class GameListener:
    """Receives game events. Every hook is optional."""

    def on_deal_complete(self, hand: HandState) -> None:
        """Called once the cards are dealt and bidding is about to start."""

    def on_trump_resolved(self, hand: HandState) -> None:
        """Called after trump is set and the dealer has discarded."""

    def on_trick_complete(self, outcome: TrickOutcome) -> None:
        """Called after each trick."""

    def on_hand_complete(self, result: HandScore, scores: Dict[Team, int]) -> None:
        """Called after a hand is scored."""

    def on_game_complete(self, winner: Team, scores: Dict[Team, int]) -> None:
        """Called when a team reaches the target score."""


@dataclass
class RecordingListener(GameListener):
    """Keeps every event in order, mostly useful for tests and replays."""

    events: List[Tuple[str, Any]] = field(default_factory=list)

    def on_deal_complete(self, hand: HandState) -> None:
        self.events.append(("deal_complete", hand.dealer))

    def on_trump_resolved(self, hand: HandState) -> None:
        self.events.append(("trump_resolved", (hand.trump, hand.caller, hand.lone_seat)))

    def on_trick_complete(self, outcome: TrickOutcome) -> None:
        self.events.append(("trick_complete", outcome.winner))

    def on_hand_complete(self, result: HandScore, scores: Dict[Team, int]) -> None:
        self.events.append(("hand_complete", (result, dict(scores))))

    def on_game_complete(self, winner: Team, scores: Dict[Team, int]) -> None:
        self.events.append(("game_complete", winner))

    def names(self) -> List[str]:
        return [name for name, _ in self.events]
