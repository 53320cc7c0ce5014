"""Scoring logic for Euchre."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional

from loguru import logger

from ..exceptions import InvariantViolation
from ..state import GameState, Seat, Team, team_of
from .play import TRICKS_PER_HAND

__all__ = ["ScoreReason", "HandScore", "ScoringPhase", "score_hand"]


class ScoreReason(str, Enum):
    MADE = "made"
    MARCH = "march"
    EUCHRED = "euchred"
    MADE_ALONE = "made_alone"
    MARCH_ALONE = "march_alone"
    EUCHRED_ALONE = "euchred_alone"


@dataclass
class HandScore:
    """Points awarded for one hand."""

    team: Team
    points: int
    reason: ScoreReason
    calling_team: Team
    calling_tricks: int

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"HandScore({self.team.value} +{self.points}, {self.reason.value})"

    def deltas(self) -> Dict[Team, int]:
        """Return the points added to each team."""

        deltas = {Team.NORTH_SOUTH: 0, Team.EAST_WEST: 0}
        deltas[self.team] = self.points
        return deltas


def score_hand(trick_counts: Mapping[Seat, int], caller: Seat, lone_seat: Optional[Seat] = None) -> HandScore:
    """Score a completed hand.

    ``caller`` is the seat that set trump. ``lone_seat`` is the seat playing
    alone, which must belong to the calling team; its partner took no tricks,
    so the team total equals the lone player's own count.
    """

    if sum(trick_counts.values()) != TRICKS_PER_HAND:
        msg = f"A hand has {TRICKS_PER_HAND} tricks, got {sum(trick_counts.values())}"
        raise InvariantViolation(msg)
    calling_team = team_of(caller)
    if lone_seat is not None and team_of(lone_seat) is not calling_team:
        raise InvariantViolation("Only the calling team can play alone")

    tricks = sum(count for seat, count in trick_counts.items() if team_of(seat) is calling_team)
    alone = lone_seat is not None
    if tricks == TRICKS_PER_HAND:
        team, points = calling_team, 4 if alone else 2
        reason = ScoreReason.MARCH_ALONE if alone else ScoreReason.MARCH
    elif tricks >= 3:
        team, points = calling_team, 1
        reason = ScoreReason.MADE_ALONE if alone else ScoreReason.MADE
    else:
        team, points = calling_team.opponent, 2
        reason = ScoreReason.EUCHRED_ALONE if alone else ScoreReason.EUCHRED
    return HandScore(team=team, points=points, reason=reason, calling_team=calling_team, calling_tricks=tricks)


@dataclass
class ScoringPhase:
    """Handle end-of-hand scoring."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "ScoringPhase()"

    def score(self, state: GameState) -> HandScore:
        """Score the state's current hand and add the points."""

        hand = state.hand
        if hand is None or hand.caller is None:
            raise InvariantViolation("No resolved hand to score")
        result = score_hand(hand.trick_counts, hand.caller, hand.lone_seat)
        self.apply(state, result)
        return result

    def apply(self, state: GameState, result: HandScore) -> None:
        """Add the hand's points to the cumulative scores."""

        state.scores[result.team] += result.points
        logger.info(
            "{} +{} ({}); score {}-{}",
            result.team.value,
            result.points,
            result.reason.value,
            state.scores[Team.NORTH_SOUTH],
            state.scores[Team.EAST_WEST],
        )

    def winner(self, state: GameState) -> Optional[Team]:
        """Return the team that reached the target score, if any."""

        target = state.rules.game.target_score
        for team in (Team.NORTH_SOUTH, Team.EAST_WEST):
            if state.scores[team] >= target:
                return team
        return None
