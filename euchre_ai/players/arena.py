"""Difficulty tier matches."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import numpy as np
from loguru import logger

from ..engine.game import EuchreGame
from ..engine.rules import RulesConfig, load_rules
from ..engine.state import CLOCKWISE, Team, team_of
from .ai_player import AIPlayer
from .base import Player

__all__ = ["Arena", "MatchResult"]


@dataclass
class MatchResult:
    """Result of a series between two difficulty tiers."""

    tier_a: str
    tier_b: str
    wins_a: int = 0
    wins_b: int = 0
    points_a: int = 0
    points_b: int = 0
    outcomes: List[int] = field(default_factory=list)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"MatchResult({self.tier_a} {self.wins_a}-{self.wins_b} {self.tier_b})"

    @property
    def games(self) -> int:
        return self.wins_a + self.wins_b

    @property
    def win_rate(self) -> float:
        """Fraction of games won by ``tier_a``."""

        if not self.outcomes:
            return 0.0
        return float(np.mean(self.outcomes))

    @property
    def stderr(self) -> float:
        """Standard error of ``win_rate``."""

        if not self.outcomes:
            return 0.0
        return float(np.std(self.outcomes) / np.sqrt(len(self.outcomes)))


@dataclass
class Arena:
    """Seats two difficulty tiers as opposing partnerships.

    Tiers swap partnerships every other game, since the human player's
    partnership goes alone more often.
    """

    rules: RulesConfig = field(default_factory=load_rules)
    seed: int = 0

    def run(self, tiers: Sequence[str], games: int = 10) -> List[MatchResult]:
        """Play every pair of ``tiers`` against each other."""

        results: List[MatchResult] = []
        for i, tier_a in enumerate(tiers):
            for tier_b in tiers[i + 1 :]:
                results.append(self.play_match(tier_a, tier_b, games))
        return results

    def play_match(self, tier_a: str, tier_b: str, games: int) -> MatchResult:
        """Play ``games`` full games between two tiers."""

        self.rules.ai.profile(tier_a)
        self.rules.ai.profile(tier_b)
        result = MatchResult(tier_a=tier_a, tier_b=tier_b)
        for index in range(games):
            team_a = Team.NORTH_SOUTH if index % 2 == 0 else Team.EAST_WEST
            seed = self.seed + index
            players = self._seat(tier_a, tier_b, team_a, random.Random(seed))
            game = EuchreGame.new(rules=self.rules, seed=seed, players=players)
            winner = game.run_game()
            result.outcomes.append(int(winner is team_a))
            if winner is team_a:
                result.wins_a += 1
            else:
                result.wins_b += 1
            result.points_a += game.state.scores[team_a]
            result.points_b += game.state.scores[team_a.opponent]
        logger.info(
            "{} vs {}: {}-{} (win={:.3f}±{:.3f})", tier_a, tier_b, result.wins_a, result.wins_b, result.win_rate, result.stderr
        )
        return result

    def _seat(self, tier_a: str, tier_b: str, team_a: Team, rng: random.Random) -> Dict:
        players: Dict = {}
        for seat in CLOCKWISE:
            tier = tier_a if team_of(seat) is team_a else tier_b
            player: Player = AIPlayer.for_seat(self.rules.ai, tier, seat, rng)
            players[seat] = player
        return players
