"""Simulate all-computer games and report results."""

from __future__ import annotations

import argparse
import sys
import time
from collections import Counter

from loguru import logger

from ..engine.game import EuchreGame
from ..engine.rules import DIFFICULTIES, load_rules
from ..players.arena import Arena


def main(argv: list[str] | None = None) -> None:
    """Run simulated games and report wins and throughput."""

    parser = argparse.ArgumentParser()
    parser.add_argument("--games", type=int, default=100)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--difficulty", choices=DIFFICULTIES, default=None)
    parser.add_argument("--versus", choices=DIFFICULTIES, default=None, help="pit --difficulty against this tier")
    parser.add_argument("--rules", default=None, help="path to a rules YAML file")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    rules = load_rules(args.rules)
    start = time.perf_counter()
    if args.versus is not None:
        tier = args.difficulty or rules.ai.default_difficulty
        result = Arena(rules=rules, seed=args.seed).play_match(tier, args.versus, args.games)
        duration = time.perf_counter() - start
        print(f"Played {result.games} games in {duration:.2f}s")
        print(f"  {result.tier_a}: {result.wins_a} wins, {result.points_a} points")
        print(f"  {result.tier_b}: {result.wins_b} wins, {result.points_b} points")
        print(f"  {result.tier_a} win rate: {result.win_rate:.3f}±{result.stderr:.3f}")
        return

    wins: Counter = Counter()
    hands = 0
    for index in range(args.games):
        game = EuchreGame.new(rules=rules, seed=args.seed + index, difficulty=args.difficulty)
        wins[game.run_game().value] += 1
        hands += game.state.stats.hands_played
    duration = time.perf_counter() - start
    print(f"Played {args.games} games ({hands} hands) in {duration:.2f}s")
    for team, count in sorted(wins.items()):
        print(f"  {team}: {count}")


if __name__ == "__main__":
    main()
