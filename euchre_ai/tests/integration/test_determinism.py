"""Determinism tests."""

from __future__ import annotations

from ...engine.events import RecordingListener
from ...engine.game import EuchreGame


def test_same_seed_produces_same_scores() -> None:
    game_a = EuchreGame.new(seed=123)
    game_b = EuchreGame.new(seed=123)
    game_a.run_hand()
    game_b.run_hand()
    assert game_a.state.scores == game_b.state.scores
    assert game_a.state.dealer is game_b.state.dealer


def test_same_seed_replays_whole_game() -> None:
    listener_a, listener_b = RecordingListener(), RecordingListener()
    winner_a = EuchreGame.new(seed=99, difficulty="hard", listener=listener_a).run_game()
    winner_b = EuchreGame.new(seed=99, difficulty="hard", listener=listener_b).run_game()
    assert winner_a is winner_b
    assert listener_a.events == listener_b.events


def test_seeds_vary_the_deal() -> None:
    hands = set()
    for seed in range(5):
        game = EuchreGame.new(seed=seed)
        hand = game.start_hand()
        hands.add(tuple(hand.hands[hand.dealer]))
    assert len(hands) > 1
