"""Edge case tests."""

from __future__ import annotations

import random
from typing import List

import pytest

from ...engine.cards import Suit
from ...engine.exceptions import ConfigurationError, EuchreError, IllegalBid, IllegalPlay, Reason
from ...engine.events import RecordingListener
from ...engine.game import EuchreGame
from ...engine.phases.bidding import BidAction, BidDecision
from ...engine.rules import RulesConfig
from ...engine.state import CLOCKWISE, BidStage, Seat, left_of
from ...players import AIPlayer, BidContext, CallbackPlayer, PlayContext, RandomPlayer


def passing_player() -> CallbackPlayer:
    return CallbackPlayer(
        bid=lambda context: BidDecision.pass_(),
        discard=lambda hand, trump: hand[0],
        card_play=lambda context: context.legal[0],
    )


def taking_player() -> CallbackPlayer:
    """Accepts the first trump offered, never alone."""

    def bid(context: BidContext) -> BidDecision:
        option = context.options[0]
        return BidDecision(option.action, option.suit)

    return CallbackPlayer(bid=bid, discard=lambda hand, trump: hand[0], card_play=lambda context: context.legal[0])


def quiet_table(south: CallbackPlayer, seed: int = 0) -> dict:
    """South plus three random seats that never go alone."""

    rng = random.Random(seed)
    seats = {seat: RandomPlayer(rng=rng, alone_chance=0.0) for seat in CLOCKWISE}
    seats[Seat.SOUTH] = south
    return seats


def test_illegal_card_from_caller_leaves_state_unchanged() -> None:
    attempts: List[PlayContext] = []
    game: EuchreGame

    def card_play(context: PlayContext):
        attempts.append(context)
        if len(attempts) == 1:
            return game.hand.kitty[0]
        return context.legal[0]

    south = CallbackPlayer(
        bid=taking_player().bid,
        discard=lambda hand, trump: hand[0],
        card_play=card_play,
    )
    game = EuchreGame.new(seed=4, players=quiet_table(south))
    game.state.dealer = Seat.EAST

    with pytest.raises(IllegalPlay) as excinfo:
        game.run_hand()
    assert excinfo.value.reason is Reason.CARD_NOT_IN_HAND
    hand = game.hand
    assert hand.to_act is Seat.SOUTH
    assert hand.current_trick == []
    assert len(hand.hands[Seat.SOUTH]) == 5
    hand.check_card_count()

    result = game.run_hand()
    assert sum(hand.trick_counts.values()) == 5
    assert result.calling_team is hand.calling_team
    assert game.hand is None
    assert game.state.stats.hands_played == 1


def test_illegal_bid_then_resume() -> None:
    answers = [BidDecision(BidAction.CALL, None), BidDecision(BidAction.CALL, None)]

    def bid(context: BidContext) -> BidDecision:
        if answers:
            return answers.pop()
        return taking_player().bid(context)

    south = CallbackPlayer(bid=bid, discard=lambda hand, trump: hand[0], card_play=lambda context: context.legal[0])
    game = EuchreGame.new(seed=8, players=quiet_table(south))
    game.state.dealer = Seat.EAST

    for _ in range(2):
        with pytest.raises(IllegalBid):
            game.run_hand()
        assert game.hand.bids == []
        assert game.hand.to_act is Seat.SOUTH

    game.run_hand()
    assert game.state.stats.hands_played == 1
    assert sum(game.state.scores.values()) > 0


def test_round_one_call_is_rejected() -> None:
    south = CallbackPlayer(
        bid=lambda context: BidDecision(BidAction.CALL, context.flipped.suit),
        discard=lambda hand, trump: hand[0],
        card_play=lambda context: context.legal[0],
    )
    game = EuchreGame.new(seed=6, players=quiet_table(south))
    game.state.dealer = Seat.EAST
    with pytest.raises(IllegalBid) as excinfo:
        game.run_hand()
    assert excinfo.value.reason is Reason.WRONG_ROUND
    assert game.hand.stage is BidStage.ROUND1


def test_stuck_dealer_cannot_pass() -> None:
    game = EuchreGame.new(seed=0, players={seat: passing_player() for seat in CLOCKWISE})
    with pytest.raises(IllegalBid) as excinfo:
        game.run_hand()
    assert excinfo.value.reason is Reason.DEALER_MUST_CALL
    assert game.hand.stage is BidStage.STUCK_DEALER
    assert game.hand.to_act is game.hand.dealer
    assert len(game.hand.bids) == 7


def test_redeal_when_everyone_passes() -> None:
    """Without stick-the-dealer, eight passes redeal with the same dealer."""

    calls: List[BidContext] = []

    def bid(context: BidContext) -> BidDecision:
        calls.append(context)
        if len(calls) <= 8:
            return BidDecision.pass_()
        option = context.options[0]
        return BidDecision(option.action, option.suit)

    player = CallbackPlayer(bid=bid, discard=lambda hand, trump: hand[0], card_play=lambda context: context.legal[0])
    rules = RulesConfig.model_validate({"game": {"stick_the_dealer": False}})
    listener = RecordingListener()
    game = EuchreGame.new(rules=rules, seed=3, players={seat: player for seat in CLOCKWISE}, listener=listener)
    dealer = game.state.dealer

    game.run_hand()
    deals = [payload for name, payload in listener.events if name == "deal_complete"]
    assert deals == [dealer, dealer]
    assert game.state.stats.hands_played == 2
    assert game.state.dealer is left_of(dealer)
    assert listener.names().count("hand_complete") == 1


def test_too_many_redeals() -> None:
    rules = RulesConfig.model_validate({"game": {"stick_the_dealer": False, "max_redeals": 2}})
    game = EuchreGame.new(rules=rules, seed=0, players={seat: passing_player() for seat in CLOCKWISE})
    with pytest.raises(EuchreError):
        game.run_hand()
    assert game.state.stats.hands_played == 3


def test_difficulty_changes_only_between_hands() -> None:
    game = EuchreGame.new(seed=1, difficulty="easy")
    game.start_hand()
    with pytest.raises(ConfigurationError):
        game.set_difficulty("hard")
    assert game.state.difficulty == "easy"

    game.run_hand()
    game.set_difficulty("hard")
    assert game.state.difficulty == "hard"
    hard = game.rules.ai.profile("hard")
    assert all(player.profile == hard for player in game.players.values() if isinstance(player, AIPlayer))
    with pytest.raises(ConfigurationError):
        game.set_difficulty("nightmare")


def test_second_hand_cannot_start_mid_hand() -> None:
    game = EuchreGame.new(seed=1)
    game.start_hand()
    with pytest.raises(EuchreError):
        game.start_hand()
    with pytest.raises(EuchreError):
        game.finish_hand()


def test_no_hand_in_progress() -> None:
    game = EuchreGame.new(seed=1)
    with pytest.raises(EuchreError):
        game.play_trick()


def test_play_trick_before_trump_is_set() -> None:
    game = EuchreGame.new(seed=1)
    hand = game.start_hand()
    with pytest.raises(IllegalPlay) as excinfo:
        game.play_trick()
    assert excinfo.value.reason is Reason.NOT_PLAYING
    assert hand.current_trick == []
    hand.check_card_count()


def test_play_trick_while_discard_is_owed() -> None:
    game = EuchreGame.new(seed=1)
    hand = game.start_hand()
    game.bidding.order_up(hand, hand.to_act)
    with pytest.raises(IllegalPlay) as excinfo:
        game.play_trick()
    assert excinfo.value.reason is Reason.DISCARD_PENDING
    assert len(hand.hands[hand.dealer]) == 6

    # The dealer's seat is asked for the discard and play resumes.
    assert game.run_bidding()
    assert game.play_trick().number == 1


def test_play_trick_after_five_tricks() -> None:
    game = EuchreGame.new(seed=2)
    hand = game.start_hand()
    assert game.run_bidding()
    for _ in range(5):
        game.play_trick()
    with pytest.raises(IllegalPlay) as excinfo:
        game.play_trick()
    assert excinfo.value.reason is Reason.NOT_PLAYING
    assert len(hand.tricks) == 5
    game.finish_hand()


def test_bidding_resolved_outside_run_bidding_still_announces_trump() -> None:
    listener = RecordingListener()
    game = EuchreGame.new(seed=6, listener=listener)
    hand = game.start_hand()
    for _ in range(4):
        game.bidding.pass_(hand, hand.to_act)
    suit = next(suit for suit in Suit if suit is not hand.flipped.suit)
    game.bidding.call(hand, hand.to_act, suit)
    assert hand.stage is BidStage.RESOLVED

    assert game.run_bidding()
    assert listener.names().count("trump_resolved") == 1
    game.play_trick()
    # Asking again mid-hand neither restarts play nor repeats the event.
    assert game.run_bidding()
    assert len(hand.tricks) == 1

    game.run_hand()
    assert listener.names().count("trump_resolved") == 1
    assert listener.names()[-1] == "hand_complete"


def test_seats_see_their_cards_in_deck_order() -> None:
    bids: List[BidContext] = []
    plays: List[PlayContext] = []

    def bid(context: BidContext) -> BidDecision:
        bids.append(context)
        return taking_player().bid(context)

    def card_play(context: PlayContext):
        plays.append(context)
        return context.legal[-1]

    player = CallbackPlayer(bid=bid, discard=lambda hand, trump: hand[0], card_play=card_play)
    game = EuchreGame.new(seed=8, players={seat: player for seat in CLOCKWISE})
    game.run_hand()
    assert bids and plays
    for context in [*bids, *plays]:
        assert list(context.hand) == sorted(context.hand, key=lambda card: card.index)
    for context in plays:
        assert list(context.legal) == sorted(context.legal, key=lambda card: card.index)


@pytest.mark.parametrize("seed", range(15))
def test_random_players_keep_cards_consistent(seed: int) -> None:
    """Random seats, including lone hands, never lose or duplicate a card."""

    rng = random.Random(seed)
    players = {seat: RandomPlayer(rng=rng, alone_chance=0.3) for seat in CLOCKWISE}
    game = EuchreGame.new(seed=seed, players=players)
    for _ in range(6):
        hand = game.start_hand()
        hand.check_card_count()
        assert game.run_bidding()
        hand.check_card_count()
        assert len(hand.bids) <= 8
        while not game.play.is_complete(hand):
            game.play_trick()
            hand.check_card_count()
        game.finish_hand()
        if game.is_finished():
            break
