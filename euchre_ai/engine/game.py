"""Main game loop orchestrator."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from loguru import logger

from ..players.ai_player import AIPlayer
from ..players.base import BidContext, PlayContext, Player
from .cards import sort_cards
from .deck import create_shuffled_deck, deal, next_dealer
from .events import GameListener
from .exceptions import ConfigurationError, EuchreError, InvariantViolation
from .phases.bidding import MAX_BID_ACTIONS, BiddingPhase
from .phases.play import PlayPhase, TrickOutcome
from .phases.scoring import HandScore, ScoringPhase
from .rules import RulesConfig, load_rules
from .state import CLOCKWISE, BidStage, GameState, HandState, Seat, Team, create_initial_state, team_of

__all__ = ["EuchreGame"]


@dataclass
class EuchreGame:
    """High-level controller for full games.

    The controller owns the ``GameState`` and is the only thing that moves a
    game from one hand to the next. Each seat is driven by a ``Player``;
    seats not given explicitly are computer players sharing the game's
    random source.
    """

    rules: RulesConfig
    bidding: BiddingPhase
    play: PlayPhase
    scoring: ScoringPhase
    state: GameState
    players: Dict[Seat, Player]
    rng: random.Random
    listener: GameListener = field(default_factory=GameListener)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"EuchreGame(scores={self.state.scores}, round={self.state.round})"

    @classmethod
    def new(
        cls,
        rules: Optional[RulesConfig] = None,
        seed: int = 0,
        difficulty: Optional[str] = None,
        players: Optional[Mapping[Seat, Player]] = None,
        listener: Optional[GameListener] = None,
    ) -> "EuchreGame":
        """Construct a new game instance with default phases."""

        cfg = rules or load_rules()
        state = create_initial_state(cfg, seed=seed, difficulty=difficulty)
        rng = random.Random(seed)
        seats: Dict[Seat, Player] = {
            seat: AIPlayer.for_seat(cfg.ai, state.difficulty, seat, rng) for seat in CLOCKWISE
        }
        seats.update(players or {})
        game = cls(
            rules=cfg,
            bidding=BiddingPhase(stick_the_dealer=cfg.game.stick_the_dealer),
            play=PlayPhase(),
            scoring=ScoringPhase(),
            state=state,
            players=seats,
            rng=rng,
            listener=listener or GameListener(),
        )
        game.new_game()
        return game

    @property
    def hand(self) -> Optional[HandState]:
        return self.state.hand

    @property
    def player_team(self) -> Team:
        return team_of(Seat(self.rules.ai.human_seat))

    def new_game(self) -> None:
        """Reset scores and pick a random starting dealer."""

        self.state.reset_scores()
        self.state.dealer = self.rng.choice(CLOCKWISE)
        logger.info("new game, {} deals first", self.state.dealer.value)

    def set_difficulty(self, difficulty: str) -> None:
        """Change the AI difficulty. Only allowed between hands."""

        if self.state.hand is not None:
            raise ConfigurationError("Difficulty can only change between hands")
        profile = self.rules.ai.profile(difficulty)
        self.state.difficulty = difficulty
        for player in self.players.values():
            player.on_difficulty_changed(difficulty, profile)

    def is_finished(self) -> bool:
        """Return True if either team reached the target score."""

        return self.state.winner is not None

    def start_hand(self) -> HandState:
        """Shuffle, deal and open the bidding."""

        if self.is_finished():
            raise EuchreError("The game is over; start a new game")
        if self.state.hand is not None:
            raise EuchreError("A hand is already in progress")
        dealt = deal(create_shuffled_deck(self.rng), self.state.dealer, self.rng)
        hand = HandState(dealer=self.state.dealer, hands=dealt.hands, flipped=dealt.flipped, kitty=dealt.kitty)
        self.bidding.start(hand)
        hand.check_card_count()
        self.state.hand = hand
        self.state.stats.hands_played += 1
        logger.debug(
            "hand {}: {} deals {}-{}, flipped {}",
            self.state.round,
            hand.dealer.value,
            dealt.first_batch,
            5 - dealt.first_batch,
            hand.flipped,
        )
        self.listener.on_deal_complete(hand)
        return hand

    def run_bidding(self) -> bool:
        """Ask seats for bids until trump is set. Returns False on a redeal."""

        hand = self._current_hand()
        while hand.stage not in (BidStage.RESOLVED, BidStage.REDEAL):
            if len(hand.bids) >= MAX_BID_ACTIONS:
                raise InvariantViolation("Bidding did not terminate")
            seat = hand.to_act
            context = BidContext(
                seat=seat,
                round=hand.bidding_round,
                dealer=hand.dealer,
                flipped=hand.flipped,
                hand=tuple(sort_cards(hand.hands[seat])),
                options=tuple(self.bidding.legal_options(hand)),
            )
            self.bidding.apply(hand, seat, self.players[seat].request_bid(context))

        if hand.stage is BidStage.REDEAL:
            return False
        if hand.discard_pending:
            dealer_cards = tuple(sort_cards(hand.hands[hand.dealer]))
            card = self.players[hand.dealer].request_discard(dealer_cards, hand.trump)
            self.bidding.discard(hand, hand.dealer, card)
        if not hand.trump_announced:
            self.play.start(hand)
            hand.check_card_count()
            hand.trump_announced = True
            self.listener.on_trump_resolved(hand)
        return True

    def play_trick(self) -> TrickOutcome:
        """Ask seats for cards until the current trick completes."""

        hand = self._current_hand()
        self.play.check_open(hand)
        while True:
            seat = hand.to_act
            context = PlayContext(
                seat=seat,
                trump=hand.trump,
                hand=tuple(sort_cards(hand.hands[seat])),
                legal=tuple(sort_cards(self.play.legal_cards(hand, seat))),
                trick=tuple(hand.current_trick),
                lone_seat=hand.lone_seat,
            )
            outcome = self.play.play_card(hand, seat, self.players[seat].request_card_play(context))
            if outcome is not None:
                self.listener.on_trick_complete(outcome)
                return outcome

    def finish_hand(self) -> HandScore:
        """Score the hand, check for a winner and pass the deal."""

        hand = self._current_hand()
        if not self.play.is_complete(hand):
            raise EuchreError("The hand is not finished")
        hand.check_card_count()
        result = self.scoring.score(self.state)
        self.state.hand = None
        self.listener.on_hand_complete(result, dict(self.state.scores))

        winner = self.scoring.winner(self.state)
        if winner is not None:
            self._end_game(winner)
        else:
            self.state.round += 1
            self.state.dealer = next_dealer(self.state.dealer)
        return result

    def run_hand(self) -> HandScore:
        """Play one hand to completion, resuming one already in progress."""

        redeals = 0
        while True:
            if self.state.hand is None:
                self.start_hand()
            if self.run_bidding():
                break
            redeals += 1
            if redeals > self.rules.game.max_redeals:
                raise EuchreError("Too many redeals")
            logger.info("everyone passed, redealing")
            self.state.hand = None

        hand = self._current_hand()
        while not self.play.is_complete(hand):
            self.play_trick()
        return self.finish_hand()

    def run_game(self, max_hands: int = 500) -> Team:
        """Play hands until a team reaches the target score."""

        hands = 0
        while not self.is_finished():
            if hands >= max_hands:
                raise EuchreError(f"No winner after {max_hands} hands")
            self.run_hand()
            hands += 1
        return self.state.winner

    def _end_game(self, winner: Team) -> None:
        self.state.winner = winner
        if winner is self.player_team:
            self.state.stats.games_won += 1
        else:
            self.state.stats.games_lost += 1
        logger.info(
            "{} win {}-{}",
            winner.value,
            self.state.scores[winner],
            self.state.scores[winner.opponent],
        )
        self.listener.on_game_complete(winner, dict(self.state.scores))

    def _current_hand(self) -> HandState:
        if self.state.hand is None:
            raise EuchreError("No hand in progress")
        return self.state.hand
