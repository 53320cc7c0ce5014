"""Tests for seat helpers and hand bookkeeping."""

from __future__ import annotations

import pytest

from ...engine.cards import Suit
from ...engine.exceptions import InvariantViolation
from ...engine.phases.play import active_seats, next_active_seat
from ...engine.rules import load_rules
from ...engine.state import Seat, Team, create_initial_state, left_of, partner_of, seats_from, team_of
from ..fixtures.hands import card, preset_hand, resolve


def test_seat_helpers() -> None:
    assert left_of(Seat.SOUTH) is Seat.WEST
    assert partner_of(Seat.WEST) is Seat.EAST
    assert team_of(Seat.NORTH) is Team.NORTH_SOUTH
    assert Team.EAST_WEST.opponent is Team.NORTH_SOUTH
    assert seats_from(Seat.NORTH) == [Seat.NORTH, Seat.EAST, Seat.SOUTH, Seat.WEST]


def test_active_seats_for_lone_hand() -> None:
    assert active_seats(None) == [Seat.SOUTH, Seat.WEST, Seat.NORTH, Seat.EAST]
    assert active_seats(Seat.WEST) == [Seat.SOUTH, Seat.WEST, Seat.NORTH]
    assert next_active_seat(Seat.EAST, Seat.WEST) is Seat.SOUTH
    assert next_active_seat(Seat.NORTH, Seat.WEST) is Seat.NORTH


def test_calling_team() -> None:
    hand = resolve(preset_hand(), Suit.SPADES, Seat.SOUTH)
    assert hand.calling_team is Team.NORTH_SOUTH
    assert preset_hand().calling_team is None


def test_card_count_detects_lost_card() -> None:
    hand = preset_hand()
    hand.check_card_count()
    hand.hands[Seat.SOUTH].pop()
    with pytest.raises(InvariantViolation):
        hand.check_card_count()


def test_card_count_detects_duplicate() -> None:
    hand = preset_hand()
    hand.hands[Seat.SOUTH][0] = card("J♥")
    with pytest.raises(InvariantViolation):
        hand.check_card_count()


def test_initial_state() -> None:
    state = create_initial_state(load_rules(), seed=5, difficulty="hard")
    assert state.difficulty == "hard"
    assert state.rng_seed == 5
    assert state.hand is None
    assert state.winner is None
    assert state.scores == {Team.NORTH_SOUTH: 0, Team.EAST_WEST: 0}
