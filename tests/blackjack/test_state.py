import dataclasses

import pytest

from solojack.blackjack.state import GameResult, GameState, Turn
from solojack.common.card import Rank


def test_enums_are_closed():
    assert {turn.value for turn in Turn} == {"player_turn", "dealer_turn"}
    assert {result.value for result in GameResult} == {
        "player_win",
        "dealer_win",
        "draw",
        "no_result",
    }


def test_default_state():
    state = GameState()
    assert state.player_hand == ()
    assert state.turn == Turn.PLAYER_TURN
    assert state.player_score == 0


def test_state_is_frozen(state_factory):
    state = state_factory((Rank.TEN, Rank.NINE), (Rank.TEN, Rank.SEVEN))
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.turn = Turn.DEALER_TURN


def test_to_dict(state_factory):
    state = state_factory(
        (Rank.ACE, Rank.KING), (Rank.TEN, Rank.SEVEN), deck=(Rank.TWO, Rank.THREE)
    )
    assert state.to_dict() == {
        "turn": "player_turn",
        "player_hand": ["A of ♥", "K of ♥"],
        "dealer_hand": ["10 of ♠", "7 of ♠"],
        "player_score": 21,
        "dealer_score": 17,
        "cards_remaining": 2,
    }
