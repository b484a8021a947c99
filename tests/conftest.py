"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by all test packages.
"""

import random

import pytest

from solojack.blackjack.state import GameState, Turn
from solojack.common.card import Card, Rank, Suit
from solojack.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


@pytest.fixture
def rng():
    return random.Random(20240607)


def make_hand(*ranks, suit=Suit.HEARTS):
    """Build a hand of the given ranks, all in one suit."""
    return tuple(Card(suit, rank) for rank in ranks)


def make_state(player, dealer, deck=(), turn=Turn.PLAYER_TURN):
    return GameState(
        player_hand=make_hand(*player),
        dealer_hand=make_hand(*dealer, suit=Suit.SPADES),
        card_deck=make_hand(*deck, suit=Suit.CLUBS),
        turn=turn,
    )


@pytest.fixture
def state_factory():
    return make_state
