"""Blackjack-specific constants and value mappings."""

from solojack.common.card import Rank

BLACKJACK_TOTAL = 21

# The dealer draws a single card on stand while at or below this total
DEALER_HIT_LIMIT = 16

INITIAL_HAND_SIZE = 2

# Aces count 1 here; the soft bonus is applied by the scoring engine
BLACKJACK_VALUES = {
    Rank.ACE: 1,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}

TEN_VALUE_RANKS = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING})
