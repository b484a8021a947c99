"""
Hand scoring for blackjack.

All functions here are pure. A hand is any sequence of cards; its order does
not affect the score.
"""

from typing import Sequence

from solojack.blackjack.constants import BLACKJACK_TOTAL, BLACKJACK_VALUES, TEN_VALUE_RANKS
from solojack.common.card import Card, Rank


def get_rank_value(rank: Rank) -> int:
    """Get the blackjack value for a given rank, counting an Ace as 1."""
    return BLACKJACK_VALUES[rank]


def calculate_hand_score(hand: Sequence[Card]) -> int:
    """
    Calculate the best total of a hand.

    Non-Ace cards are summed first. If one Ace can count as 11 with every other
    Ace counting as 1 without going over 21, that soft total is used;
    otherwise every Ace counts as 1. Two Aces score 12, Ace-Ace-Nine scores 21.
    """
    score = 0
    ace_count = 0

    for card in hand:
        if card.rank == Rank.ACE:
            ace_count += 1
        else:
            score += get_rank_value(card.rank)

    if ace_count > 0 and score + 11 + (ace_count - 1) <= BLACKJACK_TOTAL:
        score += 11 + (ace_count - 1)
    else:
        score += ace_count

    return score


def is_blackjack(hand: Sequence[Card]) -> bool:
    """Check if the hand is a natural: an Ace and a ten-valued card, nothing else."""
    return (
        len(hand) == 2
        and any(card.rank == Rank.ACE for card in hand)
        and any(card.rank in TEN_VALUE_RANKS for card in hand)
    )


def is_bust(hand: Sequence[Card]) -> bool:
    """Check if the hand is over 21."""
    return calculate_hand_score(hand) > BLACKJACK_TOTAL
