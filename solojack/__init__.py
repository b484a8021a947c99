"""
solojack: a blackjack rules engine for one player against the dealer.

The engine is a set of pure functions over an immutable `GameState`. A front
end keeps one state, passes it to an action, and replaces it with the result.
"""

from solojack.blackjack.rules import determine_game_result
from solojack.blackjack.scoring import calculate_hand_score
from solojack.blackjack.state import GameResult, GameState, Turn
from solojack.blackjack.transitions import (
    InvalidActionError,
    StateTransitionEngine,
    player_hits,
    player_stands,
    setup_game,
)
from solojack.common.card import Card, Rank, Suit
from solojack.common.deck import DeckExhaustedError

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "GameState",
    "GameResult",
    "Turn",
    "StateTransitionEngine",
    "InvalidActionError",
    "DeckExhaustedError",
    "setup_game",
    "player_hits",
    "player_stands",
    "determine_game_result",
    "calculate_hand_score",
]
