"""
Immutable state models for a round of blackjack.

This module provides the dataclass and enums that describe a round between
one player and the dealer. The classes are designed to be used with the pure
transition functions in `solojack.blackjack.transitions`, which create new
state instances rather than modifying existing ones.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from solojack.blackjack.scoring import calculate_hand_score
from solojack.common.card import Card
from solojack.common.deck import Deck

Hand = Tuple[Card, ...]


class Turn(Enum):
    """Whose turn it is. Governs which actions are legal."""

    PLAYER_TURN = "player_turn"
    DEALER_TURN = "dealer_turn"


class GameResult(Enum):
    """Outcome of a round. Derived from a GameState, never stored in one."""

    PLAYER_WIN = "player_win"
    DEALER_WIN = "dealer_win"
    DRAW = "draw"
    NO_RESULT = "no_result"


@dataclass(frozen=True)
class GameState:
    """
    Immutable representation of a round.

    Attributes:
        player_hand: Cards held by the player, in the order they were dealt
        dealer_hand: Cards held by the dealer, in the order they were dealt
        card_deck: Cards left to draw; the top of the deck is the last element
        turn: Whose turn it is
    """

    player_hand: Hand = field(default_factory=tuple)
    dealer_hand: Hand = field(default_factory=tuple)
    card_deck: Deck = field(default_factory=tuple)
    turn: Turn = Turn.PLAYER_TURN

    @property
    def player_score(self) -> int:
        return calculate_hand_score(self.player_hand)

    @property
    def dealer_score(self) -> int:
        return calculate_hand_score(self.dealer_hand)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the game state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game state
        """
        return {
            "turn": self.turn.value,
            "player_hand": [str(card) for card in self.player_hand],
            "dealer_hand": [str(card) for card in self.dealer_hand],
            "player_score": self.player_score,
            "dealer_score": self.dealer_score,
            "cards_remaining": len(self.card_deck),
        }
