"""
View model for drawing a round.

`build_table_view` turns a GameState into everything a front end needs to
draw the table, so the Streamlit page itself holds no game logic.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from solojack.blackjack.rules import determine_game_result
from solojack.blackjack.state import GameResult, GameState, Turn
from solojack.ui.assets import (
    HIDDEN_CARD_LABEL,
    card_back_image_path,
    card_image_path,
)


@dataclass(frozen=True)
class TableView:
    """
    Everything needed to draw the table for one state.

    Attributes:
        player_images: Image paths of the player's cards
        player_labels: Text for each of the player's cards
        player_score: Score of the player's hand
        dealer_images: Image paths of the dealer's cards, first one face down on the player's turn
        dealer_labels: Text for each of the dealer's cards, "??" when face down
        dealer_score: Score of the dealer's hand, hidden on the player's turn
        status: The round result once the dealer has played, otherwise the turn
        controls_enabled: Whether Hit and Stand may be pressed
        cards_remaining: Number of cards left in the deck
    """

    player_images: Tuple[str, ...]
    player_labels: Tuple[str, ...]
    player_score: int
    dealer_images: Tuple[str, ...]
    dealer_labels: Tuple[str, ...]
    dealer_score: Optional[int]
    status: str
    controls_enabled: bool
    cards_remaining: int


def status_text(state: GameState) -> str:
    if state.turn == Turn.DEALER_TURN:
        result = determine_game_result(state)
        if result != GameResult.NO_RESULT:
            return result.value
    return state.turn.value


def build_table_view(state: GameState, root: Optional[str] = None) -> TableView:
    """
    Build the view of a state.

    While the player is acting, the dealer's first card is shown face down and
    the dealer's score is withheld.
    """
    player_images = tuple(card_image_path(card, root) for card in state.player_hand)
    dealer_turn = state.turn == Turn.DEALER_TURN

    if dealer_turn or not state.dealer_hand:
        dealer_images: List[str] = [
            card_image_path(card, root) for card in state.dealer_hand
        ]
        dealer_labels = [str(card) for card in state.dealer_hand]
        dealer_score = state.dealer_score if dealer_turn else None
    else:
        dealer_images = [card_back_image_path(root)]
        dealer_images.extend(card_image_path(card, root) for card in state.dealer_hand[1:])
        dealer_labels = [HIDDEN_CARD_LABEL]
        dealer_labels.extend(str(card) for card in state.dealer_hand[1:])
        dealer_score = None

    return TableView(
        player_images=player_images,
        player_labels=tuple(str(card) for card in state.player_hand),
        player_score=state.player_score,
        dealer_images=tuple(dealer_images),
        dealer_labels=tuple(dealer_labels),
        dealer_score=dealer_score,
        status=status_text(state),
        controls_enabled=not dealer_turn,
        cards_remaining=len(state.card_deck),
    )
