"""
Outcome resolution for a round of blackjack.

The checks in `determine_game_result` run in a fixed order and the first one
that matches wins. Equal scores are a draw even when both hands are bust,
because the equality check comes before the bust checks.
"""

from solojack.blackjack.constants import BLACKJACK_TOTAL
from solojack.blackjack.scoring import calculate_hand_score, is_blackjack
from solojack.blackjack.state import GameResult, GameState


def determine_game_result(state: GameState) -> GameResult:
    """
    Determine the result implied by the current hands.

    Safe to call at any point of the round; on a round in progress it reports
    what the current scores imply.

    Args:
        state: Current game state

    Returns:
        The GameResult for the state
    """
    player_score = calculate_hand_score(state.player_hand)
    dealer_score = calculate_hand_score(state.dealer_hand)
    player_blackjack = is_blackjack(state.player_hand)
    dealer_blackjack = is_blackjack(state.dealer_hand)

    if player_blackjack and not dealer_blackjack:
        return GameResult.PLAYER_WIN
    if dealer_blackjack and not player_blackjack:
        return GameResult.DEALER_WIN
    if player_blackjack and dealer_blackjack:
        return GameResult.DRAW

    if player_score == dealer_score:
        return GameResult.DRAW
    if player_score > BLACKJACK_TOTAL:
        return GameResult.DEALER_WIN
    if dealer_score > BLACKJACK_TOTAL:
        return GameResult.PLAYER_WIN

    if player_score > dealer_score:
        return GameResult.PLAYER_WIN
    if dealer_score > player_score:
        return GameResult.DEALER_WIN

    return GameResult.DRAW
