"""
State transition functions for a round of blackjack.

This module provides pure functions for moving a round from one state to the
next without modifying the original state objects. Each transition announces
what it did on the event bus.
"""

import logging
import random
from dataclasses import replace
from typing import List, Optional, Tuple

from solojack.blackjack.action import Action
from solojack.blackjack.constants import DEALER_HIT_LIMIT, INITIAL_HAND_SIZE
from solojack.blackjack.rules import determine_game_result
from solojack.blackjack.scoring import calculate_hand_score
from solojack.blackjack.state import GameState, Hand, Turn
from solojack.common.deck import Deck, build_deck, shuffle, take_card
from solojack.events import EventBus, EngineEventType

logger = logging.getLogger(__name__)


class InvalidActionError(Exception):
    """Raised when an action is not legal in the current state."""


def _deal(deck: Deck, count: int) -> Tuple[Hand, Deck]:
    cards = []
    for _ in range(count):
        card, deck = take_card(deck)
        cards.append(card)
    return tuple(cards), deck


class StateTransitionEngine:
    """
    Pure functions for state transitions in blackjack.

    This class contains static methods that implement game state transitions.
    Each method takes a state and returns a new state, without modifying the
    original.
    """

    @staticmethod
    def setup_game(rng: Optional[random.Random] = None) -> GameState:
        """
        Start a new round with a freshly shuffled deck.

        Args:
            rng: Optional random source for the shuffle

        Returns:
            A state with two cards for each side and the player to act
        """
        deck = shuffle(build_deck(), rng)
        player_hand, deck = _deal(deck, INITIAL_HAND_SIZE)
        dealer_hand, deck = _deal(deck, INITIAL_HAND_SIZE)

        new_state = GameState(
            player_hand=player_hand,
            dealer_hand=dealer_hand,
            card_deck=deck,
            turn=Turn.PLAYER_TURN,
        )

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.ROUND_STARTED,
            {"cards_remaining": len(new_state.card_deck)},
        )
        for recipient, hand in (("player", player_hand), ("dealer", dealer_hand)):
            for card in hand:
                event_bus.emit(
                    EngineEventType.CARD_DEALT,
                    {"recipient": recipient, "card": str(card)},
                )

        logger.debug("New round: %s", new_state.to_dict())
        return new_state

    @staticmethod
    def player_hits(state: GameState) -> GameState:
        """
        Deal one card to the player.

        Args:
            state: Current game state

        Returns:
            New game state with the card added to the player's hand

        Raises:
            InvalidActionError: If it is not the player's turn
        """
        StateTransitionEngine._require_player_turn(state, Action.HIT)

        card, remaining = take_card(state.card_deck)
        new_state = replace(
            state,
            player_hand=state.player_hand + (card,),
            card_deck=remaining,
        )

        event_bus = EventBus.get_instance()
        event_bus.emit(EngineEventType.PLAYER_ACTION, {"action": Action.HIT.value})
        event_bus.emit(
            EngineEventType.CARD_DEALT, {"recipient": "player", "card": str(card)}
        )

        logger.debug(
            "Player hits %s, score now %d", card, new_state.player_score
        )
        return new_state

    @staticmethod
    def player_stands(state: GameState) -> GameState:
        """
        End the player's turn and let the dealer play.

        The dealer draws exactly one card if their score is 16 or less, and
        otherwise keeps their hand.

        Args:
            state: Current game state

        Returns:
            New game state on the dealer's turn

        Raises:
            InvalidActionError: If it is not the player's turn
        """
        StateTransitionEngine._require_player_turn(state, Action.STAND)

        event_bus = EventBus.get_instance()
        event_bus.emit(EngineEventType.PLAYER_ACTION, {"action": Action.STAND.value})

        if calculate_hand_score(state.dealer_hand) <= DEALER_HIT_LIMIT:
            card, remaining = take_card(state.card_deck)
            new_state = replace(
                state,
                dealer_hand=state.dealer_hand + (card,),
                card_deck=remaining,
                turn=Turn.DEALER_TURN,
            )
            event_bus.emit(EngineEventType.DEALER_ACTION, {"action": Action.HIT.value})
            event_bus.emit(
                EngineEventType.CARD_DEALT, {"recipient": "dealer", "card": str(card)}
            )
            logger.debug("Dealer hits %s", card)
        else:
            new_state = replace(state, turn=Turn.DEALER_TURN)
            event_bus.emit(
                EngineEventType.DEALER_ACTION, {"action": Action.STAND.value}
            )

        result = determine_game_result(new_state)
        event_bus.emit(
            EngineEventType.ROUND_ENDED,
            {
                "result": result.value,
                "player_score": new_state.player_score,
                "dealer_score": new_state.dealer_score,
            },
        )

        logger.debug("Round ended: %s", result.value)
        return new_state

    @staticmethod
    def apply_action(state: GameState, action: Action) -> GameState:
        """
        Apply a player action to the state.

        Args:
            state: Current game state
            action: The action the player chose

        Returns:
            New game state after the action
        """
        if action == Action.HIT:
            return StateTransitionEngine.player_hits(state)
        if action == Action.STAND:
            return StateTransitionEngine.player_stands(state)
        raise InvalidActionError(f"Unknown action: {action!r}")

    @staticmethod
    def legal_actions(state: GameState) -> List[Action]:
        """Return the actions the player may take in this state."""
        if state.turn == Turn.PLAYER_TURN:
            return [Action.HIT, Action.STAND]
        return []

    @staticmethod
    def _require_player_turn(state: GameState, action: Action) -> None:
        if state.turn != Turn.PLAYER_TURN:
            raise InvalidActionError(
                f"Cannot {action.value} during {state.turn.value}"
            )


setup_game = StateTransitionEngine.setup_game
player_hits = StateTransitionEngine.player_hits
player_stands = StateTransitionEngine.player_stands
apply_action = StateTransitionEngine.apply_action
legal_actions = StateTransitionEngine.legal_actions
