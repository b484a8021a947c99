"""
This module contains the IOInterface abstract base class and its implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from solojack.blackjack.action import Action
from solojack.blackjack.transitions import InvalidActionError
from solojack.events import EngineEventType

if TYPE_CHECKING:
    from solojack.blackjack.state import GameState


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def get_player_action(
        self, state: GameState, valid_actions: list[Action]
    ) -> Action:
        """Retrieve the player's next action for the given state."""
        pass

    def event_handlers(self) -> dict:
        """Engine event handlers to subscribe while a round is played."""
        return {}


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.

    The player hits below 17 and stands otherwise.
    """

    stand_on = 17

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def get_player_action(
        self, state: GameState, valid_actions: list[Action]
    ) -> Action:
        if not valid_actions:
            raise ValueError("No valid actions available.")
        if state.player_score < self.stand_on and Action.HIT in valid_actions:
            return Action.HIT
        return Action.STAND if Action.STAND in valid_actions else valid_actions[0]


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and
    replays queued player actions.
    """

    __test__ = False

    def __init__(self):
        self.sent_messages = []
        self.player_actions = []

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def add_player_action(self, action: Action):
        """Add a player action to the queue."""
        self.player_actions.append(action)

    def get_player_action(
        self, state: GameState, valid_actions: list[Action]
    ) -> Action:
        if self.player_actions:
            return self.player_actions.pop(0)
        else:
            raise ValueError("No more actions left in TestIOInterface queue.")


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    max_attempts = 3

    def output(self, message: str) -> None:
        print(message)

    def get_player_action(
        self, state: GameState, valid_actions: list[Action]
    ) -> Action:
        attempts = 0
        while attempts < self.max_attempts:
            action_input = input("Your turn. What's your action? ").strip().lower()

            for action in valid_actions:
                if action_input in (action.value, action.value[0]):
                    return action

            print(
                f"Invalid action, valid actions are: {', '.join([a.value for a in valid_actions])}"
            )
            attempts += 1

        raise InvalidActionError("Too many invalid attempts. Game aborted.")


class LoggingIOInterface(DummyIOInterface):
    """
    A logging IO interface for recording purposes. Writes output messages and
    every card dealt to a log file, and plays the same fixed policy as
    `DummyIOInterface`.
    """

    def __init__(self, log_file_path: str):
        self.log_file_path = log_file_path

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def event_handlers(self) -> dict:
        return {
            EngineEventType.CARD_DEALT: self._on_card_dealt,
            EngineEventType.ROUND_ENDED: self._on_round_ended,
        }

    def _on_card_dealt(self, event: dict) -> None:
        self.output(f"Dealt to {event['recipient']}: {event['card']}")

    def _on_round_ended(self, event: dict) -> None:
        self.output(
            f"Round ended: {event['result']} "
            f"({event['player_score']} to {event['dealer_score']})"
        )
