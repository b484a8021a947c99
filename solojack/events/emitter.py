"""
Event system for the solojack engine.

The transition engine announces every change it makes to a round on the
global event bus. Front ends subscribe for as long as they drive a
transition, and use the events to build transcripts and round history.
"""

from collections import defaultdict
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Union
import threading
import logging
from enum import Enum

logger = logging.getLogger("solojack.events")


def _event_name(event_type: Union[str, Enum]) -> str:
    return event_type.name if isinstance(event_type, Enum) else event_type


class EventEmitter:
    """
    Minimal publish/subscribe hub.

    Handlers are called in subscription order with the event's data dict.
    A handler that raises is logged and does not stop the others.
    """

    def __init__(self):
        self._listeners = defaultdict(list)
        self._listener_lock = threading.RLock()

    def on(self, event_type: Union[str, Enum], callback: Callable) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function to call when event occurs, signature: fn(event_data)

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        event_type = _event_name(event_type)

        with self._listener_lock:
            self._listeners[event_type].append(callback)

        def unsubscribe():
            with self._listener_lock:
                handlers = self._listeners[event_type]
                if callback in handlers:
                    handlers.remove(callback)

        return unsubscribe

    @contextmanager
    def listening(
        self, handlers: Dict[Union[str, Enum], Callable]
    ) -> Iterator["EventEmitter"]:
        """Subscribe the given handlers for the duration of a ``with`` block."""
        unsubscribers = [self.on(event_type, cb) for event_type, cb in handlers.items()]
        try:
            yield self
        finally:
            for unsubscribe in unsubscribers:
                unsubscribe()

    def emit(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Emit an event to all registered listeners.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        event_type = _event_name(event_type)

        with self._listener_lock:
            handlers_to_call = list(self._listeners.get(event_type, []))

        # Call handlers outside of the lock to avoid deadlocks
        for callback in handlers_to_call:
            try:
                callback(data)
            except Exception as e:
                logger.error(
                    f"Error in event handler for {event_type}: {e}", exc_info=True
                )


class EventBus:
    """
    Global event bus for the application.

    This singleton class provides a centralized event bus that can be accessed
    from anywhere in the application.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        """
        Get the singleton instance of the EventBus.

        Returns:
            EventEmitter instance
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = EventEmitter()
        return cls._instance


class EngineEventType(Enum):
    """Event types emitted by the transition engine."""

    ROUND_STARTED = "round_started"
    CARD_DEALT = "card_dealt"
    PLAYER_ACTION = "player_action"
    DEALER_ACTION = "dealer_action"
    ROUND_ENDED = "round_ended"
