"""
Event system for the solojack engine.

This package provides the event bus the transition engine reports to.
"""

from solojack.events.emitter import EventEmitter, EventBus, EngineEventType

__all__ = ["EventEmitter", "EventBus", "EngineEventType"]
