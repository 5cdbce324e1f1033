"""
Event system for the higher/lower engine.

This package provides the event bus that state transitions and engines
publish to.
"""

from hilo.events.emitter import (
    EventEmitter,
    EventBus,
    EngineEventType,
    Subscription,
    event_name,
    for_games,
)

__all__ = [
    "EventEmitter",
    "EventBus",
    "EngineEventType",
    "Subscription",
    "event_name",
    "for_games",
]
