"""
Event system for the higher/lower engine.

State transitions publish what happened on a process-wide bus so that
adapters, loggers and tests can observe a game without the pure transition
functions knowing who is listening.

Every game event carries a ``game_id``. Several games can share the bus, so a
subscriber that only cares about its own games passes a filter such as
`for_games` when subscribing.
"""

from dataclasses import dataclass
from typing import Any, Callable, Collection, Dict, List, Optional, Union
import threading
import logging
from enum import Enum

logger = logging.getLogger("hilo.events")

EventData = Dict[str, Any]

# (event_name, data) -> bool
EventFilter = Callable[[str, EventData], bool]


def event_name(event_type: Union[str, Enum]) -> str:
    """Events are keyed by name, so an enum member and its name are the same event."""
    return event_type.name if isinstance(event_type, Enum) else event_type


def for_games(game_ids: Collection[str]) -> EventFilter:
    """
    Build a filter accepting only events about the given games.

    The collection is consulted on every event, so a set the caller keeps
    adding to widens the filter as new games are dealt.
    """

    def accepts(event_type: str, data: EventData) -> bool:
        return data.get("game_id") in game_ids

    return accepts


@dataclass(frozen=True, eq=False)
class Subscription:
    """
    A registered listener.

    Attributes:
        callback: Receives the event data, or ``(event_name, data)`` when
            subscribed to every event type
        event_type: Event name, or None for every event
        where: Optional filter; events it rejects are not delivered
    """

    callback: Callable
    event_type: Optional[str] = None
    where: Optional[EventFilter] = None

    def matches(self, event_type: str, data: EventData) -> bool:
        if self.event_type is not None and self.event_type != event_type:
            return False
        return self.where is None or self.where(event_type, data)

    def deliver(self, event_type: str, data: EventData) -> None:
        if self.event_type is None:
            self.callback((event_type, data))
        else:
            self.callback(data)


class EventEmitter:
    """
    Synchronous publish/subscribe hub.

    Listeners run on the emitting thread, in the order they subscribed. The
    subscription list is guarded by a lock so games running on different
    threads can share one bus.
    """

    def __init__(self):
        self._subscriptions: List[Subscription] = []
        self._lock = threading.RLock()

    def _subscribe(self, subscription: Subscription) -> Callable[[], None]:
        with self._lock:
            self._subscriptions.append(subscription)

        def unsubscribe():
            with self._lock:
                if subscription in self._subscriptions:
                    self._subscriptions.remove(subscription)

        return unsubscribe

    def on(
        self,
        event_type: Union[str, Enum],
        callback: Callable[[EventData], Any],
        where: Optional[EventFilter] = None,
    ) -> Callable[[], None]:
        """
        Subscribe to one event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Called with the event data
            where: Optional filter, e.g. `for_games({game_id})`

        Returns:
            Function that removes the subscription
        """
        return self._subscribe(Subscription(callback, event_name(event_type), where))

    def on_any(
        self, callback: Callable, where: Optional[EventFilter] = None
    ) -> Callable[[], None]:
        """
        Subscribe to every event type.

        Args:
            callback: Called with an ``(event_name, data)`` tuple
            where: Optional filter, e.g. `for_games({game_id})`

        Returns:
            Function that removes the subscription
        """
        return self._subscribe(Subscription(callback, None, where))

    def emit(self, event_type: Union[str, Enum], data: EventData) -> None:
        """
        Deliver an event to every matching subscription.

        A failing handler or filter is logged and does not stop the rest.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        name = event_name(event_type)

        with self._lock:
            subscriptions = list(self._subscriptions)

        # Handlers run outside the lock so they may subscribe or emit
        for subscription in subscriptions:
            try:
                if subscription.matches(name, data):
                    subscription.deliver(name, data)
            except Exception as e:
                logger.error(f"Error in event handler for {name}: {e}", exc_info=True)

    @property
    def listener_count(self) -> int:
        """Number of live subscriptions."""
        with self._lock:
            return len(self._subscriptions)


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
    """
    Event types published by the higher/lower engine.

    Game events carry a ``game_id``; engine lifecycle events carry an
    ``engine_id`` instead.
    """

    # Engine lifecycle
    ENGINE_INIT = "engine_init"
    ENGINE_SHUTDOWN = "engine_shutdown"

    # Game lifecycle
    GAME_CREATED = "game_created"
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"
    ROUND_ENDED = "round_ended"

    # Player events
    PLAYER_DECISION_NEEDED = "player_decision_needed"
    BET_REJECTED = "bet_rejected"

    # Card events
    CARD_DEALT = "card_dealt"

    # Session events
    HIGH_SCORE = "high_score"

    # Simulation events
    SIMULATION_RESULT = "simulation_result"
