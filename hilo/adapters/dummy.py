"""
Dummy adapter for the higher/lower engine, used for testing and simulation.

This module provides a non-interactive adapter that can be used for automated
testing, simulations, and benchmarks where no user interaction is needed.
"""

from typing import Any, Callable, Dict, List, Optional, Union
from enum import Enum

from hilo.adapters.base import Decision, PlatformAdapter
from hilo.higher_lower.state import Guess


def default_decision(state: Dict[str, Any]) -> Decision:
    """Bet a single chip in the direction with more ranks left."""
    guess = Guess.HIGHER if state["current_rank"] <= 8 else Guess.LOWER
    return guess, 1


class DummyAdapter(PlatformAdapter):
    """
    Dummy adapter for testing and simulation.

    This adapter doesn't interact with any real platform. Decisions come from a
    scripted list first, then from a strategy function, then from
    `default_decision`.
    """

    def __init__(
        self,
        decisions: Optional[List[Optional[Decision]]] = None,
        strategy_function: Optional[Callable[[Dict[str, Any]], Decision]] = None,
        verbose: bool = False,
    ):
        """
        Initialize the dummy adapter.

        Args:
            decisions: Optional list of (guess, bet) pairs to return in order.
                       A None entry ends the game loop.
            strategy_function: Optional function that takes the adapter state
                              and returns a (guess, bet) pair
            verbose: Whether to print events to stdout (useful for debugging)
        """
        self.decisions = list(decisions or [])
        self.strategy_function = strategy_function
        self.verbose = verbose

        self.decision_index = 0

        # Track events for later inspection
        self.events = []

        # Track rendered states for testing
        self.rendered_states = []

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Store the game state for later inspection.

        Args:
            state: The current game state
        """
        self.rendered_states.append(state)

        if self.verbose:
            print(
                f"[{state['chips']} chips, {state['cards_remaining']} cards] "
                f"{state['current_card']}: {state['message']}"
            )

    async def request_player_decision(
        self, state: Dict[str, Any]
    ) -> Optional[Decision]:
        """
        Return the next scripted decision or one chosen by strategy.

        Args:
            state: The current game state

        Returns:
            A (guess, bet) pair, or None to stop playing
        """
        if self.decision_index < len(self.decisions):
            decision = self.decisions[self.decision_index]
            self.decision_index += 1
        elif self.strategy_function:
            decision = self.strategy_function(state)
        else:
            decision = default_decision(state)

        if self.verbose and decision is not None:
            guess, bet = decision
            print(f"Guessing {guess} for {bet}")

        return decision

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Store the event for later inspection.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type

        self.events.append((event_type_str, data))

        if self.verbose:
            print(f"Event: {event_type_str}")
            for key, value in data.items():
                print(f"  {key}: {value}")

    def get_events_by_type(self, event_type: Union[str, Enum]) -> List[Dict[str, Any]]:
        """
        Get all events of a specific type.

        Args:
            event_type: The type of events to retrieve

        Returns:
            A list of event data dictionaries
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        return [data for typ, data in self.events if typ == event_type_str]

    def clear(self) -> None:
        """Clear all stored events and states."""
        self.events.clear()
        self.rendered_states.clear()
        self.decision_index = 0
