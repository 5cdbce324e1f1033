"""
Base adapter interface for the higher/lower engine.

This module defines the interface that platform-specific adapters must implement
to interact with the engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Union
from enum import Enum

from hilo.higher_lower.state import Guess

# (guess, bet) as supplied by the player. The bet is passed through unvalidated.
Decision = Tuple[Union[Guess, str], Any]


class PlatformAdapter(ABC):
    """
    Base interface for platform-specific adapters.

    This abstract class defines the methods that platform-specific adapters
    must implement to interact with the engine. These methods handle
    rendering the game state, requesting player decisions, and notifying of
    game events.

    Implementations of this interface bridge the gap between the platform-agnostic
    game engine and specific platforms like console, web, chat bots, etc.
    """

    @abstractmethod
    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current game state to the platform.

        Args:
            state: The current game state in adapter format
        """
        pass

    @abstractmethod
    async def request_player_decision(
        self, state: Dict[str, Any]
    ) -> Optional[Decision]:
        """
        Ask the player for a guess and a bet.

        Args:
            state: The current game state in adapter format

        Returns:
            The player's (guess, bet), or None if the player wants to stop
        """
        pass

    @abstractmethod
    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the platform of a game event.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        pass

    # The following methods have default implementations but can be overridden

    async def initialize(self) -> None:
        """
        Initialize the adapter.

        This method is called when the adapter is first connected to the engine.
        It can be used to set up resources, connections, etc.
        """
        pass

    async def shutdown(self) -> None:
        """
        Shutdown the adapter.

        This method is called when the engine is shutting down. It can be used
        to clean up resources, close connections, etc.
        """
        pass
