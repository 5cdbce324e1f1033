"""
Base engine class for the higher/lower game.

This module provides the abstract base class for game engines. An engine owns
the current snapshot of a game and drives it through a platform adapter.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any

from hilo.adapters import PlatformAdapter
from hilo.events import EventBus


class GameEngine(ABC):
    """
    Abstract base class for game engines.

    This class defines the common interface that engines implement,
    providing methods for starting games, handling player decisions, and
    managing the game state.
    """

    def __init__(self, adapter: PlatformAdapter, config: Dict[str, Any] = None):
        """
        Initialize the engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options for the game
        """
        self.adapter = adapter
        self.config = config or {}
        self.event_bus = EventBus.get_instance()
        self.state = None

    @abstractmethod
    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for a game.
        """
        await self.adapter.initialize()

    @abstractmethod
    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        await self.adapter.shutdown()

    @abstractmethod
    async def start_game(self) -> None:
        """
        Start a new game.
        """
        pass

    @abstractmethod
    async def submit_guess(self, guess: Any, bet: Any) -> Any:
        """
        Apply one player decision to the current game.

        Args:
            guess: The player's guess
            bet: The player's bet, unvalidated
        """
        pass

    @abstractmethod
    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        pass
