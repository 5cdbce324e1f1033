"""
Command-line interface adapter for the higher/lower engine.

This module provides an adapter for console-based play. Blocking console IO is
run in a worker thread so the engine's event loop stays responsive.
"""

from typing import Any, Dict, Optional, Union
from enum import Enum

from hilo.adapters.base import Decision, PlatformAdapter
from hilo.common.io_interface import (
    AsyncIOInterfaceWrapper,
    ConsoleIOInterface,
    IOInterface,
)
from hilo.higher_lower.state import Guess

QUIT_COMMANDS = {"q", "quit", "exit"}

GUESS_ALIASES = {
    "h": Guess.HIGHER,
    "higher": Guess.HIGHER,
    "l": Guess.LOWER,
    "lower": Guess.LOWER,
}


def parse_bet(text: str) -> Any:
    """
    Turn typed text into a number where possible.

    Validation is left to the round resolver, so "2.5" comes back as 2.5 and
    unparsable text is returned unchanged.
    """
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


class CLIAdapter(PlatformAdapter):
    """
    Command-line interface adapter for the higher/lower engine.

    This adapter uses the standard console for input/output, providing a
    simple text-based interface to the game.
    """

    def __init__(self, io_interface: Optional[IOInterface] = None):
        """
        Initialize the CLI adapter.

        Args:
            io_interface: Optional IOInterface to use for I/O. If None, a
                          console IOInterface is used.
        """
        self.io_interface = io_interface or ConsoleIOInterface()
        self._io = AsyncIOInterfaceWrapper(self.io_interface)

    async def shutdown(self) -> None:
        """Release the worker thread used for console IO."""
        self._io.close()

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current game state to the console.

        Args:
            state: The current game state
        """
        await self._io.output("\n=== Higher or Lower ===")
        await self._io.output(
            f"Chips: {state['chips']}    Cards left: {state['cards_remaining']}"
        )

        if state.get("last_drawn_card"):
            delta = state.get("last_delta") or 0
            await self._io.output(
                f"Drawn: {state['last_drawn_card']} ({state['last_outcome']}, {delta:+d})"
            )

        await self._io.output(f"Showing: {state['current_card']}")

        if state.get("message"):
            await self._io.output(state["message"])

        await self._io.output("=======================\n")

    async def request_player_decision(
        self, state: Dict[str, Any]
    ) -> Optional[Decision]:
        """
        Prompt for a guess and a bet.

        Unknown guesses are asked again; bets are passed on as typed so the
        resolver can explain what is wrong with them.

        Args:
            state: The current game state

        Returns:
            The player's (guess, bet), or None if they quit
        """
        while True:
            try:
                choice = await self._io.input("Higher or lower? [h/l, q to quit] ")
            except (EOFError, KeyboardInterrupt):
                return None

            choice = choice.strip().lower()
            if choice in QUIT_COMMANDS:
                return None
            if choice in GUESS_ALIASES:
                guess = GUESS_ALIASES[choice]
                break
            await self._io.output("Invalid choice. Please type h or l.")

        try:
            bet_text = await self._io.input(f"Bet (1-{state['chips']}): ")
        except (EOFError, KeyboardInterrupt):
            return None

        if bet_text.strip().lower() in QUIT_COMMANDS:
            return None

        return guess, parse_bet(bet_text)

    async def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question; anything but y/yes counts as no."""
        try:
            answer = await self._io.input(prompt)
        except (EOFError, KeyboardInterrupt):
            return False
        return answer.strip().lower() in ("y", "yes")

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the user of a game event via the console.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        message = self._format_event_message(event_type, data)
        if message:
            await self._io.output(message)

    def _format_event_message(
        self, event_type: str, data: Dict[str, Any]
    ) -> Optional[str]:
        """
        Format an event message based on the event type.

        Args:
            event_type: The type of event
            data: Data associated with the event

        Returns:
            Formatted message string or None if no message needed
        """
        if event_type == "ROUND_ENDED":
            verdict = "tie" if data.get("tie") else data.get("outcome", "unknown")
            return (
                f"You called {data.get('guess')} on {data.get('previous_card')} "
                f"and drew {data.get('drawn_card')}: {verdict}"
            )

        elif event_type == "GAME_ENDED":
            return (
                f"Game over after {data.get('rounds_played', 0)} rounds "
                f"with {data.get('chips', 0)} chips."
            )

        elif event_type == "HIGH_SCORE":
            return f"New session best: {data.get('chips', 0)} chips!"

        return None
