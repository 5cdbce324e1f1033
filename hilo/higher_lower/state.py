"""
Immutable state models for the higher/lower game.

This module provides dataclasses for representing the state of a higher/lower
game in an immutable manner. These classes are designed to be used with pure
transition functions that create new state instances rather than modifying
existing ones.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Tuple
from enum import Enum, auto
import uuid

from hilo.common.card import Card


class Guess(Enum):
    """Direction the player expects the next card to move."""

    HIGHER = "higher"
    LOWER = "lower"

    @classmethod
    def parse(cls, value: Any) -> Optional["Guess"]:
        """
        Coerce a guess from the enum itself or its string value.

        Args:
            value: A Guess, or a string such as "higher" or "LOWER"

        Returns:
            The matching Guess, or None when the value names no guess
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


class Outcome(Enum):
    """Result of a resolved round. Ties resolve as LOSS."""

    WIN = "win"
    LOSS = "loss"


class GameOverReason(Enum):
    """Why a game reached its terminal state."""

    CHIPS = auto()
    DECK = auto()


@dataclass(frozen=True)
class GameState:
    """
    Immutable representation of a higher/lower game.

    Attributes:
        chips: Player's current stake, never negative
        deck: Remaining undrawn cards, drawn from the front
        current_card: Card the next guess is evaluated against
        last_drawn_card: Card revealed by the most recent round
        last_outcome: Outcome of the most recent round
        last_delta: Chip change of the most recent round (+bet or -bet)
        last_was_tie: Whether the most recent round was a tie
        message: Latest status or commentary text
        game_over: True once chips are gone or the deck is exhausted
        game_over_reason: Why the game ended, if it has
        rounds_played: Number of resolved rounds
        id: Unique identifier for this game, shared by all its snapshots
    """

    chips: int
    deck: Tuple[Card, ...]
    current_card: Card
    last_drawn_card: Optional[Card] = None
    last_outcome: Optional[Outcome] = None
    last_delta: Optional[int] = None
    last_was_tie: bool = False
    message: str = ""
    game_over: bool = False
    game_over_reason: Optional[GameOverReason] = None
    rounds_played: int = 0
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        # Snapshots must not share a mutable deck with their caller
        if not isinstance(self.deck, tuple):
            object.__setattr__(self, "deck", tuple(self.deck))

    @property
    def cards_remaining(self) -> int:
        """Number of undrawn cards."""
        return len(self.deck)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the game state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game state
        """
        return {
            "id": self.id,
            "chips": self.chips,
            "deck": [str(card) for card in self.deck],
            "current_card": str(self.current_card),
            "last_drawn_card": (
                str(self.last_drawn_card) if self.last_drawn_card else None
            ),
            "last_outcome": self.last_outcome.value if self.last_outcome else None,
            "last_delta": self.last_delta,
            "last_was_tie": self.last_was_tie,
            "message": self.message,
            "game_over": self.game_over,
            "game_over_reason": (
                self.game_over_reason.name if self.game_over_reason else None
            ),
            "rounds_played": self.rounds_played,
        }

    def to_adapter_format(self) -> Dict[str, Any]:
        """
        Convert the game state to a format suitable for platform adapters.

        The remaining deck order is hidden; adapters only learn its size.

        Returns:
            Dictionary in adapter-friendly format
        """
        return {
            "chips": self.chips,
            "cards_remaining": self.cards_remaining,
            "current_card": str(self.current_card),
            "current_rank": self.current_card.value,
            "last_drawn_card": (
                str(self.last_drawn_card) if self.last_drawn_card else None
            ),
            "last_outcome": self.last_outcome.value if self.last_outcome else None,
            "last_delta": self.last_delta,
            "message": self.message,
            "game_over": self.game_over,
        }
