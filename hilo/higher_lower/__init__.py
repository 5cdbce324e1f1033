"""
Higher/lower card game module.

This module provides the implementation for the higher/lower wagering game,
including state models, state transitions, and dealer commentary.
"""

from hilo.higher_lower.state import (
    GameState as GameState,
    GameOverReason as GameOverReason,
    Guess as Guess,
    Outcome as Outcome,
)
from hilo.higher_lower.commentary import (
    CommentaryContext as CommentaryContext,
    CommentaryOutcome as CommentaryOutcome,
    CommentaryReason as CommentaryReason,
    select_commentary as select_commentary,
)
from hilo.higher_lower.transitions import (
    StateTransitionEngine as StateTransitionEngine,
    commit_guess as commit_guess,
    initial_state as initial_state,
)

__all__ = [
    "GameState",
    "GameOverReason",
    "Guess",
    "Outcome",
    "CommentaryContext",
    "CommentaryOutcome",
    "CommentaryReason",
    "select_commentary",
    "StateTransitionEngine",
    "commit_guess",
    "initial_state",
]
