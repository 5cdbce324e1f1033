"""
Batch simulation of higher/lower games.

Plays many games straight through the pure state transitions with an automated
strategy and summarises how the player's chips end up. Useful for comparing
strategies and for checking that the rules behave as expected over thousands
of games.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from hilo.events import EventBus, EngineEventType
from hilo.higher_lower.commentary import select_commentary
from hilo.higher_lower.state import GameOverReason, GameState, Guess
from hilo.higher_lower.transitions import StateTransitionEngine

logger = logging.getLogger(__name__)

Strategy = Callable[[GameState], Tuple[Guess, int]]


def remaining_odds(state: GameState) -> Tuple[int, int, int]:
    """
    Count the undrawn cards above, below and equal to the showing card.

    Returns:
        (higher, lower, equal) counts
    """
    current = state.current_card.value
    values = np.fromiter((card.value for card in state.deck), dtype=int)
    return (
        int(np.sum(values > current)),
        int(np.sum(values < current)),
        int(np.sum(values == current)),
    )


def best_odds_strategy(state: GameState) -> Tuple[Guess, int]:
    """Bet one chip on whichever direction more remaining cards favour."""
    higher, lower, _ = remaining_odds(state)
    return (Guess.HIGHER if higher >= lower else Guess.LOWER), 1


def all_in_strategy(state: GameState) -> Tuple[Guess, int]:
    """Same direction as `best_odds_strategy`, staking every chip."""
    guess, _ = best_odds_strategy(state)
    return guess, state.chips


def random_strategy(rng: Optional[random.Random] = None) -> Strategy:
    """
    Build a strategy that guesses and bets at random.

    Args:
        rng: Generator to draw from, for reproducible runs
    """
    rng = rng or random.Random()

    def choose(state: GameState) -> Tuple[Guess, int]:
        return rng.choice(list(Guess)), rng.randint(1, state.chips)

    return choose


STRATEGIES: Dict[str, Callable[[random.Random], Strategy]] = {
    "best-odds": lambda rng: best_odds_strategy,
    "all-in": lambda rng: all_in_strategy,
    "random": random_strategy,
}


@dataclass
class SimulationResult:
    """
    Outcome of a batch of simulated games.

    Attributes:
        final_chips: Chips held at the end of each game
        rounds: Rounds played in each game
        reasons: Why each game ended
    """

    final_chips: np.ndarray
    rounds: np.ndarray
    reasons: List[GameOverReason] = field(default_factory=list)

    @property
    def num_games(self) -> int:
        return len(self.final_chips)

    def summary(self) -> Dict[str, Any]:
        """
        Aggregate statistics for the batch.

        Returns:
            Dictionary of summary statistics
        """
        busted = sum(1 for reason in self.reasons if reason == GameOverReason.CHIPS)
        p10, p50, p90 = np.percentile(self.final_chips, [10, 50, 90])

        return {
            "games": self.num_games,
            "mean_final_chips": float(np.mean(self.final_chips)),
            "std_final_chips": float(np.std(self.final_chips)),
            "median_final_chips": float(p50),
            "p10_final_chips": float(p10),
            "p90_final_chips": float(p90),
            "max_final_chips": int(np.max(self.final_chips)),
            "mean_rounds": float(np.mean(self.rounds)),
            "bust_rate": busted / self.num_games,
            "survival_rate": (self.num_games - busted) / self.num_games,
        }


def play_game(
    strategy: Strategy, rng: random.Random, commentary_rng: random.Random
) -> GameState:
    """
    Play a single game to completion.

    Raises:
        ValueError: If the strategy makes a decision the resolver rejects,
            since the game could never advance
    """

    def commentary(context):
        return select_commentary(context, commentary_rng)

    state = StateTransitionEngine.initial_state(
        random_source=rng.random, commentary=commentary
    )

    while not state.game_over:
        guess, bet = strategy(state)
        next_state = StateTransitionEngine.commit_guess(
            state, guess, bet, commentary=commentary
        )
        if next_state.rounds_played == state.rounds_played and not next_state.game_over:
            raise ValueError(
                f"Strategy made an invalid decision ({guess}, {bet}): {next_state.message}"
            )
        state = next_state

    return state


def simulate(
    num_games: int,
    strategy: Optional[Strategy] = None,
    seed: Optional[int] = None,
) -> SimulationResult:
    """
    Play `num_games` games with the given strategy.

    Args:
        num_games: Number of games to play, at least 1
        strategy: Decision function; defaults to `best_odds_strategy`
        seed: Seed for shuffles and commentary, for reproducible batches

    Returns:
        SimulationResult with one entry per game
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1")

    strategy = strategy or best_odds_strategy
    rng = random.Random(seed)
    commentary_rng = random.Random(seed)

    final_chips = np.zeros(num_games, dtype=int)
    rounds = np.zeros(num_games, dtype=int)
    reasons = []

    for i in range(num_games):
        state = play_game(strategy, rng, commentary_rng)
        final_chips[i] = state.chips
        rounds[i] = state.rounds_played
        reasons.append(state.game_over_reason)

    result = SimulationResult(final_chips=final_chips, rounds=rounds, reasons=reasons)
    summary = result.summary()
    logger.info(
        "Simulated %d games: mean %.2f chips, bust rate %.1f%%",
        num_games,
        summary["mean_final_chips"],
        summary["bust_rate"] * 100,
    )

    EventBus.get_instance().emit(EngineEventType.SIMULATION_RESULT, summary)

    return result
