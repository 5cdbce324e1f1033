"""
Higher/lower engine implementation.

This module provides the HigherLowerEngine class, which drives games built from
the pure state transitions through a platform adapter, one decision at a time.
"""

from typing import Any, Dict, List, Optional, Tuple
from dataclasses import replace
import logging
import random
import time
import uuid

from hilo.adapters import PlatformAdapter
from hilo.common.deck import seeded_random_source
from hilo.engine.base import GameEngine
from hilo.events import EngineEventType, for_games
from hilo.higher_lower.commentary import (
    CommentaryContext,
    CommentaryReason,
    select_commentary,
)
from hilo.higher_lower.state import GameOverReason, GameState
from hilo.higher_lower.transitions import StateTransitionEngine

logger = logging.getLogger(__name__)


class HigherLowerEngine(GameEngine):
    """
    Engine implementation for higher/lower.

    The engine is the single writer for its game: every decision is applied to
    the latest snapshot and the result replaces it. Earlier snapshots are kept
    in `history` for display or undo by the caller.

    Only events about this engine's own games, or its own lifecycle, reach
    the adapter, even when other engines or simulations share the event bus.

    Recognised config keys:
        seed: Integer seed for the shuffle, for reproducible games
        commentary_seed: Integer seed for commentary picks
    """

    def __init__(self, adapter: PlatformAdapter, config: Dict[str, Any] = None):
        """
        Initialize the higher/lower engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options for the game
        """
        self.engine_id = str(uuid.uuid4())
        self._game_ids = set()
        self._is_own_game_event = for_games(self._game_ids)

        super().__init__(adapter, config)

        seed = self.config.get("seed")
        self._random_source = seeded_random_source(seed) if seed is not None else None

        commentary_seed = self.config.get("commentary_seed")
        self._commentary_rng = (
            random.Random(commentary_seed) if commentary_seed is not None else None
        )

        self.history: List[GameState] = []
        self.high_score: Optional[int] = None
        self.games_played = 0

        self._pending_events: List[Tuple[str, Dict[str, Any]]] = []
        self._unsubscribe = None

    @property
    def state(self) -> Optional[GameState]:
        """The latest snapshot of the current game."""
        return self._state

    @state.setter
    def state(self, value: Optional[GameState]) -> None:
        self._state = value
        if value is not None:
            self._game_ids.add(value.id)

    def _commentary(self, context: CommentaryContext) -> str:
        return select_commentary(context, self._commentary_rng)

    def _is_own_event(self, event_type: str, data: Dict[str, Any]) -> bool:
        if data.get("engine_id") == self.engine_id:
            return True
        return self._is_own_game_event(event_type, data)

    def _collect_event(self, event: Tuple[str, Dict[str, Any]]) -> None:
        self._pending_events.append(event)

    async def _flush_events(self) -> None:
        """Forward events raised by the last transition to the adapter."""
        pending, self._pending_events = self._pending_events, []
        for event_type, data in pending:
            await self.adapter.notify_game_event(event_type, data)

    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for a game.
        """
        await super().initialize()

        if self._unsubscribe is None:
            self._unsubscribe = self.event_bus.on_any(
                self._collect_event, where=self._is_own_event
            )

        self.event_bus.emit(
            EngineEventType.ENGINE_INIT,
            {
                "engine_id": self.engine_id,
                "engine_type": "higher_lower",
                "config": self.config,
                "timestamp": time.time(),
            },
        )

    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        self.event_bus.emit(
            EngineEventType.ENGINE_SHUTDOWN,
            {"engine_id": self.engine_id, "timestamp": time.time()},
        )

        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._pending_events.clear()

        await super().shutdown()

    async def start_game(self) -> GameState:
        """
        Deal a new game, replacing any game in progress.

        Returns:
            The opening snapshot
        """
        # Register the id first so the GAME_CREATED event is recognised
        game_id = str(uuid.uuid4())
        self._game_ids.add(game_id)

        self.state = StateTransitionEngine.initial_state(
            random_source=self._random_source,
            commentary=self._commentary,
            game_id=game_id,
        )
        self.history = [self.state]

        self.event_bus.emit(
            EngineEventType.GAME_STARTED,
            {"game_id": self.state.id, "timestamp": time.time()},
        )

        await self._flush_events()
        await self.render_state()
        return self.state

    async def submit_guess(self, guess: Any, bet: Any) -> GameState:
        """
        Apply a decision to the current game.

        Args:
            guess: "higher"/"lower" or a Guess
            bet: Chips wagered, validated by the resolver

        Returns:
            The resulting snapshot
        """
        if self.state is None:
            raise RuntimeError("No game in progress; call start_game() first")

        previous = self.state
        new_state = StateTransitionEngine.commit_guess(
            previous, guess, bet, commentary=self._commentary
        )

        if new_state.game_over and not previous.game_over:
            self.games_played += 1
            new_state = self._record_final_score(new_state)

        self.state = new_state
        if new_state is not previous:
            self.history.append(new_state)

        await self._flush_events()
        await self.render_state()
        return new_state

    def _record_final_score(self, state: GameState) -> GameState:
        """
        Track the best finish of this session.

        Only games that survive to the end of the deck can set a record. A new
        record swaps the closing message for high-score commentary.
        """
        if state.game_over_reason != GameOverReason.DECK:
            return state
        if self.high_score is not None and state.chips <= self.high_score:
            return state

        self.high_score = state.chips
        logger.info("New session high score: %d chips", state.chips)

        self.event_bus.emit(
            EngineEventType.HIGH_SCORE,
            {"game_id": state.id, "chips": state.chips},
        )

        message = self._commentary(
            CommentaryContext.game_over(CommentaryReason.HIGH_SCORE, state.chips)
        )
        return replace(state, message=message)

    async def play_game(self) -> Dict[str, Any]:
        """
        Play a game to the end, asking the adapter for every decision.

        The adapter may stop early by returning None.

        Returns:
            Dictionary describing the final snapshot
        """
        if self.state is None or self.state.game_over:
            await self.start_game()

        while not self.state.game_over:
            self.event_bus.emit(
                EngineEventType.PLAYER_DECISION_NEEDED,
                {"game_id": self.state.id, "chips": self.state.chips},
            )
            await self._flush_events()

            decision = await self.adapter.request_player_decision(
                self.state.to_adapter_format()
            )
            if decision is None:
                logger.debug("Player left game %s", self.state.id)
                break

            guess, bet = decision
            await self.submit_guess(guess, bet)

        result = self.state.to_dict()
        result["high_score"] = self.high_score
        return result

    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        if self.state is None:
            return
        await self.adapter.render_game_state(self.state.to_adapter_format())
