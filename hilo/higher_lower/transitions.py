"""
State transition functions for the higher/lower game.

This module provides pure functions for transitioning between game states,
without modifying the original state objects. Invalid player input never
raises: it comes back as an unchanged state carrying an explanatory message.
"""

import logging
import decimal
import numbers
from typing import Any, Optional
from dataclasses import replace

from hilo.common.deck import RandomSource, draw, new_deck, shuffle
from hilo.events import EventBus, EngineEventType
from hilo.higher_lower.commentary import (
    Commentator,
    CommentaryContext,
    CommentaryReason,
    select_commentary,
)
from hilo.higher_lower.constants import (
    EMPTY_DECK_MESSAGE,
    GAME_OVER_MESSAGE,
    INVALID_GUESS_MESSAGE,
    MIN_BET,
    STARTING_CHIPS,
    WHOLE_NUMBER_MESSAGE,
    bet_range_message,
)
from hilo.higher_lower.state import GameOverReason, GameState, Guess, Outcome

logger = logging.getLogger(__name__)


def coerce_bet(bet: Any) -> Optional[int]:
    """
    Interpret a bet of unknown origin as a whole number.

    Integral values and integral-valued numbers such as ``2.0``,
    ``Decimal("2")`` or ``Fraction(4, 2)`` are accepted. Booleans, strings,
    fractional values and non-finite values are not.

    Args:
        bet: Raw bet as supplied by the caller

    Returns:
        The bet as an int, or None if it is not a whole number
    """
    if isinstance(bet, bool):
        return None
    if isinstance(bet, numbers.Integral):
        return int(bet)
    if isinstance(bet, (numbers.Real, decimal.Decimal)):
        try:
            whole = int(bet)
        except (ValueError, OverflowError):
            # NaN and infinities
            return None
        if whole == bet:
            return whole
    return None


class StateTransitionEngine:
    """
    Pure functions for state transitions in higher/lower.

    This class contains static methods that implement game state transitions.
    Each method takes a state and returns a new state, without modifying the
    original.
    """

    @staticmethod
    def initial_state(
        random_source: Optional[RandomSource] = None,
        commentary: Commentator = select_commentary,
        game_id: Optional[str] = None,
    ) -> GameState:
        """
        Deal a fresh game.

        Args:
            random_source: Source for the shuffle; defaults to `random.random`
            commentary: Collaborator producing the welcome message
            game_id: Identifier for the new game; a fresh uuid when omitted

        Returns:
            A game with a shuffled 51-card deck, one card showing and
            the starting chips
        """
        deck = shuffle(new_deck(), random_source)
        current_card, remaining = draw(deck)

        new_state = GameState(
            chips=STARTING_CHIPS,
            deck=remaining,
            current_card=current_card,
            message=commentary(CommentaryContext.start()),
        )
        if game_id is not None:
            new_state = replace(new_state, id=game_id)

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.GAME_CREATED,
            {
                "game_id": new_state.id,
                "chips": new_state.chips,
                "current_card": str(current_card),
                "cards_remaining": new_state.cards_remaining,
            },
        )

        return new_state

    @staticmethod
    def reject(state: GameState, message: str) -> GameState:
        """
        Return the state unchanged apart from its message.

        Args:
            state: Current game state
            message: Explanation shown to the player

        Returns:
            New game state carrying only the new message
        """
        logger.debug("Decision rejected for game %s: %s", state.id, message)

        EventBus.get_instance().emit(
            EngineEventType.BET_REJECTED,
            {"game_id": state.id, "chips": state.chips, "message": message},
        )

        return replace(state, message=message)

    @staticmethod
    def resolve_outcome(current_rank: int, next_rank: int, guess: Guess) -> Outcome:
        """
        Decide a round. Equal ranks always lose.

        Args:
            current_rank: Rank of the card showing
            next_rank: Rank of the card drawn
            guess: Player's guess

        Returns:
            WIN when the drawn card moves in the guessed direction, else LOSS
        """
        if next_rank > current_rank and guess == Guess.HIGHER:
            return Outcome.WIN
        if next_rank < current_rank and guess == Guess.LOWER:
            return Outcome.WIN
        return Outcome.LOSS

    @staticmethod
    def commit_guess(
        state: GameState,
        guess: Any,
        bet: Any,
        commentary: Commentator = select_commentary,
    ) -> GameState:
        """
        Play one round: validate, draw, settle chips and check for game over.

        Args:
            state: Current game state
            guess: Guess.HIGHER / Guess.LOWER or their string values
            bet: Number of chips wagered, of unvalidated origin
            commentary: Collaborator producing the status message

        Returns:
            New game state. Rejected decisions change only the message.
        """
        if state.game_over:
            return replace(state, message=GAME_OVER_MESSAGE)

        parsed_guess = Guess.parse(guess)
        if parsed_guess is None:
            return StateTransitionEngine.reject(state, INVALID_GUESS_MESSAGE)

        amount = coerce_bet(bet)
        if amount is None:
            return StateTransitionEngine.reject(state, WHOLE_NUMBER_MESSAGE)

        if amount < MIN_BET or amount > state.chips:
            return StateTransitionEngine.reject(state, bet_range_message(state.chips))

        event_bus = EventBus.get_instance()

        if not state.deck:
            logger.info("Game %s ended: no cards left to draw", state.id)
            new_state = replace(
                state,
                game_over=True,
                game_over_reason=GameOverReason.DECK,
                message=EMPTY_DECK_MESSAGE,
            )
            event_bus.emit(
                EngineEventType.GAME_ENDED,
                {
                    "game_id": state.id,
                    "reason": GameOverReason.DECK.name,
                    "chips": state.chips,
                    "rounds_played": state.rounds_played,
                },
            )
            return new_state

        next_card, remaining = draw(state.deck)

        outcome = StateTransitionEngine.resolve_outcome(
            state.current_card.value, next_card.value, parsed_guess
        )
        is_tie = next_card.value == state.current_card.value

        delta = amount if outcome == Outcome.WIN else -amount
        new_chips = state.chips + delta

        chips_depleted = new_chips <= 0
        deck_exhausted = len(remaining) == 0
        game_over = chips_depleted or deck_exhausted
        final_chips = max(new_chips, 0)

        if chips_depleted:
            reason = GameOverReason.CHIPS
            context = CommentaryContext.game_over(CommentaryReason.CHIPS)
        elif deck_exhausted:
            reason = GameOverReason.DECK
            context = CommentaryContext.game_over(
                CommentaryReason.DECK, chips=final_chips
            )
        elif outcome == Outcome.WIN:
            reason = None
            context = CommentaryContext.win(amount, final_chips)
        else:
            reason = None
            context = CommentaryContext.loss(amount, final_chips, tie=is_tie)

        new_state = replace(
            state,
            chips=final_chips,
            deck=remaining,
            current_card=next_card,
            last_drawn_card=next_card,
            last_outcome=outcome,
            last_delta=delta,
            last_was_tie=is_tie,
            message=commentary(context),
            game_over=game_over,
            game_over_reason=reason,
            rounds_played=state.rounds_played + 1,
        )

        event_bus.emit(
            EngineEventType.CARD_DEALT,
            {
                "game_id": state.id,
                "card": str(next_card),
                "cards_remaining": new_state.cards_remaining,
            },
        )
        event_bus.emit(
            EngineEventType.ROUND_ENDED,
            {
                "game_id": state.id,
                "round_number": new_state.rounds_played,
                "guess": parsed_guess.value,
                "bet": amount,
                "previous_card": str(state.current_card),
                "drawn_card": str(next_card),
                "outcome": outcome.value,
                "tie": is_tie,
                "delta": delta,
                "chips": final_chips,
            },
        )

        if game_over:
            logger.info(
                "Game %s ended after %d rounds (%s) with %d chips",
                state.id,
                new_state.rounds_played,
                reason.name,
                final_chips,
            )
            event_bus.emit(
                EngineEventType.GAME_ENDED,
                {
                    "game_id": state.id,
                    "reason": reason.name,
                    "chips": final_chips,
                    "rounds_played": new_state.rounds_played,
                },
            )

        return new_state


initial_state = StateTransitionEngine.initial_state
commit_guess = StateTransitionEngine.commit_guess
