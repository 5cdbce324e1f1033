"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by all test packages.
"""

import pytest

from hilo.common.card import Card, Rank, Suit
from hilo.common.deck import new_deck
from hilo.events import EventBus
from hilo.higher_lower.state import GameState


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


@pytest.fixture
def fixed_commentary():
    """Commentary stand-in returning the category, e.g. "GAME_OVER:DECK"."""

    def _commentary(context):
        reason = context.reason.name if context.reason else ""
        return f"{context.outcome.name}:{reason}"

    return _commentary


@pytest.fixture
def make_state():
    """
    Build a game state with a known card showing and a known deck order.

    The deck defaults to the given `next_cards` followed by the rest of a new
    deck, mirroring a game in progress.
    """

    def _make_state(current, next_cards=(), chips=3, fill=True, **kwargs):
        current_card = Card(Suit.CLUBS, Rank(current)) if isinstance(current, int) else current
        upcoming = [
            Card(Suit.DIAMONDS, Rank(card)) if isinstance(card, int) else card
            for card in next_cards
        ]
        deck = list(upcoming)
        if fill:
            deck += [
                card
                for card in new_deck()
                if card != current_card and card not in upcoming
            ]
        return GameState(
            chips=chips, deck=tuple(deck), current_card=current_card, **kwargs
        )

    return _make_state
