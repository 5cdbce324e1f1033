"""
Immutable deck operations.

A deck is a plain tuple of cards consumed from the front. Every function here
returns a new tuple and leaves its input untouched, so earlier snapshots of a
game can be kept around safely.

>>> deck = new_deck()
>>> len(deck)
52
>>> card, rest = draw(deck)
>>> card
Card(Suit.CLUBS, Rank.TWO)
>>> len(rest)
51
"""

import random
from typing import Callable, Optional, Sequence, Tuple

from hilo.common.card import Card, Rank, Suit

RandomSource = Callable[[], float]
"""Nullary callable returning a float in [0, 1)."""

Deck = Tuple[Card, ...]


class EmptyDeckError(IndexError):
    """Raised when drawing from a deck with no cards left."""


# Precompute the default deck
_default_deck: Deck = tuple(Card(suit, rank) for suit in Suit for rank in Rank)


def new_deck() -> Deck:
    """
    Build the canonical 52-card deck.

    Suits follow the declaration order of `Suit` and ranks run 2 through 14
    within each suit. No randomness is involved.
    """
    return _default_deck


def shuffle(deck: Sequence[Card], random_source: Optional[RandomSource] = None) -> Deck:
    """
    Return a shuffled copy of the deck using a Fisher-Yates backward pass.

    :param deck: The cards to shuffle. Not modified.
    :param random_source: Callable returning floats in [0, 1). Defaults to
        `random.random`. Passing a fixed source gives a reproducible order.
    :return: A new tuple holding the same cards in permuted order.

    >>> shuffle(new_deck(), lambda: 0.0)[0]
    Card(Suit.CLUBS, Rank.THREE)
    """
    if random_source is None:
        random_source = random.random

    shuffled = list(deck)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(random_source() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

    return tuple(shuffled)


def draw(deck: Sequence[Card]) -> Tuple[Card, Deck]:
    """
    Take the top card off the deck.

    :param deck: The cards to draw from. Not modified.
    :return: The drawn card and the remaining cards.
    :raises EmptyDeckError: If the deck has no cards. Callers are expected to
        check the length first.
    """
    if len(deck) == 0:
        raise EmptyDeckError("Cannot draw from empty deck")

    return deck[0], tuple(deck[1:])


def seeded_random_source(seed: Optional[int] = None) -> RandomSource:
    """Random source backed by a private generator, reproducible for a given seed."""
    return random.Random(seed).random
