from collections import Counter

import pytest

from hilo.common.card import Card, Rank, Suit
from hilo.common.deck import (
    EmptyDeckError,
    draw,
    new_deck,
    seeded_random_source,
    shuffle,
)


def test_new_deck_has_52_unique_cards():
    deck = new_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52


def test_new_deck_has_all_suits_and_ranks():
    deck = new_deck()
    assert {card.suit for card in deck} == set(Suit)
    assert {card.rank for card in deck} == set(Rank)
    assert len({card.suit for card in deck}) == 4
    assert len({card.rank for card in deck}) == 13


def test_new_deck_order_is_fixed():
    deck = new_deck()
    assert deck[0] == Card(Suit.CLUBS, Rank.TWO)
    assert deck[12] == Card(Suit.CLUBS, Rank.ACE)
    assert deck[13] == Card(Suit.DIAMONDS, Rank.TWO)
    assert deck[-1] == Card(Suit.SPADES, Rank.ACE)
    assert new_deck() == deck


def test_shuffle_is_a_permutation():
    deck = new_deck()
    shuffled = shuffle(deck)
    assert len(shuffled) == 52
    assert Counter(shuffled) == Counter(deck)


def test_shuffle_does_not_mutate_input():
    deck = list(new_deck())
    original = list(deck)
    shuffle(deck)
    assert deck == original


def test_shuffle_is_reproducible_with_fixed_source():
    deck = new_deck()
    shuffled1 = shuffle(deck, lambda: 0.5)
    shuffled2 = shuffle(deck, lambda: 0.5)
    assert shuffled1 == shuffled2


def test_shuffle_is_reproducible_with_seeded_source():
    deck = new_deck()
    assert shuffle(deck, seeded_random_source(42)) == shuffle(
        deck, seeded_random_source(42)
    )
    assert shuffle(deck, seeded_random_source(1)) != shuffle(
        deck, seeded_random_source(2)
    )


def test_shuffle_follows_fisher_yates_backward_pass():
    # With a source of 0.0 every step swaps position i with position 0
    deck = tuple(Card(Suit.HEARTS, rank) for rank in [Rank.TWO, Rank.THREE, Rank.FOUR])
    assert shuffle(deck, lambda: 0.0) == (
        Card(Suit.HEARTS, Rank.THREE),
        Card(Suit.HEARTS, Rank.FOUR),
        Card(Suit.HEARTS, Rank.TWO),
    )
    # A source just below 1.0 always picks j == i, leaving the order alone
    assert shuffle(deck, lambda: 0.999) == deck


def test_shuffle_draws_once_per_position():
    calls = []

    def source():
        calls.append(None)
        return 0.3

    shuffle(new_deck(), source)
    assert len(calls) == 51


def test_shuffle_of_short_decks():
    assert shuffle((), lambda: 0.5) == ()
    single = (Card(Suit.SPADES, Rank.ACE),)
    assert shuffle(single, lambda: 0.5) == single


def test_draw_takes_the_first_card():
    deck = new_deck()
    card, remaining = draw(deck)
    assert card == deck[0]
    assert len(remaining) == 51
    assert card not in remaining
    assert remaining == deck[1:]


def test_draw_does_not_mutate_input():
    deck = list(new_deck())
    original = list(deck)
    draw(deck)
    assert deck == original


def test_draw_last_card_leaves_empty_deck():
    card, remaining = draw((Card(Suit.HEARTS, Rank.TEN),))
    assert card == Card(Suit.HEARTS, Rank.TEN)
    assert remaining == ()


def test_draw_from_empty_deck_raises():
    with pytest.raises(EmptyDeckError, match="Cannot draw from empty deck"):
        draw(())


def test_empty_deck_error_is_an_index_error():
    with pytest.raises(IndexError):
        draw([])


def test_deal_until_empty():
    deck = shuffle(new_deck(), seeded_random_source(7))
    seen = []
    while deck:
        card, deck = draw(deck)
        seen.append(card)
    assert Counter(seen) == Counter(new_deck())
