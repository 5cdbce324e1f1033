import dataclasses

import pytest
from hilo.common.card import Card, Suit, Rank


def test_card_initialization():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    assert card.suit == Suit.HEARTS
    assert card.rank == Rank.EIGHT
    assert card.value == 8


def test_card_repr():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    assert repr(card) == "Card(Suit.HEARTS, Rank.EIGHT)"


def test_card_str():
    assert str(Card(Suit.HEARTS, Rank.EIGHT)) == "8 of ♥"
    assert str(Card(Suit.SPADES, Rank.ACE)) == "A of ♠"
    assert str(Card(Suit.CLUBS, Rank.JACK)) == "J of ♣"


def test_invalid_suit():
    with pytest.raises(TypeError):
        Card("Z", Rank.EIGHT)


def test_invalid_rank():
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, 8)


def test_rank_values_run_two_to_ace():
    assert [rank.rank_value for rank in Rank] == list(range(2, 15))
    assert Rank.ACE.rank_value == 14
    assert Rank.JACK.rank_value == 11


def test_card_is_immutable():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    with pytest.raises(dataclasses.FrozenInstanceError):
        card.rank = Rank.NINE


def test_card_equality():
    card1 = Card(Suit.HEARTS, Rank.EIGHT)
    card2 = Card(Suit.HEARTS, Rank.EIGHT)
    card3 = Card(Suit.CLUBS, Rank.EIGHT)
    card4 = Card(Suit.HEARTS, Rank.NINE)

    assert card1 == card2
    assert card1 != card3  # same rank, different suit
    assert card1 != card4  # same suit, different rank


def test_card_hash():
    card1 = Card(Suit.HEARTS, Rank.EIGHT)
    card2 = Card(Suit.HEARTS, Rank.EIGHT)
    card3 = Card(Suit.CLUBS, Rank.NINE)

    card_set = {card1, card2, card3}

    assert len(card_set) == 2
    assert card1 in card_set
    assert card3 in card_set
