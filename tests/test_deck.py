import random
from collections import Counter

import pytest

from solojack.common.card import Card, Rank, Suit
from solojack.common.deck import DeckExhaustedError, build_deck, shuffle, take_card


def test_build_deck_is_complete():
    deck = build_deck()
    assert isinstance(deck, tuple)
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert set(deck) == {Card(suit, rank) for suit in Suit for rank in Rank}


def test_build_deck_order_is_deterministic():
    assert build_deck() == build_deck()
    assert build_deck()[0] == Card(Suit.HEARTS, Rank.ACE)
    assert build_deck()[-1] == Card(Suit.SPADES, Rank.KING)


def test_shuffle_preserves_cards():
    deck = build_deck()
    shuffled = shuffle(deck)
    assert Counter(shuffled) == Counter(deck)
    assert shuffled != deck


def test_shuffle_does_not_modify_input():
    deck = build_deck()
    before = tuple(deck)
    shuffle(deck)
    assert deck == before


def test_shuffle_preserves_partial_deck():
    deck = build_deck()[:10]
    assert Counter(shuffle(deck)) == Counter(deck)


def test_shuffle_with_seeded_rng_is_reproducible():
    deck = build_deck()
    assert shuffle(deck, random.Random(7)) == shuffle(deck, random.Random(7))


def test_take_card_from_top():
    deck = build_deck()
    card, remaining = take_card(deck)
    assert card == deck[-1]
    assert remaining == deck[:-1]
    assert len(deck) == 52


def test_take_card_until_empty():
    deck = build_deck()
    drawn = []
    while deck:
        card, deck = take_card(deck)
        drawn.append(card)
    assert len(drawn) == 52
    assert len(set(drawn)) == 52


def test_take_card_from_empty_deck():
    with pytest.raises(DeckExhaustedError):
        take_card(())


def test_deck_exhausted_is_index_error():
    with pytest.raises(IndexError):
        take_card(())
