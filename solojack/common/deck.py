"""
This module contains the deck primitives: building a full deck, shuffling it,
and taking a card off the top.

A deck is a tuple of cards used as a stack. The top of the deck, where cards
are drawn from, is the end of the tuple. Every function returns a new tuple
and leaves its input untouched.

>>> deck = build_deck()
>>> len(deck)
52
>>> card, remaining = take_card(deck)
>>> card
Card(Suit.SPADES, Rank.KING)
>>> len(remaining)
51
"""

import random
from typing import NamedTuple, Optional, Tuple

from solojack.common.card import Card, Rank, Suit

Deck = Tuple[Card, ...]


class DeckExhaustedError(IndexError):
    """Raised when a card is taken from an empty deck."""


class DrawResult(NamedTuple):
    """A drawn card together with the deck it was drawn from, minus that card."""

    card: Card
    remaining: Deck


# Precompute the default deck
_DEFAULT_DECK: Deck = tuple(Card(suit, rank) for suit in Suit for rank in Rank)


def build_deck() -> Deck:
    """
    Construct a deck with one card for every combination of suit and rank.

    :return: A tuple of 52 cards, all ranks of each suit in enum order.
    """
    return _DEFAULT_DECK


def shuffle(deck: Deck, rng: Optional[random.Random] = None) -> Deck:
    """
    Return a uniformly shuffled copy of the deck.

    :param deck: The deck to shuffle.
    :param rng: Optional random source, e.g. a seeded ``random.Random``.
    :return: A new tuple holding the same cards in random order.
    """
    if rng is None:
        rng = random.Random()
    cards = list(deck)
    rng.shuffle(cards)
    return tuple(cards)


def take_card(deck: Deck) -> DrawResult:
    """
    Take the top card off the deck.

    :param deck: The deck to draw from.
    :return: The drawn card and the remaining deck.
    :raises DeckExhaustedError: If the deck is empty.
    """
    if not deck:
        raise DeckExhaustedError("Cannot take a card from an empty deck.")
    return DrawResult(deck[-1], deck[:-1])
