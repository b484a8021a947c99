"""Defines the Action enum for the possible actions a player can take in a round of blackjack."""
from enum import Enum


class Action(Enum):
    """Enum for the possible actions a player can take in a round of blackjack."""

    HIT = "hit"
    STAND = "stand"
