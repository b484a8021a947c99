"""
Statistical validation for the solojack engine.

This module provides tools for checking that the shuffle is unbiased and for
summarising the outcomes of simulated rounds with confidence intervals.
"""

import random
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

import numpy as np
import scipy.stats as stats

from solojack.blackjack.state import GameResult
from solojack.common.deck import build_deck, shuffle

# Significance level below which the shuffle is reported as biased
UNIFORMITY_ALPHA = 0.01


@dataclass
class ConfidenceInterval:
    """
    Represents a confidence interval with lower and upper bounds.

    Attributes:
        lower: The lower bound of the confidence interval
        upper: The upper bound of the confidence interval
        confidence: The confidence level (e.g., 0.95 for 95% confidence)
    """

    lower: float
    upper: float
    confidence: float

    def contains(self, value: float) -> bool:
        """Check if the interval contains a value."""
        return self.lower <= value <= self.upper

    def to_dict(self) -> Dict[str, float]:
        """Convert to a dictionary."""
        return {"lower": self.lower, "upper": self.upper, "confidence": self.confidence}


def calculate_confidence_interval(
    values: Sequence[float], confidence: float = 0.95
) -> ConfidenceInterval:
    """
    Calculate a t-based confidence interval for the mean of a set of values.

    Args:
        values: The values to calculate the confidence interval for
        confidence: The confidence level (e.g., 0.95 for 95% confidence)

    Returns:
        A ConfidenceInterval object
    """
    if len(values) == 0:
        return ConfidenceInterval(0.0, 0.0, confidence)

    mean = float(np.mean(values))
    if len(values) < 2:
        return ConfidenceInterval(mean, mean, confidence)

    std_err = stats.sem(values)
    margin = float(std_err * stats.t.ppf((1 + confidence) / 2, len(values) - 1))
    return ConfidenceInterval(mean - margin, mean + margin, confidence)


def shuffle_position_test(
    trials: int, rng: Optional[random.Random] = None
) -> Dict[str, Any]:
    """
    Check that every card is equally likely to end up on top of the deck.

    Shuffles a fresh deck `trials` times, counts which card lands on the draw
    end and compares the counts with a uniform distribution.

    Args:
        trials: Number of shuffles to perform
        rng: Optional random source handed to the shuffle

    Returns:
        A dictionary with the chi-square statistic, p-value and verdict
    """
    if trials <= 0:
        raise ValueError("trials must be positive")

    deck = build_deck()
    index = {card: i for i, card in enumerate(deck)}
    observed = np.zeros(len(deck))

    for _ in range(trials):
        observed[index[shuffle(deck, rng)[-1]]] += 1

    expected = np.full(len(deck), trials / len(deck))
    statistic, p_value = stats.chisquare(observed, expected)

    return {
        "trials": trials,
        "statistic": float(statistic),
        "p_value": float(p_value),
        "uniform": bool(p_value >= UNIFORMITY_ALPHA),
    }


def outcome_summary(
    counts: Mapping[GameResult, int], confidence: float = 0.95
) -> Dict[str, Any]:
    """
    Summarise a tally of round results.

    Args:
        counts: Number of finished rounds per result
        confidence: Confidence level for the player win rate interval

    Returns:
        A dictionary with counts and rates per result and a confidence
        interval for the player win rate
    """
    tally = {result.value: counts.get(result, 0) for result in GameResult}
    total = sum(tally.values())

    rates = {
        name: (count / total if total else 0.0) for name, count in tally.items()
    }
    wins = tally[GameResult.PLAYER_WIN.value]
    outcomes = np.concatenate([np.ones(wins), np.zeros(total - wins)])

    return {
        "sample_size": total,
        "counts": tally,
        "rates": rates,
        "confidence_interval": calculate_confidence_interval(
            outcomes, confidence
        ).to_dict(),
    }
