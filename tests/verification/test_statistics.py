import random
from collections import Counter

import pytest

from solojack.blackjack.state import GameResult
from solojack.verification.statistics import (
    ConfidenceInterval,
    calculate_confidence_interval,
    outcome_summary,
    shuffle_position_test,
)


class NoShuffleRandom(random.Random):
    """A random source whose shuffle leaves the deck as it is."""

    def shuffle(self, x):
        pass


def test_shuffle_is_uniform():
    # Each seed fails a correct shuffle 1% of the time; three failing is a real bias
    reports = [
        shuffle_position_test(5200, random.Random(seed)) for seed in (1, 2, 3)
    ]
    assert any(report["uniform"] for report in reports)
    assert all(report["trials"] == 5200 for report in reports)


def test_biased_shuffle_is_detected():
    report = shuffle_position_test(520, NoShuffleRandom())
    assert not report["uniform"]
    assert report["p_value"] < 0.01


def test_shuffle_position_test_needs_trials():
    with pytest.raises(ValueError):
        shuffle_position_test(0)


def test_outcome_summary():
    counts = Counter({GameResult.PLAYER_WIN: 4, GameResult.DEALER_WIN: 5, GameResult.DRAW: 1})
    summary = outcome_summary(counts)

    assert summary["sample_size"] == 10
    assert summary["counts"] == {
        "player_win": 4,
        "dealer_win": 5,
        "draw": 1,
        "no_result": 0,
    }
    assert summary["rates"]["player_win"] == pytest.approx(0.4)
    interval = summary["confidence_interval"]
    assert interval["lower"] < 0.4 < interval["upper"]
    assert interval["confidence"] == 0.95


def test_outcome_summary_empty():
    summary = outcome_summary({})
    assert summary["sample_size"] == 0
    assert summary["rates"]["draw"] == 0.0
    assert summary["confidence_interval"] == {"lower": 0.0, "upper": 0.0, "confidence": 0.95}


def test_confidence_interval_single_value():
    interval = calculate_confidence_interval([1.0])
    assert interval.lower == interval.upper == 1.0


def test_confidence_interval_contains():
    interval = ConfidenceInterval(0.2, 0.6, 0.95)
    assert interval.contains(0.4)
    assert not interval.contains(0.7)
