"""
Verification package for the solojack engine.

This package provides tools for checking the shuffle and analysing the
statistical outcomes of simulated rounds.
"""

from solojack.verification.statistics import (
    ConfidenceInterval,
    calculate_confidence_interval,
    outcome_summary,
    shuffle_position_test,
)

__all__ = [
    "ConfidenceInterval",
    "calculate_confidence_interval",
    "outcome_summary",
    "shuffle_position_test",
]
