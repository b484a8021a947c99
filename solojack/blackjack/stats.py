"""
This module contains the SimulationStats class which is responsible for
tracking the outcomes of simulated blackjack rounds.
"""

from collections import Counter

from solojack.blackjack.state import GameResult
from solojack.verification.statistics import outcome_summary


class SimulationStats:
    """
    A class that holds the statistics of the simulation.

    Only a tally per result is kept; every figure is derived from it.
    """

    def __init__(self):
        """
        Initializes the SimulationStats with an empty tally.
        """
        self.counts = Counter()

    def update(self, result: GameResult):
        """Records the result of one finished round."""
        self.counts[result] += 1

    @property
    def games_played(self) -> int:
        return sum(self.counts.values())

    @property
    def player_win_rate(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.counts[GameResult.PLAYER_WIN] / self.games_played

    def report(self):
        """
        Returns a dictionary containing the current statistics.
        """
        return {
            "games_played": self.games_played,
            "player_wins": self.counts[GameResult.PLAYER_WIN],
            "dealer_wins": self.counts[GameResult.DEALER_WIN],
            "draws": self.counts[GameResult.DRAW],
        }

    def summary(self, confidence: float = 0.95):
        """Returns rates and a confidence interval for the player win rate."""
        return outcome_summary(self.counts, confidence)
