"""
This module is used to execute rounds of blackjack from the command line.

It can be used to play in different modes:
- Interactive console mode, where the user hits or stands via the console.
- Simulation mode, where a fixed policy plays automatically.
- Logging mode, where round transcripts are written to a specified file.
- Visualization mode, where a real-time graph of the player's win rate is displayed.

For example, `--console` runs an interactive round, `--simulate --num_games 1000`
runs a simulation and `--log_file` followed by a filename logs the transcript.
`--verify_shuffle` followed by a number of trials checks the shuffle for bias.
"""

import argparse
import logging
import os
import random
import time
from typing import Optional, Tuple

import matplotlib.pyplot as plt

from solojack.blackjack.rules import determine_game_result
from solojack.blackjack.state import GameResult, GameState, Turn
from solojack.blackjack.stats import SimulationStats
from solojack.blackjack.transitions import StateTransitionEngine
from solojack.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    IOInterface,
    LoggingIOInterface,
)
from solojack.events import EventBus
from solojack.verification.statistics import shuffle_position_test

logger = logging.getLogger(__name__)


class BlackjackGraph:
    def __init__(self, max_games):
        self.max_games = max_games
        self.games = []
        self.win_rates = []

        plt.ion()  # Turn on interactive mode
        self.fig, self.ax = plt.subplots()
        (self.line,) = self.ax.plot([], [], "b-")

        self.ax.set_xlim(0, max_games)
        self.ax.set_ylim(0, 1)
        self.ax.set_title("Player Win Rate")
        self.ax.set_xlabel("Games")
        self.ax.set_ylabel("Win rate")

    def update(self, game_number, win_rate):
        self.games.append(game_number)
        self.win_rates.append(win_rate)
        self.line.set_data(self.games, self.win_rates)
        self.fig.canvas.draw()
        self.fig.canvas.flush_events()


def configure_logging() -> None:
    """Set the root log level from SOLOJACK_LOG_LEVEL / SOLOJACK_DISABLE_LOGGING."""
    if os.environ.get("SOLOJACK_DISABLE_LOGGING", "").lower() in ("1", "true", "yes"):
        level = logging.ERROR
    else:
        level = getattr(
            logging, os.environ.get("SOLOJACK_LOG_LEVEL", "WARNING").upper(), logging.WARNING
        )
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def describe(state: GameState, reveal_dealer: bool) -> str:
    player = ", ".join(str(card) for card in state.player_hand)
    if reveal_dealer:
        dealer = ", ".join(str(card) for card in state.dealer_hand)
        dealer += f" ({state.dealer_score})"
    else:
        dealer = "??, " + ", ".join(str(card) for card in state.dealer_hand[1:])
    return f"Player: {player} ({state.player_score}) | Dealer: {dealer}"


def play_round(
    io_interface: IOInterface, rng: Optional[random.Random] = None
) -> Tuple[GameState, GameResult]:
    """
    Play one round to the end, asking the IO interface for every decision.

    The interface's engine event handlers are subscribed for the duration of
    the round.

    Returns:
        The final state and its result
    """
    with EventBus.get_instance().listening(io_interface.event_handlers()):
        state = StateTransitionEngine.setup_game(rng)
        io_interface.output(describe(state, reveal_dealer=False))

        while state.turn == Turn.PLAYER_TURN:
            valid_actions = StateTransitionEngine.legal_actions(state)
            action = io_interface.get_player_action(state, valid_actions)
            state = StateTransitionEngine.apply_action(state, action)
            io_interface.output(f"Player chose {action.value}.")
            io_interface.output(
                describe(state, reveal_dealer=state.turn == Turn.DEALER_TURN)
            )

    result = determine_game_result(state)
    io_interface.output(f"Result: {result.value}")
    return state, result


def create_io_interface(args) -> IOInterface:
    if args.console:
        return ConsoleIOInterface()
    if args.log_file:
        return LoggingIOInterface(args.log_file)
    return DummyIOInterface()


def positive_int(value: str) -> int:
    """argparse type for options that need a count of at least one."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run rounds of blackjack.")
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Run the game in simulation mode. If --log_file is provided, output will be logged.",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Run the game in interactive console mode. Overrides other modes if present.",
    )
    parser.add_argument(
        "--num_games", type=positive_int, default=1, help="Number of games to play"
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Log game output to the specified file.",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible shuffles"
    )
    parser.add_argument(
        "--vis",
        action="store_true",
        help="Visualize the simulation results in real-time graph.",
    )
    parser.add_argument(
        "--verify_shuffle",
        type=positive_int,
        metavar="TRIALS",
        help="Run a chi-square test on the shuffle with the given number of trials",
    )
    return parser


def main(argv=None):
    """
    Main function to start the game.

    It handles command-line arguments to determine the mode of operation,
    plays the requested number of rounds and prints the statistics.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging()
    rng = random.Random(args.seed) if args.seed is not None else None

    if args.verify_shuffle is not None:
        report = shuffle_position_test(args.verify_shuffle, rng)
        print(f"Chi-square: {report['statistic']:.2f} (p={report['p_value']:.4f})")
        print("Shuffle looks uniform." if report["uniform"] else "Shuffle looks biased!")
        return

    if not (args.console or args.simulate):
        parser.print_help()
        return

    io_interface = create_io_interface(args)
    stats = SimulationStats()
    graph = BlackjackGraph(args.num_games) if args.vis and not args.console else None

    start_time = time.time()
    for i in range(args.num_games):
        _, result = play_round(io_interface, rng)
        stats.update(result)
        if graph:
            graph.update(i + 1, stats.player_win_rate)
    duration = time.time() - start_time

    report = stats.report()
    summary = stats.summary()
    logger.info("Finished %d games in %.2f seconds", report["games_played"], duration)

    print("Simulation completed." if args.simulate else "Thanks for playing.")
    print(f"Games played: {report['games_played']:,}")
    print(f"Player wins: {report['player_wins']:,}")
    print(f"Dealer wins: {report['dealer_wins']:,}")
    print(f"Draws: {report['draws']:,}")
    interval = summary["confidence_interval"]
    print(
        f"Player win rate: {summary['rates']['player_win']:.2%} "
        f"(95% CI {interval['lower']:.2%} to {interval['upper']:.2%})"
    )

    if graph:
        plt.ioff()
        plt.show()  # Keep the graph window open after simulation ends


if __name__ == "__main__":
    main()
