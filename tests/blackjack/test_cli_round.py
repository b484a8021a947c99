import random

import pytest

from solojack.blackjack.action import Action
from solojack.blackjack.blackjack import build_parser, describe, main, play_round
from solojack.blackjack.rules import determine_game_result
from solojack.blackjack.state import GameResult, Turn
from solojack.blackjack.stats import SimulationStats
from solojack.common.card import Rank
from solojack.common.io_interface import (
    DummyIOInterface,
    LoggingIOInterface,
    TestIOInterface,
)


def test_play_round_with_queued_stand():
    io_interface = TestIOInterface()
    io_interface.add_player_action(Action.STAND)

    state, result = play_round(io_interface, random.Random(3))

    assert state.turn == Turn.DEALER_TURN
    assert len(state.player_hand) == 2
    assert result == determine_game_result(state)
    assert io_interface.sent_messages[-1] == f"Result: {result.value}"
    assert "Player chose stand." in io_interface.sent_messages


def test_play_round_runs_out_of_actions():
    io_interface = TestIOInterface()
    with pytest.raises(ValueError):
        play_round(io_interface, random.Random(3))


def test_dummy_policy_always_finishes():
    stats = SimulationStats()
    rng = random.Random(11)
    for _ in range(200):
        state, result = play_round(DummyIOInterface(), rng)
        assert state.turn == Turn.DEALER_TURN
        stats.update(result)

    report = stats.report()
    assert report["games_played"] == 200
    assert report["player_wins"] + report["dealer_wins"] + report["draws"] == 200


def test_dummy_policy_hits_below_17(state_factory):
    policy = DummyIOInterface()
    actions = [Action.HIT, Action.STAND]
    low = state_factory((Rank.TEN, Rank.SIX), (Rank.TEN, Rank.SEVEN))
    high = state_factory((Rank.TEN, Rank.SEVEN), (Rank.TEN, Rank.SEVEN))
    assert policy.get_player_action(low, actions) == Action.HIT
    assert policy.get_player_action(high, actions) == Action.STAND


def test_logging_interface_writes_transcript(tmp_path):
    log_file = tmp_path / "rounds.log"
    play_round(LoggingIOInterface(str(log_file)), random.Random(5))

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert [line.split(":")[0] for line in lines[:4]] == [
        "Dealt to player",
        "Dealt to player",
        "Dealt to dealer",
        "Dealt to dealer",
    ]
    assert lines[4].startswith("Player: ")
    assert lines[-4].startswith("Round ended: ")
    assert lines[-3] == "Player chose stand."
    assert lines[-1].startswith("Result: ")


def test_logging_interface_unsubscribes_after_round(tmp_path):
    log_file = tmp_path / "rounds.log"
    play_round(LoggingIOInterface(str(log_file)), random.Random(5))
    before = log_file.read_text(encoding="utf-8")

    # A round driven by another interface must not reach the log file
    play_round(DummyIOInterface(), random.Random(6))

    assert log_file.read_text(encoding="utf-8") == before


def test_describe_masks_dealer_hole_card(state_factory):
    state = state_factory((Rank.TEN, Rank.SIX), (Rank.NINE, Rank.SEVEN))
    assert describe(state, reveal_dealer=False) == (
        "Player: 10 of ♥, 6 of ♥ (16) | Dealer: ??, 7 of ♠"
    )
    assert describe(state, reveal_dealer=True).endswith("9 of ♠, 7 of ♠ (16)")


def test_simulation_stats_rates():
    stats = SimulationStats()
    assert stats.player_win_rate == 0.0
    for result in (GameResult.PLAYER_WIN, GameResult.DEALER_WIN, GameResult.DRAW, GameResult.PLAYER_WIN):
        stats.update(result)
    assert stats.player_win_rate == 0.5
    assert stats.report() == {
        "games_played": 4,
        "player_wins": 2,
        "dealer_wins": 1,
        "draws": 1,
    }


def test_simulation_stats_summary_follows_counts():
    stats = SimulationStats()
    for result in (GameResult.PLAYER_WIN, GameResult.DEALER_WIN, GameResult.PLAYER_WIN):
        stats.update(result)

    summary = stats.summary()
    assert summary["sample_size"] == stats.games_played == 3
    assert summary["counts"]["player_win"] == stats.report()["player_wins"] == 2
    assert summary["rates"]["player_win"] == pytest.approx(stats.player_win_rate)


@pytest.mark.parametrize("value", ["0", "-5", "ten"])
def test_verify_shuffle_rejects_non_positive_trials(value, capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--verify_shuffle", value])
    assert excinfo.value.code == 2
    assert "--verify_shuffle" in capsys.readouterr().err


def test_num_games_rejects_zero():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--simulate", "--num_games", "0"])


def test_verify_shuffle_accepts_positive_trials():
    args = build_parser().parse_args(["--verify_shuffle", "520"])
    assert args.verify_shuffle == 520


def test_main_runs_shuffle_check(capsys):
    main(["--verify_shuffle", "520", "--seed", "1"])
    out = capsys.readouterr().out
    assert out.startswith("Chi-square: ")
    assert "Shuffle looks" in out


def test_main_simulation_prints_summary(capsys):
    main(["--simulate", "--num_games", "20", "--seed", "4"])
    out = capsys.readouterr().out
    assert "Games played: 20" in out
    assert "Player win rate: " in out
