import logging

import pytest

from bounceball.cli import create_main_parser, main


def test_balance_prints_teams(capsys):
    code = main(
        ["balance", "--players", "8", "--keepers", "2", "--teams", "2",
         "--iterations", "2000", "--seed", "1"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "Team 1" in out
    assert "Team 2" in out
    assert "Round 1: 1 vs 2" in out


def test_balance_with_history(capsys):
    code = main(
        ["balance", "--players", "16", "--teams", "4", "--iterations", "2000",
         "--history-sessions", "3", "--seed", "2"]
    )
    assert code == 0
    assert "Round 1: 1 vs 2, 3 vs 4" in capsys.readouterr().out


def test_invalid_team_size_exits_with_error(capsys):
    code = main(["balance", "--players", "9", "--teams", "3", "--iterations", "10"])
    captured = capsys.readouterr()
    assert code == 1
    assert "Error:" in captured.err


def test_benchmark(capsys):
    code = main(
        ["benchmark", "--players", "10", "--keepers", "0", "--teams", "2",
         "--iterations", "500", "--runs", "2", "--seed", "3"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "Runs: 2" in out


def test_rejects_non_positive_numbers():
    parser = create_main_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["balance", "--teams", "0"])


def _console_levels(logger_name):
    lgr = logging.getLogger(logger_name)
    return {
        h.level
        for h in lgr.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    }


def test_progress_logging_is_quiet_unless_verbose(capsys):
    args = ["balance", "--players", "8", "--teams", "2", "--iterations", "500", "--seed", "4"]

    assert main(args) == 0
    assert _console_levels("bounceball.balancing.balancer") == {logging.WARNING}
    assert "Best composition" not in capsys.readouterr().out

    assert main(args + ["--verbose"]) == 0
    assert _console_levels("bounceball.balancing.balancer") == {logging.INFO}
