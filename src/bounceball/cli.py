"""Command-line interface for Bounceball Pairing.

Generates a random roster and balances it, or benchmarks the balancer.
"""

# Bounceball Pairing
# Copyright (C) 2025  Bounceball Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import logging
import random
import statistics
import sys
import time
from typing import List, Optional

from bounceball.balancing.balancer import BalancerConfig, TeamBalancer
from bounceball.balancing.composition import round_one_matches, team_average
from bounceball.constants import BALANCE_ITERATIONS
from bounceball.exceptions import BounceballException
from bounceball.history.pair_history import PairHistory
from bounceball.testing.rsg import RandomSessionGenerator, RatingDistribution, RSGConfig
from bounceball.utils import set_console_level, setup_logger

logger = setup_logger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Value must be positive, got {number}")
    return number


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--players", type=_positive_int, default=18, help="Number of players (default: 18)"
    )
    parser.add_argument(
        "--keepers", type=int, default=2, help="Number of goalkeepers (default: 2)"
    )
    parser.add_argument(
        "--teams", type=_positive_int, default=4, help="Number of teams (default: 4)"
    )
    parser.add_argument(
        "--iterations",
        type=_positive_int,
        default=BALANCE_ITERATIONS,
        help=f"Search iterations (default: {BALANCE_ITERATIONS})",
    )
    parser.add_argument(
        "--distribution",
        choices=[d.value for d in RatingDistribution],
        default=RatingDistribution.NORMAL.value,
        help="Rating distribution of the random roster",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--verbose", action="store_true", help="Show progress logging on the console"
    )


def create_main_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bounceball",
        description="Balanced team generation for bounceball sessions",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    balance = subparsers.add_parser("balance", help="Balance a random roster")
    _add_common_arguments(balance)
    balance.add_argument(
        "--history-sessions",
        type=int,
        default=0,
        help="Random past sessions to build teammate history from (default: 0)",
    )

    benchmark = subparsers.add_parser("benchmark", help="Time repeated balancing runs")
    _add_common_arguments(benchmark)
    benchmark.add_argument(
        "--runs", type=_positive_int, default=5, help="Number of runs (default: 5)"
    )
    return parser


def _make_generator(args: argparse.Namespace) -> RandomSessionGenerator:
    return RandomSessionGenerator(
        RSGConfig(
            num_players=args.players,
            num_keepers=args.keepers,
            rating_distribution=RatingDistribution(args.distribution),
            seed=args.seed,
        )
    )


def run_balance_command(args: argparse.Namespace) -> int:
    generator = _make_generator(args)
    players = generator.create_players()

    history = PairHistory()
    if args.history_sessions > 0:
        sessions = generator.generate_season(
            players, args.history_sessions, args.teams, attendance_rate=0.9
        )
        history = PairHistory.from_sessions(sessions)

    balancer = TeamBalancer(
        config=BalancerConfig(iterations=args.iterations),
        rng=random.Random(args.seed),
    )
    result = balancer.balance(players, args.teams, pair_history=history)

    for index, team in enumerate(result.teams):
        print(f"Team {index + 1} (avg {team_average(team):.2f})")
        for player in sorted(team, key=lambda p: -p.rating):
            print(f"  {player}")
    matches = ", ".join(f"{a + 1} vs {b + 1}" for a, b in round_one_matches(args.teams))
    print(f"Round 1: {matches}")
    print(
        f"Spread: {result.spread:.3f}  Penalty: {result.penalty}  "
        f"Iterations: {result.iterations}"
    )
    return 0


def run_benchmark_command(args: argparse.Namespace) -> int:
    generator = _make_generator(args)
    players = generator.create_players()
    balancer = TeamBalancer(
        config=BalancerConfig(iterations=args.iterations),
        rng=random.Random(args.seed),
    )

    spreads: List[float] = []
    durations: List[float] = []
    for _ in range(args.runs):
        start = time.perf_counter()
        result = balancer.balance(players, args.teams)
        durations.append(time.perf_counter() - start)
        spreads.append(result.spread)

    print(f"Runs: {args.runs}")
    print(f"Mean spread: {statistics.mean(spreads):.4f}")
    print(f"Mean duration: {statistics.mean(durations):.3f}s")
    return 0


COMMANDS = {
    "balance": run_balance_command,
    "benchmark": run_benchmark_command,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_main_parser()
    args = parser.parse_args(argv)

    # keep the printed report free of progress logging
    set_console_level(logging.INFO if args.verbose else logging.WARNING)
    try:
        return COMMANDS[args.command](args)
    except BounceballException as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
