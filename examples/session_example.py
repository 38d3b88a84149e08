"""Example script walking through one tournament evening.

Builds teammate history from a generated season, balances tonight's roster
with a few rules, nudges the result on soft preferences, plays round one
and pairs round two from the standings.
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

import random

from bounceball import BalancerConfig, PairHistory, balance_teams
from bounceball.balancing import optimize_teams_soft, rating_spread, round_one_matches
from bounceball.models import Apart, Goal, MatchResult, Together
from bounceball.scheduling import compute_team_standings, schedule_round_two
from bounceball.season import GameMode, team_count_for_mode, top_player_ids
from bounceball.testing import RandomSessionGenerator, RatingDistribution, RSGConfig


def main():
    generator = RandomSessionGenerator(
        RSGConfig(
            num_players=20,
            num_keepers=4,
            rating_distribution=RatingDistribution.CLUB,
            seed=2025,
        )
    )
    players = generator.create_players()
    team_count = team_count_for_mode(GameMode.TOURNAMENT, len(players))

    # Past season
    season = generator.generate_season(players, 8, team_count, attendance_rate=0.9)
    history = PairHistory.from_sessions(season)
    attending_ids = [p.id for p in players]
    print("Most frequent teammates:")
    for a, b, count in history.most_frequent_pairs(attending_ids, limit=5):
        print(f"  {a} & {b}: {count}x")

    # Tonight
    field = [p.id for p in players if not p.is_keeper]
    rules = [Together(field[0], field[1]), Apart(field[2], field[3])]
    teams = balance_teams(
        players,
        team_count,
        rules,
        pair_history=history,
        seed=7,
        config=BalancerConfig(iterations=100_000),
    )
    teams = optimize_teams_soft(
        teams,
        rules,
        pair_history=history,
        separate_frequent=True,
        separate_top_players=True,
        top_player_ids=top_player_ids(season, attending_ids),
        rng=random.Random(7),
    )
    print(f"\nTeams (spread {rating_spread(teams):.3f}):")
    for index, team in enumerate(teams):
        print(f"  Team {index + 1}: " + ", ".join(str(p) for p in team))

    # Round one with made-up scores
    rng = random.Random(1)
    results = [
        MatchResult(
            team1_index=a,
            team2_index=b,
            team1_goals=[Goal(player_id=teams[a][0].id, count=rng.randint(0, 4))],
            team2_goals=[Goal(player_id=teams[b][0].id, count=rng.randint(0, 4))],
        )
        for a, b in round_one_matches(team_count)
    ]
    standings = compute_team_standings(team_count, results)
    print("\nStandings after round one:")
    for s in standings:
        print(f"  Team {s.team_index + 1}: {s.points} pts, {s.goal_difference:+d}")

    pairings = schedule_round_two([r.pairing for r in results], standings)
    print("\nRound two: " + ", ".join(f"{a + 1} vs {b + 1}" for a, b in pairings))


if __name__ == "__main__":
    main()
