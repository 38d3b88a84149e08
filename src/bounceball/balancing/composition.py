"""Helpers describing a team composition: sizes, averages, keepers, identity."""

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

from collections import Counter
from typing import Dict, List, Sequence

from bounceball.constants import MAX_TEAM_SIZE, MIN_TEAM_SIZE
from bounceball.exceptions import InvalidTeamSizeBoundsException
from bounceball.models.player import Player
from bounceball.type_hints import RoundSchedule, TeamsView


def team_sizes(player_count: int, team_count: int) -> List[int]:
    """Size profile: floor(N/K) each, the first N mod K teams get one extra."""
    base_size, extra = divmod(player_count, team_count)
    return [base_size + 1 if i < extra else base_size for i in range(team_count)]


def check_team_size_bounds(player_count: int, team_count: int) -> List[int]:
    """Return the size profile, raising if any team falls outside [4, 5]."""
    sizes = team_sizes(player_count, team_count)
    if min(sizes) < MIN_TEAM_SIZE or max(sizes) > MAX_TEAM_SIZE:
        raise InvalidTeamSizeBoundsException(player_count, team_count, sizes)
    return sizes


def round_one_matches(team_count: int) -> RoundSchedule:
    """Round-one fixtures: team 2i plays team 2i+1."""
    return [(i, i + 1) for i in range(0, team_count - 1, 2)]


def team_average(team: Sequence[Player]) -> float:
    if not team:
        return 0.0
    return sum(p.rating for p in team) / len(team)


def rating_spread(teams: TeamsView) -> float:
    """Highest minus lowest team-average rating."""
    averages = [team_average(team) for team in teams]
    if len(averages) < 2:
        return 0.0
    return max(averages) - min(averages)


def keeper_counts(teams: TeamsView) -> List[int]:
    return [sum(1 for p in team if p.is_keeper) for team in teams]


def has_valid_keeper_distribution(teams: TeamsView) -> bool:
    """Keeper counts per team differ by at most one."""
    counts = keeper_counts(teams)
    if not counts:
        return True
    return max(counts) - min(counts) <= 1


def canonical_composition(teams: TeamsView) -> Counter:
    """Multiset of teams, each team as a sorted tuple of player ids.

    Ignores both player order within a team and team order.
    """
    return Counter(tuple(sorted(p.id for p in team)) for team in teams)


def compositions_identical(teams_a: TeamsView, teams_b: TeamsView) -> bool:
    """Whether two compositions split the players into the same groups."""
    if len(teams_a) != len(teams_b):
        return False
    return canonical_composition(teams_a) == canonical_composition(teams_b)


def player_team_index(teams: TeamsView) -> Dict[int, int]:
    """Map player id -> index of the team holding the player."""
    return {p.id: index for index, team in enumerate(teams) for p in team}


def copy_teams(teams: TeamsView) -> List[List[Player]]:
    return [list(team) for team in teams]
