"""Round-one team standings."""

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

from typing import Iterable, List

from bounceball.constants import DRAW_POINTS, LOSS_POINTS, WIN_POINTS
from bounceball.exceptions import PreconditionViolationException
from bounceball.models.session import MatchResult, TeamStanding


def match_points(goals_for: int, goals_against: int) -> int:
    if goals_for > goals_against:
        return WIN_POINTS
    if goals_for < goals_against:
        return LOSS_POINTS
    return DRAW_POINTS


def sort_standings(standings: Iterable[TeamStanding]) -> List[TeamStanding]:
    """Sort by points, goal difference, goals for (desc), then team index."""
    return sorted(standings, key=lambda s: s.sort_key)


def compute_team_standings(
    team_count: int, results: Iterable[MatchResult]
) -> List[TeamStanding]:
    """Build sorted standings for ``team_count`` teams from round-one results.

    Raises
    ------
    PreconditionViolationException
        If a result refers to a team index outside ``range(team_count)``.
    """
    table = [TeamStanding(team_index=i) for i in range(team_count)]

    for result in results:
        for index in (result.team1_index, result.team2_index):
            if not 0 <= index < team_count:
                raise PreconditionViolationException(
                    f"Result refers to team {index}, but only {team_count} teams exist"
                )
        team1 = table[result.team1_index]
        team2 = table[result.team2_index]
        score1 = result.team1_score
        score2 = result.team2_score

        team1.goal_difference += score1 - score2
        team1.goals_for += score1
        team2.goal_difference += score2 - score1
        team2.goals_for += score2
        team1.points += match_points(score1, score2)
        team2.points += match_points(score2, score1)

    return sort_standings(table)
