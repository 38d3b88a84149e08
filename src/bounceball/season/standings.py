"""Season standings per player."""

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

from dataclasses import dataclass
from typing import Collection, Dict, Iterable, List

from bounceball.constants import TOP_PLAYER_COUNT
from bounceball.models.session import GameSession, MatchResult
from bounceball.scheduling.standings import match_points
from bounceball.type_hints import Teams


@dataclass
class PlayerStanding:
    """A player's accumulated season record, credited from team results."""

    player_id: int
    points: int = 0
    goals_for: int = 0
    goal_difference: int = 0


def _apply_match(
    table: Dict[int, PlayerStanding], teams: Teams, match: MatchResult
) -> None:
    sides = []
    for index, scored, conceded in (
        (match.team1_index, match.team1_score, match.team2_score),
        (match.team2_index, match.team2_score, match.team1_score),
    ):
        team = teams[index] if 0 <= index < len(teams) else []
        sides.append((team, scored, conceded))

    for team, scored, conceded in sides:
        for p in team:
            row = table.setdefault(p.id, PlayerStanding(player_id=p.id))
            row.goals_for += scored
            row.goal_difference += scored - conceded
            row.points += match_points(scored, conceded)


def compute_player_standings(sessions: Iterable[GameSession]) -> Dict[int, PlayerStanding]:
    """Season table keyed by player id."""
    table: Dict[int, PlayerStanding] = {}
    for session in sessions:
        for match in session.round1_results:
            _apply_match(table, session.teams, match)
        round2_teams = session.teams_for_round2
        for match in session.round2_results:
            _apply_match(table, round2_teams, match)
    return table


def top_player_ids(
    sessions: Iterable[GameSession],
    attending_ids: Collection[int],
    count: int = TOP_PLAYER_COUNT,
) -> List[int]:
    """Best attending players on points, then goals for, goal difference, id."""
    table = compute_player_standings(sessions)
    rows = [table.get(pid, PlayerStanding(player_id=pid)) for pid in set(attending_ids)]
    rows.sort(key=lambda r: (-r.points, -r.goals_for, -r.goal_difference, r.player_id))
    return [r.player_id for r in rows[:count]]
