"""Data models for played sessions and their matches."""

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

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse

from bounceball.models.player import Player
from bounceball.type_hints import MatchPairing, Team, Teams


@dataclass(frozen=True)
class Goal:
    """Goals scored by one player in one match."""

    player_id: int
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"player_id": self.player_id, "count": self.count}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Goal":
        return cls(player_id=int(data["player_id"]), count=int(data["count"]))


@dataclass(frozen=True)
class Match:
    """Two teams, by index into the round's teams, playing each other."""

    team1_index: int
    team2_index: int

    @property
    def pairing(self) -> MatchPairing:
        return (self.team1_index, self.team2_index)


@dataclass(frozen=True)
class MatchResult(Match):
    """A played match and the goals scored on each side.

    Attributes
    ----------
    team1_goals : list of Goal
        Goals by players of the first team.
    team2_goals : list of Goal
        Goals by players of the second team.
    """

    team1_goals: List[Goal] = field(default_factory=list)
    team2_goals: List[Goal] = field(default_factory=list)

    @property
    def team1_score(self) -> int:
        return sum(goal.count for goal in self.team1_goals)

    @property
    def team2_score(self) -> int:
        return sum(goal.count for goal in self.team2_goals)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match result to dictionary."""
        return {
            "team1_index": self.team1_index,
            "team2_index": self.team2_index,
            "team1_goals": [g.to_dict() for g in self.team1_goals],
            "team2_goals": [g.to_dict() for g in self.team2_goals],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        """Deserialize match result from dictionary."""
        return cls(
            team1_index=int(data["team1_index"]),
            team2_index=int(data["team2_index"]),
            team1_goals=[Goal.from_dict(g) for g in data.get("team1_goals", [])],
            team2_goals=[Goal.from_dict(g) for g in data.get("team2_goals", [])],
        )


def _teams_to_dict(teams: Teams) -> List[List[Dict[str, Any]]]:
    return [[p.to_dict() for p in team] for team in teams]


def _teams_from_dict(data: List[List[Dict[str, Any]]]) -> Teams:
    return [[Player.from_dict(p) for p in team] for team in data]


@dataclass
class GameSession:
    """One played session: round-one teams, results, and optional new teams.

    Attributes
    ----------
    date : datetime
        When the session was played.
    teams : list of list of Player
        Teams as played in round one.
    round1_results : list of MatchResult
        Round-one results, indices refer to ``teams``.
    round2_results : list of MatchResult
        Round-two results, indices refer to ``round2_teams`` when set.
    round2_teams : list of list of Player or None
        Teams re-drawn for round two, ``None`` when round one's teams kept
        playing.
    """

    date: datetime
    teams: Teams = field(default_factory=list)
    round1_results: List[MatchResult] = field(default_factory=list)
    round2_results: List[MatchResult] = field(default_factory=list)
    round2_teams: Optional[Teams] = None

    @property
    def teams_for_round2(self) -> Teams:
        """Teams the round-two results refer to."""
        return self.round2_teams if self.round2_teams is not None else self.teams

    def team(self, round_number: int, index: int) -> Team:
        """Team at ``index`` in the given round, empty if it does not exist."""
        teams = self.teams if round_number == 1 else self.teams_for_round2
        if 0 <= index < len(teams):
            return teams[index]
        return []

    def to_dict(self) -> Dict[str, Any]:
        """Serialize session to dictionary."""
        data = {
            "date": self.date.isoformat(),
            "teams": _teams_to_dict(self.teams),
            "round1_results": [r.to_dict() for r in self.round1_results],
            "round2_results": [r.to_dict() for r in self.round2_results],
        }
        if self.round2_teams is not None:
            data["round2_teams"] = _teams_to_dict(self.round2_teams)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSession":
        """Deserialize session from dictionary."""
        round2_teams = data.get("round2_teams")
        return cls(
            date=isoparse(data["date"]),
            teams=_teams_from_dict(data.get("teams", [])),
            round1_results=[
                MatchResult.from_dict(r) for r in data.get("round1_results", [])
            ],
            round2_results=[
                MatchResult.from_dict(r) for r in data.get("round2_results", [])
            ],
            round2_teams=(
                _teams_from_dict(round2_teams) if round2_teams is not None else None
            ),
        )


@dataclass
class TeamStanding:
    """A team's round-one record, used to seed round two."""

    team_index: int
    points: int = 0
    goal_difference: int = 0
    goals_for: int = 0

    @property
    def sort_key(self):
        """Ordering: points, goal difference, goals for (all desc), index asc."""
        return (-self.points, -self.goal_difference, -self.goals_for, self.team_index)
