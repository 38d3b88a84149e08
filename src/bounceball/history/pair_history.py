"""Teammate pair history built from past sessions."""

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
from itertools import combinations
from typing import Any, Collection, Dict, Iterable, List, Optional, Sequence, Tuple

from bounceball.constants import FREQUENT_PAIRS_LIMIT
from bounceball.models.player import Player
from bounceball.models.session import GameSession, MatchResult
from bounceball.type_hints import PairKey, Teams, TeamsView


def pair_key(player1_id: int, player2_id: int) -> PairKey:
    """Unordered key for two player ids."""
    return frozenset({player1_id, player2_id})


@dataclass
class PairHistory:
    """
    Counts how often two players have shared a team.

    The counts are a soft signal only: an empty history scores every
    composition the same and never affects validity.

    Attributes
    ----------
    counts : dict of frozenset of int to int
        Mapping of unordered player id pairs to the number of times
        they have been teammates.
    """

    counts: Dict[PairKey, int] = field(default_factory=dict)

    def add_pair(self, player1_id: int, player2_id: int, times: int = 1) -> None:
        """Record that two players have been teammates ``times`` more times."""
        key = pair_key(player1_id, player2_id)
        self.counts[key] = self.counts.get(key, 0) + times

    def add_team(self, team: Sequence[Player]) -> None:
        """Record every unordered pair within one team."""
        for a, b in combinations(team, 2):
            self.add_pair(a.id, b.id)

    def count(self, player1_id: int, player2_id: int) -> int:
        """How often the two players have been teammates."""
        return self.counts.get(pair_key(player1_id, player2_id), 0)

    def is_empty(self) -> bool:
        return not self.counts

    def penalty(self, teams: TeamsView) -> int:
        """Sum over same-team pairs of the squared teammate count.

        Squaring makes a whole repeated trio or quartet cost far more than
        the same number of repeats spread over different teams.
        """
        if not self.counts:
            return 0
        total = 0
        for team in teams:
            for a, b in combinations(team, 2):
                c = self.counts.get(pair_key(a.id, b.id), 0)
                total += c * c
        return total

    def linear_penalty(
        self, teams: TeamsView, only_ids: Optional[Collection[int]] = None
    ) -> int:
        """Sum over same-team pairs of the plain teammate count."""
        if not self.counts:
            return 0
        total = 0
        for team in teams:
            ids = [p.id for p in team if only_ids is None or p.id in only_ids]
            for a, b in combinations(ids, 2):
                total += self.counts.get(pair_key(a, b), 0)
        return total

    def most_frequent_pairs(
        self, attending_ids: Collection[int], limit: int = FREQUENT_PAIRS_LIMIT
    ) -> List[Tuple[int, int, int]]:
        """Most frequent teammate pairs among the attending players.

        Returns
        -------
        list of tuple of (int, int, int)
            ``(smaller_id, larger_id, count)`` sorted by count descending.
        """
        attending = set(attending_ids)
        pairs = []
        for key, c in self.counts.items():
            a, b = sorted(key)
            if a in attending and b in attending:
                pairs.append((a, b, c))
        pairs.sort(key=lambda item: (-item[2], item[0], item[1]))
        return pairs[:limit]

    def _add_match_teams(self, teams: Teams, match: MatchResult) -> None:
        for index in (match.team1_index, match.team2_index):
            if 0 <= index < len(teams):
                self.add_team(teams[index])

    @classmethod
    def from_sessions(cls, sessions: Iterable[GameSession]) -> "PairHistory":
        """Build the history from played sessions.

        A team contributes its pairs once for every match it played. Round-two
        matches refer to the round-two teams when the session re-drew them.
        """
        history = cls()
        for session in sessions:
            for match in session.round1_results:
                history._add_match_teams(session.teams, match)
            round2_teams = session.teams_for_round2
            for match in session.round2_results:
                history._add_match_teams(round2_teams, match)
        return history

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pair history to dictionary."""
        return {
            "counts": [[*sorted(key), c] for key, c in self.counts.items()],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairHistory":
        """Deserialize pair history from dictionary."""
        return cls(
            counts={
                pair_key(int(a), int(b)): int(c) for a, b, c in data.get("counts", [])
            }
        )
