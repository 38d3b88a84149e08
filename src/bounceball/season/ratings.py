"""Rating updates after a session."""

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

from bounceball.constants import RATING_DELTA
from bounceball.models.player import Player
from bounceball.models.session import GameSession, MatchResult
from bounceball.type_hints import RatingDeltas, Teams


def _apply_results(
    deltas: RatingDeltas, results: Iterable[MatchResult], teams: Teams
) -> None:
    for match in results:
        if not (0 <= match.team1_index < len(teams) and 0 <= match.team2_index < len(teams)):
            continue
        team1 = teams[match.team1_index]
        team2 = teams[match.team2_index]
        if match.team1_score > match.team2_score:
            winners, losers = team1, team2
        elif match.team2_score > match.team1_score:
            winners, losers = team2, team1
        else:
            continue
        for p in winners:
            deltas[p.id] = deltas.get(p.id, 0.0) + RATING_DELTA
        for p in losers:
            deltas[p.id] = deltas.get(p.id, 0.0) - RATING_DELTA


def calculate_rating_deltas(session: GameSession) -> RatingDeltas:
    """Rating change per player id for one session.

    Winners gain ``RATING_DELTA`` per match, losers lose it, draws change
    nothing. Round-two results are applied to the round-two teams.
    """
    deltas: RatingDeltas = {}
    _apply_results(deltas, session.round1_results, session.teams)
    _apply_results(deltas, session.round2_results, session.teams_for_round2)
    return deltas


def apply_rating_deltas(players: Iterable[Player], deltas: RatingDeltas) -> List[Player]:
    """New player values with their deltas applied, rounded to 2 decimals."""
    return [
        p.with_rating(round(p.rating + deltas[p.id], 2)) if p.id in deltas else p
        for p in players
    ]
