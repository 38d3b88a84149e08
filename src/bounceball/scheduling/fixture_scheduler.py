"""Round-two pairing by round-one standings.

Teams are taken from the top of the standings. Each takes the best-ranked
remaining team it has not met in round one, or the best-ranked remaining
team if it has met all of them.
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

from typing import Iterable, List, Sequence, Set, Union

from bounceball.exceptions import PreconditionViolationException
from bounceball.models.session import Match, TeamStanding
from bounceball.type_hints import MatchPairing, PairKey, RoundSchedule
from bounceball.utils import setup_logger

logger = setup_logger(__name__)


def _played_pairs(round1_matches: Iterable[Union[MatchPairing, Match]]) -> Set[PairKey]:
    played = set()
    for match in round1_matches:
        a, b = match.pairing if isinstance(match, Match) else match
        played.add(frozenset({a, b}))
    return played


def _check_preconditions(
    played: Set[PairKey], standings: Sequence[TeamStanding]
) -> None:
    indices = [s.team_index for s in standings]
    if len(set(indices)) != len(indices):
        raise PreconditionViolationException(
            f"Standings list a team more than once: {indices}"
        )
    if len(indices) % 2 != 0:
        raise PreconditionViolationException(
            f"Round two needs an even number of teams, got {len(indices)}"
        )
    known = set(indices)
    for pair in played:
        missing = pair - known
        if missing:
            raise PreconditionViolationException(
                f"Round-one match refers to team(s) {sorted(missing)} "
                "that are not in the standings"
            )


def schedule_round_two(
    round1_matches: Iterable[Union[MatchPairing, Match]],
    standings: Sequence[TeamStanding],
) -> RoundSchedule:
    """Pair teams for round two, avoiding round-one rematches where possible.

    Parameters
    ----------
    round1_matches : iterable of (int, int) or Match
        Team index pairs that played in round one.
    standings : sequence of TeamStanding
        Already sorted best first (see ``sort_standings``). The order is
        used as-is.

    Returns
    -------
    list of (int, int)
        Round-two pairings in pick order, higher-ranked team first.

    Raises
    ------
    PreconditionViolationException
        If the team count is odd, a team appears twice, or a round-one
        match names a team missing from the standings.
    """
    played = _played_pairs(round1_matches)
    _check_preconditions(played, standings)

    queue: List[int] = [s.team_index for s in standings]
    pairings: RoundSchedule = []

    while queue:
        team_a = queue.pop(0)
        opponent_pos = None
        for pos, team_b in enumerate(queue):
            if frozenset({team_a, team_b}) not in played:
                opponent_pos = pos
                break

        if opponent_pos is None:
            opponent_pos = 0
            logger.warning(
                f"Team {team_a} already played every remaining team, "
                f"rematch against team {queue[0]}"
            )

        team_b = queue.pop(opponent_pos)
        pairings.append((team_a, team_b))

    return pairings


def find_rematches(
    pairings: Iterable[MatchPairing],
    round1_matches: Iterable[Union[MatchPairing, Match]],
) -> RoundSchedule:
    """Round-two pairings that repeat a round-one match."""
    played = _played_pairs(round1_matches)
    return [pair for pair in pairings if frozenset(pair) in played]
