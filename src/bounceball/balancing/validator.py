"""Hard-rule validation of a team composition."""

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

from typing import Dict, Iterable, Optional, Sequence

from bounceball.balancing.composition import player_team_index
from bounceball.exceptions import InvalidConstraintException
from bounceball.models.constraint import Apart, Constraint, MustBeFive, Together, Versus
from bounceball.type_hints import MatchPairing, TeamsView


class ConstraintValidator:
    """Checks compositions against user-declared constraints.

    Validation is all-or-nothing: one failing constraint rejects the whole
    composition. A constraint whose first player is not in the composition
    is skipped, since that player is not attending.

    Parameters
    ----------
    constraints : sequence of Constraint
        The declared rules.
    matches : iterable of (int, int), optional
        Which teams play each other, used by ``Versus``. Defaults to the
        round-one convention of team 2i against team 2i+1. A team may
        appear in at most one match.
    """

    def __init__(
        self,
        constraints: Sequence[Constraint],
        matches: Optional[Iterable[MatchPairing]] = None,
    ):
        self.constraints = list(constraints)
        self._opponents: Optional[Dict[int, int]] = None
        if matches is not None:
            self._opponents = {}
            for a, b in matches:
                for team in (a, b):
                    if team in self._opponents:
                        raise InvalidConstraintException(
                            f"Team {team} is listed in more than one match"
                        )
                self._opponents[a] = b
                self._opponents[b] = a

    def _are_opponents(self, team_a: int, team_b: int) -> bool:
        if self._opponents is None:
            return team_a // 2 == team_b // 2
        return self._opponents.get(team_a) == team_b

    def is_valid(self, teams: TeamsView) -> bool:
        """Check the composition against every constraint."""
        if not self.constraints:
            return True

        team_of = player_team_index(teams)
        for constraint in self.constraints:
            if not self._check(constraint, teams, team_of):
                return False
        return True

    def _check(
        self, constraint: Constraint, teams: TeamsView, team_of: Dict[int, int]
    ) -> bool:
        first = team_of.get(constraint.player_ids[0])
        if first is None:
            return True

        match constraint:
            case Together(player2_id=other):
                return team_of.get(other) == first
            case Apart(player2_id=other):
                second = team_of.get(other)
                return second is None or second != first
            case Versus(player2_id=other):
                second = team_of.get(other)
                if second is None or second == first:
                    return False
                return self._are_opponents(first, second)
            case MustBeFive():
                return len(teams[first]) == 5
            case _:
                raise InvalidConstraintException(
                    f"Unsupported constraint: {constraint!r}"
                )


def is_composition_valid(
    teams: TeamsView,
    constraints: Sequence[Constraint],
    matches: Optional[Iterable[MatchPairing]] = None,
) -> bool:
    """Convenience wrapper around :class:`ConstraintValidator`."""
    return ConstraintValidator(constraints, matches).is_valid(teams)


__all__ = ["ConstraintValidator", "is_composition_valid"]
