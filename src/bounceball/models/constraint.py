"""Team constraints declared before generating teams.

A constraint is one of four closed variants. Each variant is a small frozen
data class carrying the player ids it is about; the validator dispatches on
the variant type.
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

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from bounceball.constants import (
    CONSTRAINT_APART,
    CONSTRAINT_MUST_BE_FIVE,
    CONSTRAINT_TOGETHER,
    CONSTRAINT_VERSUS,
)
from bounceball.exceptions import InvalidConstraintException


class ConstraintType(Enum):
    """Kinds of team constraint, valued by their serialised name."""

    TOGETHER = CONSTRAINT_TOGETHER
    APART = CONSTRAINT_APART
    VERSUS = CONSTRAINT_VERSUS
    MUST_BE_FIVE = CONSTRAINT_MUST_BE_FIVE


@dataclass(frozen=True)
class _PairConstraint:
    player1_id: int
    player2_id: int

    def __post_init__(self) -> None:
        if self.player1_id == self.player2_id:
            raise InvalidConstraintException(
                f"{type(self).__name__} needs two different players, "
                f"got {self.player1_id} twice"
            )

    @property
    def player_ids(self) -> Tuple[int, ...]:
        return (self.player1_id, self.player2_id)


@dataclass(frozen=True)
class Together(_PairConstraint):
    """Both players must be on the same team."""

    type = ConstraintType.TOGETHER


@dataclass(frozen=True)
class Apart(_PairConstraint):
    """The players must be on different teams."""

    type = ConstraintType.APART


@dataclass(frozen=True)
class Versus(_PairConstraint):
    """The players must be on opposing teams of the same round-one match."""

    type = ConstraintType.VERSUS


@dataclass(frozen=True)
class MustBeFive:
    """The player's team must have exactly five members."""

    player_id: int

    type = ConstraintType.MUST_BE_FIVE

    @property
    def player_ids(self) -> Tuple[int, ...]:
        return (self.player_id,)


Constraint = Union[Together, Apart, Versus, MustBeFive]

_PAIR_CONSTRAINTS = {
    ConstraintType.TOGETHER: Together,
    ConstraintType.APART: Apart,
    ConstraintType.VERSUS: Versus,
}


def constraint_to_dict(constraint: Constraint) -> Dict[str, Any]:
    """Serialize a constraint to dictionary."""
    return {"type": constraint.type.value, "player_ids": list(constraint.player_ids)}


def constraint_from_dict(data: Dict[str, Any]) -> Constraint:
    """Deserialize a constraint from dictionary.

    Raises
    ------
    InvalidConstraintException
        If the type is unknown or the number of player ids does not fit it.
    """
    try:
        kind = ConstraintType(data.get("type"))
    except ValueError:
        raise InvalidConstraintException(
            f"Unknown constraint type: {data.get('type')!r}"
        ) from None

    player_ids = [int(pid) for pid in data.get("player_ids", [])]
    if kind is ConstraintType.MUST_BE_FIVE:
        if len(player_ids) != 1:
            raise InvalidConstraintException(
                f"'{kind.value}' takes exactly one player, got {len(player_ids)}"
            )
        return MustBeFive(player_ids[0])

    if len(player_ids) != 2:
        raise InvalidConstraintException(
            f"'{kind.value}' takes exactly two players, got {len(player_ids)}"
        )
    return _PAIR_CONSTRAINTS[kind](player_ids[0], player_ids[1])
