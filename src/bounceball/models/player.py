"""Player data class."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict


@dataclass(frozen=True)
class Player:
    """A club member attending a session.

    Attributes
    ----------
    id : int
        Unique player id, the source of truth for all logic.
    name : str
        Display name.
    rating : float
        Skill rating used for balancing.
    is_keeper : bool
        Whether the player plays as goalkeeper.
    is_fixed_member : bool
        Whether the player is a fixed club member (informational only).
    """

    id: int
    name: str
    rating: float
    is_keeper: bool = False
    is_fixed_member: bool = False

    def with_rating(self, rating: float) -> "Player":
        """Return a copy of this player with a new rating."""
        return replace(self, rating=rating)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "is_keeper": self.is_keeper,
            "is_fixed_member": self.is_fixed_member,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            id=int(data["id"]),
            name=data.get("name", ""),
            rating=float(data.get("rating", 0.0)),
            is_keeper=bool(data.get("is_keeper", False)),
            is_fixed_member=bool(data.get("is_fixed_member", False)),
        )

    def __str__(self) -> str:
        keeper = " (K)" if self.is_keeper else ""
        return f"{self.name}{keeper} [{self.rating:.2f}]"
