"""Exceptions for use in Bounceball Pairing"""

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

from typing import Sequence


# ========== Base Application Exception ==========


class BounceballException(Exception):
    """Base exception for all Bounceball Pairing errors.

    All custom exceptions in the application should inherit from this class.
    The messages are written to be shown to the user as-is.
    """

    pass


# ========== Balancing Exceptions ==========


class BalancingException(BounceballException):
    """Base exception for team balancing errors."""

    pass


class InvalidTeamSizeBoundsException(BalancingException):
    """Raised when the player and team count cannot give teams of 4 or 5."""

    def __init__(self, player_count: int, team_count: int, team_sizes: Sequence[int]):
        self.player_count = player_count
        self.team_count = team_count
        self.team_sizes = list(team_sizes)
        sizes = " and ".join(str(size) for size in sorted(set(self.team_sizes)))
        super().__init__(
            f"With {player_count} players in {team_count} teams the teams would "
            f"have {sizes} players. This is not allowed (min. 4, max. 5). "
            "Change the number of players or teams."
        )


class NoValidCompositionException(BalancingException):
    """Raised when the search budget is spent without a valid composition."""

    def __init__(self, iterations: int, restricted: bool):
        self.iterations = iterations
        self.restricted = restricted
        if restricted:
            message = (
                "Could not find a (new) team composition that satisfies all "
                "rules. Try other rules, or there is no alternative fair "
                "composition."
            )
        else:
            message = (
                "Could not generate teams: no composition with an even "
                "keeper spread was found. Check the number of players."
            )
        super().__init__(message)


class InvalidBalancingInputException(BalancingException):
    """Raised when the balancer input itself is malformed."""

    pass


# ========== Scheduling Exceptions ==========


class SchedulingException(BounceballException):
    """Base exception for fixture scheduling errors."""

    pass


class PreconditionViolationException(SchedulingException):
    """Raised when standings or round-one matches are malformed."""

    pass


# ========== Constraint Exceptions ==========


class ConstraintException(BounceballException):
    """Base exception for team constraint errors."""

    pass


class InvalidConstraintException(ConstraintException):
    """Raised when a constraint payload is malformed or of unknown type."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(BounceballException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
