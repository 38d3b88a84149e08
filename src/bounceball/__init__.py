"""Bounceball Pairing: balanced teams and round-two fixtures for club sessions.

The two entry points are :func:`balance_teams` and :func:`schedule_round_two`.
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

from bounceball.balancing import BalancerConfig, TeamBalancer, balance_teams
from bounceball.history import PairHistory
from bounceball.scheduling import compute_team_standings, schedule_round_two

__version__ = "0.3.0"

__all__ = [
    "BalancerConfig",
    "TeamBalancer",
    "balance_teams",
    "PairHistory",
    "compute_team_standings",
    "schedule_round_two",
]
