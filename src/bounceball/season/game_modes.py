"""Session formats and how many teams each one plays with."""

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

from enum import Enum

from bounceball.constants import (
    DEFAULT_TEAM_COUNT,
    MODE_DOUBLE_HEADER,
    MODE_SIMPLE,
    MODE_TOURNAMENT,
    TOURNAMENT_TEAM_THRESHOLDS,
)


class GameMode(Enum):
    """Session formats."""

    # one match between two teams
    SIMPLE = MODE_SIMPLE
    # two rounds, round two paired by round-one standings
    TOURNAMENT = MODE_TOURNAMENT
    # two matches between two teams, the second with a different split
    DOUBLE_HEADER = MODE_DOUBLE_HEADER


def team_count_for_mode(mode: GameMode, player_count: int) -> int:
    """Number of teams to generate for a session."""
    if mode is not GameMode.TOURNAMENT:
        return DEFAULT_TEAM_COUNT
    for min_players, team_count in TOURNAMENT_TEAM_THRESHOLDS:
        if player_count >= min_players:
            return team_count
    return DEFAULT_TEAM_COUNT
