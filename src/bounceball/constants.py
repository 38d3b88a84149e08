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

# --- Team size bounds ---
MIN_TEAM_SIZE = 4
MAX_TEAM_SIZE = 5

# --- Team balancer search ---
BALANCE_ITERATIONS = 1_000_000
# Candidates within this many rating units of the best spread are kept,
# the final pick among them goes to the lowest pairing penalty.
SPREAD_TOLERANCE = 0.02
MAX_CANDIDATES = 50
SPREAD_EPSILON = 1e-9
# Stop once the best spread is below this and the pool holds enough entries
EARLY_EXIT_SPREAD = 0.001
EARLY_EXIT_MIN_CANDIDATES = 10
# How often (in iterations) a cancellable search polls its stop callback
CANCEL_CHECK_INTERVAL = 1000

# --- Soft teammate optimizer ---
SOFT_OPTIMIZER_ITERATIONS = 20_000
SOFT_SPREAD_TOLERANCE = 0.01
SOFT_SPREAD_EPSILON = 1e-6
TOP_PLAYER_CLUSTER_WEIGHT = 50
TOP_PLAYER_COUNT = 6
FREQUENT_PAIRS_LIMIT = 12

# --- Match points ---
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# Rating change per won (+) or lost (-) match
RATING_DELTA = 0.1

# --- Game modes ---
MODE_SIMPLE = "simple"
MODE_TOURNAMENT = "tournament"
MODE_DOUBLE_HEADER = "doubleHeader"

# Tournament team count by attendance: (minimum players, team count)
TOURNAMENT_TEAM_THRESHOLDS = [
    (24, 6),
    (16, 4),
]
DEFAULT_TEAM_COUNT = 2

# --- Constraint kinds (serialised names) ---
CONSTRAINT_TOGETHER = "together"
CONSTRAINT_APART = "apart"
CONSTRAINT_VERSUS = "versus"
CONSTRAINT_MUST_BE_FIVE = "must_be_5"
