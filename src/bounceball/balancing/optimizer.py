"""Soft preference pass run after balancing.

Swaps single players between teams to pull apart frequent teammates and/or
spread the season's top scorers, without giving up balance or any hard rule.
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

import random
from typing import Collection, Iterable, Optional, Sequence

from bounceball.balancing.composition import (
    compositions_identical,
    copy_teams,
    has_valid_keeper_distribution,
    rating_spread,
)
from bounceball.balancing.validator import ConstraintValidator
from bounceball.constants import (
    SOFT_OPTIMIZER_ITERATIONS,
    SOFT_SPREAD_EPSILON,
    SOFT_SPREAD_TOLERANCE,
    TOP_PLAYER_CLUSTER_WEIGHT,
)
from bounceball.history.pair_history import PairHistory
from bounceball.models.constraint import Constraint
from bounceball.type_hints import MatchPairing, Teams, TeamsView
from bounceball.utils import setup_logger

logger = setup_logger(__name__)


def soft_penalty(
    teams: TeamsView,
    pair_history: PairHistory,
    attending_ids: Collection[int],
    separate_frequent: bool,
    separate_top_players: bool,
    top_player_ids: Collection[int] = (),
) -> int:
    """Penalty for frequent teammates and clustered top players."""
    penalty = 0
    if separate_frequent:
        penalty += pair_history.linear_penalty(teams, only_ids=attending_ids)
    if separate_top_players:
        for team in teams:
            top_count = sum(
                1 for p in team if p.id in attending_ids and p.id in top_player_ids
            )
            if top_count >= 2:
                penalty += (top_count - 1) * (top_count - 1) * TOP_PLAYER_CLUSTER_WEIGHT
    return penalty


def optimize_teams_soft(
    teams: TeamsView,
    constraints: Sequence[Constraint] = (),
    pair_history: Optional[PairHistory] = None,
    separate_frequent: bool = False,
    separate_top_players: bool = False,
    top_player_ids: Collection[int] = (),
    rng: Optional[random.Random] = None,
    iterations: int = SOFT_OPTIMIZER_ITERATIONS,
    matches: Optional[Iterable[MatchPairing]] = None,
    exclude_composition: Optional[TeamsView] = None,
) -> Teams:
    """Improve a balanced composition on soft preferences by player swaps.

    A swap is kept only if keepers stay balanced, every constraint still
    holds, the result differs from ``exclude_composition`` when one is given,
    the spread stays within ``SOFT_SPREAD_TOLERANCE`` of the starting
    spread, and the result is better: a lower spread, or an equal spread with
    a lower soft penalty. Team sizes never change.

    Returns
    -------
    list of list of Player
        A new composition; the input is not modified.
    """
    best = copy_teams(teams)
    if not separate_frequent and not separate_top_players:
        return best
    if len(best) < 2:
        return best

    history = pair_history if pair_history is not None else PairHistory()
    rng = rng if rng is not None else random.Random()
    validator = ConstraintValidator(constraints, matches)
    attending_ids = {p.id for team in best for p in team}
    top_ids = set(top_player_ids)

    def penalty(t: TeamsView) -> int:
        return soft_penalty(
            t, history, attending_ids, separate_frequent, separate_top_players, top_ids
        )

    base_spread = rating_spread(best)
    best_spread = base_spread
    best_penalty = penalty(best)
    start_penalty = best_penalty
    if best_penalty == 0:
        return best

    team_count = len(best)
    for _ in range(iterations):
        a = rng.randrange(team_count)
        b = rng.randrange(team_count)
        if b == a:
            b = (b + 1) % team_count
        if not best[a] or not best[b]:
            continue

        ia = rng.randrange(len(best[a]))
        ib = rng.randrange(len(best[b]))
        candidate = copy_teams(best)
        candidate[a][ia], candidate[b][ib] = candidate[b][ib], candidate[a][ia]

        if not has_valid_keeper_distribution(candidate):
            continue
        if not validator.is_valid(candidate):
            continue
        if exclude_composition is not None and compositions_identical(
            candidate, exclude_composition
        ):
            continue

        candidate_spread = rating_spread(candidate)
        if candidate_spread > base_spread + SOFT_SPREAD_TOLERANCE:
            continue

        candidate_penalty = penalty(candidate)
        spread_better = candidate_spread < best_spread - SOFT_SPREAD_EPSILON
        spread_same = abs(candidate_spread - best_spread) <= SOFT_SPREAD_EPSILON
        if spread_better or (spread_same and candidate_penalty < best_penalty):
            best = candidate
            best_spread = candidate_spread
            best_penalty = candidate_penalty
            if best_penalty == 0:
                break

    logger.info(
        f"Soft optimization: penalty {start_penalty} -> {best_penalty}, "
        f"spread {base_spread:.3f} -> {best_spread:.3f}"
    )
    return best
