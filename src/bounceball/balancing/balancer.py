"""Balanced team generation.

The balancer runs a bounded randomized search. Each iteration shuffles the
attending players into the fixed size profile, discards compositions that
break a hard rule (keeper spread, declared constraints, exclusion), and keeps
a small pool of the best-balanced compositions seen so far. The winner is the
pool entry with the lowest rating spread, ties broken by the lowest
teammate-repeat penalty.
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
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from bounceball.balancing.composition import (
    check_team_size_bounds,
    compositions_identical,
    has_valid_keeper_distribution,
    rating_spread,
)
from bounceball.balancing.validator import ConstraintValidator
from bounceball.constants import (
    BALANCE_ITERATIONS,
    CANCEL_CHECK_INTERVAL,
    EARLY_EXIT_MIN_CANDIDATES,
    EARLY_EXIT_SPREAD,
    MAX_CANDIDATES,
    SPREAD_EPSILON,
    SPREAD_TOLERANCE,
)
from bounceball.exceptions import (
    InvalidBalancingInputException,
    InvalidConfigurationException,
    InvalidTeamSizeBoundsException,
    NoValidCompositionException,
)
from bounceball.history.pair_history import PairHistory
from bounceball.models.constraint import Constraint
from bounceball.models.player import Player
from bounceball.type_hints import MatchPairing, PairKey, Teams, TeamsView
from bounceball.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class BalancerConfig:
    """Search settings for the team balancer.

    Attributes
    ----------
    iterations : int
        Maximum number of shuffles tried.
    spread_tolerance : float
        Candidates within this distance of the best spread join the pool.
    max_candidates : int
        Pool cap; on overflow the pool is pruned to the best entries.
    spread_epsilon : float
        Spreads closer than this are treated as equal.
    early_exit_spread : float
        The search may stop once the best spread is below this value...
    early_exit_min_candidates : int
        ...and the pool holds at least this many candidates.
    """

    iterations: int = BALANCE_ITERATIONS
    spread_tolerance: float = SPREAD_TOLERANCE
    max_candidates: int = MAX_CANDIDATES
    spread_epsilon: float = SPREAD_EPSILON
    early_exit_spread: float = EARLY_EXIT_SPREAD
    early_exit_min_candidates: int = EARLY_EXIT_MIN_CANDIDATES

    def validate(self) -> None:
        """Raise InvalidConfigurationException on unusable settings."""
        if self.iterations <= 0:
            raise InvalidConfigurationException(
                f"iterations must be positive, got {self.iterations}"
            )
        if self.spread_tolerance < 0 or self.spread_epsilon < 0:
            raise InvalidConfigurationException("spread tolerances must not be negative")
        if self.max_candidates < 1:
            raise InvalidConfigurationException(
                f"max_candidates must be at least 1, got {self.max_candidates}"
            )
        if self.early_exit_min_candidates < 0:
            raise InvalidConfigurationException(
                "early_exit_min_candidates must not be negative"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "iterations": self.iterations,
            "spread_tolerance": self.spread_tolerance,
            "max_candidates": self.max_candidates,
            "spread_epsilon": self.spread_epsilon,
            "early_exit_spread": self.early_exit_spread,
            "early_exit_min_candidates": self.early_exit_min_candidates,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BalancerConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            iterations=data.get("iterations", BALANCE_ITERATIONS),
            spread_tolerance=data.get("spread_tolerance", SPREAD_TOLERANCE),
            max_candidates=data.get("max_candidates", MAX_CANDIDATES),
            spread_epsilon=data.get("spread_epsilon", SPREAD_EPSILON),
            early_exit_spread=data.get("early_exit_spread", EARLY_EXIT_SPREAD),
            early_exit_min_candidates=data.get(
                "early_exit_min_candidates", EARLY_EXIT_MIN_CANDIDATES
            ),
        )


@dataclass(slots=True)
class Candidate:
    """A valid composition with its rating spread and pairing penalty."""

    teams: Teams
    spread: float
    penalty: int


@dataclass(slots=True)
class BalanceResult:
    """Outcome of a balancing run."""

    teams: Teams
    spread: float
    penalty: int
    candidates: int
    iterations: int
    stopped_early: bool = False
    pool: List[Candidate] = field(default_factory=list, repr=False)


def _compare_candidates(a: Candidate, b: Candidate, eps: float) -> int:
    """Order by spread then penalty. Spreads within eps count as equal."""
    diff = a.spread - b.spread
    if diff < -eps:
        return -1
    if diff > eps:
        return 1
    if a.penalty < b.penalty:
        return -1
    if a.penalty > b.penalty:
        return 1
    return 0


def _as_pair_history(
    pair_history: Union[PairHistory, Mapping[PairKey, int], None],
) -> PairHistory:
    if pair_history is None:
        return PairHistory()
    if isinstance(pair_history, PairHistory):
        return pair_history
    return PairHistory(counts=dict(pair_history))


class TeamBalancer:
    """Splits attending players into balanced teams.

    Parameters
    ----------
    config : BalancerConfig, optional
        Search settings, defaults to the module constants.
    rng : random.Random, optional
        Random source. Pass a seeded instance for reproducible results;
        the same seed and input always give the same teams.
    """

    def __init__(
        self,
        config: Optional[BalancerConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config if config is not None else BalancerConfig()
        self.config.validate()
        self.rng = rng if rng is not None else random.Random()

    def _sort_pool(self, pool: List[Candidate]) -> None:
        eps = self.config.spread_epsilon
        pool.sort(key=cmp_to_key(lambda a, b: _compare_candidates(a, b, eps)))

    @staticmethod
    def _check_input(players: Sequence[Player], team_count: int) -> None:
        if team_count <= 0:
            raise InvalidBalancingInputException(
                f"Team count must be positive, got {team_count}"
            )
        if len(players) < 2:
            raise InvalidBalancingInputException(
                f"At least 2 players are needed, got {len(players)}"
            )
        if len(players) < team_count:
            raise InvalidBalancingInputException(
                f"Not enough players ({len(players)}) for {team_count} teams"
            )
        ids = [p.id for p in players]
        if len(set(ids)) != len(ids):
            raise InvalidBalancingInputException("Player ids must be unique")

    def balance(
        self,
        players: Sequence[Player],
        team_count: int,
        constraints: Sequence[Constraint] = (),
        exclude_composition: Optional[TeamsView] = None,
        pair_history: Union[PairHistory, Mapping[PairKey, int], None] = None,
        matches: Optional[Iterable[MatchPairing]] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> BalanceResult:
        """Search for the best-balanced composition.

        Parameters
        ----------
        players : sequence of Player
            Attending players.
        team_count : int
            Number of teams to make.
        constraints : sequence of Constraint
            Hard rules every returned composition satisfies.
        exclude_composition : list of list of Player, optional
            A composition the result must differ from (team order and
            player order ignored), e.g. the first match of a double header.
        pair_history : PairHistory or mapping, optional
            Teammate counts; missing means every pair counts zero.
        matches : iterable of (int, int), optional
            Explicit team pairings for ``Versus`` constraints, defaults to
            team 2i against team 2i+1.
        should_stop : callable, optional
            Polled periodically; returning True ends the search with the
            best pool found so far.

        Returns
        -------
        BalanceResult

        Raises
        ------
        InvalidBalancingInputException
            If the players or team count are unusable.
        InvalidTeamSizeBoundsException
            If the size profile leaves a team outside [4, 5].
        NoValidCompositionException
            If no composition satisfied every hard rule.
        """
        self._check_input(players, team_count)
        try:
            sizes = check_team_size_bounds(len(players), team_count)
        except InvalidTeamSizeBoundsException as e:
            logger.error(str(e))
            raise

        cfg = self.config
        validator = ConstraintValidator(constraints, matches)
        history = _as_pair_history(pair_history)

        best_spread = float("inf")
        pool: List[Candidate] = []
        pool_players = list(players)
        iterations = 0
        stopped_early = False

        for i in range(cfg.iterations):
            iterations = i + 1
            if (
                should_stop is not None
                and i % CANCEL_CHECK_INTERVAL == 0
                and should_stop()
            ):
                logger.info(f"Balancing cancelled after {i} iterations")
                stopped_early = True
                iterations = i
                break

            self.rng.shuffle(pool_players)
            teams: Teams = []
            cursor = 0
            for size in sizes:
                teams.append(pool_players[cursor : cursor + size])
                cursor += size

            if not has_valid_keeper_distribution(teams):
                continue
            if not validator.is_valid(teams):
                continue
            if exclude_composition is not None and compositions_identical(
                teams, exclude_composition
            ):
                continue

            spread = rating_spread(teams)
            if spread < best_spread - cfg.spread_epsilon:
                best_spread = spread
                pool = [Candidate(teams, spread, history.penalty(teams))]
            elif spread <= best_spread + cfg.spread_tolerance:
                pool.append(Candidate(teams, spread, history.penalty(teams)))
                if len(pool) > cfg.max_candidates:
                    self._sort_pool(pool)
                    del pool[cfg.max_candidates :]

            if (
                best_spread < cfg.early_exit_spread
                and len(pool) >= cfg.early_exit_min_candidates
            ):
                logger.debug(
                    f"Near-perfect spread {best_spread:.4f} after {iterations} iterations"
                )
                stopped_early = True
                break

        if not pool:
            restricted = bool(constraints) or exclude_composition is not None
            logger.error(
                f"No valid composition for {len(players)} players in "
                f"{team_count} teams after {iterations} iterations"
            )
            raise NoValidCompositionException(iterations, restricted)

        self._sort_pool(pool)
        best = pool[0]
        logger.info(
            f"Best composition: spread={best.spread:.3f}, penalty={best.penalty} "
            f"(candidates={len(pool)}) after {iterations} iterations"
        )
        return BalanceResult(
            teams=[list(team) for team in best.teams],
            spread=best.spread,
            penalty=best.penalty,
            candidates=len(pool),
            iterations=iterations,
            stopped_early=stopped_early,
            pool=pool,
        )


def balance_teams(
    players: Sequence[Player],
    team_count: int,
    constraints: Sequence[Constraint] = (),
    exclude_composition: Optional[TeamsView] = None,
    pair_history: Union[PairHistory, Mapping[PairKey, int], None] = None,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    config: Optional[BalancerConfig] = None,
    matches: Optional[Iterable[MatchPairing]] = None,
) -> Teams:
    """Split players into ``team_count`` balanced teams.

    Team ``2i`` plays team ``2i + 1`` in round one unless ``matches`` says
    otherwise. See :meth:`TeamBalancer.balance` for the full contract.
    """
    if rng is None:
        rng = random.Random(seed)
    balancer = TeamBalancer(config=config, rng=rng)
    return balancer.balance(
        players,
        team_count,
        constraints=constraints,
        exclude_composition=exclude_composition,
        pair_history=pair_history,
        matches=matches,
    ).teams
