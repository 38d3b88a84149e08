"""Team balancing: constraint validation, the balancer search, soft tuning."""

from bounceball.balancing.balancer import (
    BalancerConfig,
    BalanceResult,
    Candidate,
    TeamBalancer,
    balance_teams,
)
from bounceball.balancing.composition import (
    compositions_identical,
    has_valid_keeper_distribution,
    rating_spread,
    round_one_matches,
    team_sizes,
)
from bounceball.balancing.optimizer import optimize_teams_soft, soft_penalty
from bounceball.balancing.validator import ConstraintValidator, is_composition_valid

__all__ = [
    "BalancerConfig",
    "BalanceResult",
    "Candidate",
    "TeamBalancer",
    "balance_teams",
    "ConstraintValidator",
    "is_composition_valid",
    "compositions_identical",
    "has_valid_keeper_distribution",
    "rating_spread",
    "round_one_matches",
    "team_sizes",
    "optimize_teams_soft",
    "soft_penalty",
]
