from bounceball.models.constraint import (
    Apart,
    Constraint,
    ConstraintType,
    MustBeFive,
    Together,
    Versus,
    constraint_from_dict,
    constraint_to_dict,
)
from bounceball.models.player import Player
from bounceball.models.session import (
    GameSession,
    Goal,
    Match,
    MatchResult,
    TeamStanding,
)

__all__ = [
    "Player",
    "Constraint",
    "ConstraintType",
    "Together",
    "Apart",
    "Versus",
    "MustBeFive",
    "constraint_from_dict",
    "constraint_to_dict",
    "Goal",
    "Match",
    "MatchResult",
    "GameSession",
    "TeamStanding",
]
