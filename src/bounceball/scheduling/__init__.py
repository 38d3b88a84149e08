"""Round-one standings and round-two fixtures."""

from bounceball.scheduling.fixture_scheduler import find_rematches, schedule_round_two
from bounceball.scheduling.standings import (
    compute_team_standings,
    match_points,
    sort_standings,
)

__all__ = [
    "schedule_round_two",
    "find_rematches",
    "compute_team_standings",
    "match_points",
    "sort_standings",
]
