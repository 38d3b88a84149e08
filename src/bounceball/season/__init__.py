"""Season bookkeeping around the team generator."""

from bounceball.season.game_modes import GameMode, team_count_for_mode
from bounceball.season.ratings import apply_rating_deltas, calculate_rating_deltas
from bounceball.season.standings import (
    PlayerStanding,
    compute_player_standings,
    top_player_ids,
)

__all__ = [
    "GameMode",
    "team_count_for_mode",
    "calculate_rating_deltas",
    "apply_rating_deltas",
    "PlayerStanding",
    "compute_player_standings",
    "top_player_ids",
]
