"""Random Session Generator (RSG) - internal testing system for the balancer.

Generates rosters and fully played seasons of sessions so the team balancer
and round-two scheduler can be exercised and benchmarked without real data.
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
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import List, Optional, Tuple

from bounceball.balancing.composition import round_one_matches, team_sizes
from bounceball.models.player import Player
from bounceball.models.session import GameSession, Goal, MatchResult
from bounceball.scheduling.fixture_scheduler import schedule_round_two
from bounceball.scheduling.standings import compute_team_standings
from bounceball.type_hints import Team, Teams
from bounceball.utils import setup_logger

logger = setup_logger(__name__)


class RatingDistribution(Enum):
    """Rating distribution patterns for generated rosters."""

    UNIFORM = "uniform"
    NORMAL = "normal"
    SKEWED = "skewed"
    CLUB = "club"


@dataclass
class RSGConfig:
    """Configuration for Random Session Generator."""

    num_players: int
    num_keepers: int = 0
    rating_distribution: RatingDistribution = RatingDistribution.NORMAL
    rating_range: Tuple[float, float] = (1.0, 10.0)
    seed: Optional[int] = None
    max_goals: int = 6
    first_session: datetime = datetime(2025, 1, 6, 20, 0)
    days_between_sessions: int = 7


class RandomSessionGenerator:
    """Creates random rosters and played sessions from one seeded source."""

    def __init__(self, config: RSGConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def create_players(self) -> List[Player]:
        """Create players based on configuration."""
        players = []
        keeper_ids = set(
            self.random.sample(range(self.config.num_players), self.config.num_keepers)
        )
        for i in range(self.config.num_players):
            rating = self._generate_rating()
            players.append(
                Player(
                    id=i + 1,
                    name=f"Player-{i + 1:02d}",
                    rating=rating,
                    is_keeper=i in keeper_ids,
                    is_fixed_member=self.random.random() < 0.7,
                )
            )
        logger.info(
            "Created %s players (%s keepers) with %s distribution",
            len(players),
            self.config.num_keepers,
            self.config.rating_distribution.value,
        )
        return players

    def _generate_rating(self) -> float:
        low, high = self.config.rating_range
        dist = self.config.rating_distribution
        if dist == RatingDistribution.UNIFORM:
            rating = self.random.uniform(low, high)
        elif dist == RatingDistribution.NORMAL:
            mean = (low + high) / 2
            std_dev = (high - low) / 6
            rating = max(low, min(high, self.random.gauss(mean, std_dev)))
        elif dist == RatingDistribution.SKEWED:
            middle = (low + high) / 2
            if self.random.random() < 0.7:
                rating = self.random.uniform(low, middle)
            else:
                rating = self.random.uniform(middle, high)
        else:
            base = self.random.choice([3.0, 4.5, 6.0, 7.5])
            rating = max(low, min(high, self.random.uniform(base - 0.5, base + 0.5)))
        return round(rating, 2)

    def random_teams(self, players: List[Player], team_count: int) -> Teams:
        """Split players into the standard size profile without balancing."""
        shuffled = list(players)
        self.random.shuffle(shuffled)
        teams: Teams = []
        cursor = 0
        for size in team_sizes(len(shuffled), team_count):
            teams.append(shuffled[cursor : cursor + size])
            cursor += size
        return teams

    def _simulate_goals(self, team: Team) -> List[Goal]:
        goals = self.random.randint(0, self.config.max_goals)
        scored = {}
        for _ in range(goals):
            scorer = self.random.choice(team)
            scored[scorer.id] = scored.get(scorer.id, 0) + 1
        return [Goal(player_id=pid, count=c) for pid, c in scored.items()]

    def _play(self, teams: Teams, pairings) -> List[MatchResult]:
        return [
            MatchResult(
                team1_index=a,
                team2_index=b,
                team1_goals=self._simulate_goals(teams[a]),
                team2_goals=self._simulate_goals(teams[b]),
            )
            for a, b in pairings
        ]

    def generate_session(
        self, players: List[Player], team_count: int, date: datetime
    ) -> GameSession:
        """Play one session; with four or more teams round two is scheduled."""
        teams = self.random_teams(players, team_count)
        round1 = self._play(teams, round_one_matches(team_count))
        round2: List[MatchResult] = []
        if team_count >= 4:
            standings = compute_team_standings(team_count, round1)
            pairings = schedule_round_two([r.pairing for r in round1], standings)
            round2 = self._play(teams, pairings)
        return GameSession(
            date=date, teams=teams, round1_results=round1, round2_results=round2
        )

    def generate_season(
        self,
        players: List[Player],
        num_sessions: int,
        team_count: int,
        attendance_rate: float = 1.0,
    ) -> List[GameSession]:
        """Play ``num_sessions`` sessions with a random attending subset each."""
        sessions = []
        date = self.config.first_session
        min_players = team_count * 4
        for _ in range(num_sessions):
            attending = [p for p in players if self.random.random() < attendance_rate]
            if len(attending) < min_players:
                attending = list(players)
            attending = attending[: team_count * 5]
            sessions.append(self.generate_session(attending, team_count, date))
            date += timedelta(days=self.config.days_between_sessions)
        logger.info("Generated %s sessions with %s teams", len(sessions), team_count)
        return sessions
