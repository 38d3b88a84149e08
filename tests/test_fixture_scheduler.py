import logging

import pytest

from bounceball.exceptions import PreconditionViolationException
from bounceball.models import Goal, Match, MatchResult, TeamStanding
from bounceball.scheduling import (
    compute_team_standings,
    find_rematches,
    schedule_round_two,
)


def _result(a, b, goals_a, goals_b):
    team1 = [Goal(player_id=100 + a, count=goals_a)] if goals_a else []
    team2 = [Goal(player_id=100 + b, count=goals_b)] if goals_b else []
    return MatchResult(team1_index=a, team2_index=b, team1_goals=team1, team2_goals=team2)


def _standings(*order):
    return [TeamStanding(team_index=i) for i in order]


def test_four_teams_winners_meet_and_losers_meet():
    results = [_result(0, 1, 2, 0), _result(2, 3, 1, 0)]
    standings = compute_team_standings(4, results)
    assert [s.team_index for s in standings] == [0, 2, 3, 1]

    pairings = schedule_round_two([r.pairing for r in results], standings)
    assert pairings == [(0, 2), (3, 1)]


def test_every_team_plays_exactly_once():
    round1 = [(0, 1), (2, 3), (4, 5)]
    pairings = schedule_round_two(round1, _standings(5, 3, 1, 0, 2, 4))
    teams = [t for pair in pairings for t in pair]
    assert sorted(teams) == list(range(6))
    assert find_rematches(pairings, round1) == []


def test_accepts_match_objects():
    round1 = [Match(0, 1), Match(2, 3)]
    assert schedule_round_two(round1, _standings(0, 1, 2, 3)) == [(0, 2), (1, 3)]


def test_forced_rematch_is_reported(caplog):
    round1 = [(0, 1), (2, 3), (4, 5)]
    with caplog.at_level(logging.WARNING):
        pairings = schedule_round_two(round1, _standings(0, 2, 1, 3, 4, 5))

    assert pairings == [(0, 2), (1, 3), (4, 5)]
    assert find_rematches(pairings, round1) == [(4, 5)]
    assert "rematch" in caplog.text


def test_two_teams_can_only_replay():
    assert schedule_round_two([(0, 1)], _standings(1, 0)) == [(1, 0)]


def test_standings_order_is_used_as_given():
    # unsorted input is not re-sorted
    standings = [
        TeamStanding(team_index=3, points=0),
        TeamStanding(team_index=0, points=3),
        TeamStanding(team_index=1, points=0),
        TeamStanding(team_index=2, points=3),
    ]
    assert schedule_round_two([(0, 1), (2, 3)], standings) == [(3, 0), (1, 2)]


@pytest.mark.parametrize(
    "round1, standings",
    [
        ([(0, 1), (2, 3)], _standings(0, 1, 2)),
        ([(0, 1), (2, 3)], _standings(0, 1, 2, 2)),
        ([(0, 1), (2, 7)], _standings(0, 1, 2, 3)),
    ],
)
def test_malformed_input_is_rejected(round1, standings):
    with pytest.raises(PreconditionViolationException):
        schedule_round_two(round1, standings)


def test_empty_schedule():
    assert schedule_round_two([], []) == []


def test_same_input_gives_same_pairings():
    # teams 0 to 3 all draw: equal points and goal difference
    results = [_result(0, 1, 1, 1), _result(2, 3, 2, 2), _result(4, 5, 3, 0)]
    round1 = [r.pairing for r in results]

    first = schedule_round_two(round1, compute_team_standings(6, results))
    second = schedule_round_two(round1, compute_team_standings(6, results))

    assert first == second
    # goals for, then team index, order the drawn teams
    assert [s.team_index for s in compute_team_standings(6, results)] == [4, 2, 3, 0, 1, 5]
    assert first == [(4, 2), (3, 0), (1, 5)]
