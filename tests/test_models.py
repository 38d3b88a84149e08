from datetime import timezone

import pytest

from bounceball.exceptions import InvalidConstraintException
from bounceball.models import (
    Apart,
    GameSession,
    MustBeFive,
    Player,
    Together,
    Versus,
    constraint_from_dict,
    constraint_to_dict,
)


def test_session_from_dict_parses_iso_date_and_teams():
    data = {
        "date": "2025-01-01T00:00:00.000Z",
        "teams": [
            [{"id": 1, "name": "Anna", "rating": 6.5, "is_keeper": True}],
            [{"id": 2, "name": "Bram", "rating": 5.0}],
        ],
        "round1_results": [
            {
                "team1_index": 0,
                "team2_index": 1,
                "team1_goals": [{"player_id": 1, "count": 2}],
                "team2_goals": [],
            }
        ],
    }
    session = GameSession.from_dict(data)

    assert session.date.year == 2025
    assert session.date.tzinfo == timezone.utc
    assert session.teams[0][0] == Player(id=1, name="Anna", rating=6.5, is_keeper=True)
    assert session.round1_results[0].team1_score == 2
    assert session.round1_results[0].team2_score == 0
    assert session.round2_teams is None
    assert session.teams_for_round2 is session.teams


def test_session_team_lookup_out_of_range_is_empty():
    session = GameSession.from_dict({"date": "2025-03-01", "teams": []})
    assert session.team(1, 0) == []
    assert session.team(2, 5) == []


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"type": "together", "player_ids": [1, 2]}, Together(1, 2)),
        ({"type": "apart", "player_ids": [3, 4]}, Apart(3, 4)),
        ({"type": "versus", "player_ids": [5, 6]}, Versus(5, 6)),
        ({"type": "must_be_5", "player_ids": [7]}, MustBeFive(7)),
    ],
)
def test_constraint_from_dict(data, expected):
    constraint = constraint_from_dict(data)
    assert constraint == expected
    assert constraint_to_dict(constraint) == data


@pytest.mark.parametrize(
    "data",
    [
        {"type": "sometimes", "player_ids": [1, 2]},
        {"type": "together", "player_ids": [1]},
        {"type": "must_be_5", "player_ids": [1, 2]},
        {"type": "apart", "player_ids": [4, 4]},
    ],
)
def test_malformed_constraints_are_rejected(data):
    with pytest.raises(InvalidConstraintException):
        constraint_from_dict(data)


def test_player_with_rating_keeps_identity():
    player = Player(id=3, name="Cas", rating=4.0, is_keeper=True)
    updated = player.with_rating(4.1)
    assert updated.id == 3
    assert updated.is_keeper
    assert updated.rating == 4.1
    assert player.rating == 4.0
