import pytest

from bounceball.balancing import ConstraintValidator, is_composition_valid
from bounceball.balancing.composition import (
    compositions_identical,
    has_valid_keeper_distribution,
    rating_spread,
    round_one_matches,
    team_sizes,
)
from bounceball.exceptions import InvalidConstraintException
from bounceball.models import Apart, MustBeFive, Player, Together, Versus


def _team(*ids, keepers=()):
    return [Player(id=i, name=f"P{i}", rating=float(i), is_keeper=i in keepers) for i in ids]


def _four_teams():
    return [_team(1, 2, 3, 4, 5), _team(6, 7, 8, 9), _team(10, 11, 12, 13), _team(14, 15, 16, 17)]


def test_no_constraints_is_always_valid():
    assert ConstraintValidator([]).is_valid(_four_teams())


def test_together_and_apart():
    teams = _four_teams()
    assert is_composition_valid(teams, [Together(1, 5)])
    assert not is_composition_valid(teams, [Together(1, 6)])
    assert is_composition_valid(teams, [Apart(1, 6)])
    assert not is_composition_valid(teams, [Apart(2, 3)])


def test_versus_needs_opposing_teams_of_the_same_match():
    teams = _four_teams()
    # team 0 plays team 1, team 2 plays team 3
    assert is_composition_valid(teams, [Versus(1, 6)])
    assert is_composition_valid(teams, [Versus(15, 11)])
    assert not is_composition_valid(teams, [Versus(1, 10)])
    assert not is_composition_valid(teams, [Versus(1, 2)])


def test_versus_with_explicit_matches():
    teams = _four_teams()
    matches = [(0, 3), (1, 2)]
    assert is_composition_valid(teams, [Versus(1, 14)], matches=matches)
    assert not is_composition_valid(teams, [Versus(1, 6)], matches=matches)


def test_must_be_five():
    teams = _four_teams()
    assert is_composition_valid(teams, [MustBeFive(3)])
    assert not is_composition_valid(teams, [MustBeFive(7)])


def test_single_failure_rejects_whole_composition():
    teams = _four_teams()
    constraints = [Together(1, 2), Apart(1, 6), MustBeFive(9)]
    assert not is_composition_valid(teams, constraints)


def test_constraint_on_absent_player():
    teams = _four_teams()
    # first player absent: skipped
    assert is_composition_valid(teams, [Together(99, 1)])
    # second player absent: together and versus fail, apart holds
    assert not is_composition_valid(teams, [Together(1, 99)])
    assert not is_composition_valid(teams, [Versus(1, 99)])
    assert is_composition_valid(teams, [Apart(1, 99)])


def test_keeper_distribution():
    assert has_valid_keeper_distribution(
        [_team(1, 2, 3, 4, keepers={1}), _team(5, 6, 7, 8)]
    )
    assert not has_valid_keeper_distribution(
        [_team(1, 2, 3, 4, keepers={1, 2}), _team(5, 6, 7, 8)]
    )


def test_team_sizes_profile_puts_extra_players_first():
    assert team_sizes(18, 4) == [5, 5, 4, 4]
    assert team_sizes(9, 2) == [5, 4]
    assert team_sizes(24, 6) == [4, 4, 4, 4, 4, 4]


def test_round_one_matches_pair_neighbours():
    assert round_one_matches(2) == [(0, 1)]
    assert round_one_matches(6) == [(0, 1), (2, 3), (4, 5)]


def test_rating_spread():
    assert rating_spread([_team(1, 3), _team(2, 4)]) == 1.0
    assert rating_spread([_team(1, 2)]) == 0.0


def test_compositions_identical_ignores_order():
    a = [_team(1, 2, 3, 4), _team(5, 6, 7, 8)]
    b = [_team(8, 7, 6, 5), _team(4, 3, 2, 1)]
    c = [_team(1, 2, 3, 5), _team(4, 6, 7, 8)]
    assert compositions_identical(a, b)
    assert not compositions_identical(a, c)
    assert not compositions_identical(a, a[:1])


def test_team_in_two_matches_is_rejected():
    with pytest.raises(InvalidConstraintException):
        ConstraintValidator([Versus(1, 6)], matches=[(0, 1), (1, 2)])
