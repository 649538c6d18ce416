import math

import pytest

from lineupbalance.exceptions import (
    InvalidPlayerDataException,
    InvalidRosterException,
    NameValidationException,
    RatingValidationException,
)
from lineupbalance.player import (
    Player,
    create_player,
    create_player_from_dict,
    create_roster,
    default_roster,
)
from lineupbalance.utils.validation import (
    validate_name_strict,
    validate_rating,
    validate_rating_strict,
)


def test_default_roster():
    roster = default_roster()

    assert [p.name for p in roster] == list("ABCDEFGHIJKL")
    assert roster[0].rating == 1.0
    assert roster[-1].rating == 3.2
    assert isinstance(roster, tuple)


def test_player_is_immutable():
    player = Player("A", 1.0)

    with pytest.raises(AttributeError):
        player.rating = 2.0


def test_player_str_uses_shortest_rating():
    assert str(Player("A", 1.0)) == "{A 1}"
    assert str(Player("B", 1.2)) == "{B 1.2}"
    assert str(Player("C", 2.0000001)) == "{C 2.0000001}"


@pytest.mark.parametrize(
    "name,rating",
    [
        ("", 1.0),
        ("A", math.nan),
        ("A", "fast"),
        (None, 2.0),
    ],
)
def test_player_validates_on_construction(name, rating):
    with pytest.raises(InvalidPlayerDataException):
        Player(name, rating)


def test_player_normalizes_values():
    player = Player(" D ", 3)

    assert player.name == "D"
    assert player.rating == 3.0
    assert isinstance(player.rating, float)


def test_create_player_strips_and_converts():
    player = create_player("  Ana ", "2.5")

    assert player == Player("Ana", 2.5)


@pytest.mark.parametrize(
    "name,rating",
    [
        ("", 1.0),
        ("A", None),
        ("A", "fast"),
        ("A", math.nan),
        ("A", math.inf),
        ("A", True),
    ],
)
def test_create_player_rejects_bad_data(name, rating):
    with pytest.raises(InvalidPlayerDataException):
        create_player(name, rating)


def test_create_player_from_dict_requires_keys():
    assert create_player_from_dict({"name": "Z", "rating": 3}) == Player("Z", 3.0)

    with pytest.raises(InvalidPlayerDataException, match="missing rating"):
        create_player_from_dict({"name": "Z"})


def test_create_roster_accepts_mixed_entries():
    roster = create_roster([("A", 1), {"name": "B", "rating": 2}, Player("C", 3.0)])

    assert [p.name for p in roster] == ["A", "B", "C"]


def test_create_roster_rejects_empty_and_duplicates():
    with pytest.raises(InvalidRosterException):
        create_roster([])

    with pytest.raises(InvalidRosterException, match="A"):
        create_roster([("A", 1), ("B", 2), ("A", 3)])


def test_strict_validators_raise():
    with pytest.raises(RatingValidationException):
        validate_rating_strict("x")
    with pytest.raises(NameValidationException):
        validate_name_strict("   ")

    assert validate_rating(4).sanitized_value == 4.0
    assert not validate_rating(object())
