"""Factory functions for creating Player objects and rosters with validation.

This module provides a single point of entry for creating players with
proper validation and error handling.
"""

from typing import Any, Dict, Iterable, Mapping, Sequence, Tuple, Union

from lineupbalance.constants import DEFAULT_ROSTER
from lineupbalance.exceptions import (
    InvalidPlayerDataException,
    InvalidRosterException,
)
from lineupbalance.player.base_player import Player
from lineupbalance.type_hints import Roster
from lineupbalance.utils import setup_logger

logger = setup_logger(__name__)

RosterEntry = Union[Mapping[str, Any], Sequence[Any]]


def create_player(name: str, rating: Any) -> Player:
    """Create a validated Player.

    Args:
        name: Player's name, surrounding whitespace is stripped
        rating: Player's rating, anything ``validate_rating`` accepts

    Returns:
        Player instance

    Raises:
        InvalidPlayerDataException: If the name or rating is invalid
    """
    return Player(name=name, rating=rating)


def create_player_from_dict(data: Dict[str, Any]) -> Player:
    """Create a Player from a ``{"name": ..., "rating": ...}`` dictionary.

    Raises:
        InvalidPlayerDataException: If a key is missing or a value is invalid
    """
    missing = [key for key in ("name", "rating") if key not in data]
    if missing:
        raise InvalidPlayerDataException(
            f"Invalid player data: missing {', '.join(missing)}"
        )
    return create_player(data["name"], data["rating"])


def _entry_to_player(entry: RosterEntry) -> Player:
    if isinstance(entry, Player):
        return entry
    if isinstance(entry, Mapping):
        return create_player_from_dict(dict(entry))
    if isinstance(entry, (tuple, list)) and len(entry) == 2:
        return create_player(entry[0], entry[1])
    raise InvalidPlayerDataException(f"Cannot build a player from {entry!r}")


def create_roster(entries: Iterable[RosterEntry]) -> Roster:
    """Build an immutable roster.

    Entries may be Player instances, ``(name, rating)`` pairs or dicts.
    Roster order defines seat order: the first entry occupies seat 0.

    Raises:
        InvalidRosterException: If the roster is empty or names repeat
        InvalidPlayerDataException: If an entry is invalid
    """
    players: Tuple[Player, ...] = tuple(_entry_to_player(e) for e in entries)
    if not players:
        raise InvalidRosterException("Roster must contain at least one player")

    seen = set()
    duplicates = []
    for player in players:
        if player.name in seen:
            duplicates.append(player.name)
        seen.add(player.name)
    if duplicates:
        raise InvalidRosterException(
            f"Duplicate player names in roster: {', '.join(sorted(set(duplicates)))}"
        )

    logger.debug("Created roster of %s players", len(players))
    return players


def default_roster() -> Roster:
    """Return the built-in twelve player roster."""
    return create_roster(DEFAULT_ROSTER)
