"""A rated player placed into a lineup."""

# Lineup Balance
# Copyright (C) 2025  Lineup Balance developers
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

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from lineupbalance.exceptions import InvalidPlayerDataException
from lineupbalance.utils.validation import validate_name, validate_rating


@dataclass(frozen=True)
class Player:
    """Represents a player on the roster.

    Players are immutable: the roster is built once and every trial works
    on a reordered copy of the same Player objects.

    Attributes:
        name: Player's display name
        rating: Player's skill rating
    """

    name: str
    rating: float

    def __post_init__(self):
        errors = []
        name_result = validate_name(self.name)
        if not name_result:
            errors.append(name_result.error_message)
        rating_result = validate_rating(self.rating)
        if not rating_result:
            errors.append(rating_result.error_message)
        if errors:
            raise InvalidPlayerDataException(f"Invalid player data: {'; '.join(errors)}")

        object.__setattr__(self, "name", name_result.sanitized_value)
        object.__setattr__(self, "rating", rating_result.sanitized_value)

    def __str__(self) -> str:
        # shortest round-trip form, whole numbers without ".0"
        rating = repr(self.rating)
        if rating.endswith(".0"):
            rating = rating[:-2]
        return f"{{{self.name} {rating}}}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {"name": self.name, "rating": self.rating}
