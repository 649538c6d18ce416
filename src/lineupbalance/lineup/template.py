"""Lineup templates: which seats share a court in each round.

A template is a fixed schedule of rounds. Each round lists its courts, and
each court lists four seat indices. Seats 0 and 1 form one team, seats 2 and
3 the other. Seat indices refer to roster slots, not to players: the search
decides which player sits in which slot.
"""

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

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from lineupbalance.constants import SEATS_PER_COURT, SEATS_PER_TEAM
from lineupbalance.exceptions import InvalidTemplateException
from lineupbalance.type_hints import CourtSeats, TemplateLists
from lineupbalance.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class Court:
    """Four seats playing one match, split into two teams."""

    seats: CourtSeats

    def __post_init__(self):
        seats = tuple(self.seats)
        if len(seats) != SEATS_PER_COURT:
            raise InvalidTemplateException(
                f"Court must have exactly {SEATS_PER_COURT} seats, got {len(seats)}"
            )
        if any(isinstance(s, bool) or not isinstance(s, int) for s in seats):
            raise InvalidTemplateException(f"Seat indices must be integers: {seats}")
        if len(set(seats)) != SEATS_PER_COURT:
            raise InvalidTemplateException(f"Court repeats a seat: {seats}")
        object.__setattr__(self, "seats", seats)

    @property
    def team_one(self) -> Tuple[int, int]:
        return self.seats[:SEATS_PER_TEAM]

    @property
    def team_two(self) -> Tuple[int, int]:
        return self.seats[SEATS_PER_TEAM:]


class LineupTemplate:
    """Validated, immutable round/court/seat structure.

    Attributes:
        rounds: Tuple of rounds, each a tuple of Court
        num_seats: Number of roster slots the template addresses

    Raises:
        InvalidTemplateException: On construction, if the template is empty,
            a seat is out of range, or a seat plays twice in one round
    """

    def __init__(self, rounds: Sequence[Sequence[Court]], num_seats: int):
        if isinstance(num_seats, bool) or not isinstance(num_seats, int):
            raise InvalidTemplateException(f"num_seats must be an integer: {num_seats!r}")
        if num_seats < SEATS_PER_COURT:
            raise InvalidTemplateException(
                f"Template needs at least {SEATS_PER_COURT} seats, got {num_seats}"
            )
        self._num_seats = num_seats
        self._rounds: Tuple[Tuple[Court, ...], ...] = tuple(
            tuple(round_courts) for round_courts in rounds
        )
        self._validate()

    @classmethod
    def from_lists(cls, rounds: TemplateLists, num_seats: int) -> "LineupTemplate":
        """Build a template from nested lists of seat indices.

        Example:
            >>> LineupTemplate.from_lists([[[0, 1, 2, 3]]], num_seats=4).num_matches
            1
        """
        built = []
        for round_index, round_courts in enumerate(rounds):
            courts = []
            for court_index, seats in enumerate(round_courts):
                try:
                    courts.append(Court(tuple(seats)))
                except InvalidTemplateException as e:
                    raise InvalidTemplateException(
                        f"Round {round_index + 1}, court {court_index + 1}: {e}"
                    ) from e
            built.append(courts)
        return cls(built, num_seats)

    def _validate(self) -> None:
        if not self._rounds:
            raise InvalidTemplateException("Template must contain at least one round")

        for round_index, round_courts in enumerate(self._rounds, start=1):
            if not round_courts:
                raise InvalidTemplateException(f"Round {round_index} has no courts")

            used = {}
            for court_index, court in enumerate(round_courts, start=1):
                if not isinstance(court, Court):
                    raise InvalidTemplateException(
                        f"Round {round_index}, court {court_index}: expected Court, "
                        f"got {type(court).__name__}"
                    )
                for seat in court.seats:
                    if not 0 <= seat < self._num_seats:
                        raise InvalidTemplateException(
                            f"Round {round_index}, court {court_index}: seat {seat} "
                            f"outside roster of {self._num_seats}"
                        )
                    if seat in used:
                        raise InvalidTemplateException(
                            f"Round {round_index}: seat {seat} plays on court "
                            f"{used[seat]} and court {court_index}"
                        )
                    used[seat] = court_index

        logger.debug(
            "Validated template: %s rounds, %s matches, %s seats",
            self.num_rounds,
            self.num_matches,
            self._num_seats,
        )

    @property
    def rounds(self) -> Tuple[Tuple[Court, ...], ...]:
        return self._rounds

    @property
    def num_seats(self) -> int:
        return self._num_seats

    @property
    def num_rounds(self) -> int:
        return len(self._rounds)

    @property
    def num_matches(self) -> int:
        return sum(len(round_courts) for round_courts in self._rounds)

    @property
    def num_courts(self) -> int:
        """Total courts played over all rounds, one match each."""
        return self.num_matches

    def matches(self) -> Iterator[Tuple[int, int, Court]]:
        """Yield ``(round_index, court_index, court)`` in round then court order."""
        for round_index, round_courts in enumerate(self._rounds):
            for court_index, court in enumerate(round_courts):
                yield round_index, court_index, court

    def to_lists(self):
        """Return the template as nested lists of seat indices."""
        return [[list(court.seats) for court in round_courts] for round_courts in self._rounds]

    def __eq__(self, other) -> bool:
        if not isinstance(other, LineupTemplate):
            return NotImplemented
        return self._num_seats == other._num_seats and self._rounds == other._rounds

    def __hash__(self) -> int:
        return hash((self._num_seats, self._rounds))

    def __repr__(self) -> str:
        return (
            f"LineupTemplate(rounds={self.num_rounds}, matches={self.num_matches}, "
            f"seats={self._num_seats})"
        )
