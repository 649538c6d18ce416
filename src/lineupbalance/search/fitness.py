"""Fitness of an assignment: how even are the matches it produces.

For every court in the template the two team rating sums are compared. The
worst (largest) absolute difference is the score the search minimises; the
mean difference is reported alongside it.
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
from typing import Any, Dict, List, Optional, Sequence

from lineupbalance.lineup.template import Court, LineupTemplate
from lineupbalance.player import Player


@dataclass(frozen=True)
class Score:
    """Worst-case and average team rating difference of one assignment."""

    worst_case: float
    average: float

    def improves_on(self, other: Optional["Score"]) -> bool:
        """True if this score should replace ``other`` as the best.

        Only a strictly lower worst case counts, so among equal scores the
        earliest one found is kept.
        """
        return other is None or self.worst_case < other.worst_case

    def to_dict(self) -> Dict[str, Any]:
        return {"worst_case": self.worst_case, "average": self.average}


def court_difference(assignment: Sequence[Player], court: Court) -> float:
    """Absolute difference between the two team rating sums on a court."""
    s0, s1, s2, s3 = court.seats
    return abs(
        assignment[s0].rating
        + assignment[s1].rating
        - assignment[s2].rating
        - assignment[s3].rating
    )


def match_differences(
    assignment: Sequence[Player], template: LineupTemplate
) -> List[float]:
    """Per-match differences in round then court order."""
    return [court_difference(assignment, court) for _, _, court in template.matches()]


def evaluate(assignment: Sequence[Player], template: LineupTemplate) -> Score:
    """Score an assignment against a template.

    Args:
        assignment: Players indexed by seat
        template: Validated template whose seats fit the assignment

    Returns:
        Score with the max and mean of the per-match differences
    """
    diffs = match_differences(assignment, template)
    return Score(worst_case=max(diffs), average=sum(diffs) / len(diffs))
