"""Repeated random-trial search for the most balanced assignment.

Each trial shuffles the roster into the template's seats, scores the
result, and keeps it if its worst match is strictly more even than the best
seen so far. The number of trials is fixed up front; there is no early exit.
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

import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from lineupbalance.exceptions import InvalidRosterException, SearchStateException
from lineupbalance.lineup.template import LineupTemplate
from lineupbalance.player import Player
from lineupbalance.search.config import SearchConfig
from lineupbalance.search.fitness import Score, evaluate
from lineupbalance.search.shuffler import PermutationGenerator
from lineupbalance.type_hints import Assignment, TrialCallback
from lineupbalance.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class BestResult:
    """The retained assignment, its score, and the trial that produced it."""

    score: Score
    assignment: Assignment
    trial: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score.to_dict(),
            "assignment": [player.to_dict() for player in self.assignment],
            "trial": self.trial,
        }


@dataclass
class SearchResult:
    """Outcome of a completed search run."""

    best_result: Optional[BestResult]
    trials: int
    elapsed_seconds: float = 0.0

    @property
    def best(self) -> BestResult:
        if self.best_result is None:
            raise SearchStateException("No trial has been evaluated")
        return self.best_result


class LineupSearch:
    """Random search over roster permutations for one template.

    Args:
        roster: Players, one per template seat
        template: Validated lineup template
        config: Trial budget, seed and progress interval
        generator: Optional permutation source, built from ``config.seed`` if omitted
        on_trial: Optional ``on_trial(trial, score, assignment)`` progress hook

    Raises:
        InvalidRosterException: If the roster size differs from the template's seat count
    """

    def __init__(
        self,
        roster: Sequence[Player],
        template: LineupTemplate,
        config: Optional[SearchConfig] = None,
        generator: Optional[PermutationGenerator] = None,
        on_trial: Optional[TrialCallback] = None,
    ):
        self.roster = tuple(roster)
        self.template = template
        self.config = config if config is not None else SearchConfig()

        if len(self.roster) != template.num_seats:
            raise InvalidRosterException(
                f"Roster has {len(self.roster)} players but template has "
                f"{template.num_seats} seats"
            )

        self.generator = (
            generator
            if generator is not None
            else PermutationGenerator(self.roster, seed=self.config.seed)
        )
        self.on_trial = on_trial
        self.best_result: Optional[BestResult] = None

    def consider(self, trial: int, assignment: Assignment) -> bool:
        """Score one candidate and keep it if it beats the current best.

        Returns:
            True if the candidate became the new best
        """
        score = evaluate(assignment, self.template)

        if self.on_trial is not None and self.config.reports(trial):
            self.on_trial(trial, score, assignment)

        current = self.best_result.score if self.best_result is not None else None
        if not score.improves_on(current):
            return False

        self.best_result = BestResult(score=score, assignment=assignment, trial=trial)
        logger.debug(
            "Trial %s improved best: max %.3f, avg %.3f",
            trial,
            score.worst_case,
            score.average,
        )
        return True

    def run(self) -> SearchResult:
        """Run the full trial budget and return the best assignment found."""
        logger.info(
            "Starting search: %s trials over %s matches, seed=%s",
            self.config.trials,
            self.template.num_matches,
            self.config.seed,
        )
        start = time.perf_counter()

        for trial in range(self.config.trials):
            self.consider(trial, self.generator.shuffle())

        elapsed = time.perf_counter() - start
        result = SearchResult(
            best_result=self.best_result,
            trials=self.config.trials,
            elapsed_seconds=elapsed,
        )
        logger.info(
            "Search finished in %.2fs: best max %.3f found at trial %s",
            elapsed,
            result.best.score.worst_case,
            result.best.trial,
        )
        return result
