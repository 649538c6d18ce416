"""Text output for search progress and the final lineup."""

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

import sys
from typing import List, Optional, Sequence, TextIO

from lineupbalance.constants import (
    PARTNER_SEPARATOR,
    REPORT_RATING_DECIMALS,
    SCORE_DECIMALS,
    TEAM_SEPARATOR,
)
from lineupbalance.lineup.template import Court, LineupTemplate
from lineupbalance.player import Player
from lineupbalance.search.engine import BestResult, SearchResult
from lineupbalance.search.fitness import Score


def format_assignment(assignment: Sequence[Player]) -> str:
    """Render an assignment as ``[{A 1} {B 1.2} ...]``."""
    return "[" + " ".join(str(player) for player in assignment) + "]"


def _format_score(score: Score) -> str:
    return (
        f"max: {score.worst_case:.{SCORE_DECIMALS}f}, "
        f"avg: {score.average:.{SCORE_DECIMALS}f}"
    )


def format_progress_line(trial: int, score: Score, assignment: Sequence[Player]) -> str:
    return f"[{trial}] {_format_score(score)}, list: {format_assignment(assignment)}"


def format_best_line(best: BestResult) -> str:
    return f"Best - {_format_score(best.score)}, list: {format_assignment(best.assignment)}"


def _format_player(player: Player) -> str:
    return f"{player.name} ({player.rating:.{REPORT_RATING_DECIMALS}f})"


def format_court_line(
    court_number: int, assignment: Sequence[Player], court: Court
) -> str:
    """One court as ``  Court n: p1 (r1) / p2 (r2) – p3 (r3) / p4 (r4)``."""
    team_one = PARTNER_SEPARATOR.join(_format_player(assignment[s]) for s in court.team_one)
    team_two = PARTNER_SEPARATOR.join(_format_player(assignment[s]) for s in court.team_two)
    return f"  Court {court_number}: {team_one}{TEAM_SEPARATOR}{team_two}"


def render_lineup(assignment: Sequence[Player], template: LineupTemplate) -> str:
    """Render every round and court of the template with the seated players.

    Rounds and courts are numbered from 1. Each round is followed by a
    blank line.
    """
    lines: List[str] = []
    for round_number, round_courts in enumerate(template.rounds, start=1):
        lines.append(f"Round {round_number}")
        for court_number, court in enumerate(round_courts, start=1):
            lines.append(format_court_line(court_number, assignment, court))
        lines.append("")
    return "\n".join(lines) + "\n"


class ProgressPrinter:
    """Progress hook for LineupSearch that writes one line per reported trial."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def __call__(self, trial: int, score: Score, assignment: Sequence[Player]) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(format_progress_line(trial, score, assignment) + "\n")


def print_result(
    result: SearchResult,
    template: LineupTemplate,
    stream: Optional[TextIO] = None,
) -> None:
    """Write the summary line followed by the round/court report.

    Raises:
        SearchStateException: If the result holds no best assignment
    """
    stream = stream if stream is not None else sys.stdout
    best = result.best
    stream.write(format_best_line(best) + "\n")
    stream.write(render_lineup(best.assignment, template))
