"""Type hints used in Lineup Balance."""

from typing import Callable, Sequence, Tuple

# Four seats on one court: team one is [0:2], team two is [2:4]
CourtSeats = Tuple[int, int, int, int]
# Nested literal form of a template: rounds -> courts -> seats
TemplateLists = Sequence[Sequence[Sequence[int]]]

# One trial's permutation of the roster, indexed by seat
Assignment = Tuple["Player", ...]
Roster = Tuple["Player", ...]

# on_trial(trial, score, assignment)
TrialCallback = Callable[[int, "Score", Assignment], None]

#  LocalWords:  CourtSeats TemplateLists
