"""Random permutations of the roster."""

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

import random
from typing import Optional, Sequence

from lineupbalance.player import Player
from lineupbalance.type_hints import Assignment


class PermutationGenerator:
    """Produces uniformly random orderings of a fixed roster.

    ``random.Random.shuffle`` is a Fisher-Yates shuffle, so every ordering
    is equally likely. The roster itself is never touched; each call
    shuffles a fresh copy.
    """

    def __init__(
        self,
        roster: Sequence[Player],
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.roster = tuple(roster)
        if rng is not None:
            self.random = rng
        else:
            self.random = random.Random(seed) if seed is not None else random.Random()

    def shuffle(self) -> Assignment:
        players = list(self.roster)
        self.random.shuffle(players)
        return tuple(players)
