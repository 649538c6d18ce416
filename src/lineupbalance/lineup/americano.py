"""Built-in Americano lineup: 12 players, 11 rounds, 3 courts.

Every player partners every other player exactly once over the 11 rounds.
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

from lineupbalance.lineup.template import LineupTemplate

AMERICANO_12_SEATS = 12

# https://americano-padel.com/r/168ACC25-3D27-46FF-9C0E-9FA3B655AF4433
AMERICANO_12_LINEUP = (
    ((11, 4, 3, 2), (8, 5, 7, 0), (10, 1, 6, 9)),
    ((8, 6, 4, 9), (3, 10, 11, 1), (2, 0, 7, 5)),
    ((3, 5, 2, 10), (7, 9, 4, 6), (8, 11, 0, 1)),
    ((4, 1, 11, 0), (8, 2, 9, 10), (6, 5, 7, 3)),
    ((7, 8, 3, 1), (11, 6, 4, 5), (10, 0, 9, 2)),
    ((11, 2, 6, 0), (3, 9, 7, 1), (8, 4, 5, 10)),
    ((5, 1, 4, 10), (8, 0, 6, 3), (7, 2, 11, 9)),
    ((8, 9, 11, 5), (7, 4, 2, 1), (6, 10, 3, 0)),
    ((4, 0, 7, 10), (11, 3, 9, 5), (8, 1, 6, 2)),
    ((5, 2, 6, 1), (8, 10, 7, 11), (9, 0, 4, 3)),
    ((8, 3, 4, 2), (9, 1, 5, 0), (7, 6, 11, 10)),
)


def default_template() -> LineupTemplate:
    """Return the validated 12 player Americano template."""
    return LineupTemplate.from_lists(AMERICANO_12_LINEUP, AMERICANO_12_SEATS)
