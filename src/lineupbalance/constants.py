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

# --- Constants ---

# Court structure: two teams of two
SEATS_PER_COURT = 4
SEATS_PER_TEAM = 2

# Search defaults
DEFAULT_TRIALS = 1_000_000
DEFAULT_PROGRESS_EVERY = 1  # 0 disables progress lines

# Default roster: (name, rating), in seat order
DEFAULT_ROSTER = [
    ("A", 1.0),
    ("B", 1.2),
    ("C", 1.4),
    ("D", 1.6),
    ("E", 1.8),
    ("F", 2.0),
    ("G", 2.2),
    ("H", 2.4),
    ("I", 2.6),
    ("J", 2.8),
    ("K", 3.0),
    ("L", 3.2),
]

# Output formatting
SCORE_DECIMALS = 3
REPORT_RATING_DECIMALS = 1
TEAM_SEPARATOR = " – "  # en dash between the two teams of a court
PARTNER_SEPARATOR = " / "

# Exit codes
EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INTERRUPTED = 130
EXIT_BROKEN_PIPE = 141  # 128 + SIGPIPE
