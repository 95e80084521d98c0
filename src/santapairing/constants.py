# Santa Pairing
# Copyright (C) 2025  Santa Pairing developers
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
DEFAULT_NAMES_FILE = "names.txt"
DEFAULT_ASSIGNMENTS_FILE = "assignments.txt"
FILE_ENCODING = "utf-8"

# Retry budget for reshuffle-and-match
MAX_ATTEMPTS = 1000
# Engine steps per attempt default to STEP_BUDGET_FACTOR * n * n
STEP_BUDGET_FACTOR = 100

MIN_PARTICIPANTS = 2

# Names file: one group per line
NAME_SEPARATOR = ","

# Assignments file
PAIR_SEPARATOR = "->"
HEADER_PREFIX = "Generated on"
RECORD_INDENT = "\t"

# Boolean spellings accepted on the command line and in prompts
TRUE_VALUES = ("true", "yes", "y", "1", "on")
FALSE_VALUES = ("false", "no", "n", "0", "off")

# Config file keys
CONFIG_KEYS = (
    "check_previous",
    "allow_reciprocal",
    "verbose",
    "max_attempts",
    "max_steps",
    "seed",
    "lookback",
)
