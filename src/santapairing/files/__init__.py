"""Text file collaborators: the names roster and the assignments record."""

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

from santapairing.files.assignments import (
    AssignmentRun,
    format_assignments,
    read_assignment_runs,
    read_previous_pairs,
    write_assignments,
)
from santapairing.files.names import (
    Roster,
    load_roster,
    read_groups,
    read_participants,
)

__all__ = [
    "AssignmentRun",
    "Roster",
    "format_assignments",
    "load_roster",
    "read_assignment_runs",
    "read_groups",
    "read_participants",
    "read_previous_pairs",
    "write_assignments",
]
