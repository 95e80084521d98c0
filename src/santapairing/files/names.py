"""Reading the participant roster from a names file.

Each line of the file is one group (a household, a couple, ...) with names
separated by commas. A line with a single name is someone on their own::

    Ann, Bob
    Carol
    Dave, Erin, Frank
"""

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

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from santapairing.constants import FILE_ENCODING, NAME_SEPARATOR
from santapairing.exceptions import FileLoadException
from santapairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class Roster:
    """Participants and groups read from one names file."""

    participants: List[str] = field(default_factory=list)
    groups: List[List[str]] = field(default_factory=list)


def read_lines(path: Union[str, Path]) -> List[str]:
    """Return the lines of a UTF-8 text file.

    Raises:
        FileLoadException: The file is missing or unreadable
    """
    path = Path(path)
    if not path.exists():
        raise FileLoadException(f"File not found: {path}")
    try:
        return path.read_text(encoding=FILE_ENCODING).splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise FileLoadException(f"Could not read {path}: {e}") from e


def parse_group(line: str) -> List[str]:
    """Split one line into trimmed, non-blank names."""
    names = (name.strip() for name in line.split(NAME_SEPARATOR))
    return [name for name in names if name]


def read_groups(path: Union[str, Path]) -> List[List[str]]:
    """Return one group per non-blank line, in file order."""
    return [group for group in map(parse_group, read_lines(path)) if group]


def read_participants(path: Union[str, Path]) -> List[str]:
    """Return every name in the file, in file order."""
    return [name for group in read_groups(path) for name in group]


def load_roster(path: Union[str, Path]) -> Roster:
    """Read participants and groups with a single pass over the file.

    Raises:
        FileLoadException: The file is missing or unreadable
    """
    groups = read_groups(path)
    roster = Roster(
        participants=[name for group in groups for name in group],
        groups=groups,
    )
    logger.info(
        "Loaded %d participants in %d groups from %s",
        len(roster.participants),
        len(roster.groups),
        path,
    )
    return roster
