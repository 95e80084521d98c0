"""Reading and writing the assignments file.

The file is append-only; every run adds a block like::

    Generated on December 1, 2025 at 7:30 PM

    	Ann   -> Carol
    	Bob   -> Ann
    	Carol -> Bob

Any line containing ``->`` is read back as a ``giver -> recipient`` record, so
hand-written files without headers work as history too.
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
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Union

from dateutil import parser as date_parser

from santapairing.constants import (
    FILE_ENCODING,
    HEADER_PREFIX,
    PAIR_SEPARATOR,
    RECORD_INDENT,
)
from santapairing.exceptions import FileSaveException
from santapairing.files.names import read_lines
from santapairing.models.pairing_history import PairingHistory
from santapairing.type_hints import Pair
from santapairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class AssignmentRun:
    """One block of the assignments file."""

    generated_at: Optional[datetime] = None
    pairs: List[Pair] = field(default_factory=list)


# ========== Writing ==========


def format_timestamp(moment: datetime) -> str:
    """Format like ``October 19, 2026 at 3:04 PM``."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment:%B} {moment.day}, {moment.year} at {hour}:{moment:%M} {meridiem}"


def format_assignments(
    pairs: Iterable[Pair], generated_at: Optional[datetime] = None
) -> str:
    """Render one run as a block of text, pairs sorted by giver."""
    pairs = sorted(pairs, key=lambda pair: pair[0])
    generated_at = generated_at or datetime.now()

    # Pad to the longest name on either side
    width = max((max(len(g), len(r)) for g, r in pairs), default=0)
    records = "\n".join(
        f"{RECORD_INDENT}{giver.ljust(width)} {PAIR_SEPARATOR} {recipient}"
        for giver, recipient in pairs
    )
    return f"{HEADER_PREFIX} {format_timestamp(generated_at)}\n\n{records}\n\n"


def write_assignments(
    path: Union[str, Path],
    pairs: Iterable[Pair],
    generated_at: Optional[datetime] = None,
) -> Path:
    """Append one run to the assignments file.

    Returns:
        Absolute path of the file written

    Raises:
        FileSaveException: The file could not be written
    """
    path = Path(path)
    text = format_assignments(pairs, generated_at)
    try:
        with open(path, "a", encoding=FILE_ENCODING) as f:
            f.write(text)
    except OSError as e:
        logger.error("Failed to write assignments to %s: %s", path, e)
        raise FileSaveException(f"Could not write {path}: {e}") from e
    logger.info("Appended assignments to %s", path)
    return path.resolve()


# ========== Reading ==========


def _parse_header(line: str) -> Optional[datetime]:
    text = line.strip()[len(HEADER_PREFIX) :].strip()
    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError):
        logger.warning("Could not read the date of run header %r", line.strip())
        return None


def _parse_record(line: str) -> Optional[Pair]:
    parts = [part.strip() for part in line.split(PAIR_SEPARATOR)]
    giver, recipient = parts[0], parts[-1]
    if not giver or not recipient:
        logger.warning("Skipping incomplete assignment record %r", line.strip())
        return None
    return giver, recipient


def parse_assignment_runs(lines: Iterable[str]) -> List[AssignmentRun]:
    """Group ``giver -> recipient`` records into runs.

    Records that come before the first header form an undated run.
    """
    runs: List[AssignmentRun] = []
    for line in lines:
        if line.strip().startswith(HEADER_PREFIX):
            runs.append(AssignmentRun(generated_at=_parse_header(line)))
            continue
        if PAIR_SEPARATOR not in line:
            continue
        pair = _parse_record(line)
        if pair is None:
            continue
        if not runs:
            runs.append(AssignmentRun())
        runs[-1].pairs.append(pair)
    return runs


def read_assignment_runs(path: Union[str, Path]) -> List[AssignmentRun]:
    """Read every run from an assignments file.

    Raises:
        FileLoadException: The file is missing or unreadable
    """
    return parse_assignment_runs(read_lines(path))


def read_previous_pairs(
    path: Union[str, Path], lookback: Optional[int] = None
) -> PairingHistory:
    """Load history from an assignments file.

    Args:
        path: Assignments file
        lookback: Only use the last ``lookback`` runs; all runs when None

    Returns:
        PairingHistory, empty when the file does not exist yet
    """
    if not Path(path).exists():
        logger.warning("No previous assignments found at %s", path)
        return PairingHistory()

    runs = read_assignment_runs(path)
    if lookback is not None:
        runs = runs[-lookback:]

    history = PairingHistory()
    for run in runs:
        history.add_pairs(run.pairs)
    logger.info(
        "Loaded %d previous assignments from %d runs in %s",
        len(history),
        len(runs),
        path,
    )
    return history
