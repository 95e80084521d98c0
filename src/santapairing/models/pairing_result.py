"""Result data classes for the matching engine and the retry loop."""

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
from enum import Enum
from typing import Dict, List, Optional, Tuple

from santapairing.type_hints import Pair


class FailureReason(Enum):
    """Why a single matching attempt gave up."""

    # Dead end at the first giver with nothing left to undo
    EXHAUSTED = "exhausted"
    # The per-attempt step bound was reached
    STEP_LIMIT = "step_limit"


@dataclass(frozen=True)
class MatchStep:
    """One step of the engine, for verbose output.

    Attributes
    ----------
    giver : str
        Giver being placed.
    available : tuple of str
        Available pool at this step, in participant order.
    candidates : tuple of str
        Subset of ``available`` the giver may legally draw.
    recipient : str or None
        Chosen recipient, or None when the step was a dead end.
    """

    giver: str
    available: Tuple[str, ...]
    candidates: Tuple[str, ...]
    recipient: Optional[str] = None

    @property
    def is_dead_end(self) -> bool:
        return self.recipient is None

    @property
    def rejected(self) -> Tuple[str, ...]:
        """Available recipients the constraints ruled out."""
        allowed = set(self.candidates)
        return tuple(name for name in self.available if name not in allowed)


@dataclass
class MatchResult:
    """Outcome of one engine invocation.

    A failed attempt is a normal result rather than an exception; it carries
    no partial pairs.
    """

    success: bool
    pairs: List[Pair] = field(default_factory=list)
    reason: Optional[FailureReason] = None
    steps: int = 0
    backtracks: int = 0

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.success

    def __repr__(self) -> str:
        status = "SUCCESS" if self.success else f"FAILED({self.reason.value})"
        return f"MatchResult({status}, steps={self.steps}, backtracks={self.backtracks})"


@dataclass
class PairingResult:
    """Successful result of the reshuffle-and-match loop."""

    pairs: List[Pair]
    attempts: int
    steps: int = 0
    backtracks: int = 0

    def as_dict(self) -> Dict[str, str]:
        """Map each giver to their recipient."""
        return dict(self.pairs)

    def sorted_pairs(self) -> List[Pair]:
        """Pairs ordered by giver name, as they are written out."""
        return sorted(self.pairs, key=lambda pair: pair[0])


#  LocalWords:  PairingResult MatchResult
