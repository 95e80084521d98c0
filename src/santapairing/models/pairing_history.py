"""Data model for past Secret Santa assignments."""

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
from typing import Dict, FrozenSet, Iterable, Set

from santapairing.type_hints import HistoryMapping, Pair


@dataclass
class PairingHistory:
    """
    Tracks who gave to whom in earlier runs.

    Gifts are directed: Ann giving to Bob last year does not stop Bob from
    drawing Ann this year.

    Attributes
    ----------
    previous_recipients : dict of str to set of str
        Mapping of each giver to everyone they have given to before.
    """

    previous_recipients: Dict[str, Set[str]] = field(default_factory=dict)

    def add_pairing(self, giver: str, recipient: str) -> None:
        """Record that ``giver`` gave to ``recipient``."""
        self.previous_recipients.setdefault(giver, set()).add(recipient)

    def add_pairs(self, pairs: Iterable[Pair]) -> None:
        for giver, recipient in pairs:
            self.add_pairing(giver, recipient)

    def has_given(self, giver: str, recipient: str) -> bool:
        """Check if ``giver`` has given to ``recipient`` before."""
        return recipient in self.previous_recipients.get(giver, ())

    def recipients_of(self, giver: str) -> FrozenSet[str]:
        return frozenset(self.previous_recipients.get(giver, ()))

    def restricted_to(self, participants: Iterable[str]) -> "PairingHistory":
        """Return a copy that only mentions the given participants.

        Records where either side is not taking part this time carry no
        constraint and are dropped.
        """
        current = set(participants)
        restricted = PairingHistory()
        for giver, recipients in self.previous_recipients.items():
            if giver not in current:
                continue
            kept = {recipient for recipient in recipients if recipient in current}
            if kept:
                restricted.previous_recipients[giver] = kept
        return restricted

    def as_mapping(self) -> Dict[str, FrozenSet[str]]:
        """Read-only snapshot, suitable for the matching engine."""
        return {
            giver: frozenset(recipients)
            for giver, recipients in self.previous_recipients.items()
        }

    def __len__(self) -> int:
        return sum(len(recipients) for recipients in self.previous_recipients.values())

    @classmethod
    def from_pairs(cls, pairs: Iterable[Pair]) -> "PairingHistory":
        history = cls()
        history.add_pairs(pairs)
        return history

    @classmethod
    def from_mapping(cls, mapping: HistoryMapping) -> "PairingHistory":
        """Build a history from ``{giver: [recipient, ...]}``."""
        return cls(
            previous_recipients={
                giver: set(recipients) for giver, recipients in mapping.items()
            }
        )
