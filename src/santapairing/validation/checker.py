"""Pairing checker - independent validation of a finished Secret Santa draw.

The checker does not share code with the engine: it re-derives every rule
from the raw inputs, so it can be used to audit results from any source
(including hand-edited assignment files).

Rules
-----
S1  Every participant gives exactly once and receives exactly once
S2  Nobody draws themselves
S3  Nobody draws someone from their own group
S4  Nobody draws a recipient they had before
S5  No reciprocal pairs (only when reciprocity is disallowed)
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

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence, Union

from santapairing.models.pairing_history import PairingHistory
from santapairing.type_hints import Groups, HistoryMapping, Pair, Participants
from santapairing.utils import setup_logger

logger = setup_logger(__name__)


class CriterionStatus(Enum):
    """Status of a single rule."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


@dataclass
class CriterionResult:
    """Result of validating a single rule."""

    criterion: str
    status: CriterionStatus
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def is_violation(self) -> bool:
        return self.status == CriterionStatus.VIOLATION


@dataclass
class ValidationReport:
    """Complete validation report for one draw."""

    criteria_results: List[CriterionResult]

    @property
    def violations(self) -> List[CriterionResult]:
        return [r for r in self.criteria_results if r.is_violation]

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def overall_status(self) -> CriterionStatus:
        if self.violations:
            return CriterionStatus.VIOLATION
        return CriterionStatus.COMPLIANT

    @property
    def summary(self) -> str:
        if self.is_valid:
            return f"All {len(self.criteria_results)} rules satisfied"
        failed = ", ".join(r.criterion for r in self.violations)
        return f"{len(self.violations)} rule(s) violated: {failed}"

    def __bool__(self) -> bool:
        return self.is_valid


class PairingValidator:
    """Validates a draw against the Secret Santa rules (S1-S5)."""

    def validate(
        self,
        pairs: Sequence[Pair],
        participants: Participants,
        groups: Groups = (),
        history: Union[HistoryMapping, PairingHistory, None] = None,
        allow_reciprocal: bool = False,
    ) -> ValidationReport:
        if isinstance(history, PairingHistory):
            history = history.as_mapping()
        history = history or {}

        report = ValidationReport(
            criteria_results=[
                self.check_s1_complete(pairs, participants),
                self.check_s2_no_self(pairs),
                self.check_s3_no_group(pairs, groups),
                self.check_s4_no_repeat(pairs, history),
                self.check_s5_no_reciprocal(pairs, allow_reciprocal),
            ]
        )
        if report.is_valid:
            logger.debug("Draw of %d pairs is valid", len(pairs))
        else:
            for violation in report.violations:
                logger.warning("%s: %s", violation.criterion, violation.description)
        return report

    def check_s1_complete(
        self, pairs: Sequence[Pair], participants: Participants
    ) -> CriterionResult:
        """S1: The draw is a bijection over the participants."""
        expected = Counter(participants)
        givers = Counter(giver for giver, _ in pairs)
        recipients = Counter(recipient for _, recipient in pairs)

        problems = {}
        if givers != expected:
            problems["givers"] = sorted(
                (givers - expected).keys() | (expected - givers).keys()
            )
        if recipients != expected:
            problems["recipients"] = sorted(
                (recipients - expected).keys() | (expected - recipients).keys()
            )

        if problems:
            names = sorted({n for names in problems.values() for n in names})
            return CriterionResult(
                criterion="S1",
                status=CriterionStatus.VIOLATION,
                description=f"Incomplete draw, check: {', '.join(names)}",
                details=problems,
            )
        return CriterionResult(
            criterion="S1",
            status=CriterionStatus.COMPLIANT,
            description="Everyone gives once and receives once",
        )

    def check_s2_no_self(self, pairs: Sequence[Pair]) -> CriterionResult:
        """S2: Nobody draws themselves."""
        offenders = [giver for giver, recipient in pairs if giver == recipient]
        if offenders:
            return CriterionResult(
                criterion="S2",
                status=CriterionStatus.VIOLATION,
                description=f"Self pairing: {', '.join(offenders)}",
                details={"participants": offenders},
            )
        return CriterionResult(
            criterion="S2",
            status=CriterionStatus.COMPLIANT,
            description="No self pairings",
        )

    def check_s3_no_group(
        self, pairs: Sequence[Pair], groups: Groups
    ) -> CriterionResult:
        """S3: Nobody draws a member of their own group."""
        if not groups:
            return CriterionResult(
                criterion="S3",
                status=CriterionStatus.NOT_APPLICABLE,
                description="No groups defined",
            )

        offending: List[Pair] = []
        for giver, recipient in pairs:
            if giver == recipient:
                continue
            if any(giver in group and recipient in group for group in groups):
                offending.append((giver, recipient))

        if offending:
            return CriterionResult(
                criterion="S3",
                status=CriterionStatus.VIOLATION,
                description="Same-group pairing: "
                + ", ".join(f"{g} -> {r}" for g, r in offending),
                details={"pairs": offending},
            )
        return CriterionResult(
            criterion="S3",
            status=CriterionStatus.COMPLIANT,
            description="No same-group pairings",
        )

    def check_s4_no_repeat(
        self, pairs: Sequence[Pair], history: HistoryMapping
    ) -> CriterionResult:
        """S4: Nobody draws a recipient from an earlier run."""
        if not history:
            return CriterionResult(
                criterion="S4",
                status=CriterionStatus.NOT_APPLICABLE,
                description="No history to check against",
            )

        offending = [
            (giver, recipient)
            for giver, recipient in pairs
            if recipient in history.get(giver, ())
        ]
        if offending:
            return CriterionResult(
                criterion="S4",
                status=CriterionStatus.VIOLATION,
                description="Repeat pairing: "
                + ", ".join(f"{g} -> {r}" for g, r in offending),
                details={"pairs": offending},
            )
        return CriterionResult(
            criterion="S4",
            status=CriterionStatus.COMPLIANT,
            description="No repeat pairings",
        )

    def check_s5_no_reciprocal(
        self, pairs: Sequence[Pair], allow_reciprocal: bool
    ) -> CriterionResult:
        """S5: No A -> B together with B -> A."""
        if allow_reciprocal:
            return CriterionResult(
                criterion="S5",
                status=CriterionStatus.NOT_APPLICABLE,
                description="Reciprocal pairs allowed",
            )

        drawn = set(pairs)
        offending = sorted(
            {
                tuple(sorted((giver, recipient)))
                for giver, recipient in pairs
                if giver != recipient and (recipient, giver) in drawn
            }
        )
        if offending:
            return CriterionResult(
                criterion="S5",
                status=CriterionStatus.VIOLATION,
                description="Reciprocal pairing: "
                + ", ".join(f"{a} <-> {b}" for a, b in offending),
                details={"pairs": offending},
            )
        return CriterionResult(
            criterion="S5",
            status=CriterionStatus.COMPLIANT,
            description="No reciprocal pairings",
        )


def create_pairing_validator() -> PairingValidator:
    """Create and configure pairing validator instance."""
    return PairingValidator()


def validate_pairs(pairs: Sequence[Pair], **kwargs) -> ValidationReport:
    """Quick validation function for a finished draw."""
    validator = create_pairing_validator()
    return validator.validate(pairs, **kwargs)
