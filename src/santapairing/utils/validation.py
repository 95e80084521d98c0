"""Validation utilities for Santa Pairing.

This module checks the inputs of a pairing run before any attempt is made.
Problems found here are configuration errors: no amount of reshuffling fixes
them, so they are reported straight away instead of being retried.
"""

from typing import Dict, Iterable, List, Optional, Set

from santapairing.constants import MIN_PARTICIPANTS
from santapairing.exceptions import (
    InvalidGroupException,
    InvalidHistoryException,
    InvalidParticipantsException,
)
from santapairing.type_hints import Groups, HistoryMapping, Participants


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        offenders: Names that caused the failure, in input order
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        offenders: Optional[List[str]] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.offenders = offenders or []

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _unknown(names: Iterable[str], known: Set[str]) -> List[str]:
    seen = set()
    unknown = []
    for name in names:
        if name not in known and name not in seen:
            seen.add(name)
            unknown.append(name)
    return unknown


# ========== Participants ==========


def validate_participants(participants: Participants) -> ValidationResult:
    """Validate the participant list.

    Args:
        participants: Ordered participant names

    Returns:
        ValidationResult; invalid for fewer than two names, blank names or
        duplicate names

    Example:
        >>> bool(validate_participants(["Ann", "Bob"]))
        True
        >>> validate_participants(["Ann"]).error_message
        'At least 2 participants are required (got 1)'
    """
    if len(participants) < MIN_PARTICIPANTS:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"At least {MIN_PARTICIPANTS} participants are required "
                f"(got {len(participants)})"
            ),
        )

    blank = [name for name in participants if not name or not name.strip()]
    if blank:
        return ValidationResult(
            is_valid=False,
            error_message="Participant names must not be blank",
            offenders=blank,
        )

    seen = set()
    duplicates = []
    for name in participants:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        return ValidationResult(
            is_valid=False,
            error_message=f"Duplicate participants: {', '.join(duplicates)}",
            offenders=duplicates,
        )

    return ValidationResult(is_valid=True)


# ========== Groups ==========


def validate_groups(groups: Groups, participants: Participants) -> ValidationResult:
    """Check that every group member is a participant."""
    known = set(participants)
    unknown = _unknown((name for group in groups for name in group), known)
    if unknown:
        return ValidationResult(
            is_valid=False,
            error_message=f"Groups reference unknown participants: {', '.join(unknown)}",
            offenders=unknown,
        )
    return ValidationResult(is_valid=True)


# ========== History ==========


def validate_history(
    history: HistoryMapping, participants: Participants
) -> ValidationResult:
    """Check that every giver and recipient in history is a participant.

    History read from an assignments file usually mentions people who no
    longer take part; callers restrict it first with
    :meth:`PairingHistory.restricted_to`.
    """
    known = set(participants)
    names = []
    for giver, recipients in history.items():
        names.append(giver)
        names.extend(recipients)
    unknown = _unknown(names, known)
    if unknown:
        return ValidationResult(
            is_valid=False,
            error_message=f"History references unknown participants: {', '.join(unknown)}",
            offenders=unknown,
        )
    return ValidationResult(is_valid=True)


# ========== Remaining options ==========


def _blocked(
    participants: Participants, groups: Groups, history: Optional[HistoryMapping]
) -> Dict[str, Set[str]]:
    blocked = {name: {name} for name in participants}
    for group in groups:
        for member in group:
            blocked[member].update(group)
    for giver, recipients in (history or {}).items():
        blocked[giver].update(recipients)
    return blocked


def validate_options(
    participants: Participants,
    groups: Groups,
    history: Optional[HistoryMapping] = None,
) -> ValidationResult:
    """Check that everyone can still give to someone and receive from someone.

    Self, group and history exclusions are applied; the reciprocal rule is
    not, because it depends on the draw. Callers must have validated groups
    and history against the participants first.

    Example:
        >>> validate_options(["A", "B"], [["A", "B"]]).error_message
        'Nobody left for A, B to give to'
    """
    everyone = set(participants)
    blocked = _blocked(participants, groups, history)
    allowed = {name: everyone - blocked[name] for name in participants}

    no_recipient = [name for name in participants if not allowed[name]]
    if no_recipient:
        return ValidationResult(
            is_valid=False,
            error_message=f"Nobody left for {', '.join(no_recipient)} to give to",
            offenders=no_recipient,
        )

    receiving = set().union(*allowed.values())
    no_giver = [name for name in participants if name not in receiving]
    if no_giver:
        return ValidationResult(
            is_valid=False,
            error_message=f"Nobody left who can give to {', '.join(no_giver)}",
            offenders=no_giver,
        )

    return ValidationResult(is_valid=True)


def require_valid_input(
    participants: Participants,
    groups: Groups,
    history: HistoryMapping,
) -> None:
    """Raise the matching ValidationException for the first problem found.

    Raises:
        InvalidParticipantsException: Too few, blank or duplicate participants
        InvalidGroupException: A group member is not participating, or
            groups alone leave someone without a recipient or a giver
        InvalidHistoryException: A history entry names a non-participant,
            or history leaves someone without a recipient or a giver
    """
    result = validate_participants(participants)
    if not result:
        raise InvalidParticipantsException(result.error_message)

    result = validate_groups(groups, participants)
    if not result:
        raise InvalidGroupException(result.error_message)

    result = validate_options(participants, groups)
    if not result:
        raise InvalidGroupException(result.error_message)

    result = validate_history(history, participants)
    if not result:
        raise InvalidHistoryException(result.error_message)

    result = validate_options(participants, groups, history)
    if not result:
        raise InvalidHistoryException(result.error_message)
