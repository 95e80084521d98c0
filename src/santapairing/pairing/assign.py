"""Reshuffle-and-match loop around the matching engine."""

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

import random
from typing import Optional, Union

from santapairing.constants import MAX_ATTEMPTS, STEP_BUDGET_FACTOR
from santapairing.exceptions import NoPairingAvailableException
from santapairing.models.pairing_history import PairingHistory
from santapairing.models.pairing_result import PairingResult
from santapairing.pairing.engine import StepCallback, match
from santapairing.pairing.shuffle import shuffled
from santapairing.type_hints import Groups, HistoryMapping, Participants
from santapairing.utils import setup_logger
from santapairing.utils.validation import require_valid_input

logger = setup_logger(__name__)


def default_max_steps(count: int) -> int:
    """Per-attempt engine step budget for ``count`` participants."""
    return STEP_BUDGET_FACTOR * count * count


def assign_pairs(
    participants: Participants,
    groups: Groups = (),
    history: Union[HistoryMapping, PairingHistory, None] = None,
    allow_reciprocal: bool = False,
    max_attempts: int = MAX_ATTEMPTS,
    rng: Optional[random.Random] = None,
    max_steps: Optional[int] = None,
    on_step: Optional[StepCallback] = None,
) -> PairingResult:
    """Shuffle and match until a valid assignment is found.

    Args:
        participants: Everyone taking part
        groups: Households (or similar) that must not draw each other
        history: Recipients each giver must avoid
        allow_reciprocal: Allow A->B together with B->A
        max_attempts: Number of shuffles to try
        rng: Random source for the shuffles (seed it for repeatable runs)
        max_steps: Per-attempt bound on engine steps; defaults to
            :func:`default_max_steps` of the participant count
        on_step: Receives every engine step of every attempt

    Returns:
        PairingResult of the first successful attempt

    Raises:
        ValidationException: Input that no shuffle can fix
        NoPairingAvailableException: Every attempt failed
    """
    if isinstance(history, PairingHistory):
        history = history.as_mapping()
    history = history or {}

    require_valid_input(participants, groups, history)
    if max_steps is None:
        max_steps = default_max_steps(len(participants))

    rng = rng or random.Random()
    for attempt in range(1, max_attempts + 1):
        order = shuffled(participants, rng)
        result = match(
            order,
            groups,
            history,
            allow_reciprocal=allow_reciprocal,
            max_steps=max_steps,
            on_step=on_step,
        )
        if result:
            logger.info(
                "Assigned %d participants on attempt %d (%d steps, %d backtracks)",
                len(result.pairs),
                attempt,
                result.steps,
                result.backtracks,
            )
            return PairingResult(
                pairs=result.pairs,
                attempts=attempt,
                steps=result.steps,
                backtracks=result.backtracks,
            )
        logger.debug("Attempt %d/%d failed: %r", attempt, max_attempts, result)

    logger.error("All %d attempts failed", max_attempts)
    raise NoPairingAvailableException(
        f"No valid Secret Santa assignments possible after {max_attempts} attempts.",
        attempts=max_attempts,
    )
