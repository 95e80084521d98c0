"""Secret Santa matching engine.

Assigns every participant exactly one recipient, walking the givers in the
order they are given and undoing a single step whenever a giver is left with
no legal recipient. For a fixed participant order the result is fully
deterministic; callers randomise by shuffling the participants first.
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

from bisect import insort
from typing import Callable, Dict, FrozenSet, List, Optional, Set, Union

from santapairing.models.pairing_history import PairingHistory
from santapairing.models.pairing_result import FailureReason, MatchResult, MatchStep
from santapairing.type_hints import Groups, HistoryMapping, Pair, Participants
from santapairing.utils import setup_logger

logger = setup_logger(__name__)

StepCallback = Callable[[MatchStep], None]


def _build_exclusions(groups: Groups) -> Dict[str, FrozenSet[str]]:
    """Map each grouped participant to everyone they may not draw.

    Someone listed in several groups is kept away from all of them.
    """
    exclusions: Dict[str, Set[str]] = {}
    for group in groups:
        members = set(group)
        for member in members:
            exclusions.setdefault(member, set()).update(members)
    return {name: frozenset(members) for name, members in exclusions.items()}


def _recipient_sets(
    history: Union[HistoryMapping, PairingHistory, None],
) -> Dict[str, FrozenSet[str]]:
    if history is None:
        return {}
    if isinstance(history, PairingHistory):
        return history.as_mapping()
    return {giver: frozenset(recipients) for giver, recipients in history.items()}


def match(
    participants: Participants,
    groups: Groups = (),
    history: Union[HistoryMapping, PairingHistory, None] = None,
    allow_reciprocal: bool = False,
    max_steps: Optional[int] = None,
    on_step: Optional[StepCallback] = None,
) -> MatchResult:
    """
    Pair every participant with a recipient.

    - participants: givers in the order they are placed; also the order
      candidates are offered in
    - groups: collections of participants that must not draw each other
    - history: giver -> recipients to avoid (previous years)
    - allow_reciprocal: if False, B may not draw A once A has drawn B
    - max_steps: optional bound on engine steps for this attempt
    - on_step: called with a MatchStep after every placement or dead end

    Returns a MatchResult. Infeasibility is reported through
    ``MatchResult.success``/``reason``, never raised.

    Each giver keeps a cursor into its candidate list. A dead end steps back
    one giver, hands that giver's recipient back to the pool and resets the
    cursor of the giver that got stuck; the giver stepped back to resumes
    with its next untried candidate.
    """
    count = len(participants)
    if count == 0:
        return MatchResult(success=False, reason=FailureReason.EXHAUSTED)

    exclusions = _build_exclusions(groups)
    previous = _recipient_sets(history)

    # Pool of participant indices, kept sorted so candidates follow input order
    available: List[int] = list(range(count))
    pairs: List[Pair] = []
    # recipient -> giver, for the reciprocal check
    giver_of: Dict[str, str] = {}
    # Per-giver position of the next candidate to try
    cursor: List[int] = [0] * count
    # Index of the recipient chosen by each placed giver
    chosen: List[int] = []

    steps = 0
    backtracks = 0
    g = 0

    while g < count:
        if max_steps is not None and steps >= max_steps:
            logger.debug(
                "Step limit of %d reached at giver %d/%d", max_steps, g, count
            )
            return MatchResult(
                success=False,
                reason=FailureReason.STEP_LIMIT,
                steps=steps,
                backtracks=backtracks,
            )
        steps += 1

        giver = participants[g]
        excluded = exclusions.get(giver, frozenset())
        already_given = previous.get(giver, frozenset())
        reciprocal = None if allow_reciprocal else giver_of.get(giver)

        candidates = [
            index
            for index in available
            if participants[index] != giver
            and participants[index] not in excluded
            and participants[index] not in already_given
            and participants[index] != reciprocal
        ]

        if cursor[g] < len(candidates):
            index = candidates[cursor[g]]
            recipient = participants[index]
            cursor[g] += 1

            if on_step is not None:
                on_step(
                    MatchStep(
                        giver=giver,
                        available=tuple(participants[i] for i in available),
                        candidates=tuple(participants[i] for i in candidates),
                        recipient=recipient,
                    )
                )
            logger.debug(
                "%s -> %s (candidate %d of %d)",
                giver,
                recipient,
                cursor[g],
                len(candidates),
            )

            pairs.append((giver, recipient))
            giver_of[recipient] = giver
            chosen.append(index)
            available.remove(index)
            g += 1
            continue

        # Dead end
        if on_step is not None:
            on_step(
                MatchStep(
                    giver=giver,
                    available=tuple(participants[i] for i in available),
                    candidates=tuple(participants[i] for i in candidates),
                )
            )

        if not pairs:
            logger.debug("No recipient left for first giver %s", giver)
            return MatchResult(
                success=False,
                reason=FailureReason.EXHAUSTED,
                steps=steps,
                backtracks=backtracks,
            )

        logger.debug("Dead end at %s, stepping back", giver)
        cursor[g] = 0
        g -= 1
        backtracks += 1
        index = chosen.pop()
        previous_giver, recipient = pairs.pop()
        if giver_of.get(recipient) == previous_giver:
            del giver_of[recipient]
        insort(available, index)

    return MatchResult(success=True, pairs=pairs, steps=steps, backtracks=backtracks)
