"""Random ordering of participants before matching."""

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
from typing import Iterable, List, MutableSequence, Optional, TypeVar

T = TypeVar("T")


def shuffle(items: MutableSequence[T], rng: Optional[random.Random] = None) -> None:
    """Fisher-Yates shuffle of ``items`` in place.

    ``rng`` is any ``random.Random``; pass a seeded one for a reproducible
    order. Not suitable for anything security sensitive.
    """
    rng = rng or random.Random()
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def shuffled(items: Iterable[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a shuffled copy of ``items``; the input is left untouched."""
    copy = list(items)
    shuffle(copy, rng)
    return copy
