import random
from collections import Counter

import pytest

from santapairing.pairing.shuffle import shuffle, shuffled


def _fisher_yates_reference(items, seed):
    rng = random.Random(seed)
    items = list(items)
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def test_shuffled_is_a_permutation():
    items = ["Ann", "Bob", "Carol", "Dave", "Erin", "Frank"]
    result = shuffled(items, random.Random(7))

    assert sorted(result) == sorted(items)
    assert items == ["Ann", "Bob", "Carol", "Dave", "Erin", "Frank"]


def test_shuffle_works_in_place():
    items = list(range(10))
    assert shuffle(items, random.Random(3)) is None
    assert sorted(items) == list(range(10))


def test_fixed_seed_gives_fixed_sequence():
    items = list("ABCDEFGH")

    assert shuffled(items, random.Random(42)) == _fisher_yates_reference(items, 42)
    assert shuffled(items, random.Random(42)) == shuffled(items, random.Random(42))


@pytest.mark.parametrize("items", [[], ["only"]])
def test_short_sequences_are_unchanged(items):
    assert shuffled(items, random.Random(1)) == items


def test_positions_are_roughly_uniform():
    rng = random.Random(1234)
    items = ["A", "B", "C"]
    trials = 6000
    positions = {item: Counter() for item in items}

    for _ in range(trials):
        for index, item in enumerate(shuffled(items, rng)):
            positions[item][index] += 1

    expected = trials / len(items)
    for item in items:
        for index in range(len(items)):
            assert abs(positions[item][index] - expected) < expected * 0.15
