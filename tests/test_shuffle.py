"""Tests for the Fisher-Yates question shuffle."""

import random

from quiz_battle.core.shuffle import shuffle_questions


def test_shuffle_is_a_permutation():
    items = tuple(range(15))
    shuffled = shuffle_questions(items, random.Random(42))
    assert sorted(shuffled) == list(items)
    assert len(shuffled) == len(items)


def test_shuffle_does_not_touch_input():
    items = [1, 2, 3, 4, 5]
    shuffle_questions(items, random.Random(3))
    assert items == [1, 2, 3, 4, 5]


def test_same_seed_same_order():
    items = list(range(10))
    assert shuffle_questions(items, random.Random(5)) == shuffle_questions(items, random.Random(5))


def test_shuffle_reaches_every_position():
    rng = random.Random(0)
    first_positions = {shuffle_questions("abc", rng)[0] for _ in range(200)}
    assert first_positions == {"a", "b", "c"}


def test_trivial_inputs():
    rng = random.Random(1)
    assert shuffle_questions([], rng) == []
    assert shuffle_questions(["only"], rng) == ["only"]
