import random

import pytest

from fivewords.encoding import ALPHABET, filter_candidates

DISJOINT_WORDS = ["abcde", "fghij", "klmno", "pqrst", "uvwxy"]


def random_partition_words(rng: random.Random) -> list[str]:
    """Five words made of a random permutation of the alphabet (one letter left over)."""
    letters = rng.sample(ALPHABET, len(ALPHABET))
    return ["".join(letters[i : i + 5]) for i in range(0, 25, 5)]


@pytest.fixture
def synthetic_words() -> list[str]:
    """A small word list with several guaranteed solutions and some noise."""
    rng = random.Random(1234)
    words: list[str] = []
    for _ in range(6):
        words.extend(random_partition_words(rng))
    for _ in range(6):
        words.append("".join(rng.sample(ALPHABET, 5)))
    return words


@pytest.fixture
def synthetic_candidates(synthetic_words):
    return filter_candidates(synthetic_words)


def is_solution(masks: tuple[int, ...]) -> bool:
    """Check that `masks` are five pairwise-disjoint letter masks."""
    if len(masks) != 5:
        return False
    acc = 0
    for mask in masks:
        if acc & mask:
            return False
        acc |= mask
    return True
