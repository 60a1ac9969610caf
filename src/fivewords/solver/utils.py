"""Shared masking logic for the sequential and parallel search engines."""

from collections.abc import Iterator
from typing import NamedTuple, TypeAlias

import numpy as np

N_WORDS = 5
"""Number of words in a solution."""

Solution: TypeAlias = tuple[int, int, int, int, int]
"""Five pairwise-disjoint letter masks, taken at strictly increasing candidate indices."""


class Partial(NamedTuple):
    """A partial solution, carried from one search stage to the next.

    Each stage extends `chosen` by one index taken from `pool`, so no stage ever needs to
    recompute the union mask or rescan indices that were already processed.
    """

    acc: int
    """Union of the masks chosen so far."""

    chosen: tuple[int, ...]
    """Candidate indices chosen so far, strictly increasing."""

    pool: np.ndarray
    """Ascending candidate indices after `chosen[-1]` whose masks are disjoint from `acc`."""


def compatible(candidates: np.ndarray, pool: np.ndarray, acc: int) -> np.ndarray:
    """Return the indices in `pool` whose masks share no letter with `acc`.

    Args:
        candidates (np.ndarray): The candidate set.
        pool (np.ndarray): Ascending indices into `candidates`.
        acc (int): Union mask of the letters already used.

    Returns:
        The surviving indices, still in ascending order.
    """
    return pool[(candidates[pool] & acc) == 0]


def seed(candidates: np.ndarray, index: int) -> Partial:
    """Create the partial solution whose first word is `candidates[index]`."""
    acc = int(candidates[index])
    rest = np.arange(index + 1, len(candidates))
    return Partial(acc=acc, chosen=(index,), pool=compatible(candidates, rest, acc))


def extend(candidates: np.ndarray, partial: Partial) -> Iterator[Partial]:
    """Yield every extension of a partial solution by one compatible word."""
    for pos, index in enumerate(partial.pool):
        acc = partial.acc | int(candidates[index])
        yield Partial(
            acc=acc,
            chosen=(*partial.chosen, int(index)),
            pool=compatible(candidates, partial.pool[pos + 1 :], acc),
        )


def to_solution(candidates: np.ndarray, chosen: tuple[int, ...]) -> Solution:
    """Convert chosen candidate indices to a tuple of masks."""
    a, b, c, d, e = (int(candidates[i]) for i in chosen)
    return (a, b, c, d, e)
