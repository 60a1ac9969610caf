"""Mapping of bit-encoded solutions back to words."""

from collections import defaultdict
from collections.abc import Iterable
from itertools import product
from typing import TypeAlias

from sortedcontainers import SortedSet

from fivewords.encoding import encode_word
from fivewords.errors import EncodingError
from fivewords.solver.utils import Solution

DecodedSolution: TypeAlias = tuple[str, str, str, str, str]
WordGroups: TypeAlias = dict[int, SortedSet]


def group_words_by_mask(words: Iterable[str]) -> WordGroups:
    """Group the words of a word list by their letter mask.

    Anagrams share a mask, so a group may hold several words.  Words that cannot be encoded are
    left out, since they can never be part of a solution.
    """
    groups: defaultdict[int, SortedSet] = defaultdict(SortedSet)
    for word in words:
        try:
            groups[encode_word(word)].add(word)
        except EncodingError:
            continue
    return dict(groups)  # Convert defaultdict to regular dict for return


def decode_solution(solution: Solution, word_groups: WordGroups) -> list[DecodedSolution]:
    """Expand a solution into every combination of words matching its masks.

    Args:
        solution (Solution): Five letter masks.
        word_groups (WordGroups): Mapping from mask to words, from `group_words_by_mask`.

    Returns:
        The Cartesian product of the word groups of each slot, in sorted order.

    Raises:
        KeyError: If a mask has no word in `word_groups`.
    """
    return list(product(*(word_groups[mask] for mask in solution)))


def decode_solutions(solutions: Iterable[Solution], words: Iterable[str]) -> list[DecodedSolution]:
    """Decode every solution against the original word list."""
    word_groups = group_words_by_mask(words)
    return [decoded for solution in solutions for decoded in decode_solution(solution, word_groups)]
