from itertools import combinations

import numpy as np

from fivewords.encoding import encode_word, filter_candidates, popcount
from fivewords.solver.sequential import search_sequential
from fivewords.solver.utils import compatible, extend, seed

from conftest import DISJOINT_WORDS, is_solution


def brute_force(candidates) -> set[tuple[int, ...]]:
    masks = [int(mask) for mask in candidates]
    return {combo for combo in combinations(masks, 5) if is_solution(combo)}


def test_single_disjoint_set():
    candidates = filter_candidates(DISJOINT_WORDS)
    solutions = search_sequential(candidates)
    assert solutions == [tuple(sorted(encode_word(w) for w in DISJOINT_WORDS))]


def test_too_few_candidates():
    assert search_sequential(filter_candidates(["aaaaa", "abcde"])) == []
    assert search_sequential(filter_candidates(DISJOINT_WORDS[:4])) == []


def test_empty_candidates():
    assert search_sequential(filter_candidates([])) == []
    assert search_sequential([]) == []


def test_search_soundness(synthetic_candidates):
    solutions = search_sequential(synthetic_candidates)
    assert solutions
    for solution in solutions:
        for a, b in combinations(solution, 2):
            assert a & b == 0
        assert popcount(np.bitwise_or.reduce(solution)) == 25


def test_search_completeness(synthetic_candidates):
    solutions = search_sequential(synthetic_candidates)
    assert set(solutions) == brute_force(synthetic_candidates)


def test_no_duplicate_solutions(synthetic_candidates):
    solutions = search_sequential(synthetic_candidates)
    assert len({frozenset(solution) for solution in solutions}) == len(solutions)


def test_solutions_in_lexicographic_order(synthetic_candidates):
    solutions = search_sequential(synthetic_candidates)
    assert solutions == sorted(solutions)
    # Each solution lists its masks by ascending candidate index
    assert all(list(solution) == sorted(solution) for solution in solutions)


def test_compatible_keeps_order_and_disjointness():
    candidates = np.array([0b00011, 0b00100, 0b01000, 0b10001, 0b11000], dtype=np.uint32)
    pool = np.arange(len(candidates))
    assert compatible(candidates, pool, 0b00001).tolist() == [1, 2, 4]
    assert compatible(candidates, pool[2:], 0b00001).tolist() == [2, 4]
    assert compatible(candidates, pool, 0b01001).tolist() == [1]
    assert compatible(candidates, pool, 0).tolist() == pool.tolist()


def test_seed_and_extend_respect_lower_bound():
    candidates = filter_candidates(DISJOINT_WORDS + ["zabcd"])
    partial = seed(candidates, 0)
    assert partial.chosen == (0,)
    assert all(index > 0 for index in partial.pool)
    for ext in extend(candidates, partial):
        assert ext.chosen[0] < ext.chosen[1]
        assert all(index > ext.chosen[-1] for index in ext.pool)
        assert ext.acc == int(candidates[ext.chosen[0]]) | int(candidates[ext.chosen[1]])
        assert all(int(candidates[index]) & ext.acc == 0 for index in ext.pool)


def test_is_solution():
    masks = tuple(encode_word(w) for w in DISJOINT_WORDS)
    assert is_solution(masks)
    assert not is_solution(masks[:4])
    assert not is_solution((*masks[:4], encode_word("abxyz")))
