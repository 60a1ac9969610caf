"""Sequential five-word search."""

import numpy as np

from fivewords.encoding import MASK_DTYPE
from fivewords.solver.utils import Solution, compatible


def search_sequential(candidates: np.ndarray) -> list[Solution]:
    """Find every set of five pairwise-disjoint masks in the candidate set.

    Five nested loops pick indices `i < j < k < l < m`.  The running union of the masks chosen
    so far is carried into each level, and a candidate sharing any letter with it is skipped
    before descending.  Each level's pool is narrowed from the previous level's pool, since a
    candidate colliding with a partial union also collides with any extension of it.

    Args:
        candidates (np.ndarray): Ascending, duplicate-free letter masks.

    Returns:
        The solutions, in lexicographic order of their candidate indices.
    """
    candidates = np.asarray(candidates, dtype=MASK_DTYPE)
    n = len(candidates)
    indices = np.arange(n)
    solutions: list[Solution] = []

    for i in range(n):
        a = int(candidates[i])
        pool_b = compatible(candidates, indices[i + 1 :], a)

        for jpos, j in enumerate(pool_b):
            b = int(candidates[j])
            ab = a | b
            pool_c = compatible(candidates, pool_b[jpos + 1 :], ab)

            for kpos, k in enumerate(pool_c):
                c = int(candidates[k])
                abc = ab | c
                pool_d = compatible(candidates, pool_c[kpos + 1 :], abc)

                for lpos, l in enumerate(pool_d):  # noqa: E741
                    d = int(candidates[l])
                    abcd = abc | d
                    pool_e = compatible(candidates, pool_d[lpos + 1 :], abcd)

                    for m in pool_e:
                        solutions.append((a, b, c, d, int(candidates[m])))

    return solutions
