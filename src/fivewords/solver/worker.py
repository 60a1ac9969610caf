"""Worker process state and the per-task search pipeline for the parallel engine."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from multiprocessing.sharedctypes import Synchronized

import numpy as np

from fivewords.encoding import MASK_DTYPE
from fivewords.solver.utils import N_WORDS, Partial, Solution, extend, seed, to_solution


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    worker_idx: int
    """Index of the worker process."""

    candidates: np.ndarray
    """The candidate set, read-only and shared by every task run in this process."""

    n_tasks: int = 0
    """Number of tasks run by this worker."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


def init_worker_globals(worker_ctr: "Synchronized[int]", candidates: list[int]) -> None:
    """Initialize global variables for worker processes.

    Args:
        worker_ctr (Synchronized[int]): Shared counter for workers.
        candidates (list[int]): The candidate set, as plain ints for pickling.
    """
    global worker_state  # noqa: PLW0603
    with worker_ctr.get_lock():
        # Get and set the shared worker counter atomically, using the obtained value
        # as the worker index
        worker_idx = worker_ctr.value
        worker_ctr.value += 1

    masks = np.array(candidates, dtype=MASK_DTYPE)
    masks.flags.writeable = False
    worker_state = WorkerState(worker_idx=worker_idx, candidates=masks)
    print(f"Worker {worker_state.worker_idx} initialized.", flush=True)


def extend_all(candidates: np.ndarray, partials: Iterable[Partial]) -> Iterator[Partial]:
    """One search stage: map partial solutions to all of their one-word extensions.

    Partial solutions with an empty pool drop out.
    """
    for partial in partials:
        yield from extend(candidates, partial)


def run_stages(candidates: np.ndarray, chunk: range) -> list[Solution]:
    """Run the search pipeline for every first word with an index in `chunk`.

    The first stage seeds one partial solution per index in `chunk`, then four extension stages
    choose the remaining words.  Stages are chained lazily, so only one partial solution per
    stage is alive at a time.

    Args:
        candidates (np.ndarray): The candidate set.
        chunk (range): Indices of the first word to search from.

    Returns:
        The solutions found, in lexicographic order of their candidate indices.
    """
    partials: Iterable[Partial] = (seed(candidates, i) for i in chunk)
    for _ in range(N_WORDS - 1):
        partials = extend_all(candidates, partials)
    return [to_solution(candidates, partial.chosen) for partial in partials]


def worker_task(start: int, stop: int) -> list[Solution]:
    """Worker task to search all solutions whose first word index lies in `[start, stop)`.

    Args:
        start (int): First index of the chunk.
        stop (int): End of the chunk (exclusive).

    Returns:
        The solutions found by this task.
    """
    # Ensure worker_state is initialized
    if not worker_state:
        raise RuntimeError("Worker state not initialized. Call init_worker_globals first.")

    worker_state.n_tasks += 1
    print(
        f"Worker {worker_state.worker_idx} starting task {worker_state.n_tasks}: "
        f"indices [{start}, {stop}).",
        flush=True,
    )
    return run_stages(worker_state.candidates, range(start, stop))
