"""Implementation of the parallel search: task distribution and worker management."""

import os
import traceback
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from multiprocessing import Value
from multiprocessing.sharedctypes import Synchronized
from typing import Literal, TextIO

import numpy as np
from sortedcontainers import SortedList

from fivewords.encoding import MASK_DTYPE
from fivewords.errors import AggregateTaskError
from fivewords.solver.config import config as solver_config
from fivewords.solver.utils import N_WORDS, Solution
from fivewords.solver.worker import init_worker_globals, worker_task


def get_executor(*, candidates: np.ndarray, n_workers: int | None = None) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor whose workers hold a copy of the candidate set.

    Args:
        candidates (np.ndarray): The candidate set to pass to workers.
        n_workers (int | None): Number of worker processes to create.  If None,
            defaults to number of CPU cores minus one.

    Returns:
        A ProcessPoolExecutor instance for worker processes.
    """
    worker_ctr: Synchronized[int] = Value("i", 0)

    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers is None:
        n_workers = max(1, cpus - 1)  # Leave one core free
    if n_workers > cpus:
        raise ValueError(
            f"Requested number of workers ({n_workers}) exceeds CPU count ({cpus})",
        )
    return ProcessPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(worker_ctr, [int(mask) for mask in candidates]),
    )


def make_chunks(n: int, chunk_size: int) -> list[range]:
    """Partition the outer index range `[0, n)` into contiguous chunks."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return [range(start, min(start + chunk_size, n)) for start in range(0, n, chunk_size)]


@dataclass
class Result:
    """Wrapper for worker task results."""

    chunk: range
    status: Literal["success", "error"]
    solutions: list[Solution] = field(default_factory=list)
    err_msg: str | None = None


def _collect(chunk: range, future: Future) -> Result:
    """Turn a finished future into a Result, capturing any error raised by the task."""
    try:
        return Result(chunk=chunk, status="success", solutions=future.result())
    except Exception as e:
        return Result(
            chunk=chunk,
            status="error",
            err_msg=f"Worker encountered an error: {str(e)}\n{traceback.format_exc()}",
        )


def search_parallel(
    candidates: np.ndarray,
    *,
    max_workers: int | None = None,
    chunk_size: int | None = None,
    deterministic: bool | None = None,
    logf: TextIO | None = None,
) -> list[Solution]:
    """Find every set of five pairwise-disjoint masks, distributing the search over processes.

    The outer index range is split into chunks; each chunk is searched by one task running the
    staged pipeline in `fivewords.solver.worker`.  Results are gathered once all tasks finish.

    Args:
        candidates (np.ndarray): Ascending, duplicate-free letter masks.
        max_workers (int | None): Number of worker processes.  Defaults to the configured value.
        chunk_size (int | None): Outer indices per task.  Defaults to the configured value.
        deterministic (bool | None): Whether to return solutions sorted by mask tuple.  Defaults
            to the configured value.  Otherwise the order depends on task completion order.
        logf: Optional file object to log progress to.

    Returns:
        The solutions, as the same set the sequential search returns.

    Raises:
        AggregateTaskError: If any task failed.  No partial result is returned.
    """
    candidates = np.asarray(candidates, dtype=MASK_DTYPE)
    if max_workers is None:
        max_workers = solver_config.max_workers
    if chunk_size is None:
        chunk_size = solver_config.chunk_size
    if deterministic is None:
        deterministic = solver_config.deterministic

    if len(candidates) < N_WORDS:
        return []

    chunks = make_chunks(len(candidates), chunk_size)
    print(
        f"Searching {len(candidates)} candidates in {len(chunks)} tasks...",
        file=logf,
        flush=True,
    )

    solutions: SortedList | list[Solution] = SortedList() if deterministic else []
    failures: list[tuple[range, str]] = []

    with get_executor(candidates=candidates, n_workers=max_workers) as executor:
        try:
            futures = {
                executor.submit(worker_task, chunk.start, chunk.stop): chunk for chunk in chunks
            }
            # Drain every future, even after a failure, so that all failures are reported
            for future in as_completed(futures):
                result = _collect(futures[future], future)
                if result.status == "error":
                    print(
                        f"Task for indices [{result.chunk.start}, {result.chunk.stop}) failed:",
                        file=logf,
                        flush=True,
                    )
                    print(result.err_msg, file=logf, flush=True)
                    failures.append((result.chunk, result.err_msg or ""))
                elif isinstance(solutions, SortedList):
                    solutions.update(result.solutions)
                else:
                    solutions.extend(result.solutions)
        except KeyboardInterrupt as e:
            executor.shutdown(wait=False, cancel_futures=True)
            raise e
        except Exception as e:
            executor.shutdown(wait=False, cancel_futures=True)
            raise e

    if failures:
        raise AggregateTaskError(sorted(failures, key=lambda item: item[0].start))
    return list(solutions)
