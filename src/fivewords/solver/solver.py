"""Main solver module: word list to decoded five-word solutions."""

import sys
from datetime import datetime
from pathlib import Path
from time import time
from typing import TextIO

from fivewords.decoding import DecodedSolution, decode_solutions
from fivewords.encoding import filter_candidates, mask_to_letters
from fivewords.solver.config import config as solver_config
from fivewords.solver.parallel import search_parallel
from fivewords.solver.sequential import search_sequential
from fivewords.solver.utils import Solution
from fivewords.util import count_str, time_str
from fivewords.wordlist import get_word_list

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def run(
    *,
    parallel: bool | None = None,
    word_list_path: str | Path | None = None,
    out: TextIO | None = None,
) -> list[DecodedSolution]:
    """Run the five-word search end to end, logging to a timestamped file.

    Args:
        parallel (bool | None): Whether to use the parallel search.  Defaults to the configured
            value.
        word_list_path (str | Path | None): Local word list.  Defaults to the configured source.
        out (TextIO | None): Stream for the short summary and the decoded solutions.  Defaults
            to stdout.

    Returns:
        The decoded solutions.
    """
    if parallel is None:
        parallel = solver_config.parallel
    if out is None:
        out = sys.stdout

    start_time = time()
    logfile = Path(solver_config.log_dir) / (
        datetime.fromtimestamp(start_time).strftime("%Y%m%d-%H%M%S")
        + ("-parallel" if parallel else "-sequential")
        + ".log"
    )
    logfile.parent.mkdir(parents=True, exist_ok=True)
    print(f"Log file: {logfile}", file=out)

    with open(logfile, "w", encoding="utf-8") as logf:
        start_time_str = datetime.fromtimestamp(start_time).astimezone().strftime(TIMESTAMP_FMT)
        print(f"Start time: {start_time_str}", file=logf, flush=True)
        print("Solver config:", file=logf, flush=True)
        print(solver_config.model_dump(), file=logf, flush=True)

        words = get_word_list(word_list_path)
        print(f"Fetched {count_str(len(words), 'word')}", file=out, flush=True)
        print(f"Fetched {count_str(len(words), 'word')}", file=logf, flush=True)

        candidates = filter_candidates(words, skip_invalid=solver_config.skip_invalid_words)
        print(f"Number of candidates: {len(candidates):,}", file=out, flush=True)
        print(f"Number of candidates: {len(candidates):,}", file=logf, flush=True)

        search_start = time()
        solutions: list[Solution]
        if parallel:
            print("Using parallel search...", file=logf, flush=True)
            solutions = search_parallel(candidates, logf=logf)
        else:
            print("Using sequential search...", file=logf, flush=True)
            solutions = search_sequential(candidates)
        search_time = time() - search_start

        for solution in solutions:
            print(f"Found solution {[mask_to_letters(mask) for mask in solution]}", file=logf)

        decoded = decode_solutions(solutions, words)
        summary = (
            f"Found {count_str(len(solutions), 'solution')} "
            f"({count_str(len(decoded), 'word combination')}) in {time_str(search_time)}"
        )
        print(summary, file=out, flush=True)
        print(summary, file=logf, flush=True)
        print(f"Total time: {time_str(time() - start_time)}", file=logf, flush=True)

    for combo in decoded:
        print(" ".join(combo), file=out)
    return decoded
