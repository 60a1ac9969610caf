"""Five-word, twenty-five-letter puzzle solver.

Finds every set of five words from a word list that together use 25 distinct letters.  Words
are encoded as letter bitmasks, anagrams are merged, and the sets are found by a pruned search
over the remaining masks, either sequentially or across a pool of worker processes.
"""

from sys import argv, exit

import requests
from pydantic import ValidationError

from .errors import AggregateTaskError, EncodingError

USAGE = "Usage: python -m fivewords [--sequential | --parallel] [<path_to_word_list>]"


def main() -> None:
    """Main entry point for the five-word solver."""
    parallel: bool | None = None
    word_list_path: str | None = None
    for arg in argv[1:]:
        if arg == "--sequential":
            parallel = False
        elif arg == "--parallel":
            parallel = True
        elif arg.startswith("-") or word_list_path is not None:
            print(USAGE)
            exit(1)
        else:
            word_list_path = arg

    try:
        # Settings are read from the environment when the solver is imported
        from .solver import solver

        solver.run(parallel=parallel, word_list_path=word_list_path)
    except ValidationError as e:
        print(f"Invalid configuration: {e}")
        exit(1)
    except (requests.RequestException, FileNotFoundError) as e:
        print(f"Error fetching words: {e}")
        exit(1)
    except EncodingError as e:
        print(f"Error preprocessing words: {e}")
        exit(1)
    except AggregateTaskError as e:
        print(f"Error searching for solutions: {e}")
        exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        exit(1)
    except KeyboardInterrupt:
        print("Solver interrupted by user.")
        exit(1)
