"""Exception types raised by the word encoder and the parallel search engine."""


class EncodingError(ValueError):
    """A word contains a character outside the supported alphabet."""

    def __init__(self, word: str, char: str, position: int) -> None:
        self.word = word
        """The word that failed to encode."""
        self.char = char
        """The offending character."""
        self.position = position
        """0-based position of the offending character in `word`."""
        super().__init__(f"Invalid character {char!r} at position {position} in word {word!r}")


class AggregateTaskError(RuntimeError):
    """One or more parallel search tasks failed.

    Raised only after every task has finished, so that all failures are reported together
    instead of returning a silently truncated solution list.
    """

    def __init__(self, failures: list[tuple[range, str]]) -> None:
        self.failures = failures
        """List of `(chunk, err_msg)` pairs, one per failed task."""
        lines = [f"{len(failures)} search task(s) failed:"]
        for chunk, err_msg in failures:
            lines.append(f"  indices [{chunk.start}, {chunk.stop}): {err_msg}")
        super().__init__("\n".join(lines))
