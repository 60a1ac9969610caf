"""Formatting helpers for run summaries."""


def time_str(seconds: float) -> str:
    """Format an elapsed time for a run summary.

    Durations under a minute are shown as seconds with millisecond precision ("4.271s"),
    longer ones as "H:MM:SS".
    """
    if seconds < 60:
        return f"{seconds:.3f}s"
    minutes, secs = divmod(int(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours}:{minutes:02}:{secs:02}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"


def count_str(n: int, noun: str, plural: str | None = None) -> str:
    """Format a count with its noun, e.g. "1 solution", "1,024 solutions"."""
    if n == 1:
        return f"1 {noun}"
    return f"{int_comma(n)} {plural or noun + 's'}"
