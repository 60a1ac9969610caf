"""Module for word list retrieval."""

from pathlib import Path

import requests

from fivewords.solver.config import config as solver_config


def parse_word_list(text: str) -> list[str]:
    """Split text into words, one per line, dropping blank lines.

    Words are lowercased; order and duplicates are preserved.
    """
    return [stripped.lower() for line in text.splitlines() if (stripped := line.strip())]


def load_word_list(path: str | Path) -> list[str]:
    """Load a word list from a local file.

    Args:
        path: Path to a UTF-8 text file with one word per line.

    Returns:
        The list of words.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")
    return parse_word_list(word_list_path.read_text(encoding="utf-8"))


def fetch_word_list(url: str, *, timeout: float | None = None) -> list[str]:
    """Fetch a word list over HTTP.

    Args:
        url: URL of a text file with one word per line.
        timeout: Request timeout in seconds.  Defaults to the configured value.

    Returns:
        The list of words.

    Raises:
        requests.RequestException: If the request fails or returns an error status.
    """
    if timeout is None:
        timeout = solver_config.request_timeout
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return parse_word_list(response.text)


def get_word_list(path: str | Path | None = None) -> list[str]:
    """Get the word list from `path`, the configured file, or the configured URL, in that order."""
    path = path or solver_config.word_list_path
    if path:
        return load_word_list(path)
    return fetch_word_list(solver_config.word_list_url)
