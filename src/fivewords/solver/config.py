"""Five-word search configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None

DEFAULT_WORD_LIST_URL = "https://raw.githubusercontent.com/tabatkins/wordle-list/main/words"


class SolverConfig(BaseSettings):
    """Configuration settings for the five-word search."""

    deterministic: bool = True
    """Whether to sort parallel search results during fan-in (a bit slower). Default: True."""

    parallel: bool = True
    """Whether `run()` uses the parallel search engine by default. Default: True."""

    max_workers: int | None = None
    """Maximum number of worker processes to use. If None (default), uses os.cpu_count() - 1."""

    chunk_size: int = 16
    """Number of outer (first-word) indices handled by each parallel task. Default: 16."""

    word_list_url: str = DEFAULT_WORD_LIST_URL
    """URL of the word list, one word per line."""

    word_list_path: str | None = None
    """Local word list file. If set, it is used instead of `word_list_url`."""

    request_timeout: float = 30.0
    """Timeout in seconds for fetching the word list. Default: 30."""

    skip_invalid_words: bool = False
    """Whether to drop words with characters outside a-z instead of aborting. Default: False."""

    log_dir: str = "logs"
    """Directory where run log files are written."""

    model_config = SettingsConfigDict(
        env_prefix="FIVEWORDS_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
