"""
Single place to read settings from the environment.
A local .env is loaded first (dev convenience); real env vars win.

WORDLE_WORD_FILE     path or http(s) URL of the word list (default: words.txt)
WORDLE_MAX_GUESSES   guess budget per game, at least 1 (default: 6)
WORDLE_LOG_LEVEL     logging level name (default: WARNING)
WORDLE_HTTP_TIMEOUT  seconds to wait when the word list is a URL (default: 5)
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()


@dataclass(frozen=True)
class Settings:
    word_file: str = "words.txt"
    max_guesses: int = 6
    log_level: str = "WARNING"
    http_timeout: float = 5.0


def _number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def get_settings() -> Settings:
    """Read and check settings now, so tests can monkeypatch the environment."""
    max_guesses = _number("WORDLE_MAX_GUESSES", 6, int)
    if max_guesses < 1:
        raise ConfigError(f"WORDLE_MAX_GUESSES must be at least 1, got {max_guesses}")

    http_timeout = _number("WORDLE_HTTP_TIMEOUT", 5.0, float)
    if http_timeout <= 0:
        raise ConfigError(f"WORDLE_HTTP_TIMEOUT must be positive, got {http_timeout}")

    return Settings(
        word_file=os.getenv("WORDLE_WORD_FILE", "words.txt"),
        max_guesses=max_guesses,
        log_level=os.getenv("WORDLE_LOG_LEVEL", "WARNING").upper(),
        http_timeout=http_timeout,
    )
