"""
Word source: read the dictionary from a file or a URL.
One word per line; surrounding whitespace is stripped and blank lines skipped.
Any failure to read becomes SourceUnavailable so callers see one error type.
"""

import logging
import random
from pathlib import Path
from typing import List, Optional, Union

import requests

from .errors import EmptyDictionary, SourceUnavailable
from .session import GameDefinition, create_game_definition

logger = logging.getLogger(__name__)

Source = Union[str, Path]


def _is_url(source: Source) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def _split_words(text: str) -> List[str]:
    words = []
    for line in text.splitlines():
        word = line.strip()
        if word != "":
            words.append(word)
    return words


def fetch_text(url: str, timeout: float = 5.0) -> str:
    try:
        response = requests.get(url, timeout=timeout)
        # Non-200 raises here
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SourceUnavailable(url, str(exc)) from exc
    return response.text


def load_words(source: Source, timeout: float = 5.0) -> List[str]:
    if _is_url(source):
        text = fetch_text(source, timeout=timeout)
    else:
        try:
            text = Path(source).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            # not UTF-8 counts as unreadable
            raise SourceUnavailable(str(source), getattr(exc, "strerror", None) or str(exc)) from exc

    words = _split_words(text)
    if not words:
        raise EmptyDictionary(str(source))
    logger.info("Loaded %d words from %s", len(words), source)
    return words


def definition_from_source(source: Source, max_guesses: int = 6,
                           rng: Optional[random.Random] = None,
                           timeout: float = 5.0) -> GameDefinition:
    """Read the word source and draw a target from it."""
    return create_game_definition(load_words(source, timeout=timeout), max_guesses, rng=rng)
