"""
- Provide small, fixed game definitions so outcomes are predictable
- Provide a client fixture (TestClient(app)) whose dictionary, random source
  and session store are overridden, so no word file is needed
"""
from typing import List

import pytest
from fastapi.testclient import TestClient

from wordle.main import app, get_dictionary, get_rng, get_store
from wordle.session import GameDefinition, SessionStore

FRUIT = ["apple", "grape", "lemon", "mango", "peach"]


class FixedChoice:
    """Random source whose choice() always returns the given word."""

    def __init__(self, word: str) -> None:
        self.word = word

    def choice(self, seq):
        assert self.word in seq
        return self.word


@pytest.fixture
def apple_game() -> GameDefinition:
    return GameDefinition(target_word="apple", dictionary=tuple(FRUIT), max_guesses=3)


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(FRUIT) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def client(store):
    """Every new game targets 'apple' with the FRUIT dictionary."""
    def _words() -> List[str]:
        return list(FRUIT)

    app.dependency_overrides[get_dictionary] = _words
    app.dependency_overrides[get_rng] = lambda: FixedChoice("apple")
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
