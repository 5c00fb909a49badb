"""
Game state.
- GameDefinition: the fixed starting conditions of one game
- Session: one player's guesses against a definition
- SessionStore: in-memory sessions keyed by id (for the HTTP app)
"""

import logging
import random
from bisect import bisect_left
from dataclasses import dataclass, field
from threading import RLock
from time import time
from typing import Dict, Iterable, List, Optional, Tuple, Union
from uuid import uuid4

from .engine import evaluate_guess, is_win
from .errors import EmptyDictionary
from .types import Feedback, GameStatus, LetterValidity, Rejection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameDefinition:
    target_word: str
    dictionary: Tuple[str, ...]
    max_guesses: int = 6

    def __post_init__(self) -> None:
        if not self.dictionary:
            raise EmptyDictionary()
        # Membership uses binary search, so keep the words sorted
        object.__setattr__(self, "dictionary", tuple(sorted(self.dictionary)))
        if self.max_guesses < 1:
            raise ValueError("max_guesses must be a positive integer.")
        if not self.contains(self.target_word):
            raise ValueError(f"Target word {self.target_word!r} is not in the dictionary.")

    @property
    def word_length(self) -> int:
        return len(self.dictionary[0])

    def contains(self, word: str) -> bool:
        i = bisect_left(self.dictionary, word)
        return i < len(self.dictionary) and self.dictionary[i] == word


def create_game_definition(words: Iterable[str], max_guesses: int = 6,
                           rng: Optional[random.Random] = None) -> GameDefinition:
    """
    Pick a target uniformly from `words`.
    Pass a seeded `random.Random` (or anything with `.choice`) to make the pick repeatable.
    """
    dictionary = sorted(words)
    if not dictionary:
        raise EmptyDictionary()
    rng = rng or random.Random()
    target = rng.choice(dictionary)
    return GameDefinition(target_word=target, dictionary=tuple(dictionary), max_guesses=max_guesses)


@dataclass(frozen=True)
class GuessRecord:
    word: str
    validity: Tuple[LetterValidity, ...]
    timestamp: float = field(default_factory=time)

    def __post_init__(self) -> None:
        object.__setattr__(self, "validity", tuple(self.validity))
        if len(self.validity) != len(self.word):
            raise ValueError("A guess needs exactly one result per letter.")


@dataclass(frozen=True)
class GuessOutcome:
    """
    Result of one submit_guess call: either a rejection or the new status + record.
    guesses_left is taken at the same moment as status.
    """
    status: GameStatus
    guesses_left: int
    rejection: Optional[Rejection] = None
    record: Optional[GuessRecord] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


class Session:
    def __init__(self, definition: GameDefinition) -> None:
        self.definition = definition
        self._history: List[GuessRecord] = []

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return tuple(self._history)

    @property
    def guesses_left(self) -> int:
        return self.definition.max_guesses - len(self._history)

    @property
    def status(self) -> GameStatus:
        if self._history and is_win(self.definition.target_word, self._history[-1].word):
            return "won"
        if self.guesses_left <= 0:
            return "lost"
        return "in_progress"

    def evaluate(self, word: str) -> Union[Rejection, Feedback]:
        """Check `word` in the order: length, repeat, dictionary. Score it if it passes."""
        if len(word) != self.definition.word_length:
            return Rejection.WRONG_LENGTH
        if any(record.word == word for record in self._history):
            return Rejection.ALREADY_GUESSED
        if not self.definition.contains(word):
            return Rejection.NOT_IN_DICTIONARY
        return evaluate_guess(self.definition.target_word, word)

    def submit_guess(self, word: str) -> GuessOutcome:
        """
        Record `word` if it is a valid guess.
        Once the status is won or lost the caller must stop submitting.
        """
        result = self.evaluate(word)
        if isinstance(result, Rejection):
            logger.debug("Rejected guess %r: %s", word, result.value)
            return GuessOutcome(status=self.status, guesses_left=self.guesses_left, rejection=result)

        record = GuessRecord(word=word, validity=result)
        self._history.append(record)

        if is_win(self.definition.target_word, word):
            status = "won"
        elif len(self._history) == self.definition.max_guesses:
            status = "lost"
        else:
            status = "in_progress"

        logger.debug("Accepted guess %d/%d -> %s", len(self._history), self.definition.max_guesses, status)
        return GuessOutcome(status=status, guesses_left=self.guesses_left, record=record)


class SessionStore:
    """Holds sessions in memory. Nothing survives the process."""

    def __init__(self) -> None:
        self._sessions: Dict[str, Session] = {}
        self._lock = RLock()

    def create(self, definition: GameDefinition) -> Tuple[str, Session]:
        session_id = str(uuid4())
        session = Session(definition)
        with self._lock:
            self._sessions[session_id] = session
        logger.info("Started game %s (%d letters, %d guesses)",
                    session_id, definition.word_length, definition.max_guesses)
        return session_id, session

    def get(self, session_id: str) -> Optional[Session]:
        with self._lock:
            return self._sessions.get(session_id)

    def guess(self, session_id: str, word: str) -> Optional[GuessOutcome]:
        """
        Returns None for an unknown id.
        Raises ValueError if the game is already finished.
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if session.status != "in_progress":
                raise ValueError(f"Game {session.status}. No more guesses allowed.")
            outcome = session.submit_guess(word)
        if outcome.status != "in_progress":
            logger.info("Game %s %s after %d guess(es)", session_id, outcome.status, len(session.history))
        return outcome

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
