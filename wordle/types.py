"""
Labels for clarity.
"""

from enum import Enum
from typing import List, Literal

GameStatus = Literal["in_progress", "won", "lost"]


class LetterValidity(str, Enum):
    """Feedback for one letter of a guess."""
    CORRECT = "correct"                # right letter, right place
    WRONG_POSITION = "wrong_position"  # letter is in the word elsewhere
    INCORRECT = "incorrect"            # letter is not (or no longer) available


class Rejection(str, Enum):
    """Why a guess was refused. The session is left unchanged."""
    WRONG_LENGTH = "wrong_length"
    ALREADY_GUESSED = "already_guessed"
    NOT_IN_DICTIONARY = "not_in_dictionary"


Feedback = List[LetterValidity]
