"""
Pure game logic (no terminal, no HTTP, no storage).
For each letter of a guess we report one of:
- correct: same letter at the same position in the target
- wrong_position: the letter appears elsewhere in the target
- incorrect: the letter is absent, or all its copies are already accounted for

Duplicates are handled with a letter count taken from the target: a letter is
never marked (correct or wrong_position) more times than it occurs there.
"""

from collections import Counter

from .types import Feedback, LetterValidity


def evaluate_guess(target: str, guess: str) -> Feedback:
    """
    Example:
      target = "apple"
      guess  = "grape"
      -> [incorrect, incorrect, wrong_position, wrong_position, correct]

    Exact matches are resolved before any wrong_position mark, so an earlier
    copy of a letter cannot take the count an exact match needs.
    """
    if len(guess) != len(target):
        raise ValueError("Target and guess must be the same length.")

    remaining = Counter(target)
    result = []

    # 1. Exact matches use up their letter first
    for target_letter, letter in zip(target, guess):
        if letter == target_letter:
            result.append(LetterValidity.CORRECT)
            remaining[letter] -= 1
        else:
            result.append(LetterValidity.INCORRECT)

    # 2. Left to right, leftover letters claim what is still available
    for i, letter in enumerate(guess):
        if result[i] is LetterValidity.INCORRECT and remaining[letter] > 0:
            result[i] = LetterValidity.WRONG_POSITION
            remaining[letter] -= 1

    return result


def is_win(target: str, guess: str) -> bool:
    """Win = exact, case-sensitive match of the whole word."""
    return guess == target
