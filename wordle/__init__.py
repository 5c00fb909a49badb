"""
Wordle: guess a hidden word with per-letter feedback.
"""
