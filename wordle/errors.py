"""
Setup errors. These stop a game from starting.

Guess rejections are not exceptions: see types.Rejection.
"""


class WordleError(Exception):
    pass


class SetupError(WordleError):
    """The game could not be set up (fatal, no retry)."""


class EmptyDictionary(SetupError):
    def __init__(self, source: str = "word list") -> None:
        super().__init__(f"{source} contains no words")
        self.source = source


class SourceUnavailable(SetupError):
    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"cannot read words from {source}: {reason}")
        self.source = source
        self.reason = reason


class ConfigError(SetupError):
    """A setting from the environment is missing or out of range."""
