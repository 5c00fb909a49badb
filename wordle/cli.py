"""
Terminal front end.

    wordle --filename words.txt --max-guesses 6

Draws the board, reads one word per line, and hands it to the session.
All game rules live in session/engine; this module only talks to the player.
"""

import argparse
import logging
import random
import sys
from typing import Dict, Optional, Sequence, TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from .config import Settings, get_settings
from .errors import ConfigError, SetupError
from .session import Session
from .types import GameStatus, LetterValidity, Rejection
from .words import definition_from_source

logger = logging.getLogger(__name__)

LETTER_STYLES: Dict[LetterValidity, str] = {
    LetterValidity.CORRECT: "bright_green",
    LetterValidity.WRONG_POSITION: "bright_yellow",
    LetterValidity.INCORRECT: "bright_white",
}

REJECTION_MESSAGES: Dict[Rejection, str] = {
    Rejection.WRONG_LENGTH: "Invalid word.",
    Rejection.ALREADY_GUESSED: "You've already used that word!",
    Rejection.NOT_IN_DICTIONARY: "That word doesn't exist.",
}

EMPTY_TILE = "·"


def say(console: Console, message: str = "") -> None:
    """Print plain text: no markup parsing, no wrapping at the console width."""
    console.print(message, markup=False, soft_wrap=True)


class TerminalGame:
    def __init__(self, session: Session, reader: TextIO = sys.stdin,
                 console: Optional[Console] = None) -> None:
        self.session = session
        self.reader = reader
        self.console = console or Console(highlight=False)

    def run(self) -> Optional[GameStatus]:
        """Play until won or lost. Returns None if input ends first."""
        message = ""
        status = self.session.status
        while status == "in_progress":
            self.draw_head()
            say(self.console, message)
            say(self.console, "Enter your word:")

            line = self.reader.readline()
            if line == "":
                logger.info("Input closed before the game finished")
                return None

            outcome = self.session.submit_guess(line.strip())
            message = "" if outcome.accepted else REJECTION_MESSAGES[outcome.rejection]
            status = outcome.status

        self.end_game(status)
        return status

    def draw_head(self) -> None:
        self.console.clear()
        self.print_board()

    def end_game(self, status: GameStatus) -> None:
        self.draw_head()
        if status == "won":
            say(self.console, "You win!")
        else:
            say(self.console, "Game over: out of guesses.")
            say(self.console, f"The word was: {self.session.definition.target_word}")

    def render_row(self, word: str, validity: Sequence[LetterValidity]) -> Text:
        row = Text()
        for letter, result in zip(word, validity):
            row.append(letter, style=LETTER_STYLES[result])
        return row

    def print_board(self) -> None:
        definition = self.session.definition
        for record in self.session.history:
            self.console.print(self.render_row(record.word, record.validity), soft_wrap=True)
        # One placeholder row per guess still available
        for _ in range(self.session.guesses_left):
            say(self.console, EMPTY_TILE * definition.word_length)


def build_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    settings = settings or get_settings()
    parser = argparse.ArgumentParser(
        prog="wordle",
        description="Guess the hidden word.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--filename", default=settings.word_file,
                        help="Word list: a file or http(s) URL, one word per line")
    parser.add_argument("--max-guesses", type=int, default=settings.max_guesses,
                        help="Number of guesses allowed")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for a reproducible target word")
    parser.add_argument("--log-level", default=settings.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    return parser


def main(argv: Optional[Sequence[str]] = None, reader: TextIO = sys.stdin,
         console: Optional[Console] = None) -> int:
    console = console or Console(highlight=False)
    try:
        settings = get_settings()
    except ConfigError as exc:
        say(console, f"Error initializing game: {exc}")
        return 1

    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True))],
    )

    if args.max_guesses < 1:
        say(console, "--max-guesses must be at least 1")
        return 2

    rng = random.Random(args.seed)
    try:
        definition = definition_from_source(args.filename, args.max_guesses, rng=rng,
                                            timeout=settings.http_timeout)
    except SetupError as exc:
        logger.error("Error initializing game: %s", exc)
        say(console, f"Error initializing game: {exc}")
        return 1

    say(console, f"Using word file: {args.filename} ({len(definition.dictionary)} words)")
    say(console, f"Max guesses: {definition.max_guesses}")

    try:
        TerminalGame(Session(definition), reader=reader, console=console).run()
    except KeyboardInterrupt:
        say(console)
        return 130
    return 0
