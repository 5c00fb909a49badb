"""
Testing the terminal front end
- Input comes from a StringIO, output goes to a plain (no colour) rich Console
"""

import io

from rich.console import Console

from wordle import cli
from wordle.session import GameDefinition, Session

from .conftest import FRUIT


def make_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=80, highlight=False)


def output_of(console: Console) -> str:
    return console.file.getvalue()


def test_print_board_empty(apple_game):
    console = make_console()
    cli.TerminalGame(Session(apple_game), reader=io.StringIO(), console=console).print_board()
    assert output_of(console) == "·····\n" * 3


def test_print_board_after_guess(apple_game):
    console = make_console()
    session = Session(apple_game)
    session.submit_guess("grape")
    cli.TerminalGame(session, reader=io.StringIO(), console=console).print_board()
    assert output_of(console) == "grape\n" + "·····\n" * 2


def test_render_row_styles(apple_game):
    session = Session(apple_game)
    record = session.submit_guess("grape").record
    row = cli.TerminalGame(session, reader=io.StringIO(), console=make_console()).render_row(
        record.word, record.validity)
    styles = [str(span.style) for span in row.spans]
    assert styles == ["bright_white", "bright_white", "bright_yellow", "bright_yellow", "bright_green"]


def test_run_until_win_shows_rejections(apple_game):
    console = make_console()
    reader = io.StringIO("kiwi\nmelon\ngrape\ngrape\napple\n")
    status = cli.TerminalGame(Session(apple_game), reader=reader, console=console).run()

    text = output_of(console)
    assert status == "won"
    assert "Invalid word." in text
    assert "That word doesn't exist." in text
    assert "You've already used that word!" in text
    assert text.rstrip().endswith("You win!")


def test_run_until_lost(apple_game):
    console = make_console()
    reader = io.StringIO("grape\nlemon\nmango\n")
    status = cli.TerminalGame(Session(apple_game), reader=reader, console=console).run()

    text = output_of(console)
    assert status == "lost"
    assert "Game over: out of guesses." in text
    assert "The word was: apple" in text


def test_run_stops_on_end_of_input(apple_game):
    session = Session(apple_game)
    status = cli.TerminalGame(session, reader=io.StringIO("grape\n"), console=make_console()).run()
    assert status is None
    assert len(session.history) == 1


def test_main_plays_from_word_file(words_file):
    # the target is one of the fruits, so guessing them in order always wins
    console = make_console()
    reader = io.StringIO("\n".join(FRUIT) + "\n")
    code = cli.main(["--filename", str(words_file), "--max-guesses", "5", "--seed", "1"],
                    reader=reader, console=console)

    text = output_of(console)
    assert code == 0
    assert f"Using word file: {words_file} (5 words)" in text
    assert "Max guesses: 5" in text
    assert "You win!" in text


def test_main_missing_word_file(tmp_path):
    console = make_console()
    code = cli.main(["--filename", str(tmp_path / "missing.txt")], reader=io.StringIO(), console=console)
    assert code == 1
    assert "Error initializing game" in output_of(console)


def test_main_defaults_come_from_environment(monkeypatch, words_file):
    monkeypatch.setenv("WORDLE_WORD_FILE", str(words_file))
    monkeypatch.setenv("WORDLE_MAX_GUESSES", "2")
    args = cli.build_parser().parse_args([])
    assert args.filename == str(words_file)
    assert args.max_guesses == 2


def test_startup_lines_keep_paths_intact(tmp_path):
    # long path with rich markup characters, printed on a narrow console
    folder = tmp_path / ("nested-" * 10)
    folder.mkdir()
    path = folder / "words[bold].txt"
    path.write_text("\n".join(FRUIT) + "\n", encoding="utf-8")

    console = Console(file=io.StringIO(), force_terminal=False, color_system=None, width=20, highlight=False)
    reader = io.StringIO("\n".join(FRUIT) + "\n")
    code = cli.main(["--filename", str(path), "--seed", "3"], reader=reader, console=console)

    assert code == 0
    assert f"Using word file: {path} (5 words)\n" in output_of(console)


def test_main_word_file_not_utf8(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("cafés\napple\n".encode("latin-1"))
    console = make_console()
    code = cli.main(["--filename", str(path)], reader=io.StringIO(), console=console)
    assert code == 1
    assert "Error initializing game" in output_of(console)


def test_main_bad_max_guesses_setting(monkeypatch, words_file):
    monkeypatch.setenv("WORDLE_MAX_GUESSES", "lots")
    console = make_console()
    code = cli.main(["--filename", str(words_file)], reader=io.StringIO(), console=console)
    assert code == 1
    assert "WORDLE_MAX_GUESSES" in output_of(console)


def test_target_word_printed_as_plain_text():
    definition = GameDefinition(target_word="[red]", dictionary=("[red]", "abcde"), max_guesses=1)
    console = make_console()
    status = cli.TerminalGame(Session(definition), reader=io.StringIO("abcde\n"), console=console).run()
    assert status == "lost"
    assert "The word was: [red]" in output_of(console)
