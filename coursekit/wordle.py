"""A console word-guessing game with a once-a-day word."""

from __future__ import annotations

import argparse
import datetime
import random
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TextIO

WORD_DATABASE_FILE = "word_database.txt"
WORD_OF_THE_DAY_FILE = "word_of_the_day_status.txt"
HIDDEN = "*"
ALREADY_GUESSED = "Word of the day has already been guessed. Come back tomorrow!"
EXIT_TOKEN = "0"

Reader = Callable[[], str]
Writer = Callable[[str], object]


class UserChoice(Enum):
    """Entries of the main menu."""

    WORD_OF_DAY = 1
    RANDOM_WORD = 2
    EXIT = 0


@dataclass
class DailyStatus:
    """Whether the word of the day was guessed, and on which date."""

    guessed: bool = False
    date: str = ""


@dataclass(frozen=True)
class GuessResult:
    """The revealed pattern for one guess and whether it solved the word."""

    display: str
    solved: bool


def load_word_database(path: str | Path = WORD_DATABASE_FILE) -> list[str]:
    """Read comma-separated words; a trailing comma ends the list."""
    words = Path(path).read_text(encoding="utf-8").split(",")
    if words[-1] == "":
        words.pop()
    return words


def save_word_database(words: Iterable[str], path: str | Path = WORD_DATABASE_FILE) -> None:
    """Write each word followed by a comma."""
    Path(path).write_text("".join(f"{word}," for word in words), encoding="utf-8")


def random_word(words: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick a word at random; an empty database yields an empty string."""
    if not words:
        return ""
    return (rng or random).choice(list(words))


def load_status(path: str | Path = WORD_OF_THE_DAY_FILE) -> DailyStatus | None:
    """Read the stored status, or None when no status file exists."""
    try:
        tokens = Path(path).read_text(encoding="utf-8").split()
    except FileNotFoundError:
        return None
    if not tokens or tokens[0] not in ("true", "false"):
        return DailyStatus()
    return DailyStatus(tokens[0] == "true", tokens[1] if len(tokens) > 1 else "")


def save_status(status: DailyStatus, path: str | Path = WORD_OF_THE_DAY_FILE) -> None:
    """Store the status as '<true|false> <date>'."""
    flag = "true" if status.guessed else "false"
    Path(path).write_text(f"{flag} {status.date}", encoding="utf-8")


def today() -> str:
    """Today's local date as YYYY-MM-DD."""
    return datetime.date.today().isoformat()


def check_guess(secret: str, guess: str) -> GuessResult:
    """Compare a guess with the secret word.

    Letters in the right place are shown upper case at their position,
    letters present elsewhere lower case at the guess's position, and the
    rest stay hidden. Each letter of the secret matches at most once.
    """
    if len(guess) != len(secret):
        raise ValueError(f"guess must have {len(secret)} characters")

    upper_secret = secret.upper()
    display = [HIDDEN] * len(secret)
    matched = [False] * len(secret)
    solved = True

    for index, char in enumerate(guess):
        letter = char.upper()
        position = upper_secret.find(letter)
        while position != -1 and matched[position]:
            position = upper_secret.find(letter, position + 1)
        if position == -1:
            solved = False
            continue
        if position == index:
            display[position] = letter
        else:
            solved = False
            display[index] = letter.lower()
        matched[position] = True

    return GuessResult("".join(display), solved)


def _token_reader(stream: TextIO) -> Reader:
    tokens = (token for line in stream for token in line.split())

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("no more input") from None

    return read


def _stdout_writer(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def play_game(
    secret: str,
    status: DailyStatus,
    status_path: str | Path = WORD_OF_THE_DAY_FILE,
    read: Reader | None = None,
    write: Writer | None = None,
) -> int | None:
    """Play one round; return the number of attempts, or None if not solved.

    Entering "0" leaves the round. Solving it marks the status as guessed
    today and stores it.
    """
    read = read or _token_reader(sys.stdin)
    write = write or _stdout_writer
    today_date = today()

    if status.date == today_date and status.guessed:
        write(ALREADY_GUESSED + "\n")
        return None

    write(f"RESULT: {HIDDEN * len(secret)}\n")
    attempts = 1
    while True:
        write("ENTER: ")
        guess = read()
        if guess == EXIT_TOKEN:
            write("Exiting the game...\n")
            return None
        if len(guess) != len(secret):
            write(f"Please enter a word with {len(secret)} characters.\n")
            continue

        result = check_guess(secret, guess.upper())
        write(f"RESULT: {result.display}\n")
        if result.solved:
            status.guessed = True
            status.date = today_date
            save_status(status, status_path)
            write("That's right!\n")
            write(f"You made {attempts} tries!\n")
            return attempts
        attempts += 1


def convert_choice(raw: int) -> UserChoice:
    """Map a menu number to a choice; anything unknown means exit."""
    return {1: UserChoice.WORD_OF_DAY, 2: UserChoice.RANDOM_WORD}.get(raw, UserChoice.EXIT)


def _parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu."""
    parser = argparse.ArgumentParser(description="Guess the hidden word.")
    parser.add_argument("--words", default=WORD_DATABASE_FILE, help="word database file")
    parser.add_argument("--status", default=WORD_OF_THE_DAY_FILE, help="daily status file")
    args = parser.parse_args(argv)

    try:
        words = load_word_database(args.words)
    except OSError:
        print("Error: Unable to open file for reading.", file=sys.stderr)
        words = []

    status = load_status(args.status)
    if status is None:
        status = DailyStatus()

    rng = random.Random()
    read = _token_reader(sys.stdin)
    write = _stdout_writer
    played_word_of_day = False

    try:
        while True:
            write("1 - Wordle of the day\n2 - Random Wordle\n0 - Exit\nEnter: ")
            choice = convert_choice(_parse_int(read()))
            if choice is UserChoice.WORD_OF_DAY:
                if played_word_of_day:
                    write(ALREADY_GUESSED + "\n")
                else:
                    play_game(random_word(words, rng), status, args.status, read, write)
                    played_word_of_day = True
            elif choice is UserChoice.RANDOM_WORD:
                status.guessed = False
                play_game(random_word(words, rng), status, args.status, read, write)
            else:
                write("Thank you for playing! Goodbye)\n")
                return 0
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())