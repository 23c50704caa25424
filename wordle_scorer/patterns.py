from enum import IntEnum
from functools import lru_cache
from typing import Iterator, Sequence

from wordle_scorer.errors import InvalidInput


class Status(IntEnum):
    """
    Feedback for one letter of a guess, in Wordle colours.

    NOT_PRESENT is grey, WRONG_POSITION is yellow and CORRECT_POSITION is green.
    """

    NOT_PRESENT = 0
    WRONG_POSITION = 1
    CORRECT_POSITION = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Status.NOT_PRESENT: "x", Status.WRONG_POSITION: "y", Status.CORRECT_POSITION: "g"}
_STATUSES = {symbol: status for status, symbol in _SYMBOLS.items()}

Pattern = tuple[Status, ...]


def iter_patterns(length: int) -> Iterator[Pattern]:
    """
    Lazily yields every feedback pattern for a word of the given length.

    Pattern k is the base-3 expansion of k with position 0 as the most significant digit,
    so patterns come out in lexicographic order of their statuses.

    Args:
        length (int): The word length.

    Yields:
        Pattern: Each of the 3 ** length patterns exactly once.
    """
    if length < 1:
        raise InvalidInput(f"Pattern length must be positive, got {length}.")

    statuses = tuple(Status)
    base = len(statuses)
    for index in range(base ** length):
        digits = [Status.NOT_PRESENT] * length
        for pos in range(length - 1, -1, -1):
            index, digit = divmod(index, base)
            digits[pos] = statuses[digit]
        yield tuple(digits)


@lru_cache(maxsize=None)
def all_patterns(length: int) -> tuple[Pattern, ...]:
    """
    Returns all 3 ** length feedback patterns, computed once per length.
    """
    return tuple(iter_patterns(length))


def feedback(guess: str, answer: str) -> Pattern:
    """
    Returns the feedback pattern Wordle shows for a guess against the answer.

    Greens are assigned first, then yellows take the answer's remaining letters from left to right,
    so a repeated letter is only marked as often as it occurs in the answer.

    Args:
        guess (str): The guessed word.
        answer (str): The secret word.

    Returns:
        Pattern: One status per position of the guess.
    """
    if len(guess) != len(answer):
        raise InvalidInput(f"Guess {guess!r} and answer {answer!r} have different lengths.")

    length = len(guess)
    result = [Status.NOT_PRESENT] * length
    remaining = {}

    for i in range(length):
        if guess[i] == answer[i]:
            result[i] = Status.CORRECT_POSITION
        else:
            remaining[answer[i]] = remaining.get(answer[i], 0) + 1

    for i in range(length):
        if result[i] is Status.CORRECT_POSITION:
            continue
        if remaining.get(guess[i], 0) > 0:
            result[i] = Status.WRONG_POSITION
            remaining[guess[i]] -= 1

    return tuple(result)


def format_pattern(pattern: Sequence[Status]) -> str:
    """
    Formats a pattern as a string of 'g', 'y', 'x' for printing.
    """
    return "".join(Status(status).symbol for status in pattern)


def parse_pattern(text: str) -> Pattern:
    """
    Parses a string of 'g' (green), 'y' (yellow) and 'x' (grey) into a pattern.

    Args:
        text (str): The colour string, in either case.

    Returns:
        Pattern: The parsed statuses.

    Raises:
        InvalidInput: If any character is not one of g, y, x.
    """
    try:
        return tuple(_STATUSES[ch] for ch in text.lower())
    except KeyError as e:
        raise InvalidInput(f"Invalid feedback colour {e.args[0]!r} in {text!r}.") from None
