import logging
from typing import Iterable, Iterator, Optional

from wordle_scorer.config import ALPHABET
from wordle_scorer.errors import InvalidInput

log = logging.getLogger(__name__)


def validate_word(word: str, length: int, alphabet: str = ALPHABET) -> str:
    """
    Checks that a word is made only of alphabet letters and has the expected length.

    Args:
        word (str): The word to check.
        length (int): The required word length.
        alphabet (str, optional): The permitted letters. Defaults to A-Z.

    Returns:
        str: The word, unchanged.

    Raises:
        InvalidInput: If the word is not a string, has the wrong length or contains other characters.
    """
    if not isinstance(word, str):
        raise InvalidInput(f"Expected a word, got {word!r}.")
    if len(word) != length:
        raise InvalidInput(f"The word {word!r} has length {len(word)}, should be {length}.")
    bad = [ch for ch in word if ch not in alphabet]
    if bad:
        raise InvalidInput(f"The word {word!r} contains illegal characters: {''.join(bad)}.")
    return word


class CandidateSet:
    """
    The pool of possible answers: unique uppercase words that all share one length.

    Order of the supplied words is preserved; repeats collapse onto their first occurrence.
    The set never changes after construction.
    """

    __slots__ = ("_words", "_lookup", "length", "alphabet")

    def __init__(self, words: Iterable[str], alphabet: str = ALPHABET):
        if isinstance(words, (str, bytes)):
            raise InvalidInput(f"Expected a collection of words, got the single value {words!r}.")
        words = list(dict.fromkeys(words))
        if not words:
            raise InvalidInput("Cannot work with an empty set of candidate words.")

        first = words[0]
        if not isinstance(first, str) or not first:
            raise InvalidInput(f"Empty or non-string candidate word found: {first!r}.")
        length = len(first)

        for word in words:
            if not isinstance(word, str) or len(word) != length:
                raise InvalidInput(f"All candidate words must have length {length}, found {word!r}.")
            validate_word(word, length, alphabet)

        self._words = tuple(words)
        self._lookup = frozenset(words)
        self.length = length
        self.alphabet = alphabet

        log.debug("Built candidate set of %d words of length %d", len(self._words), length)

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def validate(self, word: str) -> str:
        return validate_word(word, self.length, self.alphabet)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def __repr__(self) -> str:
        return f"CandidateSet({len(self._words)} words, length={self.length})"


def as_candidate_set(candidates: CandidateSet | Iterable[str], alphabet: Optional[str] = None) -> CandidateSet:
    """
    Returns the candidates as a CandidateSet, building one from a plain collection of words.

    Args:
        candidates (CandidateSet | Iterable[str]): An existing set or the words to build one from.
        alphabet (Optional[str], optional): The alphabet the caller works in. Defaults to None, which
            accepts any existing set and builds new ones over A-Z.

    Raises:
        InvalidInput: If an existing CandidateSet was built for a different alphabet.
    """
    if not isinstance(candidates, CandidateSet):
        return CandidateSet(candidates, alphabet or ALPHABET)
    if alphabet is not None and candidates.alphabet != alphabet:
        raise InvalidInput(f"Candidate words use alphabet {candidates.alphabet!r}, expected {alphabet!r}.")
    return candidates
