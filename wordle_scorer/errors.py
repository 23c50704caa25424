class WordleScorerError(Exception):
    """Base class for all errors raised by wordle_scorer."""


class InvalidInput(WordleScorerError, ValueError):
    """
    Raised when a word, pattern or candidate list breaks the input contract:
    wrong length, characters outside the alphabet, or an empty / mixed-length
    candidate list.
    """


class InconsistentState(WordleScorerError, RuntimeError):
    """
    Raised when a constraint state pins down a word that is not a candidate.

    This points at a defect in classification or refinement rather than at bad input.
    """
