import os
from pathlib import Path

import pytest

from wordle_scorer import CandidateSet

WORDS = [
    "CRANE", "TRACE", "SLATE", "WEARY", "WEEDS", "EMCEE", "SPEED", "RAISE", "ARISE", "STARE",
    "CRATE", "BERRY", "MERRY", "FERRY", "WORRY", "HAPPY", "PUPPY", "GEESE", "LEVEL", "ABBEY",
    "KAYAK", "EERIE", "TEETH", "APPLE", "ALLEY", "RALLY", "QUEEN", "NINJA", "GHOST", "PLUMB",
]

REFERENCE_WORDLIST = Path(
    os.environ.get("WORDLE_SCORER_WORDLIST", Path(__file__).parent / "data" / "full_list_nyt.txt")
)


@pytest.fixture(scope="session")
def words() -> CandidateSet:
    return CandidateSet(WORDS)


@pytest.fixture(scope="session")
def reference_words() -> CandidateSet:
    """
    The 12966 word five-letter list the reference figures were computed on. Tests using it are
    skipped when the list is not available.
    """
    if not REFERENCE_WORDLIST.exists():
        pytest.skip(f"Reference word list not found at {REFERENCE_WORDLIST}")
    with open(REFERENCE_WORDLIST) as f:
        return CandidateSet(line.strip().upper() for line in f if line.strip())
