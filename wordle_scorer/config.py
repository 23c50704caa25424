import os
from typing import Optional

# Letters a word may be built from. Passed into constructors as a default.
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def workers_from_env(value: Optional[str]) -> int:
    """
    Pool size from the WORDLE_SCORER_WORKERS setting.

    Anything that is not a positive integer falls back to the number of CPUs.
    """
    try:
        workers = int(value) if value is not None else 0
    except ValueError:
        workers = 0
    if workers < 1:
        workers = os.cpu_count() or 1
    return workers


# Worker pool used when scoring every candidate by expected information
MAX_WORKERS = workers_from_env(os.environ.get("WORDLE_SCORER_WORKERS"))
USE_PROCESSES = os.environ.get("WORDLE_SCORER_EXECUTOR", "process").lower() != "thread"

LOG_LEVEL = os.environ.get("WORDLE_SCORER_LOG_LEVEL", "WARNING").upper()
