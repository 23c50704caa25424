import logging
import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, Mapping, Optional

from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn, TimeRemainingColumn

from wordle_scorer import config
from wordle_scorer.errors import InvalidInput
from wordle_scorer.words import CandidateSet, as_candidate_set

log = logging.getLogger(__name__)

# Scorer held by each worker process, set once by the pool initializer
_worker_scorer = None


def _init_worker(scorer) -> None:
    global _worker_scorer
    _worker_scorer = scorer


def _score_in_worker(word: str) -> float:
    return _worker_scorer.score(word)


@contextmanager
def _progress(show_progress: bool, description: str, total: int) -> Iterator[Callable[[], None]]:
    if not show_progress:
        yield lambda: None
        return

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        TimeElapsedColumn(),
        TimeRemainingColumn(),
        transient=True,
    ) as progress:
        task = progress.add_task(f"[green]{description}", total=total)
        yield lambda: progress.advance(task)


def score_candidates(
    scorer,
    words: Iterable[str],
    max_workers: Optional[int] = None,
    use_processes: Optional[bool] = None,
    show_progress: bool = False,
) -> dict[str, float]:
    """
    Scores every word, fanning the work out over a fixed-size pool.

    Each word is scored independently in its own task and the results are gathered into a fresh mapping
    as they complete. If any task fails, or the caller interrupts, the words not yet started are
    cancelled and the exception is re-raised.

    Args:
        scorer: Anything with a score(word) method. Must be picklable when using processes.
        words (Iterable[str]): The words to score.
        max_workers (Optional[int], optional): Pool size. Defaults to config.MAX_WORKERS.
            A scorer with PARALLEL = False, or a pool size of 1, is scored inline.
        use_processes (Optional[bool], optional): Process pool rather than thread pool. Defaults to config.USE_PROCESSES.
        show_progress (bool, optional): Show a rich progress bar. Defaults to False.

    Returns:
        dict[str, float]: Word to score, in completion order.
    """
    words = list(dict.fromkeys(words))
    if max_workers is None:
        max_workers = config.MAX_WORKERS
    if max_workers < 1:
        raise InvalidInput(f"max_workers must be at least 1, got {max_workers}.")
    if use_processes is None:
        use_processes = config.USE_PROCESSES
    if not getattr(scorer, "PARALLEL", True):
        max_workers = 1

    description = f"Calculating {type(scorer).__name__} scores..."
    scores = {}
    start_time = time.perf_counter()

    if max_workers == 1 or len(words) <= 1:
        with _progress(show_progress, description, len(words)) as advance:
            for word in words:
                scores[word] = scorer.score(word)
                advance()
        log.debug("Scored %d words inline in %.2fs", len(scores), time.perf_counter() - start_time)
        return scores

    if use_processes:
        executor = ProcessPoolExecutor(max_workers=max_workers, initializer=_init_worker, initargs=(scorer,))
    else:
        executor = ThreadPoolExecutor(max_workers=max_workers)

    kind = "processes" if use_processes else "threads"
    log.info("Scoring %d words with %s in %d %s", len(words), type(scorer).__name__, max_workers, kind)

    with executor, _progress(show_progress, description, len(words)) as advance:
        if use_processes:
            future_to_word = {executor.submit(_score_in_worker, word): word for word in words}
        else:
            future_to_word = {executor.submit(scorer.score, word): word for word in words}

        try:
            for future in as_completed(future_to_word):
                scores[future_to_word[future]] = future.result()
                advance()
        except BaseException:
            cancelled = sum(future.cancel() for future in future_to_word)
            log.warning("Scoring stopped; cancelled %d pending words", cancelled)
            raise

    log.info("Scored %d words in %.2fs", len(scores), time.perf_counter() - start_time)
    return scores


def rank(scores: Mapping[str, float]) -> dict[str, float]:
    """
    Orders a word to score mapping by descending score, breaking ties alphabetically.
    """
    return dict(sorted(scores.items(), key=lambda item: (-item[1], item[0])))


class CandidateRanker:

    def __init__(self, candidates: CandidateSet | Iterable[str], scorer, words: Optional[Iterable[str]] = None):
        """
        Initializes the CandidateRanker with a scorer.

        Args:
            candidates (CandidateSet | Iterable[str]): The candidate words the scorer is built on.
            scorer: A scorer class, instantiated with the candidates, or an already built scorer.
            words (Optional[Iterable[str]], optional): The words to rank. Defaults to the candidates.
        """
        candidates = as_candidate_set(candidates)
        self.candidates = candidates
        self.scorer = scorer(candidates) if isinstance(scorer, type) else scorer
        self.words = tuple(candidates if words is None else words)

        self._scores = None

    def scores(
        self,
        max_workers: Optional[int] = None,
        use_processes: Optional[bool] = None,
        show_progress: bool = False,
    ) -> dict[str, float]:
        """
        Returns every word's score, highest first. Scores are computed on the first call only.

        Args:
            max_workers (Optional[int], optional): Pool size for the first computation.
            use_processes (Optional[bool], optional): Process pool rather than thread pool.
            show_progress (bool, optional): Show a rich progress bar. Defaults to False.

        Returns:
            dict[str, float]: Word to score, ordered by descending score.
        """
        if self._scores is None:
            self._scores = rank(score_candidates(self.scorer, self.words, max_workers, use_processes, show_progress))
        return dict(self._scores)

    def most_likely_candidates(self, n: int = -1, **kwargs) -> list[str]:
        """
        Returns a list of the best scoring words.

        Args:
            n (int): The number of words to return. Defaults to -1, which returns all words.
            **kwargs: Passed on to scores().

        Returns:
            list[str]: The n best words, best first.
        """
        ranked = list(self.scores(**kwargs))
        if n == -1:
            return ranked
        return ranked[:n]

    def best(self, n: int = 1, **kwargs) -> list[str] | str:
        ranked = self.most_likely_candidates(n, **kwargs)
        if n == 1 and ranked:
            return ranked[0]
        return ranked
