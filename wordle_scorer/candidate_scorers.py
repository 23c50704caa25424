import math
from typing import Iterable, Optional

from wordle_scorer.filter import ConstraintState, FeedbackClassifier
from wordle_scorer.patterns import all_patterns
from wordle_scorer.words import CandidateSet, as_candidate_set


class LetterPositionFrequencyModel:

    """
    Scores words by how common their letters are in each position among the candidates.

    A word's score is the sum, over its positions, of how many candidates have the same letter in that
    position. It is cheap to compute and a reasonable first cut before the entropy scorer.
    """

    # Cheap enough that a worker pool only adds overhead
    PARALLEL = False

    def __init__(self, candidates: CandidateSet | Iterable[str]):
        self.candidates = as_candidate_set(candidates)

        alphabet = self.candidates.alphabet
        position_counts = [dict.fromkeys(alphabet, 0) for _ in range(self.candidates.length)]
        for word in self.candidates:
            for i, char in enumerate(word):
                position_counts[i][char] += 1

        self._position_counts = tuple(position_counts)

    @property
    def table(self) -> tuple[dict[str, int], ...]:
        """
        Per-position letter counts. Each position's counts add up to the number of candidates.
        """
        return tuple(dict(counts) for counts in self._position_counts)

    def score(self, candidate: str) -> int:
        """
        Sum of the positional frequencies of the candidate's letters.

        Args:
            candidate (str): The word to score; need not be a candidate itself.

        Returns:
            int: The frequency-sum score.

        Raises:
            InvalidInput: If the word has the wrong length or illegal characters.
        """
        self.candidates.validate(candidate)
        return sum(self._position_counts[i][char] for i, char in enumerate(candidate))


class EntropyScorer:

    """
    Scores words by the expected information, in bits, of the feedback they could produce.

    Every one of the 3 ** n patterns is turned into a constraint state; the state's probability is the share
    of the original candidates it leaves, and its information is -log2 of that. The expected information
    is the probability-weighted sum. Probabilities are always taken against the full candidate set the
    scorer was built with, so scores stay comparable as knowledge accumulates.
    """

    PARALLEL = True

    def __init__(self, candidates: CandidateSet | Iterable[str], classifier: Optional[FeedbackClassifier] = None):
        self.candidates = as_candidate_set(candidates)
        self.classifier = classifier or FeedbackClassifier(self.candidates.length, self.candidates.alphabet)
        self._total = len(self.candidates)

    def probability(self, state: ConstraintState) -> float:
        return state.count_compatible(self.candidates) / self._total

    def information(self, state: ConstraintState) -> float:
        """
        Bits of information the state represents, -log2(p). A state matching nothing is worth 0 bits.
        """
        return self._information(self.probability(state))

    @staticmethod
    def _information(p: float) -> float:
        return 0.0 if p == 0 else -math.log2(p)

    def expected_information(self, candidate: str) -> float:
        """
        Calculate the expected information of guessing a word.

        This sweeps all 3 ** n feedback patterns, so it is an expensive call (243 patterns for five
        letters, each filtering the whole candidate set). Each call is independent of every other.

        Args:
            candidate (str): The word to score.

        Returns:
            float: The expected information in bits.
        """
        self.candidates.validate(candidate)

        total = 0.0
        for pattern in all_patterns(self.candidates.length):
            state = self.classifier.classify(candidate, pattern)
            p = self.probability(state)
            total += p * self._information(p)
        return total

    def score(self, candidate: str) -> float:
        return self.expected_information(candidate)
