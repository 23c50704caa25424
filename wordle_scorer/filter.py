import logging
from functools import reduce
from typing import Iterable, Mapping, Optional, Sequence

from wordle_scorer.config import ALPHABET
from wordle_scorer.errors import InconsistentState, InvalidInput
from wordle_scorer.patterns import Pattern, Status, format_pattern, parse_pattern
from wordle_scorer.words import CandidateSet, as_candidate_set, validate_word

log = logging.getLogger(__name__)


def _intersect(a: range, b: range) -> range:
    return range(max(a.start, b.start), min(a.stop, b.stop))


class ConstraintState:
    """
    What is known about the answer after some guesses.

    Holds, for each position, the letters still allowed there; for each letter, the inclusive range
    of times it may occur; and the words already guessed. Instances never change: refine() builds
    a new state. A position with no allowed letters or a letter with an empty range is legal and
    simply matches no word.
    """

    __slots__ = ("length", "alphabet", "_allowed", "_counts", "_guesses", "_required", "_upper", "_vacuous")

    def __init__(
        self,
        length: int,
        alphabet: str = ALPHABET,
        allowed: Optional[Sequence[Iterable[str]]] = None,
        counts: Optional[Mapping[str, range | tuple[int, int]]] = None,
        guesses: Iterable[str] = (),
    ):
        """
        Initializes the state. Anything not given is unconstrained.

        Args:
            length (int): Word length.
            alphabet (str, optional): The permitted letters. Defaults to A-Z.
            allowed (Optional[Sequence[Iterable[str]]], optional): Allowed letters per position.
            counts (Optional[Mapping[str, range | tuple[int, int]]], optional): Letter to count range,
                either a range or an inclusive (min, max) pair.
            guesses (Iterable[str], optional): Words already guessed.
        """
        if length < 1:
            raise InvalidInput(f"Word length must be positive, got {length}.")

        self.length = length
        self.alphabet = alphabet
        letters = frozenset(alphabet)

        if allowed is None:
            self._allowed = (letters,) * length
        else:
            self._allowed = tuple(frozenset(position) for position in allowed)
            if len(self._allowed) != length:
                raise InvalidInput(f"Expected allowed letters for {length} positions, got {len(self._allowed)}.")
            stray = frozenset().union(*self._allowed) - letters
            if stray:
                raise InvalidInput(f"Illegal characters found in allowed letters: {''.join(sorted(stray))}.")

        full = range(0, length + 1)
        self._counts = {ch: full for ch in alphabet}
        for ch, bounds in (counts or {}).items():
            if ch not in letters:
                raise InvalidInput(f"Illegal character found in letter counts: {ch!r}.")
            if not isinstance(bounds, range):
                low, high = bounds
                bounds = range(low, high + 1)
            self._counts[ch] = bounds

        self._guesses = frozenset(validate_word(word, length, alphabet) for word in guesses)

        # Precomputed for the compatibility check
        self._required = tuple((ch, r.start) for ch, r in self._counts.items() if r.start > 0)
        self._upper = {ch: r.stop - 1 for ch, r in self._counts.items() if r.stop - 1 < length}
        self._vacuous = any(len(r) == 0 for r in self._counts.values())

    @property
    def allowed(self) -> tuple[frozenset[str], ...]:
        return self._allowed

    @property
    def counts(self) -> dict[str, range]:
        return dict(self._counts)

    @property
    def guesses(self) -> frozenset[str]:
        return self._guesses

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstraintState):
            return NotImplemented
        return (
            self.length == other.length
            and self.alphabet == other.alphabet
            and self._allowed == other._allowed
            and self._counts == other._counts
            and self._guesses == other._guesses
        )

    def __hash__(self) -> int:
        return hash((self.length, self.alphabet, self._allowed, tuple(self._counts.values()), self._guesses))

    def __repr__(self) -> str:
        allowed = ["".join(sorted(position)) for position in self._allowed]
        counts = {ch: (r.start, r.stop - 1) for ch, r in self._counts.items() if r != range(0, self.length + 1)}
        return f"ConstraintState(allowed={allowed}, counts={counts}, guesses={sorted(self._guesses)})"

    def _matches(self, word: str) -> bool:
        if self._vacuous:
            return False

        allowed = self._allowed
        for i, ch in enumerate(word):
            if ch not in allowed[i]:
                return False

        for ch, low in self._required:
            if word.count(ch) < low:
                return False

        upper = self._upper
        for ch in word:
            if ch in upper and word.count(ch) > upper[ch]:
                return False

        return True

    def is_compatible(self, word: str) -> bool:
        """
        Determines whether a word agrees with everything known.

        The word's letters must each be allowed in their positions, and every letter must occur a number of
        times inside its range. Guessed words are not excluded here.

        Raises:
            InvalidInput: If the word has the wrong length or illegal characters.
        """
        validate_word(word, self.length, self.alphabet)
        return self._matches(word)

    def _candidates(self, candidates: CandidateSet | Iterable[str]) -> CandidateSet:
        candidates = as_candidate_set(candidates, self.alphabet)
        if candidates.length != self.length:
            raise InvalidInput(f"Candidate words have length {candidates.length}, state expects {self.length}.")
        return candidates

    def compatible_words(self, candidates: CandidateSet | Iterable[str]) -> frozenset[str]:
        """
        Returns the candidates that could still be the answer, excluding words already guessed.

        Args:
            candidates (CandidateSet | Iterable[str]): The original candidate words.

        Returns:
            frozenset[str]: The compatible words.
        """
        candidates = self._candidates(candidates)
        guesses = self._guesses
        return frozenset(word for word in candidates if word not in guesses and self._matches(word))

    def count_compatible(self, candidates: CandidateSet | Iterable[str]) -> int:
        candidates = self._candidates(candidates)
        guesses = self._guesses
        return sum(1 for word in candidates if word not in guesses and self._matches(word))

    def determined_word(self, candidates: CandidateSet | Iterable[str]) -> Optional[str]:
        """
        Returns the word this state pins down, if every position allows exactly one letter.

        Args:
            candidates (CandidateSet | Iterable[str]): The original candidate words.

        Returns:
            Optional[str]: The implied word, or None if the state is still undetermined.

        Raises:
            InconsistentState: If the implied word is not one of the candidates.
        """
        if not all(len(position) == 1 for position in self._allowed):
            return None

        candidates = self._candidates(candidates)
        word = "".join(next(iter(position)) for position in self._allowed)
        if word not in candidates:
            raise InconsistentState(f"State represents {word}, which is not a valid candidate.")
        return word

    def refine(self, other: "ConstraintState") -> "ConstraintState":
        """
        Combines two states into one holding both sets of knowledge.

        Allowed letters and count ranges are intersected and guesses are unioned, so the operation is
        commutative, associative and idempotent.

        Args:
            other (ConstraintState): The state to combine with.

        Returns:
            ConstraintState: A new, possibly vacuous, state.
        """
        if self.length != other.length or self.alphabet != other.alphabet:
            raise InvalidInput("Cannot refine states built for different word lengths or alphabets.")

        return ConstraintState(
            self.length,
            self.alphabet,
            allowed=[a & b for a, b in zip(self._allowed, other._allowed)],
            counts={ch: _intersect(r, other._counts[ch]) for ch, r in self._counts.items()},
            guesses=self._guesses | other._guesses,
        )


class FeedbackClassifier:
    """
    Turns a guess and the feedback it received into a ConstraintState.

    Repeated letters are handled through per-letter count bounds rather than by striking letters out
    position by position. For a guess like EMCEE with one green E, one yellow E and one grey E, the
    answer has exactly two Es; with only green and yellow Es it has at least that many.
    """

    def __init__(self, length: int, alphabet: str = ALPHABET):
        if length < 1:
            raise InvalidInput(f"Word length must be positive, got {length}.")
        self.length = length
        self.alphabet = alphabet

    def unconstrained(self) -> ConstraintState:
        return ConstraintState(self.length, self.alphabet)

    def _validate_pattern(self, pattern: Sequence[Status] | str) -> Pattern:
        if isinstance(pattern, str):
            pattern = parse_pattern(pattern)
        pattern = tuple(pattern)
        if len(pattern) != self.length:
            raise InvalidInput(f"The feedback {pattern} has length {len(pattern)}, should be {self.length}.")
        if not all(isinstance(status, Status) for status in pattern):
            raise InvalidInput(f"The feedback {pattern} contains values that are not statuses.")
        return pattern

    def classify(self, guess: str, pattern: Sequence[Status] | str) -> ConstraintState:
        """
        Builds the state consistent with one guess and its feedback.

        Args:
            guess (str): The guessed word.
            pattern (Sequence[Status] | str): The feedback, as statuses or a string of 'g', 'y', 'x'.

        Returns:
            ConstraintState: The knowledge this single observation gives.

        Raises:
            InvalidInput: If the guess or the pattern does not fit the word length and alphabet.
        """
        guess = validate_word(guess, self.length, self.alphabet)
        pattern = self._validate_pattern(pattern)
        n = self.length

        # Tally present (green or yellow) and green occurrences, and note grey letters
        min_counts = {}
        green_counts = {}
        greys = set()
        for ch, status in zip(guess, pattern):
            if status is Status.NOT_PRESENT:
                greys.add(ch)
            else:
                min_counts[ch] = min_counts.get(ch, 0) + 1
            if status is Status.CORRECT_POSITION:
                green_counts[ch] = green_counts.get(ch, 0) + 1

        total_min = sum(min_counts.values())

        # A grey occurrence means the exact count is known. Otherwise the letter can take up any
        # positions not claimed by the other letters' minimums.
        max_counts = {}
        for ch in self.alphabet:
            low = min_counts.get(ch, 0)
            max_counts[ch] = low if ch in greys else low + (n - (total_min - low))

        # Letters whose every occurrence is already pinned by a green cannot turn up anywhere else.
        # This only looks at greens in this guess; no feasibility pass over other positions is made.
        exhausted = {ch for ch in self.alphabet if max_counts[ch] == green_counts.get(ch, 0)}

        everything = frozenset(self.alphabet)
        allowed = []
        for ch, status in zip(guess, pattern):
            if status is Status.CORRECT_POSITION:
                allowed.append({ch})
            else:
                allowed.append(everything - {ch} - exhausted)

        counts = {ch: range(min_counts.get(ch, 0), max_counts[ch] + 1) for ch in self.alphabet}

        state = ConstraintState(n, self.alphabet, allowed=allowed, counts=counts, guesses=(guess,))
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Classified %s with %s into %r", guess, format_pattern(pattern), state)
        return state

    def classify_history(self, history: Iterable[tuple[str, Sequence[Status] | str]]) -> ConstraintState:
        """
        Folds a sequence of (guess, feedback) observations into one state.

        Args:
            history (Iterable[tuple[str, Sequence[Status] | str]]): Guesses with their feedback, in any order.

        Returns:
            ConstraintState: The refined state; unconstrained when the history is empty.
        """
        return reduce(
            lambda state, observation: state.refine(self.classify(*observation)),
            history,
            self.unconstrained(),
        )
