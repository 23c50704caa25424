# Package initialization for wordle_scorer

from wordle_scorer.candidate_ranker import CandidateRanker, rank, score_candidates
from wordle_scorer.candidate_scorers import EntropyScorer, LetterPositionFrequencyModel
from wordle_scorer.errors import InconsistentState, InvalidInput, WordleScorerError
from wordle_scorer.filter import ConstraintState, FeedbackClassifier
from wordle_scorer.logs import configure_logging
from wordle_scorer.patterns import Status, all_patterns, feedback, format_pattern, iter_patterns, parse_pattern
from wordle_scorer.words import CandidateSet, as_candidate_set

__all__ = [
    "CandidateRanker",
    "CandidateSet",
    "ConstraintState",
    "EntropyScorer",
    "FeedbackClassifier",
    "InconsistentState",
    "InvalidInput",
    "LetterPositionFrequencyModel",
    "Status",
    "WordleScorerError",
    "all_patterns",
    "as_candidate_set",
    "configure_logging",
    "feedback",
    "format_pattern",
    "iter_patterns",
    "parse_pattern",
    "rank",
    "score_candidates",
]
