import math

import pytest

from wordle_scorer import (
    CandidateSet,
    ConstraintState,
    EntropyScorer,
    FeedbackClassifier,
    InvalidInput,
    LetterPositionFrequencyModel,
)


def test_frequency_table_sums_to_candidate_count(words):
    model = LetterPositionFrequencyModel(words)
    assert len(model.table) == words.length
    for counts in model.table:
        assert sum(counts.values()) == len(words)


def test_frequency_table_is_a_copy(words):
    model = LetterPositionFrequencyModel(words)
    model.table[0]["A"] = 10_000
    assert model.table[0]["A"] != 10_000


def test_frequency_score():
    model = LetterPositionFrequencyModel(["CRANE", "TRACE", "CRATE"])
    assert model.table[0]["C"] == 2
    assert model.table[3] == {**dict.fromkeys(model.table[3], 0), "N": 1, "C": 1, "T": 1}
    assert model.score("CRANE") == 12
    assert model.score("TRACE") == 11
    assert model.score("ZZZZZ") == 0


def test_frequency_score_rejects_bad_words(words):
    model = LetterPositionFrequencyModel(words)
    with pytest.raises(InvalidInput):
        model.score("CRANES")
    with pytest.raises(InvalidInput):
        model.score("crane")


def test_probability_and_information(words):
    scorer = EntropyScorer(words)
    unconstrained = ConstraintState(5)
    assert scorer.probability(unconstrained) == 1.0
    assert scorer.information(unconstrained) == 0.0

    half = EntropyScorer(["AB", "CD"])
    state = FeedbackClassifier(2).classify("AB", "xx")
    assert half.probability(state) == 0.5
    assert half.information(state) == pytest.approx(1.0)


def test_vacuous_state_has_zero_information(words):
    scorer = EntropyScorer(words)
    state = ConstraintState(5, allowed=[set()] * 5)
    assert scorer.probability(state) == 0.0
    assert scorer.information(state) == 0.0


def test_expected_information_small_set():
    scorer = EntropyScorer(CandidateSet(["AB", "CD"]))
    # Only an all-grey pattern leaves the other word, with probability 1/2 and 1 bit
    assert scorer.expected_information("AB") == pytest.approx(0.5)
    assert scorer.expected_information("CD") == pytest.approx(0.5)
    # Neither candidate shares a letter with EF, so the only surviving pattern leaves both
    assert scorer.expected_information("EF") == 0.0


def test_expected_information_is_deterministic_and_non_negative(words):
    scorer = EntropyScorer(words)
    first = scorer.expected_information("CRANE")
    assert first > 0
    assert scorer.expected_information("CRANE") == first
    assert scorer.score("CRANE") == first


def test_expected_information_rejects_bad_words(words):
    scorer = EntropyScorer(words)
    with pytest.raises(InvalidInput):
        scorer.expected_information("CRAN")


def test_entropy_scorer_uses_given_classifier(words):
    classifier = FeedbackClassifier(5)
    scorer = EntropyScorer(words, classifier=classifier)
    assert scorer.classifier is classifier


def test_weary_all_grey_on_small_list(words):
    # GHOST and PLUMB are the only words sharing no letter with WEARY
    state = FeedbackClassifier(5).classify("WEARY", "xxxxx")
    scorer = EntropyScorer(words)
    assert state.compatible_words(words) == {"GHOST", "PLUMB"}
    assert scorer.probability(state) == 2 / len(words)
    assert scorer.information(state) == pytest.approx(math.log2(15))
