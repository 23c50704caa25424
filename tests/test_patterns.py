import pytest

from wordle_scorer import InvalidInput, Status, all_patterns, feedback, format_pattern, iter_patterns, parse_pattern

X, Y, G = Status.NOT_PRESENT, Status.WRONG_POSITION, Status.CORRECT_POSITION


@pytest.mark.parametrize("length", [1, 2, 3, 5])
def test_all_patterns_complete_and_distinct(length):
    patterns = all_patterns(length)
    assert len(patterns) == 3 ** length
    assert len(set(patterns)) == 3 ** length
    assert all(len(pattern) == length for pattern in patterns)


def test_all_patterns_order():
    assert all_patterns(1) == ((X,), (Y,), (G,))
    patterns = all_patterns(2)
    assert patterns[0] == (X, X)
    assert patterns[1] == (X, Y)
    assert patterns[3] == (Y, X)
    assert patterns[-1] == (G, G)


def test_all_patterns_cached():
    assert all_patterns(4) is all_patterns(4)


def test_iter_patterns_matches_all_patterns():
    assert list(iter_patterns(3)) == list(all_patterns(3))


def test_pattern_length_must_be_positive():
    with pytest.raises(InvalidInput):
        all_patterns(0)


def test_feedback_exact_match():
    assert feedback("CRANE", "CRANE") == (G, G, G, G, G)


def test_feedback_no_match():
    assert feedback("GHOST", "CRANE") == (X, X, X, X, X)


def test_feedback_repeated_guess_letter():
    # Only one E in the answer, so only the first unmatched E is yellow
    assert format_pattern(feedback("SPEED", "ABIDE")) == "xxyxy"


def test_feedback_repeated_letters_with_green():
    assert format_pattern(feedback("LEVEL", "HELLO")) == "ygxxy"


def test_feedback_length_mismatch():
    with pytest.raises(InvalidInput):
        feedback("CRANE", "CRANES")


def test_parse_pattern():
    assert parse_pattern("GyX") == (G, Y, X)
    assert format_pattern(parse_pattern("xggyx")) == "xggyx"


def test_parse_pattern_rejects_unknown_colour():
    with pytest.raises(InvalidInput):
        parse_pattern("gyz")
