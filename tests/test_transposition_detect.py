import warnings

import pytest

from calibrate import substitution_encrypt
from transposition_detect import (
    Recommendation,
    TranspositionResult,
    analyze,
    compare,
    determine_transposition_score,
    letter_fit,
    recommend,
)


@pytest.mark.parametrize("text", ["ABC", "", None, "12 34 !!"])
def test_short_text_is_neutral(text):
    result = analyze(text, "english")
    assert result.transposition_score == 0.5
    assert result.chi_squared_letters is None
    assert result.ngram_score_cipher is None
    assert result.recommendation == Recommendation.INSUFFICIENT_DATA
    assert result.recommendation == "insufficient_data"


def test_to_dict_uses_plain_values():
    d = analyze("ABC").to_dict()
    assert d["recommendation"] == "insufficient_data"
    assert d["chi_squared_letters"] is None


def test_scores_bounded(military, columnar_cipher, noise, vigenere_key3):
    for text in (military, columnar_cipher, noise, vigenere_key3):
        result = analyze(text, "english")
        assert 0.0 <= result.transposition_score <= 1.0
        assert 0.0 <= result.ngram_score_cipher <= 1.0


def test_columnar_scores_above_plaintext(military, columnar_cipher):
    assert analyze(columnar_cipher).transposition_score > analyze(military).transposition_score + 0.1


def test_substitution_has_poor_letter_fit(military):
    key = "QWERTYUIOPASDFGHJKLZXCVBNM"
    result = analyze(substitution_encrypt(military, key), "english")
    assert letter_fit(result.chi_squared_letters, result.length) < letter_fit(
        analyze(military).chi_squared_letters, len(military))


def test_auto_and_unknown_language_fall_back_silently(military):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        baseline = analyze(military, "english")
        assert analyze(military, "auto") == baseline
        assert analyze(military, "klingon") == baseline


def test_length_pulls_score_toward_neutral():
    short = determine_transposition_score(0.0, 0.0, 5)
    long = determine_transposition_score(0.0, 0.0, 200)
    assert long == pytest.approx(1.0)
    assert 0.5 < short < long


def test_plaintext_signals_score_low():
    assert determine_transposition_score(0.0, 0.95, 200) == pytest.approx(0.0)


class TestRecommend:
    def test_transposition_band(self):
        assert recommend(0.7, 10.0, 200, 1.7) == Recommendation.LIKELY_TRANSPOSITION

    def test_ambiguous_band(self):
        assert recommend(0.5, 10.0, 200, 1.7) == Recommendation.AMBIGUOUS

    def test_poor_fit_high_ic_is_substitution(self):
        assert recommend(0.2, 500.0, 200, 1.7) == Recommendation.LIKELY_SUBSTITUTION

    def test_poor_fit_flat_ic_is_polyalphabetic(self):
        assert recommend(0.2, 500.0, 200, 1.05) == Recommendation.LIKELY_POLYALPHABETIC

    def test_good_fit_is_unclear(self):
        assert recommend(0.1, 5.0, 200, 1.7) == Recommendation.UNCLEAR_CIPHER_TYPE


def test_compare(military, columnar_cipher):
    result = compare(columnar_cipher, military)
    assert isinstance(result["text1_analysis"], TranspositionResult)
    assert result["comparison"]["interpretation"] == "text1_more_likely_transposition"
    assert result["comparison"]["score_difference"] > 0.1

    swapped = compare(military, columnar_cipher)
    assert swapped["comparison"]["interpretation"] == "text2_more_likely_transposition"


def test_compare_similar():
    result = compare("ABC", "XYZ")
    assert result["comparison"]["interpretation"] == "similar_transposition_likelihood"
    assert result["comparison"]["score_difference"] == 0.0
