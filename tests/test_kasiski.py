import pytest

import kasiski


def test_find_repeated_ngrams():
    assert kasiski.find_repeated_ngrams("ABCXXABC") == {"ABC": [0, 5]}


def test_find_repeated_ngrams_normalizes():
    assert kasiski.find_repeated_ngrams("abc, xx abc") == {"ABC": [0, 5]}


def test_find_repeated_ngrams_rejects_zero():
    with pytest.raises(ValueError):
        kasiski.find_repeated_ngrams("ABC", 0)


def test_distances_are_consecutive():
    assert sorted(kasiski.calculate_distances({"ABC": [0, 6, 15], "XYZ": [2, 10]})) == [6, 8, 9]


def test_gcd_list():
    assert kasiski.gcd_list([6, 9, 12]) == 3
    assert kasiski.gcd_list([]) == 0


def test_short_text_has_no_suggestions():
    assert kasiski.suggest_key_lengths("ABCAB") == []
    assert kasiski.suggest_key_lengths("") == []


def test_no_repeats_no_suggestions():
    assert kasiski.suggest_key_lengths("ABCDEFGHIJKLMNOPQRSTUVWXYZ") == []


def test_suggestions_ranked_by_score_then_length():
    # ABC at 0, 6, 12: distances 6, 6
    suggestions = kasiski.suggest_key_lengths("ABCXYZABCQRSABC")
    assert [s["key_length"] for s in suggestions] == [2, 3, 6]
    assert all(s["score"] == 1.0 for s in suggestions)


def test_vigenere_key_length(vigenere_key3):
    suggestions = kasiski.suggest_key_lengths(vigenere_key3)
    assert suggestions[0]["key_length"] == 3
    assert suggestions[0]["score"] == 1.0


def test_examine(vigenere_key3):
    result = kasiski.examine(vigenere_key3)
    assert result["has_repetitions"] is True
    assert result["gcd"] % 3 == 0
    assert all(d % 3 == 0 for d in result["distances"])


def test_examine_empty():
    result = kasiski.examine("")
    assert result == {"repeated_ngrams": {}, "distances": [], "gcd": 0,
                      "suggested_key_lengths": [], "has_repetitions": False}
