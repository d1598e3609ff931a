import pytest

import dict_validate
from dict_validate import has_valid_words, load_word_list, tokenize, validate_multiple

SENTENCE = "The enemy is advancing from the north; we need reinforcements immediately!"


def test_english_sentence_is_valid():
    result = dict_validate.validate(SENTENCE)
    assert result["valid"] is True
    assert result["confidence"] > 0.7
    assert result["error"] is None
    assert result["metrics"]["total_words"] == 11
    assert result["metrics"]["word_coverage"] == pytest.approx(100.0)
    assert result["metrics"]["longest_valid_word"] == "REINFORCEMENTS"
    assert result["summary"].startswith("Excellent")


def test_noise_is_invalid():
    result = dict_validate.validate("XQZV KPLM WRTQ ZZXV BNMQ")
    assert result["valid"] is False
    assert result["confidence"] < 0.5
    assert result["summary"].startswith("Poor")


@pytest.mark.parametrize("text", ["", "   ", None])
def test_empty_text(text):
    result = dict_validate.validate(text)
    assert result["valid"] is False
    assert result["confidence"] == 0.0
    assert result["error"] == "Empty text"


def test_no_words():
    result = dict_validate.validate("123 456 !!!")
    assert result["valid"] is False
    assert result["error"] == "No words found"


def test_single_word_not_valid():
    result = dict_validate.validate("ENEMY")
    assert result["confidence"] == pytest.approx(1.0)
    assert result["valid"] is False


def test_custom_dictionary():
    words = {"FOO", "BAR"}
    assert dict_validate.validate("foo bar foo", words)["valid"] is True
    assert dict_validate.validate(SENTENCE, words)["valid"] is False


def test_tokenize():
    assert tokenize("Don't stop, señor! 42") == ["DONT", "STOP", "SENOR"]
    assert tokenize(None) == []
    assert tokenize(b"stop, se\xc3\xb1or") == ["STOP", "SENOR"]


def test_found_words_capped():
    result = dict_validate.validate(" ".join(["THE"] * 25))
    assert len(result["found_words"]) == 10
    assert result["metrics"]["unique_words"] == 1


def test_validate_multiple_ranks_plaintext_first():
    candidates = [
        {"plaintext": "XQZV KPLM WRTQ", "confidence": 0.6, "method": "shift 3"},
        {"plaintext": SENTENCE, "confidence": 0.5, "method": "shift 7"},
        {"plaintext": "", "confidence": 0.9, "method": "broken"},
    ]
    ranked = validate_multiple(candidates)
    assert [c["method"] for c in ranked] == ["shift 7", "shift 3", "broken"]
    assert ranked[0]["confidence"] == pytest.approx(0.6 * 0.5 + 0.4 * 1.0)
    assert ranked[0]["prior_confidence"] == 0.5
    assert ranked[2]["error"] == "No plaintext available"
    assert ranked[2]["confidence"] == 0.0


def test_validate_multiple_does_not_mutate_input():
    candidate = {"plaintext": SENTENCE, "confidence": 0.5}
    validate_multiple([candidate])
    assert candidate == {"plaintext": SENTENCE, "confidence": 0.5}


def test_has_valid_words():
    assert has_valid_words(SENTENCE, min_count=3)
    assert not has_valid_words("THE XQZV", min_count=3)
    assert not has_valid_words("")


def test_load_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# comment\nhello\n\nWorld\ncafé\n", encoding="utf-8")
    assert load_word_list(path) == frozenset({"HELLO", "WORLD", "CAFE"})
