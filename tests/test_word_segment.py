import pytest

from dict_validate import DEFAULT_DICTIONARY
from word_segment import segment_text, segment_text_with_confidence, segment_words

WORDS = {"THE", "ENEMY", "IS", "AT", "GATE", "GATES", "NORTH"}


def test_reconstructs_boundaries():
    assert segment_text("THEENEMYISATTHENORTHGATE", WORDS) == "THE ENEMY IS AT THE NORTH GATE"


def test_prefers_more_words():
    assert segment_text("NORTH", {"NORTH", "NOR", "TH"}) == "NOR TH"


@pytest.mark.parametrize("sentence", [
    "THE ENEMY IS ADVANCING FROM THE NORTH",
    "SEND THE MESSAGE TO THE GENERAL BEFORE DAWN",
    "HOLD THE BRIDGE AND ATTACK AT MIDNIGHT",
])
def test_every_token_is_a_dictionary_word(sentence):
    tokens = segment_text(sentence.replace(" ", "")).split(" ")
    assert all(t in DEFAULT_DICTIONARY for t in tokens)
    assert "".join(tokens) == sentence.replace(" ", "")


def test_normalizes_input():
    assert segment_text("the enemy, is at the gate!", WORDS) == "THE ENEMY IS AT THE GATE"


def test_greedy_fallback_emits_single_letters():
    assert segment_text("THEXGATE", WORDS) == "THE X GATE"


def test_no_fallback_returns_unsplit():
    assert segment_text("THEXGATE", WORDS, preserve_unknown=False) == "THEXGATE"


def test_empty():
    assert segment_words("") == []
    assert segment_text(None) == ""


def test_word_length_limits():
    assert segment_text("THEGATE", WORDS, max_word_length=3) == "THE G AT E"
    with pytest.raises(ValueError):
        segment_text("THE", WORDS, min_word_length=0)
    with pytest.raises(ValueError):
        segment_text("THE", WORDS, max_word_length=1, min_word_length=2)


def test_confidence_full_coverage():
    result = segment_text_with_confidence("THEENEMYISATTHEGATE", WORDS)
    assert result["segmented"] == "THE ENEMY IS AT THE GATE"
    assert result["confidence"] == pytest.approx(1.0)
    assert result["word_count"] == 6
    assert result["valid_words"] == 6


def test_confidence_partial_coverage():
    result = segment_text_with_confidence("THEXGATE", WORDS)
    assert result["word_count"] == 3
    assert result["valid_words"] == 2
    assert result["word_coverage"] == pytest.approx(2 / 3)
    assert result["char_coverage"] == pytest.approx(7 / 8)
    assert result["confidence"] == pytest.approx(0.7 * 2 / 3 + 0.3 * 7 / 8)


def test_confidence_empty():
    result = segment_text_with_confidence("")
    assert result["segmented"] == ""
    assert result["confidence"] == 0.0
