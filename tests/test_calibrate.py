import json

import numpy as np
import pytest

import calibrate
from calibrate import (
    LABELS,
    build_corpus,
    caesar_encrypt,
    classify_corpus,
    columnar_encrypt,
    route_spiral_encrypt,
    substitution_encrypt,
    vigenere_encrypt,
)
from cipherstat import index_of_coincidence, only_letters


def test_caesar():
    assert caesar_encrypt("Attack at dawn", 3) == "DWWDFNDWGDZQ"


def test_vigenere_key_advances_on_letters_only():
    assert vigenere_encrypt("AT TACK", "KEY") == vigenere_encrypt("ATTACK", "KEY") == "KXRKGI"


def test_vigenere_rejects_empty_key():
    with pytest.raises(ValueError):
        vigenere_encrypt("ATTACK", "123")


def test_substitution():
    key = "ZYXWVUTSRQPONMLKJIHGFEDCBA"
    assert substitution_encrypt("abc", key) == "ZYX"
    with pytest.raises(ValueError):
        substitution_encrypt("abc", "ABC")


def test_columnar():
    assert columnar_encrypt("ABCDEF", [1, 0, 2]) == "BEADCF"
    with pytest.raises(ValueError):
        columnar_encrypt("ABCDEF", [0, 0, 2])


def test_route_spiral():
    assert route_spiral_encrypt("ABCDEF", 2, 3) == "ABCFED"
    assert route_spiral_encrypt("ABCDEFGHI", 3, 3) == "ABCFIHGDE"


def test_route_spiral_pads():
    assert route_spiral_encrypt("ABCD", 2, 3) == "ABCXXD"


def test_transpositions_preserve_ic(military):
    ic = index_of_coincidence(military)
    assert index_of_coincidence(columnar_encrypt(military, [2, 0, 1, 3])) == pytest.approx(ic)


def test_build_corpus_is_seeded():
    first = build_corpus(samples=2, length=80, seed=3)
    second = build_corpus(samples=2, length=80, seed=3)
    assert first == second
    assert len(first) == 2 * len(LABELS)
    assert {s["label"] for s in first} == set(LABELS)
    assert all(len(only_letters(s["text"])) <= 80 for s in first)


def test_make_sample_rejects_unknown_label():
    with pytest.raises(ValueError):
        calibrate.make_sample("enigma", "ATTACK", np.random.default_rng(0))


def test_corpus_is_json_serialisable(tmp_path):
    path = tmp_path / "out" / "corpus.json"
    calibrate.save_corpus(build_corpus(samples=1, length=60, seed=1), path)
    assert len(json.loads(path.read_text())) == len(LABELS)


def test_classify_corpus_report():
    report = classify_corpus(build_corpus(samples=1, length=120, seed=5))
    assert set(report["accuracy"]) == set(LABELS)
    assert all(0.0 <= a <= 1.0 for a in report["accuracy"].values())
    assert len(report["rows"]) == len(LABELS)


def test_transposition_scores_per_label():
    scores = calibrate.transposition_scores(build_corpus(samples=2, length=100, seed=9))
    assert set(scores) == set(LABELS)
    assert all(len(v) == 2 for v in scores.values())
    assert all(0.0 <= s <= 1.0 for v in scores.values() for s in v)
