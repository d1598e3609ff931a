"""
---
version: 0.2.0
created: 2026-02-28
updated: 2026-03-03
---

dict_validate.py — Dictionary plausibility of candidate plaintexts.

Scores how much of a text is made of known words, and ranks batches of
trial decryptions by blending each candidate's own confidence with that
dictionary score. Dictionaries are any container of uppercase words that
supports `in`; the default is the built-in English common-word list.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Container, Iterable

from cipherstat import as_text, only_letters
from cipherstat_tables import ENGLISH_WORDS

DEFAULT_DICTIONARY: frozenset[str] = frozenset(ENGLISH_WORDS)

VALID_THRESHOLD = 0.5
MIN_VALID_WORDS = 2
WORD_WEIGHT = 0.7
PRIOR_WEIGHT = 0.6
MAX_FOUND_WORDS = 10

_WORD_RE = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")


def load_word_list(path: str | Path) -> frozenset[str]:
    """Read one word per line (blank lines and '#' comments skipped) into an uppercase set."""
    words = set()
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            word = only_letters(line)
            if word:
                words.add(word)
    return frozenset(words)


def tokenize(text) -> list[str]:
    """Split on whitespace and punctuation; each token reduced to A-Z."""
    if text is None:
        return []
    tokens = (only_letters(t) for t in _WORD_RE.findall(as_text(text)))
    return [t for t in tokens if t]


def _summary(confidence: float, valid_words: int, total_words: int) -> str:
    if confidence > 0.9:
        band = "Excellent"
    elif confidence > 0.7:
        band = "Good"
    elif confidence > 0.5:
        band = "Moderate"
    elif confidence > 0.3:
        band = "Weak"
    else:
        band = "Poor"
    return f"{band} match: {valid_words}/{total_words} words recognised"


def _empty_result(error: str) -> dict:
    return {
        "valid": False,
        "confidence": 0.0,
        "metrics": {
            "total_words": 0, "valid_words": 0, "word_coverage": 0.0,
            "total_chars": 0, "valid_chars": 0, "char_coverage": 0.0,
            "avg_word_length": 0.0, "unique_words": 0, "vocabulary_richness": 0.0,
            "longest_valid_word": "",
        },
        "found_words": [],
        "summary": "Poor match: nothing to validate",
        "error": error,
    }


def validate(text, dictionary: Container[str] | None = None) -> dict:
    """
    Dictionary coverage of a candidate plaintext.

    confidence = 0.7 * word coverage + 0.3 * character coverage.
    valid requires confidence > 0.5 and at least 2 recognised words.

    Returns dict with:
        valid, confidence, summary, error (None unless nothing to validate)
        metrics: total_words, valid_words, word_coverage (%), total_chars,
            valid_chars, char_coverage (%), avg_word_length, unique_words,
            vocabulary_richness, longest_valid_word
        found_words: first 10 recognised words, in order
    """
    words = DEFAULT_DICTIONARY if dictionary is None else dictionary
    if not as_text(text).strip():
        return _empty_result("Empty text")
    tokens = tokenize(text)
    if not tokens:
        return _empty_result("No words found")

    found = [t for t in tokens if t in words]
    total_chars = sum(len(t) for t in tokens)
    valid_chars = sum(len(t) for t in found)
    word_coverage = len(found) / len(tokens)
    char_coverage = valid_chars / total_chars
    confidence = WORD_WEIGHT * word_coverage + (1 - WORD_WEIGHT) * char_coverage
    unique = set(tokens)

    return {
        "valid": confidence > VALID_THRESHOLD and len(found) >= MIN_VALID_WORDS,
        "confidence": confidence,
        "metrics": {
            "total_words": len(tokens),
            "valid_words": len(found),
            "word_coverage": word_coverage * 100,
            "total_chars": total_chars,
            "valid_chars": valid_chars,
            "char_coverage": char_coverage * 100,
            "avg_word_length": total_chars / len(tokens),
            "unique_words": len(unique),
            "vocabulary_richness": len(unique) / len(tokens),
            "longest_valid_word": max(found, key=len) if found else "",
        },
        "found_words": found[:MAX_FOUND_WORDS],
        "summary": _summary(confidence, len(found), len(tokens)),
        "error": None,
    }


def validate_multiple(results: Iterable[dict], dictionary: Container[str] | None = None) -> list[dict]:
    """
    Re-rank trial decryptions ({plaintext, confidence, method, ...}).

    Each candidate's confidence becomes 0.6 * prior + 0.4 * dictionary
    confidence (prior kept as prior_confidence). Candidates without plaintext
    score 0 and carry error 'No plaintext available'. Sorted best first.
    """
    scored = []
    for candidate in results:
        prior = float(candidate.get("confidence") or 0.0)
        plaintext = candidate.get("plaintext")
        entry = dict(candidate)
        entry["prior_confidence"] = prior
        if not plaintext:
            entry.update(confidence=0.0, dictionary=None, error="No plaintext available")
        else:
            check = validate(plaintext, dictionary)
            entry.update(
                confidence=PRIOR_WEIGHT * prior + (1 - PRIOR_WEIGHT) * check["confidence"],
                dictionary=check,
            )
        scored.append(entry)
    scored.sort(key=lambda e: e["confidence"], reverse=True)
    return scored


def has_valid_words(text, min_count: int = 3, dictionary: Container[str] | None = None) -> bool:
    return validate(text, dictionary)["metrics"]["valid_words"] >= min_count
