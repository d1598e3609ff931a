"""
---
version: 0.1.0
created: 2026-02-28
updated: 2026-03-01
---

word_segment.py — Word-boundary reconstruction for boundary-free plaintext.

Decrypted classical ciphertext usually comes out as one run of letters. A
dynamic program over the run finds the split into dictionary words; when no
complete split exists, a greedy longest-match pass keeps known words and
emits the unmatched letters one by one.

Usage:
    python3 word_segment.py THEENEMYISADVANCINGFROMTHENORTH
"""

from __future__ import annotations

import argparse
from typing import Container

from cipherstat import only_letters
from dict_validate import DEFAULT_DICTIONARY, WORD_WEIGHT

DEFAULT_MAX_WORD_LENGTH = 20
DEFAULT_MIN_WORD_LENGTH = 2


def _check_lengths(min_word_length: int, max_word_length: int) -> None:
    if min_word_length < 1:
        raise ValueError(f"min_word_length must be >= 1, got {min_word_length}")
    if max_word_length < min_word_length:
        raise ValueError(
            f"max_word_length ({max_word_length}) is less than min_word_length ({min_word_length})"
        )


def _greedy(text: str, words: Container[str], min_len: int, max_len: int) -> list[str]:
    out = []
    i = 0
    while i < len(text):
        for length in range(min(max_len, len(text) - i), min_len - 1, -1):
            if text[i:i + length] in words:
                out.append(text[i:i + length])
                i += length
                break
        else:
            out.append(text[i])
            i += 1
    return out


def segment_words(
    text,
    dictionary: Container[str] | None = None,
    max_word_length: int = DEFAULT_MAX_WORD_LENGTH,
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
    preserve_unknown: bool = True,
) -> list[str]:
    """
    Split letters-only text into words; see segment_text.

    Returns the list of tokens (empty for empty input).
    """
    _check_lengths(min_word_length, max_word_length)
    words = DEFAULT_DICTIONARY if dictionary is None else dictionary
    clean = only_letters(text)
    n = len(clean)
    if n == 0:
        return []

    # best[i] = (word count, summed word length, start of last word) for clean[:i]
    best: list[tuple[int, int, int] | None] = [None] * (n + 1)
    best[0] = (0, 0, -1)
    for i in range(n):
        if best[i] is None:
            continue
        count, score, _ = best[i]
        for j in range(i + min_word_length, min(n, i + max_word_length) + 1):
            if clean[i:j] not in words:
                continue
            cand = (count + 1, score + (j - i), i)
            if best[j] is None or cand[:2] > best[j][:2]:
                best[j] = cand

    if best[n] is not None:
        out = []
        j = n
        while j > 0:
            i = best[j][2]
            out.append(clean[i:j])
            j = i
        return out[::-1]

    if preserve_unknown:
        return _greedy(clean, words, min_word_length, max_word_length)
    return [clean]


def segment_text(
    text,
    dictionary: Container[str] | None = None,
    max_word_length: int = DEFAULT_MAX_WORD_LENGTH,
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
    preserve_unknown: bool = True,
) -> str:
    """
    Reconstruct word boundaries in boundary-free text.

    Dynamic program over the uppercase letters: among complete splits into
    dictionary words of min..max length, prefer more words, then a higher
    summed word length. With no complete split and `preserve_unknown`, a
    greedy longest match keeps known words and emits unmatched letters
    singly; without it the letters come back unsplit.

    Returns the tokens joined by single spaces.

    Raises:
        ValueError: If min_word_length < 1 or max_word_length < min_word_length.
    """
    return " ".join(segment_words(text, dictionary, max_word_length, min_word_length, preserve_unknown))


def segment_text_with_confidence(
    text,
    dictionary: Container[str] | None = None,
    max_word_length: int = DEFAULT_MAX_WORD_LENGTH,
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
    preserve_unknown: bool = True,
) -> dict:
    """
    segment_text plus coverage figures.

    Returns dict with:
        segmented: the spaced text
        confidence: 0.7 * word_coverage + 0.3 * char_coverage
        word_count, valid_words
        word_coverage, char_coverage: fractions in [0, 1]
    """
    words = DEFAULT_DICTIONARY if dictionary is None else dictionary
    tokens = segment_words(text, words, max_word_length, min_word_length, preserve_unknown)
    if not tokens:
        return {"segmented": "", "confidence": 0.0, "word_count": 0, "valid_words": 0,
                "word_coverage": 0.0, "char_coverage": 0.0}
    valid = [t for t in tokens if t in words]
    word_coverage = len(valid) / len(tokens)
    char_coverage = sum(len(t) for t in valid) / sum(len(t) for t in tokens)
    return {
        "segmented": " ".join(tokens),
        "confidence": WORD_WEIGHT * word_coverage + (1 - WORD_WEIGHT) * char_coverage,
        "word_count": len(tokens),
        "valid_words": len(valid),
        "word_coverage": word_coverage,
        "char_coverage": char_coverage,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Restore word boundaries in a run of letters")
    parser.add_argument("text", help="Letters without spaces")
    parser.add_argument("--max-word", type=int, default=DEFAULT_MAX_WORD_LENGTH)
    parser.add_argument("--min-word", type=int, default=DEFAULT_MIN_WORD_LENGTH)
    args = parser.parse_args()

    result = segment_text_with_confidence(args.text, max_word_length=args.max_word,
                                          min_word_length=args.min_word)
    print(result["segmented"])
    print(f"confidence={result['confidence']:.3f}  words={result['valid_words']}/{result['word_count']}")


if __name__ == "__main__":
    main()
