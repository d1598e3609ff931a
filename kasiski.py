"""
---
version: 0.2.0
created: 2026-02-27
updated: 2026-03-02
---

kasiski.py — Repeated-sequence key-length estimation (Kasiski examination).

A periodic polyalphabetic cipher encrypts a repeated plaintext fragment to the
same ciphertext whenever both occurrences line up with the same key phase, so
distances between repeated ciphertext n-grams tend to be multiples of the key
length. Candidate key lengths are ranked by the fraction of observed distances
they divide.
"""

from __future__ import annotations

import math
from functools import reduce

from cipherstat import only_letters

DEFAULT_NGRAM = 3
DEFAULT_MAX_KEY_LENGTH = 20


def find_repeated_ngrams(text, n: int = DEFAULT_NGRAM) -> dict[str, list[int]]:
    """
    Map each n-gram occurring more than once to its start positions (ascending).

    Raises:
        ValueError: If n < 1.
    """
    if n < 1:
        raise ValueError(f"n-gram length must be >= 1, got {n}")
    clean = only_letters(text)
    positions: dict[str, list[int]] = {}
    for i in range(len(clean) - n + 1):
        positions.setdefault(clean[i:i + n], []).append(i)
    return {gram: pos for gram, pos in positions.items() if len(pos) > 1}


def calculate_distances(repeated: dict[str, list[int]]) -> list[int]:
    """Distances between consecutive occurrences of every repeated n-gram."""
    distances = []
    for pos in repeated.values():
        distances.extend(b - a for a, b in zip(pos, pos[1:]))
    return distances


def gcd_list(numbers: list[int]) -> int:
    """GCD of a list of ints (0 for an empty list)."""
    return reduce(math.gcd, numbers, 0)


def suggest_key_lengths(
    text,
    n: int = DEFAULT_NGRAM,
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH,
) -> list[dict]:
    """
    Rank candidate key lengths 2..max_key_length.

    score = fraction of repeat distances divisible by the key length. Only
    lengths dividing at least one distance are returned; ties go to the
    shorter key. Empty when the text has fewer than 2n letters or no repeats.

    Returns list of dicts: {key_length, score, count}.
    """
    clean = only_letters(text)
    if len(clean) < 2 * n:
        return []
    distances = calculate_distances(find_repeated_ngrams(clean, n))
    if not distances:
        return []

    suggestions = []
    for key_length in range(2, min(max_key_length, len(clean)) + 1):
        count = sum(1 for d in distances if d % key_length == 0)
        if count:
            suggestions.append({
                "key_length": key_length,
                "score": count / len(distances),
                "count": count,
            })
    suggestions.sort(key=lambda s: (-s["score"], s["key_length"]))
    return suggestions


def examine(
    text,
    n: int = DEFAULT_NGRAM,
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH,
) -> dict:
    """
    Full Kasiski examination.

    Returns dict with:
        repeated_ngrams: {ngram: positions}
        distances: consecutive-occurrence distances
        gcd: GCD of all distances (0 if none)
        suggested_key_lengths: ranked candidates (see suggest_key_lengths)
        has_repetitions: whether any n-gram repeats
    """
    repeated = find_repeated_ngrams(text, n)
    distances = calculate_distances(repeated)
    return {
        "repeated_ngrams": repeated,
        "distances": distances,
        "gcd": gcd_list(distances),
        "suggested_key_lengths": suggest_key_lengths(text, n, max_key_length),
        "has_repetitions": bool(repeated),
    }
