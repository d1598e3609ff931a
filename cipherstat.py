"""
---
version: 0.3.0
created: 2026-02-26
updated: 2026-03-04
---

cipherstat.py — Shared statistics core for classical-cipher analysis.

Five sections:
  1. Text normalization (letters-only A-Z view of any input)
  2. Frequency tables (per-language n-gram percentages, injectable registry)
  3. Stats (IC, entropy, chi-squared, shape score, adjacency, best Caesar shift)
  4. N-gram models (log-probability scoring, normalized naturalness)
  5. Self-test

Every function here is a pure function of its arguments. Frequency tables are
built once at import (DEFAULT_TABLES) and shared read-only; callers wanting
different data build their own LanguageTables and pass it as `tables=`.

Usage:
    python3 cipherstat.py      # run self-test
"""

from __future__ import annotations

import json
import math
import string
import unicodedata
import warnings
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import numpy as np

from cipherstat_tables import FREQUENCY_DATA

ALPHABET = string.ascii_uppercase
_ALPHABET_SET = frozenset(ALPHABET)

DEFAULT_LANGUAGE = "english"
MAX_ORDER = 4

# log10(1e-5 / 100): probability floor for n-grams missing from a table
FLOOR_LOG_PROB = -7.0


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, float(x)))


# ============================================================================
# 1. TEXT NORMALIZATION
# ============================================================================

def as_text(text) -> str:
    """None gives "", bytes are decoded as UTF-8, anything else goes through str()."""
    if text is None:
        return ""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="replace")
    return text if isinstance(text, str) else str(text)


def only_letters(text) -> str:
    """
    Reduce any input to uppercase A-Z.

    Accented Latin letters are folded to their base letter (NFD, marks
    dropped). Non-strings are converted with as_text().
    """
    text = as_text(text)
    decomposed = unicodedata.normalize("NFD", text.upper())
    return "".join(c for c in decomposed if c in _ALPHABET_SET)


def letter_counts(text) -> np.ndarray:
    """Counts of A..Z as a length-26 int array."""
    clean = only_letters(text)
    if not clean:
        return np.zeros(len(ALPHABET), dtype=np.int64)
    codes = np.frombuffer(clean.encode("ascii"), dtype=np.uint8) - ord("A")
    return np.bincount(codes, minlength=len(ALPHABET)).astype(np.int64)


def letter_frequencies(text) -> dict[str, float]:
    """Percentage (0-100) of each letter present in the text."""
    counts = letter_counts(text)
    total = int(counts.sum())
    if total == 0:
        return {}
    return {ALPHABET[i]: float(counts[i] / total * 100) for i in range(len(ALPHABET)) if counts[i] > 0}


def ngram_counts(text, n: int) -> Counter:
    """Counts of every sliding window of length n over the letters-only text."""
    if n < 1:
        raise ValueError(f"n-gram length must be >= 1, got {n}")
    clean = only_letters(text)
    return Counter(clean[i:i + n] for i in range(len(clean) - n + 1))


def ngram_frequencies(text, n: int) -> dict[str, float]:
    """Percentage (0-100) of each n-gram present in the text."""
    counts = ngram_counts(text, n)
    total = sum(counts.values())
    if total == 0:
        return {}
    return {gram: c / total * 100 for gram, c in counts.items()}


def shift_letters(text, shift: int) -> str:
    """Rotate every letter forward by `shift` (Caesar encryption of the letters-only text)."""
    clean = only_letters(text)
    return "".join(ALPHABET[(ord(c) - 65 + shift) % 26] for c in clean)


# ============================================================================
# 2. FREQUENCY TABLES
# ============================================================================

class CipherstatWarning(UserWarning):
    """Base category for soft data issues reported by cipherstat."""


class UnsupportedLanguageWarning(CipherstatWarning):
    """A language name had no frequency tables; the default language was used."""


@dataclass(frozen=True)
class FrequencyTable:
    """Expected n-gram percentages for one language and order. Sparse, never renormalized."""

    language: str
    order: int
    entries: Mapping[str, float]

    @property
    def coverage(self) -> float:
        """Fraction (0-1) of running text the listed n-grams account for."""
        return min(sum(self.entries.values()) / 100.0, 1.0)

    def get(self, gram: str, default: float = 0.0) -> float:
        return self.entries.get(gram, default)

    def __len__(self) -> int:
        return len(self.entries)


class LanguageTables:
    """
    Read-only registry of frequency tables and their n-gram models.

    Args:
        data: {language: {order: {ngram: percentage}}}. Orders may be ints or
            numeric strings (JSON form).
        default: Language used for 'auto' and for unsupported names.
        floor: Log-probability given to n-grams a table does not list.

    Raises:
        ValueError: On orders outside 1-4, non-numeric percentages, or a
            default language with no tables.
    """

    def __init__(
        self,
        data: Mapping[str, Mapping],
        default: str = DEFAULT_LANGUAGE,
        floor: float = FLOOR_LOG_PROB,
    ):
        tables: dict[str, Mapping[int, FrequencyTable]] = {}
        for language, orders in data.items():
            lang = str(language).strip().lower()
            per_order: dict[int, FrequencyTable] = {}
            for order, entries in orders.items():
                try:
                    o = int(order)
                except (TypeError, ValueError):
                    raise ValueError(f"{lang}: n-gram order {order!r} is not an integer") from None
                if not 1 <= o <= MAX_ORDER:
                    raise ValueError(f"{lang}: n-gram order {o} outside 1-{MAX_ORDER}")
                clean: dict[str, float] = {}
                for gram, pct in entries.items():
                    if isinstance(pct, bool) or not isinstance(pct, (int, float)):
                        raise ValueError(f"{lang}/{o}: percentage for {gram!r} is not a number: {pct!r}")
                    clean[str(gram).upper()] = float(pct)
                per_order[o] = FrequencyTable(lang, o, MappingProxyType(clean))
            tables[lang] = MappingProxyType(per_order)

        default = default.lower()
        if default not in tables:
            raise ValueError(f"default language {default!r} has no tables")
        self.default = default
        self.floor = floor
        self._tables = MappingProxyType(tables)
        self._models = MappingProxyType({
            (lang, o): NGramModel(table, floor=floor)
            for lang, per_order in tables.items()
            for o, table in per_order.items()
        })

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._tables)

    def __contains__(self, language) -> bool:
        return isinstance(language, str) and language.strip().lower() in self._tables

    def resolve(self, language: str | None, warn: bool = True) -> str:
        """
        Map a language name to one with tables.

        None and 'auto' give the default silently. Any other unknown name
        gives the default and, if `warn`, an UnsupportedLanguageWarning.
        """
        if language is None:
            return self.default
        lang = str(language).strip().lower()
        if lang in self._tables:
            return lang
        if warn and lang != "auto":
            warnings.warn(
                f"no frequency tables for language {language!r}; using {self.default}",
                UnsupportedLanguageWarning,
                stacklevel=3,
            )
        return self.default

    def table(self, language: str | None, order: int, warn: bool = True) -> FrequencyTable:
        if not 1 <= order <= MAX_ORDER:
            raise ValueError(f"n-gram order must be 1-{MAX_ORDER}, got {order}")
        lang = self.resolve(language, warn=warn)
        found = self._tables[lang].get(order)
        if found is None:
            return FrequencyTable(lang, order, MappingProxyType({}))
        return found

    def model(self, language: str | None, order: int, warn: bool = True) -> NGramModel:
        lang = self.resolve(language, warn=warn)
        found = self._models.get((lang, order))
        if found is None:
            return NGramModel(self.table(lang, order, warn=False), floor=self.floor)
        return found

    @classmethod
    def from_json(cls, path: str | Path, default: str = DEFAULT_LANGUAGE) -> LanguageTables:
        """Load tables saved as {language: {"1": {ngram: pct}, ...}}."""
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object of languages")
        return cls(data, default=default)

    def to_json(self, path: str | Path) -> None:
        out = {
            lang: {str(o): dict(t.entries) for o, t in per_order.items()}
            for lang, per_order in self._tables.items()
        }
        with open(path, "w") as f:
            json.dump(out, f, indent=2)


def get_tables(tables: LanguageTables | None = None) -> LanguageTables:
    """The given tables, or the process-wide defaults."""
    return DEFAULT_TABLES if tables is None else tables


# ============================================================================
# 3. STATS
# ============================================================================

def index_of_coincidence(text) -> float:
    """
    Normalized index of coincidence (x26).

    English: ~1.73. Uniform random letters: ~1.0. Fewer than 2 letters: 0.0.
    """
    counts = letter_counts(text)
    n = int(counts.sum())
    if n < 2:
        return 0.0
    return float((counts * (counts - 1)).sum() / (n * (n - 1)) * len(ALPHABET))


def shannon_entropy(text) -> float:
    """Shannon entropy of the letter distribution in bits (max log2(26) ~ 4.70)."""
    counts = letter_counts(text)
    n = counts.sum()
    if n == 0:
        return 0.0
    p = counts[counts > 0] / n
    return float(-(p * np.log2(p)).sum())


def chi_squared(
    observed: Mapping[str, float],
    expected: Mapping[str, float],
    floor: float | None = None,
) -> float:
    """
    Chi-squared of observed vs expected percentages over the expected keys.

    Keys missing from `observed` count as 0%. Expected values of zero add
    nothing unless `floor` lifts them. Lower = better fit.
    """
    total = 0.0
    for key, exp in expected.items():
        if floor is not None:
            exp = max(exp, floor)
        if exp <= 0:
            continue
        obs = observed.get(key, 0.0)
        total += (obs - exp) ** 2 / exp
    return total


def chi_squared_letters(
    text,
    language: str | None = DEFAULT_LANGUAGE,
    tables: LanguageTables | None = None,
    warn: bool = True,
) -> float:
    """Letter chi-squared of text against a language's monogram table."""
    table = get_tables(tables).table(language, 1, warn=warn)
    return chi_squared(letter_frequencies(text), table.entries)


def letter_fit_p_value(
    text,
    language: str | None = DEFAULT_LANGUAGE,
    tables: LanguageTables | None = None,
) -> float:
    """
    P-value of the letter chi-squared, converted to counts (dof = letters - 1).

    Small p means the letters do not follow the language distribution.
    """
    from scipy import stats as sp_stats

    n = len(only_letters(text))
    table = get_tables(tables).table(language, 1)
    dof = sum(1 for v in table.entries.values() if v > 0) - 1
    if n == 0 or dof < 1:
        return 0.0
    # percent form -> count form: sum((O-E)^2/E) = chi_pct * N / 100
    chi_counts = chi_squared(letter_frequencies(text), table.entries) * n / 100
    return float(sp_stats.chi2.sf(chi_counts, dof))


def shape_score(observed: Mapping[str, float], expected: Mapping[str, float]) -> float:
    """
    Chi-squared between the two distributions sorted descending, rank by rank.

    Letter identity is ignored, so the score is unchanged by any substitution
    of the observed symbols. Compared over the shorter of the two lists.
    """
    obs = sorted(observed.values(), reverse=True)
    exp = sorted(expected.values(), reverse=True)
    return float(sum((o - e) ** 2 / e for o, e in zip(obs, exp) if e > 0))


def digraph_ic(text) -> float:
    """Normalized (x676) index of coincidence over overlapping letter pairs."""
    clean = only_letters(text)
    m = len(clean) - 1
    if m < 2:
        return 0.0
    codes = np.frombuffer(clean.encode("ascii"), dtype=np.uint8).astype(np.int64) - ord("A")
    matrix = np.zeros((len(ALPHABET), len(ALPHABET)), dtype=np.int64)
    np.add.at(matrix, (codes[:-1], codes[1:]), 1)
    return float((matrix * (matrix - 1)).sum() / (m * (m - 1)) * len(ALPHABET) ** 2)


def adjacency_ratio(text) -> float:
    """
    Digraph IC over squared letter IC.

    Independent neighbours give ~1.0; language text sits around 1.5-2.5.
    Relabeling letters leaves the ratio unchanged, while reordering them
    pulls it back toward 1.0, so it separates substitution from transposition.
    """
    ic = index_of_coincidence(text)
    if ic <= 0:
        return 0.0
    return float(digraph_ic(text) / ic ** 2)


def best_caesar_shift(
    text,
    language: str | None = DEFAULT_LANGUAGE,
    tables: LanguageTables | None = None,
    floor: float | None = None,
    warn: bool = True,
) -> dict:
    """
    Find the rotation that best aligns the letters with a language.

    Returns dict with:
        shift: key of the best rotation (ciphertext = plaintext + shift)
        chi_squared: letter chi-squared after undoing that rotation
        scores: chi-squared for every shift 0-25 (empty when no letters)
    """
    counts = letter_counts(text)
    n = counts.sum()
    if n == 0:
        return {"shift": 0, "chi_squared": float("inf"), "scores": []}
    table = get_tables(tables).table(language, 1, warn=warn)
    expected = np.array([table.get(c) for c in ALPHABET], dtype=float)
    if floor is not None:
        expected = np.maximum(expected, floor)
    mask = expected > 0
    scores = []
    for shift in range(len(ALPHABET)):
        observed = np.roll(counts, -shift) / n * 100
        scores.append(float((((observed - expected) ** 2)[mask] / expected[mask]).sum()))
    best = int(np.argmin(scores))
    return {"shift": best, "chi_squared": scores[best], "scores": scores}


# ============================================================================
# 4. N-GRAM MODELS
# ============================================================================

class NGramModel:
    """
    Log10-probability model for one order, built from a sparse table.

    Listed n-grams get log10(pct) - 2; everything else gets the floor. The
    table is never renormalized by its own partial sum.
    """

    def __init__(self, table: FrequencyTable, floor: float = FLOOR_LOG_PROB):
        self.n = table.order
        self.language = table.language
        self.floor = floor
        self.log_probs: Mapping[str, float] = MappingProxyType({
            gram: math.log10(pct) - 2
            for gram, pct in table.entries.items()
            if pct > 0 and len(gram) == table.order
        })
        probs = [10 ** lp for lp in self.log_probs.values()]
        listed = min(sum(probs), 1.0)
        # mean per-window log-prob of text actually drawn from the language
        self.expected_log_prob = sum(p * lp for p, lp in zip(probs, self.log_probs.values())) \
            + (1.0 - listed) * floor

    def log_prob(self, gram: str) -> float:
        return self.log_probs.get(gram, self.floor)

    def score(self, text) -> float:
        """Summed log-probability of every window; short text gets floor * length."""
        clean = only_letters(text)
        if len(clean) < self.n:
            return self.floor * len(clean)
        return sum(self.log_prob(clean[i:i + self.n]) for i in range(len(clean) - self.n + 1))

    def average(self, text) -> float:
        clean = only_letters(text)
        windows = len(clean) - self.n + 1
        if windows <= 0:
            return self.floor
        return self.score(clean) / windows

    def naturalness(self, text) -> float:
        """
        Position of the mean window log-prob between the floor (0.0) and the
        model's expectation for genuine text in its language (1.0).
        """
        if len(only_letters(text)) < self.n:
            return 0.0
        span = self.expected_log_prob - self.floor
        if span <= 0:
            return 0.0
        return clamp01((self.average(text) - self.floor) / span)


def ngram_naturalness(
    text,
    language: str | None = DEFAULT_LANGUAGE,
    tables: LanguageTables | None = None,
    orders: tuple[int, ...] = (2, 3),
    warn: bool = True,
) -> float:
    """
    How plaintext-like the adjacency of letters is, in [0, 1].

    Plaintext: ~0.7-1.0. Transposed plaintext: ~0.2-0.4. Substitution
    ciphertext and random letters: ~0.0-0.3.
    """
    registry = get_tables(tables)
    scores = [registry.model(language, o, warn=warn).naturalness(text) for o in orders]
    return float(np.mean(scores)) if scores else 0.0


DEFAULT_TABLES = LanguageTables(FREQUENCY_DATA)


# ============================================================================
# 5. SELF-TEST
# ============================================================================

def _self_test() -> None:
    """Print core statistics for a plaintext, its Caesar shift and random letters."""
    print("=== cipherstat.py self-test ===\n")

    plain = ("THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG AND RUNS AWAY INTO THE "
             "FOREST WHERE THE ANIMALS LIVE IN PEACE AND HARMONY WITH NATURE")
    shifted = shift_letters(plain, 7)
    rng = np.random.default_rng(42)
    noise = "".join(rng.choice(list(ALPHABET), size=len(only_letters(plain))))

    assert only_letters("Déjà vu, 42!") == "DEJAVU"
    assert index_of_coincidence("A") == 0.0
    assert abs(index_of_coincidence(plain) - index_of_coincidence(shifted)) < 1e-12
    assert best_caesar_shift(shifted)["shift"] == 7

    print(f"{'Text':<12} {'N':>5} {'IC':>7} {'H(bits)':>8} {'chi2':>9} {'p':>8} {'natural':>8}")
    print("-" * 62)
    for label, text in [("plaintext", plain), ("caesar+7", shifted), ("random", noise)]:
        print(f"{label:<12} {len(only_letters(text)):>5} {index_of_coincidence(text):>7.3f} "
              f"{shannon_entropy(text):>8.3f} {chi_squared_letters(text):>9.1f} "
              f"{letter_fit_p_value(text):>8.4f} {ngram_naturalness(text):>8.3f}")

    print(f"\nLanguages: {', '.join(DEFAULT_TABLES.languages)}")
    print("\n=== Self-test complete ===")


if __name__ == "__main__":
    _self_test()
