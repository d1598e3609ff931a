"""
---
version: 0.2.0
created: 2026-02-28
updated: 2026-03-04
---

transposition_detect.py — Transposition vs substitution scoring.

Transposition keeps every letter and only moves it, so the letter
distribution still matches the plaintext language (low letter chi-squared)
while adjacency is destroyed (low n-gram naturalness). Substitution does the
opposite to the letters: their distribution stops matching, whatever happens
to the n-grams. Plaintext matches on both counts.

The two signals are combined into a score in [0, 1] (1 = transposition),
shrunk toward the neutral 0.5 for short texts, and banded into a
recommendation.

Usage:
    python3 transposition_detect.py "CIPHERTEXT" [--language english]
"""

from __future__ import annotations

import argparse
import math
from dataclasses import asdict, dataclass
from enum import Enum

from cipherstat import (
    LanguageTables,
    chi_squared_letters,
    clamp01,
    get_tables,
    index_of_coincidence,
    ngram_naturalness,
    only_letters,
)

MIN_TRANSPOSITION_LENGTH = 10

# letter fit: chi-squared scale grows for short texts (sampling noise ~ 2500/N)
CHI_SCALE = 150.0
CHI_NOISE = 2500.0

# n-gram naturalness of genuine plaintext vs fully scrambled adjacency
NAT_PLAIN = 0.8
NAT_SCRAMBLED = 0.3

TRANSPOSITION_BAND = 0.6
SUBSTITUTION_BAND = 0.4
POOR_FIT = 0.3
POLYALPHABETIC_IC = 1.3
COMPARE_MARGIN = 0.1


class Recommendation(str, Enum):
    LIKELY_TRANSPOSITION = "likely_transposition"
    LIKELY_SUBSTITUTION = "likely_substitution"
    LIKELY_POLYALPHABETIC = "likely_polyalphabetic"
    UNCLEAR_CIPHER_TYPE = "unclear_cipher_type"
    AMBIGUOUS = "ambiguous"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class TranspositionResult:
    transposition_score: float
    chi_squared_letters: float | None
    ngram_score_cipher: float | None
    recommendation: Recommendation
    length: int = 0
    ic: float | None = None

    def to_dict(self) -> dict:
        d = asdict(self)
        d["recommendation"] = self.recommendation.value
        return d


def letter_fit(chi: float, length: int) -> float:
    """Map letter chi-squared to [0, 1] (1 = letters match the language)."""
    if length <= 0:
        return 0.0
    return clamp01(1 - chi / (CHI_SCALE + CHI_NOISE / length))


def determine_transposition_score(chi: float, ngram: float, length: int) -> float:
    """
    Combine letter fit and n-gram scrambling into a transposition score.

    Both must be high for a high score (geometric mean). The result is pulled
    toward 0.5 by a length weight running from 0.3 (tiny texts) to 1.0 at
    105+ letters.
    """
    fit = letter_fit(chi, length)
    scrambled = clamp01((NAT_PLAIN - ngram) / (NAT_PLAIN - NAT_SCRAMBLED))
    raw = math.sqrt(fit * scrambled)
    weight = clamp01(0.3 + length / 150)
    return clamp01(0.5 + (raw - 0.5) * weight)


def recommend(score: float, chi: float, length: int, ic: float) -> Recommendation:
    if score > TRANSPOSITION_BAND:
        return Recommendation.LIKELY_TRANSPOSITION
    if score >= SUBSTITUTION_BAND:
        return Recommendation.AMBIGUOUS
    if letter_fit(chi, length) < POOR_FIT:
        if ic < POLYALPHABETIC_IC:
            return Recommendation.LIKELY_POLYALPHABETIC
        return Recommendation.LIKELY_SUBSTITUTION
    # letters and adjacency both look like the language: nothing to undo
    return Recommendation.UNCLEAR_CIPHER_TYPE


def analyze(
    text,
    language: str | None = "english",
    tables: LanguageTables | None = None,
    min_length: int = MIN_TRANSPOSITION_LENGTH,
) -> TranspositionResult:
    """
    Score how transposition-like a ciphertext is.

    'auto' and unsupported languages fall back to the default tables
    silently. Texts under `min_length` letters get the neutral result
    (0.5, None, None, insufficient_data).
    """
    clean = only_letters(text)
    n = len(clean)
    if n < min_length:
        return TranspositionResult(0.5, None, None, Recommendation.INSUFFICIENT_DATA, length=n)

    registry = get_tables(tables)
    lang = registry.resolve(language, warn=False)
    chi = chi_squared_letters(clean, lang, registry, warn=False)
    ngram = ngram_naturalness(clean, lang, registry, warn=False)
    ic = index_of_coincidence(clean)
    score = determine_transposition_score(chi, ngram, n)
    return TranspositionResult(
        transposition_score=score,
        chi_squared_letters=chi,
        ngram_score_cipher=ngram,
        recommendation=recommend(score, chi, n, ic),
        length=n,
        ic=ic,
    )


def compare(
    text1,
    text2,
    language: str | None = "english",
    tables: LanguageTables | None = None,
) -> dict:
    """
    Analyze two texts and say which looks more like a transposition.

    Returns dict with:
        text1_analysis, text2_analysis: TranspositionResult
        comparison: {score_difference (text1 - text2), interpretation}
        recommendation: human-readable verdict
    """
    first = analyze(text1, language, tables)
    second = analyze(text2, language, tables)
    diff = first.transposition_score - second.transposition_score
    if diff > COMPARE_MARGIN:
        interpretation = "text1_more_likely_transposition"
        verdict = "Text 1 is more likely a transposition cipher"
    elif diff < -COMPARE_MARGIN:
        interpretation = "text2_more_likely_transposition"
        verdict = "Text 2 is more likely a transposition cipher"
    else:
        interpretation = "similar_transposition_likelihood"
        verdict = "Both texts have similar transposition likelihood"
    return {
        "text1_analysis": first,
        "text2_analysis": second,
        "comparison": {"score_difference": diff, "interpretation": interpretation},
        "recommendation": verdict,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Transposition vs substitution scoring")
    parser.add_argument("text", help="Ciphertext to analyse")
    parser.add_argument("--compare", metavar="TEXT2", help="Second ciphertext to compare against")
    parser.add_argument("--language", default="english", help="Plaintext language (default english)")
    args = parser.parse_args()

    if args.compare:
        result = compare(args.text, args.compare, args.language)
        for label in ("text1_analysis", "text2_analysis"):
            r = result[label]
            print(f"{label}: score={r.transposition_score:.3f} -> {r.recommendation.value}")
        print(f"Difference: {result['comparison']['score_difference']:+.3f}")
        print(result["recommendation"])
        return

    r = analyze(args.text, args.language)
    print("=" * 70)
    print("TRANSPOSITION ANALYSIS")
    print("=" * 70)
    print(f"  Letters:            {r.length}")
    if r.chi_squared_letters is not None:
        print(f"  IC:                 {r.ic:.3f}")
        print(f"  Letter chi-squared: {r.chi_squared_letters:.1f}")
        print(f"  N-gram naturalness: {r.ngram_score_cipher:.3f}")
    print(f"  Transposition score: {r.transposition_score:.3f}")
    print(f"  Recommendation:     {r.recommendation.value}")


if __name__ == "__main__":
    main()
