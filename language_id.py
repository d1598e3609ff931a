"""
---
version: 0.2.0
created: 2026-02-27
updated: 2026-03-04
---

language_id.py — Frequency-statistical language identification.

Ranks the supported languages by letter chi-squared after aligning the text
with each language at its best Caesar rotation. The alignment makes the
ranking invariant under Caesar shifts, so ciphertext from a shift cipher is
still attributed to its plaintext language. Zero or missing table entries are
lifted to a small floor so languages with gaps in their alphabet (Italian K,
J, W, X, Y) are not rewarded for ignoring letters.

Script gate: Cyrillic-dominated text is transliterated and only Russian is
ranked; CJK-dominated text only ranks Chinese (pinyin tables).

Usage:
    python3 language_id.py "Text to identify"
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from cipherstat import (
    LanguageTables,
    as_text,
    best_caesar_shift,
    get_tables,
    letter_frequencies,
    only_letters,
    shape_score,
)

AMBIGUITY_MARGIN = 5.0
ZERO_FLOOR = 0.05   # percent assigned to letters a table lists as 0 or omits

_CYRILLIC = {
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D", "Е": "E", "Ё": "E",
    "Ж": "ZH", "З": "Z", "И": "I", "Й": "J", "К": "K", "Л": "L", "М": "M",
    "Н": "N", "О": "O", "П": "P", "Р": "R", "С": "S", "Т": "T", "У": "U",
    "Ф": "F", "Х": "H", "Ц": "C", "Ч": "CH", "Ш": "SH", "Щ": "SCH", "Ъ": "",
    "Ы": "Y", "Ь": "", "Э": "E", "Ю": "JU", "Я": "JA",
}


@dataclass(frozen=True)
class LanguageCandidate:
    """One ranked language. Lower score = better fit."""

    language: str
    score: float
    shift: int = 0
    shape_score: float = 0.0


def transliterate_cyrillic(text: str) -> str:
    return "".join(_CYRILLIC.get(c, c) for c in text.upper())


def script_counts(text: str) -> dict[str, int]:
    """Count Latin (A-Z after accent folding), Cyrillic and CJK characters."""
    cyrillic = sum(1 for c in text if "Ѐ" <= c <= "ӿ" and c.isalpha())
    cjk = sum(1 for c in text if "一" <= c <= "鿿")
    return {"latin": len(only_letters(text)), "cyrillic": cyrillic, "cjk": cjk}


def detect_language(text, tables: LanguageTables | None = None) -> list[LanguageCandidate]:
    """
    Rank supported languages for `text`, best first.

    Returns [] when the text holds no letters of any supported script.
    Never raises on data. Callers should treat the top two as ambiguous when
    their scores are within AMBIGUITY_MARGIN (see is_ambiguous).
    """
    registry = get_tables(tables)
    raw = as_text(text)
    counts = script_counts(raw)
    total = sum(counts.values())
    if total == 0:
        return []

    candidates = list(registry.languages)
    letters = only_letters(raw)
    if counts["cyrillic"] > total / 2 and "russian" in registry:
        candidates = ["russian"]
        letters = only_letters(transliterate_cyrillic(raw))
    elif counts["cjk"] > total / 2 and "chinese" in registry:
        candidates = ["chinese"]
        if not letters:
            # nothing to measure against pinyin tables; the script decides
            return [LanguageCandidate("chinese", 0.0)]

    if not letters:
        return []

    observed = letter_frequencies(letters)
    results = []
    for language in candidates:
        best = best_caesar_shift(letters, language, registry, floor=ZERO_FLOOR, warn=False)
        table = registry.table(language, 1, warn=False)
        results.append(LanguageCandidate(
            language=language,
            score=best["chi_squared"],
            shift=best["shift"],
            shape_score=shape_score(observed, table.entries),
        ))
    results.sort(key=lambda c: (c.score, c.language))
    return results


def is_ambiguous(candidates: list[LanguageCandidate], margin: float = AMBIGUITY_MARGIN) -> bool:
    """True when the runner-up is within `margin` of the winner."""
    return len(candidates) >= 2 and candidates[1].score - candidates[0].score < margin


def best_language(
    text,
    tables: LanguageTables | None = None,
    margin: float = AMBIGUITY_MARGIN,
) -> dict:
    """
    Summary of detect_language for reporting.

    Returns dict with:
        language: winner (None if no letters)
        score: winner's score
        ambiguous: whether the runner-up is within `margin`
        alternatives: languages within `margin` of the winner, winner excluded
    """
    ranked = detect_language(text, tables)
    if not ranked:
        return {"language": None, "score": None, "ambiguous": False, "alternatives": []}
    top = ranked[0]
    return {
        "language": top.language,
        "score": top.score,
        "ambiguous": is_ambiguous(ranked, margin),
        "alternatives": [c.language for c in ranked[1:] if c.score - top.score < margin],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Identify the language of a text")
    parser.add_argument("text", nargs="+", help="Text to identify")
    parser.add_argument("--margin", type=float, default=AMBIGUITY_MARGIN,
                        help="Score gap below which the top two are reported as ambiguous")
    args = parser.parse_args()

    text = " ".join(args.text)
    ranked = detect_language(text)
    if not ranked:
        print("No letters to analyse.")
        return

    print(f"{'Language':<12} {'Score':>9} {'Shift':>6} {'Shape':>9}")
    print("-" * 40)
    for c in ranked:
        print(f"{c.language:<12} {c.score:>9.2f} {c.shift:>6} {c.shape_score:>9.2f}")
    if is_ambiguous(ranked, args.margin):
        print(f"\nAmbiguous: {ranked[0].language} vs {ranked[1].language}")


if __name__ == "__main__":
    main()
