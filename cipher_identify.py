"""
---
version: 0.3.0
created: 2026-02-28
updated: 2026-03-04
---

cipher_identify.py — Ranked, explained cipher-family classification.

Runs the statistics battery over a text once and turns the signals into a
confidence for each classical cipher family:

  IC vs expected IC     monoalphabetic families keep the language IC,
                        polyalphabetic and random text flatten toward 1.0
  best Caesar shift     letters line up with the language after one rotation
  Kasiski + column IC   repeats spaced by a key period, columns that regain IC
  transposition score   right letters in the wrong order
  plausibility          dictionary coverage / n-gram naturalness of the text

Ordering rules between families:
  - caesar-shift never exceeds monoalphabetic-substitution (a Caesar shift is
    a monoalphabetic substitution)
  - without Kasiski support vigenere-like stays below a confident
    monoalphabetic candidate
  - transposition only rises when the letter distribution already matches the
    language, and never exceeds monoalphabetic-substitution while letter
    adjacency (digraph IC / IC^2) is still at language level
  - random-unknown is damped by plaintext plausibility

identify() never raises on data: None, empty and letterless input produce a
single 'unknown' family with a reason.

Usage:
    python3 cipher_identify.py "CIPHERTEXT" [--language auto]
"""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from enum import Enum
from typing import Container

import dict_validate
import ic_correction
import kasiski
import transposition_detect
from cipherstat import (
    LanguageTables,
    adjacency_ratio,
    as_text,
    best_caesar_shift,
    clamp01,
    get_tables,
    index_of_coincidence,
    letter_frequencies,
    only_letters,
    shannon_entropy,
)
from cipherstat_tables import IC_BASELINES, RANDOM_IC
from language_id import best_language
from periodic import periodic_ic

MIN_IDENTIFY_LENGTH = 10
MIN_FAMILY_CONFIDENCE = 0.1
DETECT_MIN_LENGTH = 50     # below: 'auto' uses the default language
KASISKI_SUPPORT = 0.3
MAX_CONFIDENCE = 0.99
ADJACENCY_KEPT = 1.45     # digraph IC / IC^2 at or above: neighbours still carry language structure

_POLYBIUS = re.compile(r"[1-5]{2}(?:\s+[1-5]{2})+")


class FamilyType(str, Enum):
    MONOALPHABETIC_SUBSTITUTION = "monoalphabetic-substitution"
    CAESAR_SHIFT = "caesar-shift"
    VIGENERE_LIKE = "vigenere-like"
    TRANSPOSITION = "transposition"
    RANDOM_UNKNOWN = "random-unknown"
    UNKNOWN = "unknown"


DESCRIPTIONS = {
    FamilyType.MONOALPHABETIC_SUBSTITUTION: "Monoalphabetic Substitution (each letter maps to one other letter)",
    FamilyType.CAESAR_SHIFT: "Caesar Shift (simple rotation of the alphabet)",
    FamilyType.VIGENERE_LIKE: "Polyalphabetic Cipher (Vigenère, Beaufort, etc.)",
    FamilyType.TRANSPOSITION: "Transposition Cipher (letters are rearranged, not substituted)",
    FamilyType.RANDOM_UNKNOWN: "Strong Cipher or Random Text (high entropy, uniform distribution)",
    FamilyType.UNKNOWN: "Unknown or Unclassifiable",
}


@dataclass(frozen=True)
class FamilyCandidate:
    type: FamilyType
    confidence: float
    reason: str
    suggested_key_length: int | None = None

    def to_dict(self) -> dict:
        d = {"type": self.type.value, "confidence": self.confidence, "reason": self.reason}
        if self.suggested_key_length is not None:
            d["suggested_key_length"] = self.suggested_key_length
        return d


def get_description(family) -> str:
    """Explanatory sentence for a family tag (FamilyType or its string value)."""
    try:
        return DESCRIPTIONS[FamilyType(family)]
    except (ValueError, TypeError):
        return "Unrecognised family tag: unknown cipher type"


def _is_polybius(raw: str) -> bool:
    return bool(_POLYBIUS.fullmatch(raw.strip()))


def _choose_language(clean: str, language, registry: LanguageTables) -> tuple[str, dict | None]:
    if language is None or str(language).strip().lower() == "auto":
        detection = best_language(clean, registry)
        if len(clean) >= DETECT_MIN_LENGTH and detection["language"] and not detection["ambiguous"]:
            return detection["language"], detection
        return registry.default, detection
    return registry.resolve(language), None


def _cap(x: float) -> float:
    return round(min(clamp01(x), MAX_CONFIDENCE), 4)


def identify(
    text,
    language: str | None = "auto",
    tables: LanguageTables | None = None,
    dictionary: Container[str] | None = None,
    min_length: int = MIN_IDENTIFY_LENGTH,
) -> dict:
    """
    Rank the cipher families that could have produced `text`.

    Args:
        text: Ciphertext (any object; None allowed).
        language: Plaintext language, or 'auto' to detect it (texts of 50+
            letters with an unambiguous winner; otherwise the default).
        tables: Frequency tables (default: built-in).
        dictionary: Word set for plausibility (default: English word list,
            only consulted for English).
        min_length: Letters required before any statistics are trusted.

    Returns dict with:
        families: FamilyCandidate list, best first, never empty
        stats: length, ic, entropy, letter_frequencies, has_repetitions,
            suggested_key_lengths (top 3), language, expected_ic, detection,
            adjacency (digraph IC / IC^2)
    """
    raw = as_text(text)
    clean = only_letters(raw)
    n = len(clean)
    ic = index_of_coincidence(clean)
    stats = {
        "length": n,
        "ic": round(ic, 4),
        "entropy": round(shannon_entropy(clean), 4),
        "letter_frequencies": letter_frequencies(clean),
        "has_repetitions": False,
        "suggested_key_lengths": [],
        "language": None,
        "expected_ic": None,
        "detection": None,
        "adjacency": None,
    }

    if _is_polybius(raw):
        reason = "Space-separated two-digit groups in 11-55: Polybius square coordinates"
        return {"families": [FamilyCandidate(FamilyType.MONOALPHABETIC_SUBSTITUTION, 0.9, reason)],
                "stats": stats}

    if n < min_length:
        reason = f"Text too short for reliable analysis ({n} letters, need at least {min_length})"
        return {"families": [FamilyCandidate(FamilyType.UNKNOWN, 0.0, reason)], "stats": stats}

    registry = get_tables(tables)
    lang, detection = _choose_language(clean, language, registry)

    # ---- IC position between random (0) and the language expectation (1)
    ic_check = ic_correction.validate(ic, n, lang)
    expected = ic_check["expected_ic"]
    ratio = clamp01((ic - RANDOM_IC) / max(expected - RANDOM_IC, 0.1))
    flatness = 1 - ratio

    # ---- periodicity
    kas = kasiski.examine(clean)
    suggestions = kas["suggested_key_lengths"]
    kas_support = 0.0
    if suggestions:
        kas_support = suggestions[0]["score"] * min(1.0, len(kas["distances"]) / 3)
    key_length = suggestions[0]["key_length"] if kas_support >= KASISKI_SUPPORT else None
    column_support = 0.0
    column_ic = None
    if key_length:
        column_ic = periodic_ic(clean, key_length)
        column_support = clamp01((column_ic - ic) / max(expected - ic, 0.1))

    # ---- letter alignment, transposition and plausibility
    caesar = best_caesar_shift(clean, lang, registry, warn=False)
    shift_fit = transposition_detect.letter_fit(caesar["chi_squared"], n)
    trans = transposition_detect.analyze(clean, lang, registry, min_length=0)
    trans_signal = clamp01((trans.transposition_score - 0.5) / 0.4)
    # substitution keeps letter adjacency, transposition destroys it
    adjacency = adjacency_ratio(clean)
    adjacency_kept = adjacency >= ADJACENCY_KEPT
    if adjacency_kept:
        trans_signal *= 0.5
    naturalness = trans.ngram_score_cipher
    dictionary_conf = 0.0
    if dictionary is not None or lang == "english":
        dictionary_conf = dict_validate.validate(raw, dictionary)["confidence"]
    plausibility = max(dictionary_conf, clamp01((naturalness - 0.5) / 0.4))

    # ---- confidences
    mono_base = (0.3 + 0.65 * ratio) * (1.0 if ic_check["valid"] else 0.5)
    mono = mono_base * (1 - 0.35 * trans_signal)
    caesar_conf = mono * (0.5 + 0.45 * shift_fit) * (0.8 if caesar["shift"] == 0 else 1.0)
    trans_conf = mono_base * trans_signal * 0.95
    if adjacency_kept:
        trans_conf = min(trans_conf, mono)
    vig = 0.2 + 0.45 * flatness + (0.25 * kas_support + 0.1 * column_support) * min(1.0, 2 * flatness)
    if key_length is None and mono >= 0.5:
        vig = min(vig, 0.9 * mono)
    rand = (0.2 + 0.6 * flatness) * (1 - 0.8 * plausibility) * (1 - 0.5 * kas_support)

    band = "inside" if ic_check["valid"] else "outside"
    baseline_note = "" if lang in IC_BASELINES else f" (no {lang} IC baseline, english used)"
    families = [
        FamilyCandidate(
            FamilyType.MONOALPHABETIC_SUBSTITUTION, _cap(mono),
            f"IC {ic:.3f} is {band} the {lang} band {expected:.2f} +/- {ic_check['tolerance']:.2f}"
            + baseline_note,
        ),
        FamilyCandidate(
            FamilyType.CAESAR_SHIFT, _cap(caesar_conf),
            f"Best rotation {caesar['shift']} aligns letters with {lang} "
            f"(chi-squared {caesar['chi_squared']:.1f})"
            + ("; unshifted text may already be plaintext" if caesar["shift"] == 0 else ""),
        ),
        FamilyCandidate(
            FamilyType.VIGENERE_LIKE, _cap(vig),
            f"IC {ic:.3f} below {lang} expectation {expected:.2f}"
            + (f"; Kasiski favours key length {key_length} (support {kas_support:.2f}, "
               f"column IC {column_ic:.2f})" if key_length else "; no Kasiski support"),
            suggested_key_length=key_length,
        ),
        FamilyCandidate(
            FamilyType.TRANSPOSITION, _cap(trans_conf),
            f"Letters fit {lang} (chi-squared {trans.chi_squared_letters:.1f}) but n-gram "
            f"naturalness is {naturalness:.2f} (score {trans.transposition_score:.2f}); "
            f"adjacency {adjacency:.2f} " + ("kept, substitution more likely" if adjacency_kept else "broken"),
        ),
        FamilyCandidate(
            FamilyType.RANDOM_UNKNOWN, _cap(rand),
            f"IC {ic:.3f} near random {RANDOM_IC:.1f}, entropy {stats['entropy']:.2f} bits, "
            f"plaintext plausibility {plausibility:.2f}",
        ),
    ]
    families = [f for f in families if f.confidence >= MIN_FAMILY_CONFIDENCE]
    if not families:
        families = [FamilyCandidate(FamilyType.UNKNOWN, 0.0, "No cipher family produced a usable signal")]
    families.sort(key=lambda f: f.confidence, reverse=True)

    stats.update(
        has_repetitions=kas["has_repetitions"],
        suggested_key_lengths=[s["key_length"] for s in suggestions[:3]],
        language=lang,
        expected_ic=expected,
        detection=detection,
        adjacency=round(adjacency, 4),
    )
    return {"families": families, "stats": stats}


def format_report(result: dict) -> str:
    """Human-readable report of an identify() result."""
    stats = result["stats"]
    lines = [
        "=" * 70,
        "CIPHER IDENTIFICATION",
        "=" * 70,
        f"  Letters: {stats['length']}   IC: {stats['ic']:.3f}   Entropy: {stats['entropy']:.3f} bits",
    ]
    if stats["language"]:
        lines.append(f"  Language: {stats['language']}   Expected IC: {stats['expected_ic']:.2f}")
    if stats["suggested_key_lengths"]:
        lines.append(f"  Kasiski key lengths: {stats['suggested_key_lengths']}")
    lines.append("")
    lines.append(f"  {'Family':<30} {'Conf':>6}  Reason")
    lines.append("  " + "-" * 66)
    for f in result["families"]:
        key = f" [key length {f.suggested_key_length}]" if f.suggested_key_length else ""
        lines.append(f"  {f.type.value:<30} {f.confidence:>6.2f}  {f.reason}{key}")
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(description="Identify the cipher family of a ciphertext")
    parser.add_argument("text", help="Ciphertext")
    parser.add_argument("--language", default="auto", help="Plaintext language or 'auto'")
    parser.add_argument("--describe", action="store_true", help="Print family descriptions")
    args = parser.parse_args()

    result = identify(args.text, args.language)
    print(format_report(result))
    if args.describe:
        print()
        for f in result["families"]:
            print(f"  {f.type.value}: {get_description(f.type)}")


if __name__ == "__main__":
    main()
