"""
---
version: 0.1.0
created: 2026-03-01
updated: 2026-03-01
---

periodic.py — Period detection by column IC and letter autocorrelation.

Corroborates Kasiski key-length hypotheses: splitting a periodic
polyalphabetic ciphertext into `period` columns gives monoalphabetic columns
whose IC climbs back toward the language baseline, and letters repeat more
often than chance at shifts equal to a multiple of the period.
"""

from __future__ import annotations

import numpy as np

from cipherstat import index_of_coincidence, only_letters

RANDOM_MATCH_RATE = 1 / 26
PEAK_MARGIN = 0.03


def periodic_ic(text, period: int) -> float:
    """Mean normalized IC of the `period` columns (columns under 2 letters skipped)."""
    if period < 1:
        raise ValueError(f"period must be >= 1, got {period}")
    clean = only_letters(text)
    ics = [index_of_coincidence(clean[i::period]) for i in range(period) if len(clean[i::period]) >= 2]
    return float(np.mean(ics)) if ics else 0.0


def period_profile(text, max_period: int = 20) -> list[dict]:
    """Column IC for every period 1..max_period that leaves at least 2 letters per column."""
    clean = only_letters(text)
    upper = min(max_period, len(clean) // 2)
    return [{"period": p, "ic": periodic_ic(clean, p)} for p in range(1, upper + 1)]


def autocorrelation(text, max_shift: int = 20) -> list[dict]:
    """
    Coincidence rate of the text with itself shifted by 1..max_shift.

    Returns list of dicts: {shift, matches, rate, peak}; `peak` marks rates
    more than 0.03 above the 1/26 chance level.
    """
    clean = only_letters(text)
    if len(clean) < 2:
        return []
    codes = np.frombuffer(clean.encode("ascii"), dtype=np.uint8)
    out = []
    for shift in range(1, min(max_shift, len(clean) - 1) + 1):
        matches = int((codes[shift:] == codes[:-shift]).sum())
        rate = matches / (len(clean) - shift)
        out.append({
            "shift": shift,
            "matches": matches,
            "rate": rate,
            "peak": rate > RANDOM_MATCH_RATE + PEAK_MARGIN,
        })
    return out


def best_period(text, max_period: int = 20, min_column: int = 5) -> dict:
    """
    Period > 1 with the highest column IC, requiring `min_column` letters per column.

    Returns {period, ic}; period 0 when the text is too short for any candidate.
    """
    clean = only_letters(text)
    candidates = [row for row in period_profile(clean, max_period)
                  if row["period"] > 1 and len(clean) // row["period"] >= min_column]
    if not candidates:
        return {"period": 0, "ic": 0.0}
    return max(candidates, key=lambda row: row["ic"])
