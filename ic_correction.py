"""
---
version: 0.2.0
created: 2026-02-26
updated: 2026-03-02
---

ic_correction.py — Sample-size-aware expectations for the index of coincidence.

A short text's IC scatters widely around its language baseline. This module
gives the expected IC for a text length, its standard deviation, and a
tolerance band used to decide whether an observed IC is consistent with a
monoalphabetic text in that language.

All ICs are normalized (x26): English ~1.73, random ~1.0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from cipherstat_tables import IC_BASELINES

DEFAULT_K_SIGMA = 2.5
DEFAULT_MIN_PERCENT = 5.0
DEFAULT_MAX_PERCENT = 60.0

SHORT_TEXT = 20       # below: baseline returned unchanged
MEDIUM_TEXT = 50      # below: 2% discount
MEDIUM_DISCOUNT = 0.98


@dataclass(frozen=True)
class ToleranceConfig:
    absolute: float
    percent: float
    std_dev: float
    expected_ic: float
    k_sigma: float


def baseline_ic(language: str | None = "english") -> float:
    """Per-language IC baseline; unknown languages fall back to English."""
    lang = (language or "english").strip().lower()
    return IC_BASELINES.get(lang, IC_BASELINES["english"])


def expected_ic(length: int, language: str | None = "english", base_ic: float | None = None) -> float:
    """
    Expected IC for a text of `length` letters.

    Under 20 letters no correction is attempted; 20-49 letters get a fixed 2%
    downward discount; 50 and over use the baseline as-is.
    """
    base = baseline_ic(language) if base_ic is None else base_ic
    if length < SHORT_TEXT:
        return base
    if length < MEDIUM_TEXT:
        return base * MEDIUM_DISCOUNT
    return base


def expected_std_dev(length: int, expected: float) -> float:
    """
    Standard deviation of the normalized IC for `length` letters.

    Works on the raw probability scale p = IC/26 with var = p(1-p)/N, then
    scales the variance back by 26^2. Infinite below 2 letters.
    """
    if length < 2:
        return math.inf
    p = expected / 26
    variance = p * (1 - p) / length
    return math.sqrt(variance * 26 * 26)


def tolerance(length: int, expected: float, k_sigma: float = DEFAULT_K_SIGMA) -> float:
    return k_sigma * expected_std_dev(length, expected)


def tolerance_percent(length: int, expected: float, k_sigma: float = DEFAULT_K_SIGMA) -> float:
    if expected == 0:
        return math.inf
    return tolerance(length, expected, k_sigma) / expected * 100


def get_tolerance_config(
    length: int,
    expected: float,
    k_sigma: float = DEFAULT_K_SIGMA,
    min_percent: float = DEFAULT_MIN_PERCENT,
    max_percent: float = DEFAULT_MAX_PERCENT,
) -> ToleranceConfig:
    """
    Tolerance band around `expected` with the percent clamped to
    [min_percent, max_percent] and the absolute width recomputed from it.

    Raises:
        ValueError: If k_sigma <= 0 or min_percent > max_percent.
    """
    if k_sigma <= 0:
        raise ValueError(f"k_sigma must be positive, got {k_sigma}")
    if min_percent > max_percent:
        raise ValueError(f"min_percent ({min_percent}) exceeds max_percent ({max_percent})")
    std = expected_std_dev(length, expected)
    percent = tolerance_percent(length, expected, k_sigma)
    percent = max(min_percent, min(max_percent, percent))
    return ToleranceConfig(
        absolute=expected * percent / 100,
        percent=percent,
        std_dev=std,
        expected_ic=expected,
        k_sigma=k_sigma,
    )


def validate(
    actual_ic: float,
    length: int,
    language: str | None = "english",
    base_ic: float | None = None,
    k_sigma: float = DEFAULT_K_SIGMA,
    min_percent: float = DEFAULT_MIN_PERCENT,
    max_percent: float = DEFAULT_MAX_PERCENT,
) -> dict:
    """
    Check an observed IC against the sample-size-corrected expectation.

    Below 2 letters the standard deviation is infinite: z_score is 0 and
    valid is True. That verdict carries no information; callers gate on
    length before trusting it.

    Returns dict with:
        valid: difference <= tolerance
        expected_ic, actual_ic, difference, tolerance, tolerance_percent
        std_dev: standard deviation of the IC at this length
        z_score: difference / std_dev (0 when std_dev is 0 or infinite)
        p_value: two-sided normal p-value of z_score
    """
    from scipy import stats as sp_stats

    expected = expected_ic(length, language, base_ic)
    config = get_tolerance_config(length, expected, k_sigma, min_percent, max_percent)
    difference = abs(actual_ic - expected)
    std = config.std_dev
    z = difference / std if 0 < std < math.inf else 0.0
    return {
        "valid": difference <= config.absolute or math.isinf(std),
        "expected_ic": expected,
        "actual_ic": actual_ic,
        "tolerance": config.absolute,
        "tolerance_percent": config.percent,
        "difference": difference,
        "z_score": z,
        "p_value": float(2 * sp_stats.norm.sf(abs(z))),
        "std_dev": std,
    }


def get_expected_range(
    length: int,
    language: str | None = "english",
    base_ic: float | None = None,
    k_sigma: float = DEFAULT_K_SIGMA,
    min_percent: float = DEFAULT_MIN_PERCENT,
    max_percent: float = DEFAULT_MAX_PERCENT,
) -> dict:
    expected = expected_ic(length, language, base_ic)
    config = get_tolerance_config(length, expected, k_sigma, min_percent, max_percent)
    return {
        "min": expected - config.absolute,
        "max": expected + config.absolute,
        "expected": expected,
        "tolerance": config.absolute,
        "tolerance_percent": config.percent,
    }
