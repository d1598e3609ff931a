"""
---
version: 0.2.0
created: 2026-03-01
updated: 2026-03-04
---

calibrate.py — Threshold calibration on a labelled synthetic corpus.

Encrypts English passages with the classical families the classifier knows
about, then checks what identify() and the transposition detector make of
them. Used to tune the confidence weights and recommendation bands.

Sections:
  1. Corpus generators — reference encoders and labelled sample builder
  2. Classification — confusion table of top family vs true label
  3. Transposition — score distribution per label
  4. Plots — score histograms (matplotlib, optional)

Usage:
    python3 calibrate.py --corpus                 # build corpus, save JSON
    python3 calibrate.py --classify               # section 2
    python3 calibrate.py --transposition          # section 3
    python3 calibrate.py --transposition --plot   # with histogram
    python3 calibrate.py --classify --seed 7 --samples 20 --length 120
"""

from __future__ import annotations

import argparse
import json
import warnings
from collections import Counter
from pathlib import Path

import numpy as np

from cipher_identify import FamilyType, identify
from cipherstat import ALPHABET, only_letters, shift_letters
from transposition_detect import analyze

OUTPUT_DIR = Path(__file__).parent / "calibration"

PASSAGES = [
    "It was late in the autumn when the letters first arrived at the house on the hill. "
    "Nobody in the village could say who had sent them, and the old postmaster swore that "
    "he had never seen the hand before. Each letter was folded twice and sealed with plain "
    "red wax, and each one carried a single line of numbers that meant nothing to anyone.",
    "The river rose through the night and by morning the lower fields were under water. "
    "Farmers moved their animals to the high ground and waited for the rain to stop, but "
    "it went on for three more days. When the water finally fell back it left the roads "
    "covered in mud and the bridge at the mill had been carried away.",
    "A good map tells you where you are and a better one tells you where you have been. "
    "The surveyors who walked these mountains carried chains and compasses, and they wrote "
    "down every stream and every path they crossed. Their notebooks are still kept in the "
    "library of the county, bound in leather and faded by time.",
    "Send the message to the general before dawn and tell him that the enemy is moving "
    "north along the river. We have seen their fires on the far bank and we think they "
    "will try to cross at the old ford near the church. Hold the bridge until the rest "
    "of the army arrives and do not open fire without an order.",
    "She learned to read from the newspapers her father brought home from the city. "
    "Every evening she sat by the window and worked through the long columns of small "
    "print, asking about every word she did not know. By the time she was ten she had "
    "read every book in the house and started to write stories of her own.",
    "The ship left the harbour on a clear morning with a light wind from the west. "
    "Her captain had made the crossing many times and knew the currents well, yet he "
    "kept a careful watch through the first night. On the fourth day they sighted land "
    "and the crew gathered on deck to see the green hills rise out of the sea.",
    "There is a simple way to test whether a coin is fair. Throw it many times and count "
    "how often it lands on each side. If the numbers are far apart after a long run you "
    "may begin to suspect the coin, but a short run proves very little, because chance "
    "alone can produce long streaks that look like a pattern.",
    "The garden behind the school had been empty for years before the children decided "
    "to plant it again. They cleared the stones, turned the soil and put in rows of beans "
    "and potatoes. An old gardener showed them how to keep a record of the weather and of "
    "every plant, and by the end of summer the notebook was full.",
]

LABELS = ("plaintext", "caesar", "substitution", "vigenere", "columnar", "random")

# top family counted as correct for each label
EXPECTED_FAMILY = {
    "plaintext": {FamilyType.MONOALPHABETIC_SUBSTITUTION, FamilyType.CAESAR_SHIFT},
    "caesar": {FamilyType.MONOALPHABETIC_SUBSTITUTION, FamilyType.CAESAR_SHIFT},
    "substitution": {FamilyType.MONOALPHABETIC_SUBSTITUTION},
    "vigenere": {FamilyType.VIGENERE_LIKE},
    "columnar": {FamilyType.TRANSPOSITION},
    "random": {FamilyType.RANDOM_UNKNOWN, FamilyType.VIGENERE_LIKE},
}


# ============================================================================
# 1. CORPUS GENERATORS
# ============================================================================

def caesar_encrypt(text: str, shift: int) -> str:
    return shift_letters(text, shift)


def substitution_encrypt(text: str, key: str) -> str:
    """Monoalphabetic substitution: plaintext A..Z maps to key[0..25]."""
    if sorted(key) != list(ALPHABET):
        raise ValueError(f"substitution key must be a permutation of A-Z, got {key!r}")
    return only_letters(text).translate(str.maketrans(ALPHABET, key))


def vigenere_encrypt(text: str, key: str) -> str:
    """Vigenère over the letters only; the key advances on letters."""
    clean = only_letters(text)
    shifts = [ord(c) - 65 for c in only_letters(key)]
    if not shifts:
        raise ValueError("Vigenère key needs at least one letter")
    return "".join(ALPHABET[(ord(c) - 65 + shifts[i % len(shifts)]) % 26] for i, c in enumerate(clean))


def columnar_encrypt(text: str, order: list[int]) -> str:
    """
    Columnar transposition: write rows of len(order), read columns in `order`.

    order is a permutation of range(len(order)); column order[0] is read first.
    """
    if sorted(order) != list(range(len(order))):
        raise ValueError(f"column order must be a permutation of 0..{len(order) - 1}, got {order}")
    clean = only_letters(text)
    width = len(order)
    return "".join(clean[col::width] for col in order)


def route_spiral_encrypt(text: str, rows: int, cols: int, pad: str = "X") -> str:
    """Fill a rows x cols grid row by row (padding with `pad`), read it in a clockwise spiral."""
    clean = only_letters(text)[:rows * cols]
    clean = clean + pad * (rows * cols - len(clean))
    grid = [clean[r * cols:(r + 1) * cols] for r in range(rows)]
    out = []
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        out.extend(grid[top][c] for c in range(left, right + 1))
        top += 1
        out.extend(grid[r][right] for r in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            out.extend(grid[bottom][c] for c in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            out.extend(grid[r][left] for r in range(bottom, top - 1, -1))
            left += 1
    return "".join(out)


def random_letters(n: int, rng: np.random.Generator) -> str:
    return "".join(rng.choice(list(ALPHABET), size=n))


def make_sample(label: str, plaintext: str, rng: np.random.Generator) -> dict:
    """Encrypt one plaintext under `label` with a random key."""
    if label == "plaintext":
        text, key = only_letters(plaintext), None
    elif label == "caesar":
        shift = int(rng.integers(1, 26))
        text, key = caesar_encrypt(plaintext, shift), shift
    elif label == "substitution":
        key = "".join(rng.permutation(list(ALPHABET)))
        text = substitution_encrypt(plaintext, key)
    elif label == "vigenere":
        key = "".join(rng.choice(list(ALPHABET), size=int(rng.integers(3, 8))))
        text = vigenere_encrypt(plaintext, key)
    elif label == "columnar":
        key = [int(i) for i in rng.permutation(int(rng.integers(4, 10)))]
        text = columnar_encrypt(plaintext, key)
    elif label == "random":
        text, key = random_letters(len(only_letters(plaintext)), rng), None
    else:
        raise ValueError(f"unknown label {label!r}; expected one of {LABELS}")
    return {"label": label, "key": key, "text": text}


def build_corpus(samples: int = 10, length: int = 150, seed: int = 42) -> list[dict]:
    """
    `samples` ciphertexts per label, each cut from a random passage offset.

    Returns list of dicts: {label, key, text}.
    """
    rng = np.random.default_rng(seed)
    corpus = []
    for label in LABELS:
        for _ in range(samples):
            passage = only_letters(PASSAGES[int(rng.integers(len(PASSAGES)))])
            start = int(rng.integers(0, max(1, len(passage) - length)))
            corpus.append(make_sample(label, passage[start:start + length], rng))
    return corpus


def save_corpus(corpus: list[dict], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(corpus, f, indent=2)
    print(f"Saved {len(corpus)} samples: {path}")


# ============================================================================
# 2. CLASSIFICATION
# ============================================================================

def classify_corpus(corpus: list[dict]) -> dict:
    """
    Run identify() over the corpus.

    Returns dict with:
        confusion: {label: Counter(top family value)}
        accuracy: {label: fraction whose top family is an expected one}
        rows: per-sample {label, top, confidence, ic}
    """
    confusion: dict[str, Counter] = {label: Counter() for label in LABELS}
    hits: Counter = Counter()
    totals: Counter = Counter()
    rows = []
    for sample in corpus:
        result = identify(sample["text"], language="english")
        top = result["families"][0]
        confusion[sample["label"]][top.type.value] += 1
        totals[sample["label"]] += 1
        if top.type in EXPECTED_FAMILY[sample["label"]]:
            hits[sample["label"]] += 1
        rows.append({"label": sample["label"], "top": top.type.value,
                     "confidence": top.confidence, "ic": result["stats"]["ic"]})
    accuracy = {label: hits[label] / totals[label] for label in LABELS if totals[label]}
    return {"confusion": confusion, "accuracy": accuracy, "rows": rows}


def print_confusion(report: dict) -> None:
    families = [f.value for f in FamilyType]
    short = {f: f.split("-")[0][:8] for f in families}
    print("=" * 70)
    print("TOP FAMILY BY LABEL")
    print("=" * 70)
    print(f"{'Label':<14}" + "".join(f"{short[f]:>9}" for f in families) + f"{'Acc':>7}")
    print("-" * 70)
    for label in LABELS:
        counts = report["confusion"][label]
        acc = report["accuracy"].get(label, 0.0)
        print(f"{label:<14}" + "".join(f"{counts.get(f, 0):>9}" for f in families) + f"{acc:>7.0%}")


# ============================================================================
# 3. TRANSPOSITION
# ============================================================================

def transposition_scores(corpus: list[dict]) -> dict[str, list[float]]:
    scores: dict[str, list[float]] = {label: [] for label in LABELS}
    for sample in corpus:
        scores[sample["label"]].append(analyze(sample["text"], "english").transposition_score)
    return scores


def print_transposition(scores: dict[str, list[float]]) -> None:
    print("=" * 70)
    print("TRANSPOSITION SCORE BY LABEL")
    print("=" * 70)
    print(f"{'Label':<14} {'N':>4} {'Mean':>7} {'Min':>7} {'Max':>7} {'>0.6':>6}")
    print("-" * 50)
    for label, values in scores.items():
        if not values:
            continue
        arr = np.array(values, dtype=float)
        print(f"{label:<14} {len(arr):>4} {arr.mean():>7.3f} {arr.min():>7.3f} "
              f"{arr.max():>7.3f} {(arr > 0.6).mean():>6.0%}")


# ============================================================================
# 4. PLOTS
# ============================================================================

def plot_transposition_scores(scores: dict[str, list[float]], save_path: str | Path | None = None) -> None:
    """Overlaid histograms of transposition scores per label. Requires matplotlib (optional)."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        warnings.warn("matplotlib not available; skipping plot")
        return

    fig, ax = plt.subplots(figsize=(8, 4))
    bins = np.linspace(0, 1, 21)
    for label, values in scores.items():
        if values:
            ax.hist(values, bins=bins, alpha=0.5, label=label)
    ax.axvline(0.6, color="black", linestyle="--", linewidth=1)
    ax.axvline(0.4, color="black", linestyle=":", linewidth=1)
    ax.set_xlabel("Transposition score")
    ax.set_ylabel("Samples")
    ax.legend(fontsize=8)

    plt.tight_layout()
    if save_path:
        plt.savefig(str(save_path), dpi=150, bbox_inches="tight")
        print(f"Saved: {save_path}")
    else:
        plt.show()


def main() -> None:
    parser = argparse.ArgumentParser(description="Calibrate classifier thresholds on a synthetic corpus")
    parser.add_argument("--corpus", action="store_true", help="Build and save the labelled corpus")
    parser.add_argument("--classify", action="store_true", help="Confusion table of identify()")
    parser.add_argument("--transposition", action="store_true", help="Transposition score distribution")
    parser.add_argument("--plot", action="store_true", help="Plot transposition histogram")
    parser.add_argument("--samples", type=int, default=10, help="Samples per label")
    parser.add_argument("--length", type=int, default=150, help="Letters per sample")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--out", type=Path, default=OUTPUT_DIR, help="Output directory")
    args = parser.parse_args()

    if not (args.corpus or args.classify or args.transposition):
        parser.print_help()
        return

    corpus = build_corpus(args.samples, args.length, args.seed)
    if args.corpus:
        save_corpus(corpus, args.out / "corpus.json")

    if args.classify:
        report = classify_corpus(corpus)
        print_confusion(report)
        args.out.mkdir(parents=True, exist_ok=True)
        with open(args.out / "classification.json", "w") as f:
            json.dump({"accuracy": report["accuracy"], "rows": report["rows"]}, f, indent=2)
        print()

    if args.transposition:
        scores = transposition_scores(corpus)
        print_transposition(scores)
        if args.plot:
            args.out.mkdir(parents=True, exist_ok=True)
            plot_transposition_scores(scores, args.out / "transposition_scores.png")


if __name__ == "__main__":
    main()
