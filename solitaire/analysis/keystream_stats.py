"""
Letter-distribution statistics for a Solitaire keystream.

Generates the keystream of a keyed deck and measures how far it is from a
uniform stream of letters:
    - 26-bin histogram of keystream numbers
    - Pearson chi-square statistic against the uniform distribution
      (25 degrees of freedom; the 5% critical value is ≈ 37.65)
    - repeat rate: fraction of adjacent equal numbers (uniform ≈ 1/26)

Solitaire is known to repeat letters slightly more often than a uniform
source (about 1/22.5 instead of 1/26), which this report makes visible on
long streams.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from solitaire.engine.cards import ALPHABET_SIZE
from solitaire.engine.keystream import generate_keystream

CHI_SQUARE_CRITICAL_5PCT: float = 37.652  # chi-square, 25 dof, p = 0.05


@dataclass
class KeystreamStats:
    """Summary of one keystream sample.

    Attributes:
        key:         Passphrase the deck was keyed with (as given).
        length:      Number of keystream numbers generated.
        histogram:   int64 array of shape (26,), count per letter offset.
        chi_square:  Pearson chi-square statistic against uniform.
        repeat_rate: Fraction of positions i where stream[i] == stream[i + 1].
    """

    key: bytes
    length: int
    histogram: np.ndarray
    chi_square: float
    repeat_rate: float

    @property
    def looks_uniform(self) -> bool:
        return self.chi_square < CHI_SQUARE_CRITICAL_5PCT

    def __str__(self) -> str:
        return (
            f"Key: {self.key!r} | "
            f"Length: {self.length:,} | "
            f"Chi²: {self.chi_square:.2f} | "
            f"Repeat rate: {self.repeat_rate:.4f}"
        )


def letter_histogram(numbers: np.ndarray) -> np.ndarray:
    """Count occurrences of each keystream number 0–25.

    Examples:
        >>> letter_histogram(np.array([0, 0, 25])).tolist()[:2]
        [2, 0]
    """
    return np.bincount(np.asarray(numbers, dtype=np.int64), minlength=ALPHABET_SIZE)


def chi_square_uniform(histogram: np.ndarray) -> float:
    """Pearson chi-square of a histogram against the uniform distribution.

    Returns 0.0 for an empty histogram.
    """
    total = histogram.sum()
    if total == 0:
        return 0.0
    expected = total / len(histogram)
    return float(((histogram - expected) ** 2 / expected).sum())


def repeat_rate(numbers: np.ndarray) -> float:
    """Fraction of adjacent positions holding the same number (0.0 if < 2 items)."""
    if len(numbers) < 2:
        return 0.0
    return float(np.mean(numbers[1:] == numbers[:-1]))


def analyse_keystream(key: bytes | str, length: int) -> KeystreamStats:
    """Generate `length` keystream numbers for `key` and summarise them.

    Raises:
        ValueError: If length is negative.
    """
    if length < 0:
        raise ValueError(f"Keystream length must be non-negative, got {length}.")
    numbers = generate_keystream(key, length)
    histogram = letter_histogram(numbers)
    return KeystreamStats(
        key=key.encode('ascii', errors='ignore') if isinstance(key, str) else bytes(key),
        length=length,
        histogram=histogram,
        chi_square=chi_square_uniform(histogram),
        repeat_rate=repeat_rate(numbers),
    )


def print_keystream_report(stats: KeystreamStats) -> str:
    """Format and print a keystream distribution report.

    Returns:
        The formatted report string (also printed to stdout).
    """
    peak = int(stats.histogram.max()) if stats.length else 0
    lines = [
        "=" * 70,
        f"Keystream Report: key={stats.key!r}",
        "=" * 70,
        "",
        "── Distribution ────────────────────────────────────────────────────",
        f"  Letters generated : {stats.length:>10,}",
        f"  Chi-square (25df) : {stats.chi_square:>10.2f}  "
        f"({'uniform' if stats.looks_uniform else 'NOT uniform'} at 5%, "
        f"critical {CHI_SQUARE_CRITICAL_5PCT:.2f})",
        f"  Repeat rate       : {stats.repeat_rate:>10.4f}  (uniform {1 / ALPHABET_SIZE:.4f})",
        "",
        "── Histogram ───────────────────────────────────────────────────────",
    ]
    for offset, count in enumerate(stats.histogram):
        bar = "#" * (round(40 * int(count) / peak) if peak else 0)
        lines.append(f"  {chr(ord('A') + offset)} {int(count):>8,}  {bar}")
    lines.append("=" * 70)

    report = "\n".join(lines)
    print(report)
    return report
