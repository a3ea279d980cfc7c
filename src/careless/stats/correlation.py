"""
Project: Careless
File Name: stats/correlation.py
Description:
    Pairwise-complete correlation and the Spearman-Brown correction.

    Both helpers encode an undefined statistic as NaN instead of raising,
    so callers scoring many respondents never stop on a degenerate one.
"""

from __future__ import annotations

import math

import numpy as np
from scipy import stats


def pairwise_pearson(a: np.ndarray, b: np.ndarray) -> float:
    """Pearson correlation over positions where both ``a`` and ``b`` are present.

    Returns NaN when fewer than 2 complete pairs remain or when either
    side has zero variance over those pairs.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        msg = f"Shape mismatch: {a.shape} vs {b.shape}"
        raise ValueError(msg)

    complete = ~(np.isnan(a) | np.isnan(b))
    if complete.sum() < 2:
        return math.nan

    a, b = a[complete], b[complete]
    if np.ptp(a) == 0 or np.ptp(b) == 0:
        return math.nan

    r, _ = stats.pearsonr(a, b)
    return float(r)


def spearman_brown(r: float) -> float:
    """Step a half-length correlation up to full-length reliability.

        r_full = (2 × r) / (1 + r)

    NaN passes through. The result is floored at -1, which also covers
    ``r == -1`` where the formula diverges.
    """
    if math.isnan(r):
        return math.nan
    if r <= -1.0:
        return -1.0
    return max(-1.0, (2.0 * r) / (1.0 + r))
