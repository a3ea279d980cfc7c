"""
Project: Careless
File Name: scoring/evenodd.py
Description:
    Even-odd consistency — does a respondent answer both halves of each
    subscale the same way?

    For every factor the items are split by their 1-based position within
    the factor (odd positions vs even positions) and averaged. The
    within-person correlation between the even means and the odd means
    across factors is then stepped up with the Spearman-Brown formula.
    Attentive respondents score close to +1; random responders drift
    towards 0 or below.

Reference:
    Johnson, J. A. (2005). Ascertaining the validity of individual protocols
    from web-based personality inventories. Journal of Research in
    Personality, 39, 103-129.
"""

from __future__ import annotations

import logging
import numbers

import numpy as np

from careless.core.models import EvenOddResult, FactorSpan, ScoreRecord
from careless.core.types import FactorLengths, ResponseMatrix
from careless.stats.correlation import pairwise_pearson, spearman_brown

logger = logging.getLogger(__name__)

EVEN = 0  # column of the per-factor means table holding even-position means
ODD = 1


def _as_matrix(x: ResponseMatrix) -> tuple[np.ndarray, tuple | None]:
    """Coerce the response table to a float array, missing cells as NaN.

    Returns the array and, for DataFrame input, the row index.
    """
    row_labels = None
    if hasattr(x, "to_numpy") and hasattr(x, "columns"):
        row_labels = tuple(x.index)
        data = x.to_numpy(dtype=np.float64, na_value=np.nan)
    else:
        data = np.asarray(x, dtype=np.float64)

    if data.ndim != 2:
        msg = f"Response matrix must be 2-D, got {data.ndim}-D"
        raise ValueError(msg)
    if data.shape[0] == 0 or data.shape[1] == 0:
        msg = f"Response matrix must have at least one row and one column, got shape {data.shape}"
        raise ValueError(msg)
    return data, row_labels


def factor_spans(factors: FactorLengths) -> list[FactorSpan]:
    """Lay the factors out as consecutive column ranges, left to right.

    Raises:
        ValueError: If ``factors`` is empty or holds anything other than
            positive whole numbers.
    """
    factors = list(factors)
    if not factors:
        msg = "At least one factor length is required"
        raise ValueError(msg)

    spans: list[FactorSpan] = []
    start = 0
    for k, length in enumerate(factors):
        if (
            isinstance(length, (bool, np.bool_))
            or not isinstance(length, numbers.Real)
            or not float(length).is_integer()
            or length < 1
        ):
            msg = f"Factor {k} has invalid length {length!r}; lengths must be positive integers"
            raise ValueError(msg)
        stop = start + int(length)
        spans.append(FactorSpan(index=k, start=start, stop=stop))
        start = stop
    return spans


def _row_means(block: np.ndarray) -> np.ndarray:
    """Row-wise mean ignoring NaN; NaN where a row has no values at all."""
    present = ~np.isnan(block)
    counts = present.sum(axis=1)
    totals = np.where(present, block, 0.0).sum(axis=1)
    with np.errstate(invalid="ignore", divide="ignore"):
        return np.where(counts > 0, totals / counts, np.nan)


def factor_half_means(data: np.ndarray, spans: list[FactorSpan]) -> np.ndarray:
    """Even and odd item means of every factor for every respondent.

    Returns an array of shape ``(n_respondents, n_factors, 2)``; slice
    ``[i]`` is respondent ``i``'s own table with even means in column
    ``EVEN`` and odd means in column ``ODD``.
    """
    means = np.full((data.shape[0], len(spans), 2), np.nan)
    for span in spans:
        means[:, span.index, EVEN] = _row_means(data[:, span.even_columns])
        means[:, span.index, ODD] = _row_means(data[:, span.odd_columns])
    return means


def evenodd(
    x: ResponseMatrix,
    factors: FactorLengths,
    diag: bool = False,
) -> np.ndarray | EvenOddResult:
    """Compute the even-odd consistency score of every respondent.

    Args:
        x: Response table, rows = respondents, columns = items grouped
            into consecutive factors. Missing cells may be NaN, None or
            ``pd.NA``.
        factors: Number of items in each factor, in column order.
        diag: Also return how many factors gave a usable even/odd pair.

    Returns:
        A float array with one score per respondent, or, with ``diag``,
        an EvenOddResult of ScoreRecords. A score is NaN when fewer than
        two factors give a complete pair for that respondent.

    Raises:
        ValueError: If the table is not a non-empty 2-D table or the
            factor lengths do not add up to its column count.
    """
    data, row_labels = _as_matrix(x)
    spans = factor_spans(factors)

    n_items = spans[-1].stop
    if n_items != data.shape[1]:
        msg = (
            f"Factor lengths sum to {n_items} but the response matrix "
            f"has {data.shape[1]} columns"
        )
        raise ValueError(msg)

    singletons = [s.index for s in spans if s.length == 1]
    if singletons:
        logger.warning(
            "Factors %s have a single item and can never form an even/odd pair; "
            "they are left out of every score",
            singletons,
        )

    means = factor_half_means(data, spans)
    valid_pairs = (~np.isnan(means).any(axis=2)).sum(axis=1)
    scores = np.array(
        [spearman_brown(pairwise_pearson(m[:, EVEN], m[:, ODD])) for m in means],
        dtype=np.float64,
    )

    logger.debug(
        "Even-odd consistency: scored %d respondents over %d factors, %d missing",
        len(scores),
        len(spans),
        int(np.isnan(scores).sum()),
    )

    if not diag:
        return scores

    return EvenOddResult(
        records=tuple(
            ScoreRecord(score=float(s), valid_pairs=int(v))
            for s, v in zip(scores, valid_pairs)
        ),
        row_labels=row_labels,
    )
