"""
Project: Careless
File Name: core/models.py
Description:
    Data models shared across the careless-responding indices:
    FactorSpan, ScoreRecord and EvenOddResult.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, overload

import numpy as np

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class FactorSpan:
    """Half-open column range ``[start, stop)`` of one factor."""

    index: int  # 0-based factor number
    start: int
    stop: int

    @property
    def length(self) -> int:
        return self.stop - self.start

    @property
    def odd_columns(self) -> slice:
        """Columns at 1-based positions 1, 3, 5, ... within the factor."""
        return slice(self.start, self.stop, 2)

    @property
    def even_columns(self) -> slice:
        """Columns at 1-based positions 2, 4, 6, ... within the factor."""
        return slice(self.start + 1, self.stop, 2)


@dataclass(frozen=True)
class ScoreRecord:
    """Even-odd consistency of one respondent."""

    score: float  # NaN when the correlation is undefined
    valid_pairs: int  # factors with both an even and an odd mean

    @property
    def is_missing(self) -> bool:
        return bool(np.isnan(self.score))


@dataclass(frozen=True)
class EvenOddResult(Sequence[ScoreRecord]):
    """Per-respondent scores with diagnostics, in input row order."""

    records: tuple[ScoreRecord, ...]
    row_labels: tuple[Hashable, ...] | None = field(default=None, repr=False)

    @overload
    def __getitem__(self, i: int) -> ScoreRecord: ...

    @overload
    def __getitem__(self, i: slice) -> tuple[ScoreRecord, ...]: ...

    def __getitem__(self, i):
        return self.records[i]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ScoreRecord]:
        return iter(self.records)

    @property
    def scores(self) -> np.ndarray:
        return np.array([r.score for r in self.records], dtype=np.float64)

    @property
    def valid_pairs(self) -> np.ndarray:
        return np.array([r.valid_pairs for r in self.records], dtype=np.int64)

    def to_df(self) -> pd.DataFrame:
        """Convert to a DataFrame with columns ``score`` and ``valid_pairs``.

        Rows keep the index of the scored DataFrame when there was one.
        """
        import pandas as _pd

        return _pd.DataFrame(
            {"score": self.scores, "valid_pairs": self.valid_pairs},
            index=list(self.row_labels) if self.row_labels is not None else None,
        )
