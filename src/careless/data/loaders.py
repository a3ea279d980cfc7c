"""
Project: Careless
File Name: data/loaders.py
Description:
    CSV loading for survey response tables.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def load_responses(
    path: str | Path,
    columns: Sequence[str] | None = None,
    id_column: str | None = None,
) -> pd.DataFrame:
    """Read a CSV of item responses into a numeric table.

    Args:
        path: CSV file with one row per respondent.
        columns: Item columns to keep, in factor order. Defaults to every
            column except ``id_column``.
        id_column: Column to use as the row index.

    Returns:
        Float DataFrame; cells that are blank or not numeric become NaN.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If a requested column is absent.
    """
    path = Path(path)
    if not path.is_file():
        msg = f"Response file not found: {path}"
        raise FileNotFoundError(msg)

    df = pd.read_csv(path)

    if id_column is not None:
        if id_column not in df.columns:
            msg = f"Id column {id_column!r} not found in {path.name}"
            raise ValueError(msg)
        df = df.set_index(id_column)

    if columns is not None:
        absent = [c for c in columns if c not in df.columns]
        if absent:
            msg = f"Columns not found in {path.name}: {absent}"
            raise ValueError(msg)
        df = df[list(columns)]

    items = df.apply(pd.to_numeric, errors="coerce").astype(np.float64)
    logger.info(
        "Loaded %d respondents × %d items from %s", items.shape[0], items.shape[1], path.name,
    )
    return items


@dataclass(frozen=True)
class CsvResponseSource:
    """ResponseSource reading a CSV export."""

    path: str | Path
    factors: list[int]
    columns: tuple[str, ...] | None = None
    id_column: str | None = None

    def load_responses(self) -> pd.DataFrame:
        return load_responses(self.path, columns=self.columns, id_column=self.id_column)
