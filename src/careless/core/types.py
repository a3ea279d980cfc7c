"""
Project: Careless
File Name: core/types.py
Description:
    Protocols and type aliases for the careless data abstraction layer.
    Data providers (CSV exports, survey platforms, simulators) implement
    these protocols to supply response tables to the indices.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    import pandas as pd


# 2-D table: rows = respondents, columns = items, NaN/None = missing
ResponseMatrix = Union[np.ndarray, "pd.DataFrame", Sequence[Sequence[float | None]]]

# Number of consecutive items in each factor, left to right
FactorLengths = Sequence[int]


@runtime_checkable
class ResponseSource(Protocol):
    """Minimal protocol for anything that supplies survey responses.

    Implementations return the response table together with the factor
    layout its columns follow.
    """

    def load_responses(self) -> pd.DataFrame: ...

    @property
    def factors(self) -> list[int]: ...
