"""
Project: Careless
File Name: __init__.py
Description:
    Per-respondent indices for detecting careless survey responding.

Usage::

    from careless import evenodd, simulate_careless_dataset, factor_lengths

    df = simulate_careless_dataset()
    scores = evenodd(df, factor_lengths())
    diagnostics = evenodd(df, factor_lengths(), diag=True).to_df()
"""

from importlib.metadata import version
__version__ = version("careless")

# Core models
from careless.core.models import EvenOddResult, FactorSpan, ScoreRecord
from careless.core.types import ResponseSource

# Scoring
from careless.scoring.evenodd import evenodd

# Statistics
from careless.stats.correlation import pairwise_pearson, spearman_brown

# Data
from careless.data.loaders import CsvResponseSource, load_responses
from careless.data.simulate import (
    SimulatedResponseSource,
    SimulationConfig,
    factor_lengths,
    simulate_careless_dataset,
)

__all__ = [
    # Core
    "EvenOddResult",
    "FactorSpan",
    "ResponseSource",
    "ScoreRecord",
    # Scoring
    "evenodd",
    # Statistics
    "pairwise_pearson",
    "spearman_brown",
    # Data
    "CsvResponseSource",
    "SimulatedResponseSource",
    "SimulationConfig",
    "factor_lengths",
    "load_responses",
    "simulate_careless_dataset",
]
