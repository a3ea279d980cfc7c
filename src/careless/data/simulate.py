"""
Project: Careless
File Name: data/simulate.py
Description:
    Synthetic Likert survey with planted careless respondents.

    Attentive respondents answer every item of a factor around their own
    latent trait level; careless respondents pick categories uniformly at
    random. The default layout (200 respondents, ten 5-item factors on a
    5-point scale) mirrors the example dataset the even-odd index is
    usually demonstrated on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Shape and noise settings for ``simulate_careless_dataset``."""

    n_respondents: int = 200
    n_factors: int = 10
    items_per_factor: int = 5
    n_levels: int = 5  # Likert categories 1..n_levels
    careless_fraction: float = 0.1
    missing_rate: float = 0.0
    trait_loading: float = 0.6  # share of the scale half-range spanned by 1 SD of trait
    item_noise: float = 0.6  # SD of item-level noise, in scale points

    def __post_init__(self) -> None:
        if self.n_respondents < 1 or self.n_factors < 1 or self.items_per_factor < 1:
            msg = "n_respondents, n_factors and items_per_factor must all be >= 1"
            raise ValueError(msg)
        if self.n_levels < 2:
            msg = f"n_levels must be >= 2, got {self.n_levels}"
            raise ValueError(msg)
        if not 0.0 <= self.careless_fraction <= 1.0:
            msg = f"careless_fraction must be in [0, 1], got {self.careless_fraction}"
            raise ValueError(msg)
        if not 0.0 <= self.missing_rate < 1.0:
            msg = f"missing_rate must be in [0, 1), got {self.missing_rate}"
            raise ValueError(msg)

    @property
    def n_items(self) -> int:
        return self.n_factors * self.items_per_factor


DEFAULT_SIMULATION = SimulationConfig()


def factor_lengths(config: SimulationConfig = DEFAULT_SIMULATION) -> list[int]:
    """Factors vector matching the columns of a simulated dataset."""
    return [config.items_per_factor] * config.n_factors


def item_columns(config: SimulationConfig = DEFAULT_SIMULATION) -> list[str]:
    """Column names ``f{factor}_i{item}``, both 1-based."""
    return [
        f"f{k + 1}_i{j + 1}"
        for k in range(config.n_factors)
        for j in range(config.items_per_factor)
    ]


def simulate_careless_dataset(
    config: SimulationConfig = DEFAULT_SIMULATION,
    seed: int = 42,
) -> pd.DataFrame:
    """Generate a response table with a known set of careless respondents.

    Returns:
        DataFrame of shape ``(n_respondents, n_items)`` holding float
        responses in ``[1, n_levels]`` (NaN where blanked). The row
        positions of careless respondents are stored in
        ``df.attrs["careless_rows"]``.
    """
    rng = np.random.default_rng(seed)
    n = config.n_respondents

    midpoint = (1 + config.n_levels) / 2
    half_range = (config.n_levels - 1) / 2

    traits = rng.normal(0.0, 1.0, size=(n, config.n_factors))
    item_traits = np.repeat(traits, config.items_per_factor, axis=1)
    raw = (
        midpoint
        + half_range * config.trait_loading * item_traits
        + rng.normal(0.0, config.item_noise, size=(n, config.n_items))
    )
    responses = np.clip(np.rint(raw), 1, config.n_levels)

    n_careless = int(round(n * config.careless_fraction))
    careless_rows = np.sort(rng.choice(n, size=n_careless, replace=False))
    responses[careless_rows] = rng.integers(
        1, config.n_levels + 1, size=(n_careless, config.n_items),
    )

    if config.missing_rate > 0:
        responses[rng.random(responses.shape) < config.missing_rate] = np.nan

    df = pd.DataFrame(responses, columns=item_columns(config))
    df.attrs["careless_rows"] = careless_rows.tolist()

    logger.debug(
        "Simulated %d respondents × %d items (%d careless, missing_rate=%.3f)",
        n,
        config.n_items,
        n_careless,
        config.missing_rate,
    )
    return df


@dataclass(frozen=True)
class SimulatedResponseSource:
    """ResponseSource backed by ``simulate_careless_dataset``."""

    config: SimulationConfig = DEFAULT_SIMULATION
    seed: int = 42

    @property
    def factors(self) -> list[int]:
        return factor_lengths(self.config)

    def load_responses(self) -> pd.DataFrame:
        return simulate_careless_dataset(self.config, seed=self.seed)
