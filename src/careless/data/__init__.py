"""
Project: Careless
File Name: data/__init__.py
Description:
    Data providers: CSV loading and simulated surveys.
"""

from careless.data.loaders import CsvResponseSource, load_responses
from careless.data.simulate import (
    DEFAULT_SIMULATION,
    SimulatedResponseSource,
    SimulationConfig,
    factor_lengths,
    simulate_careless_dataset,
)

__all__ = [
    "DEFAULT_SIMULATION",
    "CsvResponseSource",
    "SimulatedResponseSource",
    "SimulationConfig",
    "factor_lengths",
    "load_responses",
    "simulate_careless_dataset",
]
