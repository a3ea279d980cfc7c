"""
Project: Careless
File Name: core/__init__.py
Description:
    Shared data models and protocols.
"""

from careless.core.models import EvenOddResult, FactorSpan, ScoreRecord
from careless.core.types import FactorLengths, ResponseMatrix, ResponseSource

__all__ = [
    "EvenOddResult",
    "FactorLengths",
    "FactorSpan",
    "ResponseMatrix",
    "ResponseSource",
    "ScoreRecord",
]
