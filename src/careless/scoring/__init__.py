"""
Project: Careless
File Name: scoring/__init__.py
Description:
    Per-respondent careless-responding indices.
"""

from careless.scoring.evenodd import evenodd, factor_half_means, factor_spans

__all__ = ["evenodd", "factor_half_means", "factor_spans"]
