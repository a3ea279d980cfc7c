"""
Project: Careless
File Name: stats/__init__.py
Description:
    Statistics primitives with explicit missing-value semantics.
"""

from careless.stats.correlation import pairwise_pearson, spearman_brown

__all__ = ["pairwise_pearson", "spearman_brown"]
