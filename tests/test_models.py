"""
Project: Careless
File Name: tests/test_models.py
Description:
    Tests for the shared data models.
"""

import math

import numpy as np

from careless.core.models import EvenOddResult, FactorSpan, ScoreRecord


def _result() -> EvenOddResult:
    return EvenOddResult(
        records=(
            ScoreRecord(score=0.9, valid_pairs=10),
            ScoreRecord(score=math.nan, valid_pairs=1),
            ScoreRecord(score=-0.2, valid_pairs=8),
        ),
    )


class TestFactorSpan:
    def test_columns_by_position(self):
        span = FactorSpan(index=1, start=5, stop=10)
        cols = np.arange(12)
        assert span.length == 5
        assert list(cols[span.odd_columns]) == [5, 7, 9]
        assert list(cols[span.even_columns]) == [6, 8]

    def test_single_item_has_no_even_columns(self):
        span = FactorSpan(index=0, start=3, stop=4)
        assert list(np.arange(6)[span.even_columns]) == []


class TestEvenOddResult:
    def test_sequence_behaviour(self):
        result = _result()
        assert len(result) == 3
        assert result[0].valid_pairs == 10
        assert [r.valid_pairs for r in result] == [10, 1, 8]
        assert result[1].is_missing
        assert not result[2].is_missing

    def test_standard_sequence_methods(self):
        result = _result()
        assert result.index(result[0]) == 0
        assert result.index(result[2]) == 2
        assert result.count(result[1]) == 1
        assert result[0] in result
        assert list(reversed(result))[0] == result[2]

    def test_row_labels(self):
        labelled = EvenOddResult(records=_result().records, row_labels=("a", "b", "c"))
        assert list(labelled.to_df().index) == ["a", "b", "c"]
        assert labelled.index(labelled[1]) == 1

    def test_array_views(self):
        result = _result()
        np.testing.assert_array_equal(result.scores, [0.9, np.nan, -0.2])
        assert result.valid_pairs.dtype == np.int64

    def test_to_df_default_index(self):
        df = _result().to_df()
        assert list(df.columns) == ["score", "valid_pairs"]
        assert list(df.index) == [0, 1, 2]
        assert df["valid_pairs"].tolist() == [10, 1, 8]
