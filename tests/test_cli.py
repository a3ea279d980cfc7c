"""
Project: Careless
File Name: tests/test_cli.py
Description:
    Tests for the careless-evenodd command line entry point.
"""

import pandas as pd

from careless.cli import main
from careless.data.simulate import SimulationConfig, simulate_careless_dataset


def _write_survey(tmp_path):
    df = simulate_careless_dataset(SimulationConfig(n_respondents=30, n_factors=4))
    df.insert(0, "id", [f"r{i}" for i in range(len(df))])
    path = tmp_path / "survey.csv"
    df.to_csv(path, index=False)
    return path


class TestCli:
    def test_writes_output_file(self, tmp_path):
        path = _write_survey(tmp_path)
        out = tmp_path / "scores.csv"
        code = main([str(path), "--factors", "5", "5", "5", "5", "--id-column", "id", "-o", str(out)])

        assert code == 0
        table = pd.read_csv(out, index_col="id")
        assert len(table) == 30
        assert list(table.columns) == ["score", "valid_pairs"]
        assert (table["valid_pairs"] == 4).all()

    def test_writes_stdout(self, tmp_path, capsys):
        path = _write_survey(tmp_path)
        code = main([str(path), "--factors", "5", "5", "5", "5", "--id-column", "id", "--threshold", "0.3"])

        assert code == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "id,score,valid_pairs"
        assert len(lines) == 31

    def test_factor_mismatch_fails(self, tmp_path, capsys):
        path = _write_survey(tmp_path)
        code = main([str(path), "--factors", "5", "5", "--id-column", "id"])

        assert code == 1
        assert "ERROR" in capsys.readouterr().err

    def test_missing_file_fails(self, tmp_path):
        assert main([str(tmp_path / "missing.csv"), "--factors", "5"]) == 1
