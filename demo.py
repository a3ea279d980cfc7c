"""
Project: Careless
File Name: demo.py
Description:
    Score a simulated survey with planted careless respondents.

Usage:
    uv run python demo.py
"""

import numpy as np

from careless import SimulationConfig, evenodd, factor_lengths, simulate_careless_dataset


def main():
    config = SimulationConfig(n_respondents=200, missing_rate=0.02)
    df = simulate_careless_dataset(config, seed=7)
    careless_rows = set(df.attrs["careless_rows"])

    print(f"Respondents: {df.shape[0]}")
    print(f"Items: {df.shape[1]} ({config.n_factors} factors × {config.items_per_factor})")
    print(f"Planted careless respondents: {len(careless_rows)}\n")

    result = evenodd(df, factor_lengths(config), diag=True)
    table = result.to_df()
    table["careless"] = [i in careless_rows for i in range(len(table))]

    attentive = table.loc[~table["careless"], "score"]
    careless = table.loc[table["careless"], "score"]
    print(f"Mean score (attentive): {np.nanmean(attentive):.3f}")
    print(f"Mean score (careless):  {np.nanmean(careless):.3f}\n")

    print("=" * 50)
    print("LEAST CONSISTENT RESPONDENTS")
    print("=" * 50)
    for row, rec in table.sort_values("score").head(10).iterrows():
        marker = " <-- planted" if rec["careless"] else ""
        print(f"  #{row:>3}  score={rec['score']:+.3f}  pairs={int(rec['valid_pairs'])}{marker}")


if __name__ == "__main__":
    main()
