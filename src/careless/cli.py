"""
Project: Careless
File Name: cli.py
Description:
    Even-odd consistency scoring, CLI entry point.

    Reads a CSV of survey responses, scores every respondent and writes a
    ``score`` / ``valid_pairs`` table.

Usage:
    careless-evenodd responses.csv --factors 5 5 5 5
    careless-evenodd responses.csv --factors 5 5 --id-column id --output eo.csv
    careless-evenodd responses.csv --factors 5 5 --threshold 0.3 --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from careless.data.loaders import load_responses
from careless.scoring.evenodd import evenodd

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="careless-evenodd",
        description="Compute the even-odd consistency index for each respondent.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", help="CSV file, one row per respondent")
    parser.add_argument(
        "--factors", type=int, nargs="+", required=True,
        help="Number of items in each factor, in column order",
    )
    parser.add_argument(
        "--columns", nargs="+", default=None,
        help="Item columns to score (default: all except --id-column)",
    )
    parser.add_argument("--id-column", default=None, help="Column holding respondent ids")
    parser.add_argument("--output", "-o", default=None, help="Output CSV (default: stdout)")
    parser.add_argument(
        "--threshold", type=float, default=None,
        help="Report respondents scoring below this value",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        responses = load_responses(args.path, columns=args.columns, id_column=args.id_column)
        result = evenodd(responses, args.factors, diag=True)
    except (FileNotFoundError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    table = result.to_df()
    if args.output:
        table.to_csv(args.output, index_label=args.id_column or "row")
        logger.info("Wrote %d scores to %s", len(table), args.output)
    else:
        table.to_csv(sys.stdout, index_label=args.id_column or "row")

    if args.threshold is not None:
        flagged = table.index[table["score"] < args.threshold]
        logger.info(
            "%d of %d respondents score below %s (%d could not be scored)",
            len(flagged),
            len(table),
            args.threshold,
            int(table["score"].isna().sum()),
        )
        for row_id in flagged:
            logger.debug("  flagged: %s", row_id)

    return 0


if __name__ == "__main__":
    sys.exit(main())
