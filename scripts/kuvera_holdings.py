#!/usr/bin/env python
from __future__ import annotations

import argparse

import polars as pl

from kuvera.client import KuveraClient
from kuvera.frames import holdings_to_frame


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Fetch mutual fund holdings (/api/v3/portfolio/holdings.json)"
    )
    parser.add_argument("--fund", help="Fund code to show (optional)", default="")
    parser.add_argument("--limit", type=int, default=20, help="Rows to display")
    args = parser.parse_args()

    client = KuveraClient.from_env()
    holdings = client.get_holdings()
    df = holdings_to_frame(holdings)
    if args.fund:
        df = df.filter(pl.col("fund_code") == args.fund)

    with pl.Config(tbl_rows=args.limit or -1):
        print(df.head(args.limit) if args.limit else df)
    print(
        f"\n{df.height} holdings shown; "
        f"₹{holdings.total_allotted_amount:,.2f} allotted across {len(holdings)} funds"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
