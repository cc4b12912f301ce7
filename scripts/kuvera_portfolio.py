#!/usr/bin/env python
from __future__ import annotations

import argparse

from kuvera.client import KuveraClient
from kuvera.frames import asset_breakdown_frame


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Fetch portfolio returns (/api/v5/portfolio/returns.json)"
    )
    parser.add_argument("--json", action="store_true", help="Print the raw record as JSON")
    args = parser.parse_args()

    client = KuveraClient.from_env()
    portfolio = client.get_portfolio()
    if args.json:
        print(portfolio.model_dump_json(by_alias=True, indent=2))
        return 0

    data = portfolio.data
    print(f"Total value:  ₹{data.current_value:,.2f}")
    print(f"Invested:     ₹{data.invested:,.2f}")
    print(f"Gain:         ₹{data.current_gain:,.2f} ({data.current_gain_percent:.2f}%)")
    print(f"One day:      ₹{data.one_day_gain:,.2f} ({data.one_day_gain_percent:.2f}%)")
    print(f"Current XIRR: {data.current_xirr:.2f}%")
    print()
    print(asset_breakdown_frame(portfolio))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
