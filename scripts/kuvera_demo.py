#!/usr/bin/env python
"""Walk through every Kuvera API call: login, gold price, portfolio, holdings."""

from __future__ import annotations

import logging
from textwrap import dedent

from kuvera.auth import load_credentials
from kuvera.client import KuveraClient
from kuvera.errors import KuveraError, MissingCredentialsError
from kuvera.frames import asset_breakdown_frame, holdings_to_frame

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)


def print_header(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def main() -> int:
    print_header("KUVERA API DEMO")
    try:
        username, password = load_credentials()
    except MissingCredentialsError as exc:
        print(exc)
        print(
            dedent(
                """
                Set KUVERA_USERNAME and KUVERA_PASSWORD in the environment
                or in a .env file next to this script.
                """
            )
        )
        return 1

    client = KuveraClient.from_env(login=False, dotenv=False)

    print_header("LOGIN")
    try:
        login = client.login(username, password)
    except KuveraError as exc:
        print(f"Login failed: {exc}")
        if exc.response is not None and getattr(exc.response, "error", ""):
            print(f"Server said: {exc.response.error}")
        return 1
    print(f"Welcome {login.name} ({login.email})")

    # The remaining calls are independent; report each failure and carry on.
    print_header("GOLD PRICE")
    try:
        gold = client.get_gold_price()
        print(f"Buy:  ₹{gold.current_gold_price.buy:,.2f} per gram")
        print(f"Sell: ₹{gold.current_gold_price.sell:,.2f} per gram")
        print(
            f"Taxes - CGST: {gold.taxes.cgst:.1f}%, SGST: {gold.taxes.sgst:.1f}%, "
            f"IGST: {gold.taxes.igst:.1f}%"
        )
        print(f"Fetched at: {gold.fetched_at}")
    except KuveraError as exc:
        logging.error("Gold price request failed: %s", exc)

    print_header("PORTFOLIO")
    try:
        portfolio = client.get_portfolio()
        data = portfolio.data
        print(f"Total value: ₹{data.current_value:,.2f}")
        print(f"Overall gain: ₹{data.current_gain:,.2f} ({data.current_gain_percent:.2f}%)")
        print(f"One-day change: ₹{data.one_day_gain:,.2f} ({data.one_day_gain_percent:.2f}%)")
        print(f"Current XIRR: {data.current_xirr:.2f}%")
        print(f"Gold held: {data.gold.total_gold_quantity:.3f} g")
        print()
        print(asset_breakdown_frame(portfolio))
    except KuveraError as exc:
        logging.error("Portfolio request failed: %s", exc)

    print_header("HOLDINGS")
    try:
        holdings = client.get_holdings()
        print(f"Fund codes: {len(holdings)}")
        print(holdings_to_frame(holdings).head(10))
    except KuveraError as exc:
        logging.error("Holdings request failed: %s", exc)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
