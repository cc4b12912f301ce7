#!/usr/bin/env python
from __future__ import annotations

import argparse

from kuvera.client import KuveraClient


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Fetch the current gold price (/api/v3/gold/current_price.json)"
    )
    parser.parse_args()

    client = KuveraClient.from_env()
    price = client.get_gold_price()
    print(price.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
