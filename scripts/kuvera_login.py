#!/usr/bin/env python
from __future__ import annotations

import argparse
import json
import os

from kuvera.auth import load_credentials
from kuvera.client import KuveraClient
from kuvera.errors import MissingCredentialsError
from kuvera.utils.env import load_env_file_if_present


def resolve_credentials(args: argparse.Namespace, parser: argparse.ArgumentParser) -> tuple[str, str]:
    if not args.username:
        try:
            return load_credentials(dotenv=False)
        except MissingCredentialsError as e:
            parser.error(str(e))
    password = os.getenv("KUVERA_PASSWORD", "")
    if not password.strip():
        parser.error("KUVERA_PASSWORD must be set (environment or .env) when --username is given")
    return args.username, password


def main() -> int:
    parser = argparse.ArgumentParser(description="Log in to Kuvera and report the session")
    parser.add_argument(
        "--username",
        default=None,
        help="Login email (defaults to $KUVERA_USERNAME or .env)",
    )
    args = parser.parse_args()

    load_env_file_if_present()  # populate env if .env exists
    username, password = resolve_credentials(args, parser)

    client = KuveraClient.from_env(login=False, dotenv=False)
    res = client.login(username, password)
    print(
        json.dumps(
            {
                "ok": True,
                "name": res.name,
                "email": res.email,
                "token_prefix": res.token[:16] + "...",
                "len": len(res.token),
            }
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
