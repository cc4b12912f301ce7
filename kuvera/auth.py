from __future__ import annotations

import os

from kuvera.errors import MissingCredentialsError
from kuvera.utils.env import load_env_file_if_present

API_URL = "https://api.kuvera.in"
API_VERSION = "1.239.2"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:143.0) Gecko/20100101 Firefox/143.0"
)

WEB_ORIGIN = "https://kuvera.in"

LOGIN_PATH = "/api/v5/users/authenticate.json"
PORTFOLIO_PATH = "/api/v5/portfolio/returns.json"
HOLDINGS_PATH = "/api/v3/portfolio/holdings.json"
GOLD_PRICE_PATH = "/api/v3/gold/current_price.json"
GOLD_PRICE_PARAMS = {"v": API_VERSION, "cached": "true"}


def load_credentials(
    username_key: str = "KUVERA_USERNAME",
    password_key: str = "KUVERA_PASSWORD",
    dotenv: bool = True,
) -> tuple[str, str]:
    """Return the Kuvera (username, password) from environment or .env.

    Raises MissingCredentialsError naming the first missing key.
    """
    if dotenv:
        load_env_file_if_present()
    username = os.getenv(username_key)
    if not username:
        raise MissingCredentialsError(
            f"Missing username. Set {username_key} in environment or .env"
        )
    password = os.getenv(password_key)
    if not password:
        raise MissingCredentialsError(
            f"Missing password. Set {password_key} in environment or .env"
        )
    return username, password


def build_auth_headers(access_token: str, session_id: str = "") -> dict[str, str]:
    # The web app sends a bare "Bearer" before login.
    headers = {"Authorization": f"Bearer {access_token}" if access_token else "Bearer"}
    if session_id:
        headers["X-Session-ID"] = session_id
    return headers


def build_browser_headers(user_agent: str, has_body: bool = False) -> dict[str, str]:
    """Headers mimicking the kuvera.in web app.

    Accept-Encoding is left to requests so compressed bodies are decoded.
    """
    headers = {
        "User-Agent": user_agent,
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "en-US,en;q=0.5",
        "Origin": WEB_ORIGIN,
        "Referer": f"{WEB_ORIGIN}/",
        "Sec-Fetch-Dest": "empty",
        "Sec-Fetch-Mode": "cors",
        "Sec-Fetch-Site": "same-site",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }
    if has_body:
        headers["Content-Type"] = "application/json;charset=utf-8"
    return headers
