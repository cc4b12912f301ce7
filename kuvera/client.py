from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from .auth import (
    API_URL,
    API_VERSION,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    GOLD_PRICE_PARAMS,
    GOLD_PRICE_PATH,
    HOLDINGS_PATH,
    LOGIN_PATH,
    PORTFOLIO_PATH,
    build_auth_headers,
    build_browser_headers,
    load_credentials,
)
from .errors import (
    APIError,
    ConfigError,
    EmptyPasswordError,
    EmptyUsernameError,
    InvalidCredentialsError,
    KuveraRequestError,
    NotAuthenticatedError,
    ResponseDecodeError,
    UnexpectedStatusError,
)
from .models import GoldPriceResponse, HoldingsResponse, LoginRequest, LoginResponse, PortfolioResponse
from .utils.env import load_env_file_if_present

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _join_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _timeout_from_env(key: str = "KUVERA_TIMEOUT") -> float:
    value = os.getenv(key)
    if not value:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError as e:
        raise ConfigError(f"{key} must be a number of seconds, got {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"{key} must be positive, got {value!r}")
    return timeout


@dataclass
class KuveraClient:
    """Read-only client for the Kuvera web API.

    The client starts unauthenticated. A successful :meth:`login` stores the
    bearer token, which every later call sends; there is no logout. Token
    reads and writes are not synchronized, so share one instance across
    threads only behind your own lock.

    Examples:
        >>> client = KuveraClient()
        >>> client.login("user@example.com", "secret")
        >>> client.get_portfolio().data.current_value
    """

    base_url: str = API_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    session: requests.Session | None = field(default=None, repr=False)
    access_token: str = field(default="", repr=False)
    session_id: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()

    @classmethod
    def from_env(cls, login: bool = True, dotenv: bool = True) -> KuveraClient:
        """Build a client from KUVERA_* environment variables (or .env).

        Reads KUVERA_API_URL, KUVERA_TIMEOUT and KUVERA_USER_AGENT; when
        `login` is set, also logs in with KUVERA_USERNAME/KUVERA_PASSWORD.
        """
        if dotenv:
            load_env_file_if_present()
        client = cls(
            base_url=os.getenv("KUVERA_API_URL") or API_URL,
            timeout=_timeout_from_env(),
            user_agent=os.getenv("KUVERA_USER_AGENT") or DEFAULT_USER_AGENT,
        )
        if login:
            username, password = load_credentials(dotenv=False)
            client.login(username, password)
        return client

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    def _require_auth(self) -> None:
        if not self.access_token:
            raise NotAuthenticatedError()

    def _request(
        self,
        method: str,
        path: str,
        operation: str,
        payload: Any | None = None,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> requests.Response:
        url = _join_url(self.base_url, path)
        body = json.dumps(payload) if payload is not None else None
        headers = build_browser_headers(self.user_agent, has_body=body is not None)
        headers.update(build_auth_headers(self.access_token, self.session_id))

        logger.debug(f"{method} {url} ({operation})")
        try:
            return self.session.request(
                method,
                url,
                params=params,
                data=body,
                headers=headers,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except requests.RequestException as e:
            raise KuveraRequestError(f"{operation} request failed: {e}") from e

    def _handle_response(
        self, res: requests.Response, model: type[ModelT], operation: str
    ) -> ModelT:
        """Decode a response body into `model`, then map a non-200 status to an error.

        The decoded record is attached to any error raised after decoding so
        callers can still see the partial body.
        """
        raw = res.content or b""
        text = raw.decode("utf-8", errors="replace")
        try:
            payload = json.loads(raw)
        except ValueError as e:
            raise ResponseDecodeError(f"failed to parse {operation} response", text) from e

        try:
            result = model.model_validate(payload)
        except ValidationError as e:
            result = None
            if res.status_code == 200:
                raise ResponseDecodeError(f"failed to decode {operation} response", text) from e

        if res.status_code != 200:
            api_error = APIError.from_payload(payload, status_code=res.status_code, response=result)
            if api_error is not None:
                logger.warning(f"{operation} returned {api_error}")
                raise api_error
            logger.warning(f"{operation} returned HTTP {res.status_code}")
            raise UnexpectedStatusError(operation, res.status_code, response=result)

        return result

    def login(self, username: str, password: str, timeout: float | None = None) -> LoginResponse:
        """Authenticate and keep the returned token for later calls.

        Raises:
            EmptyUsernameError / EmptyPasswordError: blank input, nothing sent.
            InvalidCredentialsError: the body does not report success; the
                decoded body is available as ``error.response``.
            KuveraRequestError, APIError, UnexpectedStatusError,
            ResponseDecodeError: see :mod:`kuvera.errors`.
        """
        if not username or not username.strip():
            raise EmptyUsernameError()
        if not password or not password.strip():
            raise EmptyPasswordError()

        request = LoginRequest(email=username, password=password, v=API_VERSION)
        res = self._request(
            "POST", LOGIN_PATH, "login", payload=request.model_dump(), timeout=timeout
        )

        # Non-200 responses raise here with their own error type.
        login_res = self._handle_response(res, LoginResponse, "login")

        if not login_res.succeeded:
            logger.warning(f"Login rejected for {username}: {login_res.error or login_res.status}")
            raise InvalidCredentialsError(response=login_res)

        self.access_token = login_res.token
        logger.info(f"Logged in to Kuvera as {login_res.email or username}")
        return login_res

    def get_portfolio(self, timeout: float | None = None) -> PortfolioResponse:
        """Portfolio totals with a breakdown per asset class."""
        self._require_auth()
        res = self._request("GET", PORTFOLIO_PATH, "portfolio", timeout=timeout)
        return self._handle_response(res, PortfolioResponse, "portfolio")

    def get_holdings(self, timeout: float | None = None) -> HoldingsResponse:
        """Mutual fund holdings keyed by fund code."""
        self._require_auth()
        res = self._request("GET", HOLDINGS_PATH, "holdings", timeout=timeout)
        return self._handle_response(res, HoldingsResponse, "holdings")

    def get_gold_price(self, timeout: float | None = None) -> GoldPriceResponse:
        """Current gold buy/sell price per gram and the applicable taxes."""
        self._require_auth()
        res = self._request(
            "GET", GOLD_PRICE_PATH, "gold price", params=dict(GOLD_PRICE_PARAMS), timeout=timeout
        )
        return self._handle_response(res, GoldPriceResponse, "gold price")
