"""Unofficial read-only client for the Kuvera investment platform API.

This package provides:
- Login with email/password and bearer-token handling
- Typed records for portfolio returns, fund holdings and gold prices
- polars views over holdings and asset-class breakdowns
- A network-free fake client for tests

Note: Only read operations are supported; nothing here places orders.
"""

from .client import KuveraClient
from .errors import (
    APIError,
    ConfigError,
    EmptyPasswordError,
    EmptyUsernameError,
    InvalidCredentialsError,
    KuveraError,
    KuveraRequestError,
    MissingCredentialsError,
    NotAuthenticatedError,
    ResponseDecodeError,
    UnexpectedStatusError,
)
from .models import (
    GoldPriceResponse,
    Holding,
    HoldingsResponse,
    LoginRequest,
    LoginResponse,
    PortfolioResponse,
)
from .protocols import KuveraAPI

__all__ = [
    "KuveraClient",
    "KuveraAPI",
    "LoginRequest",
    "LoginResponse",
    "PortfolioResponse",
    "Holding",
    "HoldingsResponse",
    "GoldPriceResponse",
    "KuveraError",
    "ConfigError",
    "MissingCredentialsError",
    "EmptyUsernameError",
    "EmptyPasswordError",
    "NotAuthenticatedError",
    "InvalidCredentialsError",
    "KuveraRequestError",
    "ResponseDecodeError",
    "UnexpectedStatusError",
    "APIError",
]
