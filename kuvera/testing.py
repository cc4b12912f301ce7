"""In-memory stand-in for :class:`kuvera.client.KuveraClient`.

Useful for testing code that consumes the client without touching the
network. It applies the same input validation and authentication checks as
the real client and answers with canned records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import (
    EmptyPasswordError,
    EmptyUsernameError,
    InvalidCredentialsError,
    NotAuthenticatedError,
)
from .models import GoldPriceResponse, HoldingsResponse, LoginResponse, PortfolioResponse


@dataclass
class FakeKuveraClient:
    username: str = "demo@example.com"
    password: str = "demopassword"
    token: str = "fake-token"
    portfolio: PortfolioResponse = field(default_factory=PortfolioResponse)
    holdings: HoldingsResponse = field(default_factory=HoldingsResponse)
    gold_price: GoldPriceResponse = field(default_factory=GoldPriceResponse)
    access_token: str = ""
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    def login(self, username: str, password: str, timeout: float | None = None) -> LoginResponse:
        if not username or not username.strip():
            raise EmptyUsernameError()
        if not password or not password.strip():
            raise EmptyPasswordError()
        self.calls.append(("login", {"username": username}))

        if (username, password) != (self.username, self.password):
            raise InvalidCredentialsError(
                response=LoginResponse(status="error", error="Invalid email or password")
            )
        self.access_token = self.token
        return LoginResponse(status="success", email=username, token=self.token)

    def _privileged(self, operation: str) -> None:
        if not self.access_token:
            raise NotAuthenticatedError()
        self.calls.append((operation, {}))

    def get_portfolio(self, timeout: float | None = None) -> PortfolioResponse:
        self._privileged("get_portfolio")
        return self.portfolio

    def get_holdings(self, timeout: float | None = None) -> HoldingsResponse:
        self._privileged("get_holdings")
        return self.holdings

    def get_gold_price(self, timeout: float | None = None) -> GoldPriceResponse:
        self._privileged("get_gold_price")
        return self.gold_price
