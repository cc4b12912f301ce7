"""Capability contract shared by the real client and its test double."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import GoldPriceResponse, HoldingsResponse, LoginResponse, PortfolioResponse


@runtime_checkable
class KuveraAPI(Protocol):
    """The read-only Kuvera operations."""

    def login(
        self, username: str, password: str, timeout: float | None = None
    ) -> LoginResponse: ...
    def get_portfolio(self, timeout: float | None = None) -> PortfolioResponse: ...
    def get_holdings(self, timeout: float | None = None) -> HoldingsResponse: ...
    def get_gold_price(self, timeout: float | None = None) -> GoldPriceResponse: ...
