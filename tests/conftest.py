from __future__ import annotations

import json
import os
from unittest.mock import Mock

import pytest
import requests


def make_response(status_code: int = 200, payload=None, text: str | None = None) -> Mock:
    """Build a Mock standing in for requests.Response."""
    res = Mock(spec=requests.Response)
    res.status_code = status_code
    body = text if text is not None else json.dumps(payload)
    res.content = body.encode("utf-8")
    return res


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment fixture to isolate tests."""
    env_keys = [
        "KUVERA_USERNAME",
        "KUVERA_PASSWORD",
        "KUVERA_API_URL",
        "KUVERA_TIMEOUT",
        "KUVERA_USER_AGENT",
    ]
    for key in env_keys:
        # setenv first so monkeypatch also undoes values a .env load adds later
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    yield os.environ


@pytest.fixture
def mock_session():
    return Mock(spec=requests.Session)


@pytest.fixture
def sample_login_success():
    """Login body matching the Kuvera authenticate endpoint."""
    return {
        "status": "success",
        "name": "Asha Rao",
        "email": "a@b.com",
        "profile": {"pan_verified": True, "kyc_status": "verified"},
        "new_user": False,
        "token": "eyJhbGciOiJIUzI1NiJ9.payload.signature",
    }


@pytest.fixture
def sample_login_failure():
    return {"status": "error", "error": "Invalid email or password"}


@pytest.fixture
def sample_portfolio_data():
    """Portfolio returns body matching the Kuvera API structure."""
    return {
        "status": "success",
        "data": {
            "current_value": 254312.75,
            "current_gain": 34312.75,
            "current_value_assets": 254312.75,
            "current_gain_percent": 15.6,
            "one_day_gain": -812.4,
            "one_day_gain_percent": -0.32,
            "invested": 220000.0,
            "invested_value_assets": 220000.0,
            "current_xirr": 12.81,
            "alltime_xirr": 11.95,
            "alltime_return": 41250.5,
            "alltime_abs_percentage": 18.75,
            "alltime_abs_return": 41250.5,
            "us_equities": {},
            "epf": {},
            "gold": {
                "one_day_change": 42.1,
                "current_value": 18250.0,
                "total_invested": 15000.0,
                "xirr": "14.2",
                "total_gold_quantity": 2.5,
                "kuvera": {
                    "quantity": 2.5,
                    "one_day_change": 42.1,
                    "invested_value": 15000.0,
                    "current_value": 18250.0,
                    "profit_amount": 3250.0,
                    "xirr": "14.2",
                },
                "imported": {
                    "quantity": 0.0,
                    "one_day_change": 0.0,
                    "invested_value": 0.0,
                    "current_value": 0.0,
                    "profit_amount": 0.0,
                    "xirr": 0.0,
                },
            },
            "indian_equities": {
                "one_day_change": -120.0,
                "current_value": 30000.0,
                "total_invested": 28000.0,
                "one_day_change_percentage": -0.4,
            },
            "mutual_funds": {
                "one_day_change": -734.5,
                "current_value": 196062.75,
                "total_invested": 167000.0,
                "xirr_percentage": 12.4,
                "absolute_percentage": 17.4,
            },
            "save_smarts": {},
            "fixed_deposit": {
                "current_value": 10000.0,
                "total_invested": "10000",
                "one_day_change": 0.0,
                "xirr": 7.1,
                "current_xirr": 7.1,
                "interest": None,
                "fd_details": [
                    {
                        "account_id": 981,
                        "invested": "10000",
                        "current_value": 10000.0,
                        "one_day_change": 0.0,
                        "kuvera_code": "BAJAJ-FD",
                        "partner_friendly_id": "FD-0001",
                    }
                ],
            },
        },
    }


@pytest.fixture
def sample_holdings_data():
    """Holdings body: fund code -> list of holdings."""
    return {
        "LFAG-GR": [
            {
                "folioNumber": "91012345678",
                "allottedAmount": 60000.123456789,
                "lock_free_units": 512.345,
                "units": 1024.6789012345,
                "xirr_dates": ["2023-01-05", "2023-02-05"],
                "xirr_values": [-5000.0, -5000.0],
                "isSip": True,
                "kuvera_category": "Equity",
                "direct": True,
                "order_details": [
                    {
                        "amount": 5000.0,
                        "reinvest_amount": None,
                        "nav": 48.79,
                        "units": 102.479,
                        "order_date": "2023-01-05",
                    }
                ],
                "reason": None,
                "valid_flag": "Y",
                "source": "kuvera",
                "sips": [
                    {
                        "id": 4411,
                        "portfolio_id": 77,
                        "amc_amfi_code_to": "LFAG-GR",
                        "amc_amfi_code_from": None,
                        "folio_no": "91012345678",
                        "amount": 5000.0,
                        "type": "sip",
                        "frequency": "Monthly",
                        "start_date": "2023-01-05",
                        "end_date": None,
                        "isin": "INF846K01DP8",
                        "isUserAdded": None,
                        "no_of_installments": 120,
                        "state": "active",
                        "sip_firstorderflag": "Y",
                        "lock_version": 3,
                    }
                ],
            }
        ],
        "PPFAS-DG": [
            {
                "folioNumber": "12398765",
                "allottedAmount": 25000.5,
                "lock_free_units": 0.0,
                "units": 400.1234567891,
                "xirr_dates": [],
                "xirr_values": [],
                "isSip": False,
                "kuvera_category": "Equity",
                "direct": True,
                "order_details": [],
                "reason": None,
                "valid_flag": "Y",
                "source": "imported",
            },
            {
                "folioNumber": "12398766",
                "allottedAmount": 1000.0,
                "lock_free_units": 10.0,
                "units": 15.5,
                "isSip": False,
                "kuvera_category": "Equity",
                "direct": False,
                "order_details": [],
            },
        ],
    }


@pytest.fixture
def sample_gold_price_data():
    return {
        "taxes": {"cgst": 1.5, "sgst": 1.5, "igst": 3.0},
        "block_id": "blk_20261018_1",
        "fetched_at": "2026-10-18T09:30:00Z",
        "current_gold_price": {"buy": 7312.44, "sell": 7101.9},
    }
