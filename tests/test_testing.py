from __future__ import annotations

import pytest

from kuvera.errors import (
    EmptyPasswordError,
    EmptyUsernameError,
    InvalidCredentialsError,
    NotAuthenticatedError,
)
from kuvera.models import GoldPriceResponse, HoldingsResponse
from kuvera.protocols import KuveraAPI
from kuvera.testing import FakeKuveraClient


def total_gold_value(api: KuveraAPI, grams: float) -> float:
    return api.get_gold_price().current_gold_price.sell * grams


class TestFakeKuveraClient:
    def test_satisfies_protocol(self):
        assert isinstance(FakeKuveraClient(), KuveraAPI)

    def test_requires_login(self):
        fake = FakeKuveraClient()

        with pytest.raises(NotAuthenticatedError):
            fake.get_holdings()
        assert fake.calls == []

    def test_validation(self):
        fake = FakeKuveraClient()

        with pytest.raises(EmptyUsernameError):
            fake.login(" ", "pw")
        with pytest.raises(EmptyPasswordError):
            fake.login("a@b.com", "")

    def test_wrong_password(self):
        fake = FakeKuveraClient()

        with pytest.raises(InvalidCredentialsError) as excinfo:
            fake.login("demo@example.com", "nope")
        assert excinfo.value.response.status == "error"
        assert fake.is_authenticated is False

    def test_login_then_canned_records(self, sample_gold_price_data, sample_holdings_data):
        fake = FakeKuveraClient(
            gold_price=GoldPriceResponse.model_validate(sample_gold_price_data),
            holdings=HoldingsResponse.model_validate(sample_holdings_data),
        )

        res = fake.login("demo@example.com", "demopassword")

        assert res.succeeded
        assert res.token == "fake-token"
        assert total_gold_value(fake, 2.0) == pytest.approx(14203.8)
        assert len(fake.get_holdings()) == 2
        assert [name for name, _ in fake.calls] == ["login", "get_gold_price", "get_holdings"]
