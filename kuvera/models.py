"""Pydantic models mirroring the JSON bodies of the Kuvera API.

Field names are the snake_case form of the JSON keys; where the API uses
camelCase the JSON key is the field alias, and ``model_dump(by_alias=True)``
reproduces the shape the API sent. A key that is missing or ``null`` leaves
the field at its zero value. A value of the wrong type raises
``pydantic.ValidationError``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator


class KuveraModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # The API sends null where a value is absent; treat it like a missing key.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------


class LoginRequest(KuveraModel):
    email: str = ""
    password: str = Field(default="", repr=False)
    v: str = ""


class LoginResponse(KuveraModel):
    """Body of ``POST /api/v5/users/authenticate.json``.

    ``status`` is ``"success"`` on a good login; ``token`` is the bearer
    credential for the other endpoints and ``error`` explains a failure.
    """

    status: str = ""
    name: str = ""
    email: str = ""
    profile: Any = None
    new_user: bool = False
    token: str = Field(default="", repr=False)
    error: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == "success" and not self.error


# ---------------------------------------------------------------------------
# Portfolio returns
# ---------------------------------------------------------------------------


class GoldKuveraData(KuveraModel):
    quantity: float = 0.0
    one_day_change: float = 0.0
    invested_value: float = 0.0
    current_value: float = 0.0
    profit_amount: float = 0.0
    xirr: str = ""


class GoldImportedData(KuveraModel):
    quantity: float = 0.0
    one_day_change: float = 0.0
    invested_value: float = 0.0
    current_value: float = 0.0
    profit_amount: float = 0.0
    xirr: float = 0.0


class GoldData(KuveraModel):
    one_day_change: float = 0.0
    current_value: float = 0.0
    total_invested: float = 0.0
    xirr: str = ""
    total_gold_quantity: float = 0.0
    kuvera: GoldKuveraData = Field(default_factory=GoldKuveraData)
    imported: GoldImportedData = Field(default_factory=GoldImportedData)


class IndianEquitiesData(KuveraModel):
    one_day_change: float = 0.0
    current_value: float = 0.0
    total_invested: float = 0.0
    one_day_change_percentage: float = 0.0


class MutualFundsData(KuveraModel):
    one_day_change: float = 0.0
    current_value: float = 0.0
    total_invested: float = 0.0
    xirr_percentage: float = 0.0
    absolute_percentage: float = 0.0


class FDDetails(KuveraModel):
    account_id: int = 0
    # The API sends the invested amount of an FD as a string.
    invested: str = ""
    current_value: float = 0.0
    one_day_change: float = 0.0
    kuvera_code: str = ""
    partner_friendly_id: str = ""


class FixedDepositData(KuveraModel):
    current_value: float = 0.0
    total_invested: str = ""
    one_day_change: float = 0.0
    xirr: float = 0.0
    current_xirr: float = 0.0
    interest: Any = None
    fd_details: list[FDDetails] = Field(default_factory=list)


class PortfolioData(KuveraModel):
    current_value: float = 0.0
    current_gain: float = 0.0
    current_value_assets: float = 0.0
    current_gain_percent: float = 0.0
    one_day_gain: float = 0.0
    one_day_gain_percent: float = 0.0
    invested: float = 0.0
    invested_value_assets: float = 0.0
    current_xirr: float = 0.0
    alltime_xirr: float = 0.0
    alltime_return: float = 0.0
    alltime_abs_percentage: float = 0.0
    alltime_abs_return: float = 0.0
    us_equities: dict[str, Any] = Field(default_factory=dict)
    epf: dict[str, Any] = Field(default_factory=dict)
    gold: GoldData = Field(default_factory=GoldData)
    indian_equities: IndianEquitiesData = Field(default_factory=IndianEquitiesData)
    mutual_funds: MutualFundsData = Field(default_factory=MutualFundsData)
    save_smarts: dict[str, Any] = Field(default_factory=dict)
    fixed_deposit: FixedDepositData = Field(default_factory=FixedDepositData)


class PortfolioResponse(KuveraModel):
    """Body of ``GET /api/v5/portfolio/returns.json``."""

    status: str = ""
    data: PortfolioData = Field(default_factory=PortfolioData)


# ---------------------------------------------------------------------------
# Holdings
# ---------------------------------------------------------------------------


class OrderDetail(KuveraModel):
    amount: float = 0.0
    reinvest_amount: Any = None
    nav: float = 0.0
    units: float = 0.0
    order_date: str = ""


class SIPDetail(KuveraModel):
    """A systematic investment plan attached to a holding."""

    id: int = 0
    portfolio_id: int = 0
    amc_amfi_code_to: str = ""
    amc_amfi_code_from: Any = None
    folio_no: str = ""
    amount: float = 0.0
    type: str = ""
    frequency: str = ""
    start_date: str = ""
    end_date: Any = None
    isin: str = ""
    is_user_added: Any = Field(default=None, alias="isUserAdded")
    no_of_installments: int = 0
    updated_at: str = ""
    state: str = ""
    portfolio_code: str = ""
    bse_message: str = ""
    email_status: Any = None
    txn_ref_no: str = ""
    internal_ref_no: str = ""
    order_trigger_date: str = ""
    order_payment_status: Any = None
    mandate_id: str = ""
    sip_type: str = ""
    created_at: str = ""
    bse_sip_reg_no: str = ""
    bse_order_no: str = ""
    fund_house: str = ""
    lumpsum_type: Any = None
    sip_first_order_flag: str = Field(default="", alias="sip_firstorderflag")
    bse_placed_order_date: str = ""
    goal_id: Any = None
    units: Any = None
    all_units_flag: Any = None
    payment_gateway_id: Any = None
    lock_version: int = 0
    upsize_code: str = ""


class Holding(KuveraModel):
    folio_number: str = Field(default="", alias="folioNumber")
    allotted_amount: float = Field(default=0.0, alias="allottedAmount")
    lock_free_units: float = 0.0
    units: float = 0.0
    xirr_dates: list[str] = Field(default_factory=list)
    xirr_values: list[float] = Field(default_factory=list)
    is_sip: bool = Field(default=False, alias="isSip")
    kuvera_category: str = ""
    direct: bool = False
    order_details: list[OrderDetail] = Field(default_factory=list)
    reason: Any = None
    valid_flag: str = ""
    source: str = ""
    sips: list[SIPDetail] = Field(default_factory=list)


class HoldingsResponse(RootModel[dict[str, list[Holding]]]):
    """Body of ``GET /api/v3/portfolio/holdings.json``.

    A mapping of fund code to the holdings in that fund, in the order the API
    returned them. Behaves like a read-only dict of fund code to holdings.
    """

    root: dict[str, list[Holding]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def null_lists_to_empty(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {code: [] if holdings is None else holdings for code, holdings in data.items()}
        return data

    def __iter__(self):
        return iter(self.root)

    def __getitem__(self, fund_code: str) -> list[Holding]:
        return self.root[fund_code]

    def __len__(self) -> int:
        return len(self.root)

    def items(self):
        return self.root.items()

    def iter_holdings(self):
        """Yield ``(fund_code, holding)`` pairs."""
        for fund_code, holdings in self.root.items():
            for holding in holdings:
                yield fund_code, holding

    @property
    def total_allotted_amount(self) -> float:
        return sum(h.allotted_amount for _, h in self.iter_holdings())


# ---------------------------------------------------------------------------
# Gold price
# ---------------------------------------------------------------------------


class GoldTaxes(KuveraModel):
    cgst: float = 0.0
    sgst: float = 0.0
    igst: float = 0.0


class CurrentGoldPrice(KuveraModel):
    buy: float = 0.0
    sell: float = 0.0


class GoldPriceResponse(KuveraModel):
    """Body of ``GET /api/v3/gold/current_price.json``; prices are INR per gram."""

    taxes: GoldTaxes = Field(default_factory=GoldTaxes)
    block_id: str = ""
    fetched_at: str = ""
    current_gold_price: CurrentGoldPrice = Field(default_factory=CurrentGoldPrice)
