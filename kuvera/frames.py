"""Tabular views of Kuvera responses as polars DataFrames."""

from __future__ import annotations

import polars as pl

from .models import HoldingsResponse, PortfolioResponse

HOLDINGS_SCHEMA = {
    "fund_code": pl.Utf8,
    "folio_number": pl.Utf8,
    "units": pl.Float64,
    "allotted_amount": pl.Float64,
    "lock_free_units": pl.Float64,
    "kuvera_category": pl.Utf8,
    "direct": pl.Boolean,
    "is_sip": pl.Boolean,
    "order_count": pl.Int64,
    "sip_amount": pl.Float64,
    "sip_frequency": pl.Utf8,
}

ASSET_CLASSES = ["mutual_funds", "gold", "indian_equities", "fixed_deposit"]


def holdings_to_frame(holdings: HoldingsResponse) -> pl.DataFrame:
    """Flatten holdings into one row per (fund code, folio).

    SIP columns describe the first SIP attached to the holding and are null
    when there is none.

    Examples:
        >>> df = holdings_to_frame(client.get_holdings())
        >>> df.group_by("kuvera_category").agg(pl.col("allotted_amount").sum())
    """
    rows = []
    for fund_code, holding in holdings.iter_holdings():
        sip = holding.sips[0] if holding.sips else None
        rows.append(
            {
                "fund_code": fund_code,
                "folio_number": holding.folio_number,
                "units": holding.units,
                "allotted_amount": holding.allotted_amount,
                "lock_free_units": holding.lock_free_units,
                "kuvera_category": holding.kuvera_category,
                "direct": holding.direct,
                "is_sip": holding.is_sip,
                "order_count": len(holding.order_details),
                "sip_amount": sip.amount if sip else None,
                "sip_frequency": sip.frequency if sip else None,
            }
        )
    return pl.DataFrame(rows, schema=HOLDINGS_SCHEMA)


def asset_breakdown_frame(portfolio: PortfolioResponse) -> pl.DataFrame:
    """One row per asset class with its current value and one-day change."""
    data = portfolio.data
    rows = []
    for asset_class in ASSET_CLASSES:
        record = getattr(data, asset_class)
        rows.append(
            {
                "asset_class": asset_class,
                "current_value": record.current_value,
                "one_day_change": record.one_day_change,
            }
        )
    return pl.DataFrame(
        rows,
        schema={"asset_class": pl.Utf8, "current_value": pl.Float64, "one_day_change": pl.Float64},
    )
