# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from leasedesk.billing import generate_invoice, record_payment
from leasedesk.reporting import (
    InvoiceRegisterReport,
    RentRollReport,
    TenantBalanceReport,
)


@pytest.fixture
def billed(active_lease, portfolio):
    """One paid and one partly paid invoice on the active lease."""
    store = portfolio.store
    paid = generate_invoice(store, active_lease.id, date(2025, 1, 1))
    record_payment(store, paid.id, 10000)
    open_ = generate_invoice(store, active_lease.id, date(2025, 1, 31))
    open_.apply_late_fee(10)
    record_payment(store, open_.id, 2500)
    return paid, open_


def test_reports_require_a_store():
    with pytest.raises(TypeError, match="LeaseDeskStore"):
        RentRollReport(object())


@pytest.mark.parametrize(
    "report_cls", [RentRollReport, InvoiceRegisterReport, TenantBalanceReport]
)
def test_empty_store_yields_empty_frames(store, report_cls):
    report = report_cls(store)
    df = report.generate()
    assert isinstance(df, pd.DataFrame)
    assert df.empty
    assert list(df.columns) == report_cls.columns
    assert report.to_text() == "(no rows)"


def test_rent_roll(active_lease, portfolio):
    df = RentRollReport(portfolio.store).generate()
    assert list(df["Unit"]) == ["1A", "1B"]
    assert list(df["Occupied"]) == [True, False]

    occupied = df.iloc[0]
    assert occupied["Lease"] == active_lease.id
    assert occupied["Tenant"] == "Ava Thompson"
    assert occupied["Lease Rent"] == 10000
    assert occupied["Lease End"] == date(2025, 12, 31)

    vacant = df.iloc[1]
    assert pd.isna(vacant["Lease"])
    assert pd.isna(vacant["Tenant"])


def test_invoice_register(billed, portfolio):
    paid, open_ = billed
    df = InvoiceRegisterReport(portfolio.store).generate()
    assert list(df["Invoice"]) == [paid.id, open_.id]
    assert list(df["Status"]) == ["Paid", "Unpaid"]

    row = df.set_index("Invoice").loc[open_.id]
    assert row["Penalty"] == pytest.approx(1000)
    assert row["Total"] == pytest.approx(11000)
    assert row["Paid"] == pytest.approx(2500)
    assert row["Balance"] == pytest.approx(8500)

    unpaid = InvoiceRegisterReport(portfolio.store, unpaid_only=True).generate()
    assert list(unpaid["Invoice"]) == [open_.id]


def test_tenant_balances(billed, portfolio):
    df = TenantBalanceReport(portfolio.store).generate().set_index("Tenant")
    ava = df.loc[portfolio.ava.id]
    assert ava["Invoiced"] == pytest.approx(21000)
    assert ava["Paid"] == pytest.approx(12500)
    assert ava["Outstanding"] == pytest.approx(8500)
    assert ava["Open Invoices"] == 1

    ben = df.loc[portfolio.ben.id]
    assert ben["Invoiced"] == 0
    assert ben["Open Invoices"] == 0


def test_to_text_renders_rows(billed, portfolio):
    text = InvoiceRegisterReport(portfolio.store).to_text()
    assert "Ava Thompson" in text
    assert "11,000.00" in text
