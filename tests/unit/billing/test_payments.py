# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pydantic
import pytest

from leasedesk import (
    ConflictError,
    LeaseDeskSettings,
    LeaseDeskStore,
    NotFoundError,
    ValidationError,
)
from leasedesk.billing import (
    CardPayment,
    CashPayment,
    PaymentAdapter,
    RentInvoice,
    apply_payment,
    generate_invoice,
    is_paid,
    new_payment,
    record_payment,
    unpaid_invoices,
)
from leasedesk.core import BillingSettings, PaymentMethodEnum
from leasedesk.leasing import activate_lease, create_lease
from leasedesk.registry import add_property, add_tenant, add_unit
from leasedesk.reporting import InvoiceRegisterReport, describe


@pytest.fixture
def invoice(active_lease, portfolio) -> RentInvoice:
    """An invoice for 10000 with a 1000 late fee: total 11000."""
    invoice = generate_invoice(portfolio.store, active_lease.id, date(2025, 1, 1))
    invoice.apply_late_fee(10)
    return invoice


@pytest.mark.parametrize(
    "amount, expected",
    [
        (11000, True),
        (10999.9999, True),
        (10999.99, False),
        (12000, True),
    ],
)
def test_paid_threshold_with_epsilon(invoice, portfolio, amount, expected):
    """Paid means payments >= total - 0.0001."""
    record_payment(portfolio.store, invoice.id, amount)
    assert invoice.paid is expected
    assert is_paid(portfolio.store, invoice.id) is expected


def test_partial_payments_accumulate(invoice, portfolio):
    """Partial payments leave the invoice unpaid until the sum reaches the total."""
    store = portfolio.store
    record_payment(store, invoice.id, 4000)
    assert not invoice.paid
    assert invoice.paid_amount == pytest.approx(4000)
    assert invoice.balance_due == pytest.approx(7000)

    record_payment(store, invoice.id, 7000, "Card", last4="4242")
    assert invoice.paid
    assert invoice.balance_due == 0


def test_zero_payment_never_changes_status(invoice, portfolio):
    store = portfolio.store
    record_payment(store, invoice.id, 0)
    assert not invoice.paid
    record_payment(store, invoice.id, 11000)
    record_payment(store, invoice.id, 0)
    assert invoice.paid


def test_overpayment_is_carried_not_refunded(invoice, portfolio):
    record_payment(portfolio.store, invoice.id, 20000)
    assert invoice.paid
    assert invoice.paid_amount == pytest.approx(20000)
    assert invoice.balance_due == 0


def test_late_fee_after_payment_can_reopen_invoice(invoice, portfolio):
    """Paid status is derived, so a larger penalty makes a paid invoice unpaid."""
    record_payment(portfolio.store, invoice.id, 11000)
    assert invoice.paid
    invoice.apply_late_fee(20)
    assert not invoice.paid


def test_new_payment_variants(store):
    cash = new_payment(store, 100)
    card = new_payment(store, 50, PaymentMethodEnum.CARD, last4="0005", paid_on=date(2025, 5, 1))
    assert isinstance(cash, CashPayment)
    assert isinstance(card, CardPayment)
    assert (cash.id, card.id) == (1, 2)
    assert card.last4 == "0005"
    assert card.paid_on == date(2025, 5, 1)
    assert "****0005" in str(card)
    # Building a payment does not register it
    assert store.payments == {}


def test_card_payment_requires_four_digits(store):
    with pytest.raises(ValidationError, match="last4"):
        new_payment(store, 100, "Card", last4="42")
    with pytest.raises(ValidationError, match="last4"):
        new_payment(store, 100, "Card")
    assert new_payment(store, 1).id == 1


def test_payment_rejects_negative_amount_and_unknown_method(store):
    with pytest.raises(ValidationError, match="amount"):
        new_payment(store, -1)
    with pytest.raises(ValidationError, match="unknown payment method"):
        new_payment(store, 10, "Cheque")


def test_payments_are_immutable(store):
    payment = new_payment(store, 100)
    with pytest.raises(pydantic.ValidationError):
        payment.amount = 1


def test_payment_adapter_discriminates_on_method():
    card = PaymentAdapter.validate_python(
        {"id": 1, "amount": 10, "method": "Card", "last4": "1234", "paid_on": "2025-01-02"}
    )
    cash = PaymentAdapter.validate_python({"id": 2, "amount": 10, "method": "Cash"})
    assert isinstance(card, CardPayment)
    assert isinstance(cash, CashPayment)
    assert card.paid_on == date(2025, 1, 2)


def test_apply_payment_registers_and_rejects_reuse(invoice, portfolio):
    store = portfolio.store
    payment = new_payment(store, 500)
    apply_payment(store, invoice.id, payment)
    assert store.get_payment(payment.id) is payment
    assert invoice.payments == [payment]

    with pytest.raises(ConflictError, match="already applied"):
        apply_payment(store, invoice.id, payment)
    assert invoice.payments == [payment]


def test_record_payment_unknown_invoice(store):
    with pytest.raises(NotFoundError, match="Invoice 5 not found"):
        record_payment(store, 5, 100)
    assert store.payments == {}


def test_invoice_rejects_non_payment_objects(invoice):
    with pytest.raises(TypeError):
        invoice.apply_payment(100)


def test_non_finite_amount_is_rejected(store):
    with pytest.raises(ValidationError, match="amount"):
        new_payment(store, float("inf"))
    with pytest.raises(ValidationError, match="amount"):
        new_payment(store, float("nan"))
    assert new_payment(store, 1).id == 1


class TestConfiguredTolerance:
    """Every view of paid status honours the session's paid_epsilon."""

    @pytest.fixture
    def loose_store(self) -> LeaseDeskStore:
        return LeaseDeskStore(
            settings=LeaseDeskSettings(billing=BillingSettings(paid_epsilon=1.0))
        )

    @pytest.fixture
    def invoice(self, loose_store) -> RentInvoice:
        prop = add_property(loose_store, "Maple Court", "12 Maple Street")
        unit = add_unit(loose_store, prop.id, "1A", 100)
        tenant = add_tenant(loose_store, "Ava Thompson", "ava@mail.com", "+1 555 0101")
        lease = create_lease(
            loose_store, unit.id, tenant.id, date(2025, 1, 1), date(2025, 12, 31)
        )
        activate_lease(loose_store, lease.id)
        return generate_invoice(loose_store, lease.id, date(2025, 1, 1))

    def test_invoice_takes_tolerance_from_settings(self, invoice):
        assert invoice.paid_epsilon == 1.0

    def test_paid_status_agrees_everywhere(self, loose_store, invoice):
        record_payment(loose_store, invoice.id, 99.5)

        assert is_paid(loose_store, invoice.id)
        assert invoice.paid
        assert str(invoice).endswith("(paid)")
        assert unpaid_invoices(loose_store) == []
        assert "Status  : paid" in describe(loose_store, invoice)
        register = InvoiceRegisterReport(loose_store).generate()
        assert list(register["Status"]) == ["Paid"]

    def test_shortfall_beyond_tolerance_is_unpaid(self, loose_store, invoice):
        record_payment(loose_store, invoice.id, 98.5)

        assert not is_paid(loose_store, invoice.id)
        assert str(invoice).endswith("(unpaid)")
        assert unpaid_invoices(loose_store) == [invoice]
