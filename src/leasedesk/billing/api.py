# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Billing API

Invoice generation, late-fee assessment and payment application against the
session store. The invoice model owns the arithmetic (see
``billing.invoice``); these functions resolve ids, apply the configured
policy and keep the payment registry in step.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import TYPE_CHECKING, List, Optional, Union

from ..core.exceptions import ConflictError, ValidationError, validation_errors
from ..core.primitives import EntityKindEnum, PaymentMethodEnum
from .invoice import RentInvoice
from .payment import PaymentAdapter, PaymentBase

if TYPE_CHECKING:
    from ..store import LeaseDeskStore

logger = logging.getLogger(__name__)


# --- Invoices ---


def generate_invoice(
    store: "LeaseDeskStore", lease_id: int, due_date: date
) -> RentInvoice:
    """
    Raise an invoice for ``lease_id`` due on ``due_date``.

    The base amount is the lease's rent snapshot, not the unit's current
    rent. The invoice starts with no penalty and no payments.

    Raises:
        NotFoundError: If the lease does not exist
    """
    lease = store.get_lease(lease_id)
    if not lease.active:
        logger.debug(f"Invoicing inactive lease {lease.id}")

    invoice = RentInvoice(
        id=store.ids.peek(EntityKindEnum.INVOICE),
        lease_id=lease.id,
        due_date=due_date,
        base_amount=lease.rent,
        paid_epsilon=store.settings.billing.paid_epsilon,
    )
    store.next_id(EntityKindEnum.INVOICE)
    store.invoices[invoice.id] = invoice
    logger.info(
        f"Generated invoice {invoice.id} for lease {lease.id}: "
        f"{invoice.base_amount:,.2f} due {due_date.isoformat()}"
    )
    return invoice


def invoices_for_lease(store: "LeaseDeskStore", lease_id: int) -> List[RentInvoice]:
    store.get_lease(lease_id)
    return [inv for inv in store.invoices.values() if inv.lease_id == lease_id]


def next_due_date(store: "LeaseDeskStore", lease_id: int) -> date:
    """
    Due date of the lease's next billing cycle.

    The first invoice falls due on the lease start date; each later one a
    full billing cycle after the latest existing due date.
    """
    lease = store.get_lease(lease_id)
    existing = invoices_for_lease(store, lease_id)
    if not existing:
        return lease.start_date
    latest = max(inv.due_date for inv in existing)
    return latest + timedelta(days=lease.billing_cycle_days)


def generate_next_invoice(store: "LeaseDeskStore", lease_id: int) -> RentInvoice:
    """
    Generate the invoice for the lease's next billing cycle.

    Raises:
        ValidationError: If the next due date falls after the lease end date
    """
    lease = store.get_lease(lease_id)
    due = next_due_date(store, lease_id)
    if due > lease.end_date:
        raise ValidationError(
            f"lease {lease.id} ends {lease.end_date.isoformat()}; "
            f"no billing cycle due {due.isoformat()}"
        )
    return generate_invoice(store, lease_id, due)


# --- Late fees ---


def apply_late_fee(
    store: "LeaseDeskStore", invoice_id: int, days_late: int
) -> RentInvoice:
    """
    Set the invoice penalty for ``days_late`` days overdue.

    Replaces any earlier penalty. Non-positive ``days_late`` yields no fee.
    """
    invoice = store.get_invoice(invoice_id)
    fee = invoice.apply_late_fee(days_late, store.settings.billing)
    logger.info(
        f"Applied late fee to invoice {invoice.id}: {days_late} days -> {fee:,.2f}"
    )
    return invoice


def overdue_invoices(store: "LeaseDeskStore", as_of: date) -> List[RentInvoice]:
    """Unpaid invoices whose due date plus the grace period is before ``as_of``."""
    grace = timedelta(days=store.settings.billing.grace_days)
    return [
        inv
        for inv in store.invoices.values()
        if not inv.paid and inv.due_date + grace < as_of
    ]


def assess_late_fees(
    store: "LeaseDeskStore", as_of: Optional[date] = None
) -> List[RentInvoice]:
    """
    Apply late fees to every overdue invoice as of ``as_of`` (default today).

    ``days_late`` is counted from the due date, not from the end of the grace
    period. Invoices due today or later receive no fee.

    Returns:
        The invoices whose penalty was (re)computed
    """
    as_of = as_of or date.today()
    touched = []
    for invoice in overdue_invoices(store, as_of):
        apply_late_fee(store, invoice.id, invoice.days_late(as_of))
        touched.append(invoice)
    logger.info(f"Assessed late fees as of {as_of.isoformat()}: {len(touched)} invoices")
    return touched


# --- Payments ---


def new_payment(
    store: "LeaseDeskStore",
    amount: float,
    method: Union[PaymentMethodEnum, str] = PaymentMethodEnum.CASH,
    last4: Optional[str] = None,
    paid_on: Optional[date] = None,
) -> PaymentBase:
    """
    Build a payment with a fresh identifier. The payment is not applied.

    Raises:
        ValidationError: If the amount is negative, the method is unknown,
            or a card payment lacks a 4-digit ``last4``
    """
    try:
        method = PaymentMethodEnum(method)
    except ValueError:
        raise ValidationError(f"unknown payment method: {method!r}") from None

    data = {
        "id": store.ids.peek(EntityKindEnum.PAYMENT),
        "method": method,
        "amount": amount,
        "paid_on": paid_on or date.today(),
    }
    if method is PaymentMethodEnum.CARD:
        data["last4"] = last4
    with validation_errors():
        payment = PaymentAdapter.validate_python(data)
    store.next_id(EntityKindEnum.PAYMENT)
    return payment


def apply_payment(
    store: "LeaseDeskStore", invoice_id: int, payment: PaymentBase
) -> RentInvoice:
    """
    Attach ``payment`` to an invoice and register it.

    No over-payment check is made; any excess is simply carried.

    Raises:
        NotFoundError: If the invoice does not exist
        ConflictError: If the payment has already been applied
    """
    invoice = store.get_invoice(invoice_id)
    if payment.id in store.payments:
        raise ConflictError(f"payment {payment.id} already applied")

    was_paid = invoice.paid
    invoice.apply_payment(payment)
    store.payments[payment.id] = payment
    logger.info(
        f"Applied payment {payment.id} ({payment.method.value} {payment.amount:,.2f}) "
        f"to invoice {invoice.id}"
    )
    if not was_paid and invoice.paid:
        logger.info(f"Invoice {invoice.id} is now paid")
    return invoice


def record_payment(
    store: "LeaseDeskStore",
    invoice_id: int,
    amount: float,
    method: Union[PaymentMethodEnum, str] = PaymentMethodEnum.CASH,
    last4: Optional[str] = None,
    paid_on: Optional[date] = None,
) -> PaymentBase:
    """Build a payment and apply it to ``invoice_id`` in one step."""
    store.get_invoice(invoice_id)
    payment = new_payment(store, amount, method=method, last4=last4, paid_on=paid_on)
    apply_payment(store, invoice_id, payment)
    return payment


# --- Queries ---


def is_paid(store: "LeaseDeskStore", invoice_id: int) -> bool:
    return store.get_invoice(invoice_id).paid


def unpaid_invoices(store: "LeaseDeskStore") -> List[RentInvoice]:
    return [inv for inv in store.invoices.values() if not inv.paid]


def invoices_for_tenant(store: "LeaseDeskStore", tenant_id: int) -> List[RentInvoice]:
    store.get_tenant(tenant_id)
    lease_ids = {
        lease.id for lease in store.leases.values() if lease.tenant_id == tenant_id
    }
    return [inv for inv in store.invoices.values() if inv.lease_id in lease_ids]
