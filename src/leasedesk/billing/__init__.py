# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Invoice and payment ledger.
"""

from .api import (
    apply_late_fee,
    apply_payment,
    assess_late_fees,
    generate_invoice,
    generate_next_invoice,
    invoices_for_lease,
    invoices_for_tenant,
    is_paid,
    new_payment,
    next_due_date,
    overdue_invoices,
    record_payment,
    unpaid_invoices,
)
from .invoice import RentInvoice, compute_late_fee
from .payment import CardPayment, CashPayment, Payment, PaymentAdapter, PaymentBase

__all__ = [
    # Models
    "RentInvoice",
    "Payment",
    "PaymentAdapter",
    "PaymentBase",
    "CashPayment",
    "CardPayment",
    "compute_late_fee",
    # Invoices
    "generate_invoice",
    "generate_next_invoice",
    "next_due_date",
    "invoices_for_lease",
    "invoices_for_tenant",
    # Late fees
    "apply_late_fee",
    "assess_late_fees",
    "overdue_invoices",
    # Payments
    "new_payment",
    "apply_payment",
    "record_payment",
    # Queries
    "is_paid",
    "unpaid_invoices",
]
