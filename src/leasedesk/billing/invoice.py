# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent invoices and the late-fee policy.

An invoice snapshots the lease rent as its base amount. The penalty is
recomputed from scratch each time a late fee is applied, and the paid status
is derived from the attached payments on every read.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from pydantic import Field

from ..core.primitives import BillingSettings, PositiveFloat, StateModel
from .payment import Payment, PaymentBase

logger = logging.getLogger(__name__)

_DEFAULT_BILLING = BillingSettings()


def compute_late_fee(
    base_amount: float,
    days_late: int,
    daily_rate: float = _DEFAULT_BILLING.late_fee_daily_rate,
    cap_ratio: float = _DEFAULT_BILLING.late_fee_cap_ratio,
) -> float:
    """
    Late fee for an invoice ``days_late`` whole days past due.

    ``min(base * daily_rate * days_late, base * cap_ratio)``, clamped at zero
    so a non-positive ``days_late`` never produces a fee or a credit.
    """
    if days_late <= 0:
        return 0.0
    return min(base_amount * daily_rate * days_late, base_amount * cap_ratio)


class RentInvoice(StateModel):
    """A rent charge raised against a lease for one due date."""

    id: int
    lease_id: int
    due_date: date
    base_amount: PositiveFloat
    penalty: PositiveFloat = 0.0
    paid_epsilon: PositiveFloat = Field(
        default=_DEFAULT_BILLING.paid_epsilon,
        description="Paid tolerance, copied from the billing policy at generation.",
    )
    issued_on: date = Field(default_factory=date.today)
    payments: List[Payment] = Field(default_factory=list)

    @property
    def total_amount(self) -> float:
        return self.base_amount + self.penalty

    @property
    def paid_amount(self) -> float:
        return sum(p.amount for p in self.payments)

    @property
    def balance_due(self) -> float:
        """Outstanding amount; over-payments are not refunded so this never goes negative."""
        return max(self.total_amount - self.paid_amount, 0.0)

    @property
    def paid(self) -> bool:
        """Payments cover the total, within ``paid_epsilon`` of floating-point error."""
        return self.paid_amount >= self.total_amount - self.paid_epsilon

    def days_late(self, as_of: date) -> int:
        """Whole days past the due date on ``as_of`` (0 when not yet due)."""
        return max((as_of - self.due_date).days, 0)

    def apply_late_fee(
        self, days_late: int, billing: Optional[BillingSettings] = None
    ) -> float:
        """
        Set the penalty for ``days_late`` days overdue and return it.

        The penalty is replaced, not accumulated: applying 10 days then 5 days
        leaves the 5-day fee.
        """
        billing = billing or _DEFAULT_BILLING
        fee = compute_late_fee(
            self.base_amount,
            days_late,
            daily_rate=billing.late_fee_daily_rate,
            cap_ratio=billing.late_fee_cap_ratio,
        )
        self.penalty = fee
        logger.debug(f"Invoice {self.id}: {days_late} days late -> penalty {fee:.2f}")
        return fee

    def apply_payment(self, payment: PaymentBase) -> None:
        """Attach ``payment``. Over-payment is accepted and not reconciled."""
        if not isinstance(payment, PaymentBase):
            raise TypeError(f"Expected a payment, got {type(payment).__name__}")
        self.payments.append(payment)

    def __str__(self) -> str:
        state = "paid" if self.paid else "unpaid"
        return (
            f"Invoice {self.id}: lease {self.lease_id} due {self.due_date.isoformat()} "
            f"total {self.total_amount:,.2f} paid {self.paid_amount:,.2f} ({state})"
        )
