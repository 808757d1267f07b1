# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .model import Model
from .types import FloatBetween0And1, PositiveFloat, PositiveInt, PositiveIntGt0


class BillingSettings(Model):
    """
    Rent billing and late-fee policy.

    The late fee for an invoice is ``base * late_fee_daily_rate * days_late``
    capped at ``base * late_fee_cap_ratio``. An invoice counts as paid once
    its payments reach the total less ``paid_epsilon``.

    Usage Examples:
        # Default policy: 1% per day late, capped at half the base rent
        billing = BillingSettings()

        # Stricter policy with a five day grace period
        billing = BillingSettings(late_fee_daily_rate=0.02, grace_days=5)
    """

    late_fee_daily_rate: FloatBetween0And1 = Field(
        default=0.01,
        description="Fraction of the base amount charged per whole day late.",
    )
    late_fee_cap_ratio: FloatBetween0And1 = Field(
        default=0.5,
        description="Maximum late fee as a fraction of the base amount.",
    )
    paid_epsilon: PositiveFloat = Field(
        default=0.0001,
        description="Tolerance absorbing floating-point error in payment sums.",
    )
    default_billing_cycle_days: PositiveIntGt0 = Field(
        default=30, description="Billing cycle used when a lease does not give one."
    )
    grace_days: PositiveInt = Field(
        default=0,
        description="Days after the due date before late fees are assessed.",
    )


class DisplaySettings(Model):
    """Settings related to text views and report formatting."""

    currency_format: str = "${:,.2f}"
    date_format: str = "%Y-%m-%d"

    def money(self, amount: float) -> str:
        return self.currency_format.format(amount)

    def day(self, value) -> str:
        return value.strftime(self.date_format)


class LeaseDeskSettings(Model):
    """
    Top-level configuration container for a LeaseDesk session.

    Groups billing policy and display settings. A single instance is created
    when the store is built and shared by every operation.
    """

    billing: BillingSettings = Field(default_factory=BillingSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
