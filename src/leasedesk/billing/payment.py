# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment records.

Payments form a closed set of variants discriminated by ``method``. The
variant only affects display: amount and date drive every calculation.
"""

from __future__ import annotations

from datetime import date
from typing import Literal, Union

from pydantic import Field, TypeAdapter
from typing_extensions import Annotated

from ..core.primitives import CardLast4, Model, PaymentMethodEnum, PositiveFloat


class PaymentBase(Model):
    """Fields shared by every payment variant. Immutable once created."""

    id: int
    paid_on: date = Field(default_factory=date.today)
    amount: PositiveFloat
    method: PaymentMethodEnum

    def __str__(self) -> str:
        return f"Payment {self.id}: {self.amount:,.2f} on {self.paid_on.isoformat()} ({self.method.value})"


class CashPayment(PaymentBase):
    method: Literal[PaymentMethodEnum.CASH] = PaymentMethodEnum.CASH


class CardPayment(PaymentBase):
    method: Literal[PaymentMethodEnum.CARD] = PaymentMethodEnum.CARD
    last4: CardLast4

    def __str__(self) -> str:
        return f"{super().__str__()} card ****{self.last4}"


# Union type for all payments, using discriminator for type differentiation
Payment = Annotated[
    Union[CashPayment, CardPayment],
    Field(discriminator="method"),
]

PaymentAdapter = TypeAdapter(Payment)
