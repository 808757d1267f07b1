# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

from pydantic import Field, model_validator

from ..core.primitives import (
    PositiveFloat,
    PositiveIntGt0,
    StateModel,
    ValidationMixin,
)


class Lease(StateModel):
    """
    Binds one unit to one tenant for a date range at a fixed rent.

    ``rent`` is a snapshot of the unit's rent at creation; later changes to
    the unit do not reach existing leases. A lease starts inactive and moves
    ``Inactive -> Active -> Inactive`` through activation and termination,
    which are performed by the leasing API because they also write the
    unit's occupancy flag.
    """

    id: int
    unit_id: int
    tenant_id: int
    start_date: date
    end_date: date
    rent: PositiveFloat
    billing_cycle_days: PositiveIntGt0 = 30
    active: bool = False

    @model_validator(mode="after")
    def check_term(self) -> "Lease":
        return ValidationMixin.validate_date_ordering(
            self,
            "start_date",
            "end_date",
            error_message="end_date must not be before start_date",
        )

    @property
    def term_days(self) -> int:
        """Length of the lease in days, counting both the first and last day."""
        return (self.end_date - self.start_date).days + 1

    def covers(self, day: date) -> bool:
        """Whether ``day`` falls inside the lease term."""
        return self.start_date <= day <= self.end_date

    def __str__(self) -> str:
        state = "active" if self.active else "inactive"
        return (
            f"Lease {self.id}: unit {self.unit_id} / tenant {self.tenant_id} "
            f"{self.start_date.isoformat()} to {self.end_date.isoformat()} "
            f"rent {self.rent:,.2f} ({state})"
        )
