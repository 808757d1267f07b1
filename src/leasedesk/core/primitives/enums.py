# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


def _match_value(enum_cls, value):
    """Case- and whitespace-insensitive lookup by value, for operator input."""
    if isinstance(value, str):
        wanted = value.strip().lower()
        for member in enum_cls:
            if member.value.lower() == wanted:
                return member
    return None


class EntityKindEnum(str, Enum):
    """
    Entity kinds that receive their own identifier sequence.

    Identifiers are scoped per kind: property 1 and unit 1 are unrelated.
    """

    PROPERTY = "Property"
    UNIT = "Unit"
    TENANT = "Tenant"
    LEASE = "Lease"
    INVOICE = "Invoice"
    PAYMENT = "Payment"
    MAINTENANCE = "Maintenance"


class PaymentMethodEnum(str, Enum):
    """Tender used to settle an invoice."""

    CASH = "Cash"
    CARD = "Card"

    @classmethod
    def _missing_(cls, value):
        return _match_value(cls, value)


class MaintenanceStatusEnum(str, Enum):
    """
    Lifecycle states of a maintenance request.

    Attributes:
        LOGGED: Reported by the occupant, nobody assigned yet (initial state).
        ASSIGNED: A contractor or staff member has been assigned.
        IN_PROGRESS: Work has started.
        RESOLVED: Work is complete, awaiting sign-off.
        CLOSED: Signed off; no further work expected.
    """

    LOGGED = "Logged"
    ASSIGNED = "Assigned"
    IN_PROGRESS = "InProgress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"

    @classmethod
    def _missing_(cls, value):
        return _match_value(cls, value)

    @property
    def is_open(self) -> bool:
        """True while work on the request is still outstanding."""
        return self not in (MaintenanceStatusEnum.RESOLVED, MaintenanceStatusEnum.CLOSED)

