# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Leasing API

Lease creation and the activation/termination state machine:

    Inactive --activate_lease()--> Active --terminate_lease()--> Inactive

Activation and termination are the only writers of ``Unit.occupied``. A unit
can carry many leases over its lifetime but at most one active lease, which
is enforced through the occupancy flag rather than by scanning leases.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, List, Optional

from ..core.exceptions import ConflictError, ValidationError, validation_errors
from ..core.primitives import EntityKindEnum
from .lease import Lease

if TYPE_CHECKING:
    from ..registry.property import Unit
    from ..store import LeaseDeskStore

logger = logging.getLogger(__name__)


def create_lease(
    store: "LeaseDeskStore",
    unit_id: int,
    tenant_id: int,
    start_date: date,
    end_date: date,
    billing_cycle_days: Optional[int] = None,
) -> Lease:
    """
    Create an inactive lease binding a unit to a tenant.

    The lease rent is copied from the unit's current rent. The lease does not
    touch occupancy until it is activated.

    Args:
        store: Session store
        unit_id: Unit being leased
        tenant_id: Tenant taking the lease
        start_date: First day of the term
        end_date: Last day of the term (may equal ``start_date``)
        billing_cycle_days: Days between invoices; defaults to the
            configured billing cycle

    Raises:
        NotFoundError: If the unit or tenant does not exist
        ValidationError: If ``end_date`` is before ``start_date`` or the
            billing cycle is not positive
    """
    unit = store.get_unit(unit_id)
    tenant = store.get_tenant(tenant_id)
    if end_date < start_date:
        logger.warning(
            f"Rejected lease for unit {unit.id}: end {end_date} before start {start_date}"
        )
        raise ValidationError("end_date must not be before start_date")

    if billing_cycle_days is None:
        billing_cycle_days = store.settings.billing.default_billing_cycle_days

    with validation_errors():
        lease = Lease(
            id=store.ids.peek(EntityKindEnum.LEASE),
            unit_id=unit.id,
            tenant_id=tenant.id,
            start_date=start_date,
            end_date=end_date,
            rent=unit.rent,
            billing_cycle_days=billing_cycle_days,
        )
    store.next_id(EntityKindEnum.LEASE)
    store.leases[lease.id] = lease
    logger.info(
        f"Created lease {lease.id} for unit {unit.id} / tenant {tenant.id} at rent {lease.rent:,.2f}"
    )
    return lease


def activate_lease(store: "LeaseDeskStore", lease_id: int) -> Lease:
    """
    Activate a lease and mark its unit occupied.

    Raises:
        NotFoundError: If the lease or its unit does not exist
        ConflictError: If the unit is already occupied; nothing is changed
    """
    lease = store.get_lease(lease_id)
    unit = store.get_unit(lease.unit_id)
    if unit.occupied:
        logger.warning(
            f"Rejected activation of lease {lease.id}: unit {unit.id} already occupied"
        )
        raise ConflictError(f"unit {unit.unit_number} already occupied")

    lease.active = True
    unit.occupied = True
    logger.info(f"Activated lease {lease.id}; unit {unit.id} now occupied")
    return lease


def terminate_lease(store: "LeaseDeskStore", lease_id: int) -> Lease:
    """
    Deactivate a lease and mark its unit vacant.

    Idempotent: terminating an inactive lease changes nothing. In particular
    it never clears the occupancy of a unit held by a different, active lease.
    """
    lease = store.get_lease(lease_id)
    unit = store.get_unit(lease.unit_id)
    if not lease.active:
        logger.debug(f"Lease {lease.id} already inactive; nothing to terminate")
        return lease

    lease.active = False
    unit.occupied = False
    logger.info(f"Terminated lease {lease.id}; unit {unit.id} now vacant")
    return lease


def active_lease_for_unit(store: "LeaseDeskStore", unit_id: int) -> Optional[Lease]:
    """The active lease on ``unit_id``, if any."""
    for lease in store.leases.values():
        if lease.active and lease.unit_id == unit_id:
            return lease
    return None


def current_occupant(store: "LeaseDeskStore", unit_id: int):
    """Tenant holding the active lease on ``unit_id``, or None when vacant."""
    lease = active_lease_for_unit(store, unit_id)
    if lease is None:
        return None
    return store.get_tenant(lease.tenant_id)


def vacant_units(store: "LeaseDeskStore") -> List["Unit"]:
    """Unoccupied units across all properties, in registration order."""
    return [
        unit
        for prop in store.properties.values()
        for unit in prop.units
        if not unit.occupied
    ]


def occupied_units(store: "LeaseDeskStore") -> List["Unit"]:
    return [
        unit
        for prop in store.properties.values()
        for unit in prop.units
        if unit.occupied
    ]


def active_leases(store: "LeaseDeskStore") -> List[Lease]:
    return [lease for lease in store.leases.values() if lease.active]


def leases_for_unit(store: "LeaseDeskStore", unit_id: int) -> List[Lease]:
    store.get_unit(unit_id)
    return [lease for lease in store.leases.values() if lease.unit_id == unit_id]


def leases_for_tenant(store: "LeaseDeskStore", tenant_id: int) -> List[Lease]:
    store.get_tenant(tenant_id)
    return [lease for lease in store.leases.values() if lease.tenant_id == tenant_id]
