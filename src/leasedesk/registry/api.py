# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Registry API

Registration of properties, units and tenants. Entities are never deleted
within a session.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from ..core.exceptions import validation_errors
from ..core.primitives import EntityKindEnum
from .property import Property, Unit
from .tenant import Tenant

if TYPE_CHECKING:
    from ..store import LeaseDeskStore

logger = logging.getLogger(__name__)


def add_property(store: "LeaseDeskStore", name: str, address: str) -> Property:
    """Register a property with no units."""
    with validation_errors():
        prop = Property(
            id=store.ids.peek(EntityKindEnum.PROPERTY),
            name=name,
            address=address,
        )
    store.next_id(EntityKindEnum.PROPERTY)
    store.properties[prop.id] = prop
    logger.info(f"Registered property {prop.id} '{prop.name}'")
    return prop


def add_unit(
    store: "LeaseDeskStore", property_id: int, unit_number: str, rent: float
) -> Unit:
    """
    Add a vacant unit to an existing property.

    Raises:
        NotFoundError: If ``property_id`` is unknown
        ValidationError: If the rent is negative or the unit number is blank
    """
    prop = store.get_property(property_id)
    with validation_errors():
        unit = Unit(
            id=store.ids.peek(EntityKindEnum.UNIT),
            property_id=prop.id,
            unit_number=unit_number,
            rent=rent,
        )
    store.next_id(EntityKindEnum.UNIT)
    prop.add_unit(unit)
    store.units[unit.id] = unit
    logger.info(
        f"Added unit {unit.id} [{unit.unit_number}] to property {prop.id} at rent {unit.rent:,.2f}"
    )
    return unit


def update_unit_rent(store: "LeaseDeskStore", unit_id: int, rent: float) -> Unit:
    """
    Change a unit's asking rent.

    Existing leases and invoices keep the rent they snapshotted.
    """
    unit = store.get_unit(unit_id)
    previous = unit.rent
    with validation_errors():
        unit.rent = rent
    logger.info(f"Unit {unit.id} rent changed {previous:,.2f} -> {unit.rent:,.2f}")
    return unit


def add_tenant(store: "LeaseDeskStore", name: str, email: str, phone: str) -> Tenant:
    """
    Register a tenant.

    Raises:
        ValidationError: If the email or phone number is malformed
    """
    with validation_errors():
        tenant = Tenant(
            id=store.ids.peek(EntityKindEnum.TENANT),
            name=name,
            email=email,
            phone=phone,
        )
    store.next_id(EntityKindEnum.TENANT)
    store.tenants[tenant.id] = tenant
    logger.info(f"Registered tenant {tenant.id} '{tenant.name}'")
    return tenant


def list_properties(store: "LeaseDeskStore") -> List[Property]:
    return list(store.properties.values())


def list_tenants(store: "LeaseDeskStore") -> List[Tenant]:
    return list(store.tenants.values())
