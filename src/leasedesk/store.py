# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
In-memory store holding every registry of a LeaseDesk session.

The store is created once at process start and passed explicitly to every
operation; there is no module-level mutable state. All registries are plain
dicts keyed by id, which preserves insertion order for listings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, TypeVar

from .billing.invoice import RentInvoice
from .billing.payment import PaymentBase
from .core.exceptions import NotFoundError
from .core.identity import IdentityAllocator
from .core.primitives import EntityKindEnum, LeaseDeskSettings
from .leasing.lease import Lease
from .maintenance.request import MaintenanceRequest
from .registry.property import Property, Unit
from .registry.tenant import Tenant

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class LeaseDeskStore:
    """
    A mutable container for the complete state of one operator session.

    Holds configuration, the identity allocator, and one lookup map per
    entity kind. Operations in the registry, leasing, billing and maintenance
    APIs receive the store as their first argument.
    """

    settings: LeaseDeskSettings = field(default_factory=LeaseDeskSettings)
    ids: IdentityAllocator = field(default_factory=IdentityAllocator)

    properties: Dict[int, Property] = field(default_factory=dict)
    units: Dict[int, Unit] = field(default_factory=dict)
    tenants: Dict[int, Tenant] = field(default_factory=dict)
    leases: Dict[int, Lease] = field(default_factory=dict)
    invoices: Dict[int, RentInvoice] = field(default_factory=dict)
    payments: Dict[int, PaymentBase] = field(default_factory=dict)
    maintenance_requests: Dict[int, MaintenanceRequest] = field(default_factory=dict)

    def next_id(self, kind: EntityKindEnum) -> int:
        return self.ids.next_id(kind)

    @staticmethod
    def _lookup(registry: Dict[int, T], kind: EntityKindEnum, entity_id: int) -> T:
        try:
            return registry[entity_id]
        except KeyError:
            logger.debug(f"Lookup miss: {kind.value} {entity_id}")
            raise NotFoundError(kind.value, entity_id) from None

    def get_property(self, property_id: int) -> Property:
        return self._lookup(self.properties, EntityKindEnum.PROPERTY, property_id)

    def get_unit(self, unit_id: int) -> Unit:
        return self._lookup(self.units, EntityKindEnum.UNIT, unit_id)

    def get_tenant(self, tenant_id: int) -> Tenant:
        return self._lookup(self.tenants, EntityKindEnum.TENANT, tenant_id)

    def get_lease(self, lease_id: int) -> Lease:
        return self._lookup(self.leases, EntityKindEnum.LEASE, lease_id)

    def get_invoice(self, invoice_id: int) -> RentInvoice:
        return self._lookup(self.invoices, EntityKindEnum.INVOICE, invoice_id)

    def get_payment(self, payment_id: int) -> PaymentBase:
        return self._lookup(self.payments, EntityKindEnum.PAYMENT, payment_id)

    def get_maintenance_request(self, request_id: int) -> MaintenanceRequest:
        return self._lookup(
            self.maintenance_requests, EntityKindEnum.MAINTENANCE, request_id
        )

    def property_of(self, unit: Unit) -> Property:
        return self.get_property(unit.property_id)

    def find_unit(
        self, unit_number: str, property_id: Optional[int] = None
    ) -> Unit:
        """
        Resolve a unit by its display number.

        When ``property_id`` is omitted the first matching unit across all
        properties (in registration order) is returned.

        Raises:
            NotFoundError: If no unit carries ``unit_number``
        """
        properties = (
            [self.get_property(property_id)]
            if property_id is not None
            else list(self.properties.values())
        )
        for prop in properties:
            unit = prop.find_unit(unit_number)
            if unit is not None:
                return unit
        raise NotFoundError(EntityKindEnum.UNIT.value, unit_number)

    def summary(self) -> Dict[str, int]:
        """Registry sizes keyed by entity kind, for status lines and logging."""
        return {
            EntityKindEnum.PROPERTY.value: len(self.properties),
            EntityKindEnum.UNIT.value: len(self.units),
            EntityKindEnum.TENANT.value: len(self.tenants),
            EntityKindEnum.LEASE.value: len(self.leases),
            EntityKindEnum.INVOICE.value: len(self.invoices),
            EntityKindEnum.PAYMENT.value: len(self.payments),
            EntityKindEnum.MAINTENANCE.value: len(self.maintenance_requests),
        }
