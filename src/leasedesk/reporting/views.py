# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Full text views of single entities.

Brief one-line views are each model's ``__str__``; the full views here
resolve cross references (unit number, tenant name, payments) through the
store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List, Type

from ..billing.invoice import RentInvoice
from ..billing.payment import CardPayment, PaymentBase
from ..leasing.api import active_lease_for_unit
from ..leasing.lease import Lease
from ..maintenance.request import MaintenanceRequest
from ..registry.property import Property, Unit
from ..registry.tenant import Tenant

if TYPE_CHECKING:
    from ..store import LeaseDeskStore


def _lines(title: str, fields: List[tuple]) -> str:
    width = max((len(label) for label, _ in fields), default=0)
    body = [f"  {label:<{width}} : {value}" for label, value in fields]
    return "\n".join([title, *body])


def describe_property(store: "LeaseDeskStore", prop: Property) -> str:
    fmt = store.settings.display
    fields = [
        ("Name", prop.name),
        ("Address", prop.address),
        ("Units", len(prop.units)),
        ("Occupancy", f"{prop.occupancy_rate:.0%}"),
    ]
    text = _lines(f"Property {prop.id}", fields)
    for unit in prop.units:
        state = "occupied" if unit.occupied else "vacant"
        text += f"\n    - [{unit.unit_number}] {fmt.money(unit.rent)} ({state})"
    return text


def describe_unit(store: "LeaseDeskStore", unit: Unit) -> str:
    fmt = store.settings.display
    lease = active_lease_for_unit(store, unit.id)
    occupant = store.get_tenant(lease.tenant_id).name if lease else "-"
    return _lines(
        f"Unit {unit.id}",
        [
            ("Number", unit.unit_number),
            ("Property", store.property_of(unit).name),
            ("Rent", fmt.money(unit.rent)),
            ("Occupied", "yes" if unit.occupied else "no"),
            ("Occupant", occupant),
        ],
    )


def describe_tenant(store: "LeaseDeskStore", tenant: Tenant) -> str:
    leases = [lease for lease in store.leases.values() if lease.tenant_id == tenant.id]
    return _lines(
        f"Tenant {tenant.id}",
        [
            ("Name", tenant.name),
            ("Email", tenant.email),
            ("Phone", tenant.phone),
            ("Leases", ", ".join(str(lease.id) for lease in leases) or "-"),
        ],
    )


def describe_lease(store: "LeaseDeskStore", lease: Lease) -> str:
    fmt = store.settings.display
    unit = store.get_unit(lease.unit_id)
    tenant = store.get_tenant(lease.tenant_id)
    return _lines(
        f"Lease {lease.id}",
        [
            ("Unit", f"{unit.unit_number} ({store.property_of(unit).name})"),
            ("Tenant", tenant.name),
            ("Term", f"{fmt.day(lease.start_date)} to {fmt.day(lease.end_date)}"),
            ("Rent", fmt.money(lease.rent)),
            ("Billing cycle", f"{lease.billing_cycle_days} days"),
            ("Status", "active" if lease.active else "inactive"),
        ],
    )


def describe_payment(store: "LeaseDeskStore", payment: PaymentBase) -> str:
    fmt = store.settings.display
    fields = [
        ("Date", fmt.day(payment.paid_on)),
        ("Amount", fmt.money(payment.amount)),
        ("Method", payment.method.value),
    ]
    if isinstance(payment, CardPayment):
        fields.append(("Card", f"****{payment.last4}"))
    return _lines(f"Payment {payment.id}", fields)


def describe_invoice(store: "LeaseDeskStore", invoice: RentInvoice) -> str:
    fmt = store.settings.display
    text = _lines(
        f"Invoice {invoice.id}",
        [
            ("Lease", invoice.lease_id),
            ("Due", fmt.day(invoice.due_date)),
            ("Base", fmt.money(invoice.base_amount)),
            ("Penalty", fmt.money(invoice.penalty)),
            ("Total", fmt.money(invoice.total_amount)),
            ("Paid", fmt.money(invoice.paid_amount)),
            ("Balance", fmt.money(invoice.balance_due)),
            ("Status", "paid" if invoice.paid else "unpaid"),
        ],
    )
    for payment in invoice.payments:
        text += f"\n    - {payment}"
    return text


def describe_maintenance(store: "LeaseDeskStore", request: MaintenanceRequest) -> str:
    fmt = store.settings.display
    unit = store.get_unit(request.unit_id)
    tenant = store.get_tenant(request.tenant_id)
    return _lines(
        f"Maintenance request {request.id}",
        [
            ("Unit", unit.unit_number),
            ("Reported by", tenant.name),
            ("Created", fmt.day(request.created_on)),
            ("Status", request.status.value),
            ("Description", request.description),
            ("Notes", request.notes.replace("\n", " | ") or "-"),
        ],
    )


_VIEWS: Dict[Type, Callable] = {
    Property: describe_property,
    Unit: describe_unit,
    Tenant: describe_tenant,
    Lease: describe_lease,
    RentInvoice: describe_invoice,
    PaymentBase: describe_payment,
    MaintenanceRequest: describe_maintenance,
}


def describe(store: "LeaseDeskStore", entity) -> str:
    """
    Full multi-line view of any registry entity.

    Raises:
        TypeError: If ``entity`` is not a LeaseDesk entity
    """
    for entity_type, view in _VIEWS.items():
        if isinstance(entity, entity_type):
            return view(store, entity)
    raise TypeError(f"No view registered for {type(entity).__name__}")


def brief(entity) -> str:
    """One-line view of any entity."""
    return str(entity)
