# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
LeaseDesk - In-memory leasing and rent collection for a single operator

Tracks properties, units, tenants, leases, rent invoices, payments and
maintenance requests for one console session. Nothing is persisted.

Key Entry Points:
- leasedesk.LeaseDeskStore - the session state passed to every operation
- leasedesk.registry.* - properties, units, tenants
- leasedesk.leasing.* - lease creation, activation, termination
- leasedesk.billing.* - invoices, late fees, payments
- leasedesk.maintenance.* - maintenance requests
- leasedesk.reporting.* - text views and pandas reports

Example Usage:
    ```python
    from datetime import date

    from leasedesk import LeaseDeskStore
    from leasedesk.billing import apply_late_fee, generate_invoice, record_payment
    from leasedesk.leasing import activate_lease, create_lease
    from leasedesk.registry import add_property, add_tenant, add_unit

    store = LeaseDeskStore()
    prop = add_property(store, "Maple Court", "12 Maple Street")
    unit = add_unit(store, prop.id, "1A", 10000)
    tenant = add_tenant(store, "Ava Thompson", "ava@mail.com", "+1 555 0101")
    lease = create_lease(store, unit.id, tenant.id, date(2025, 1, 1), date(2025, 12, 31), 30)
    activate_lease(store, lease.id)

    invoice = generate_invoice(store, lease.id, date(2025, 1, 1))
    apply_late_fee(store, invoice.id, 10)
    record_payment(store, invoice.id, invoice.total_amount)
    print(invoice.paid)  # True
    ```
"""

# Add a NullHandler so the library stays silent unless the application
# configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core import (  # noqa: E402
    ConflictError,
    LeaseDeskError,
    LeaseDeskSettings,
    NotFoundError,
    ValidationError,
)
from .store import LeaseDeskStore  # noqa: E402

__all__ = [  # noqa: F822 - lazy loading
    "LeaseDeskStore",
    "LeaseDeskSettings",
    "LeaseDeskError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "billing",
    "core",
    "leasing",
    "maintenance",
    "registry",
    "reporting",
]


_LAZY_MODULES = {
    "billing": "leasedesk.billing",
    "core": "leasedesk.core",
    "leasing": "leasedesk.leasing",
    "maintenance": "leasedesk.maintenance",
    "registry": "leasedesk.registry",
    "reporting": "leasedesk.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'leasedesk' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
