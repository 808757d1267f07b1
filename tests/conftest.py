# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for LeaseDesk tests.

Fixtures build on each other: ``store`` is empty, ``portfolio`` registers one
property with two units and two tenants, ``active_lease`` leases unit 1A to
the first tenant and activates it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest

from leasedesk import LeaseDeskStore
from leasedesk.leasing import Lease, activate_lease, create_lease
from leasedesk.registry import (
    Property,
    Tenant,
    Unit,
    add_property,
    add_tenant,
    add_unit,
)

LEASE_START = date(2025, 1, 1)
LEASE_END = date(2025, 12, 31)


@dataclass
class Portfolio:
    store: LeaseDeskStore
    prop: Property
    unit_a: Unit
    unit_b: Unit
    ava: Tenant
    ben: Tenant


@pytest.fixture
def store() -> LeaseDeskStore:
    return LeaseDeskStore()


@pytest.fixture
def portfolio(store: LeaseDeskStore) -> Portfolio:
    prop = add_property(store, "Maple Court", "12 Maple Street")
    unit_a = add_unit(store, prop.id, "1A", 10000)
    unit_b = add_unit(store, prop.id, "1B", 8000)
    ava = add_tenant(store, "Ava Thompson", "ava.thompson@mail.com", "+1 555 0101")
    ben = add_tenant(store, "Ben Ortiz", "ben.ortiz@mail.com", "+1 555 0102")
    return Portfolio(store, prop, unit_a, unit_b, ava, ben)


@pytest.fixture
def active_lease(portfolio: Portfolio) -> Lease:
    lease = create_lease(
        portfolio.store,
        portfolio.unit_a.id,
        portfolio.ava.id,
        LEASE_START,
        LEASE_END,
        30,
    )
    return activate_lease(portfolio.store, lease.id)
