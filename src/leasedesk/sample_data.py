# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sample portfolio for demos and manual testing.

Dates are laid out relative to ``today`` so the seeded data always contains
one paid and one overdue invoice.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from .billing import generate_next_invoice, record_payment
from .leasing import activate_lease, create_lease
from .maintenance import log_maintenance
from .registry import add_property, add_tenant, add_unit
from .store import LeaseDeskStore

logger = logging.getLogger(__name__)


def bootstrap(store: LeaseDeskStore, today: Optional[date] = None) -> LeaseDeskStore:
    """Seed ``store`` with two properties, five units, three tenants and two active leases."""
    today = today or date.today()

    maple = add_property(store, "Maple Court", "12 Maple Street, Springfield")
    harbor = add_property(store, "Harbor View Lofts", "400 Harbor Blvd, Bayside")
    maple_1a = add_unit(store, maple.id, "1A", 1200.0)
    add_unit(store, maple.id, "1B", 1150.0)
    add_unit(store, maple.id, "2A", 1350.0)
    harbor_l1 = add_unit(store, harbor.id, "L1", 2100.0)
    add_unit(store, harbor.id, "L2", 2250.0)

    ava = add_tenant(store, "Ava Thompson", "ava.thompson@mail.com", "+1 555 0101")
    ben = add_tenant(store, "Ben Ortiz", "ben.ortiz@mail.com", "+1 555 0102")
    add_tenant(store, "Chloe Nguyen", "chloe.nguyen@mail.com", "+1 555 0103")

    start = today - timedelta(days=45)
    ava_lease = create_lease(
        store, maple_1a.id, ava.id, start, start + timedelta(days=364), 30
    )
    activate_lease(store, ava_lease.id)
    first = generate_next_invoice(store, ava_lease.id)
    record_payment(store, first.id, first.base_amount, "Cash", paid_on=start)
    # Second cycle is left unpaid and is overdue by 15 days
    generate_next_invoice(store, ava_lease.id)

    ben_start = today - timedelta(days=10)
    ben_lease = create_lease(
        store, harbor_l1.id, ben.id, ben_start, ben_start + timedelta(days=364), 30
    )
    activate_lease(store, ben_lease.id)
    ben_invoice = generate_next_invoice(store, ben_lease.id)
    record_payment(
        store, ben_invoice.id, ben_invoice.base_amount, "Card", last4="4242", paid_on=ben_start
    )

    log_maintenance(store, maple_1a.id, ava.id, "Kitchen faucet dripping")

    logger.info(f"Loaded sample data: {store.summary()}")
    return store
