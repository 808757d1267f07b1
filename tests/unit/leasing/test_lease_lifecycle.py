# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pydantic
import pytest

from leasedesk import ConflictError, NotFoundError, ValidationError
from leasedesk.leasing import (
    Lease,
    activate_lease,
    active_lease_for_unit,
    active_leases,
    create_lease,
    current_occupant,
    leases_for_tenant,
    leases_for_unit,
    occupied_units,
    terminate_lease,
    vacant_units,
)
from leasedesk.registry import update_unit_rent

START = date(2025, 1, 1)
END = date(2025, 12, 31)


def _assert_occupancy_matches_leases(store):
    for unit in store.units.values():
        has_active = any(
            lease.active for lease in store.leases.values() if lease.unit_id == unit.id
        )
        assert unit.occupied == has_active, f"unit {unit.id} occupancy out of sync"


def test_create_lease_is_inactive_and_snapshots_rent(portfolio):
    """New leases start inactive, leave the unit vacant and copy its rent."""
    store = portfolio.store
    lease = create_lease(store, portfolio.unit_a.id, portfolio.ava.id, START, END, 30)
    assert lease.id == 1
    assert not lease.active
    assert not portfolio.unit_a.occupied
    assert lease.rent == 10000

    update_unit_rent(store, portfolio.unit_a.id, 11000)
    assert lease.rent == 10000


def test_create_lease_uses_default_billing_cycle(portfolio):
    lease = create_lease(portfolio.store, portfolio.unit_a.id, portfolio.ava.id, START, END)
    assert lease.billing_cycle_days == 30


def test_create_lease_rejects_end_before_start(portfolio):
    """end < start is a ValidationError and no lease is registered."""
    store = portfolio.store
    with pytest.raises(ValidationError, match="end_date must not be before start_date"):
        create_lease(store, portfolio.unit_a.id, portfolio.ava.id, END, START, 30)
    assert store.leases == {}


def test_create_lease_allows_single_day_term(portfolio):
    lease = create_lease(portfolio.store, portfolio.unit_a.id, portfolio.ava.id, START, START)
    assert lease.term_days == 1


def test_create_lease_rejects_non_positive_cycle(portfolio):
    with pytest.raises(ValidationError, match="billing_cycle_days"):
        create_lease(portfolio.store, portfolio.unit_a.id, portfolio.ava.id, START, END, 0)


def test_create_lease_unknown_references(portfolio):
    store = portfolio.store
    with pytest.raises(NotFoundError, match="Unit 99"):
        create_lease(store, 99, portfolio.ava.id, START, END)
    with pytest.raises(NotFoundError, match="Tenant 99"):
        create_lease(store, portfolio.unit_a.id, 99, START, END)


def test_lease_model_validates_term_directly():
    """The model itself refuses an inverted term."""
    with pytest.raises(pydantic.ValidationError):
        Lease(id=1, unit_id=1, tenant_id=1, start_date=END, end_date=START, rent=100)


def test_activate_marks_unit_occupied(portfolio):
    store = portfolio.store
    lease = create_lease(store, portfolio.unit_a.id, portfolio.ava.id, START, END)
    activate_lease(store, lease.id)
    assert lease.active
    assert portfolio.unit_a.occupied
    assert active_lease_for_unit(store, portfolio.unit_a.id) is lease
    assert current_occupant(store, portfolio.unit_a.id) is portfolio.ava
    _assert_occupancy_matches_leases(store)


def test_second_activation_on_occupied_unit_conflicts(active_lease, portfolio):
    """A second lease on an occupied unit cannot activate until the first ends."""
    store = portfolio.store
    second = create_lease(store, portfolio.unit_a.id, portfolio.ben.id, START, END)

    with pytest.raises(ConflictError, match="already occupied"):
        activate_lease(store, second.id)
    assert not second.active
    assert active_lease.active
    assert portfolio.unit_a.occupied

    terminate_lease(store, active_lease.id)
    activate_lease(store, second.id)
    assert second.active
    assert current_occupant(store, portfolio.unit_a.id) is portfolio.ben
    _assert_occupancy_matches_leases(store)


def test_reactivating_active_lease_conflicts(active_lease, portfolio):
    """Activating an already active lease is rejected without state change."""
    with pytest.raises(ConflictError):
        activate_lease(portfolio.store, active_lease.id)
    assert active_lease.active
    assert portfolio.unit_a.occupied


def test_terminate_is_idempotent(active_lease, portfolio):
    store = portfolio.store
    terminate_lease(store, active_lease.id)
    terminate_lease(store, active_lease.id)
    assert not active_lease.active
    assert not portfolio.unit_a.occupied
    _assert_occupancy_matches_leases(store)


def test_terminate_never_activated_lease(portfolio):
    """Terminating an inactive lease is a no-op from a state perspective."""
    store = portfolio.store
    lease = create_lease(store, portfolio.unit_b.id, portfolio.ben.id, START, END)
    terminate_lease(store, lease.id)
    assert not lease.active
    assert not portfolio.unit_b.occupied


def test_unknown_lease(portfolio):
    with pytest.raises(NotFoundError, match="Lease 7 not found"):
        activate_lease(portfolio.store, 7)
    with pytest.raises(NotFoundError):
        terminate_lease(portfolio.store, 7)


def test_vacancy_and_lease_queries(active_lease, portfolio):
    store = portfolio.store
    assert vacant_units(store) == [portfolio.unit_b]
    assert occupied_units(store) == [portfolio.unit_a]
    assert active_leases(store) == [active_lease]

    later = create_lease(store, portfolio.unit_b.id, portfolio.ava.id, START, END)
    assert leases_for_tenant(store, portfolio.ava.id) == [active_lease, later]
    assert leases_for_unit(store, portfolio.unit_b.id) == [later]
    assert active_leases(store) == [active_lease]


def test_occupancy_invariant_over_mixed_operations(portfolio):
    """occupied iff some lease on the unit is active, after every step."""
    store = portfolio.store
    l1 = create_lease(store, portfolio.unit_a.id, portfolio.ava.id, START, END)
    l2 = create_lease(store, portfolio.unit_a.id, portfolio.ben.id, START, END)
    l3 = create_lease(store, portfolio.unit_b.id, portfolio.ben.id, START, END)

    steps = [
        (activate_lease, l1.id),
        (activate_lease, l3.id),
        (activate_lease, l2.id),
        (terminate_lease, l1.id),
        (activate_lease, l2.id),
        (terminate_lease, l3.id),
        (terminate_lease, l3.id),
    ]
    for op, lease_id in steps:
        try:
            op(store, lease_id)
        except ConflictError:
            pass
        _assert_occupancy_matches_leases(store)

    assert l2.active and not l1.active and not l3.active


def test_lease_helpers():
    lease = Lease(id=1, unit_id=1, tenant_id=1, start_date=START, end_date=END, rent=100)
    assert lease.term_days == 365
    assert lease.covers(date(2025, 6, 1))
    assert not lease.covers(date(2026, 1, 1))
    assert "inactive" in str(lease)


def test_terminating_inactive_lease_keeps_other_occupant(active_lease, portfolio):
    """A never-activated lease on an occupied unit cannot vacate it."""
    store = portfolio.store
    pending = create_lease(store, portfolio.unit_a.id, portfolio.ben.id, START, END)
    terminate_lease(store, pending.id)
    assert portfolio.unit_a.occupied
    assert active_lease.active
    _assert_occupancy_matches_leases(store)
