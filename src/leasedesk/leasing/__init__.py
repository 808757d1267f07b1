# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lease lifecycle: creation, activation, termination and occupancy queries.
"""

from .api import (
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
from .lease import Lease

__all__ = [
    "Lease",
    "create_lease",
    "activate_lease",
    "terminate_lease",
    "active_lease_for_unit",
    "current_occupant",
    "vacant_units",
    "occupied_units",
    "active_leases",
    "leases_for_unit",
    "leases_for_tenant",
]
