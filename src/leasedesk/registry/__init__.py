# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property, unit and tenant registries.
"""

from .api import (
    add_property,
    add_tenant,
    add_unit,
    list_properties,
    list_tenants,
    update_unit_rent,
)
from .property import Property, Unit
from .tenant import Tenant

__all__ = [
    "Property",
    "Unit",
    "Tenant",
    "add_property",
    "add_unit",
    "add_tenant",
    "update_unit_rent",
    "list_properties",
    "list_tenants",
]
