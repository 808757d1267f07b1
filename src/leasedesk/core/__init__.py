# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
LeaseDesk Core

Primitives, error taxonomy and identity allocation shared by the registry,
leasing, billing and maintenance subpackages.
"""

from .exceptions import (
    ConflictError,
    LeaseDeskError,
    NotFoundError,
    ValidationError,
    validation_errors,
)
from .identity import IdentityAllocator
from .primitives import (
    BillingSettings,
    DisplaySettings,
    EntityKindEnum,
    LeaseDeskSettings,
    MaintenanceStatusEnum,
    Model,
    PaymentMethodEnum,
    StateModel,
)

__all__ = [
    "BillingSettings",
    "ConflictError",
    "DisplaySettings",
    "EntityKindEnum",
    "IdentityAllocator",
    "LeaseDeskError",
    "LeaseDeskSettings",
    "MaintenanceStatusEnum",
    "Model",
    "NotFoundError",
    "PaymentMethodEnum",
    "StateModel",
    "ValidationError",
    "validation_errors",
]
