# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
LeaseDesk Core Primitives

Building blocks shared by every entity: model bases, constrained types,
enums, settings and validation helpers.
"""

from .enums import (
    EntityKindEnum,
    MaintenanceStatusEnum,
    PaymentMethodEnum,
)
from .model import Model, StateModel
from .settings import BillingSettings, DisplaySettings, LeaseDeskSettings
from .types import (
    CardLast4,
    FloatBetween0And1,
    PositiveFloat,
    PositiveInt,
    PositiveIntGt0,
)
from .validation import ValidationMixin

__all__ = [
    # Core models
    "Model",
    "StateModel",
    # Settings
    "LeaseDeskSettings",
    "BillingSettings",
    "DisplaySettings",
    # Enums
    "EntityKindEnum",
    "MaintenanceStatusEnum",
    "PaymentMethodEnum",
    # Types
    "CardLast4",
    "FloatBetween0And1",
    "PositiveFloat",
    "PositiveInt",
    "PositiveIntGt0",
    # Validation
    "ValidationMixin",
]
