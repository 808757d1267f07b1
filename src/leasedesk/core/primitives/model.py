# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model for immutable records.

    Used for values that never change once created: payments, tenants and settings.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Catches typos and missing field definitions immediately
        str_strip_whitespace=True,
    )


class StateModel(BaseModel):
    """Base Pydantic model for registry entities with runtime state.

    Occupancy, activation, penalties and payment lists change during a
    session, so these models stay mutable. Every assignment is re-validated
    so a field can never hold a value its declaration rejects.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        str_strip_whitespace=True,
    )
