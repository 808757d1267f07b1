# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import EmailStr, Field, model_validator

from ..core.primitives import Model, ValidationMixin


class Tenant(Model):
    """A person who can hold leases and report maintenance issues."""

    id: int
    name: str
    email: EmailStr
    phone: str = Field(..., pattern=r"^\+?[0-9 ()\-]{5,20}$")

    @model_validator(mode="after")
    def check_name(self) -> "Tenant":
        return ValidationMixin.validate_not_blank(self, "name")

    def __str__(self) -> str:
        return f"Tenant {self.id}: {self.name} <{self.email}>"
