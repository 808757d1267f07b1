# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property and unit entities.

A property owns its units in insertion order. A unit's ``occupied`` flag is a
materialized view of "some lease on this unit is active"; only lease
activation and termination write it.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from ..core.primitives import PositiveFloat, StateModel, ValidationMixin


class Unit(StateModel):
    """A rentable unit inside a property."""

    id: int
    property_id: int
    unit_number: str = Field(..., description="Display label, e.g. '2B'")
    rent: PositiveFloat = Field(..., description="Current asking rent per billing cycle")
    occupied: bool = False

    @model_validator(mode="after")
    def check_unit_number(self) -> "Unit":
        return ValidationMixin.validate_not_blank(self, "unit_number")

    @property
    def is_vacant(self) -> bool:
        return not self.occupied

    def __str__(self) -> str:
        state = "occupied" if self.occupied else "vacant"
        return f"Unit {self.id} [{self.unit_number}] rent {self.rent:,.2f} ({state})"


class Property(StateModel):
    """A building or lot registered by the operator."""

    id: int
    name: str
    address: str
    units: List[Unit] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_text(self) -> "Property":
        return ValidationMixin.validate_not_blank(self, "name", "address")

    def add_unit(self, unit: Unit) -> None:
        """Append ``unit``; it must already carry this property's id."""
        if unit.property_id != self.id:
            raise ValueError(
                f"Unit {unit.id} belongs to property {unit.property_id}, not {self.id}"
            )
        self.units.append(unit)

    def find_unit(self, unit_number: str) -> Optional[Unit]:
        """Return the unit labelled ``unit_number`` (case-insensitive), if any."""
        wanted = unit_number.strip().lower()
        for unit in self.units:
            if unit.unit_number.strip().lower() == wanted:
                return unit
        return None

    @property
    def vacant_units(self) -> List[Unit]:
        return [u for u in self.units if not u.occupied]

    @property
    def occupancy_rate(self) -> float:
        """Share of units currently occupied (0.0 for a property with no units)."""
        if not self.units:
            return 0.0
        return sum(1 for u in self.units if u.occupied) / len(self.units)

    def __str__(self) -> str:
        return f"Property {self.id}: {self.name} - {self.address} ({len(self.units)} units)"
