# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

from pydantic import Field, model_validator

from ..core.primitives import MaintenanceStatusEnum, StateModel, ValidationMixin


class MaintenanceRequest(StateModel):
    """
    An issue reported for a unit by its occupant.

    Status changes are permissive: any status may follow any other. The
    occupant check happens when the request is logged, not here.
    """

    id: int
    unit_id: int
    tenant_id: int
    created_on: date = Field(default_factory=date.today)
    description: str
    status: MaintenanceStatusEnum = MaintenanceStatusEnum.LOGGED
    notes: str = ""

    @model_validator(mode="after")
    def check_description(self) -> "MaintenanceRequest":
        return ValidationMixin.validate_not_blank(self, "description")

    @property
    def is_open(self) -> bool:
        return self.status.is_open

    def set_status(self, status: MaintenanceStatusEnum) -> MaintenanceStatusEnum:
        """Move to ``status`` and return the previous one."""
        previous = self.status
        self.status = status
        return previous

    def add_note(self, text: str) -> None:
        """Append a line to the free-text notes."""
        text = text.strip()
        if not text:
            return
        self.notes = f"{self.notes}\n{text}" if self.notes else text

    def __str__(self) -> str:
        return (
            f"Request {self.id}: unit {self.unit_id} [{self.status.value}] "
            f"{self.description}"
        )
