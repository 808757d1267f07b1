# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable Pydantic validation utilities shared by the entity models.
"""

from __future__ import annotations

from typing import Any, Optional


def _field(data: Any, name: str) -> Any:
    if isinstance(data, dict):
        return data.get(name)
    return getattr(data, name, None)


class ValidationMixin:
    """
    Mixin class providing reusable validation methods for Pydantic models.

    This class can be inherited alongside a Pydantic model to add common
    validation patterns without code duplication. Each method accepts either
    the raw data dictionary (``mode="before"``) or a model instance
    (``mode="after"``).
    """

    @classmethod
    def validate_date_ordering(
        cls,
        data: Any,
        start_field: str,
        end_field: str,
        allow_equal: bool = True,
        error_message: Optional[str] = None,
    ) -> Any:
        """
        Validate that the end date does not precede the start date.

        Args:
            data: Model data dictionary or model instance
            start_field: Name of start date field
            end_field: Name of end date field
            allow_equal: Whether a same-day range is acceptable
            error_message: Custom error message

        Returns:
            The data, unchanged

        Raises:
            ValueError: If the end date is before the start date (or equal to
                it when ``allow_equal`` is False)
        """
        start_date = _field(data, start_field)
        end_date = _field(data, end_field)

        if start_date is not None and end_date is not None:
            if end_date < start_date or (not allow_equal and end_date == start_date):
                msg = error_message or f"{end_field} must not be before {start_field}"
                raise ValueError(msg)

        return data

    @classmethod
    def validate_not_blank(cls, data: Any, *fields: str) -> Any:
        """
        Validate that each named text field holds something besides whitespace.

        Raises:
            ValueError: Naming the first blank field
        """
        for name in fields:
            value = _field(data, name)
            if value is not None and not str(value).strip():
                raise ValueError(f"{name} must not be blank")
        return data
