# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Error taxonomy for LeaseDesk operations.

Every core operation raises one of these at the point of violation and
leaves its target entities untouched, so the caller can retry with corrected
arguments.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import pydantic


class LeaseDeskError(Exception):
    """Base class for all errors raised by LeaseDesk operations."""


class NotFoundError(LeaseDeskError, LookupError):
    """A referenced identifier does not exist in its registry."""

    def __init__(self, kind: str, entity_id: int):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} {entity_id} not found")


class ValidationError(LeaseDeskError, ValueError):
    """Malformed input reached the core (bad dates, wrong occupant, bad field values)."""


class ConflictError(LeaseDeskError):
    """The operation conflicts with current state (e.g. unit already occupied)."""


def format_pydantic_error(exc: pydantic.ValidationError) -> str:
    """Flatten a pydantic error into a single operator-readable line."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()))
        msg = error.get("msg", "invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, ") :]
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


@contextmanager
def validation_errors() -> Iterator[None]:
    """Re-raise pydantic validation failures as LeaseDesk ``ValidationError``."""
    try:
        yield
    except pydantic.ValidationError as e:
        raise ValidationError(format_pydantic_error(e)) from e
