# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Maintenance API

Only the current occupant of a unit may log a request for it. Status changes
afterwards are unrestricted.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, List, Optional, Union

from ..core.exceptions import ValidationError, validation_errors
from ..core.primitives import EntityKindEnum, MaintenanceStatusEnum
from ..leasing.api import active_lease_for_unit
from .request import MaintenanceRequest

if TYPE_CHECKING:
    from ..store import LeaseDeskStore

logger = logging.getLogger(__name__)


def log_maintenance(
    store: "LeaseDeskStore",
    unit_id: int,
    tenant_id: int,
    description: str,
    created_on: Optional[date] = None,
) -> MaintenanceRequest:
    """
    Log a maintenance request from a unit's occupant.

    Requires the unit to be occupied through an active lease held by
    ``tenant_id``. The request starts as ``Logged`` with empty notes.

    Raises:
        NotFoundError: If the unit or tenant does not exist
        ValidationError: If the tenant is not the unit's occupant or the
            description is blank; no request is created
    """
    unit = store.get_unit(unit_id)
    tenant = store.get_tenant(tenant_id)

    lease = active_lease_for_unit(store, unit.id) if unit.occupied else None
    if lease is None or lease.tenant_id != tenant.id:
        logger.warning(
            f"Rejected maintenance request: tenant {tenant.id} does not occupy unit {unit.id}"
        )
        raise ValidationError("tenant is not the occupant of this unit")

    with validation_errors():
        request = MaintenanceRequest(
            id=store.ids.peek(EntityKindEnum.MAINTENANCE),
            unit_id=unit.id,
            tenant_id=tenant.id,
            created_on=created_on or date.today(),
            description=description,
        )
    store.next_id(EntityKindEnum.MAINTENANCE)
    store.maintenance_requests[request.id] = request
    logger.info(f"Logged maintenance request {request.id} for unit {unit.id}")
    return request


def set_status(
    store: "LeaseDeskStore",
    request_id: int,
    status: Union[MaintenanceStatusEnum, str],
    note: Optional[str] = None,
) -> MaintenanceRequest:
    """
    Move a request to ``status``, optionally appending a note.

    Any status may be set from any other, including moving a closed request
    back to an earlier state.

    Raises:
        NotFoundError: If the request does not exist
        ValidationError: If ``status`` is not a known status
    """
    request = store.get_maintenance_request(request_id)
    try:
        status = MaintenanceStatusEnum(status)
    except ValueError:
        raise ValidationError(f"unknown maintenance status: {status!r}") from None

    previous = request.set_status(status)
    if note:
        request.add_note(note)
    logger.info(
        f"Maintenance request {request.id}: {previous.value} -> {status.value}"
    )
    return request


def add_note(store: "LeaseDeskStore", request_id: int, note: str) -> MaintenanceRequest:
    request = store.get_maintenance_request(request_id)
    request.add_note(note)
    return request


def requests_for_unit(store: "LeaseDeskStore", unit_id: int) -> List[MaintenanceRequest]:
    store.get_unit(unit_id)
    return [r for r in store.maintenance_requests.values() if r.unit_id == unit_id]


def open_maintenance_requests(store: "LeaseDeskStore") -> List[MaintenanceRequest]:
    """Requests not yet Resolved or Closed, oldest first."""
    return [r for r in store.maintenance_requests.values() if r.is_open]
