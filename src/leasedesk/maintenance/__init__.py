# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Maintenance request log.
"""

from .api import (
    add_note,
    log_maintenance,
    open_maintenance_requests,
    requests_for_unit,
    set_status,
)
from .request import MaintenanceRequest

__all__ = [
    "MaintenanceRequest",
    "log_maintenance",
    "set_status",
    "add_note",
    "requests_for_unit",
    "open_maintenance_requests",
]
