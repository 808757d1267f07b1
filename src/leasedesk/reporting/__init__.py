# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
LeaseDesk Reporting

Text views of single entities and tabular (pandas) reports over the store.
"""

from .base import BaseReport
from .tables import InvoiceRegisterReport, RentRollReport, TenantBalanceReport
from .views import brief, describe

__all__ = [
    "BaseReport",
    "RentRollReport",
    "InvoiceRegisterReport",
    "TenantBalanceReport",
    "describe",
    "brief",
]
