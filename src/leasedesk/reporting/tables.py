# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Standard leasing reports: rent roll, invoice register and tenant balances.
"""

from __future__ import annotations

from typing import List

import pandas as pd

from ..leasing.api import active_lease_for_unit
from .base import BaseReport


class RentRollReport(BaseReport):
    """
    One row per unit with its current lease, if any.

    ``Lease Rent`` is the active lease's snapshot and can differ from the
    unit's current ``Asking Rent``.
    """

    columns = [
        "Property",
        "Unit",
        "Asking Rent",
        "Occupied",
        "Lease",
        "Tenant",
        "Lease Rent",
        "Lease End",
    ]

    def rows(self) -> List[dict]:
        store = self._store
        rows = []
        for prop in store.properties.values():
            for unit in prop.units:
                lease = active_lease_for_unit(store, unit.id)
                tenant = store.get_tenant(lease.tenant_id) if lease else None
                rows.append(
                    {
                        "Property": prop.name,
                        "Unit": unit.unit_number,
                        "Asking Rent": unit.rent,
                        "Occupied": unit.occupied,
                        "Lease": lease.id if lease else None,
                        "Tenant": tenant.name if tenant else None,
                        "Lease Rent": lease.rent if lease else None,
                        "Lease End": lease.end_date if lease else None,
                    }
                )
        return rows

    def generate(self) -> pd.DataFrame:
        df = super().generate()
        # Keep ids as integers even when some units are vacant
        df["Lease"] = df["Lease"].astype("Int64")
        return df


class InvoiceRegisterReport(BaseReport):
    """Every invoice with its amounts and paid status."""

    columns = [
        "Invoice",
        "Lease",
        "Tenant",
        "Due",
        "Base",
        "Penalty",
        "Total",
        "Paid",
        "Balance",
        "Status",
    ]

    def __init__(self, store, unpaid_only: bool = False):
        super().__init__(store)
        self.unpaid_only = unpaid_only

    def rows(self) -> List[dict]:
        store = self._store
        rows = []
        for invoice in store.invoices.values():
            paid = invoice.paid
            if self.unpaid_only and paid:
                continue
            lease = store.get_lease(invoice.lease_id)
            rows.append(
                {
                    "Invoice": invoice.id,
                    "Lease": lease.id,
                    "Tenant": store.get_tenant(lease.tenant_id).name,
                    "Due": invoice.due_date,
                    "Base": invoice.base_amount,
                    "Penalty": invoice.penalty,
                    "Total": invoice.total_amount,
                    "Paid": invoice.paid_amount,
                    "Balance": invoice.balance_due,
                    "Status": "Paid" if paid else "Unpaid",
                }
            )
        return rows


class TenantBalanceReport(BaseReport):
    """Invoiced, paid and outstanding totals per tenant."""

    columns = ["Tenant", "Name", "Invoiced", "Paid", "Outstanding", "Open Invoices"]

    def rows(self) -> List[dict]:
        store = self._store
        register = InvoiceRegisterReport(store).generate()
        lease_tenant = {lease.id: lease.tenant_id for lease in store.leases.values()}
        register["TenantId"] = register["Lease"].map(lease_tenant)
        grouped = register.groupby("TenantId") if not register.empty else None

        rows = []
        for tenant in store.tenants.values():
            if grouped is not None and tenant.id in grouped.groups:
                group = grouped.get_group(tenant.id)
                invoiced = float(group["Total"].sum())
                paid = float(group["Paid"].sum())
                outstanding = float(group["Balance"].sum())
                open_count = int((group["Status"] == "Unpaid").sum())
            else:
                invoiced = paid = outstanding = 0.0
                open_count = 0
            rows.append(
                {
                    "Tenant": tenant.id,
                    "Name": tenant.name,
                    "Invoiced": invoiced,
                    "Paid": paid,
                    "Outstanding": outstanding,
                    "Open Invoices": open_count,
                }
            )
        return rows
