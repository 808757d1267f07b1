# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
LeaseDesk console

Menu-driven front end for a single operator. Collects validated primitive
input with rich prompts, calls into the registry/leasing/billing/maintenance
APIs and renders their results. Core errors are reported and the menu is
shown again; nothing is fatal.

Usage:
    leasedesk
    leasedesk --no-sample-data --late-fee-rate 0.02 --verbose
"""

from __future__ import annotations

import argparse
import logging
import math
import re
import sys
from datetime import date
from typing import Callable, List, Optional, TextIO, Tuple

import pandas as pd
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt
from rich.table import Table

from . import billing, leasing, maintenance, registry
from .core import (
    BillingSettings,
    EntityKindEnum,
    LeaseDeskError,
    LeaseDeskSettings,
    MaintenanceStatusEnum,
    PaymentMethodEnum,
)
from .reporting import (
    InvoiceRegisterReport,
    RentRollReport,
    TenantBalanceReport,
    describe,
)
from .sample_data import bootstrap
from .store import LeaseDeskStore

logger = logging.getLogger(__name__)

_LAST4 = re.compile(r"^\d{4}$")


def dataframe_table(df: pd.DataFrame, title: str) -> Table:
    """Render a report frame as a rich table, money columns right-aligned."""
    table = Table(title=title)
    for column in df.columns:
        numeric = pd.api.types.is_float_dtype(df[column])
        table.add_column(str(column), justify="right" if numeric else "left")
    for row in df.itertuples(index=False):
        cells = []
        for value in row:
            if value is None or (not isinstance(value, str) and pd.isna(value)):
                cells.append("-")
            elif isinstance(value, float):
                cells.append(f"{value:,.2f}")
            else:
                cells.append(str(value))
        table.add_row(*cells)
    return table


class ConsoleApp:
    """Interactive menu loop over a LeaseDeskStore."""

    def __init__(
        self,
        store: LeaseDeskStore,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        self.store = store
        self.console = console or Console()
        self.stream = stream
        self.commands: List[Tuple[str, str, Callable[[], None]]] = [
            ("1", "Register property", self.add_property),
            ("2", "Add unit to property", self.add_unit),
            ("3", "Change unit rent", self.update_unit_rent),
            ("4", "Register tenant", self.add_tenant),
            ("5", "Create lease", self.create_lease),
            ("6", "Activate lease", self.activate_lease),
            ("7", "Terminate lease", self.terminate_lease),
            ("8", "Generate invoice", self.generate_invoice),
            ("9", "Record payment", self.record_payment),
            ("10", "Assess late fees", self.assess_late_fees),
            ("11", "Log maintenance request", self.log_maintenance),
            ("12", "Update maintenance status", self.update_maintenance),
            ("13", "List vacant units", self.list_vacant_units),
            ("14", "List active leases", self.list_active_leases),
            ("15", "List unpaid invoices", self.list_unpaid_invoices),
            ("16", "List open maintenance", self.list_open_maintenance),
            ("17", "Rent roll", self.show_rent_roll),
            ("18", "Tenant balances", self.show_tenant_balances),
            ("19", "Show entity details", self.show_entity),
        ]

    # --- Input helpers ---

    def _ask_text(self, label: str, default: Optional[str] = None) -> str:
        while True:
            kwargs = {} if default is None else {"default": default}
            value = Prompt.ask(label, console=self.console, stream=self.stream, **kwargs)
            if value and value.strip():
                return value.strip()
            self.console.print("[red]A value is required.[/red]")

    def _ask_int(self, label: str, default: Optional[int] = None) -> int:
        kwargs = {} if default is None else {"default": default}
        return IntPrompt.ask(label, console=self.console, stream=self.stream, **kwargs)

    def _ask_money(self, label: str, default: Optional[float] = None) -> float:
        while True:
            kwargs = {} if default is None else {"default": round(default, 2)}
            value = FloatPrompt.ask(label, console=self.console, stream=self.stream, **kwargs)
            if math.isfinite(value) and value >= 0:
                return value
            self.console.print("[red]Amount must be a non-negative number.[/red]")

    def _ask_date(self, label: str, default: Optional[date] = None) -> date:
        default = default or date.today()
        while True:
            value = Prompt.ask(
                f"{label} (YYYY-MM-DD)",
                console=self.console,
                stream=self.stream,
                default=default.isoformat(),
            )
            try:
                return date.fromisoformat(value.strip())
            except ValueError:
                self.console.print(f"[red]Not a date: {escape(repr(value))}[/red]")

    def _ask_choice(self, label: str, choices: List[str], default: str) -> str:
        return Prompt.ask(
            label,
            console=self.console,
            stream=self.stream,
            choices=choices,
            default=default,
        )

    def _done(self, verb: str, entity) -> None:
        self.console.print(f"[green]{verb}[/green] {escape(str(entity))}")

    def _print_all(self, items, empty: str) -> None:
        if not items:
            self.console.print(f"[yellow]{empty}[/yellow]")
            return
        for item in items:
            self.console.print(escape(str(item)))

    # --- Loop ---

    def show_menu(self) -> None:
        self.console.print("\n[bold cyan]LeaseDesk[/bold cyan]")
        for key, label, _ in self.commands:
            self.console.print(f"  {key:>2}. {label}")
        self.console.print("   q. Quit")

    def run(self) -> None:
        handlers = {key: handler for key, _, handler in self.commands}
        while True:
            self.show_menu()
            choice = Prompt.ask(
                "Choose",
                console=self.console,
                stream=self.stream,
                choices=[*handlers, "q"],
                show_choices=False,
            )
            if choice == "q":
                self.console.print("Goodbye.")
                return
            try:
                handlers[choice]()
            except LeaseDeskError as e:
                logger.debug(f"Command {choice} failed: {e}")
                self.console.print(f"[red]Error:[/red] {escape(str(e))}")

    # --- Registry ---

    def add_property(self) -> None:
        prop = registry.add_property(
            self.store, self._ask_text("Name"), self._ask_text("Address")
        )
        self._done("Created", prop)

    def add_unit(self) -> None:
        unit = registry.add_unit(
            self.store,
            self._ask_int("Property id"),
            self._ask_text("Unit number"),
            self._ask_money("Rent"),
        )
        self._done("Created", unit)

    def update_unit_rent(self) -> None:
        unit = self.store.get_unit(self._ask_int("Unit id"))
        unit = registry.update_unit_rent(
            self.store, unit.id, self._ask_money("New rent", default=unit.rent)
        )
        self._done("Updated", unit)

    def add_tenant(self) -> None:
        tenant = registry.add_tenant(
            self.store,
            self._ask_text("Name"),
            self._ask_text("Email"),
            self._ask_text("Phone"),
        )
        self._done("Created", tenant)

    # --- Leasing ---

    def create_lease(self) -> None:
        unit_id = self._ask_int("Unit id")
        tenant_id = self._ask_int("Tenant id")
        start = self._ask_date("Start date")
        end = self._ask_date("End date", default=start)
        cycle = self._ask_int(
            "Billing cycle (days)",
            default=self.store.settings.billing.default_billing_cycle_days,
        )
        lease = leasing.create_lease(self.store, unit_id, tenant_id, start, end, cycle)
        self._done("Created", lease)
        if Confirm.ask(
            "Activate now?", console=self.console, stream=self.stream, default=True
        ):
            leasing.activate_lease(self.store, lease.id)
            self._done("Activated", lease)

    def activate_lease(self) -> None:
        lease = leasing.activate_lease(self.store, self._ask_int("Lease id"))
        self._done("Activated", lease)

    def terminate_lease(self) -> None:
        lease = leasing.terminate_lease(self.store, self._ask_int("Lease id"))
        self._done("Terminated", lease)

    # --- Billing ---

    def generate_invoice(self) -> None:
        lease_id = self._ask_int("Lease id")
        due = self._ask_date("Due date", default=billing.next_due_date(self.store, lease_id))
        invoice = billing.generate_invoice(self.store, lease_id, due)
        self._done("Created", invoice)

    def record_payment(self) -> None:
        invoice = self.store.get_invoice(self._ask_int("Invoice id"))
        amount = self._ask_money("Amount", default=invoice.balance_due)
        method = self._ask_choice(
            "Method", [m.value for m in PaymentMethodEnum], PaymentMethodEnum.CASH.value
        )
        last4 = None
        if method == PaymentMethodEnum.CARD.value:
            last4 = self._ask_text("Card last 4 digits")
            while not _LAST4.match(last4):
                self.console.print("[red]Enter exactly four digits.[/red]")
                last4 = self._ask_text("Card last 4 digits")
        paid_on = self._ask_date("Payment date")
        payment = billing.record_payment(
            self.store, invoice.id, amount, method, last4=last4, paid_on=paid_on
        )
        state = "paid" if billing.is_paid(self.store, invoice.id) else "still unpaid"
        self._done("Recorded", f"{payment}; invoice {invoice.id} {state}")

    def assess_late_fees(self) -> None:
        touched = billing.assess_late_fees(self.store, self._ask_date("As of"))
        self._print_all(touched, "No overdue invoices.")

    # --- Maintenance ---

    def log_maintenance(self) -> None:
        request = maintenance.log_maintenance(
            self.store,
            self._ask_int("Unit id"),
            self._ask_int("Tenant id"),
            self._ask_text("Description"),
        )
        self._done("Logged", request)

    def update_maintenance(self) -> None:
        request = self.store.get_maintenance_request(self._ask_int("Request id"))
        status = self._ask_choice(
            "Status", [s.value for s in MaintenanceStatusEnum], request.status.value
        )
        note = Prompt.ask("Note (optional)", console=self.console, stream=self.stream, default="")
        request = maintenance.set_status(self.store, request.id, status, note=note or None)
        self._done("Updated", request)

    # --- Queries ---

    def list_vacant_units(self) -> None:
        self._print_all(leasing.vacant_units(self.store), "No vacant units.")

    def list_active_leases(self) -> None:
        self._print_all(leasing.active_leases(self.store), "No active leases.")

    def list_unpaid_invoices(self) -> None:
        df = InvoiceRegisterReport(self.store, unpaid_only=True).generate()
        if df.empty:
            self.console.print("[yellow]No unpaid invoices.[/yellow]")
            return
        self.console.print(dataframe_table(df, "Unpaid Invoices"))

    def list_open_maintenance(self) -> None:
        self._print_all(
            maintenance.open_maintenance_requests(self.store), "No open maintenance requests."
        )

    def show_rent_roll(self) -> None:
        self.console.print(dataframe_table(RentRollReport(self.store).generate(), "Rent Roll"))

    def show_tenant_balances(self) -> None:
        self.console.print(
            dataframe_table(TenantBalanceReport(self.store).generate(), "Tenant Balances")
        )

    def show_entity(self) -> None:
        lookups = {
            EntityKindEnum.PROPERTY.value: self.store.get_property,
            EntityKindEnum.UNIT.value: self.store.get_unit,
            EntityKindEnum.TENANT.value: self.store.get_tenant,
            EntityKindEnum.LEASE.value: self.store.get_lease,
            EntityKindEnum.INVOICE.value: self.store.get_invoice,
            EntityKindEnum.PAYMENT.value: self.store.get_payment,
            EntityKindEnum.MAINTENANCE.value: self.store.get_maintenance_request,
        }
        kind = self._ask_choice("Kind", list(lookups), EntityKindEnum.UNIT.value)
        entity = lookups[kind](self._ask_int("Id"))
        self.console.print(escape(describe(self.store, entity)))


def build_parser() -> argparse.ArgumentParser:
    defaults = BillingSettings()
    parser = argparse.ArgumentParser(
        prog="leasedesk", description="Leasing and rent collection console"
    )
    parser.add_argument(
        "--no-sample-data",
        action="store_true",
        help="Start with empty registries instead of the sample portfolio",
    )
    parser.add_argument(
        "--late-fee-rate",
        type=float,
        default=defaults.late_fee_daily_rate,
        help="Late fee per day as a fraction of base rent (default: %(default)s)",
    )
    parser.add_argument(
        "--late-fee-cap",
        type=float,
        default=defaults.late_fee_cap_ratio,
        help="Maximum late fee as a fraction of base rent (default: %(default)s)",
    )
    parser.add_argument(
        "--cycle-days",
        type=int,
        default=defaults.default_billing_cycle_days,
        help="Default billing cycle in days (default: %(default)s)",
    )
    parser.add_argument(
        "--grace-days",
        type=int,
        default=defaults.grace_days,
        help="Days after due date before late fees apply (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def settings_from_args(args: argparse.Namespace) -> LeaseDeskSettings:
    return LeaseDeskSettings(
        billing=BillingSettings(
            late_fee_daily_rate=args.late_fee_rate,
            late_fee_cap_ratio=args.late_fee_cap,
            default_billing_cycle_days=args.cycle_days,
            grace_days=args.grace_days,
        )
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = settings_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    store = LeaseDeskStore(settings=settings)
    if not args.no_sample_data:
        bootstrap(store)

    try:
        ConsoleApp(store).run()
    except (KeyboardInterrupt, EOFError):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
