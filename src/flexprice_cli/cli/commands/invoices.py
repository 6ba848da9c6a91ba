"""
Invoice management commands.

Provides commands for viewing invoices, moving them through their
lifecycle (finalize, void) and downloading the PDF.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from flexprice_cli.cli.utils import get_client
from flexprice_cli.cli.utils.output import (
    Column,
    format_amount,
    print_detail,
    print_table,
    spinner,
    status_badge,
    success,
)
from flexprice_cli.services.billing import InvoiceService, invoice_service

app = typer.Typer(help="Manage invoices")

COLUMNS: list[Column] = [
    ("ID", "dim", "id"),
    ("Customer", "cyan", "customer_id"),
    ("Status", "", "invoice_status"),
    ("Payment", "", "payment_status"),
    ("Amount", "", "amount_due"),
    ("Currency", "", "currency"),
]


def _get_service(ctx: typer.Context) -> InvoiceService:
    """Get invoice service."""
    return invoice_service(get_client(ctx))


@app.command("list")
def list_invoices(
    ctx: typer.Context,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List all invoices."""
    svc = _get_service(ctx)
    with spinner("Fetching invoices..."):
        invoices = svc.list()
    print_table(
        "Invoices",
        COLUMNS,
        invoices,
        as_json=as_json,
        formatters={
            "invoice_status": status_badge,
            "payment_status": status_badge,
            "amount_due": format_amount,
        },
    )


@app.command("get")
def get_invoice(
    ctx: typer.Context,
    invoice_id: Annotated[str, typer.Argument(help="Invoice ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Get an invoice by ID."""
    svc = _get_service(ctx)
    with spinner("Fetching invoice..."):
        invoice = svc.get(invoice_id)
    print_detail(invoice, as_json=as_json)


@app.command("finalize")
def finalize_invoice(
    ctx: typer.Context,
    invoice_id: Annotated[str, typer.Argument(help="Invoice ID")],
) -> None:
    """Finalize a draft invoice."""
    svc = _get_service(ctx)
    with spinner("Finalizing invoice..."):
        result = svc.finalize(invoice_id)
    success(f"Invoice {invoice_id} finalized.")
    if result is not None:
        print_detail(result)


@app.command("void")
def void_invoice(
    ctx: typer.Context,
    invoice_id: Annotated[str, typer.Argument(help="Invoice ID")],
) -> None:
    """Void an invoice."""
    svc = _get_service(ctx)
    with spinner("Voiding invoice..."):
        result = svc.void(invoice_id)
    success(f"Invoice {invoice_id} voided.")
    if result is not None:
        print_detail(result)


@app.command("pdf")
def download_pdf(
    ctx: typer.Context,
    invoice_id: Annotated[str, typer.Argument(help="Invoice ID")],
    output: Annotated[Path, typer.Option("--output", "-o", help="Output file path")] = Path(
        "invoice.pdf"
    ),
) -> None:
    """Download the invoice PDF."""
    svc = _get_service(ctx)
    with spinner("Downloading PDF..."):
        content = svc.pdf(invoice_id)
    output.write_text(content, encoding="utf-8")
    success(f"Invoice PDF saved to {output}")
