"""
Tests for the resource command groups.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from flexprice_cli.cli.main import app
from flexprice_cli.core.config import Credentials
from flexprice_cli.core.exceptions import APIError, NotAuthenticatedError
from flexprice_cli.models.resources import Customer, Invoice, Meter


class TestAuthRequired:
    """Resource commands refuse to run without credentials."""

    def test_customers_list_requires_auth(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["customers", "list"])

        assert result.exit_code == 1
        assert isinstance(result.exception, NotAuthenticatedError)

    @patch("flexprice_cli.cli.commands.customers.customer_service")
    def test_api_key_flag_authenticates(
        self, mock_factory: MagicMock, runner: CliRunner
    ) -> None:
        """--api-key is honoured by resource commands."""
        mock_factory.return_value.list.return_value = []

        result = runner.invoke(app, ["--api-key", "fp_flag_key", "customers", "list"])

        assert result.exit_code == 0, result.output
        client = mock_factory.call_args[0][0]
        assert client.credentials.auth_header() == ("x-api-key", "fp_flag_key")

    @patch("flexprice_cli.cli.commands.customers.customer_service")
    def test_env_key_authenticates(
        self, mock_factory: MagicMock, runner: CliRunner, monkeypatch
    ) -> None:
        monkeypatch.setenv("FLEXPRICE_API_KEY", "fp_env_key")
        mock_factory.return_value.list.return_value = []

        result = runner.invoke(app, ["customers", "list"])

        assert result.exit_code == 0, result.output


class TestCustomerCommands:
    """Tests for `customers`."""

    @patch("flexprice_cli.cli.commands.customers.customer_service")
    def test_list_table(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        mock_factory.return_value.list.return_value = [
            Customer(id="cus_1", name="Acme", status="active"),
            Customer(id="cus_2", email="ops@beta.test"),
        ]

        result = runner.invoke(app, ["customers", "list"])

        assert result.exit_code == 0, result.output
        assert "Customers (2)" in result.output
        assert "cus_1" in result.output
        assert "Acme" in result.output
        assert "active" in result.output

    @patch("flexprice_cli.cli.commands.customers.customer_service")
    def test_list_json(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        mock_factory.return_value.list.return_value = [Customer(id="cus_1", name="Acme")]

        result = runner.invoke(app, ["customers", "list", "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [{"id": "cus_1", "name": "Acme"}]

    @patch("flexprice_cli.cli.commands.customers.customer_service")
    def test_list_empty(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        mock_factory.return_value.list.return_value = []

        result = runner.invoke(app, ["customers", "list"])

        assert "No results found." in result.output

    @patch("flexprice_cli.cli.commands.customers.customer_service")
    def test_get_json(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        mock_factory.return_value.get.return_value = Customer(id="cus_1", name="Acme")

        result = runner.invoke(app, ["customers", "get", "cus_1", "--json"])

        assert result.exit_code == 0, result.output
        mock_factory.return_value.get.assert_called_once_with("cus_1")
        assert json.loads(result.output)["name"] == "Acme"

    @patch("flexprice_cli.cli.commands.customers.customer_service")
    def test_create_from_file(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials, tmp_path: Path
    ) -> None:
        body = tmp_path / "customer.json"
        body.write_text('{"name": "Acme", "external_id": "acme"}')
        mock_factory.return_value.create.return_value = Customer(id="cus_new", name="Acme")

        result = runner.invoke(app, ["customers", "create", "--json", str(body)])

        assert result.exit_code == 0, result.output
        mock_factory.return_value.create.assert_called_once_with(
            {"name": "Acme", "external_id": "acme"}
        )
        assert "Customer created: cus_new" in result.output

    def test_create_missing_file(
        self, runner: CliRunner, logged_in: Credentials, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            app, ["customers", "create", "--json", str(tmp_path / "missing.json")]
        )

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_create_invalid_json(
        self, runner: CliRunner, logged_in: Credentials, tmp_path: Path
    ) -> None:
        body = tmp_path / "bad.json"
        body.write_text("{nope")

        result = runner.invoke(app, ["customers", "create", "--json", str(body)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    @patch("flexprice_cli.cli.commands.customers.customer_service")
    def test_delete(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        result = runner.invoke(app, ["customers", "delete", "cus_1"])

        assert result.exit_code == 0, result.output
        mock_factory.return_value.delete.assert_called_once_with("cus_1")
        assert "Customer cus_1 deleted." in result.output

    @patch("flexprice_cli.cli.commands.customers.customer_service")
    def test_api_error_propagates(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        mock_factory.return_value.get.side_effect = APIError(404, "Resource not found.")

        result = runner.invoke(app, ["customers", "get", "missing"])

        assert isinstance(result.exception, APIError)


class TestInvoiceCommands:
    """Tests for `invoices`."""

    @patch("flexprice_cli.cli.commands.invoices.invoice_service")
    def test_list_formats_amount(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        mock_factory.return_value.list.return_value = [
            Invoice(id="inv_1", invoice_status="finalized", amount_due=12.5, currency="usd")
        ]

        result = runner.invoke(app, ["invoices", "list"])

        assert result.exit_code == 0, result.output
        assert "12.50" in result.output
        assert "finalized" in result.output

    @patch("flexprice_cli.cli.commands.invoices.invoice_service")
    def test_pdf_written(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials, tmp_path: Path
    ) -> None:
        mock_factory.return_value.pdf.return_value = "%PDF-1.4"
        out = tmp_path / "inv.pdf"

        result = runner.invoke(app, ["invoices", "pdf", "inv_1", "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert out.read_text() == "%PDF-1.4"

    @patch("flexprice_cli.cli.commands.invoices.invoice_service")
    def test_finalize(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        mock_factory.return_value.finalize.return_value = None

        result = runner.invoke(app, ["invoices", "finalize", "inv_1"])

        assert result.exit_code == 0, result.output
        assert "Invoice inv_1 finalized." in result.output


class TestOtherCommands:
    """Smoke tests for the remaining groups."""

    @patch("flexprice_cli.cli.commands.meters.meter_service")
    def test_meters_list_aggregation(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        mock_factory.return_value.list.return_value = [
            Meter(id="m1", name="API calls", event_name="api_call", aggregation={"type": "count"})
        ]

        result = runner.invoke(app, ["meters", "list"])

        assert result.exit_code == 0, result.output
        assert "count" in result.output

    @patch("flexprice_cli.cli.commands.subscriptions.subscription_service")
    def test_subscription_cancel(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        mock_factory.return_value.cancel.return_value = {"id": "sub_1", "subscription_status": "cancelled"}

        result = runner.invoke(app, ["subscriptions", "cancel", "sub_1"])

        assert result.exit_code == 0, result.output
        mock_factory.return_value.cancel.assert_called_once_with("sub_1")

    @patch("flexprice_cli.cli.commands.wallets.wallet_service")
    def test_wallet_top_up(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials, tmp_path: Path
    ) -> None:
        body = tmp_path / "top_up.json"
        body.write_text('{"amount": 100}')
        mock_factory.return_value.top_up.return_value = None

        result = runner.invoke(app, ["wallets", "top-up", "wal_1", "--json", str(body)])

        assert result.exit_code == 0, result.output
        mock_factory.return_value.top_up.assert_called_once_with("wal_1", {"amount": 100})

    @patch("flexprice_cli.cli.commands.events.event_service")
    def test_events_ingest(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials, tmp_path: Path
    ) -> None:
        body = tmp_path / "event.json"
        body.write_text('{"event_name": "api_call", "external_customer_id": "c1"}')
        mock_factory.return_value.ingest.return_value = {"event_id": "evt_1"}

        result = runner.invoke(app, ["events", "ingest", "--json", str(body)])

        assert result.exit_code == 0, result.output
        assert "Event ingested successfully!" in result.output
        assert "evt_1" in result.output

    @patch("flexprice_cli.cli.commands.entitlements.entitlement_service")
    def test_entitlements_list(
        self, mock_factory: MagicMock, runner: CliRunner, logged_in: Credentials
    ) -> None:
        mock_factory.return_value.list.return_value = []

        result = runner.invoke(app, ["entitlements", "list", "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == []
