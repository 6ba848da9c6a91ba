"""Tests for CLI output and helper utilities."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
import typer
from rich.console import Console

from flexprice_cli.cli.utils.helpers import load_json_file
from flexprice_cli.cli.utils.output import (
    error,
    format_amount,
    print_detail,
    print_table,
    status_badge,
    success,
    to_jsonable,
)
from flexprice_cli.models.resources import Customer


def _console() -> Console:
    return Console(file=io.StringIO(), width=120)


def _text(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


class TestStatusBadge:
    """Tests for status_badge function."""

    @pytest.mark.parametrize("status", ["active", "published", "paid", "finalized"])
    def test_green_statuses(self, status: str) -> None:
        assert status_badge(status) == f"[bold green]{status}[/bold green]"

    @pytest.mark.parametrize("status", ["draft", "pending"])
    def test_yellow_statuses(self, status: str) -> None:
        assert status_badge(status) == f"[yellow]{status}[/yellow]"

    @pytest.mark.parametrize("status", ["cancelled", "canceled", "void", "voided", "inactive"])
    def test_red_statuses(self, status: str) -> None:
        assert status_badge(status) == f"[red]{status}[/red]"

    def test_case_insensitive(self) -> None:
        assert status_badge("ACTIVE") == "[bold green]ACTIVE[/bold green]"

    def test_unknown_status_unstyled(self) -> None:
        assert status_badge("archived") == "archived"

    def test_none(self) -> None:
        assert status_badge(None) == ""


class TestFormatAmount:
    """Tests for format_amount function."""

    def test_two_decimals(self) -> None:
        assert format_amount(12.5) == "12.50"

    def test_none(self) -> None:
        assert format_amount(None) == ""


class TestToJsonable:
    """Tests for model conversion."""

    def test_model_drops_unset_fields(self) -> None:
        assert to_jsonable(Customer(id="cus_1", name="Acme")) == {"id": "cus_1", "name": "Acme"}

    def test_extra_fields_kept(self) -> None:
        customer = Customer.model_validate({"id": "cus_1", "metadata": {"tier": "gold"}})

        assert to_jsonable(customer)["metadata"] == {"tier": "gold"}

    def test_list_of_models(self) -> None:
        assert to_jsonable([Customer(id="a"), Customer(id="b")]) == [{"id": "a"}, {"id": "b"}]

    def test_plain_data_unchanged(self) -> None:
        assert to_jsonable({"a": 1}) == {"a": 1}


class TestPrinting:
    """Tests for table and detail printing."""

    def test_table_rows(self) -> None:
        console = _console()

        print_table(
            "Customers",
            [("ID", "dim", "id"), ("Name", "cyan", "name")],
            [Customer(id="cus_1", name="Acme")],
            console=console,
        )

        output = _text(console)
        assert "Customers (1)" in output
        assert "cus_1" in output
        assert "Acme" in output

    def test_empty_table(self) -> None:
        console = _console()

        print_table("Customers", [("ID", "dim", "id")], [], console=console)

        assert "No results found." in _text(console)

    def test_detail_json(self) -> None:
        console = _console()

        print_detail({"id": "cus_1"}, as_json=True, console=console)

        assert _text(console).strip() == '{\n  "id": "cus_1"\n}'

    def test_messages_escape_markup(self) -> None:
        console = _console()

        success("saved [bold]x[/bold]", console=console)
        error("failed [red]", console=console)

        output = _text(console)
        assert "saved [bold]x[/bold]" in output
        assert "failed [red]" in output


class TestLoadJsonFile:
    """Tests for load_json_file function."""

    def test_loads(self, tmp_path: Path) -> None:
        path = tmp_path / "body.json"
        path.write_text('{"name": "Acme"}')

        assert load_json_file(path) == {"name": "Acme"}

    def test_missing_file_exits(self, tmp_path: Path) -> None:
        with pytest.raises(typer.Exit):
            load_json_file(tmp_path / "missing.json", console=_console())

    def test_invalid_json_exits(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{nope")

        with pytest.raises(typer.Exit):
            load_json_file(path, console=_console())
