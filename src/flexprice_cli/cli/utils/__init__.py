"""
CLI utility modules for shared functionality.

Provides common utilities used across CLI commands:
- client: Credential resolution and API client access
- helpers: JSON request body loading
- output: Tables, detail views, status badges, spinners
"""

from flexprice_cli.cli.utils.client import CLIState, get_client, get_credentials
from flexprice_cli.cli.utils.helpers import load_json_file
from flexprice_cli.cli.utils.output import (
    add_table_rows,
    create_table,
    error,
    format_amount,
    info,
    print_banner,
    print_detail,
    print_table,
    spinner,
    status_badge,
    success,
    warning,
)

__all__ = [
    # Client
    "CLIState",
    "get_client",
    "get_credentials",
    # Helpers
    "load_json_file",
    # Output
    "create_table",
    "add_table_rows",
    "print_table",
    "print_detail",
    "status_badge",
    "format_amount",
    "success",
    "info",
    "warning",
    "error",
    "print_banner",
    "spinner",
]
