#!/usr/bin/env python3
"""
Shared CLI Helpers

Error translation, store access, output and the transaction filter options
used by both ``bank transactions`` and ``bank query save``.
"""

import functools
from collections.abc import Callable
from typing import Any

import click

from ..core.dates import parse_date_expression
from ..core.datastore_mixin import JsonDocumentStore
from ..core.errors import BankCliError
from ..core.json_utils import format_json
from ..stores import Stores
from ..transactions.models import DIRECTIONS, TransactionFilter


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Report package errors as ClickException (exit code 1, message on stderr)."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except BankCliError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def get_stores(ctx: click.Context) -> Stores:
    return ctx.obj["stores"]


def is_verbose(ctx: click.Context) -> bool:
    return bool(ctx.obj.get("verbose", False))


def warn_load_error(store: JsonDocumentStore) -> None:
    """Tell the user a store file was unreadable and defaults are in use."""
    message = store.get_load_error_message()
    if message:
        click.echo(f"⚠️  Warning: {message}. Using defaults.", err=True)


def echo_json(data: Any) -> None:
    click.echo(format_json(data, default=str))


def plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


_FILTER_OPTIONS = [
    click.option("--account", "account_id", help="Account ID (exact match)"),
    click.option("--category", help="Category (exact match)"),
    click.option("--parent-category", help="Parent category (exact match)"),
    click.option("--merchant", help="Merchant name(s), comma-separated"),
    click.option("--type", "type_", help="Transaction type, e.g. EFTPOS or TRANSFER"),
    click.option("--direction", type=click.Choice(DIRECTIONS), help="in = income, out = spending"),
    click.option("--min-amount", type=float, help="Minimum absolute amount"),
    click.option("--max-amount", type=float, help="Maximum absolute amount"),
    click.option("--since", help="Start date (YYYY-MM-DD or shortcut like 7d, lastmonth)"),
    click.option("--until", help="End date (YYYY-MM-DD or shortcut like today, endoflastmonth)"),
    click.option("--search", help="Transaction ID or text in the description"),
]

FILTER_PARAMS = (
    "account_id",
    "category",
    "parent_category",
    "merchant",
    "type_",
    "direction",
    "min_amount",
    "max_amount",
    "since",
    "until",
    "search",
)


def filter_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the transaction filter options to a command."""
    for option in reversed(_FILTER_OPTIONS):
        func = option(func)
    return func


def pop_filter(kwargs: dict[str, Any]) -> TransactionFilter:
    """
    Remove the filter options from a command's keyword arguments and build a filter.

    Date expressions are resolved to YYYY-MM-DD against today's date.

    Raises:
        ValidationError: On a bad date expression, amount range or date range
    """
    values = {name: kwargs.pop(name, None) for name in FILTER_PARAMS}

    for label in ("since", "until"):
        if values[label] is not None:
            values[label] = parse_date_expression(values[label], label).isoformat()

    filters = TransactionFilter(
        account_id=values["account_id"],
        category=values["category"],
        parent_category=values["parent_category"],
        merchant=values["merchant"],
        type=values["type_"],
        direction=values["direction"],
        min_amount=values["min_amount"],
        max_amount=values["max_amount"],
        since=values["since"],
        until=values["until"],
        search=values["search"],
    )
    filters.validate()
    return filters
