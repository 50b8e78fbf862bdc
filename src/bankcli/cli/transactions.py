#!/usr/bin/env python3
"""
Transactions CLI - Filter and Summarise Cached Transactions
"""

from typing import Any

import click

from ..transactions.analysis import apply_merchant_mappings, category_breakdown, summarize
from ..transactions.filters import describe_filter, filter_transactions
from .common import (
    echo_json,
    filter_options,
    get_stores,
    handle_errors,
    is_verbose,
    plural,
    pop_filter,
    warn_load_error,
)


@click.command()
@filter_options
@click.option("--summary", is_flag=True, help="Show totals instead of the transactions")
@click.option("--breakdown", is_flag=True, help="Show spending by parent category")
@click.option("--no-mappings", is_flag=True, help="Ignore merchant category mappings")
@click.pass_context
@handle_errors
def transactions(ctx: click.Context, summary: bool, breakdown: bool, no_mappings: bool, **kwargs: Any) -> None:
    """
    List cached transactions matching the given filters.

    Examples:
      bank transactions --since 7d --direction out
      bank transactions --merchant "Countdown,Pak N Save" --summary
      bank transactions --since lastmonth --until endoflastmonth --breakdown
    """
    filters = pop_filter(kwargs)
    stores = get_stores(ctx)

    records = stores.cache.get_transactions()
    warn_load_error(stores.cache)
    if not records:
        click.echo("No cached transactions.", err=True)

    if not no_mappings:
        records = apply_merchant_mappings(records, stores.merchants.get_all_mappings())

    results = filter_transactions(records, filters)

    if not results and not filters.is_empty():
        click.echo(f"No transactions matched: {', '.join(describe_filter(filters))}", err=True)

    if summary or breakdown:
        output: dict[str, Any] = {}
        if summary:
            output["summary"] = summarize(results).to_dict()
        if breakdown:
            output["categories"] = category_breakdown(results)
        echo_json(output)
        return

    echo_json(results)
    if is_verbose(ctx):
        click.echo(f"{plural(len(results), 'transaction')} matched", err=True)
