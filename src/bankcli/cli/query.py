#!/usr/bin/env python3
"""
Query CLI - Saved Transaction Queries

Save a set of transaction filters under a name and re-run it later against
the locally cached transactions.
"""

from typing import Any

import click

from ..core.dates import parse_date_expression
from ..core.errors import ValidationError
from ..queries.models import SavedQuery
from ..queries.store import validate_query_name
from ..transactions.analysis import apply_merchant_mappings
from ..transactions.filters import describe_filter, filter_transactions
from .common import echo_json, filter_options, get_stores, handle_errors, is_verbose, plural, pop_filter, warn_load_error


@click.group()
def query() -> None:
    """Save and run named transaction queries."""
    pass


def _format_query_line(saved: SavedQuery) -> str:
    line = saved.name
    if saved.description:
        line += f" - {saved.description}"
    return line


@query.command("save")
@click.argument("name")
@click.option("--description", "-d", help="What the query is for")
@filter_options
@click.pass_context
@handle_errors
def save_query(ctx: click.Context, name: str, description: str | None, **kwargs: Any) -> None:
    """
    Save transaction filters under a name.

    Date shortcuts are resolved when the query is saved.

    Examples:
      bank query save groceries --merchant "Countdown,Pak N Save" --direction out
      bank query save big-spends --min-amount 500 -d "Anything over $500"
    """
    validation = validate_query_name(name)
    if not validation.valid:
        raise click.ClickException(validation.error)

    store = get_stores(ctx).queries
    if store.exists(name):
        raise click.ClickException(
            f'Query "{name.strip()}" already exists. Delete it first or choose another name.'
        )

    filters = pop_filter(kwargs)
    saved = store.save(name, filters, description=description)
    click.echo(f'✅ Query "{saved.name}" saved.')
    for predicate in describe_filter(saved.filters):
        click.echo(f"  {predicate}")


@query.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_queries(ctx: click.Context, as_json: bool) -> None:
    """List saved queries, newest first."""
    store = get_stores(ctx).queries
    saved = store.list()
    warn_load_error(store)

    if as_json:
        echo_json([q.to_dict() for q in saved])
        return

    if not saved:
        click.echo("No saved queries. Create one with 'bank query save <name> [filters]'.")
        return

    for q in saved:
        click.echo(_format_query_line(q))
        if is_verbose(ctx):
            click.echo(f"  Created: {q.created_at}")
            click.echo(f"  Last used: {q.last_used or 'never'}")
            for predicate in describe_filter(q.filters):
                click.echo(f"  {predicate}")


@query.command("show")
@click.argument("name")
@click.pass_context
def show_query(ctx: click.Context, name: str) -> None:
    """Show one saved query as JSON."""
    saved = get_stores(ctx).queries.get(name)
    if saved is None:
        raise click.ClickException(f'Query "{name}" not found.')
    echo_json(saved.to_dict())


@query.command("delete")
@click.argument("name")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
@handle_errors
def delete_query(ctx: click.Context, name: str, yes: bool) -> None:
    """Delete a saved query."""
    store = get_stores(ctx).queries
    if not store.exists(name):
        raise click.ClickException(f'Query "{name}" not found.')

    if not yes and not click.confirm(f'Delete query "{name.strip()}"?', default=False):
        click.echo("Delete cancelled.")
        return

    store.delete(name)
    click.echo(f'Query "{name.strip()}" deleted.')


@query.command("rename")
@click.argument("old_name")
@click.argument("new_name")
@click.pass_context
@handle_errors
def rename_query(ctx: click.Context, old_name: str, new_name: str) -> None:
    """Rename a saved query."""
    store = get_stores(ctx).queries
    if store.rename(old_name, new_name):
        click.echo(f'Query "{old_name.strip()}" renamed to "{new_name.strip()}".')
        return

    if not store.exists(old_name):
        raise click.ClickException(f'Query "{old_name}" not found.')
    raise click.ClickException(f'Query "{new_name.strip()}" already exists.')


@query.command("run")
@click.argument("name")
@click.option("--since", help="Override the saved start date")
@click.option("--until", help="Override the saved end date")
@click.option("--no-mappings", is_flag=True, help="Ignore merchant category mappings")
@click.pass_context
@handle_errors
def run_query(ctx: click.Context, name: str, since: str | None, until: str | None, no_mappings: bool) -> None:
    """
    Run a saved query against the cached transactions.

    Examples:
      bank query run groceries
      bank query run groceries --since lastmonth --until endoflastmonth
    """
    stores = get_stores(ctx)
    saved = stores.queries.get(name)
    if saved is None:
        raise click.ClickException(f'Query "{name}" not found.')

    filters = saved.filters
    if since is not None:
        filters.since = parse_date_expression(since, "since").isoformat()
    if until is not None:
        filters.until = parse_date_expression(until, "until").isoformat()
    try:
        filters.validate()
    except ValidationError as e:
        raise click.ClickException(f"Saved query has invalid filters: {e}") from e

    transactions = stores.cache.get_transactions()
    warn_load_error(stores.cache)
    if not transactions:
        click.echo(
            "No cached transactions. Turn on caching with 'bank settings set cacheData true' and fetch again.",
            err=True,
        )

    if not no_mappings:
        transactions = apply_merchant_mappings(transactions, stores.merchants.get_all_mappings())

    results = filter_transactions(transactions, filters)
    stores.queries.mark_used(saved.name)

    if not results:
        click.echo(f'No transactions matched query "{saved.name}".', err=True)
        click.echo(f"Filters: {', '.join(describe_filter(filters))}", err=True)

    echo_json(results)
    if is_verbose(ctx):
        click.echo(f"{plural(len(results), 'transaction')} matched", err=True)
