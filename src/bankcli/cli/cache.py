#!/usr/bin/env python3
"""
Cache CLI - Local Account and Transaction Cache
"""

import click

from ..cache.store import CacheStore
from .common import echo_json, get_stores, plural, warn_load_error


@click.group()
def cache() -> None:
    """Inspect and clear the local data cache."""
    pass


def _warn_write_error(store: CacheStore) -> None:
    message = store.get_last_write_error()
    if message:
        click.echo(f"⚠️  Warning: cache changes were not saved: {message}", err=True)


@cache.command("info")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def cache_info(ctx: click.Context, as_json: bool) -> None:
    """Show what is cached and when it was last updated."""
    stores = get_stores(ctx)
    store = stores.cache
    warn_load_error(store)
    info = store.get_cache_info()

    if as_json:
        echo_json({**info.to_dict(), "enabled": stores.cache_enabled(), "file": str(store.path)})
        return

    click.echo("Cache Status:")
    click.echo(f"  Enabled: {'yes' if stores.cache_enabled() else 'no'}")
    click.echo(f"  File: {store.path}")
    for name, entry in (("Transactions", info.transactions), ("Accounts", info.accounts)):
        if entry.count:
            click.echo(f"  {name}: {entry.count} (updated {entry.last_update})")
        else:
            click.echo(f"  {name}: none")


@cache.command("clear")
@click.option("--accounts", is_flag=True, help="Only clear cached accounts")
@click.option("--transactions", is_flag=True, help="Only clear cached transactions")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def cache_clear(ctx: click.Context, accounts: bool, transactions: bool, yes: bool) -> None:
    """
    Clear cached data.

    With neither --accounts nor --transactions, everything is cleared.
    """
    store = get_stores(ctx).cache
    info = store.get_cache_info()

    if accounts and not transactions:
        target, count = "accounts", info.accounts.count
    elif transactions and not accounts:
        target, count = "transactions", info.transactions.count
    else:
        target, count = "all", info.accounts.count + info.transactions.count

    if count == 0:
        click.echo("Nothing to clear.")
        return

    if not yes:
        what = "all cached data" if target == "all" else f"cached {target}"
        if not click.confirm(f"Clear {what} ({plural(count, 'item')})?", default=False):
            click.echo("Clear cancelled.")
            return

    if target == "accounts":
        store.clear_account_cache()
    elif target == "transactions":
        store.clear_transaction_cache()
    else:
        store.clear_cache()

    _warn_write_error(store)
    click.echo(f"Cleared {plural(count, 'cached item')}.")
