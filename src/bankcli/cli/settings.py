#!/usr/bin/env python3
"""
Settings CLI - User Settings and Merchant Mappings

Commands for viewing and changing settings stored in config.json, and for
moving merchant category mappings in and out of merchant_map.json.
"""

import json
from pathlib import Path

import click

from ..core.json_utils import read_json, write_json
from ..merchants.store import MerchantCategory
from ..merchants.transfer import export_mappings, merge_mappings, validate_merchant_map_structure
from ..settings.registry import (
    VALID_SETTINGS,
    format_setting_value,
    get_setting_default,
    is_known_setting,
    parse_setting_value,
)
from .common import echo_json, get_stores, handle_errors, plural, warn_load_error


@click.group()
def settings() -> None:
    """View and change bankcli settings."""
    pass


@settings.command("list")
@click.pass_context
def list_settings(ctx: click.Context) -> None:
    """
    List every setting with its current value.

    Sensitive values are masked. Settings without an explicit value show
    their default.
    """
    store = get_stores(ctx).config
    warn_load_error(store)

    for key, setting in VALID_SETTINGS.items():
        if store.has(key):
            value = format_setting_value(key, store.get(key))
        elif setting.default is not None:
            value = f"{format_setting_value(key, setting.default)} (default)"
        else:
            value = "(not set)"
        click.echo(f"{key}: {value}")
        click.echo(f"  {setting.description}")

    unknown = [key for key in store.get_all() if not is_known_setting(key)]
    if unknown:
        click.echo()
        click.echo("Other stored values:")
        for key in unknown:
            click.echo(f"{key}: {format_setting_value(key, store.get(key))}")


@settings.command("get")
@click.argument("key")
@click.pass_context
def get_setting(ctx: click.Context, key: str) -> None:
    """Show the value of one setting."""
    store = get_stores(ctx).config
    warn_load_error(store)

    if store.has(key):
        click.echo(format_setting_value(key, store.get(key)))
        return

    default = get_setting_default(key)
    if default is not None:
        click.echo(f"{format_setting_value(key, default)} (default)")
    elif is_known_setting(key):
        click.echo(f"Setting '{key}' is not set.")
    else:
        raise click.ClickException(f"Unknown setting '{key}'. Valid settings: {', '.join(VALID_SETTINGS)}")


@settings.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
@handle_errors
def set_setting(ctx: click.Context, key: str, value: str) -> None:
    """
    Set a setting.

    Examples:
      bank settings set format table
      bank settings set cacheData true
      bank settings set transferAllowlist 12-3456-7890123-00,12-3456-7890123-01
    """
    parsed = parse_setting_value(key, value)
    get_stores(ctx).config.set(key, parsed)
    click.echo(f"Setting '{key}' updated to '{format_setting_value(key, parsed)}'.")


@settings.command("reset")
@click.argument("key")
@click.pass_context
@handle_errors
def reset_setting(ctx: click.Context, key: str) -> None:
    """Remove a setting so that its default applies again."""
    store = get_stores(ctx).config
    if not store.has(key):
        click.echo(f"Setting '{key}' is not set.")
        return

    store.reset(key)
    default = get_setting_default(key)
    if default is not None:
        click.echo(f"Setting '{key}' reset to default '{format_setting_value(key, default)}'.")
    else:
        click.echo(f"Setting '{key}' removed.")


@settings.command("export-merchants")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write to a file")
@click.pass_context
@handle_errors
def export_merchants(ctx: click.Context, output: Path | None) -> None:
    """
    Export merchant category mappings as JSON.

    Examples:
      bank settings export-merchants > merchants.json
      bank settings export-merchants -o merchants.json
    """
    store = get_stores(ctx).merchants
    mappings = store.get_all_mappings()
    warn_load_error(store)

    document = export_mappings(mappings)
    if output is None:
        echo_json(document)
        return

    try:
        write_json(output, document)
    except OSError as e:
        raise click.ClickException(f"Could not write {output}: {e}") from e
    click.echo(f"Exported {plural(len(document), 'merchant mapping')} to {output}")


@settings.command("import-merchants")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--merge", "-m", is_flag=True, help="Merge with existing mappings (default replaces all)")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
@handle_errors
def import_merchants(ctx: click.Context, file: Path, merge: bool, yes: bool) -> None:
    """
    Import merchant category mappings from a JSON file.

    Examples:
      bank settings import-merchants merchants.json      # replace existing
      bank settings import-merchants merchants.json -m   # merge with existing
    """
    if not file.exists():
        raise click.ClickException(f"File not found: {file}")

    try:
        data = read_json(file)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Invalid JSON file: {e}") from e

    imported = validate_merchant_map_structure(data)
    if not imported:
        click.echo("⚠️  The import file contains no merchant mappings.", err=True)
        return

    store = get_stores(ctx).merchants
    existing = store.get_all_mappings()
    warn_load_error(store)

    if not yes:
        if merge:
            message = f"Merge {plural(len(imported), 'mapping')} with {len(existing)} existing?"
        elif existing:
            message = f"Replace {plural(len(existing), 'existing mapping')} with {len(imported)} from file?"
        else:
            message = f"Import {plural(len(imported), 'merchant mapping')}?"
        if not click.confirm(message, default=False):
            click.echo("Import cancelled.")
            return

    result = merge_mappings(existing, imported, merge)
    store.save_merchant_map(result.mappings)

    if merge:
        click.echo(
            f"Imported {plural(result.imported, 'mapping')} "
            f"({result.added} new, {result.updated} updated). Total: {result.total}"
        )
    else:
        click.echo(f"Imported {plural(result.total, 'merchant mapping')}.")


@settings.command("set-merchant")
@click.argument("merchant")
@click.argument("parent")
@click.argument("category")
@click.pass_context
@handle_errors
def set_merchant(ctx: click.Context, merchant: str, parent: str, category: str) -> None:
    """
    Map one merchant to a parent category and category.

    Example:
      bank settings set-merchant "Pak N Save" food groceries
    """
    mapping = MerchantCategory(parent=parent.strip().lower(), category=category.strip())

    get_stores(ctx).merchants.upsert_merchant_category(merchant, mapping)
    click.echo(f"Merchant '{merchant}' mapped to {mapping.parent} / {mapping.category}.")
