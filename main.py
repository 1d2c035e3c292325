#!/usr/bin/env python3
"""
steamer-plugin: inspect and create steamer config files
Usage:
  steamer-plugin show --name steamer-plugin-kit
  steamer-plugin create --name steamer-plugin-kit --data '{"a": 1}'
  steamer-plugin tool --defaults
  steamer-plugin modules
"""
import json
import sys

import click

from steamer_plugin import ConfigExistsError, Scope, SteamerPlugin
from steamer_plugin.logging_config import setup_logging


def _scope(is_global):
    return Scope.GLOBAL if is_global else Scope.LOCAL


def _dump(data):
    return json.dumps(data, indent=4, ensure_ascii=False)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Log config lookups to stderr")
@click.pass_context
def cli(ctx, verbose):
    """Read and write steamer plugin config files."""
    setup_logging("DEBUG" if verbose else None)
    ctx.obj = SteamerPlugin("steamer-plugin")


# ── Plugin config ──────────────────────────────────────────────────────────

@cli.command()
@click.option("--name", "-n", help="Config name (defaults to steamer-plugin)")
@click.option("--ext", "-e", "extension", help="Config file extension")
@click.option("--global", "-g", "is_global", is_flag=True, help="Read the global config only")
@click.option("--folder", "-f", type=click.Path(file_okay=False), help="Project folder for the local config")
@click.pass_obj
def show(plugin, name, extension, is_global, folder):
    """Print a merged config."""
    config = plugin.store.read_config(name, extension, _scope(is_global), folder)
    click.echo(_dump(config))


@cli.command()
@click.option("--name", "-n", help="Config name (defaults to steamer-plugin)")
@click.option("--ext", "-e", "extension", help="Config file extension")
@click.option("--global", "-g", "is_global", is_flag=True, help="Write to the home directory")
@click.option("--overwrite", "-o", is_flag=True, help="Replace an existing file")
@click.option("--data", "-d", default="{}", show_default=True, help="Config payload as a JSON object")
@click.option("--folder", "-f", type=click.Path(file_okay=False), help="Project folder for the local config")
@click.pass_obj
def create(plugin, name, extension, is_global, overwrite, data, folder):
    """Create a config file."""
    payload = _load_payload(data)
    try:
        path = plugin.store.create_config(payload, name, extension, _scope(is_global),
                                          overwrite, folder)
    except ConfigExistsError:
        sys.exit(1)
    plugin.reporter.success(f"Created {path}")


# ── Tool config ────────────────────────────────────────────────────────────

@cli.command()
@click.option("--global", "-g", "is_global", is_flag=True, help="Read the global tool config only")
@click.option("--defaults", is_flag=True, help="Layer the tool config over the built-in defaults")
@click.pass_obj
def tool(plugin, is_global, defaults):
    """Print the shared steamer config."""
    if defaults:
        config = plugin.store.read_tool_default_config()
    else:
        config = plugin.store.read_tool_config(_scope(is_global))
    click.echo(_dump(config))


@cli.command()
@click.pass_obj
def modules(plugin):
    """Print where plugins are installed."""
    path = plugin.store.global_modules()
    if not path:
        plugin.reporter.warn("No global module directory found.")
        sys.exit(1)
    click.echo(path)


def _load_payload(data):
    try:
        payload = json.loads(data)
    except ValueError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--data")
    if not isinstance(payload, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--data")
    return payload


def main():
    cli(prog_name="steamer-plugin")


if __name__ == "__main__":
    main()
