"""
Command line access to the weather plugin configuration, for use outside
the launcher.

  hamr-weather-config list Units          value choices for Units
  hamr-weather-config list --json Count 7 hamr results as JSON
  hamr-weather-config apply '<payload>'   commit a candidate's payload
  hamr-weather-config show                print the live configuration
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from .candidates import list_candidates
from .config import ConfigStore
from .errors import WeatherConfigError
from .logs import configure_logging
from .mutator import apply


@click.group()
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to edit (default ~/.config/hamr/weather.json)",
)
@click.option(
    "-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr"
)
@click.pass_context
def main(ctx: click.Context, config_file: Path | None, verbose: bool) -> None:
    configure_logging("DEBUG" if verbose else None)
    ctx.obj = ConfigStore(config_file)


@main.command("list")
@click.argument("query", nargs=-1)
@click.option(
    "--json", "as_json", is_flag=True, default=False, help="Print hamr result dicts"
)
@click.pass_obj
def list_command(store: ConfigStore, query: tuple[str, ...], as_json: bool) -> None:
    """List candidates for QUERY (option name, then optional value)."""
    try:
        candidates = list_candidates(store.config, " ".join(query))
    except WeatherConfigError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps([c.to_result() for c in candidates], indent=2))
        return

    for candidate in candidates:
        if candidate.checked is None:
            mark = "    "
        else:
            mark = "[x] " if candidate.checked else "[ ] "
        click.echo(f"{mark}{candidate.title}")
        if candidate.subtitle:
            click.echo(f"      {candidate.subtitle}")
        if candidate.payload is not None:
            click.echo(f"      payload: {candidate.payload}")


@main.command("apply")
@click.argument("payload")
@click.pass_obj
def apply_command(store: ConfigStore, payload: str) -> None:
    """Commit PAYLOAD (as printed by `list`) and save it."""
    try:
        status = apply(store, payload)
    except WeatherConfigError as e:
        raise click.ClickException(str(e)) from e
    click.echo(status)


@main.command("show")
@click.pass_obj
def show_command(store: ConfigStore) -> None:
    """Print the live configuration as JSON."""
    click.echo(json.dumps(store.config.to_dict(), indent=2))


if __name__ == "__main__":
    main()
