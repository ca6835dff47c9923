import click
from rich.console import Console
from rich.table import Table

from commitstamp.cli.output import machine_output, user_output
from commitstamp.core.config import (
    TOOL_SECTION,
    ConfigError,
    config_as_dict,
    parse_config_value,
    read_config_table,
    write_config_value,
)
from commitstamp.core.context import StampContext


def _format_value(value: bool | str) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return value


@click.group("config")
def config_group() -> None:
    """Manage commitstamp configuration in pyproject.toml."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: StampContext) -> None:
    """Print the effective configuration and where each value comes from."""
    configured = read_config_table(ctx.base_dir)

    table = Table(show_header=True, header_style="bold")
    table.add_column("key", style="cyan", no_wrap=True)
    table.add_column("value", no_wrap=True)
    table.add_column("source", no_wrap=True)

    for key, value in config_as_dict(ctx.config).items():
        source = "pyproject.toml" if key in configured else "default"
        table.add_row(key, _format_value(value), source)

    console = Console(stderr=True, width=200, force_terminal=True)
    console.print(table)


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: StampContext, key: str) -> None:
    """Print the effective value of a configuration key."""
    values = config_as_dict(ctx.config)
    if key not in values:
        user_output(f"Invalid key: {key}")
        raise SystemExit(1)
    machine_output(_format_value(values[key]))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: StampContext, key: str, value: str) -> None:
    """Persist a configuration value to [tool.commitstamp] in pyproject.toml."""
    try:
        parsed = parse_config_value(key, value)
    except ConfigError as e:
        user_output(click.style(f"Error: {e}", fg="red"))
        raise SystemExit(1) from e

    write_config_value(ctx.base_dir, key, parsed)
    user_output(f"Set {key}={_format_value(parsed)} in [tool.{TOOL_SECTION}]")
