import logging
import os
from pathlib import Path

import click

from commitstamp.cli.commands.config import config_group
from commitstamp.cli.commands.show import show_cmd
from commitstamp.cli.commands.stamp import stamp_cmd
from commitstamp.cli.output import user_output
from commitstamp.core.config import ConfigError
from commitstamp.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Enable debug logging if COMMITSTAMP_DEBUG environment variable is set
if os.getenv("COMMITSTAMP_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="commitstamp")
@click.option(
    "-C",
    "--base-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory holding pyproject.toml and src/main (default: current directory).",
)
@click.option("-q", "--quiet", is_flag=True, help="Only report errors.")
@click.pass_context
def cli(ctx: click.Context, base_dir: Path | None, quiet: bool) -> None:
    """Stamp the current git commit id into build properties and source constants."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(base_dir=base_dir, quiet=quiet)
        except ConfigError as e:
            user_output(click.style(f"Error: {e}", fg="red"))
            raise SystemExit(1) from e


cli.add_command(config_group)
cli.add_command(show_cmd)
cli.add_command(stamp_cmd)


def main() -> None:
    """CLI entry point used by the `commitstamp` console script."""
    cli()
