import click

from commitstamp.cli.output import machine_output
from commitstamp.core.context import StampContext
from commitstamp.core.orchestrator import resolve_commit_id


@click.command("show")
@click.pass_obj
def show_cmd(ctx: StampContext) -> None:
    """Print the commit id that 'stamp' would use.

    Prints a placeholder message instead of a hash when git cannot resolve
    HEAD, exactly as 'stamp' would record it.
    """
    machine_output(resolve_commit_id(ctx))
