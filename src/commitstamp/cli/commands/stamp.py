"""CLI command entry point for stamp."""

import dataclasses
import logging

import click

from commitstamp.cli.output import machine_output
from commitstamp.core.context import StampContext
from commitstamp.core.orchestrator import StepOutcome, run_stamp
from commitstamp.core.source_file.dry_run import DryRunSourceFiles
from commitstamp.core.source_file.languages import LANGUAGES

logger = logging.getLogger(__name__)


@click.command("stamp")
@click.option(
    "--property/--no-property",
    "property_update",
    default=None,
    help="Publish the commit id as a build property (config: property_update).",
)
@click.option(
    "--property-name",
    default=None,
    help="Name of the build property (config: property_name).",
)
@click.option(
    "--source/--no-source",
    "class_update",
    default=None,
    help="Write the commit id into a source constant (config: class_update).",
)
@click.option(
    "--class-name",
    default=None,
    help="Fully-qualified type holding the constant (config: class_name).",
)
@click.option(
    "--class-constant",
    default=None,
    help="Name of the string constant (config: class_constant).",
)
@click.option(
    "--language",
    type=click.Choice(sorted(LANGUAGES), case_sensitive=False),
    default=None,
    help="Language of the generated source file (config: language).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show the file that would be written without writing it.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 1 if an enabled step was skipped or failed.",
)
@click.pass_obj
def stamp_cmd(
    ctx: StampContext,
    property_update: bool | None,
    property_name: str | None,
    class_update: bool | None,
    class_name: str | None,
    class_constant: str | None,
    language: str | None,
    dry_run: bool,
    strict: bool,
) -> None:
    """Resolve the HEAD commit id and stamp it into the build.

    With property update enabled, prints the published properties on stdout as
    name=value lines. With source update enabled, creates the constant's file
    from a template, or replaces only the constant's string literal when the
    file already exists.

    Command-line options override [tool.commitstamp] in pyproject.toml for this
    run only.

    Example:
        commitstamp stamp --source --class-name com.acme.BuildInfo --class-constant SHA
    """
    overrides = {
        "property_update": property_update,
        "property_name": property_name,
        "class_update": class_update,
        "class_name": class_name,
        "class_constant": class_constant,
        "language": language.lower() if language is not None else None,
    }
    config = dataclasses.replace(
        ctx.config, **{key: value for key, value in overrides.items() if value is not None}
    )
    logger.debug("Effective config: %s", config)

    run_ctx = dataclasses.replace(ctx, config=config)
    if dry_run and not ctx.dry_run:
        run_ctx = dataclasses.replace(run_ctx, files=DryRunSourceFiles(ctx.files), dry_run=True)

    properties: dict[str, str] = {}
    result = run_stamp(run_ctx, properties)

    for name, value in properties.items():
        machine_output(f"{name}={value}")

    if result.file_outcome in (StepOutcome.CREATED, StepOutcome.EDITED):
        verb = "Would update" if run_ctx.dry_run else "Updated"
        ctx.feedback.success(f"✓ {verb} {result.target_path}")

    if strict and result.has_failures:
        raise SystemExit(1)
