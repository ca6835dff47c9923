"""Sequencing of a stamping run: resolve once, then publish and/or write."""

from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from commitstamp.core.command.abc import CommandLaunchError
from commitstamp.core.commit_id import UNRESOLVED_COMMIT_ID, CommitIdResolver
from commitstamp.core.context import StampContext
from commitstamp.core.properties import publish_property
from commitstamp.core.source_file.languages import UnknownLanguageError, get_language
from commitstamp.core.source_file.target import TargetFileSpec
from commitstamp.core.source_file.writers import (
    ConstantSiteNotFoundError,
    LiteralSpliceWriter,
    select_writer,
)


class StepOutcome(Enum):
    """What happened to one of the two update steps."""

    DISABLED = "disabled"
    WRITTEN = "written"
    CREATED = "created"
    EDITED = "edited"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StampResult:
    """Summary of a stamping run."""

    commit_id: str
    property_outcome: StepOutcome
    file_outcome: StepOutcome
    target_path: Path | None = None

    @property
    def has_failures(self) -> bool:
        """True if any enabled step was skipped or failed."""
        bad = (StepOutcome.SKIPPED, StepOutcome.FAILED)
        return self.property_outcome in bad or self.file_outcome in bad


def resolve_commit_id(ctx: StampContext) -> str:
    """Resolve the commit id, degrading a launch failure to the fallback value."""
    resolver = CommitIdResolver(ctx.runner, cwd=ctx.base_dir)
    try:
        return resolver.resolve()
    except CommandLaunchError as e:
        ctx.feedback.error(f"Error: {e}")
        return UNRESOLVED_COMMIT_ID


def _update_property(
    ctx: StampContext, properties: MutableMapping[str, str], commit_id: str
) -> StepOutcome:
    ctx.feedback.info("Updating build property.")
    if publish_property(properties, ctx.config.property_name, commit_id, ctx.feedback):
        return StepOutcome.WRITTEN
    return StepOutcome.SKIPPED


def _update_source_file(ctx: StampContext, commit_id: str) -> tuple[StepOutcome, Path | None]:
    config = ctx.config
    ctx.feedback.info("Updating source file.")

    if not config.class_name:
        ctx.feedback.error(
            "Error: If 'class_update' is enabled, 'class_name' must be a valid "
            "fully-qualified type name."
        )
        return StepOutcome.SKIPPED, None
    if not config.class_constant:
        ctx.feedback.error(
            "Error: If 'class_update' is enabled, 'class_constant' must be a constant name."
        )
        return StepOutcome.SKIPPED, None

    try:
        language = get_language(config.language)
    except UnknownLanguageError as e:
        ctx.feedback.error(f"Error: {e}")
        return StepOutcome.SKIPPED, None

    spec = TargetFileSpec(
        type_name=config.class_name,
        constant_name=config.class_constant,
        base_dir=ctx.base_dir,
        language=language,
    )
    writer = select_writer(ctx.files, ctx.feedback, spec)

    if isinstance(writer, LiteralSpliceWriter):
        ctx.feedback.info(
            f"Source file '{spec.path}' exists. Setting constant '{spec.constant_name}'."
        )
        success_outcome = StepOutcome.EDITED
    else:
        ctx.feedback.info(f"Source file '{spec.path}' does not exist. Creating...")
        success_outcome = StepOutcome.CREATED

    try:
        written = writer.write(spec, commit_id)
    except ConstantSiteNotFoundError as e:
        ctx.feedback.error(f"Error: Cannot update {spec.path}: {e}. File left unchanged.")
        return StepOutcome.FAILED, spec.path

    if not written:
        return StepOutcome.FAILED, spec.path
    return success_outcome, spec.path


def run_stamp(ctx: StampContext, properties: MutableMapping[str, str]) -> StampResult:
    """Resolve the commit id once and apply the enabled updates.

    The property update and the source file update are independent: a skip or
    failure of one never prevents the other.

    Args:
        ctx: Stamping context (runner, files, feedback, config)
        properties: Build property map that receives the commit id

    Returns:
        StampResult describing both steps
    """
    commit_id = resolve_commit_id(ctx)
    ctx.feedback.info(f"Commit ID: {commit_id}")

    property_outcome = StepOutcome.DISABLED
    if ctx.config.property_update:
        property_outcome = _update_property(ctx, properties, commit_id)

    file_outcome = StepOutcome.DISABLED
    target_path: Path | None = None
    if ctx.config.class_update:
        file_outcome, target_path = _update_source_file(ctx, commit_id)

    return StampResult(
        commit_id=commit_id,
        property_outcome=property_outcome,
        file_outcome=file_outcome,
        target_path=target_path,
    )
