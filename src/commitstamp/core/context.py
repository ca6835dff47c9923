"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from commitstamp.core.command.abc import CommandRunner
from commitstamp.core.command.fake import FakeCommandRunner
from commitstamp.core.command.real import RealCommandRunner
from commitstamp.core.config import StampConfig, load_stamp_config
from commitstamp.core.feedback import (
    FakeFeedback,
    InteractiveFeedback,
    SuppressedFeedback,
    UserFeedback,
)
from commitstamp.core.source_file.abc import SourceFiles
from commitstamp.core.source_file.real import RealSourceFiles


@dataclass(frozen=True)
class StampContext:
    """Immutable context holding all dependencies for a stamping run.

    Created at CLI entry point and threaded through the commands. Frozen to
    prevent accidental modification at runtime.

    dry_run is only set by the stamp command, which swaps in DryRunSourceFiles
    via dataclasses.replace for --dry-run.
    """

    runner: CommandRunner
    files: SourceFiles
    feedback: UserFeedback
    config: StampConfig
    base_dir: Path
    dry_run: bool

    @staticmethod
    def for_test(
        runner: CommandRunner | None = None,
        files: SourceFiles | None = None,
        feedback: UserFeedback | None = None,
        config: StampConfig | None = None,
        base_dir: Path | None = None,
        dry_run: bool = False,
    ) -> "StampContext":
        """Create a context with fakes for every unspecified dependency.

        Files default to RealSourceFiles since tests point base_dir at tmp_path.

        Example:
            >>> runner = FakeCommandRunner(
            ...     default_result=CommandResult(exit_code=0, output_lines=("abc123",))
            ... )
            >>> ctx = StampContext.for_test(runner=runner, base_dir=tmp_path)
        """
        return StampContext(
            runner=runner if runner is not None else FakeCommandRunner(),
            files=files if files is not None else RealSourceFiles(),
            feedback=feedback if feedback is not None else FakeFeedback(),
            config=config if config is not None else StampConfig(),
            base_dir=base_dir if base_dir is not None else Path("/test/default/base"),
            dry_run=dry_run,
        )


def create_context(
    *,
    base_dir: Path | None = None,
    quiet: bool = False,
) -> StampContext:
    """Create production context with real implementations.

    Args:
        base_dir: Project directory holding pyproject.toml and src/main. Defaults
            to the current working directory.
        quiet: If True, only errors are reported

    Raises:
        ConfigError: If pyproject.toml has a malformed [tool.commitstamp] table
    """
    resolved_base = (base_dir if base_dir is not None else Path.cwd()).resolve()

    feedback: UserFeedback = SuppressedFeedback() if quiet else InteractiveFeedback()

    return StampContext(
        runner=RealCommandRunner(),
        files=RealSourceFiles(),
        feedback=feedback,
        config=load_stamp_config(resolved_base),
        base_dir=resolved_base,
        dry_run=False,
    )
