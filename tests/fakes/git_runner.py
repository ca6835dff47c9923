"""Builders for FakeCommandRunner instances that answer `git rev-parse HEAD`."""

from commitstamp.core.command.abc import CommandResult
from commitstamp.core.command.fake import FakeCommandRunner

REV_PARSE_HEAD = ("git", "rev-parse", "HEAD")


def git_head_runner(*lines: str, exit_code: int = 0) -> FakeCommandRunner:
    """Create a runner whose `git rev-parse HEAD` prints lines and exits with exit_code.

    Example:
        >>> runner = git_head_runner("deadbeef")
        >>> runner = git_head_runner("fatal: not a git repository", exit_code=128)
    """
    return FakeCommandRunner(
        results={REV_PARSE_HEAD: CommandResult(exit_code=exit_code, output_lines=lines)}
    )
