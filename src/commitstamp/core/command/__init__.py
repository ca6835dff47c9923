"""External command execution subpackage."""

from commitstamp.core.command.abc import CommandLaunchError, CommandResult, CommandRunner
from commitstamp.core.command.fake import FakeCommandRunner
from commitstamp.core.command.real import RealCommandRunner

__all__ = [
    "CommandRunner",
    "CommandResult",
    "CommandLaunchError",
    "RealCommandRunner",
    "FakeCommandRunner",
]
