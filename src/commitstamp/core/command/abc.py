"""External command execution interface.

This module provides a clean abstraction over process spawning, making the
commit id lookup testable without a real git binary.

Architecture:
- CommandRunner: Abstract base class defining the interface
- RealCommandRunner: Production implementation using subprocess
- FakeCommandRunner: In-memory implementation with canned results
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single external command invocation.

    exit_code is always set. output_lines is never None, only possibly empty.
    """

    exit_code: int
    output_lines: tuple[str, ...] = ()


class CommandLaunchError(RuntimeError):
    """The command could not be started at all (missing binary, not executable).

    Distinct from a command that ran and returned a non-zero exit code, which is
    reported through CommandResult.exit_code instead.
    """

    def __init__(self, executable: str, reason: str) -> None:
        super().__init__(f"Could not launch '{executable}': {reason}")
        self.executable = executable
        self.reason = reason


class CommandRunner(ABC):
    """Abstract interface for running external commands.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def run(self, executable: str, *args: str, cwd: Path | None = None) -> CommandResult:
        """Run a command and wait for it to exit.

        Args:
            executable: Program to run (looked up on PATH)
            *args: Arguments passed to the program
            cwd: Working directory for the process (None uses the current one)

        Returns:
            CommandResult with the exit code and the output lines, in order

        Raises:
            CommandLaunchError: If the process cannot be spawned. A non-zero exit
                code never raises.
        """
        ...
