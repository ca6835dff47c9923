"""Fake CommandRunner implementation for testing."""

from pathlib import Path

from commitstamp.core.command.abc import CommandLaunchError, CommandResult, CommandRunner


class FakeCommandRunner(CommandRunner):
    """In-memory fake that returns canned results without spawning processes.

    Constructor Injection:
    - Results are keyed by the full command tuple (executable plus args)
    - Commands without a configured result return default_result

    Examples:
        >>> runner = FakeCommandRunner(
        ...     results={("git", "rev-parse", "HEAD"): CommandResult(0, ("abc123",))}
        ... )
        >>> runner.run("git", "rev-parse", "HEAD").output_lines
        ('abc123',)

        # Simulate git not being installed
        >>> runner = FakeCommandRunner(missing_executables={"git"})
    """

    def __init__(
        self,
        *,
        results: dict[tuple[str, ...], CommandResult] | None = None,
        default_result: CommandResult | None = None,
        missing_executables: set[str] | None = None,
    ) -> None:
        self._results = results or {}
        self._default_result = default_result or CommandResult(exit_code=0, output_lines=())
        self._missing_executables = missing_executables or set()
        self._calls: list[tuple[tuple[str, ...], Path | None]] = []

    def run(self, executable: str, *args: str, cwd: Path | None = None) -> CommandResult:
        cmd = (executable, *args)
        self._calls.append((cmd, cwd))
        if executable in self._missing_executables:
            raise CommandLaunchError(executable, "command not found")
        return self._results.get(cmd, self._default_result)

    @property
    def calls(self) -> list[tuple[tuple[str, ...], Path | None]]:
        """Get the list of run() calls as (command, cwd) tuples.

        This property is for test assertions only.
        """
        return self._calls.copy()
