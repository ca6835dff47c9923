"""Production CommandRunner implementation using subprocess."""

import logging
import subprocess
from pathlib import Path

from commitstamp.core.command.abc import CommandLaunchError, CommandResult, CommandRunner

logger = logging.getLogger(__name__)


class RealCommandRunner(CommandRunner):
    """Runs commands via subprocess.

    stderr is merged into stdout, so error text from the command shows up in
    output_lines alongside regular output. There is no timeout.
    """

    def run(self, executable: str, *args: str, cwd: Path | None = None) -> CommandResult:
        cmd = [executable, *args]
        logger.debug("Running command: %s (cwd=%s)", " ".join(cmd), cwd)
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError as e:
            raise CommandLaunchError(executable, "command not found") from e
        except PermissionError as e:
            raise CommandLaunchError(executable, "permission denied") from e

        lines = tuple(result.stdout.splitlines()) if result.stdout else ()
        logger.debug("Command exited with %d (%d output lines)", result.returncode, len(lines))
        return CommandResult(exit_code=result.returncode, output_lines=lines)
