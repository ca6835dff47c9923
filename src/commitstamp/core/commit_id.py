"""Commit id lookup via `git rev-parse HEAD`."""

import logging
from pathlib import Path

from commitstamp.core.command.abc import CommandRunner

logger = logging.getLogger(__name__)

GIT_EXECUTABLE = "git"
REV_PARSE_HEAD = ("rev-parse", "HEAD")

UNRESOLVED_COMMIT_ID = "unable to resolve commit id"


class CommitIdResolver:
    """Resolves the HEAD commit id, degrading failures to a descriptive string.

    Command failures never raise: an empty result or a non-zero exit produces a
    placeholder message so the build can carry on. Only a CommandLaunchError from
    the runner (git missing entirely) propagates.
    """

    def __init__(self, runner: CommandRunner, cwd: Path | None = None) -> None:
        self._runner = runner
        self._cwd = cwd

    def resolve(self) -> str:
        result = self._runner.run(GIT_EXECUTABLE, *REV_PARSE_HEAD, cwd=self._cwd)

        if not result.output_lines:
            return UNRESOLVED_COMMIT_ID

        joined = "".join(result.output_lines)
        if result.exit_code != 0:
            command = " ".join((GIT_EXECUTABLE, *REV_PARSE_HEAD))
            return f"unexpected exit code [{result.exit_code}] from '{command}': {joined}"

        logger.debug("Resolved commit id %s", joined)
        return joined
