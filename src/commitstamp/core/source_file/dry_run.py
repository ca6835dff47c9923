"""Dry-run SourceFiles wrapper."""

from pathlib import Path

import click

from commitstamp.cli.output import user_output
from commitstamp.core.source_file.abc import SourceFiles


class DryRunSourceFiles(SourceFiles):
    """Wrapper that prints intended writes instead of executing them.

    Read-only operations are delegated to the wrapped implementation.

    Usage:
        files = DryRunSourceFiles(RealSourceFiles())
        files.write_text(path, content)  # prints, does not write
    """

    def __init__(self, wrapped: SourceFiles) -> None:
        self._wrapped = wrapped

    def exists(self, path: Path) -> bool:
        return self._wrapped.exists(path)

    def read_text(self, path: Path) -> str:
        return self._wrapped.read_text(path)

    def write_text(self, path: Path, content: str) -> None:
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would write {path}:")
        user_output(content, nl=not content.endswith("\n"))
