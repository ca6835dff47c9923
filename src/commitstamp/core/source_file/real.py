"""Production SourceFiles implementation."""

from pathlib import Path

from commitstamp.core.source_file.abc import SourceFiles


class RealSourceFiles(SourceFiles):
    """Reads and writes files on disk as UTF-8.

    newline="" on both sides keeps line endings exactly as they are in the file.
    surrogateescape carries bytes that are not valid UTF-8 (a Latin-1 header
    comment, say) through a read/write cycle unchanged.
    """

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path) -> str:
        with path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            return f.read()

    def write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            f.write(content)
