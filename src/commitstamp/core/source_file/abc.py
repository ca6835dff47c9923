"""Filesystem access for the source file writers.

Architecture:
- SourceFiles: Abstract base class for the three operations the writers need
- RealSourceFiles: Reads and writes the real filesystem
- DryRunSourceFiles: Delegates reads, prints writes instead of performing them
"""

from abc import ABC, abstractmethod
from pathlib import Path


class SourceFiles(ABC):
    """Abstract interface for reading and writing the target source file."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check whether the file exists."""
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read the full file content.

        Raises:
            OSError: If the file cannot be read
        """
        ...

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Replace the full file content, creating parent directories as needed.

        Raises:
            OSError: If the file cannot be written
        """
        ...
