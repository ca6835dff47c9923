"""Location of the generated constant file."""

from dataclasses import dataclass
from pathlib import Path

from commitstamp.core.source_file.languages import JAVA, SourceLanguage


def split_type_name(type_name: str) -> tuple[str, str]:
    """Split a fully-qualified type name into (package, simple name).

    Splits on the last '.'; a name without one has an empty package.

    >>> split_type_name("a.b.Foo")
    ('a.b', 'Foo')
    >>> split_type_name("Foo")
    ('', 'Foo')
    """
    package, _, simple_name = type_name.rpartition(".")
    return package, simple_name


@dataclass(frozen=True)
class TargetFileSpec:
    """Which constant in which file receives the commit id."""

    type_name: str
    constant_name: str
    base_dir: Path
    language: SourceLanguage = JAVA

    @property
    def package(self) -> str:
        return split_type_name(self.type_name)[0]

    @property
    def simple_name(self) -> str:
        return split_type_name(self.type_name)[1]

    @property
    def path(self) -> Path:
        """<base_dir>/src/main/<language root>/<type name as path>.<ext>"""
        relative = self.type_name.replace(".", "/") + self.language.extension
        return self.base_dir / "src" / "main" / self.language.source_root / relative
