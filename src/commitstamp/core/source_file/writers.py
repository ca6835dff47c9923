"""Writers that materialize the commit id as a string constant in a source file.

Two variants share the SourceFileWriter interface:
- TemplateSourceWriter renders a fresh file from the language template
- LiteralSpliceWriter replaces only the literal of an existing declaration

The splice is a plain text operation, not a parse: it finds the first
occurrence of the constant name, then the next double-quoted literal, and
swaps its contents. Everything else in the file is kept byte for byte.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from commitstamp.core.feedback import UserFeedback
from commitstamp.core.source_file.abc import SourceFiles
from commitstamp.core.source_file.languages import escape_literal
from commitstamp.core.source_file.target import TargetFileSpec

QUOTE = '"'
ESCAPE = "\\"


class ConstantSiteNotFoundError(ValueError):
    """The constant name or its quoted literal could not be located in the file."""


@dataclass(frozen=True)
class ConstantSite:
    """Positions of the quotes around the literal to replace."""

    open_quote: int
    close_quote: int


def find_constant_site(text: str, constant_name: str) -> ConstantSite:
    """Locate the literal following the first occurrence of constant_name.

    The closing quote is the next double quote after the opening one that is
    not preceded by a backslash escape.

    Raises:
        ConstantSiteNotFoundError: If the name, the opening quote or the
            closing quote is missing
    """
    name_index = text.find(constant_name)
    if name_index == -1:
        raise ConstantSiteNotFoundError(f"Constant '{constant_name}' not found")

    open_quote = text.find(QUOTE, name_index + len(constant_name))
    if open_quote == -1:
        raise ConstantSiteNotFoundError(
            f"No opening quote after constant '{constant_name}' (offset {name_index})"
        )

    index = open_quote + 1
    while index < len(text):
        char = text[index]
        if char == ESCAPE:
            index += 2
            continue
        if char == QUOTE:
            return ConstantSite(open_quote=open_quote, close_quote=index)
        index += 1

    raise ConstantSiteNotFoundError(
        f"Unterminated literal for constant '{constant_name}' (opened at offset {open_quote})"
    )


def splice_constant_value(
    text: str,
    constant_name: str,
    value: str,
    escape: Callable[[str], str] = escape_literal,
) -> str:
    """Return text with the constant's literal replaced by the escaped value."""
    site = find_constant_site(text, constant_name)
    return text[: site.open_quote + 1] + escape(value) + text[site.close_quote :]


def render_source(spec: TargetFileSpec, value: str) -> str:
    """Render a minimal source file declaring the constant with the given value."""
    return spec.language.render(
        spec.package, spec.simple_name, spec.constant_name, spec.language.escape(value)
    )


class SourceFileWriter(ABC):
    """Writes a value into the constant described by a TargetFileSpec."""

    def __init__(self, files: SourceFiles, feedback: UserFeedback) -> None:
        self._files = files
        self._feedback = feedback

    @abstractmethod
    def write(self, spec: TargetFileSpec, value: str) -> bool:
        """Write the value.

        Returns:
            True if the file was written, False if an I/O error was reported
        """
        ...


class TemplateSourceWriter(SourceFileWriter):
    """Creates the target file from the language template."""

    def write(self, spec: TargetFileSpec, value: str) -> bool:
        content = render_source(spec, value)
        self._feedback.debug(content)
        try:
            self._files.write_text(spec.path, content)
        except OSError as e:
            self._feedback.error(f"Error: Failed to create {spec.path}: {e}")
            return False
        return True


class LiteralSpliceWriter(SourceFileWriter):
    """Replaces the literal of an existing constant declaration in place."""

    def write(self, spec: TargetFileSpec, value: str) -> bool:
        """Splice the value into the existing file.

        Raises:
            ConstantSiteNotFoundError: If the declaration cannot be located. The
                file is not touched in that case.
        """
        try:
            original = self._files.read_text(spec.path)
        except OSError as e:
            self._feedback.error(f"Error: Failed to read {spec.path}: {e}")
            return False

        updated = splice_constant_value(original, spec.constant_name, value, spec.language.escape)
        self._feedback.debug(updated)

        try:
            self._files.write_text(spec.path, updated)
        except OSError as e:
            self._feedback.error(f"Error: Failed to write {spec.path}: {e}")
            return False
        return True


def select_writer(
    files: SourceFiles, feedback: UserFeedback, spec: TargetFileSpec
) -> SourceFileWriter:
    """Pick the template writer for a new file, the splice writer for an existing one."""
    if files.exists(spec.path):
        return LiteralSpliceWriter(files, feedback)
    return TemplateSourceWriter(files, feedback)
