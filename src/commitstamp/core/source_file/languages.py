"""Source templates for the languages a commit id constant can be written in."""

from collections.abc import Callable
from dataclasses import dataclass


class UnknownLanguageError(ValueError):
    """Raised when a language name has no registered template."""


@dataclass(frozen=True)
class SourceLanguage:
    """How to lay out and render a single-constant source file.

    render receives (package, type_name, constant_name, literal) where literal has
    already been passed through escape. An empty package means the declaration
    is omitted.
    """

    name: str
    source_root: str
    extension: str
    render: Callable[[str, str, str, str], str]
    escape: Callable[[str], str]


def escape_literal(value: str) -> str:
    """Escape a value so it stays inside one double-quoted string literal."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def _escape_kotlin(value: str) -> str:
    # "$" would otherwise start a string template
    return escape_literal(value).replace("$", "\\$")


def _render_java(package: str, type_name: str, constant_name: str, literal: str) -> str:
    header = f"package {package};\n\n" if package else ""
    return (
        f"{header}public final class {type_name} {{\n"
        f'    public static final String {constant_name} = "{literal}";\n'
        f"}}\n"
    )


def _render_kotlin(package: str, type_name: str, constant_name: str, literal: str) -> str:
    header = f"package {package}\n\n" if package else ""
    return (
        f"{header}object {type_name} {{\n"
        f'    const val {constant_name} = "{literal}"\n'
        f"}}\n"
    )


JAVA = SourceLanguage(
    name="java", source_root="java", extension=".java", render=_render_java, escape=escape_literal
)
KOTLIN = SourceLanguage(
    name="kotlin",
    source_root="kotlin",
    extension=".kt",
    render=_render_kotlin,
    escape=_escape_kotlin,
)

LANGUAGES: dict[str, SourceLanguage] = {lang.name: lang for lang in (JAVA, KOTLIN)}


def get_language(name: str) -> SourceLanguage:
    """Look up a language by name.

    Raises:
        UnknownLanguageError: If no language with that name is registered
    """
    language = LANGUAGES.get(name.lower())
    if language is None:
        known = ", ".join(sorted(LANGUAGES))
        raise UnknownLanguageError(f"Unknown language '{name}' (expected one of: {known})")
    return language
