"""Stamp configuration data structures and loading.

Configuration lives in the project's pyproject.toml:

    [tool.commitstamp]
    property_update = true
    property_name = "vcs.commit.id"
    class_update = true
    class_name = "com.example.CommitId"
    class_constant = "COMMIT_ID"
    language = "java"

Every key is optional; missing keys take the defaults below.
"""

import tomllib
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import tomlkit

from commitstamp.core.source_file.languages import UnknownLanguageError, get_language

TOOL_SECTION = "commitstamp"


class ConfigError(ValueError):
    """Configuration file or value is malformed."""


@dataclass(frozen=True)
class StampConfig:
    """Immutable stamping configuration.

    Loaded once at CLI entry point. CLI flags produce a modified copy via
    dataclasses.replace rather than mutating this one.
    """

    property_update: bool = True
    property_name: str = "vcs.commit.id"
    class_update: bool = False
    class_name: str = "com.example.CommitId"
    class_constant: str = "COMMIT_ID"
    language: str = "java"


_FIELD_TYPES: dict[str, type] = {f.name: f.type for f in fields(StampConfig)}  # type: ignore[misc]


def _check_value(key: str, value: Any, source: str) -> Any:
    expected = _FIELD_TYPES.get(key)
    if expected is None:
        known = ", ".join(_FIELD_TYPES)
        raise ConfigError(f"Unknown key '{key}' in {source} (expected one of: {known})")
    if not isinstance(value, expected):
        raise ConfigError(
            f"'{key}' in {source} must be a {expected.__name__}, got {type(value).__name__}"
        )
    if key == "language":
        try:
            get_language(value)
        except UnknownLanguageError as e:
            raise ConfigError(f"{e} in {source}") from e
    return value


def read_config_table(project_root: Path) -> dict[str, Any]:
    """Read the raw [tool.commitstamp] table, or an empty dict if absent.

    Raises:
        ConfigError: If pyproject.toml is not valid TOML
    """
    pyproject_path = project_root / "pyproject.toml"

    if not pyproject_path.exists():
        return {}

    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}") from e

    tool_section = data.get("tool")
    if tool_section is None:
        return {}

    table = tool_section.get(TOOL_SECTION)
    if table is None:
        return {}

    return dict(table)


def load_stamp_config(project_root: Path) -> StampConfig:
    """Load StampConfig from pyproject.toml in project_root.

    Returns defaults when the file or the [tool.commitstamp] table is missing.

    Raises:
        ConfigError: If a key is unknown or a value has the wrong type
    """
    source = str(project_root / "pyproject.toml")
    table = read_config_table(project_root)
    values = {key: _check_value(key, value, source) for key, value in table.items()}
    return StampConfig(**values)


def parse_config_value(key: str, raw: str) -> bool | str:
    """Convert a command-line string into the typed value for key.

    Raises:
        ConfigError: If the key is unknown or a boolean key gets a non-boolean
    """
    expected = _FIELD_TYPES.get(key)
    if expected is None:
        known = ", ".join(_FIELD_TYPES)
        raise ConfigError(f"Unknown key '{key}' (expected one of: {known})")
    if expected is bool:
        lowered = raw.strip().lower()
        if lowered in ("true", "yes", "1", "on"):
            return True
        if lowered in ("false", "no", "0", "off"):
            return False
        raise ConfigError(f"'{key}' must be true or false, got '{raw}'")
    return _check_value(key, raw, "command line")


def write_config_value(project_root: Path, key: str, value: bool | str) -> None:
    """Write one key to [tool.commitstamp] in pyproject.toml.

    Creates the file and sections as needed. Preserves existing formatting
    and comments using tomlkit.
    """
    pyproject_path = project_root / "pyproject.toml"

    if pyproject_path.exists():
        with pyproject_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)
    else:
        doc = tomlkit.document()

    if "tool" not in doc:
        doc["tool"] = tomlkit.table()  # type: ignore[index]

    if TOOL_SECTION not in doc["tool"]:  # type: ignore[operator]
        doc["tool"][TOOL_SECTION] = tomlkit.table()  # type: ignore[index]

    doc["tool"][TOOL_SECTION][key] = value  # type: ignore[index]

    with pyproject_path.open("w", encoding="utf-8") as f:
        tomlkit.dump(doc, f)


def config_as_dict(config: StampConfig) -> dict[str, bool | str]:
    return asdict(config)
