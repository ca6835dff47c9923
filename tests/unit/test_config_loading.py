"""Tests for [tool.commitstamp] loading and writing."""

from pathlib import Path

import pytest

from commitstamp.core.config import (
    ConfigError,
    StampConfig,
    load_stamp_config,
    parse_config_value,
    write_config_value,
)


def test_defaults_when_pyproject_missing(tmp_path: Path) -> None:
    assert load_stamp_config(tmp_path) == StampConfig()


def test_defaults_match_documented_values() -> None:
    config = StampConfig()

    assert config.property_update is True
    assert config.property_name == "vcs.commit.id"
    assert config.class_update is False
    assert config.class_name == "com.example.CommitId"
    assert config.class_constant == "COMMIT_ID"
    assert config.language == "java"


def test_defaults_when_table_missing(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert load_stamp_config(tmp_path) == StampConfig()


def test_loads_values_from_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.commitstamp]\n"
        "property_update = false\n"
        "class_update = true\n"
        'class_name = "com.acme.BuildInfo"\n'
        'class_constant = "SHA"\n'
        'language = "kotlin"\n',
        encoding="utf-8",
    )

    config = load_stamp_config(tmp_path)

    assert config == StampConfig(
        property_update=False,
        property_name="vcs.commit.id",
        class_update=True,
        class_name="com.acme.BuildInfo",
        class_constant="SHA",
        language="kotlin",
    )


def test_wrong_type_raises(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.commitstamp]\nclass_update = "yes"\n', encoding="utf-8"
    )

    with pytest.raises(ConfigError, match="must be a bool"):
        load_stamp_config(tmp_path)


def test_unknown_key_raises(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.commitstamp]\njavaClassName = "x"\n', encoding="utf-8"
    )

    with pytest.raises(ConfigError, match="Unknown key 'javaClassName'"):
        load_stamp_config(tmp_path)


def test_unknown_language_raises(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.commitstamp]\nlanguage = "cobol"\n', encoding="utf-8"
    )

    with pytest.raises(ConfigError, match="cobol"):
        load_stamp_config(tmp_path)


def test_invalid_toml_raises(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.commitstamp\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_stamp_config(tmp_path)


@pytest.mark.parametrize(
    ("raw", "expected"), [("true", True), ("False", False), ("yes", True), ("0", False)]
)
def test_parse_boolean_values(raw: str, expected: bool) -> None:
    assert parse_config_value("class_update", raw) is expected


def test_parse_rejects_bad_boolean() -> None:
    with pytest.raises(ConfigError, match="true or false"):
        parse_config_value("property_update", "maybe")


def test_parse_string_value() -> None:
    assert parse_config_value("class_name", "com.acme.Info") == "com.acme.Info"


def test_write_preserves_existing_content(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        '[project]\nname = "app"  # the app\n\n[tool.commitstamp]\nclass_update = false\n',
        encoding="utf-8",
    )

    write_config_value(tmp_path, "class_update", True)
    write_config_value(tmp_path, "class_constant", "SHA")

    content = pyproject.read_text(encoding="utf-8")
    assert 'name = "app"  # the app' in content
    config = load_stamp_config(tmp_path)
    assert config.class_update is True
    assert config.class_constant == "SHA"


def test_write_creates_pyproject(tmp_path: Path) -> None:
    write_config_value(tmp_path, "property_name", "build.sha")

    assert load_stamp_config(tmp_path).property_name == "build.sha"
