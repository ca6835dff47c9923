"""Tests for the options shared by every command on the root group."""

from pathlib import Path

from click.testing import CliRunner

from commitstamp.cli.cli import cli


def test_base_dir_before_command_selects_project(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.commitstamp]\nproperty_name = "build.sha"\n', encoding="utf-8"
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["-C", str(tmp_path), "-q", "config", "get", "property_name"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "build.sha"


def test_long_base_dir_option(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.commitstamp]\nclass_update = true\n', encoding="utf-8"
    )
    runner = CliRunner()

    result = runner.invoke(
        cli, ["--base-dir", str(tmp_path), "--quiet", "config", "get", "class_update"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "true"


def test_base_dir_is_not_a_stamp_option(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["-C", str(tmp_path), "stamp", "--base-dir", str(tmp_path)])

    assert result.exit_code == 2
    assert "No such option" in result.output


def test_malformed_config_exits_with_error(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.commitstamp]\nclass_update = "yes"\n', encoding="utf-8"
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["-C", str(tmp_path), "show"])

    assert result.exit_code == 1
    assert "must be a bool" in result.output
