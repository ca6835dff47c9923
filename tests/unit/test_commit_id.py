"""Tests for CommitIdResolver."""

from pathlib import Path

import pytest

from commitstamp.core.command.abc import CommandLaunchError, CommandResult
from commitstamp.core.command.fake import FakeCommandRunner
from commitstamp.core.commit_id import UNRESOLVED_COMMIT_ID, CommitIdResolver
from tests.fakes.git_runner import git_head_runner


def test_returns_hash_on_success() -> None:
    runner = git_head_runner("3f2a9c1e8b7d6f5a4c3b2a1f0e9d8c7b6a5f4e3d")

    commit_id = CommitIdResolver(runner).resolve()

    assert commit_id == "3f2a9c1e8b7d6f5a4c3b2a1f0e9d8c7b6a5f4e3d"


def test_runs_rev_parse_head_in_given_directory() -> None:
    runner = git_head_runner("abc123")

    CommitIdResolver(runner, cwd=Path("/project")).resolve()

    assert runner.calls == [(("git", "rev-parse", "HEAD"), Path("/project"))]


def test_multiple_lines_are_concatenated() -> None:
    runner = git_head_runner("abc", "def")

    assert CommitIdResolver(runner).resolve() == "abcdef"


@pytest.mark.parametrize("exit_code", [0, 1, 128])
def test_no_output_returns_fallback_regardless_of_exit_code(exit_code: int) -> None:
    runner = git_head_runner(exit_code=exit_code)

    assert CommitIdResolver(runner).resolve() == UNRESOLVED_COMMIT_ID


@pytest.mark.parametrize("exit_code", [1, 2, 128, -9])
def test_non_zero_exit_embeds_code_and_output(exit_code: int) -> None:
    runner = git_head_runner("fatal: not a git repository", " (or any parent)", exit_code=exit_code)

    commit_id = CommitIdResolver(runner).resolve()

    assert f"[{exit_code}]" in commit_id
    assert "fatal: not a git repository (or any parent)" in commit_id
    assert "git rev-parse HEAD" in commit_id


def test_launch_error_propagates() -> None:
    """Test that a missing git binary is not disguised as a command failure."""
    runner = FakeCommandRunner(missing_executables={"git"})

    with pytest.raises(CommandLaunchError):
        CommitIdResolver(runner).resolve()


def test_unrelated_commands_are_not_consulted() -> None:
    runner = FakeCommandRunner(
        results={("git", "describe"): CommandResult(exit_code=0, output_lines=("v1.0",))}
    )

    assert CommitIdResolver(runner).resolve() == UNRESOLVED_COMMIT_ID
