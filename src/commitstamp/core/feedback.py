"""User-facing diagnostic output with mode awareness."""

import logging
from abc import ABC, abstractmethod

import click

from commitstamp.cli.output import user_output

logger = logging.getLogger("commitstamp")


class UserFeedback(ABC):
    """Reports diagnostics from the stamping steps.

    The core never writes to the terminal directly; it calls the injected
    feedback object so callers decide how (and whether) messages appear.

    Mode behavior:
        Interactive (default):
            - info() / success() / error() go to stderr
        Quiet (--quiet):
            - info() and success() are suppressed, error() still appears

    debug() always goes to the logging module, which is silent unless
    COMMITSTAMP_DEBUG is set.
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown)."""

    def debug(self, message: str) -> None:
        """Record a debug diagnostic."""
        logger.debug(message)


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class SuppressedFeedback(UserFeedback):
    """Feedback for --quiet: only errors are shown."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class FakeFeedback(UserFeedback):
    """Records every message in memory for test assertions."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.successes: list[str] = []
        self.errors: list[str] = []
        self.debugs: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def debug(self, message: str) -> None:
        self.debugs.append(message)
