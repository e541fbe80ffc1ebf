"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from bundlegate.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    Two modes:
    - Interactive: Show all diagnostics (info, warnings, errors)
    - Quiet: Suppress info and warnings, only show errors

    Usage:
        ctx.feedback.warning("Skipping wget")

        if not valid:
            ctx.feedback.error("Error: Invalid configuration")
            raise SystemExit(1)
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message (suppressed in quiet mode)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown, even in quiet mode)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        """Show informational message."""
        user_output(message)

    def warning(self, message: str) -> None:
        """Show warning message in yellow."""
        user_output(click.style(f"Warning: {message}", fg="yellow"))

    def error(self, message: str) -> None:
        """Show error message in red."""
        user_output(click.style(message, fg="red"))


class SuppressedFeedback(UserFeedback):
    """Feedback for quiet mode (only errors shown)."""

    def info(self, message: str) -> None:
        """Suppress informational message in quiet mode."""
        pass

    def warning(self, message: str) -> None:
        """Suppress warning message in quiet mode."""
        pass

    def error(self, message: str) -> None:
        """Show error message even in quiet mode."""
        user_output(click.style(message, fg="red"))
