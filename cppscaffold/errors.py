# cppscaffold/errors.py
"""
Error taxonomy for cppscaffold.

Every failure of a generation run is raised as a :class:`ScaffoldError`
subclass. Because the base class is a :class:`click.ClickException`, the CLI
layer needs no translation: Click prints ``Error: <Category>: <message>`` and
exits with status 1. Embedding callers (and tests) simply catch
``ScaffoldError``; nothing below the CLI calls ``sys.exit``.
"""

from __future__ import annotations

import click

__all__ = [
    "ScaffoldError",
    "ConfigError",
    "ToolchainError",
    "FileWriteError",
    "ExternalToolError",
]


class ScaffoldError(click.ClickException):
    """Base class for all terminal errors of a generation run."""

    #: Label shown in front of the message (e.g. ``ConfigError: missing name``).
    category: str = "ScaffoldError"
    exit_code = 1

    def format_message(self) -> str:
        return f"{self.category}: {self.message}"


class ConfigError(ScaffoldError):
    """Bad or missing user input."""

    category = "ConfigError"


class ToolchainError(ScaffoldError):
    """A required tool is missing or produced output we cannot parse."""

    category = "EnvironmentError"


class FileWriteError(ScaffoldError):
    """Creating a directory or writing a file failed."""

    category = "IOError"

    def __init__(self, message: str, path=None) -> None:
        super().__init__(message)
        self.path = path


class ExternalToolError(ScaffoldError):
    """A shelled-out command exited non-zero or could not be started."""

    category = "ExternalToolError"

    def __init__(self, message: str, command=None, returncode=None, stderr: str = "") -> None:
        super().__init__(message)
        self.command = list(command or [])
        self.returncode = returncode
        self.stderr = stderr
