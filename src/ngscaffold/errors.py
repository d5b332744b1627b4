"""Errors raised by scaffold steps. Every one of them ends the run."""

from typing import List, Optional


class ScaffoldError(Exception):
    """Base class for scaffold failures.

    Carries the failing command or file so the failure report can name it.
    """

    exit_code = 1

    def __init__(self, message: str, *, command: Optional[List[str]] = None,
                 path: Optional[str] = None):
        super().__init__(message)
        self.command = command
        self.path = path

    @property
    def context(self) -> Optional[str]:
        if self.command:
            return f"Command: {' '.join(self.command)}"
        if self.path:
            return f"File: {self.path}"
        return None


class InvalidArgument(ScaffoldError):
    """Project name is missing, blank, or a leaked shell placeholder."""


class GenerationFailed(ScaffoldError):
    """The Angular CLI did not produce the project directory."""


class DirectoryNotFound(ScaffoldError):
    """The project directory is missing at the point it is needed."""


class InstallFailed(ScaffoldError):
    """The package manager could not install dependencies."""


class StepFailed(ScaffoldError):
    """Any other step failure: uninstall, analytics, file patching."""
