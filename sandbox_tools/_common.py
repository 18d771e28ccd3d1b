"""Shared types for the sandbox_tools package."""

from dataclasses import dataclass
from typing import Optional


class ToolError(Exception):
    """Base class for failures a tool reports back to its caller as a string."""


class PermissionDenied(ToolError):
    """Path is outside the project root or ignored by .gitignore."""


class NotFound(ToolError):
    """Missing file, directory or search command."""


class TypeMismatch(ToolError):
    """Expected a file and got a directory, or the other way round."""


class AlreadyExists(ToolError):
    """Destination collides with an existing path."""


class ExecutionFailure(ToolError):
    """A subprocess could not be started or did not finish."""


@dataclass(frozen=True)
class ToolResult:
    """Result from dispatching a tool"""
    output: Optional[str]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.error
