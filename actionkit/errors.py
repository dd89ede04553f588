"""Exception types raised by actionkit."""

from __future__ import annotations


class ActionkitError(Exception):
    """Base class for all library errors."""


class ConfigurationError(ActionkitError, ValueError):
    """Raised when an assistant or provider is constructed with invalid inputs."""


class SchemaError(ActionkitError, ValueError):
    """Raised when an action or parameter declaration is invalid."""


class ToolNotFoundError(ActionkitError, LookupError):
    """Raised when a tool call names an action no registered tool provides."""


class ToolArgumentsError(ActionkitError, ValueError):
    """Raised when tool call arguments do not match the action schema."""
