"""Exception types raised by the volume plugin."""

from __future__ import annotations


class PluginError(Exception):
    """Base class for all errors raised by the plugin."""


class ValidationError(PluginError):
    """A volume request failed validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"validation error: {self.message}"


class MountError(PluginError):
    """A mount operation failed, optionally because of an underlying error."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"mount error: {self.message} (caused by: {self.cause})"
        return f"mount error: {self.message}"