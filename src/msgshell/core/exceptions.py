# -*- coding: utf-8 -*-
"""Custom exception types for the msgshell application."""


class MsgShellError(Exception):
    """Base class for all application-specific errors."""

    pass


class ConfigError(MsgShellError):
    """Exception raised for errors in the configuration file (loading, parsing, validation)."""

    pass


class CommandError(MsgShellError):
    """Exception raised by a command for user-facing failures (bad or missing arguments)."""

    pass


class ScriptFileNotFoundError(MsgShellError):
    """Raised when a batch script file cannot be found."""
    pass
