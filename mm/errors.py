"""
Error types and process exit codes for maintenance mode operations.
"""

from typing import Optional

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ABORT = 2
EXIT_USAGE = 3
EXIT_HOST_NOT_FOUND = -1


class MaintenanceError(Exception):
    """Base class for all errors raised while handling a maintenance action."""

    exit_code = EXIT_ABORT

    def __init__(self, message: str, exit_code: Optional[int] = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(MaintenanceError):
    """Config file missing, unreadable or not valid JSON."""

    exit_code = EXIT_USAGE


class ValidationError(MaintenanceError):
    """Operator input rejected before any network call."""

    exit_code = EXIT_USAGE

    def __init__(self, message: str, show_usage: bool = True):
        super().__init__(message)
        self.show_usage = show_usage


class HostUnresolvableError(MaintenanceError):
    """Host name did not resolve to any address."""

    exit_code = EXIT_USAGE

    def __init__(self, host: str, exit_code: Optional[int] = None):
        super().__init__(f"Host: {host} not found!", exit_code)
        self.host = host


class NetworkError(MaintenanceError):
    """Transport-level failure talking to the maintenance API."""


class ResponseParseError(MaintenanceError):
    """Maintenance API returned a body that is not a list of records."""
