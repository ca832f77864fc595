"""
Dispatch of maintenance actions.

The manager validates operator input, checks the host in DNS where needed,
talks to the maintenance API and renders the answer. It never exits the
process itself: failures are raised as MaintenanceError subclasses and the
caller turns them into exit codes.
"""

import math
import socket
from typing import Iterable, List, Optional

from loguru import logger
from rich.console import Console

from .client import MaintenanceClient, VALID_STATUSES
from .errors import EXIT_HOST_NOT_FOUND, EXIT_NOT_FOUND, EXIT_OK, HostUnresolvableError, ValidationError
from .hosts import host_resolves
from .models import Action, MaintenanceOptions
from .report import parse_records, render_raw, render_records
from .windows import compute_window

FLAG_NAMES = {
    Action.ENABLE: "--enable",
    Action.DISABLE: "--disable",
    Action.DISABLE_ALL: "--disableall",
    Action.GET_STATUS: "--getstatus",
}

HOST_ACTIONS = {Action.ENABLE, Action.DISABLE_ALL, Action.GET_STATUS}


def requested_actions(enable: bool, disable: bool, disable_all: bool, get_status: bool) -> List[Action]:
    """Actions whose flag is set, in precedence order."""
    return [
        action
        for action, flag in (
            (Action.ENABLE, enable),
            (Action.DISABLE, disable),
            (Action.DISABLE_ALL, disable_all),
            (Action.GET_STATUS, get_status),
        )
        if flag
    ]


def select_action(enable: bool, disable: bool, disable_all: bool, get_status: bool) -> Optional[Action]:
    """
    Pick the action to run from the action flags.

    Flags are checked in the order enable, disable, disable-all, get-status and
    the first one set wins. Setting more than one is allowed but logged.

    Returns:
        The selected Action, or None when no action flag is set
    """
    requested = requested_actions(enable, disable, disable_all, get_status)
    if not requested:
        return None

    if len(requested) > 1:
        ignored = ", ".join(FLAG_NAMES[a] for a in requested[1:])
        logger.warning(f"Multiple actions requested; running {FLAG_NAMES[requested[0]]} and ignoring {ignored}")

    return requested[0]


def validate_options(requested: Iterable[Action], options: MaintenanceOptions) -> None:
    """
    Reject invalid input before any DNS lookup or HTTP request.

    Every requested flag is checked, including those that lose to a
    higher-precedence action.

    Raises:
        ValidationError: If a required option is missing or out of range
    """
    requested = list(requested)

    host_actions = [a for a in requested if a in HOST_ACTIONS]
    if host_actions and not options.host:
        raise ValidationError(f"--host is required for {FLAG_NAMES[host_actions[0]]}")

    if Action.GET_STATUS in requested and options.status not in VALID_STATUSES:
        raise ValidationError(
            f"Invalid status '{options.status}', expected one of: {', '.join(VALID_STATUSES)}"
        )

    if Action.ENABLE in requested and not (math.isfinite(options.timeout) and options.timeout > 0):
        raise ValidationError(f"Timeout must be a positive number of hours, got {options.timeout}")


class MaintenanceManager:
    """Runs one maintenance action against the maintenance API."""

    def __init__(self, client: MaintenanceClient, console: Console, resolver=socket.getaddrinfo):
        self.client = client
        self.console = console
        self.resolver = resolver

    def execute(self, action: Action, options: MaintenanceOptions,
                requested: Optional[Iterable[Action]] = None) -> int:
        """
        Validate and run an action.

        Args:
            action: Action to run
            options: Operator input for the action
            requested: All actions whose flag was given (defaults to just action)

        Returns:
            Process exit code
        """
        validate_options(requested if requested is not None else [action], options)

        if action == Action.ENABLE:
            return self.enable(options)
        if action == Action.DISABLE:
            return self.disable(options)
        if action == Action.DISABLE_ALL:
            return self.disable_all(options)
        return self.get_status(options)

    def _check_host(self, host: str, exit_code: Optional[int] = None) -> None:
        if not host_resolves(host, self.resolver):
            raise HostUnresolvableError(host, exit_code)

    def enable(self, options: MaintenanceOptions) -> int:
        """Put a host into maintenance for options.timeout hours."""
        self._check_host(options.host, EXIT_HOST_NOT_FOUND)

        window = compute_window(options.timeout)
        logger.info(f"Enabling maintenance for {options.host} from {window.start_time} to {window.end_time}")

        prepared = self.client.build_enable(options.host, window, options.rpd)
        self.console.print(prepared.body, markup=False, emoji=False, highlight=False, soft_wrap=True)

        render_raw(self.client.send(prepared), self.console)
        return EXIT_OK

    def disable(self, options: MaintenanceOptions) -> int:
        """Delete a single maintenance by id."""
        prepared = self.client.build_disable(options.maintenance_id)
        logger.info(f"Disabling maintenance {options.maintenance_id}")

        render_raw(self.client.send(prepared), self.console)
        return EXIT_OK

    def disable_all(self, options: MaintenanceOptions) -> int:
        """Delete every maintenance of a host."""
        self._check_host(options.host)

        prepared = self.client.build_disable_all(options.host)
        logger.info(f"Disabling all maintenances for {options.host}")

        render_raw(self.client.send(prepared), self.console)
        return EXIT_OK

    def get_status(self, options: MaintenanceOptions) -> int:
        """Show a host's maintenances; exit code 1 when there are none."""
        self._check_host(options.host)

        prepared = self.client.build_status(options.host, options.status)
        records = parse_records(self.client.send(prepared))
        logger.info(f"Found {len(records)} {options.status} maintenance(s) for {options.host}")

        render_records(records, self.console, options.output_format)
        return EXIT_OK if records else EXIT_NOT_FOUND
