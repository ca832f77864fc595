"""
CLI interface for the maintenance mode client.
"""

import sys

import click
from loguru import logger
from rich.console import Console
from rich.markup import escape

from . import __version__
from .client import MaintenanceClient, VALID_STATUSES
from .config import DEFAULT_CONFIG_PATH, load_settings
from .errors import (
    EXIT_OK,
    ConfigError,
    HostUnresolvableError,
    MaintenanceError,
    ValidationError,
)
from .manager import MaintenanceManager, requested_actions, select_action
from .models import MaintenanceOptions
from .report import OUTPUT_FORMATS

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

SHORT_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(log_level: str, silent: bool = False) -> str:
    """
    Route loguru output to stderr for this invocation.

    With --silent only errors get through, so aborts are still reported
    while warnings and progress messages disappear.

    Returns:
        The effective log level
    """
    if silent and LOG_LEVELS.index(log_level) < LOG_LEVELS.index("ERROR"):
        log_level = "ERROR"

    debug = log_level == "DEBUG"

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=DEBUG_FORMAT if debug else SHORT_FORMAT,
        backtrace=debug,
        diagnose=debug,
    )

    return log_level


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("--host", default="", help="Hostname")
@click.option(
    "--timeout",
    "-i",
    type=float,
    default=1.0,
    show_default=True,
    help="Duration of the maintenance in hours",
)
@click.option("--enable", "-e", is_flag=True, help="Enable maintenance mode")
@click.option("--disable", "-d", is_flag=True, help="Disable maintenance mode (requires --id)")
@click.option("--disableall", "-a", "disable_all", is_flag=True, help="Disable all maintenances for host")
@click.option("--getstatus", "-g", "get_status", is_flag=True, help="Get maintenance information for host")
@click.option("--silent", "-s", is_flag=True, help="Suppress all output")
@click.option("--rpd", type=int, default=0, show_default=True, help="RPD ticket number")
@click.option("--id", "maintenance_id", default="", help="Unique ID returned when the maintenance was created")
@click.option(
    "--status",
    default="active",
    show_default=True,
    help=f"Status [{'|'.join(VALID_STATUSES)}]",
)
@click.option(
    "--file",
    "-f",
    "config_file",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    envvar="ICINGA_MAINT_CONFIG",
    help="Custom config file",
)
@click.option(
    "--output-format",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    help="Output format for --getstatus",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS),
    default="WARNING",
    envvar="ICINGA_MAINT_LOG_LEVEL",
    help="Log level",
)
@click.version_option(__version__, prog_name="icinga-maint")
@click.pass_context
def cli(ctx, host, timeout, enable, disable, disable_all, get_status, silent, rpd,
        maintenance_id, status, config_file, output_format, log_level):
    """Manage maintenance mode for hosts in the monitoring service.

    Exactly one of --enable, --disable, --disableall or --getstatus is
    expected. When several are given the first in that order is run.

    Examples:
      icinga-maint --host web1 --enable --timeout 2 --rpd 1234   # 2 hour maintenance
      icinga-maint --host web1 --getstatus --status scheduled     # List scheduled maintenances
      icinga-maint --disable --id 5f1c0e                          # Delete one maintenance
      icinga-maint --host web1 --disableall                       # Delete all maintenances of web1
    """
    current_log_level = setup_logging(log_level, silent)
    console = Console(quiet=silent)

    try:
        settings = load_settings(config_file)

        requested = requested_actions(enable, disable, disable_all, get_status)
        action = select_action(enable, disable, disable_all, get_status)
        if action is None:
            logger.debug("No action requested")
            sys.exit(EXIT_OK)

        options = MaintenanceOptions(
            host=host,
            timeout=timeout,
            rpd=rpd,
            maintenance_id=maintenance_id,
            status=status,
            output_format=output_format,
        )

        with MaintenanceClient(settings) as client:
            exit_code = MaintenanceManager(client, console).execute(action, options, requested)

    except ValidationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        if e.show_usage:
            console.print(ctx.get_help(), markup=False, highlight=False)
        sys.exit(e.exit_code)

    except HostUnresolvableError as e:
        console.print(str(e), markup=False, highlight=False)
        sys.exit(e.exit_code)

    except ConfigError as e:
        logger.error(str(e))
        sys.exit(e.exit_code)

    except MaintenanceError as e:
        logger.error(f"{e.__class__.__name__}: {e}")

        if current_log_level == "DEBUG":
            logger.exception("Detailed traceback:")
        sys.exit(e.exit_code)

    sys.exit(exit_code)
