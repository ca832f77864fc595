"""
Main entry point for the maintenance mode client.
"""

import sys

import click

from .cli import cli
from .errors import EXIT_USAGE


def main():
    """Run the CLI, reporting argument errors with the usage exit code."""
    try:
        cli.main(standalone_mode=False)
    except click.UsageError as e:
        e.show()
        sys.exit(EXIT_USAGE)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
