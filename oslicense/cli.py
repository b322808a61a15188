"""CLI entry point for oslicense."""

from __future__ import annotations

import asyncio
import sys

import click
from rich.console import Console
from rich.markup import escape

from oslicense import __version__
from oslicense.config import ResolverConfig, load_config
from oslicense.constants import EXIT_ERROR, EXIT_SUCCESS, FILL_IN_REMINDER
from oslicense.exceptions import OSLicenseError
from oslicense.log import configure_logging
from oslicense.output.listing import LicenseListFormatter
from oslicense.output.listing_json import LicenseListJsonFormatter
from oslicense.output.writer import echo_license, write_license_file
from oslicense.resolvers.license import LicenseResolver
from oslicense.resolvers.registry import LicenseRegistryClient

# Module-level console for consistent output
_console = Console()
# Separate console for errors and log records (writes to stderr)
_error_console = Console(stderr=True)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--list",
    "-l",
    "list_flag",
    is_flag=True,
    default=False,
    help="List available licenses with their IDs.",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(),
    default=None,
    help="License file to create, or a directory to create LICENSE.md in.",
)
@click.option(
    "--stdout",
    "-s",
    "stdout_flag",
    is_flag=True,
    default=False,
    help="Print license text to stdout instead of creating a file.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for --list (default: terminal).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Log requests and how the license was chosen.",
)
@click.argument("license_id", required=False)
def main(
    license_id: str | None,
    list_flag: bool,
    output_path: str | None,
    stdout_flag: bool,
    output_format: str,
    config_path: str | None,
    verbose_flag: bool,
) -> None:
    """Fetch open-source license text from the OSI license API.

    LICENSE_ID is a case-sensitive OSI license ID such as MIT or
    Apache-2.0. If omitted, the license declared in the nearest
    package.json or pyproject.toml is used.

    \b
    Examples:
        oslicense MIT
        oslicense --list
        oslicense Apache-2.0 --stdout
        oslicense BSD-3-Clause --output docs/
    """
    if output_path and stdout_flag:
        raise click.UsageError("--output and --stdout are mutually exclusive.")

    configure_logging(verbose_flag, console=_error_console)
    format_value = output_format.lower()

    try:
        config = load_config(config_path)

        if list_flag:
            _run_list(config, format_value)
            sys.exit(EXIT_SUCCESS)

        resolver = LicenseResolver.from_config(config)
        text = asyncio.run(resolver.resolve(license_id))

        if stdout_flag:
            echo_license(text)
            sys.exit(EXIT_SUCCESS)

        written = write_license_file(text, output_path, config.output_filename)
        _console.print(
            f"[green]License file created at '{escape(str(written))}'[/green]",
            soft_wrap=True,
        )
        _console.print(FILL_IN_REMINDER)
        sys.exit(EXIT_SUCCESS)

    except OSLicenseError as e:
        _display_error(e, format_value)
        sys.exit(EXIT_ERROR)


def _run_list(config: ResolverConfig, format_type: str) -> None:
    """Fetch and display the registry's license list.

    Args:
        config: Configuration with the registry location.
        format_type: Output format (terminal, json).
    """
    licenses = asyncio.run(LicenseRegistryClient.from_config(config).list_licenses())

    if format_type == "json":
        click.echo(LicenseListJsonFormatter().format_licenses(licenses))
    else:
        LicenseListFormatter(console=_console).format_licenses(licenses)


def _display_error(error: OSLicenseError, format_type: str) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    message = f"Error: {type(error).__name__}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]", soft_wrap=True)
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
