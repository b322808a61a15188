"""Terminal formatter for the list of available licenses."""
from typing import Optional

from rich.console import Console
from rich.table import Table

from oslicense.models.license import sort_summary


class LicenseListFormatter:
    """Format the registry's license list as a Rich table."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def format_licenses(self, licenses: dict[str, str]) -> None:
        """Display available licenses sorted by identifier.

        Args:
            licenses: Mapping of license identifier to display name.
        """
        if not licenses:
            self._console.print("[yellow]No licenses available[/yellow]")
            return

        table = Table(title="Available licenses")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Name")

        for license_id, name in sort_summary(licenses):
            table.add_row(license_id, name)

        self._console.print(table)
        self._console.print(f"\n[bold]Total:[/bold] {len(licenses)} licenses")
