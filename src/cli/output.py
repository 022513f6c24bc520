"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output
and the ConsoleReportingListener that prints publish events as they happen.
Supports verbosity levels and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.markup import escape
from rich.spinner import Spinner
from rich.live import Live
from rich.table import Table

from src.models import RemotePage
from src.publisher.events import PublishListener
from src.publisher.report import PublishReport


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Operation completed")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    def print(self, message: str) -> None:
        """Display message without formatting."""
        self.console.print(message)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        Example:
            >>> with handler.spinner("Loading pages..."):
            ...     pass
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

    def print_publish_summary(self, report: PublishReport) -> None:
        """Display publish summary with color coding.

        Args:
            report: Counts collected during the publish run
        """
        table = Table(title="Publish Summary", show_header=False, box=None)
        table.add_column("Outcome")
        table.add_column("Count", justify="right")

        rows = [
            ("[green]+[/green] Added", report.added_count, "page(s)"),
            ("[blue]~[/blue] Updated", report.updated_count, "page(s)"),
            ("[red]-[/red] Deleted", report.deleted_count, "page(s)"),
            ("[dim]─[/dim] Unchanged", report.unchanged_count, "page(s)"),
            ("[green]↑[/green] Uploaded", report.attachments_uploaded, "attachment(s)"),
            ("[red]✗[/red] Removed", report.attachments_deleted, "attachment(s)"),
        ]
        for label, count, unit in rows:
            if count > 0:
                table.add_row(label, f"{count} {unit}")

        self.console.print()
        self.console.print(table)

        if not report.changed:
            self.console.print("\n[green]Already up to date. No changes published.[/green]")


class ConsoleReportingListener(PublishListener):
    """Prints every publish event through an OutputHandler."""

    def __init__(self, output: OutputHandler):
        self.output = output

    def page_added(self, page: RemotePage) -> None:
        self.output.print(f"Added page '{escape(page.title)}' (id {page.page_id})")

    def page_updated(self, existing: RemotePage, updated: RemotePage) -> None:
        self.output.print(
            f"Updated page '{escape(updated.title)}' (id {updated.page_id}, "
            f"version {existing.version} -> {updated.version})"
        )

    def page_deleted(self, page: RemotePage) -> None:
        self.output.print(f"Deleted page '{escape(page.title)}' (id {page.page_id})")

    def publish_completed(self) -> None:
        self.output.success("Documentation successfully published to Confluence")
