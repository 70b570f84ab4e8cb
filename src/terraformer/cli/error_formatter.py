"""Error message formatting with Rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from terraformer.validation.errors import ValidationResult

SEVERITY_STYLES = {
    "error": "red",
    "warning": "yellow",
    "info": "blue",
}


class ErrorTable:
    """Display validation issues as a table."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult, title: str = "Validation Issues") -> None:
        """Print validation result as table."""
        table = Table(title=title)

        table.add_column("Code", style="cyan", width=6)
        table.add_column("Severity", width=8)
        table.add_column("Location", style="dim")
        table.add_column("Message")

        for issue in result.sorted_issues():
            style = SEVERITY_STYLES[issue.severity.value]
            severity = f"[{style}]{issue.severity.value.upper()}[/{style}]"
            message = issue.message
            if issue.suggestion:
                message = f"{message}\n[green]{issue.suggestion}[/green]"

            table.add_row(issue.code, severity, issue.path or "-", message)

        self.console.print(table)

    def print_summary(self, result: ValidationResult) -> None:
        """Print a one-line count of errors and warnings."""
        parts = []
        if result.errors:
            parts.append(f"[red bold]✗ {len(result.errors)} error(s)[/red bold]")
        if result.warnings:
            parts.append(f"[yellow]{len(result.warnings)} warning(s)[/yellow]")
        if result.infos:
            parts.append(f"[blue]{len(result.infos)} note(s)[/blue]")
        if parts:
            self.console.print(", ".join(parts))
