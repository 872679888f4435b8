"""
Output formatting utilities for the CLI.

Provides consistent output formatting across all CLI commands.
"""

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from saasistent.generation.artifacts import ArtifactSet, ArtifactStatus
from saasistent.wizard.models import ProjectConfig
from saasistent.wizard.options import display_name

# Global console instance
console = Console()

_STATUS_STYLES = {
    ArtifactStatus.UNREQUESTED: "[dim]not requested[/dim]",
    ArtifactStatus.PENDING: "[yellow]generating...[/yellow]",
    ArtifactStatus.READY: "[green]ready[/green]",
    ArtifactStatus.FAILED: "[red]failed[/red]",
}


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")


def print_panel(content: str, title: str | None = None) -> None:
    """Print content in a panel."""
    console.print(Panel(content, title=title))


def print_table(
    headers: list[str],
    rows: list[list[Any]],
    title: str | None = None,
) -> None:
    """Print a table."""
    table = Table(title=title)

    for header in headers:
        table.add_column(header)

    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    console.print(table)


def config_summary_table(config: ProjectConfig) -> Table:
    """Configuration summary shown on the review step."""
    table = Table(title="Configuration Summary", show_header=False, title_justify="left")
    table.add_column("Setting", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Project", config.name)
    table.add_row("Framework", display_name("framework", config.framework))
    table.add_row("Component Library", display_name("component_library", config.component_library))
    table.add_row("Pattern", display_name("application_pattern", config.application_pattern))
    table.add_row("Design", display_name("design_style", config.design_style))
    table.add_row("Database", display_name("database", config.database))
    table.add_row("Auth", display_name("auth", config.auth))
    table.add_row("Storage", display_name("storage", config.storage))
    table.add_row("AI", display_name("ai_provider", config.ai_provider))

    features = config.effective_ai_features
    if features:
        table.add_row("AI Features", ", ".join(display_name("ai_features", f) for f in features))

    return table


def artifact_status_table(artifacts: ArtifactSet) -> Table:
    """One row per artifact slot with its current state."""
    table = Table(title="Generated Outputs", title_justify="left")
    table.add_column("Output")
    table.add_column("Status")
    table.add_column("Details", overflow="fold")

    for slot in artifacts:
        if slot.is_ready:
            details = f"{len(slot.text or '')} characters"
        elif slot.is_failed and slot.error:
            details = slot.error.cause
        else:
            details = ""
        table.add_row(slot.key.label, _STATUS_STYLES[slot.status], details)

    return table
