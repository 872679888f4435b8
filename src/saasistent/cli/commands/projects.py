"""
saasistent projects - Browse saved projects.

Usage:
    saasistent projects list
    saasistent projects show <id>
    saasistent projects delete <id>
"""

from typing import Annotated

import typer
from rich.console import Console

from saasistent.cli.common import require_user
from saasistent.cli.output import config_summary_table, print_error, print_info, print_success, print_table
from saasistent.storage import ProjectNotFoundError, ProjectStore

app = typer.Typer(
    name="projects",
    help="Browse saved projects.",
)

console = Console()

_STATUS_COLORS = {
    "draft": "dim",
    "configured": "yellow",
    "generated": "green",
}


@app.command("list")
def list_projects() -> None:
    """List projects, most recently updated first."""
    require_user("/dashboard")

    records = ProjectStore().list_projects()
    if not records:
        print_info("No projects yet. Run [bold]saasistent new[/bold] to create one.")
        return

    rows = []
    for record in records:
        color = _STATUS_COLORS.get(record.status.value, "white")
        rows.append(
            [
                record.id[:8],
                record.name,
                f"[{color}]{record.status.value}[/{color}]",
                record.framework or "-",
                record.updated_at.strftime("%Y-%m-%d %H:%M"),
            ]
        )

    print_table(["ID", "Name", "Status", "Framework", "Updated"], rows, title="Projects")


def _find(store: ProjectStore, project_id: str):
    """Exact id, or a unique id prefix as shown by ``list``."""
    try:
        return store.get(project_id)
    except ProjectNotFoundError:
        matches = [r for r in store.list_projects() if r.id.startswith(project_id)]
        if len(matches) == 1:
            return matches[0]
        raise


@app.command()
def show(
    project_id: Annotated[str, typer.Argument(help="Project id or id prefix.")],
) -> None:
    """Show one project's configuration and generated files."""
    require_user(f"/dashboard/projects/{project_id}")

    try:
        record = _find(ProjectStore(), project_id)
    except ProjectNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(1)

    console.print(f"[bold]{record.name}[/bold] [dim]({record.id})[/dim]")
    console.print(f"Status: {record.status.value}")
    if record.description:
        console.print(f"Description: {record.description}")
    console.print()
    console.print(config_summary_table(record.config))

    if record.artifacts:
        console.print()
        console.print("[bold]Generated files:[/bold]")
        for key, path in record.artifacts.items():
            console.print(f"  {key}: {path}")


@app.command()
def delete(
    project_id: Annotated[str, typer.Argument(help="Project id or id prefix.")],
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip confirmation.",
        ),
    ] = False,
) -> None:
    """Delete a saved project. Generated files are left in place."""
    require_user(f"/dashboard/projects/{project_id}")

    store = ProjectStore()
    try:
        record = _find(store, project_id)
    except ProjectNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if not yes and not typer.confirm(f"Delete project '{record.name}'?"):
        raise typer.Abort()

    store.delete(record.id)
    print_success(f"Deleted project [bold]{record.name}[/bold]")
