"""
saasistent auth - Local session commands.

Usage:
    saasistent auth login --email you@example.com --name "Ada"
    saasistent auth whoami
    saasistent auth logout
"""

from typing import Annotated

import typer
from rich.console import Console

from saasistent.cli.output import print_info, print_success
from saasistent.session import LocalSessionProvider, UserProfile

app = typer.Typer(
    name="auth",
    help="Sign in and out of the local session.",
)

console = Console()


@app.command()
def login(
    email: Annotated[
        str,
        typer.Option(
            "--email",
            "-e",
            help="Account email.",
        ),
    ],
    name: Annotated[
        str | None,
        typer.Option(
            "--name",
            "-n",
            help="Display name.",
        ),
    ] = None,
    avatar_url: Annotated[
        str | None,
        typer.Option(
            "--avatar-url",
            help="Avatar image URL.",
        ),
    ] = None,
) -> None:
    """Record the signed-in user for dashboard commands."""
    if "@" not in email:
        raise typer.BadParameter("Expected an email address", param_hint="--email")

    profile = UserProfile(email=email, display_name=name, avatar_url=avatar_url)
    LocalSessionProvider().sign_in(profile)
    print_success(f"Signed in as [bold]{profile.label}[/bold]")


@app.command()
def logout() -> None:
    """Clear the local session."""
    if LocalSessionProvider().sign_out():
        print_success("Signed out")
    else:
        print_info("Nobody is signed in")


@app.command()
def whoami() -> None:
    """Show the signed-in user."""
    user = LocalSessionProvider().current_user()
    if user is None:
        print_info("Nobody is signed in")
        raise typer.Exit(1)

    console.print(f"[bold]{user.label}[/bold]")
    if user.display_name:
        console.print(f"  Email: {user.email}")
    if user.avatar_url:
        console.print(f"  Avatar: {user.avatar_url}")
