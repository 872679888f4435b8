"""
Main Typer application for the SaaSistent CLI.

This module defines the root CLI application and registers all command groups.
"""

from typing import Annotated

import typer

from saasistent import __version__
from saasistent.cli.commands import auth, expand, generate, new, projects
from saasistent.cli.output import print_error, print_info
from saasistent.config import ConfigurationError, LoggingConfig, get_config
from saasistent.logging_config import setup_logging

# Create the main Typer app
app = typer.Typer(
    name="saasistent",
    help="Configure a SaaS project and generate its init prompt and scope documents.",
    no_args_is_help=False,
    invoke_without_command=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"saasistent version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug output to the console.",
        ),
    ] = False,
) -> None:
    """
    [bold blue]saasistent[/bold blue] - SaaS project configurator

    Walk through eight steps to describe your product and pick its stack,
    then generate a coding-assistant init prompt, an MVP scope and a MAX scope.

    Start with [bold]saasistent auth login[/bold], then [bold]saasistent new[/bold].
    """
    try:
        config = get_config()
    except ConfigurationError as e:
        print_error(f"Invalid configuration: {e}")
        setup_logging(LoggingConfig(), verbose=verbose)
        raise typer.Exit(1)

    setup_logging(config.logging, verbose=verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


# Register command groups
app.add_typer(auth.app, name="auth")
app.add_typer(new.app, name="new")
app.add_typer(projects.app, name="projects")
app.command(name="generate")(generate.generate)
app.command(name="expand")(expand.expand)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
