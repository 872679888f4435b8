"""
Helpers shared by CLI commands: session gating and orchestrator wiring.
"""

from pathlib import Path

import typer

from saasistent.config import get_config
from saasistent.generation import FileSaver, GenerationOrchestrator, SystemClipboard
from saasistent.providers import get_provider_manager
from saasistent.session import LocalSessionProvider, SessionProvider, UserProfile, resolve_route
from saasistent.cli.output import print_error, print_info


def require_user(route: str, provider: SessionProvider | None = None) -> UserProfile:
    """
    Apply the dashboard routing rule to a CLI command.

    Raises:
        typer.Exit: With code 1 when nobody is signed in.
    """
    provider = provider or LocalSessionProvider()
    user = provider.current_user()
    decision = resolve_route(route, user)

    if not decision.allowed or user is None:
        print_error("You need to sign in first.")
        print_info("Run [bold]saasistent auth login --email you@example.com[/bold]")
        raise typer.Exit(1)

    return user


def build_orchestrator(output_dir: Path | None = None) -> GenerationOrchestrator:
    """Orchestrator backed by the configured provider, clipboard and output directory."""
    config = get_config()
    manager = get_provider_manager()

    return GenerationOrchestrator(
        manager.complete_text,
        budgets=config.generation.max_tokens,
        timeout=config.generation.timeout,
        clipboard=SystemClipboard(),
        saver=FileSaver(output_dir or Path(config.output.directory)),
    )
