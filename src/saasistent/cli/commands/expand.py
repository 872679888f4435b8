"""
saasistent expand - Expand a product idea with AI.

Usage:
    saasistent expand "A tool that turns meeting notes into tasks"
"""

import asyncio
from typing import Annotated

import typer
from rich.markdown import Markdown

from saasistent.cli.output import console, print_error
from saasistent.config import get_config
from saasistent.generation import InvalidInputError, expand_idea
from saasistent.providers import ProviderError, get_provider_manager


def expand(
    description: Annotated[
        str,
        typer.Argument(help="The product idea."),
    ],
) -> None:
    """Print value proposition, target users, key features, monetization and technical notes."""
    manager = get_provider_manager()
    budget = get_config().generation.max_tokens.expand_idea

    try:
        with console.status("Expanding idea..."):
            expanded = asyncio.run(expand_idea(description, manager.complete_text, budget))
    except InvalidInputError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except ProviderError as e:
        print_error(f"Expansion failed: {e}")
        raise typer.Exit(1)

    console.print(Markdown(expanded))
