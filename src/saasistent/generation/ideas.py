"""
AI idea expansion for the first wizard step.
"""

import logging

from saasistent.generation.exceptions import InvalidInputError
from saasistent.generation.orchestrator import TextCompletion
from saasistent.generation.prompts import build_expand_idea_prompt

logger = logging.getLogger(__name__)


async def expand_idea(description: str, complete: TextCompletion, max_tokens: int = 1024) -> str:
    """
    Expand a short product idea into value proposition, users, features,
    monetization and technical considerations.

    Args:
        description: The idea as entered by the user.
        complete: Async text-completion capability.
        max_tokens: Output ceiling.

    Returns:
        The expanded description.

    Raises:
        InvalidInputError: If the description is blank. Nothing is requested.
        ProviderError: If the completion fails.
    """
    if not description.strip():
        raise InvalidInputError("Description is required", missing=["description"])

    logger.info("Expanding project idea")
    expanded = await complete(build_expand_idea_prompt(description.strip()), max_tokens)
    return expanded.strip()
