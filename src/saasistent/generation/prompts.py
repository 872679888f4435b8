"""
Prompt construction for the three generated artifacts.

All three prompts share the same project summary; each adds its own
instructions and carries its own output ceiling.
"""

from dataclasses import dataclass

from saasistent.config.schema import TokenBudgets
from saasistent.generation.artifacts import ArtifactKey
from saasistent.wizard.models import ProjectConfig


@dataclass(frozen=True)
class GenerationRequest:
    """One prompt to send, and its output ceiling."""

    key: ArtifactKey
    prompt: str
    max_tokens: int


def build_project_summary(config: ProjectConfig) -> str:
    """
    Render the configuration as the labeled summary shared by every prompt.

    The AI line is only present when an AI provider other than "none" is selected.
    """
    lines = [
        f"Project: {config.name}",
        f"Description: {config.description}",
    ]
    if config.expanded_description:
        lines.append(f"Expanded: {config.expanded_description}")

    lines += [
        "",
        "Tech Stack:",
        f"- Framework: {config.framework.value}",
        f"- UI: {config.component_library.value}",
        f"- Pattern: {config.application_pattern.value}",
        f"- Design: {config.design_style.value}",
        f"- Database: {config.database.value}",
        f"- Auth: {config.auth.value}",
        f"- Storage: {config.storage.value}",
    ]
    if config.has_ai:
        features = ", ".join(f.value for f in config.effective_ai_features)
        lines.append(f"- AI: {config.ai_provider.value} ({features})")

    return "\n".join(lines)


def build_init_prompt(config: ProjectConfig) -> str:
    """Prompt for an actionable project-initialization prompt."""
    return f"""Generate a coding-assistant initialization prompt for the following SaaS application. This prompt will be used to initialize a new project with an AI coding assistant.

{build_project_summary(config)}

Create a detailed initialization prompt that:
1. Clearly describes the project
2. Lists all technologies to use
3. Defines the folder structure
4. Specifies coding conventions
5. Outlines the initial setup steps
6. Includes important configuration details
7. Mentions key dependencies to install

Format as a clear, actionable prompt that a coding assistant can follow to set up the project. Start with "Create a new {config.framework.value} application called {config.name}..."
"""


def build_mvp_prompt(config: ProjectConfig) -> str:
    """Prompt for a minimal MVP scope document."""
    return f"""Generate an MVP (Minimum Viable Product) scope document for the following SaaS application:

{build_project_summary(config)}

Create a focused MVP scope that includes:
1. Core features only (what's absolutely necessary)
2. User stories for each feature
3. Database schema (simplified)
4. API endpoints needed
5. Pages/routes required

Keep it minimal and focused on getting to market quickly. Format as markdown.
"""


def build_max_prompt(config: ProjectConfig) -> str:
    """Prompt for a comprehensive MAX scope document."""
    return f"""Generate a comprehensive MAX scope document for the following SaaS application:

{build_project_summary(config)}

Create a full-featured scope that includes:
1. All features (comprehensive feature set)
2. Advanced user stories
3. Complete database schema with relationships
4. Full API specification
5. All pages/routes
6. Admin dashboard features
7. Analytics and reporting
8. Integration points
9. Security considerations
10. Performance optimizations

Format as detailed markdown with clear sections.
"""


_BUILDERS = {
    ArtifactKey.INIT_PROMPT: build_init_prompt,
    ArtifactKey.MVP_SCOPE: build_mvp_prompt,
    ArtifactKey.MAX_SCOPE: build_max_prompt,
}


def build_prompt(key: ArtifactKey, config: ProjectConfig) -> str:
    """Build the prompt for one artifact."""
    return _BUILDERS[key](config)


def build_requests(
    config: ProjectConfig,
    budgets: TokenBudgets | None = None,
) -> list[GenerationRequest]:
    """
    Assemble the three generation requests for a configuration.

    Args:
        config: Finalized project configuration.
        budgets: Output ceilings. Defaults to init 2048, MVP 2048, MAX 3000.

    Returns:
        One request per artifact, in ArtifactKey order.
    """
    budgets = budgets or TokenBudgets()
    return [
        GenerationRequest(
            key=key,
            prompt=build_prompt(key, config),
            max_tokens=getattr(budgets, key.value),
        )
        for key in ArtifactKey
    ]


def build_expand_idea_prompt(description: str) -> str:
    """Prompt that expands a one-paragraph product idea."""
    return f"""You are a SaaS product expert. Expand on the following product idea, identifying:
- Core value proposition
- Target users
- Key features (3-5 main features)
- Potential monetization strategy
- Technical considerations

Keep the response concise but insightful. Format as clear paragraphs, not bullet points.

Product idea: {description}"""
