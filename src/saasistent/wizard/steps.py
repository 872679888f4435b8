"""
Wizard step table.

Steps are static descriptors looked up by ordinal. Each carries the
configuration fields its inputs edit and a gate predicate that must hold
before the wizard may advance past it.
"""

from collections.abc import Callable
from dataclasses import dataclass

from saasistent.wizard.models import ProjectConfig

# A check returns the unmet requirements of a step; the gate holds when it is empty
Check = Callable[[ProjectConfig], list[str]]

_REQUIREMENT_MESSAGES = {
    "name": "Project name is required",
    "description": "Project description is required",
}


def no_requirements(config: ProjectConfig) -> list[str]:
    """Check for steps whose fields all carry defaults."""
    return []


def idea_requirements(config: ProjectConfig) -> list[str]:
    """Name and description must be non-blank."""
    return [_REQUIREMENT_MESSAGES[name] for name in config.missing_identity()]


@dataclass(frozen=True)
class WizardStep:
    """A single step of the project wizard."""

    ordinal: int
    key: str
    title: str
    description: str
    fields: tuple[str, ...] = ()
    check: Check = no_requirements

    def is_satisfied(self, config: ProjectConfig) -> bool:
        """Whether the gate of this step holds for ``config``."""
        return not self.check(config)

    def unmet_requirements(self, config: ProjectConfig) -> list[str]:
        """Human-readable reasons the gate fails; empty when it holds."""
        return self.check(config)


STEPS: tuple[WizardStep, ...] = (
    WizardStep(
        1,
        "idea",
        "Idea",
        "Describe your project",
        fields=("name", "description", "expanded_description"),
        check=idea_requirements,
    ),
    WizardStep(2, "ux", "UX", "Component library", fields=("component_library",)),
    WizardStep(3, "patterns", "Patterns", "Application type", fields=("application_pattern",)),
    WizardStep(4, "design", "Design", "Visual style", fields=("design_style",)),
    WizardStep(5, "framework", "Framework", "Frontend framework", fields=("framework",)),
    WizardStep(
        6,
        "backend",
        "Backend",
        "Backend services",
        fields=("database", "auth", "storage"),
    ),
    WizardStep(7, "ai", "AI", "AI integration", fields=("ai_provider", "ai_features")),
    WizardStep(8, "review", "Review", "Generate outputs"),
)

STEPS_BY_ORDINAL: dict[int, WizardStep] = {step.ordinal: step for step in STEPS}


def get_step(ordinal: int) -> WizardStep:
    """
    Look up a step by ordinal.

    Raises:
        KeyError: If no step has that ordinal.
    """
    return STEPS_BY_ORDINAL[ordinal]
