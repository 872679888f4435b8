"""
Core logic for the project wizard.

This module owns step sequencing, configuration accumulation and step gating.
It is UI-agnostic and performs no I/O.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import ValidationError

from saasistent.wizard.models import ProjectConfig
from saasistent.wizard.options import AIFeature
from saasistent.wizard.steps import STEPS, WizardStep

logger = logging.getLogger(__name__)


class InvalidUpdateError(ValueError):
    """A configuration update names an unknown field or carries an invalid value."""

    pass


class AdvanceResult(str, Enum):
    """Outcome of a request to move forward."""

    ADVANCED = "advanced"
    BLOCKED = "blocked"  # current step's gate does not hold
    AT_END = "at_end"  # already on the final step


class ProjectWizard:
    """
    Sequences a user through the fixed project steps.

    The cursor is a 1-based step ordinal bounded to [1, N]. Forward moves are
    gated by the current step; backward moves are not. The configuration is
    replaced, never mutated in place, so snapshots handed out stay stable.
    """

    def __init__(
        self,
        config: ProjectConfig | None = None,
        steps: tuple[WizardStep, ...] = STEPS,
    ):
        ordinals = [step.ordinal for step in steps]
        if ordinals != list(range(1, len(steps) + 1)):
            raise ValueError("Wizard steps must be numbered 1..N without gaps")

        self._steps = steps
        self._config = config if config is not None else ProjectConfig()
        self._cursor = 1

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def config(self) -> ProjectConfig:
        """The configuration accumulated so far."""
        return self._config

    @property
    def cursor(self) -> int:
        """Ordinal of the current step."""
        return self._cursor

    @property
    def steps(self) -> tuple[WizardStep, ...]:
        return self._steps

    @property
    def total_steps(self) -> int:
        return len(self._steps)

    @property
    def current_step(self) -> WizardStep:
        return self._steps[self._cursor - 1]

    @property
    def is_first_step(self) -> bool:
        return self._cursor == 1

    @property
    def is_final_step(self) -> bool:
        return self._cursor == self.total_steps

    @property
    def progress(self) -> float:
        """Fraction of the wizard reached, in [1/N, 1.0]."""
        return self._cursor / self.total_steps

    def can_proceed(self) -> bool:
        """Whether the current step's gate holds."""
        return self.current_step.is_satisfied(self._config)

    def unmet_requirements(self) -> list[str]:
        """Messages explaining why the current step's gate fails."""
        return self.current_step.unmet_requirements(self._config)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def advance(self) -> AdvanceResult:
        """
        Move to the next step if the current step allows it.

        Returns:
            ADVANCED when the cursor moved, BLOCKED when the gate fails,
            AT_END when already on the final step. The cursor only moves on
            ADVANCED.
        """
        if self.is_final_step:
            return AdvanceResult.AT_END

        if not self.can_proceed():
            logger.debug(
                f"Advance blocked on step {self._cursor}: {', '.join(self.unmet_requirements())}"
            )
            return AdvanceResult.BLOCKED

        self._cursor += 1
        logger.debug(f"Advanced to step {self._cursor} ({self.current_step.title})")
        return AdvanceResult.ADVANCED

    def retreat(self) -> bool:
        """
        Move to the previous step.

        Returns:
            True if the cursor moved, False on the first step.
        """
        if self.is_first_step:
            return False

        self._cursor -= 1
        logger.debug(f"Retreated to step {self._cursor} ({self.current_step.title})")
        return True

    def update(self, partial: Mapping[str, Any] | None = None, **fields: Any) -> ProjectConfig:
        """
        Merge field values into the configuration.

        Fields not mentioned keep their values. Allowed on any step.

        Args:
            partial: Field values keyed by field name or camelCase alias.
            **fields: Additional field values.

        Returns:
            The new configuration.

        Raises:
            InvalidUpdateError: If a field is unknown or a value is invalid.
                The configuration is left unchanged.
        """
        changes = {**(partial or {}), **fields}
        if not changes:
            return self._config

        try:
            self._config = self._config.merged(changes)
        except ValidationError as e:
            raise InvalidUpdateError(str(e)) from e

        return self._config

    def toggle_ai_feature(self, feature: AIFeature | str) -> bool:
        """
        Add the feature tag if absent, remove it if present.

        Returns:
            True if the feature is selected afterwards.

        Raises:
            InvalidUpdateError: If the tag is not a known AI feature.
        """
        try:
            tag = AIFeature(feature)
        except ValueError as e:
            raise InvalidUpdateError(f"Unknown AI feature: {feature!r}") from e

        features = set(self._config.ai_features)
        if tag in features:
            features.discard(tag)
        else:
            features.add(tag)

        self.update(ai_features=frozenset(features))
        return tag in features

    def snapshot(self) -> ProjectConfig:
        """Independent copy of the configuration for read-only consumers."""
        return self._config.model_copy(deep=True)
