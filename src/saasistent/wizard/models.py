"""
Project configuration model.

The configuration is accumulated across the wizard steps and handed, as a
snapshot, to the generation orchestrator once the wizard reaches the review step.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from saasistent.wizard.options import (
    AI_FEATURES,
    AIFeature,
    AIProvider,
    ApplicationPattern,
    AuthProvider,
    ComponentLibrary,
    Database,
    DesignStyle,
    Framework,
    StorageProvider,
)


class ProjectConfig(BaseModel):
    """Everything the wizard collects about a project."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Step 1: Idea
    name: str = ""
    description: str = ""
    expanded_description: str | None = None

    # Step 2: UX
    component_library: ComponentLibrary = ComponentLibrary.SHADCN

    # Step 3: Patterns
    application_pattern: ApplicationPattern = ApplicationPattern.DASHBOARD

    # Step 4: Design
    design_style: DesignStyle = DesignStyle.MINIMAL

    # Step 5: Framework
    framework: Framework = Framework.NEXTJS

    # Step 6: Backend
    database: Database = Database.SUPABASE
    auth: AuthProvider = AuthProvider.SUPABASE
    storage: StorageProvider = StorageProvider.SUPABASE

    # Step 7: AI
    ai_provider: AIProvider = AIProvider.ANTHROPIC
    ai_features: frozenset[AIFeature] = Field(default_factory=frozenset)

    @field_validator("expanded_description")
    @classmethod
    def _blank_expansion_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @property
    def has_ai(self) -> bool:
        """Whether an AI provider other than "none" is selected."""
        return self.ai_provider != AIProvider.NONE

    @property
    def effective_ai_features(self) -> tuple[AIFeature, ...]:
        """
        AI feature tags that apply to this configuration, in catalog order.

        Tags stay stored while the provider is "none" so that switching back
        restores them, but they are ignored everywhere they would be rendered.
        """
        if not self.has_ai:
            return ()
        return tuple(opt.value for opt in AI_FEATURES if opt.value in self.ai_features)

    def merged(self, partial: Mapping[str, Any]) -> "ProjectConfig":
        """
        Return a new configuration with ``partial`` overlaid on this one.

        Keys may be field names or their camelCase aliases. Fields absent from
        ``partial`` keep their current values.

        Raises:
            pydantic.ValidationError: If a key is unknown or a value is invalid.
        """
        data = self.model_dump()
        data.update(normalize_keys(partial))
        return ProjectConfig.model_validate(data)

    def missing_identity(self) -> list[str]:
        """Names of identity fields that are blank after trimming."""
        return [
            field_name
            for field_name in ("name", "description")
            if not getattr(self, field_name).strip()
        ]

    def to_export(self) -> dict[str, Any]:
        """JSON-friendly dict using the camelCase field names of the web app."""
        data = self.model_dump(mode="json", by_alias=True)
        data["aiFeatures"] = [f.value for f in AIFeature if f in self.ai_features]
        return data


_ALIAS_TO_FIELD = {
    (info.alias or name): name for name, info in ProjectConfig.model_fields.items()
}


def normalize_keys(partial: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase aliases in ``partial`` to field names; other keys pass through."""
    return {_ALIAS_TO_FIELD.get(key, key): value for key, value in partial.items()}
