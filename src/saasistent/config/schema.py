"""
Pydantic configuration schema for SaaSistent.

This module defines all configuration models with validation.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Provider Configuration
# =============================================================================


class ProviderConfig(BaseModel):
    """Model used for generation and its aliases."""

    model_config = ConfigDict(extra="allow")

    default: str = "anthropic/claude-sonnet-4-20250514"
    aliases: dict[str, str] = Field(default_factory=dict)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)


# =============================================================================
# Generation Configuration
# =============================================================================


class TokenBudgets(BaseModel):
    """Output ceilings per request, in tokens."""

    init_prompt: int = Field(default=2048, ge=1)
    mvp_scope: int = Field(default=2048, ge=1)
    max_scope: int = Field(default=3000, ge=1)
    expand_idea: int = Field(default=1024, ge=1)


class GenerationConfig(BaseModel):
    """Artifact generation settings."""

    model_config = ConfigDict(extra="allow")

    max_tokens: TokenBudgets = Field(default_factory=TokenBudgets)
    timeout_seconds: float = Field(
        default=120.0,
        ge=0,
        description="Per-request timeout; 0 waits indefinitely",
    )

    @property
    def timeout(self) -> float | None:
        """Timeout in seconds, or None when disabled."""
        return self.timeout_seconds or None


# =============================================================================
# Output / Logging Configuration
# =============================================================================


class OutputConfig(BaseModel):
    """Where downloaded artifacts are written."""

    directory: str = "./saasistent-output"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    # None logs to <home>/logs/saasistent.log
    file: str | None = None
    console: bool = False
    max_bytes: int = Field(default=1024 * 1024, ge=1024)
    backup_count: int = Field(default=3, ge=0)


# =============================================================================
# Root Configuration Model
# =============================================================================


class Config(BaseModel):
    """
    Root configuration model for SaaSistent.

    Loaded from the global YAML file and environment variables,
    merged on top of these defaults.
    """

    model_config = ConfigDict(extra="allow")

    providers: ProviderConfig = Field(default_factory=ProviderConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def resolve_model_alias(self, model: str) -> str:
        """Resolve a model name or alias to the full model identifier."""
        return self.providers.aliases.get(model, model)
