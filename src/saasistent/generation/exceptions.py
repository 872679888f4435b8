"""
Generation exceptions for SaaSistent.

Failures stay local to the operation that caused them: generation input
errors are raised synchronously, per-artifact failures live on their slot,
and clipboard/save failures are reported as action results.
"""


class GenerationError(Exception):
    """Base exception for generation-related errors."""

    pass


class InvalidInputError(GenerationError):
    """Configuration fails minimum-field validation; nothing was started."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


class GenerationFailedError(GenerationError):
    """One artifact's request failed. Sibling artifacts are unaffected."""

    def __init__(self, artifact_key: str, cause: str):
        super().__init__(f"{artifact_key} generation failed: {cause}")
        self.artifact_key = artifact_key
        self.cause = cause


class ArtifactNotReadyError(GenerationError):
    """Copy or download was requested for an artifact that is not ready."""

    pass


class ClipboardUnavailableError(GenerationError):
    """No working clipboard capability on this system."""

    pass


class SaveUnavailableError(GenerationError):
    """The artifact file could not be written."""

    pass
