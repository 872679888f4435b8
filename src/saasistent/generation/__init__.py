"""
SaaSistent Generation.

Prompt assembly, the concurrent three-artifact orchestrator and its
copy/download capabilities.
"""

from saasistent.generation.artifacts import ArtifactKey, ArtifactSet, ArtifactSlot, ArtifactStatus
from saasistent.generation.delivery import (
    MARKDOWN_MEDIA_TYPE,
    Clipboard,
    FileSaver,
    Saver,
    SystemClipboard,
)
from saasistent.generation.exceptions import (
    ArtifactNotReadyError,
    ClipboardUnavailableError,
    GenerationError,
    GenerationFailedError,
    InvalidInputError,
    SaveUnavailableError,
)
from saasistent.generation.ideas import expand_idea
from saasistent.generation.orchestrator import (
    ActionResult,
    GenerationHandle,
    GenerationOrchestrator,
    TextCompletion,
)
from saasistent.generation.prompts import (
    GenerationRequest,
    build_project_summary,
    build_prompt,
    build_requests,
)

__all__ = [
    # Orchestrator
    "GenerationOrchestrator",
    "GenerationHandle",
    "ActionResult",
    "TextCompletion",
    # Artifacts
    "ArtifactKey",
    "ArtifactSet",
    "ArtifactSlot",
    "ArtifactStatus",
    # Prompts
    "GenerationRequest",
    "build_project_summary",
    "build_prompt",
    "build_requests",
    "expand_idea",
    # Delivery
    "Clipboard",
    "Saver",
    "SystemClipboard",
    "FileSaver",
    "MARKDOWN_MEDIA_TYPE",
    # Exceptions
    "GenerationError",
    "InvalidInputError",
    "GenerationFailedError",
    "ArtifactNotReadyError",
    "ClipboardUnavailableError",
    "SaveUnavailableError",
]
