"""
Artifact slots for a generation cycle.

Each of the three artifacts lives in its own slot, written by exactly one
producer task, so no slot ever observes another's completion or failure.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from saasistent.generation.exceptions import GenerationFailedError


class ArtifactKey(str, Enum):
    """The three generated documents."""

    INIT_PROMPT = "init_prompt"
    MVP_SCOPE = "mvp_scope"
    MAX_SCOPE = "max_scope"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def file_suffix(self) -> str:
        return _FILE_SUFFIXES[self]


_LABELS = {
    ArtifactKey.INIT_PROMPT: "Init Prompt",
    ArtifactKey.MVP_SCOPE: "MVP Scope",
    ArtifactKey.MAX_SCOPE: "MAX Scope",
}

_FILE_SUFFIXES = {
    ArtifactKey.INIT_PROMPT: "init-prompt",
    ArtifactKey.MVP_SCOPE: "mvp-scope",
    ArtifactKey.MAX_SCOPE: "max-scope",
}


class ArtifactStatus(str, Enum):
    """Lifecycle of an artifact slot."""

    UNREQUESTED = "unrequested"
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class ArtifactSlot:
    """Immutable view of one slot; transitions produce a new slot."""

    key: ArtifactKey
    status: ArtifactStatus = ArtifactStatus.UNREQUESTED
    text: str | None = None
    error: GenerationFailedError | None = None
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def is_ready(self) -> bool:
        return self.status == ArtifactStatus.READY

    @property
    def is_pending(self) -> bool:
        return self.status == ArtifactStatus.PENDING

    @property
    def is_failed(self) -> bool:
        return self.status == ArtifactStatus.FAILED

    @property
    def is_settled(self) -> bool:
        """Ready or failed."""
        return self.status in (ArtifactStatus.READY, ArtifactStatus.FAILED)

    @classmethod
    def pending(cls, key: ArtifactKey) -> "ArtifactSlot":
        return cls(key=key, status=ArtifactStatus.PENDING)

    @classmethod
    def ready(cls, key: ArtifactKey, text: str) -> "ArtifactSlot":
        return cls(key=key, status=ArtifactStatus.READY, text=text)

    @classmethod
    def failed(cls, key: ArtifactKey, cause: str) -> "ArtifactSlot":
        return cls(
            key=key,
            status=ArtifactStatus.FAILED,
            error=GenerationFailedError(key.value, cause),
        )


class ArtifactSet:
    """The three slots of one generation cycle."""

    def __init__(self, cycle: int = 0):
        self.cycle = cycle
        self._slots: dict[ArtifactKey, ArtifactSlot] = {
            key: ArtifactSlot(key) for key in ArtifactKey
        }

    def __getitem__(self, key: ArtifactKey | str) -> ArtifactSlot:
        return self._slots[ArtifactKey(key)]

    def __iter__(self):
        return iter(self._slots.values())

    def set(self, slot: ArtifactSlot) -> None:
        self._slots[slot.key] = slot

    def statuses(self) -> dict[ArtifactKey, ArtifactStatus]:
        return {key: slot.status for key, slot in self._slots.items()}

    @property
    def all_settled(self) -> bool:
        return all(slot.is_settled for slot in self._slots.values())

    @property
    def any_pending(self) -> bool:
        return any(slot.is_pending for slot in self._slots.values())
