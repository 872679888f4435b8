"""
Generation orchestrator for SaaSistent.

Turns a finalized project configuration into three artifacts by issuing
three independent text-generation requests concurrently. Each request owns
exactly one artifact slot; a failure or delay in one never touches the others.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from saasistent.config.schema import TokenBudgets
from saasistent.generation.artifacts import ArtifactKey, ArtifactSet, ArtifactSlot
from saasistent.generation.delivery import (
    MARKDOWN_MEDIA_TYPE,
    Clipboard,
    FileSaver,
    Saver,
)
from saasistent.generation.exceptions import (
    ArtifactNotReadyError,
    ClipboardUnavailableError,
    InvalidInputError,
    SaveUnavailableError,
)
from saasistent.generation.prompts import GenerationRequest, build_requests
from saasistent.storage.paths import slugify
from saasistent.wizard.models import ProjectConfig

logger = logging.getLogger(__name__)

# prompt, max_tokens -> generated text
TextCompletion = Callable[[str, int], Awaitable[str]]

SlotListener = Callable[[ArtifactSlot], None]


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a copy or download action."""

    ok: bool
    message: str
    path: Path | None = None


class GenerationHandle:
    """The in-flight tasks of one generation cycle."""

    def __init__(self, cycle: int, tasks: dict[ArtifactKey, asyncio.Task]):
        self.cycle = cycle
        self.tasks = tasks

    def done(self) -> bool:
        return all(task.done() for task in self.tasks.values())

    async def wait(self) -> None:
        """Wait until every request of this cycle has finished."""
        await asyncio.gather(*self.tasks.values())


class GenerationOrchestrator:
    """
    Runs generation cycles and exposes per-artifact state.

    Args:
        complete: Async text-completion capability ``(prompt, max_tokens) -> text``.
        budgets: Output ceilings per artifact.
        timeout: Seconds before a request is failed; None waits indefinitely.
        clipboard: Clipboard capability for ``copy``. None means unavailable.
        saver: Save capability for ``download``. Defaults to the current directory.
    """

    def __init__(
        self,
        complete: TextCompletion,
        *,
        budgets: TokenBudgets | None = None,
        timeout: float | None = None,
        clipboard: Clipboard | None = None,
        saver: Saver | None = None,
    ):
        self._complete = complete
        self.budgets = budgets or TokenBudgets()
        self.timeout = timeout
        self.clipboard = clipboard
        self.saver = saver or FileSaver(Path.cwd())

        self._cycle = 0
        self._detached = False
        self._config: ProjectConfig | None = None
        self._artifacts = ArtifactSet()
        self._listeners: list[SlotListener] = []
        self._tasks: set[asyncio.Task] = set()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def artifacts(self) -> ArtifactSet:
        return self._artifacts

    @property
    def cycle(self) -> int:
        return self._cycle

    @property
    def config(self) -> ProjectConfig | None:
        """Configuration of the current cycle."""
        return self._config

    def slot(self, key: ArtifactKey | str) -> ArtifactSlot:
        return self._artifacts[key]

    def add_listener(self, listener: SlotListener) -> None:
        """Call ``listener`` with every slot transition of the current cycle."""
        self._listeners.append(listener)

    def remove_listener(self, listener: SlotListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def detach(self) -> None:
        """
        Stop observing in-flight requests.

        Requests are not cancelled; whatever they return afterwards is ignored.
        """
        self._detached = True
        logger.debug(f"Detached from generation cycle {self._cycle}")

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def generate(self, config: ProjectConfig) -> GenerationHandle:
        """
        Start a generation cycle.

        Must be called from a running event loop. All three slots become
        pending immediately; results of earlier cycles are discarded.

        Args:
            config: Finalized configuration. A private copy is taken.

        Returns:
            Handle on the three in-flight requests.

        Raises:
            InvalidInputError: If name or description is blank. No request is issued.
            RuntimeError: If no event loop is running. Nothing is changed.
        """
        missing = config.missing_identity()
        if missing:
            raise InvalidInputError(
                "Project name and description are required", missing=missing
            )

        # Raises before any state changes when no loop is running
        asyncio.get_running_loop()
        requests = build_requests(config, self.budgets)

        self._cycle += 1
        self._detached = False
        self._config = config.model_copy(deep=True)
        self._artifacts = ArtifactSet(self._cycle)
        cycle = self._cycle

        logger.info(f"Starting generation cycle {cycle} for '{config.name}'")

        tasks: dict[ArtifactKey, asyncio.Task] = {}
        for request in requests:
            self._publish(cycle, ArtifactSlot.pending(request.key))
            task = asyncio.create_task(
                self._run_request(cycle, request),
                name=f"generate-{request.key.value}-{cycle}",
            )
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            tasks[request.key] = task

        return GenerationHandle(cycle, tasks)

    async def _run_request(self, cycle: int, request: GenerationRequest) -> None:
        """Produce exactly one slot transition for ``request``."""
        try:
            if self.timeout:
                text = await asyncio.wait_for(
                    self._complete(request.prompt, request.max_tokens), self.timeout
                )
            else:
                text = await self._complete(request.prompt, request.max_tokens)
        except asyncio.CancelledError:
            raise
        except asyncio.TimeoutError as e:
            # Also raised by the capability itself, e.g. a socket read timeout
            if self.timeout:
                cause = f"Timed out after {self.timeout:g} seconds"
            else:
                cause = _describe_failure(e)
            slot = ArtifactSlot.failed(request.key, cause)
        except Exception as e:
            slot = ArtifactSlot.failed(request.key, _describe_failure(e))
        else:
            if isinstance(text, str) and text.strip():
                slot = ArtifactSlot.ready(request.key, text)
            else:
                slot = ArtifactSlot.failed(request.key, "The model returned an empty response")

        if slot.is_failed:
            logger.warning(f"Cycle {cycle}: {slot.error}")
        else:
            logger.info(f"Cycle {cycle}: {request.key.value} ready ({len(slot.text or '')} chars)")

        self._publish(cycle, slot)

    def _publish(self, cycle: int, slot: ArtifactSlot) -> None:
        if cycle != self._cycle or self._detached:
            logger.debug(f"Ignoring {slot.key.value} result of stale cycle {cycle}")
            return

        self._artifacts.set(slot)
        for listener in list(self._listeners):
            try:
                listener(slot)
            except Exception:
                logger.exception(f"Slot listener failed for {slot.key.value}")

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def _ready_slot(self, key: ArtifactKey | str) -> ArtifactSlot:
        slot = self._artifacts[key]
        if not slot.is_ready:
            raise ArtifactNotReadyError(f"{slot.key.label} is {slot.status.value}, not ready")
        return slot

    def copy(self, key: ArtifactKey | str) -> ActionResult:
        """
        Copy a ready artifact to the clipboard.

        Raises:
            ArtifactNotReadyError: If the slot is not ready.
        """
        slot = self._ready_slot(key)

        if self.clipboard is None:
            return ActionResult(ok=False, message="Clipboard is not available")

        try:
            self.clipboard.write_text(slot.text or "")
        except ClipboardUnavailableError as e:
            logger.warning(f"Copy of {slot.key.value} failed: {e}")
            return ActionResult(ok=False, message=str(e))

        return ActionResult(ok=True, message=f"{slot.key.label} copied to clipboard")

    def default_filename(self, key: ArtifactKey | str) -> str:
        """``<project>-<artifact>.md`` for the current cycle's project."""
        name = self._config.name if self._config else ""
        return f"{slugify(name)}-{ArtifactKey(key).file_suffix}.md"

    def download(self, key: ArtifactKey | str, filename: str | None = None) -> ActionResult:
        """
        Save a ready artifact as a markdown file.

        Args:
            key: Artifact to save.
            filename: Target file name. Defaults to ``default_filename(key)``.

        Raises:
            ArtifactNotReadyError: If the slot is not ready.
        """
        slot = self._ready_slot(key)
        filename = filename or self.default_filename(slot.key)

        try:
            path = self.saver.save(filename, slot.text or "", MARKDOWN_MEDIA_TYPE)
        except SaveUnavailableError as e:
            logger.warning(f"Download of {slot.key.value} failed: {e}")
            return ActionResult(ok=False, message=str(e))

        return ActionResult(ok=True, message=f"{slot.key.label} saved to {path}", path=path)


def _describe_failure(error: Exception) -> str:
    """Human-readable cause for a failed request."""
    message = str(error).strip()
    name = type(error).__name__
    return f"{name}: {message}" if message else name
