"""
Projects collection for SaaSistent.

Stores one JSON document per project in the projects directory and lists
them most recently updated first.
"""

import json
import logging
import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from saasistent.storage.paths import ensure_directory, get_projects_dir
from saasistent.wizard.models import ProjectConfig

logger = logging.getLogger(__name__)


class ProjectStatus(str, Enum):
    """Where a project is in its lifecycle."""

    DRAFT = "draft"
    CONFIGURED = "configured"
    GENERATED = "generated"


class ProjectNotFoundError(Exception):
    """No project with the requested id."""

    pass


class ProjectRecord(BaseModel):
    """A stored project."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str
    description: str = ""
    status: ProjectStatus = ProjectStatus.DRAFT
    framework: str | None = None
    config: ProjectConfig = Field(default_factory=ProjectConfig)
    artifacts: dict[str, str] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def from_config(
        cls,
        config: ProjectConfig,
        status: ProjectStatus = ProjectStatus.CONFIGURED,
    ) -> "ProjectRecord":
        return cls(
            name=config.name.strip(),
            description=config.description.strip(),
            status=status,
            framework=config.framework.value,
            config=config,
        )


class ProjectStore:
    """JSON-file backed projects collection."""

    def __init__(self, directory: Path | None = None):
        self.directory = Path(directory) if directory else get_projects_dir()

    def _path(self, project_id: str) -> Path:
        return self.directory / f"{project_id}.json"

    def list_projects(self) -> list[ProjectRecord]:
        """All readable projects, most recently updated first."""
        if not self.directory.exists():
            return []

        records = []
        for path in self.directory.glob("*.json"):
            try:
                records.append(ProjectRecord.model_validate_json(path.read_text(encoding="utf-8")))
            except (OSError, ValidationError) as e:
                logger.warning(f"Skipping unreadable project file {path}: {e}")

        return sorted(records, key=lambda r: r.updated_at, reverse=True)

    def get(self, project_id: str) -> ProjectRecord:
        """
        Load one project.

        Raises:
            ProjectNotFoundError: If it does not exist.
        """
        path = self._path(project_id)
        if not path.exists():
            raise ProjectNotFoundError(f"Project not found: {project_id}")
        return ProjectRecord.model_validate_json(path.read_text(encoding="utf-8"))

    def save(self, record: ProjectRecord, touch: bool = True) -> ProjectRecord:
        """Write a project, bumping ``updated_at`` unless ``touch`` is False."""
        if touch:
            record = record.model_copy(update={"updated_at": datetime.now()})

        ensure_directory(self.directory)
        payload = record.model_dump(mode="json", by_alias=False)
        self._path(record.id).write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.debug(f"Saved project {record.id} ({record.status.value})")
        return record

    def mark_generated(self, project_id: str, artifacts: dict[str, str]) -> ProjectRecord:
        """Record artifact locations and move the project to GENERATED."""
        record = self.get(project_id)
        record = record.model_copy(
            update={
                "status": ProjectStatus.GENERATED,
                "artifacts": {**record.artifacts, **artifacts},
            }
        )
        return self.save(record)

    def delete(self, project_id: str) -> None:
        """
        Remove a project.

        Raises:
            ProjectNotFoundError: If it does not exist.
        """
        path = self._path(project_id)
        if not path.exists():
            raise ProjectNotFoundError(f"Project not found: {project_id}")
        path.unlink()
