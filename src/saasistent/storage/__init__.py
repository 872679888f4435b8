"""Storage utilities for SaaSistent."""

from saasistent.storage.paths import (
    ensure_directory,
    expand_path,
    get_global_config_path,
    get_logs_dir,
    get_projects_dir,
    get_saasistent_home,
    get_session_path,
    slugify,
)
from saasistent.storage.projects import (
    ProjectNotFoundError,
    ProjectRecord,
    ProjectStatus,
    ProjectStore,
)

__all__ = [
    "ProjectNotFoundError",
    "ProjectRecord",
    "ProjectStatus",
    "ProjectStore",
    "ensure_directory",
    "expand_path",
    "get_global_config_path",
    "get_logs_dir",
    "get_projects_dir",
    "get_saasistent_home",
    "get_session_path",
    "slugify",
]
