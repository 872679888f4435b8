"""
Path utilities for SaaSistent.

Provides consistent path resolution for configuration, session, projects and logs.
"""

import os
from pathlib import Path


def get_saasistent_home() -> Path:
    """
    Get the SaaSistent home directory.

    Resolution order:
    1. SAASISTENT_HOME environment variable
    2. Default: ~/.saasistent

    Returns:
        Path to the SaaSistent home directory.
    """
    env_home = os.environ.get("SAASISTENT_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".saasistent"


def get_global_config_path() -> Path:
    """
    Get the path to the global configuration file.

    Returns:
        Path to ~/.saasistent/config.yaml
    """
    return get_saasistent_home() / "config.yaml"


def get_session_path() -> Path:
    """
    Get the path to the local session file.

    Returns:
        Path to ~/.saasistent/session.yaml
    """
    return get_saasistent_home() / "session.yaml"


def get_projects_dir() -> Path:
    """
    Get the projects directory.

    Returns:
        Path to ~/.saasistent/projects/
    """
    return get_saasistent_home() / "projects"


def get_logs_dir() -> Path:
    """
    Get the logs directory.

    Returns:
        Path to ~/.saasistent/logs/
    """
    return get_saasistent_home() / "logs"


def expand_path(path: str | Path) -> Path:
    """
    Expand a path string, handling ~ and environment variables.

    Args:
        path: Path string or Path object.

    Returns:
        Expanded and resolved Path.
    """
    if isinstance(path, str):
        path = os.path.expandvars(path)
        path = os.path.expanduser(path)
    return Path(path).resolve()


def ensure_directory(path: Path, mode: int = 0o755) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path.
        mode: Permission mode for created directories.

    Returns:
        The path (for chaining).
    """
    path.mkdir(parents=True, exist_ok=True, mode=mode)
    return path


def slugify(name: str) -> str:
    """Turn a project name into a filesystem-friendly slug."""
    cleaned = "".join(ch.lower() if ch.isalnum() else "-" for ch in name.strip())
    slug = "-".join(part for part in cleaned.split("-") if part)
    return slug or "project"
