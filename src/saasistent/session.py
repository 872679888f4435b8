"""
Current-user session for SaaSistent.

Authentication itself is delegated to an external provider; this module only
answers "who is signed in" and applies the routing rules that depend on it.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol
from urllib.parse import urlencode

from pydantic import BaseModel

from saasistent.config.loader import load_yaml_file, save_yaml_file
from saasistent.storage.paths import get_session_path

logger = logging.getLogger(__name__)

PROTECTED_PREFIX = "/dashboard"
LOGIN_PATH = "/login"
AUTH_PAGES = frozenset({"/login", "/signup", "/reset-password"})


class UserProfile(BaseModel):
    """Basic profile fields of the signed-in user."""

    email: str
    display_name: str | None = None
    avatar_url: str | None = None

    @property
    def label(self) -> str:
        return self.display_name or self.email


class SessionProvider(Protocol):
    """Source of the current user."""

    def current_user(self) -> UserProfile | None: ...


class LocalSessionProvider:
    """Session persisted as a small YAML file in the SaaSistent home."""

    def __init__(self, path: Path | None = None):
        self.path = path or get_session_path()

    def current_user(self) -> UserProfile | None:
        data = load_yaml_file(self.path)
        user = data.get("user")
        if not user:
            return None
        return UserProfile.model_validate(user)

    def sign_in(self, profile: UserProfile) -> None:
        save_yaml_file(self.path, {"user": profile.model_dump(exclude_none=True)})
        logger.info(f"Signed in as {profile.email}")

    def sign_out(self) -> bool:
        """Returns False when nobody was signed in."""
        if not self.path.exists():
            return False
        self.path.unlink()
        logger.info("Signed out")
        return True


@dataclass(frozen=True)
class RouteDecision:
    """Either let the request through or redirect it."""

    redirect_to: str | None = None

    @property
    def allowed(self) -> bool:
        return self.redirect_to is None


def resolve_route(pathname: str, user: UserProfile | None) -> RouteDecision:
    """
    Apply the session-dependent routing rules.

    - Dashboard paths need a user; anonymous requests go to the login page
      with the original path in ``redirect``.
    - Login, signup and password-reset pages send signed-in users to the dashboard.
    """
    if pathname == PROTECTED_PREFIX or pathname.startswith(PROTECTED_PREFIX + "/"):
        if user is None:
            return RouteDecision(f"{LOGIN_PATH}?{urlencode({'redirect': pathname})}")

    if pathname in AUTH_PAGES and user is not None:
        return RouteDecision(PROTECTED_PREFIX)

    return RouteDecision()
