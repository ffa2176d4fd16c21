"""Signed-in user identity for the user menu.

No session integration is wired yet, so the app runs with
:class:`PlaceholderIdentityProvider`; a real provider only has to satisfy
:class:`IdentityProvider`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol

from loguru import logger
from pydantic import BaseModel, Field

from claims_portal.core.formatting import initials

if TYPE_CHECKING:
    from omegaconf import DictConfig

DEFAULT_LOGOUT_REDIRECT = "/login"


class UserIdentity(BaseModel):
    """Who is shown in the user menu."""

    display_name: str = Field(default="User", description="Name shown in the menu")
    email: Optional[str] = None
    role: Optional[str] = None

    @property
    def initials(self) -> str:
        return initials(self.display_name)


class IdentityProvider(Protocol):
    def current_user(self) -> UserIdentity: ...

    def sign_out(self, redirect_target: str = DEFAULT_LOGOUT_REDIRECT) -> str: ...


class PlaceholderIdentityProvider:
    """Fixed identity used until a session provider is integrated."""

    def __init__(self, user: UserIdentity | None = None) -> None:
        self._user = user or UserIdentity(
            display_name="Admin User",
            email="admin@example.com",
            role="Admin Focal",
        )

    @classmethod
    def from_config(cls, cfg: DictConfig | dict[str, Any]) -> PlaceholderIdentityProvider:
        """Build from the ``ui.identity`` config section."""
        return cls(
            UserIdentity(
                display_name=cfg.get("display_name") or "User",
                email=cfg.get("email"),
                role=cfg.get("role"),
            )
        )

    def current_user(self) -> UserIdentity:
        return self._user

    def sign_out(self, redirect_target: str = DEFAULT_LOGOUT_REDIRECT) -> str:
        """Nothing to revoke for a placeholder; return where to send the user."""
        logger.info(
            "Sign-out requested for {user}, redirecting to {target}",
            user=self._user.display_name,
            target=redirect_target,
        )
        return redirect_target
