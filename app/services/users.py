"""User service - caller profile and roles."""

from app.cache import keys
from app.errors import require_text
from app.services.base import BaseService
from site_client.users import UserProfile, UserRole


class UserService(BaseService):
    """Profile and role queries and mutations."""

    async def caller_profile(self) -> UserProfile | None:
        return await self._query(keys.CURRENT_USER_PROFILE, lambda c: c.caller_profile(), None)

    async def user_profile(self, principal: str) -> UserProfile | None:
        if not principal:
            return None
        return await self._query(
            keys.with_params(keys.USER_PROFILE, principal),
            lambda c: c.user_profile(principal),
            None,
        )

    async def save_caller_profile(self, profile: UserProfile) -> None:
        require_text(profile.name, "name")
        await self._mutate("save_caller_profile", lambda c: c.save_caller_profile(profile))

    async def is_admin(self) -> bool | None:
        """True/False once resolved; None while unknown (backend unavailable or failing)."""
        return await self._query(keys.IS_ADMIN, lambda c: c.is_caller_admin(), None)

    async def role(self) -> UserRole | None:
        return await self._query(keys.CALLER_ROLE, lambda c: c.caller_role(), None)

    async def assign_role(self, principal: str, role: UserRole) -> None:
        require_text(principal, "principal")
        await self._mutate("assign_user_role", lambda c: c.assign_user_role(principal, role))
