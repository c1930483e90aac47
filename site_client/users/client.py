"""Users API client - profiles and roles."""

from site_client.base import BaseClient
from site_client.users.schemas import UserProfile, UserRole


class UsersClient(BaseClient):
    """Client for profile and role endpoints."""

    async def caller_profile(self) -> UserProfile | None:
        """GET /users/me/profile - caller's profile or None."""
        data = await self._get("users/me/profile")
        return UserProfile.model_validate(data) if data is not None else None

    async def user_profile(self, principal: str) -> UserProfile | None:
        """GET /users/{principal}/profile."""
        data = await self._get(f"users/{principal}/profile")
        return UserProfile.model_validate(data) if data is not None else None

    async def save_caller_profile(self, profile: UserProfile) -> None:
        """PUT /users/me/profile."""
        await self._put("users/me/profile", profile.model_dump())

    async def caller_role(self) -> UserRole:
        """GET /users/me/role."""
        return UserRole(await self._get("users/me/role"))

    async def is_caller_admin(self) -> bool:
        """GET /users/me/admin."""
        return bool(await self._get("users/me/admin"))

    async def assign_user_role(self, principal: str, role: UserRole) -> None:
        """PUT /users/{principal}/role."""
        await self._put(f"users/{principal}/role", {"role": role.value})
