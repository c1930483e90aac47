"""Users API client."""

from site_client.users.client import UsersClient
from site_client.users.schemas import UserProfile, UserRole

__all__ = [
    "UsersClient",
    "UserProfile",
    "UserRole",
]
