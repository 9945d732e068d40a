"""User roles and profiles for mock merchant"""

from typing import Optional

from ..models.account import UserProfile, UserRole


class UserDatabase:
    """In-memory user roles and profiles"""

    def __init__(self, admin_users: Optional[list[str]] = None):
        self.roles: dict[str, UserRole] = {
            user_id: UserRole.ADMIN for user_id in admin_users or []
        }
        self.profiles: dict[str, UserProfile] = {}

    def get_role(self, user_id: Optional[str]) -> UserRole:
        """Role of a caller; anonymous callers are guests, known ones users"""
        if user_id is None:
            return UserRole.GUEST
        return self.roles.get(user_id, UserRole.USER)

    def assign_role(self, user_id: str, role: UserRole) -> None:
        self.roles[user_id] = role

    def get_profile(self, user_id: str) -> Optional[UserProfile]:
        return self.profiles.get(user_id)

    def save_profile(self, user_id: str, profile: UserProfile) -> None:
        self.profiles[user_id] = profile
