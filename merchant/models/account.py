"""Account models for mock merchant"""

from enum import Enum

from pydantic import BaseModel, Field


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


class UserProfile(BaseModel):
    """User display profile"""
    name: str = Field(min_length=1)


class RoleResponse(BaseModel):
    role: UserRole


class AssignRoleRequest(BaseModel):
    role: UserRole


class TokenRequest(BaseModel):
    """Development login: trade a user id for a bearer token"""
    user_id: str = Field(min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
