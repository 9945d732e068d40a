"""Account models for the storefront client"""

from enum import Enum

from pydantic import BaseModel, Field


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


class UserProfile(BaseModel):
    """Caller's display profile"""
    name: str = Field(min_length=1)
