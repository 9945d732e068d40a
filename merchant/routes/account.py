"""Account and identity routes for mock merchant"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request

from ..models.account import (
    AssignRoleRequest,
    RoleResponse,
    TokenRequest,
    TokenResponse,
    UserProfile,
)
from ..database import UserDatabase, get_user_db
from ..security.auth import Caller, optional_user, require_user, require_admin

logger = logging.getLogger(__name__)

auth_router = APIRouter(prefix="/api/auth", tags=["Auth"])
router = APIRouter(prefix="/api/account", tags=["Account"])


@auth_router.post("/token", response_model=TokenResponse)
async def issue_token(token_request: TokenRequest, request: Request):
    """
    Development login.

    Issues a bearer token for the given user id without any credential
    check; a real deployment puts an identity provider here.
    """
    token = request.app.state.token_issuer.issue(token_request.user_id)
    logger.info(f"Issued token for {token_request.user_id}")
    return TokenResponse(access_token=token)


@router.get("/role", response_model=RoleResponse)
async def get_caller_role(caller: Caller = Depends(optional_user)):
    """Role of the caller (guest when not signed in)"""
    return RoleResponse(role=caller.role)


@router.get("/profile", response_model=Optional[UserProfile])
async def get_caller_profile(
    user_db: UserDatabase = Depends(get_user_db),
    caller: Caller = Depends(require_user),
):
    """Caller's profile, or null if none was saved"""
    return user_db.get_profile(caller.user_id)


@router.put("/profile", status_code=204, response_model=None)
async def save_caller_profile(
    profile: UserProfile,
    user_db: UserDatabase = Depends(get_user_db),
    caller: Caller = Depends(require_user),
):
    """Save the caller's profile"""
    user_db.save_profile(caller.user_id, profile)


@router.put("/roles/{user_id}", status_code=204, response_model=None)
async def assign_role(
    user_id: str,
    request: AssignRoleRequest,
    user_db: UserDatabase = Depends(get_user_db),
    caller: Caller = Depends(require_admin),
):
    """Assign a role to a user (admin only)"""
    user_db.assign_role(user_id, request.role)
    logger.info(f"{caller.user_id} assigned role {request.role.value} to {user_id}")
