"""
Authentication endpoints for API v1.

Provide company registration, login, the current user's profile and
member management for administrators.  Tokens returned by ``/login``
must be sent as ``Authorization: Bearer <token>`` to every ERP route.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from erp_api.app.core.rate_limit import login_limiter
from erp_api.app.core.security import get_current_user, require_roles
from erp_api.app.schemas.user import MemberCreate, Token, UserCreate, UserLogin, UserRead
from erp_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user: UserCreate) -> UserRead:
    """Register the founding admin of a company.

    Returns 409 when the e-mail is taken and 403 when the company
    already has users.
    """
    return await UserService.create_user(user)


@router.post("/login", response_model=Token)
async def login_user(credentials: UserLogin) -> Token:
    """Exchange credentials for a token.

    Every attempt counts against the e-mail's login window; once it is
    used up the route answers 429 until the window resets.
    """
    login_limiter.check(credentials.email.strip().lower())
    token = await UserService.authenticate(credentials.email, credentials.password)
    if token is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return token


@router.get("/me", response_model=UserRead)
async def read_me(current_user: Dict[str, Any] = Depends(get_current_user)) -> UserRead:
    """Return the authenticated user's profile.

    The static administrator token has no user record behind it, so it
    yields a 404 here.
    """
    user = await UserService.get_user(current_user.get("user_id"))
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("/users", response_model=List[UserRead])
async def list_users(current_user: Dict[str, Any] = Depends(require_roles("admin", "manager"))) -> List[UserRead]:
    """List the users of the caller's company (admins and managers only)."""
    return await UserService.list_users(current_user["company_id"])


@router.post("/users", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def add_user(
    member: MemberCreate,
    current_user: Dict[str, Any] = Depends(require_roles("admin")),
) -> UserRead:
    """Add a user to the caller's company (admins only)."""
    return await UserService.add_member(current_user["company_id"], member)
