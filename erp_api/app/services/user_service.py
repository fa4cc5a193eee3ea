"""
Business logic for user accounts.

The ``UserService`` stores users in memory and issues access tokens.
Passwords are hashed with PBKDF2 (see ``core.security``).  E-mail
addresses are unique across all companies because they are the login
name.
"""

import logging
from typing import List, Optional, Union

from erp_api.app.core.config import settings
from erp_api.app.core.errors import conflict, forbidden
from erp_api.app.core.security import create_access_token, hash_password, verify_password
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.user import MemberCreate, Token, User, UserCreate, UserRead
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

users: InMemoryStore[User] = InMemoryStore("users")


class UserService:
    """Registration, authentication and lookup of users."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Register the first user of a company, who becomes its admin.

        Companies that already have users only grow through
        ``add_member``; self-registration into them is forbidden.
        """
        if cls._find_by_email(data.email.strip().lower()) is not None:
            raise conflict("Email already registered")
        company_id = data.company_id or settings.default_company_id
        if users.filter(company_id=company_id):
            logger.warning("Rejected self-registration of %s into existing company %s", data.email, company_id)
            raise forbidden("Company already has users; ask an administrator to add you")
        user = cls._store_user(company_id, data, role="admin")
        await AuditService.log(
            company_id=company_id,
            action="create",
            object_type="user",
            object_id=user.id,
            details={"email": user.email, "role": user.role},
            user_id=user.id,
        )
        return UserRead.model_validate(user)

    @classmethod
    async def add_member(cls, company_id: str, data: MemberCreate) -> UserRead:
        """Create a user in an existing company on behalf of its admin."""
        user = cls._store_user(company_id, data, role=data.role)
        await AuditService.record("create", "user", user, email=user.email, role=user.role)
        return UserRead.model_validate(user)

    @classmethod
    async def authenticate(cls, email: str, password: str) -> Optional[Token]:
        """Return a token for valid credentials, otherwise ``None``."""
        user = cls._find_by_email(email.strip().lower())
        if user is None or user.disabled or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", email)
            return None
        token = create_access_token(
            {"sub": user.email, "user_id": user.id, "company_id": user.company_id, "role": user.role}
        )
        logger.info("User %s logged in", user.id)
        return Token(access_token=token, user=UserRead.model_validate(user))

    @classmethod
    async def list_users(cls, company_id: str) -> List[UserRead]:
        return [UserRead.model_validate(user) for user in users.filter(company_id=company_id)]

    @classmethod
    async def get_user(cls, user_id: Optional[str]) -> Optional[UserRead]:
        user = cls.get_user_sync(user_id)
        return UserRead.model_validate(user) if user else None

    @classmethod
    def get_user_sync(cls, user_id: Optional[str]) -> Optional[User]:
        """Synchronous lookup used by the authentication dependency."""
        if not user_id:
            return None
        return users.get(user_id)

    @classmethod
    def _store_user(cls, company_id: str, data: Union[UserCreate, MemberCreate], role: str) -> User:
        email = data.email.strip().lower()
        if cls._find_by_email(email) is not None:
            raise conflict("Email already registered")
        user = users.add(
            User(
                company_id=company_id,
                email=email,
                password_hash=hash_password(data.password),
                first_name=data.first_name,
                last_name=data.last_name,
                role=role,
            )
        )
        logger.info("Registered user %s (%s) for company %s", user.id, user.role, company_id)
        return user

    @classmethod
    def _find_by_email(cls, email: str) -> Optional[User]:
        matches = users.filter(email=email)
        return matches[0] if matches else None
