"""
Pydantic models for user accounts.

Users belong to exactly one company; every ERP record they create or
read is scoped to that company.  Passwords are never returned through
the API; ``UserRead`` omits the stored hash.
"""

from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

Role = Literal["admin", "manager", "employee"]


class UserCreate(CamelModel):
    """Payload for self-registration, which founds a company.

    ``company_id`` may be omitted, in which case the configured default
    company is used.  Only a company without users can be registered
    into; the registering user becomes its administrator.
    """

    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$", examples=["jane@example.com"])
    password: str = Field(..., min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company_id: Optional[str] = Field(None, description="Company to found; defaults to the configured company")


class MemberCreate(CamelModel):
    """Payload an administrator uses to add a user to their company."""

    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Role = "employee"


class UserLogin(CamelModel):
    email: str
    password: str


class UserRead(CamelModel):
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company_id: str
    role: Role
    disabled: bool = False


class User(Record):
    """Stored user including the password hash."""

    email: str
    password_hash: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Role = "employee"
    disabled: bool = False


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
