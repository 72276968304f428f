"""
Pydantic models for user accounts.

A user is a login credential, optionally linked to an employee profile.
Passwords are accepted on registration and login but never returned.
"""

from typing import Optional

from pydantic import Field

from .common import ApiModel


class UserCreate(ApiModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, examples=["admin"])
    password: str = Field(..., min_length=1)
    employee_id: Optional[int] = None


class UserLogin(ApiModel):
    username: str
    password: str


class UserRead(ApiModel):
    """Schema for reading a user from the API."""

    id: int
    username: str
    employee_id: Optional[int] = None


class LoginResponse(ApiModel):
    user: UserRead
    access_token: str
    token_type: str = "bearer"
