"""
Pydantic models for user data.

Passwords only ever travel inbound; none of the response models
carries one.
"""

from pydantic import BaseModel, Field

from . import CamelModel


class UserCreate(BaseModel):
    """Schema for registering a user."""

    name: str = Field(..., examples=["Jane Doe"])
    email: str = Field(..., examples=["jane@example.com"])
    password: str = Field(..., examples=["strongpassword"])


class UserLogin(BaseModel):
    email: str = Field(..., examples=["jane@example.com"])
    password: str = Field(..., examples=["strongpassword"])


class UserRead(CamelModel):
    """Public view of a user."""

    id: int
    name: str
    email: str


class LoginResponse(BaseModel):
    token: str
    user: UserRead
