"""
Pydantic schemas for users and token authentication.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import List


class UserRegisterRequest(BaseModel):
    """Request schema for user registration. New users are never admins."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(
        ...,
        min_length=5,
        max_length=72,  # bcrypt limit
    )
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=30)
    email: EmailStr

    class Config:
        populate_by_name = True
        extra = "forbid"


class UserLoginRequest(BaseModel):
    """Request schema for login."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """JWT token response."""
    access_token: str
    token_type: str = "bearer"


class UserResponse(BaseModel):
    """User profile response (no password)."""
    username: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    is_admin: bool = Field(..., alias="isAdmin")

    class Config:
        populate_by_name = True


class UserEnvelope(BaseModel):
    user: UserResponse


class UserListEnvelope(BaseModel):
    users: List[UserResponse]
