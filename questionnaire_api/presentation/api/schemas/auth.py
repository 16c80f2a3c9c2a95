"""
Pydantic schemas for authentication-related requests and responses.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequestSchema(BaseModel):
    """Request schema for new user registration."""

    username: str = Field(..., min_length=1, max_length=100, description="Unique username")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=8, description="User's chosen password (min 8 characters)")


class UserResponseSchema(BaseModel):
    """User data with no credential material."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int
    username: str
    email: EmailStr
    role_id: int | None = None


class LoginRequestSchema(BaseModel):
    username: str = Field(..., description="Username")
    password: str = Field(..., description="User's password")


class TokenResponseSchema(BaseModel):
    """Response schema for successful login."""

    access_token: str = Field(..., description="JWT Access Token")
    token_type: str = Field("bearer", description="Type of the token")
    role_name: str | None = Field(None, description="Name of the user's role")


class RoleNameResponseSchema(BaseModel):
    role_name: str
