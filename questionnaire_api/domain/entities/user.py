"""
User Entity Module

This module defines the User entity for the domain layer.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class User(BaseModel):
    """User domain entity representing a registered account."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int | None = Field(default=None, description="Unique identifier for the user")
    username: str = Field(..., description="Username for login")
    email: EmailStr = Field(..., description="User's email address")
    password_hash: str = Field(..., description="Hashed password for authentication", repr=False)
    role_id: int | None = Field(default=None, description="Role assigned to the user")
    created_at: datetime | None = None
