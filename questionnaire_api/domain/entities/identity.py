"""
Identity context entity.

The validated, request-scoped claims of the caller, produced by decoding an
access token. Never persisted.
"""

from pydantic import BaseModel, ConfigDict


class IdentityContext(BaseModel):
    """Decoded, trusted identity of an in-flight request."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    role_id: int | None = None
    username: str | None = None
