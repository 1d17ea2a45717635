from uuid import UUID

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: str
    password: str


class Token(BaseModel):
    """Token schema returned after a successful login."""

    token: str
    token_type: str = "bearer"
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str
    user_id: UUID
    jti: str
    token_type: str
