from uuid import UUID

from pydantic import BaseModel, SecretStr


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: str
    password: SecretStr


class LoginResponse(BaseModel):
    """Token issued on successful login."""

    token: str
    token_type: str = "bearer"
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str
    user_id: UUID
    jti: str
