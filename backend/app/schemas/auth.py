"""
Request/response schemas for signup and login.

Passwords are bounded at 72 UTF-8 bytes: bcrypt only reads that many, so a
longer password would silently share a hash with its prefix.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import AuthorSummary

BCRYPT_MAX_PASSWORD_BYTES = 72


def _check_password(v: str) -> str:
    if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return v


def _check_email(v: str) -> str:
    local, sep, domain = v.partition("@")
    if not sep or not local or not domain or " " in v:
        raise ValueError("Email must look like name@domain")
    return v


class SignupRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255, description="Case-sensitive login key")
    password: str = Field(min_length=1)
    image: Optional[str] = Field(default=None, max_length=1_000_000, description="Avatar URL or data URL")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _check_password(v)


class SignupResponse(BaseModel):
    message: str = "User registered successfully"
    user_id: uuid.UUID


class LoginRequest(BaseModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _check_password(v)


class LoginResponse(BaseModel):
    message: str = "Login successful"
    token: str = Field(description="Bearer token, valid for TOKEN_TTL_DAYS")
    user: AuthorSummary


class TokenClaim(BaseModel):
    """Identity carried inside a bearer token. Never persisted."""
    user_id: uuid.UUID
    email: str

    model_config = {"frozen": True}
