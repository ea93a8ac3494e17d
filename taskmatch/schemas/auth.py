"""
Authentication schemas.
"""
from pydantic import EmailStr, Field, model_validator

from taskmatch.models.user import User, UserRole
from taskmatch.schemas.base import BaseSchema


class LoginRequest(BaseSchema):
    """Login request body. The password is required but not checked."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class SignupRequest(BaseSchema):
    """Signup request body."""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    role: UserRole
    password: str = Field(..., min_length=6)
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self) -> "SignupRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class SessionResponse(BaseSchema):
    """Token plus the identity the session was opened for."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    user: User
