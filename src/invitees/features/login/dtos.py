"""DTOs for the login feature."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str | None = None
    tel: str | None = None


class LoginResponse(BaseModel):
    success: bool
    message: str
