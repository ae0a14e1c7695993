"""DTOs for the register feature."""

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Request body for registering an invitee.

    Fields are optional here so that missing values are reported by the
    validator with a 400 instead of a schema error.
    """

    email: str | None = None
    tel: str | None = None


class RegisterResponse(BaseModel):
    message: str
