"""DTOs for the submit RSVP feature."""

from uuid import UUID

from pydantic import BaseModel, EmailStr


class SubmitRSVPRequest(BaseModel):
    """RSVP form body.

    ``response`` stays a plain string so that a missing or "pending" answer is
    reported as a 400 with a readable message.
    """

    name: str
    email: EmailStr
    phone: str | None = None
    response: str | None = None


class SubmitRSVPResponse(BaseModel):
    rsvp_id: UUID
    message: str
    response: str
    confirmation_sent: bool
