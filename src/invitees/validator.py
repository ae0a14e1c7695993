from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.invitees.dtos import (
    InvalidEmailError,
    InvalidPhoneFormatError,
    MissingEmailError,
    ValidInviteeDTO,
)

_email_adapter = TypeAdapter(EmailStr)


def validate_invitee(email: str | None, phone: str | None) -> ValidInviteeDTO:
    """Check registration input before anything is written.

    The phone must be in E.164 form, i.e. start with '+' and the country code.
    The email only has to be present and well formed; uniqueness is decided by
    the identity directory.
    """
    if not phone or not phone.startswith("+"):
        raise InvalidPhoneFormatError(phone)

    if not email or not email.strip():
        raise MissingEmailError()

    try:
        _email_adapter.validate_python(email)
    except PydanticValidationError as e:
        raise InvalidEmailError(email) from e

    return ValidInviteeDTO(email=email, phone=phone)
