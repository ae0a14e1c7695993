from dataclasses import dataclass
from uuid import UUID

from src.errors import AuthError, DependencyError, ValidationError
from src.notifications.dtos import DispatchReport

INVALID_PHONE_MESSAGE = 'Phone number must start with a "+" and include the country code.'


class InvalidPhoneFormatError(ValidationError):
    """Raised when a phone number is empty or lacks the leading '+' country code."""

    def __init__(self, phone: str | None) -> None:
        self.phone = phone
        super().__init__(INVALID_PHONE_MESSAGE)


class MissingEmailError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Email is required.")


class InvalidEmailError(ValidationError):
    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"'{email}' is not a valid email address.")


class DirectoryError(DependencyError):
    """Raised when the identity directory cannot create or look up an invitee."""


class DuplicateInviteeError(DirectoryError):
    """Raised when the directory already holds an invitee with this email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"An invitee with email '{email}' already exists.")


class DirectoryUnavailableError(DirectoryError):
    pass


class MissingCredentialsError(AuthError):
    def __init__(self) -> None:
        super().__init__("Email and phone number are required.")


class InviteeNotFoundError(AuthError):
    # Deliberately does not say which of email or phone did not match
    def __init__(self) -> None:
        super().__init__("Invalid credentials. User not found.")


@dataclass(frozen=True)
class ValidInviteeDTO:
    """Registration input that passed validation."""

    email: str
    phone: str


@dataclass(frozen=True)
class InviteeDTO:
    """DTO for an invitee record held by the identity directory."""

    id: UUID
    email: str
    phone: str


@dataclass(frozen=True)
class InviteeSummaryDTO:
    """DTO returned by a successful login lookup."""

    id: UUID
    email: str
    phone: str

    @classmethod
    def from_invitee(cls, invitee: InviteeDTO) -> "InviteeSummaryDTO":
        return cls(id=invitee.id, email=invitee.email, phone=invitee.phone)


@dataclass(frozen=True)
class RegisteredInviteeDTO:
    """DTO for a completed registration and the outcome of its welcome notification."""

    invitee: InviteeDTO
    welcome_report: DispatchReport
