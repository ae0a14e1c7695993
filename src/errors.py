"""Error taxonomy shared by every feature.

Routers map these families onto HTTP status codes:

- ValidationError: caller input is malformed, nothing was mutated (400)
- AuthError: credential lookup failed (400/401)
- DependencyError: the directory or a store failed or refused (500)
- DeliveryError: a notification channel failed; always advisory
"""


class InvitationError(Exception):
    """Base class for all errors raised by this service."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(InvitationError):
    """Raised before any side effect when caller input is malformed."""


class DependencyError(InvitationError):
    """Raised when a collaborator (directory, store) is unreachable or rejects a write."""


class DeliveryError(InvitationError):
    """Raised when a notification could not be delivered over a channel."""


class AuthError(InvitationError):
    """Raised when a credential lookup does not produce an invitee."""
