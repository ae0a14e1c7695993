from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.errors import DependencyError

EVENT_DATE_FORMAT = "%B %d, %Y"


@dataclass(frozen=True)
class EventDTO:
    """Read-only view of an event, as far as notifications need it."""

    id: UUID
    name: str
    location: str | None = None
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    capacity: int | None = None
    description: str | None = None

    @property
    def formatted_date(self) -> str:
        if self.starts_at is None:
            return "Not specified"
        return self.starts_at.strftime(EVENT_DATE_FORMAT)


class EventLookupError(DependencyError):
    """Raised when the event store cannot be queried."""
