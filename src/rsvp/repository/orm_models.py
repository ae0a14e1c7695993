from uuid import UUID

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base
from src.rsvp.dtos import RSVPAnswer


class RSVPResponse(Base):
    """One RSVP submission. Resubmissions append a new row."""

    __tablename__ = TableNames.RSVP_RESPONSES.value

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    response: Mapped[str] = mapped_column(
        Enum(
            RSVPAnswer,
            name="rsvp_answer_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<RSVPResponse {self.email} {self.response} for event {self.event_id}>"
