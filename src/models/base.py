from datetime import datetime
from uuid import UUID, uuid4

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, declarative_base, mapped_column
from sqlalchemy_utils import UUIDType

BaseModel = declarative_base()


class Base(BaseModel):
    """Every table here is a record keyed by ``uuid`` with creation/update timestamps.

    ``created_at`` defaults on the server but may be set explicitly, which the
    RSVP store does so that its returned records carry the stored value.
    """

    __abstract__ = True

    type_annotation_map = {
        UUID: UUIDType,
    }

    uuid: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        server_default=sa.func.current_timestamp(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        server_default=sa.func.current_timestamp(),
        onupdate=sa.func.current_timestamp(),
        nullable=False,
    )
