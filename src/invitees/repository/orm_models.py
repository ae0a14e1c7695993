from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base


class Invitee(Base):
    __tablename__ = TableNames.INVITEES.value

    # Uniqueness is enforced here; registration relies on it instead of pre-checking
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<Invitee {self.email}>"
