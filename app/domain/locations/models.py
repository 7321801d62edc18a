from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Identity, String
from app.core.database import Base
from app.domain.timestamps import TimestampMixin


class Location(TimestampMixin, Base):
    __tablename__ = "lokasis"

    id: Mapped[int] = mapped_column(Identity(always=True), primary_key=True)
    nama_lokasi: Mapped[str] = mapped_column(String(255), nullable=False)

    events: Mapped[list["Event"]] = relationship(back_populates="location", passive_deletes=True)
