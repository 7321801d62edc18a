from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Identity, String
from app.core.database import Base
from app.domain.timestamps import TimestampMixin


class Category(TimestampMixin, Base):
    __tablename__ = "kategoris"

    id: Mapped[int] = mapped_column(Identity(always=True), primary_key=True)
    nama_kategori: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    events: Mapped[list["Event"]] = relationship(back_populates="category", passive_deletes=True)
