from sqlalchemy.orm import mapped_column, Mapped, relationship
from sqlalchemy import Identity, String, Text, ForeignKey, TIMESTAMP
from app.core.database import Base
from app.domain.timestamps import TimestampMixin
from datetime import datetime


class Event(TimestampMixin, Base):
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Identity(always=True), primary_key=True)
    judul: Mapped[str] = mapped_column(String(255), nullable=False)
    deskripsi: Mapped[str | None] = mapped_column(Text, nullable=True)
    tanggal_waktu: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False, index=True)
    lokasi_id: Mapped[int] = mapped_column(
        ForeignKey("lokasis.id", ondelete='RESTRICT'),
        nullable=False,
        index=True
    )
    kategori_id: Mapped[int] = mapped_column(
        ForeignKey("kategoris.id", ondelete='RESTRICT'),
        nullable=False,
        index=True
    )
    gambar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete='RESTRICT'),
        nullable=False,
        index=True
    )

    location: Mapped['Location'] = relationship(back_populates='events')
    category: Mapped['Category'] = relationship(back_populates='events')
    user: Mapped['User'] = relationship(back_populates='events')
    tickets: Mapped[list['Ticket']] = relationship(back_populates='event', passive_deletes=True)
