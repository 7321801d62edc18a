from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Identity, String, Integer, ForeignKey, CheckConstraint
from app.core.database import Base
from app.domain.timestamps import TimestampMixin


class Ticket(TimestampMixin, Base):
    __tablename__ = "tikets"

    id: Mapped[int] = mapped_column(Identity(always=True), primary_key=True)
    event_id: Mapped[int] = mapped_column(ForeignKey("events.id", ondelete='CASCADE'), nullable=False, index=True)
    tipe: Mapped[str] = mapped_column(String(100), nullable=False)
    harga: Mapped[int] = mapped_column(Integer, nullable=False)
    stok: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    event: Mapped['Event'] = relationship(back_populates='tickets')
    order_details: Mapped[list['OrderDetail']] = relationship(back_populates='ticket', passive_deletes=True)

    __table_args__ = (
        CheckConstraint("harga >= 0", name="chk_tiket_harga_nonneg"),
        CheckConstraint("stok >= 0", name="chk_tiket_stok_nonneg"),
    )
