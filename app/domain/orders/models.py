from app.core.database import Base
from app.domain.timestamps import TimestampMixin, utcnow
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Identity, ForeignKey, Integer, TIMESTAMP, CheckConstraint, func


class Order(TimestampMixin, Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Identity(always=True), primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True)
    tanggal_order: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False
    )
    total_harga: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")

    user: Mapped["User"] = relationship(back_populates="orders")
    details: Mapped[list["OrderDetail"]] = relationship(
        back_populates="order",
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint("total_harga >= 0", name="chk_order_total_nonneg"),
    )


class OrderDetail(TimestampMixin, Base):
    __tablename__ = "detail_orders"

    id: Mapped[int] = mapped_column(Identity(always=True), primary_key=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    tiket_id: Mapped[int] = mapped_column(ForeignKey("tikets.id", ondelete="CASCADE"), nullable=False, index=True)
    jumlah: Mapped[int] = mapped_column(Integer, nullable=False)
    subtotal_harga: Mapped[int] = mapped_column(Integer, nullable=False)

    order: Mapped["Order"] = relationship(back_populates="details")
    ticket: Mapped["Ticket"] = relationship(back_populates="order_details")

    __table_args__ = (
        CheckConstraint("jumlah > 0", name="chk_detail_jumlah_pos"),
        CheckConstraint("subtotal_harga >= 0", name="chk_detail_subtotal_nonneg"),
    )
