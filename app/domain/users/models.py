from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Identity, String, TIMESTAMP, func
from app.core.database import Base
from app.domain.timestamps import utcnow
from datetime import datetime


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Identity(always=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True),
                                                 default=utcnow,
                                                 server_default=func.now(),
                                                 nullable=False)

    events: Mapped[list["Event"]] = relationship(back_populates="user", passive_deletes=True)
    orders: Mapped[list["Order"]] = relationship(back_populates="user", passive_deletes=True)
