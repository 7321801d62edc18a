from datetime import datetime
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from .models import Event
from app.core.pagination import paginate


async def get_event_by_id(db: AsyncSession, event_id: int) -> Event | None:
    stmt = select(Event).where(Event.id == event_id)
    result = await db.execute(stmt)
    return result.scalars().first()


async def list_events(
        db: AsyncSession,
        page: int,
        page_size: int,
        *,
        judul: str | None = None,
        lokasi_id: int | None = None,
        kategori_id: int | None = None,
        user_id: int | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
) -> tuple[list[Event], int]:
    stmt = select(Event)
    where = []

    if judul:
        pattern = judul.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        where.append(Event.judul.ilike(f"%{pattern}%", escape="\\"))
    if lokasi_id is not None:
        where.append(Event.lokasi_id == lokasi_id)
    if kategori_id is not None:
        where.append(Event.kategori_id == kategori_id)
    if user_id is not None:
        where.append(Event.user_id == user_id)
    if date_from is not None:
        where.append(Event.tanggal_waktu >= date_from)
    if date_to is not None:
        where.append(Event.tanggal_waktu <= date_to)

    items, total = await paginate(
        db,
        base_stmt=stmt,
        page=page,
        page_size=page_size,
        where=where,
        order_by=[Event.tanggal_waktu.desc(), Event.id],
    )

    return items, total


async def create_event(db: AsyncSession, data: dict) -> Event:
    event = Event(**data)
    db.add(event)
    return event


async def update_event(event: Event, data: dict) -> Event:
    for k, v in data.items():
        setattr(event, k, v)
    return event


async def delete_event(db: AsyncSession, event_id: int) -> int:
    result = await db.execute(delete(Event).where(Event.id == event_id))
    return result.rowcount
