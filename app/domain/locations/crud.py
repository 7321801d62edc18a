from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from .models import Location


async def get_location_by_id(db: AsyncSession, location_id: int) -> Location | None:
    stmt = select(Location).where(Location.id == location_id)
    result = await db.execute(stmt)
    return result.scalars().first()


async def list_all_locations(db: AsyncSession) -> list[Location]:
    stmt = select(Location).order_by(Location.id)
    result = await db.execute(stmt)
    return result.scalars().all()


async def create_location(db: AsyncSession, data: dict) -> Location:
    location = Location(**data)
    db.add(location)
    return location


async def update_location(location: Location, data: dict) -> Location:
    for key, value in data.items():
        setattr(location, key, value)
    return location


async def delete_location(db: AsyncSession, location_id: int) -> int:
    result = await db.execute(delete(Location).where(Location.id == location_id))
    return result.rowcount
