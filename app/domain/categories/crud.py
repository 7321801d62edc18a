from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from .models import Category


async def get_category_by_id(db: AsyncSession, category_id: int) -> Category | None:
    stmt = select(Category).where(Category.id == category_id)
    result = await db.execute(stmt)
    return result.scalars().first()


async def list_all_categories(db: AsyncSession) -> list[Category]:
    stmt = select(Category).order_by(Category.id)
    result = await db.execute(stmt)
    return result.scalars().all()


async def create_category(db: AsyncSession, data: dict) -> Category:
    category = Category(**data)
    db.add(category)
    return category


async def update_category(category: Category, data: dict) -> Category:
    for key, value in data.items():
        setattr(category, key, value)
    return category


async def delete_category(db: AsyncSession, category_id: int) -> int:
    result = await db.execute(delete(Category).where(Category.id == category_id))
    return result.rowcount
