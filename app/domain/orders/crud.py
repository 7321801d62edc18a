from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from .models import Order, OrderDetail
from app.core.pagination import paginate


async def get_order_by_id(db: AsyncSession, order_id: int) -> Order | None:
    stmt = select(Order).where(Order.id == order_id)
    result = await db.execute(stmt)
    return result.scalars().first()


async def list_orders(
        db: AsyncSession,
        page: int,
        page_size: int,
        *,
        user_id: int | None = None
) -> tuple[list[Order], int]:
    where = []
    if user_id is not None:
        where.append(Order.user_id == user_id)

    return await paginate(
        db,
        base_stmt=select(Order),
        page=page,
        page_size=page_size,
        where=where,
        order_by=[Order.tanggal_order.desc(), Order.id.desc()],
    )


async def list_details_by_order(db: AsyncSession, order_id: int) -> list[OrderDetail]:
    stmt = select(OrderDetail).where(OrderDetail.order_id == order_id).order_by(OrderDetail.id)
    result = await db.execute(stmt)
    return result.scalars().all()


async def create_order(db: AsyncSession, data: dict, details: list[dict]) -> Order:
    order = Order(**data, details=[OrderDetail(**d) for d in details])
    db.add(order)
    return order


async def delete_order(db: AsyncSession, order_id: int) -> int:
    result = await db.execute(delete(Order).where(Order.id == order_id))
    return result.rowcount
