from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.auditing import AuditSpan
from app.core.pagination import PageDTO
from app.core.results import ActionResultDTO
from app.domain.orders.models import Order
from app.domain.orders.schemas import OrderCreateDTO, OrderItemCreateDTO, OrderReadDTO, OrdersQueryDTO
from app.domain.orders import crud
from app.domain.tickets import crud as tickets_crud
from app.domain.exceptions import NotFound, Conflict
from app.services.user_service import get_user

MSG_CREATED = "Order berhasil ditambahkan."
MSG_DELETED = "Order berhasil dihapus."


def _merge_items(items: list[OrderItemCreateDTO]) -> dict[int, int]:
    quantities: dict[int, int] = {}
    for item in items:
        quantities[item.tiket_id] = quantities.get(item.tiket_id, 0) + item.jumlah
    return quantities


def _build_details(quantities: dict[int, int], tickets: dict) -> list[dict]:
    missing = [tiket_id for tiket_id in quantities if tiket_id not in tickets]
    if missing:
        raise NotFound("Tiket not found", ctx={"tiket_ids": missing})

    details = []
    for tiket_id, jumlah in quantities.items():
        ticket = tickets[tiket_id]
        if ticket.stok < jumlah:
            raise Conflict(
                "Insufficient stock",
                ctx={"tiket_id": tiket_id, "stok": ticket.stok, "jumlah": jumlah}
            )
        details.append({"tiket_id": tiket_id, "jumlah": jumlah, "subtotal_harga": jumlah * ticket.harga})
    return details


async def get_order(db: AsyncSession, order_id: int) -> Order:
    order = await crud.get_order_by_id(db, order_id)
    if not order:
        raise NotFound("Order not found", ctx={"order_id": order_id})
    return order


async def list_orders(db: AsyncSession, query: OrdersQueryDTO) -> PageDTO[OrderReadDTO]:
    orders, total = await crud.list_orders(db, query.page, query.page_size, user_id=query.user_id)
    items = [OrderReadDTO.model_validate(order) for order in orders]
    return PageDTO(items=items, total=total, page=query.page, page_size=query.page_size)


async def create_order(db: AsyncSession, schema: OrderCreateDTO) -> ActionResultDTO[OrderReadDTO]:
    """
    Stores the order header with its lines and takes the ordered quantities off ticket stock.

    Everything happens in the caller's session; nothing is committed here, so a failure on any
    line leaves no header, no line and no stock change behind once the session rolls back.
    """
    async with AuditSpan(
        scope="ORDERS",
        action="CREATE",
        object_type="order",
        meta={"user_id": schema.user_id, "items": len(schema.items)}
    ) as span:
        await get_user(db, schema.user_id)

        quantities = _merge_items(schema.items)
        tickets = await tickets_crud.get_tickets_by_ids(db, quantities.keys())
        details = _build_details(quantities, tickets)

        for detail in details:
            tickets[detail["tiket_id"]].stok -= detail["jumlah"]

        data = {
            "user_id": schema.user_id,
            "total_harga": sum(detail["subtotal_harga"] for detail in details),
        }
        if schema.tanggal_order is not None:
            data["tanggal_order"] = schema.tanggal_order

        order = await crud.create_order(db, data, details)
        try:
            await db.flush()
        except IntegrityError as e:
            raise Conflict("Order could not be stored", ctx={"user_id": schema.user_id}) from e

        span.object_id = order.id
        span.order_id = order.id
        span.meta["total_harga"] = order.total_harga
        return ActionResultDTO(message=MSG_CREATED, data=OrderReadDTO.model_validate(order))


async def delete_order(db: AsyncSession, order_id: int) -> ActionResultDTO[None]:
    async with AuditSpan(
        scope="ORDERS",
        action="DELETE",
        object_type="order",
        object_id=order_id,
        order_id=order_id
    ) as span:
        deleted = await crud.delete_order(db, order_id)
        span.meta["deleted"] = deleted
        return ActionResultDTO(message=MSG_DELETED)
