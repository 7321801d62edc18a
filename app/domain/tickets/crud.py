from typing import Iterable
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from .models import Ticket


async def get_ticket_by_id(db: AsyncSession, ticket_id: int) -> Ticket | None:
    stmt = select(Ticket).where(Ticket.id == ticket_id)
    result = await db.execute(stmt)
    return result.scalars().first()


async def get_tickets_by_ids(db: AsyncSession, ticket_ids: Iterable[int]) -> dict[int, Ticket]:
    stmt = select(Ticket).where(Ticket.id.in_(list(ticket_ids)))
    result = await db.execute(stmt)
    return {ticket.id: ticket for ticket in result.scalars().all()}


async def list_tickets(db: AsyncSession, event_id: int | None = None) -> list[Ticket]:
    stmt = select(Ticket)
    if event_id is not None:
        stmt = stmt.where(Ticket.event_id == event_id)
    result = await db.execute(stmt.order_by(Ticket.id))
    return result.scalars().all()


async def create_ticket(db: AsyncSession, data: dict) -> Ticket:
    ticket = Ticket(**data)
    db.add(ticket)
    return ticket


async def update_ticket(ticket: Ticket, data: dict) -> Ticket:
    for key, value in data.items():
        setattr(ticket, key, value)
    return ticket


async def delete_ticket(db: AsyncSession, ticket_id: int) -> int:
    result = await db.execute(delete(Ticket).where(Ticket.id == ticket_id))
    return result.rowcount
