from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.auditing import AuditSpan
from app.core.results import ActionResultDTO
from app.domain.tickets.models import Ticket
from app.domain.tickets.schemas import TicketCreateDTO, TicketUpdateDTO, TicketReadDTO, TicketsQueryDTO
from app.domain.tickets import crud
from app.domain.exceptions import NotFound, Conflict
from app.services.event_service import get_event

MSG_CREATED = "Tiket berhasil ditambahkan."
MSG_UPDATED = "Tiket berhasil diperbarui."
MSG_DELETED = "Tiket berhasil dihapus."


async def get_ticket(db: AsyncSession, ticket_id: int) -> Ticket:
    ticket = await crud.get_ticket_by_id(db, ticket_id)
    if not ticket:
        raise NotFound("Tiket not found", ctx={"tiket_id": ticket_id})
    return ticket


async def list_tickets(db: AsyncSession, query: TicketsQueryDTO) -> list[TicketReadDTO]:
    tickets = await crud.list_tickets(db, event_id=query.event_id)
    return [TicketReadDTO.model_validate(ticket) for ticket in tickets]


async def create_ticket(db: AsyncSession, schema: TicketCreateDTO) -> ActionResultDTO[TicketReadDTO]:
    async with AuditSpan(
        scope="TICKETS",
        action="CREATE",
        object_type="ticket",
        event_id=schema.event_id,
        meta={"tipe": schema.tipe, "harga": schema.harga, "stok": schema.stok}
    ) as span:
        await get_event(db, schema.event_id)
        data = schema.model_dump(exclude_none=True)
        ticket = await crud.create_ticket(db, data)
        try:
            await db.flush()
        except IntegrityError as e:
            raise Conflict("Invalid ticket data", ctx={"event_id": schema.event_id}) from e
        span.object_id = ticket.id
        return ActionResultDTO(message=MSG_CREATED, data=TicketReadDTO.model_validate(ticket))


async def update_ticket(db: AsyncSession, schema: TicketUpdateDTO, ticket_id: int) -> ActionResultDTO[TicketReadDTO]:
    fields = list(schema.model_dump(exclude_none=True).keys())
    async with AuditSpan(
        scope="TICKETS",
        action="UPDATE",
        object_type="ticket",
        object_id=ticket_id,
        meta={"fields": fields}
    ) as span:
        ticket = await get_ticket(db, ticket_id)
        span.event_id = ticket.event_id
        data = schema.model_dump(exclude_none=True)
        ticket = await crud.update_ticket(ticket, data)
        try:
            await db.flush()
        except IntegrityError as e:
            raise Conflict("Invalid ticket data", ctx={"tiket_id": ticket_id, "fields": fields}) from e
        return ActionResultDTO(message=MSG_UPDATED, data=TicketReadDTO.model_validate(ticket))


async def delete_ticket(db: AsyncSession, ticket_id: int) -> ActionResultDTO[None]:
    async with AuditSpan(
        scope="TICKETS",
        action="DELETE",
        object_type="ticket",
        object_id=ticket_id
    ) as span:
        deleted = await crud.delete_ticket(db, ticket_id)
        span.meta["deleted"] = deleted
        return ActionResultDTO(message=MSG_DELETED)
