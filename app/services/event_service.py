from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.auditing import AuditSpan
from app.core.pagination import PageDTO
from app.core.results import ActionResultDTO
from app.domain.events.models import Event
from app.domain.events.schemas import EventCreateDTO, EventUpdateDTO, EventReadDTO, EventsQueryDTO
from app.domain.events import crud
from app.domain.tickets import crud as tickets_crud
from app.domain.tickets.schemas import TicketReadDTO
from app.domain.exceptions import NotFound, Conflict, InvalidInput
from app.services.location_service import get_location
from app.services.category_service import get_category
from app.services.user_service import get_user

MSG_CREATED = "Event berhasil ditambahkan."
MSG_UPDATED = "Event berhasil diperbarui."
MSG_DELETED = "Event berhasil dihapus."


async def _resolve_references(db: AsyncSession, data: dict) -> None:
    if "lokasi_id" in data:
        await get_location(db, data["lokasi_id"])
    if "kategori_id" in data:
        await get_category(db, data["kategori_id"])
    if "user_id" in data:
        await get_user(db, data["user_id"])


async def get_event(db: AsyncSession, event_id: int) -> Event:
    event = await crud.get_event_by_id(db, event_id)
    if not event:
        raise NotFound("Event not found", ctx={"event_id": event_id})
    return event


async def list_events(db: AsyncSession, query: EventsQueryDTO) -> PageDTO[EventReadDTO]:
    if query.date_from and query.date_to and query.date_from > query.date_to:
        raise InvalidInput(
            "date_from is after date_to",
            ctx={"date_from": query.date_from, "date_to": query.date_to}
        )

    events, total = await crud.list_events(
        db,
        page=query.page,
        page_size=query.page_size,
        judul=query.judul,
        lokasi_id=query.lokasi_id,
        kategori_id=query.kategori_id,
        user_id=query.user_id,
        date_from=query.date_from,
        date_to=query.date_to
    )

    items = [EventReadDTO.model_validate(event) for event in events]

    return PageDTO(
        items=items,
        total=total,
        page=query.page,
        page_size=query.page_size
    )


async def list_event_tickets(db: AsyncSession, event_id: int) -> list[TicketReadDTO]:
    await get_event(db, event_id)
    tickets = await tickets_crud.list_tickets(db, event_id=event_id)
    return [TicketReadDTO.model_validate(ticket) for ticket in tickets]


async def create_event(db: AsyncSession, schema: EventCreateDTO) -> ActionResultDTO[EventReadDTO]:
    async with AuditSpan(
        scope="EVENTS",
        action="CREATE",
        object_type="event",
        meta={"lokasi_id": schema.lokasi_id, "kategori_id": schema.kategori_id, "user_id": schema.user_id}
    ) as span:
        data = schema.model_dump(exclude_none=True)
        await _resolve_references(db, data)

        event = await crud.create_event(db, data)
        try:
            await db.flush()
        except IntegrityError as e:
            raise Conflict(
                "Event references changed concurrently",
                ctx={"lokasi_id": schema.lokasi_id, "kategori_id": schema.kategori_id}
            ) from e

        span.object_id = event.id
        span.event_id = event.id
        return ActionResultDTO(message=MSG_CREATED, data=EventReadDTO.model_validate(event))


async def update_event(db: AsyncSession, schema: EventUpdateDTO, event_id: int) -> ActionResultDTO[EventReadDTO]:
    fields = list(schema.model_dump(exclude_unset=True).keys())
    async with AuditSpan(
        scope="EVENTS",
        action="UPDATE",
        object_type="event",
        object_id=event_id,
        event_id=event_id,
        meta={"fields": fields}
    ):
        event = await get_event(db, event_id)
        data = schema.model_dump(exclude_unset=True)
        await _resolve_references(db, data)

        event = await crud.update_event(event, data)
        try:
            await db.flush()
        except IntegrityError as e:
            raise Conflict("Event references changed concurrently", ctx={"event_id": event_id}) from e
        return ActionResultDTO(message=MSG_UPDATED, data=EventReadDTO.model_validate(event))


async def delete_event(db: AsyncSession, event_id: int) -> ActionResultDTO[None]:
    async with AuditSpan(
        scope="EVENTS",
        action="DELETE",
        object_type="event",
        object_id=event_id,
        event_id=event_id
    ) as span:
        try:
            deleted = await crud.delete_event(db, event_id)
        except IntegrityError as e:
            raise Conflict("Event in use", ctx={"event_id": event_id}) from e
        span.meta["deleted"] = deleted
        return ActionResultDTO(message=MSG_DELETED)
