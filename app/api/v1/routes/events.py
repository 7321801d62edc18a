from typing import Annotated
from fastapi import APIRouter, status, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.pagination import PageDTO
from app.core.results import ActionResultDTO
from app.domain.events.schemas import EventCreateDTO, EventReadDTO, EventUpdateDTO, EventsQueryDTO
from app.domain.tickets.schemas import TicketReadDTO
from app.services import event_service


router = APIRouter(prefix="/admin/events", tags=["events"])
db_dependency = Annotated[AsyncSession, Depends(get_db)]


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=PageDTO[EventReadDTO]
)
async def list_events(db: db_dependency, query: Annotated[EventsQueryDTO, Depends()]):
    return await event_service.list_events(db, query)


@router.get(
    "/{event_id}",
    status_code=status.HTTP_200_OK,
    response_model=EventReadDTO
)
async def get_event(event_id: int, db: db_dependency):
    return await event_service.get_event(db, event_id)


@router.get(
    "/{event_id}/tiket",
    status_code=status.HTTP_200_OK,
    response_model=list[TicketReadDTO]
)
async def list_event_tickets(event_id: int, db: db_dependency):
    return await event_service.list_event_tickets(db, event_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ActionResultDTO[EventReadDTO]
)
async def create_event(schema: EventCreateDTO, db: db_dependency, response: Response):
    result = await event_service.create_event(db, schema)
    response.headers["Location"] = f"{router.prefix}/{result.data.id}"
    return result


@router.api_route(
    "/{event_id}",
    methods=["PUT", "PATCH"],
    status_code=status.HTTP_200_OK,
    response_model=ActionResultDTO[EventReadDTO]
)
async def update_event(event_id: int, schema: EventUpdateDTO, db: db_dependency):
    return await event_service.update_event(db, schema, event_id)


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_200_OK,
    response_model=ActionResultDTO[None]
)
async def delete_event(event_id: int, db: db_dependency):
    return await event_service.delete_event(db, event_id)
