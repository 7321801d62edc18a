from typing import Annotated
from fastapi import APIRouter, status, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.results import ActionResultDTO
from app.domain.tickets.schemas import TicketCreateDTO, TicketUpdateDTO, TicketReadDTO, TicketsQueryDTO
from app.services import ticket_service


router = APIRouter(prefix="/admin/tiket", tags=["tiket"])
db_dependency = Annotated[AsyncSession, Depends(get_db)]


@router.get("", status_code=status.HTTP_200_OK, response_model=list[TicketReadDTO])
async def list_tickets(db: db_dependency, query: Annotated[TicketsQueryDTO, Depends()]):
    return await ticket_service.list_tickets(db, query)


@router.get("/{ticket_id}", status_code=status.HTTP_200_OK, response_model=TicketReadDTO)
async def get_ticket(ticket_id: int, db: db_dependency):
    return await ticket_service.get_ticket(db, ticket_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ActionResultDTO[TicketReadDTO])
async def create_ticket(schema: TicketCreateDTO, db: db_dependency, response: Response):
    result = await ticket_service.create_ticket(db, schema)
    response.headers["Location"] = f"{router.prefix}/{result.data.id}"
    return result


@router.api_route(
    "/{ticket_id}",
    methods=["PUT", "PATCH"],
    status_code=status.HTTP_200_OK,
    response_model=ActionResultDTO[TicketReadDTO]
)
async def update_ticket(ticket_id: int, schema: TicketUpdateDTO, db: db_dependency):
    return await ticket_service.update_ticket(db, schema, ticket_id)


@router.delete("/{ticket_id}", status_code=status.HTTP_200_OK, response_model=ActionResultDTO[None])
async def delete_ticket(ticket_id: int, db: db_dependency):
    return await ticket_service.delete_ticket(db, ticket_id)
