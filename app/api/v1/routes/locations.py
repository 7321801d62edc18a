from typing import Annotated
from fastapi import APIRouter, status, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.results import ActionResultDTO
from app.domain.locations.schemas import LocationCreateDTO, LocationUpdateDTO, LocationReadDTO
from app.services import location_service


router = APIRouter(prefix='/admin/lokasi', tags=['lokasi'])
db_dependency = Annotated[AsyncSession, Depends(get_db)]


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=list[LocationReadDTO]
)
async def list_locations(db: db_dependency):
    return await location_service.list_locations(db)


@router.get(
    "/{location_id}",
    status_code=status.HTTP_200_OK,
    response_model=LocationReadDTO
)
async def get_location(location_id: int, db: db_dependency):
    return await location_service.get_location(db, location_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ActionResultDTO[LocationReadDTO]
)
async def create_location(schema: LocationCreateDTO, db: db_dependency, response: Response):
    result = await location_service.create_location(db, schema)
    response.headers["Location"] = f"{router.prefix}/{result.data.id}"
    return result


@router.api_route(
    "/{location_id}",
    methods=["PUT", "PATCH"],
    status_code=status.HTTP_200_OK,
    response_model=ActionResultDTO[LocationReadDTO]
)
async def update_location(location_id: int, schema: LocationUpdateDTO, db: db_dependency):
    return await location_service.update_location(db, schema, location_id)


@router.delete(
    "/{location_id}",
    status_code=status.HTTP_200_OK,
    response_model=ActionResultDTO[None]
)
async def delete_location(location_id: int, db: db_dependency):
    return await location_service.delete_location(db, location_id)
