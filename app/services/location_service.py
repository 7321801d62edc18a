from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.auditing import AuditSpan
from app.core.results import ActionResultDTO
from app.domain.locations.models import Location
from app.domain.locations.schemas import LocationCreateDTO, LocationUpdateDTO, LocationReadDTO
from app.domain.locations import crud
from app.domain.exceptions import NotFound, Conflict

MSG_CREATED = "Lokasi berhasil ditambahkan."
MSG_UPDATED = "Lokasi berhasil diperbarui."
MSG_DELETED = "Lokasi berhasil dihapus."


async def get_location(db: AsyncSession, location_id: int) -> Location:
    location = await crud.get_location_by_id(db, location_id)
    if not location:
        raise NotFound("Lokasi not found", ctx={"lokasi_id": location_id})
    return location


async def list_locations(db: AsyncSession) -> list[LocationReadDTO]:
    locations = await crud.list_all_locations(db)
    return [LocationReadDTO.model_validate(location) for location in locations]


async def create_location(db: AsyncSession, schema: LocationCreateDTO) -> ActionResultDTO[LocationReadDTO]:
    async with AuditSpan(
        scope="LOCATIONS",
        action="CREATE",
        object_type="location",
        meta={"nama_lokasi": schema.nama_lokasi}
    ) as span:
        data = schema.model_dump(exclude_none=True)
        location = await crud.create_location(db, data)
        await db.flush()
        span.object_id = location.id
        return ActionResultDTO(message=MSG_CREATED, data=LocationReadDTO.model_validate(location))


async def update_location(
        db: AsyncSession,
        schema: LocationUpdateDTO,
        location_id: int
) -> ActionResultDTO[LocationReadDTO]:
    async with AuditSpan(
        scope="LOCATIONS",
        action="UPDATE",
        object_type="location",
        object_id=location_id,
        meta={"fields": list(schema.model_dump(exclude_none=True).keys())}
    ):
        location = await get_location(db, location_id)
        data = schema.model_dump(exclude_none=True)
        location = await crud.update_location(location, data)
        await db.flush()
        return ActionResultDTO(message=MSG_UPDATED, data=LocationReadDTO.model_validate(location))


async def delete_location(db: AsyncSession, location_id: int) -> ActionResultDTO[None]:
    async with AuditSpan(
        scope="LOCATIONS",
        action="DELETE",
        object_type="location",
        object_id=location_id
    ) as span:
        try:
            deleted = await crud.delete_location(db, location_id)
        except IntegrityError as e:
            raise Conflict("Lokasi in use", ctx={"lokasi_id": location_id}) from e
        span.meta["deleted"] = deleted
        return ActionResultDTO(message=MSG_DELETED)
