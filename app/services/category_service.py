from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.auditing import AuditSpan
from app.core.results import ActionResultDTO
from app.domain.categories.models import Category
from app.domain.categories.schemas import CategoryCreateDTO, CategoryUpdateDTO, CategoryReadDTO
from app.domain.categories import crud
from app.domain.exceptions import NotFound, Conflict

MSG_CREATED = "Kategori berhasil ditambahkan."
MSG_UPDATED = "Kategori berhasil diperbarui."
MSG_DELETED = "Kategori berhasil dihapus."


async def get_category(db: AsyncSession, category_id: int) -> Category:
    category = await crud.get_category_by_id(db, category_id)
    if not category:
        raise NotFound("Kategori not found", ctx={"kategori_id": category_id})
    return category


async def list_categories(db: AsyncSession) -> list[CategoryReadDTO]:
    categories = await crud.list_all_categories(db)
    return [CategoryReadDTO.model_validate(category) for category in categories]


async def create_category(db: AsyncSession, schema: CategoryCreateDTO) -> ActionResultDTO[CategoryReadDTO]:
    async with AuditSpan(
        scope="CATEGORIES",
        action="CREATE",
        object_type="category",
        meta={"nama_kategori": schema.nama_kategori}
    ) as span:
        data = schema.model_dump(exclude_none=True)
        category = await crud.create_category(db, data)
        try:
            await db.flush()
        except IntegrityError as e:
            raise Conflict("Kategori already exists", ctx={"nama_kategori": schema.nama_kategori}) from e
        span.object_id = category.id
        return ActionResultDTO(message=MSG_CREATED, data=CategoryReadDTO.model_validate(category))


async def update_category(
        db: AsyncSession,
        schema: CategoryUpdateDTO,
        category_id: int
) -> ActionResultDTO[CategoryReadDTO]:
    async with AuditSpan(
        scope="CATEGORIES",
        action="UPDATE",
        object_type="category",
        object_id=category_id,
        meta={"fields": list(schema.model_dump(exclude_none=True).keys())}
    ):
        category = await get_category(db, category_id)
        data = schema.model_dump(exclude_none=True)
        category = await crud.update_category(category, data)
        try:
            await db.flush()
        except IntegrityError as e:
            raise Conflict("Kategori already exists", ctx={"nama_kategori": schema.nama_kategori}) from e
        return ActionResultDTO(message=MSG_UPDATED, data=CategoryReadDTO.model_validate(category))


async def delete_category(db: AsyncSession, category_id: int) -> ActionResultDTO[None]:
    async with AuditSpan(
        scope="CATEGORIES",
        action="DELETE",
        object_type="category",
        object_id=category_id
    ) as span:
        try:
            deleted = await crud.delete_category(db, category_id)
        except IntegrityError as e:
            raise Conflict("Kategori in use", ctx={"kategori_id": category_id}) from e
        span.meta["deleted"] = deleted
        return ActionResultDTO(message=MSG_DELETED)
