from typing import Annotated
from fastapi import APIRouter, status, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.results import ActionResultDTO
from app.domain.categories.schemas import CategoryCreateDTO, CategoryUpdateDTO, CategoryReadDTO
from app.services import category_service


router = APIRouter(prefix='/admin/kategori', tags=['kategori'])
db_dependency = Annotated[AsyncSession, Depends(get_db)]


@router.get("", status_code=status.HTTP_200_OK, response_model=list[CategoryReadDTO])
async def list_categories(db: db_dependency):
    return await category_service.list_categories(db)


@router.get("/{category_id}", status_code=status.HTTP_200_OK, response_model=CategoryReadDTO)
async def get_category(category_id: int, db: db_dependency):
    return await category_service.get_category(db, category_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ActionResultDTO[CategoryReadDTO])
async def create_category(schema: CategoryCreateDTO, db: db_dependency, response: Response):
    result = await category_service.create_category(db, schema)
    response.headers["Location"] = f"{router.prefix}/{result.data.id}"
    return result


@router.api_route(
    "/{category_id}",
    methods=["PUT", "PATCH"],
    status_code=status.HTTP_200_OK,
    response_model=ActionResultDTO[CategoryReadDTO]
)
async def update_category(category_id: int, schema: CategoryUpdateDTO, db: db_dependency):
    return await category_service.update_category(db, schema, category_id)


@router.delete("/{category_id}", status_code=status.HTTP_200_OK, response_model=ActionResultDTO[None])
async def delete_category(category_id: int, db: db_dependency):
    return await category_service.delete_category(db, category_id)
