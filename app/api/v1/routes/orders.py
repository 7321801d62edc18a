from typing import Annotated
from fastapi import APIRouter, status, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.pagination import PageDTO
from app.core.results import ActionResultDTO
from app.domain.orders.schemas import OrderCreateDTO, OrderReadDTO, OrdersQueryDTO
from app.services import order_service


router = APIRouter(prefix="/admin/orders", tags=["orders"])
db_dependency = Annotated[AsyncSession, Depends(get_db)]


@router.get("", status_code=status.HTTP_200_OK, response_model=PageDTO[OrderReadDTO])
async def list_orders(db: db_dependency, query: Annotated[OrdersQueryDTO, Depends()]):
    return await order_service.list_orders(db, query)


@router.get("/{order_id}", status_code=status.HTTP_200_OK, response_model=OrderReadDTO)
async def get_order(order_id: int, db: db_dependency):
    return await order_service.get_order(db, order_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ActionResultDTO[OrderReadDTO])
async def create_order(schema: OrderCreateDTO, db: db_dependency, response: Response):
    result = await order_service.create_order(db, schema)
    response.headers["Location"] = f"{router.prefix}/{result.data.id}"
    return result


@router.delete("/{order_id}", status_code=status.HTTP_200_OK, response_model=ActionResultDTO[None])
async def delete_order(order_id: int, db: db_dependency):
    return await order_service.delete_order(db, order_id)
