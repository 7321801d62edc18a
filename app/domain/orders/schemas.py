from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime


class OrderItemCreateDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    tiket_id: int = Field(gt=0)
    jumlah: int = Field(gt=0)


class OrderCreateDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    user_id: int = Field(gt=0)
    tanggal_order: datetime | None = None
    items: list[OrderItemCreateDTO] = Field(min_length=1, max_length=100)


class OrderDetailReadDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra='forbid')

    id: int
    order_id: int
    tiket_id: int
    jumlah: int
    subtotal_harga: int


class OrderReadDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra='forbid')

    id: int
    user_id: int
    tanggal_order: datetime
    total_harga: int
    created_at: datetime
    details: list[OrderDetailReadDTO]


class OrdersQueryDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=200)
    user_id: int | None = None
