from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from app.core.utils.text_utils import strip_text


class TicketCreateDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    event_id: int = Field(gt=0)
    tipe: str = Field(min_length=1, max_length=100)
    harga: int = Field(ge=0)
    stok: int = Field(ge=0)

    _strip_tipe = field_validator("tipe", mode='before')(strip_text)


class TicketUpdateDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    tipe: str | None = Field(default=None, min_length=1, max_length=100)
    harga: int | None = Field(default=None, ge=0)
    stok: int | None = Field(default=None, ge=0)

    _strip_tipe = field_validator("tipe", mode='before')(strip_text)


class TicketReadDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra='forbid')

    id: int
    event_id: int
    tipe: str
    harga: int
    stok: int
    created_at: datetime
    updated_at: datetime


class TicketsQueryDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    event_id: int | None = None
