from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from app.core.utils.text_utils import strip_text


class LocationCreateDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    nama_lokasi: str = Field(min_length=1, max_length=255)

    _strip_name = field_validator("nama_lokasi", mode='before')(strip_text)


class LocationUpdateDTO(LocationCreateDTO):
    pass


class LocationReadDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra='forbid')

    id: int
    nama_lokasi: str
    created_at: datetime
    updated_at: datetime
