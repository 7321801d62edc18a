from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from app.core.utils.text_utils import strip_text


class CategoryCreateDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    nama_kategori: str = Field(min_length=1, max_length=255)

    _strip_name = field_validator("nama_kategori", mode='before')(strip_text)


class CategoryUpdateDTO(CategoryCreateDTO):
    pass


class CategoryReadDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra='forbid')

    id: int
    nama_kategori: str
    created_at: datetime
    updated_at: datetime
