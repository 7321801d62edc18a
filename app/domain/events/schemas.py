from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from datetime import datetime
from app.core.utils.text_utils import strip_text

REQUIRED_EVENT_FIELDS = ("judul", "tanggal_waktu", "lokasi_id", "kategori_id", "user_id")


class EventCreateDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    judul: str = Field(min_length=1, max_length=255)
    deskripsi: str | None = Field(default=None, max_length=5000)
    tanggal_waktu: datetime
    lokasi_id: int = Field(gt=0)
    kategori_id: int = Field(gt=0)
    user_id: int = Field(gt=0)
    gambar: str | None = Field(default=None, max_length=255)

    _strip_judul = field_validator("judul", mode="before")(strip_text)
    _strip_desc = field_validator("deskripsi", mode="before")(strip_text)
    _strip_gambar = field_validator("gambar", mode="before")(strip_text)


class EventReadDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra='forbid')

    id: int
    judul: str
    deskripsi: str | None
    tanggal_waktu: datetime
    lokasi_id: int
    kategori_id: int
    gambar: str | None
    user_id: int
    created_at: datetime
    updated_at: datetime


class EventUpdateDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    judul: str | None = Field(default=None, min_length=1, max_length=255)
    deskripsi: str | None = Field(default=None, max_length=5000)
    tanggal_waktu: datetime | None = None
    lokasi_id: int | None = Field(default=None, gt=0)
    kategori_id: int | None = Field(default=None, gt=0)
    user_id: int | None = Field(default=None, gt=0)
    gambar: str | None = Field(default=None, max_length=255)

    _strip_judul = field_validator("judul", mode="before")(strip_text)
    _strip_desc = field_validator("deskripsi", mode="before")(strip_text)
    _strip_gambar = field_validator("gambar", mode="before")(strip_text)

    @model_validator(mode="after")
    def _required_fields_not_null(self):
        nulled = [f for f in REQUIRED_EVENT_FIELDS if f in self.model_fields_set and getattr(self, f) is None]
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self


class EventsQueryDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=200)
    judul: str | None = None
    lokasi_id: int | None = None
    kategori_id: int | None = None
    user_id: int | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
