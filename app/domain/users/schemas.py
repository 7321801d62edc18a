from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from app.core.utils.text_utils import strip_text


class UserCreateDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr

    _strip_name = field_validator("name", mode="before")(strip_text)
