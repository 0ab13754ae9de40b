from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from streamlit.runtime.uploaded_file_manager import UploadedFile
from utils.rocks import RockType, DEFAULT_ROCK_TYPE
from utils.s3_utils import detect_content_type


class GeoFix(BaseModel):
    model_config = ConfigDict(frozen=True)
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)
    accuracy: Optional[float] = None


class PhotoUpload(BaseModel):
    model_config = ConfigDict(frozen=True)
    name: str
    content_type: str
    data: bytes

    @classmethod
    def from_uploaded_file(cls, file: UploadedFile) -> "PhotoUpload":
        file.seek(0)
        return cls(
            name=file.name,
            content_type=file.type or detect_content_type(file.name),
            data=file.getvalue(),
        )


class NewFind(BaseModel):
    model_config = ConfigDict(use_enum_values=True, validate_default=True)
    user_id: str
    rock_type: RockType = DEFAULT_ROCK_TYPE
    note: Optional[str] = None
    photo_path: str
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    @field_validator("note")
    @classmethod
    def _blank_note_is_absent(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class Find(NewFind):
    model_config = ConfigDict(frozen=True, use_enum_values=True)
    id: str
    created_at: datetime
