from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, model_validator

SEQUENCE_FIELDS = ("tags", "image_urls")


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictInt = 0
    title: StrictStr = ""
    content: StrictStr = ""
    thumb_url: StrictStr = ""
    tags: tuple[StrictStr, ...] = ()
    updated_at: StrictInt = 0
    image_urls: tuple[StrictStr, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            raise ValueError("Record must be a JSON object")
        # keys match fields case-insensitively; later keys win, null leaves the previous value
        normalized: dict[str, Any] = {}
        for key, value in data.items():
            name = key.lower() if isinstance(key, str) else key
            if name not in cls.model_fields or value is None:
                continue
            if name in SEQUENCE_FIELDS and isinstance(value, (list, tuple)):
                value = ["" if item is None else item for item in value]
            normalized[name] = value
        return normalized


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    records: int
