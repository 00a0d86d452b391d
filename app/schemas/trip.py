from datetime import date
from typing import Optional

from pydantic import ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from app.schemas.common import CamelModel, ForeignKeyId, OptionalImageUrl, RequiredText


def _check_date_order(end_date, info: ValidationInfo):
    start_date = info.data.get("start_date")
    if start_date is not None and end_date is not None and end_date < start_date:
        raise PydanticCustomError("date_order", "End date cannot be before start date")
    return end_date


class TripBase(CamelModel):
    name: RequiredText
    description: str = ""
    start_date: date
    end_date: date
    status_id: ForeignKeyId
    priority_id: ForeignKeyId
    image: OptionalImageUrl = None

    @field_validator("end_date")
    @classmethod
    def end_after_start(cls, v, info: ValidationInfo):
        return _check_date_order(v, info)


class TripCreate(TripBase):
    pass


class TripUpdate(CamelModel):
    name: RequiredText = None
    description: str = None
    start_date: date = None
    end_date: date = None
    status_id: ForeignKeyId = None
    priority_id: ForeignKeyId = None
    image: OptionalImageUrl = None

    @field_validator("end_date")
    @classmethod
    def end_after_start(cls, v, info: ValidationInfo):
        return _check_date_order(v, info)


class TripResponse(TripBase):
    id: int
    user_id: Optional[int] = None


class TripDestinationCreate(CamelModel):
    destination_id: ForeignKeyId


class TripDestinationResponse(CamelModel):
    id: int
    trip_id: int
    destination_id: int
