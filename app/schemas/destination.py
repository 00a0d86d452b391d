from typing import Optional

from app.schemas.common import CamelModel, ForeignKeyId, ImageUrl, RequiredText


class DestinationBase(CamelModel):
    name: RequiredText
    country: RequiredText
    region: RequiredText
    description: str = ""
    image: ImageUrl
    status_id: ForeignKeyId
    priority_id: ForeignKeyId


class DestinationCreate(DestinationBase):
    pass


class DestinationUpdate(CamelModel):
    # Omitted fields stay unchanged; explicit nulls on required columns fail
    name: RequiredText = None
    country: RequiredText = None
    region: RequiredText = None
    description: str = None
    image: ImageUrl = None
    status_id: ForeignKeyId = None
    priority_id: ForeignKeyId = None


class DestinationResponse(DestinationBase):
    id: int
    user_id: Optional[int] = None
