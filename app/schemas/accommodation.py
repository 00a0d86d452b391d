from typing import Optional

from app.schemas.address import AddressFields
from app.schemas.common import ForeignKeyId, OptionalImageUrl, RequiredText


class AccommodationBase(AddressFields):
    name: RequiredText
    type: RequiredText
    destination_id: ForeignKeyId
    image: OptionalImageUrl = None
    description: str = ""
    status_id: ForeignKeyId
    priority_id: ForeignKeyId
    notes: Optional[str] = None


class AccommodationCreate(AccommodationBase):
    pass


class AccommodationUpdate(AddressFields):
    name: RequiredText = None
    type: RequiredText = None
    destination_id: ForeignKeyId = None
    image: OptionalImageUrl = None
    description: str = None
    status_id: ForeignKeyId = None
    priority_id: ForeignKeyId = None
    notes: Optional[str] = None


class AccommodationResponse(AccommodationBase):
    id: int
    user_id: Optional[int] = None
