from typing import Optional

from app.schemas.address import AddressFields
from app.schemas.common import CamelModel, ForeignKeyId, OptionalImageUrl, RequiredText


class ActivityBase(AddressFields):
    name: RequiredText
    description: RequiredText
    category: RequiredText
    destination_id: ForeignKeyId
    image: OptionalImageUrl = None
    status_id: ForeignKeyId
    priority_id: ForeignKeyId


class ActivityCreate(ActivityBase):
    pass


class ActivityUpdate(AddressFields):
    name: RequiredText = None
    description: RequiredText = None
    category: RequiredText = None
    destination_id: ForeignKeyId = None
    image: OptionalImageUrl = None
    status_id: ForeignKeyId = None
    priority_id: ForeignKeyId = None


class ActivityResponse(ActivityBase):
    id: int
    user_id: Optional[int] = None
