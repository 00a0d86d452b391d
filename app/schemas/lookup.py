from typing import Optional

from app.schemas.common import CamelModel, RequiredText


class LookupBase(CamelModel):
    label: RequiredText
    description: Optional[str] = None
    colour: Optional[str] = None


class LookupCreate(LookupBase):
    pass


class LookupUpdate(CamelModel):
    # Omitted means unchanged; an explicit null label is still rejected
    label: RequiredText = None
    description: Optional[str] = None
    colour: Optional[str] = None


class LookupResponse(LookupBase):
    id: int
