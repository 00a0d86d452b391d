from typing import Optional

from app.schemas.common import CamelModel


class AddressFields(CamelModel):
    address_street: Optional[str] = None
    address_line2: Optional[str] = None
    address_city: Optional[str] = None
    address_region: Optional[str] = None
    address_postcode: Optional[str] = None
    address_country: Optional[str] = None
