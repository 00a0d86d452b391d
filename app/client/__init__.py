from app.client.api import TravelClient
from app.client.errors import (
    ApiError,
    ClientValidationError,
    InvalidIdentifierError,
    ServerValidationError,
    TravelClientError,
)
