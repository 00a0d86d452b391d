"""
Validation building blocks shared by the API server and the Python client.

Every insert schema is a ``CamelModel``: JSON keys are camelCase
(``statusId``), attributes are snake_case (``status_id``), strings are
trimmed and keys the server assigns (``id``, ``createdAt``) are ignored.
"""
from typing import Annotated, Any, Dict, Iterable, List, Optional, Type, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, HttpUrl, Strict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

FieldErrors = Dict[str, List[str]]
ModelT = TypeVar("ModelT", bound=BaseModel)

ROOT_FIELD = "root"

_url_adapter = TypeAdapter(HttpUrl)

# Friendlier wording for the pydantic error types users actually hit in forms
_MESSAGES = {
    "missing": "This field is required",
    "date_from_datetime_parsing": "Please enter a valid date (YYYY-MM-DD)",
    "date_parsing": "Please enter a valid date (YYYY-MM-DD)",
    "date_type": "Please enter a valid date (YYYY-MM-DD)",
}


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class PayloadValidationError(ValueError):
    """Input failed a schema; ``field_errors`` lists every violated field."""

    def __init__(self, field_errors: FieldErrors, message: str = "Validation error"):
        super().__init__(message)
        self.message = message
        self.field_errors = field_errors


def _required_text(value: str) -> str:
    if not value:
        raise PydanticCustomError("required", "This field is required")
    return value


def _positive_id(value: int) -> int:
    if value <= 0:
        raise PydanticCustomError("positive_id", "Please select a valid option")
    return value


def _image_url(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("image_url", "Please enter a valid image URL")
    return value


def _optional_image_url(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    return _image_url(value)


RequiredText = Annotated[str, AfterValidator(_required_text)]
ForeignKeyId = Annotated[int, Strict(), AfterValidator(_positive_id)]
ImageUrl = Annotated[str, AfterValidator(_required_text), AfterValidator(_image_url)]
OptionalImageUrl = Annotated[Optional[str], AfterValidator(_optional_image_url)]


def is_valid_id(value: Any) -> bool:
    """True for strictly positive ints (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def field_errors_from(errors: Iterable[dict], skip_prefix: tuple = ()) -> FieldErrors:
    """Fold pydantic error dicts into ``{field: [messages]}``.

    ``skip_prefix`` drops leading location parts such as FastAPI's ``"body"``.
    """
    field_errors: FieldErrors = {}
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if skip_prefix and loc[: len(skip_prefix)] == skip_prefix:
            loc = loc[len(skip_prefix):]
        field = str(loc[0]) if loc else ROOT_FIELD
        message = _MESSAGES.get(error.get("type"), error.get("msg", "Invalid value"))
        messages = field_errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return field_errors


def validate_payload(schema: Type[ModelT], data: Any) -> ModelT:
    """Validate ``data`` against ``schema`` or raise PayloadValidationError."""
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True, exclude_unset=True)
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise PayloadValidationError(field_errors_from(e.errors()))


def to_payload(model: BaseModel, partial: bool = False) -> Dict[str, Any]:
    """JSON-ready camelCase body for a validated model."""
    return model.model_dump(mode="json", by_alias=True, exclude_unset=partial)
