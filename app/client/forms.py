"""
Form state for creating and editing travel entities.

A form holds wire-named values (``statusId``, ``startDate``), validates
them with the entity's insert schema as they change and hands the
validated model to a submit handler, usually a ``ResourceClient`` method:

    form = DestinationForm(submit_handler=client.destinations.create)
    form.set_value("name", "Paris")
    ...
    destination = await form.submit()

Navigation after success is the caller's business.
"""
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Set, Type, Union

from pydantic import BaseModel

from app.client.errors import ApiError, ClientValidationError, ServerValidationError
from app.core.logging import get_logger
from app.schemas.accommodation import AccommodationCreate
from app.schemas.activity import ActivityCreate
from app.schemas.common import ROOT_FIELD, FieldErrors, PayloadValidationError, validate_payload
from app.schemas.destination import DestinationCreate
from app.schemas.trip import TripCreate
from app.schemas.user import PreferencesBase

logger = get_logger(__name__)

SubmitHandler = Callable[[BaseModel], Awaitable[Any]]

ADDRESS_DEFAULTS = {
    "addressStreet": "",
    "addressLine2": "",
    "addressCity": "",
    "addressRegion": "",
    "addressPostcode": "",
    "addressCountry": "",
}


class FormState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    SERVER_ERROR = "server_error"


def log_notifier(message: str) -> None:
    logger.warning("Form submission failed: %s", message)


class EntityForm:
    """State machine shared by every entity form."""

    schema: Type[BaseModel]
    empty_values: Dict[str, Any] = {}

    def __init__(
            self,
            submit_handler: SubmitHandler,
            initial: Optional[Union[BaseModel, Mapping[str, Any]]] = None,
            notifier: Optional[Callable[[str], None]] = None,
            on_state_change: Optional[Callable[[FormState], None]] = None,
    ):
        self._submit_handler = submit_handler
        self._notifier = notifier or log_notifier
        self._on_state_change = on_state_change

        # snake_case name -> wire name, so callers may use either
        self._aliases = {name: field.alias or name for name, field in self.schema.model_fields.items()}

        self.values: Dict[str, Any] = {**self.empty_values, **self._initial_values(initial)}
        self.state = FormState.IDLE
        self.touched: Set[str] = set()
        self.server_errors: FieldErrors = {}
        self.general_error: Optional[str] = None

        self._validated: Optional[BaseModel] = None
        self._validation_errors: FieldErrors = {}
        self._validate()

    def _initial_values(self, initial) -> Dict[str, Any]:
        if initial is None:
            return {}
        if isinstance(initial, BaseModel):
            initial = initial.model_dump(by_alias=True)

        known = set(self._aliases.values())
        values = {}
        for key, value in initial.items():
            key = self._aliases.get(key, key)
            if key in known:
                # Controlled inputs never hold None
                values[key] = "" if value is None else value
        return values

    def _set_state(self, state: FormState) -> None:
        self.state = state
        if self._on_state_change:
            self._on_state_change(state)

    def _validate(self) -> None:
        try:
            self._validated = validate_payload(self.schema, self.values)
            self._validation_errors = {}
        except PayloadValidationError as e:
            self._validated = None
            self._validation_errors = e.field_errors

    @property
    def can_submit(self) -> bool:
        return self._validated is not None and self.state != FormState.SUBMITTING

    @property
    def is_submitting(self) -> bool:
        return self.state == FormState.SUBMITTING

    @property
    def field_errors(self) -> FieldErrors:
        """Errors to display: validation errors of touched fields, then server errors."""
        errors = {
            field: list(messages)
            for field, messages in self._validation_errors.items()
            if field in self.touched or field == ROOT_FIELD
        }
        for field, messages in self.server_errors.items():
            errors.setdefault(field, [])
            errors[field].extend(m for m in messages if m not in errors[field])
        return errors

    def set_value(self, field: str, value: Any) -> None:
        field = self._aliases.get(field, field)
        self.values[field] = value
        self.touched.add(field)
        self.server_errors.pop(field, None)

        if self.state == FormState.SUBMITTING:
            self._validate()
            return

        self._set_state(FormState.VALIDATING)
        self._validate()
        self._set_state(FormState.EDITING)

    def reset(self, initial=None) -> None:
        self.values = {**self.empty_values, **self._initial_values(initial)}
        self.touched.clear()
        self.server_errors = {}
        self.general_error = None
        self._validate()
        self._set_state(FormState.IDLE)

    def _fail(self, field_errors: Optional[FieldErrors] = None, message: Optional[str] = None) -> None:
        self._set_state(FormState.SERVER_ERROR)
        if field_errors:
            self.server_errors = dict(field_errors)
        if message:
            self.general_error = message
            self._notifier(message)
        self._set_state(FormState.EDITING)

    async def submit(self) -> Any:
        """
        Validate and send the form.

        Returns the handler's result, or None when nothing was sent or the
        server rejected the request (see ``field_errors`` and
        ``general_error``).
        """
        if self.state == FormState.SUBMITTING:
            return None

        self.touched.update(self.values)
        self._validate()
        if self._validated is None:
            return None

        self.server_errors = {}
        self.general_error = None
        self._set_state(FormState.SUBMITTING)

        try:
            result = await self._submit_handler(self._validated)
        except (ServerValidationError, ClientValidationError) as e:
            self._fail(field_errors=e.field_errors)
            return None
        except ApiError as e:
            self._fail(message=e.message)
            return None
        except Exception as e:
            self._fail(message=str(e) or "Something went wrong")
            raise

        self._set_state(FormState.SUCCESS)
        return result


class _DestinationPickerMixin:
    """Forms with a destination select that may need a destination created first."""

    def _init_destination_request(self, on_request_destination: Optional[Callable[[], None]]) -> None:
        self._on_request_destination = on_request_destination

    def request_destination(self) -> bool:
        """Ask the parent to open the destination form; False when nobody listens."""
        if self._on_request_destination is None:
            return False
        self._on_request_destination()
        return True


class DestinationForm(EntityForm):
    schema = DestinationCreate
    empty_values = {
        "name": "",
        "country": "",
        "region": "",
        "description": "",
        "image": "",
        "statusId": 0,
        "priorityId": 0,
    }


class ActivityForm(_DestinationPickerMixin, EntityForm):
    schema = ActivityCreate
    empty_values = {
        "name": "",
        "description": "",
        "category": "",
        "destinationId": 0,
        "image": "",
        "statusId": 0,
        "priorityId": 0,
        **ADDRESS_DEFAULTS,
    }

    def __init__(self, submit_handler, initial=None, on_request_destination=None, **kwargs):
        super().__init__(submit_handler, initial, **kwargs)
        self._init_destination_request(on_request_destination)


class AccommodationForm(_DestinationPickerMixin, EntityForm):
    schema = AccommodationCreate
    empty_values = {
        "name": "",
        "type": "",
        "destinationId": 0,
        "image": "",
        "description": "",
        "statusId": 0,
        "priorityId": 0,
        "notes": "",
        **ADDRESS_DEFAULTS,
    }

    def __init__(self, submit_handler, initial=None, on_request_destination=None, **kwargs):
        super().__init__(submit_handler, initial, **kwargs)
        self._init_destination_request(on_request_destination)


class TripForm(EntityForm):
    schema = TripCreate
    empty_values = {
        "name": "",
        "description": "",
        "startDate": "",
        "endDate": "",
        "statusId": 0,
        "priorityId": 0,
        "image": "",
    }


class PreferencesForm(EntityForm):
    schema = PreferencesBase
    empty_values = PreferencesBase().model_dump(by_alias=True)
