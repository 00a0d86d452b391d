"""
Form state machine, driven with stub submit handlers
"""
import pytest
from datetime import date

from app.client.errors import ApiError, InvalidIdentifierError, ServerValidationError
from app.client.forms import (
    AccommodationForm,
    ActivityForm,
    DestinationForm,
    FormState,
    PreferencesForm,
    TripForm,
)
from app.schemas.trip import TripResponse


class StubHandler:
    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result
        self.error = error

    async def __call__(self, model):
        self.calls.append(model)
        if self.error:
            raise self.error
        return self.result


def fill(form, values):
    for field, value in values.items():
        form.set_value(field, value)


def test_new_form_starts_idle_with_empty_defaults():
    form = DestinationForm(StubHandler())

    assert form.state == FormState.IDLE
    assert form.values["name"] == ""
    assert form.values["statusId"] == 0
    assert form.can_submit is False
    assert form.field_errors == {}


def test_edit_moves_through_validating_to_editing():
    states = []
    form = DestinationForm(StubHandler(), on_state_change=states.append)

    form.set_value("name", "")

    assert states == [FormState.VALIDATING, FormState.EDITING]
    assert form.field_errors == {"name": ["This field is required"]}


def test_errors_show_only_for_touched_fields():
    form = TripForm(StubHandler())

    form.set_value("name", "Japan")

    assert "name" not in form.field_errors
    assert "startDate" not in form.field_errors


def test_snake_case_field_names_are_accepted(destination_payload):
    form = DestinationForm(StubHandler())

    form.set_value("status_id", 3)

    assert form.values["statusId"] == 3


@pytest.mark.asyncio
async def test_invalid_submit_is_a_noop_that_shows_all_errors():
    handler = StubHandler()
    form = DestinationForm(handler)
    form.set_value("name", "Paris")

    assert await form.submit() is None

    assert handler.calls == []
    assert form.state == FormState.EDITING
    assert {"country", "region", "image", "statusId", "priorityId"} <= set(form.field_errors)


@pytest.mark.asyncio
async def test_successful_submit_returns_result(destination_payload):
    handler = StubHandler(result="created")
    states = []
    form = DestinationForm(handler, on_state_change=states.append)
    fill(form, destination_payload)

    assert form.can_submit is True
    assert await form.submit() == "created"

    assert form.state == FormState.SUCCESS
    assert states[-2:] == [FormState.SUBMITTING, FormState.SUCCESS]
    assert handler.calls[0].name == "Paris"


@pytest.mark.asyncio
async def test_submit_while_submitting_is_a_noop(destination_payload):
    handler = StubHandler()
    form = DestinationForm(handler)
    fill(form, destination_payload)
    form.state = FormState.SUBMITTING

    assert form.can_submit is False
    assert await form.submit() is None
    assert handler.calls == []


@pytest.mark.asyncio
async def test_structured_server_error_returns_to_editing(destination_payload):
    error = ServerValidationError(409, "Conflict", {"name": ["Name already taken"]})
    form = DestinationForm(StubHandler(error=error))
    fill(form, destination_payload)

    assert await form.submit() is None

    assert form.state == FormState.EDITING
    assert form.field_errors == {"name": ["Name already taken"]}
    assert form.general_error is None

    form.set_value("name", "Lyon")
    assert form.field_errors == {}


@pytest.mark.asyncio
async def test_unstructured_server_error_sets_general_error(destination_payload):
    messages = []
    states = []
    form = DestinationForm(
        StubHandler(error=ApiError(500, "Internal server error")),
        notifier=messages.append,
        on_state_change=states.append,
    )
    fill(form, destination_payload)

    await form.submit()

    assert form.general_error == "Internal server error"
    assert messages == ["Internal server error"]
    assert states[-2:] == [FormState.SERVER_ERROR, FormState.EDITING]
    assert form.can_submit is True


@pytest.mark.asyncio
async def test_unexpected_handler_error_returns_to_editing(destination_payload):
    messages = []
    handler = StubHandler(error=InvalidIdentifierError("abc"))
    form = DestinationForm(handler, notifier=messages.append)
    fill(form, destination_payload)

    with pytest.raises(InvalidIdentifierError):
        await form.submit()

    assert form.state == FormState.EDITING
    assert form.can_submit is True
    assert form.general_error
    assert messages == [form.general_error]

    handler.error = None
    handler.result = "saved"
    assert await form.submit() == "saved"
    assert form.state == FormState.SUCCESS


def test_edit_form_converts_none_to_empty_string():
    trip = TripResponse(
        id=4, name="Japan", description="", start_date=date(2030, 5, 1), end_date=date(2030, 5, 15),
        status_id=2, priority_id=3, image=None, user_id=None,
    )

    form = TripForm(StubHandler(), initial=trip)

    assert form.values["image"] == ""
    assert "id" not in form.values
    assert form.can_submit is True


def test_accommodation_form_empty_image_is_fine_but_garbage_blocks(accommodation_payload):
    form = AccommodationForm(StubHandler())
    fill(form, {**accommodation_payload, "image": ""})
    assert form.can_submit is True

    form.set_value("image", "not-a-url")

    assert form.field_errors == {"image": ["Please enter a valid image URL"]}
    assert form.can_submit is False


def test_activity_form_requests_destination_through_callback():
    requested = []
    form = ActivityForm(StubHandler(), on_request_destination=lambda: requested.append(True))

    assert form.request_destination() is True
    assert requested == [True]
    assert ActivityForm(StubHandler()).request_destination() is False


def test_preferences_form_defaults_are_valid():
    form = PreferencesForm(StubHandler())

    assert form.values["theme"] == "light"
    assert form.can_submit is True

    form.set_value("timeFormat", "36h")
    assert "timeFormat" in form.field_errors


@pytest.mark.asyncio
async def test_form_with_real_client(travel_client, transport, destination_payload):
    form = DestinationForm(travel_client.destinations.create)
    form.set_value("name", "Paris")

    assert await form.submit() is None
    assert transport.requests == []

    fill(form, destination_payload)
    created = await form.submit()

    assert created.id > 0
    assert transport.requests == [("POST", "/api/destinations")]
