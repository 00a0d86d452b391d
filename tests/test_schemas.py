"""
Validation rules shared by the server and the client
"""
import pytest
from datetime import date

from app.schemas.accommodation import AccommodationCreate
from app.schemas.activity import ActivityUpdate
from app.schemas.common import PayloadValidationError, is_valid_id, to_payload, validate_payload
from app.schemas.destination import DestinationCreate, DestinationUpdate
from app.schemas.trip import TripCreate, TripUpdate


DESTINATION_REQUIRED = ["name", "country", "region", "image", "statusId", "priorityId"]


def test_valid_destination_is_normalized(destination_payload):
    """Strings are trimmed and the description defaults to empty"""
    model = validate_payload(DestinationCreate, {**destination_payload, "name": "  Paris  "})

    assert model.name == "Paris"
    assert model.description == ""
    assert model.status_id == 1


def test_every_violated_field_is_reported():
    """An empty payload reports all required fields at once"""
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(DestinationCreate, {})

    assert sorted(exc_info.value.field_errors) == sorted(DESTINATION_REQUIRED)
    assert exc_info.value.field_errors["name"] == ["This field is required"]


@pytest.mark.parametrize("field", DESTINATION_REQUIRED)
def test_each_required_destination_field(destination_payload, field):
    """Omitting any single required field fails on exactly that field"""
    payload = {k: v for k, v in destination_payload.items() if k != field}

    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(DestinationCreate, payload)

    assert list(exc_info.value.field_errors) == [field]


def test_blank_required_text_is_rejected(destination_payload):
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(DestinationCreate, {**destination_payload, "country": "   "})

    assert exc_info.value.field_errors == {"country": ["This field is required"]}


@pytest.mark.parametrize("bad_id", [0, -1, "1", 1.5, True])
def test_foreign_keys_must_be_positive_integers(destination_payload, bad_id):
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(DestinationCreate, {**destination_payload, "statusId": bad_id})

    assert "statusId" in exc_info.value.field_errors


def test_destination_image_must_be_a_url(destination_payload):
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(DestinationCreate, {**destination_payload, "image": "not-a-url"})

    assert exc_info.value.field_errors == {"image": ["Please enter a valid image URL"]}


def test_optional_image_accepts_empty_string():
    """Accommodation image is optional: empty passes, garbage does not"""
    payload = {"name": "Hotel", "type": "Hotel", "destinationId": 1, "statusId": 1, "priorityId": 1}

    assert validate_payload(AccommodationCreate, {**payload, "image": ""}).image is None

    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(AccommodationCreate, {**payload, "image": "not-a-url"})
    assert list(exc_info.value.field_errors) == ["image"]


def test_server_assigned_keys_are_ignored(destination_payload):
    model = validate_payload(DestinationCreate, {**destination_payload, "id": 99, "createdAt": "x"})
    assert "id" not in to_payload(model)


def test_snake_case_input_is_accepted(destination_payload):
    payload = {k: v for k, v in destination_payload.items() if k != "statusId"}
    model = validate_payload(DestinationCreate, {**payload, "status_id": 3})
    assert model.status_id == 3


def test_trip_dates_must_be_ordered(trip_payload):
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(TripCreate, {**trip_payload, "endDate": "2030-04-01"})
    assert exc_info.value.field_errors == {"endDate": ["End date cannot be before start date"]}

    same_day = validate_payload(TripCreate, {**trip_payload, "endDate": trip_payload["startDate"]})
    assert same_day.end_date == date(2030, 5, 1)


def test_trip_dates_must_be_iso(trip_payload):
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(TripCreate, {**trip_payload, "startDate": "01/05/2030"})
    assert "startDate" in exc_info.value.field_errors


def test_partial_update_keeps_only_given_fields():
    """Absent fields stay out of the payload; present ones are still checked"""
    model = validate_payload(DestinationUpdate, {"name": "X"})
    assert to_payload(model, partial=True) == {"name": "X"}

    with pytest.raises(PayloadValidationError):
        validate_payload(DestinationUpdate, {"priorityId": 0})


def test_partial_update_rejects_null_for_required_column():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(ActivityUpdate, {"name": None})
    assert list(exc_info.value.field_errors) == ["name"]


def test_partial_trip_update_checks_dates_only_when_both_present():
    assert validate_payload(TripUpdate, {"endDate": "2020-01-01"}).end_date == date(2020, 1, 1)

    with pytest.raises(PayloadValidationError):
        validate_payload(TripUpdate, {"startDate": "2030-01-02", "endDate": "2030-01-01"})


@pytest.mark.parametrize("value, expected", [(1, True), (42, True), (0, False), (-3, False),
                                             ("7", False), (None, False), (True, False)])
def test_is_valid_id(value, expected):
    assert is_valid_id(value) is expected
