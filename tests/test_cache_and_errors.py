"""
Query cache behaviour and error-body parsing
"""
import httpx

from app.client.cache import QueryCache
from app.client.errors import ApiError, ServerValidationError, error_from_response, parse_field_errors


def test_invalidate_exact_and_by_prefix():
    cache = QueryCache()
    cache.set(("/api/activities",), [])
    cache.set(("/api/activities", 1), "one")
    cache.set(("/api/activities", "destination", 1), [])
    cache.set(("/api/activities", "destination", 2), [])
    cache.set(("/api/trips",), [])

    assert cache.invalidate(("/api/activities",)) == 1
    assert ("/api/activities", 1) in cache

    assert cache.invalidate(("/api/activities", "destination"), exact=False) == 2
    assert ("/api/trips",) in cache
    assert len(cache) == 2


def test_remove_and_missing_keys():
    cache = QueryCache()

    cache.remove(("nothing",))
    assert cache.invalidate(("nothing",)) == 0
    assert cache.get(("nothing",), "default") == "default"


def test_parse_field_error_map():
    body = {"message": "Invalid", "fieldErrors": {"name": ["Required"], "image": "Bad URL"}}

    assert parse_field_errors(body) == {"name": ["Required"], "image": ["Bad URL"]}


def test_parse_issue_list():
    body = {"message": "Invalid destination data", "errors": [
        {"path": ["name"], "message": "Required"},
        {"loc": ["statusId"], "msg": "Please select a valid option"},
        {"path": [], "message": "Something else"},
    ]}

    assert parse_field_errors(body) == {
        "name": ["Required"],
        "statusId": ["Please select a valid option"],
        "root": ["Something else"],
    }


def test_parse_without_fields():
    assert parse_field_errors({"message": "Nope"}) is None
    assert parse_field_errors("plain text") is None


def test_4xx_with_fields_is_server_validation_error():
    response = httpx.Response(409, json={"message": "Exists", "fieldErrors": {"label": ["Taken"]}})

    error = error_from_response(response)

    assert isinstance(error, ServerValidationError)
    assert error.status_code == 409
    assert error.field_errors == {"label": ["Taken"]}


def test_5xx_and_unstructured_bodies_are_plain_api_errors():
    server = error_from_response(httpx.Response(500, json={"message": "Boom", "fieldErrors": {"x": ["y"]}}))
    text = error_from_response(httpx.Response(404, text="Not here"))

    assert type(server) is ApiError
    assert server.message == "Boom"
    assert type(text) is ApiError
    assert text.message == "Not here"
