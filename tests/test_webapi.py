import json
from http import HTTPStatus

import pytest
from hypothesis import given
from hypothesis import strategies as st

from katas.webapi import APIError, json_error, parse_error_response, versioned_message

V1 = "application/vnd.mytodos.json; version=1.0"
V2 = "application/vnd.mytodos.json; version=2.0"


def test_version_two():
    response = versioned_message(V2)
    assert json.loads(response.body) == {"info": "Version 2"}
    assert response.headers["Content-Type"] == V2


@pytest.mark.parametrize("accept", [V1, "", "text/html"])
def test_version_one_is_default(accept):
    response = versioned_message(accept)
    assert json.loads(response.body) == {"message": "Version 1"}
    assert response.headers["Content-Type"] == V1


def test_to_json_omits_zero_code():
    assert json.loads(APIError("broken").to_json()) == {"message": "broken"}


def test_to_json_keeps_code():
    data = json.loads(APIError("An Error Occured", code=123).to_json())
    assert data == {"code": 123, "message": "An Error Occured"}


def test_error_string():
    error = APIError("An Error Occured", code=123, http_code=HTTPStatus.FORBIDDEN)
    assert str(error) == "HTTP: 403, Code: 123, Message: An Error Occured"


def test_json_error_response():
    error = APIError("An Error Occured", code=123, http_code=HTTPStatus.FORBIDDEN)
    response = json_error(error)
    assert response.status == HTTPStatus.FORBIDDEN
    assert response.headers["Content-Type"] == "application/json"
    assert json.loads(response.body) == {"error": json.loads(error.to_json())}


def test_json_error_rejects_missing_status():
    with pytest.raises(ValueError):
        json_error(APIError("no status"))


@pytest.mark.parametrize("status", [200, 204, 299])
def test_success_returns_none(status):
    assert parse_error_response(status, "OK", "text/plain", "") is None


def test_non_json_error_raises_value_error():
    with pytest.raises(ValueError, match="Unknown error. HTTP status: 500 Internal Server Error"):
        parse_error_response(500, "Internal Server Error", "text/plain", "oops")


@pytest.mark.parametrize("body", ["{not json", "[1, 2]", '{"error": 5}', '{"error": {"code": 1.5}}'])
def test_unparseable_body_raises_value_error(body):
    with pytest.raises(ValueError, match="Unable to parse json"):
        parse_error_response(400, "Bad Request", "application/json", body)


def test_body_without_error_key_gives_empty_error():
    with pytest.raises(APIError) as info:
        parse_error_response(404, "Not Found", "application/json", "{}")
    assert (info.value.message, info.value.code, info.value.http_code) == ("", 0, 404)


def test_field_names_match_case_insensitively():
    body = '{"Error": {"Code": 7, "Message": "shout"}}'
    with pytest.raises(APIError) as info:
        parse_error_response(409, "Conflict", "application/json", body)
    assert (info.value.message, info.value.code) == ("shout", 7)


@given(
    message=st.text(),
    code=st.integers(min_value=0, max_value=10**6),
    status=st.integers(min_value=400, max_value=599),
)
def test_json_error_round_trip(message, code, status):
    response = json_error(APIError(message, code=code, http_code=status))
    with pytest.raises(APIError) as info:
        parse_error_response(
            response.status, "Error", response.headers["Content-Type"], response.body.encode()
        )
    assert (info.value.message, info.value.code, info.value.http_code) == (message, code, status)