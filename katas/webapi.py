"""JSON error bodies and media-type versioned API responses."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from katas.routing import Response

VERSION_1 = "application/vnd.mytodos.json; version=1.0"
VERSION_2 = "application/vnd.mytodos.json; version=2.0"
JSON_CONTENT_TYPE = "application/json"


def _dumps(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


class APIError(Exception):
    """An error reported by an API, with its HTTP status and an optional code."""

    def __init__(self, message: str = "", code: int = 0, http_code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_code = http_code

    def __str__(self) -> str:
        return f"HTTP: {self.http_code}, Code: {self.code}, Message: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"code={self.code!r}, http_code={self.http_code!r})"
        )

    def to_json(self) -> str:
        """The error as a JSON object; a zero code is left out."""
        data: dict[str, Any] = {}
        if self.code:
            data["code"] = self.code
        data["message"] = self.message
        return _dumps(data)


def versioned_message(accept: str) -> Response:
    """Answer in the API version the Accept header asks for, version 1 by default."""
    if accept == VERSION_2:
        body, content_type = _dumps({"info": "Version 2"}), VERSION_2
    else:
        body, content_type = _dumps({"message": "Version 1"}), VERSION_1
    return Response(body=body, headers={"Content-Type": content_type})


def json_error(error: APIError) -> Response:
    """Wrap an error in a JSON body under its own HTTP status."""
    if not 100 <= error.http_code <= 999:
        raise ValueError(f"invalid HTTP status code {error.http_code}")
    return Response(
        status=error.http_code,
        body='{"error":' + error.to_json() + "}",
        headers={"Content-Type": JSON_CONTENT_TYPE},
    )


def _field(data: dict[str, Any], name: str) -> Any:
    """Look up a key case-insensitively; an exact match is preferred."""
    if name in data:
        return data[name]
    found = None
    for key, value in data.items():
        if key.lower() == name:
            found = value
    return found


def _decode_error(body: str | bytes) -> APIError:
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError("top-level value is not an object")
    err = _field(data, "error")
    if err is None:
        return APIError()
    if not isinstance(err, dict):
        raise ValueError("error is not an object")
    code = _field(err, "code")
    message = _field(err, "message")
    if code is None:
        code = 0
    elif isinstance(code, bool) or not isinstance(code, (int, float)) or code != int(code):
        raise ValueError(f"code {code!r} is not an integer")
    if message is None:
        message = ""
    elif not isinstance(message, str):
        raise ValueError(f"message {message!r} is not a string")
    return APIError(message, int(code))


def parse_error_response(
    status: int, status_text: str, content_type: str, body: str | bytes
) -> None:
    """Raise for a response outside 2xx; return None for a successful one.

    A JSON error body raises APIError carrying the status; any other failure
    raises ValueError.
    """
    if 200 <= status < 300:
        return None
    status_line = f"{status} {status_text}"
    if content_type != JSON_CONTENT_TYPE:
        raise ValueError(f"Unknown error. HTTP status: {status_line}")
    try:
        error = _decode_error(body)
    except ValueError as exc:
        raise ValueError(f"Unable to parse json: {exc}. HTTP status: {status_line}") from exc
    error.http_code = status
    raise error


__all__ = [
    "APIError",
    "HTTPStatus",
    "json_error",
    "parse_error_response",
    "versioned_message",
]