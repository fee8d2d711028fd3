"""Routing requests to handlers by glob pattern or regular expression."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from http import HTTPStatus
from urllib.parse import parse_qs

DEFAULT_NAME = "Inigo Montoya"


@dataclass(frozen=True)
class Request:
    """An incoming request: method, path and raw query string."""

    method: str = "GET"
    path: str = "/"
    query: str = ""


@dataclass
class Response:
    """The status, headers and body a handler produces."""

    status: int = HTTPStatus.OK
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)


Handler = Callable[[Request], Response]


def _query_get(request: Request, name: str) -> str:
    """The first value of a query parameter, or an empty string."""
    values = parse_qs(request.query, keep_blank_values=True).get(name)
    return values[0] if values else ""


def _check(request: Request) -> str:
    return f"{request.method} {request.path}"


def _bad_pattern(pattern: str) -> ValueError:
    return ValueError(f"syntax error in pattern: {pattern!r}")


def _class_char(ch: str | None, chars: Iterator[str], pattern: str) -> tuple[str, str | None]:
    """Read one (possibly escaped) class character; return it and the next one."""
    if ch is None or ch in "-]":
        raise _bad_pattern(pattern)
    if ch == "\\":
        ch = next(chars, None)
        if ch is None:
            raise _bad_pattern(pattern)
    return ch, next(chars, None)


def _translate_class(chars: Iterator[str], pattern: str) -> str:
    negate = False
    ch = next(chars, None)
    if ch == "^":
        negate = True
        ch = next(chars, None)
    ranges: list[str] = []
    first = True
    while not (ch == "]" and not first):
        low, ch = _class_char(ch, chars, pattern)
        high = low
        if ch == "-":
            high, ch = _class_char(next(chars, None), chars, pattern)
        if low <= high:
            ranges.append(f"{re.escape(low)}-{re.escape(high)}")
        first = False
    if ranges:
        return "[" + ("^" if negate else "") + "".join(ranges) + "]"
    return "." if negate else "(?!)"


def _compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a shell-style pattern in which ``*`` and ``?`` never match ``/``."""
    parts: list[str] = []
    chars = iter(pattern)
    for ch in chars:
        if ch == "*":
            parts.append("[^/]*")
        elif ch == "?":
            parts.append("[^/]")
        elif ch == "\\":
            escaped = next(chars, None)
            if escaped is None:
                raise _bad_pattern(pattern)
            parts.append(re.escape(escaped))
        elif ch == "[":
            parts.append(_translate_class(chars, pattern))
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.DOTALL)


class PathResolver:
    """Dispatch on ``"METHOD /path"`` matched against glob patterns.

    Patterns are tried in the order they were added; the first match wins.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, tuple[re.Pattern[str], Handler]] = {}

    def add(self, pattern: str, handler: Handler) -> None:
        """Register a handler; a malformed pattern raises ValueError."""
        self._handlers[pattern] = (_compile_glob(pattern), handler)

    def resolve(self, request: Request) -> Response:
        """Run the first matching handler, or answer with not found."""
        check = _check(request)
        for compiled, handler in self._handlers.values():
            if compiled.fullmatch(check):
                return handler(request)
        return not_found(request)


class RegexResolver:
    """Dispatch on ``"METHOD /path"`` searched with regular expressions.

    Patterns are not anchored and are tried in the order they were added.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, tuple[re.Pattern[str], Handler]] = {}

    def add(self, pattern: str, handler: Handler) -> None:
        """Register a handler; an invalid expression raises re.error."""
        self._handlers[pattern] = (re.compile(pattern), handler)

    def resolve(self, request: Request) -> Response:
        """Run the first matching handler, or answer with not found."""
        check = _check(request)
        for compiled, handler in self._handlers.values():
            if compiled.search(check):
                return handler(request)
        return not_found(request)


def hello(request: Request) -> Response:
    """Greet the ``name`` query parameter."""
    name = _query_get(request, "name") or DEFAULT_NAME
    return Response(body=f"Hello, my name is {name}")


def goodbye(request: Request) -> Response:
    """Say goodbye to the name in the second path segment."""
    parts = request.path.split("/")
    name = (parts[2] if len(parts) > 2 else "") or DEFAULT_NAME
    return Response(body=f"Goodbye {name}")


def home_page(request: Request) -> Response:
    """Serve the homepage at ``/`` and nothing else."""
    if request.path != "/":
        return not_found(request)
    return Response(body="The homepage.")


def not_found(request: Request) -> Response:
    """The plain-text not found answer."""
    return Response(
        status=HTTPStatus.NOT_FOUND,
        body="404 page not found\n",
        headers={
            "Content-Type": "text/plain; charset=utf-8",
            "X-Content-Type-Options": "nosniff",
        },
    )