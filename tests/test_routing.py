import re
from http import HTTPStatus

import pytest

from katas.routing import (
    PathResolver,
    RegexResolver,
    Request,
    Response,
    goodbye,
    hello,
    home_page,
    not_found,
)


def echo_path(request):
    return Response(body=request.path)


@pytest.fixture
def path_resolver():
    resolver = PathResolver()
    resolver.add("GET /hello", hello)
    resolver.add("* /goodbye/*", goodbye)
    return resolver


@pytest.fixture
def regex_resolver():
    resolver = RegexResolver()
    resolver.add("GET /hello", hello)
    resolver.add("(GET|HEAD) /goodbye(/?[A-Za-z0-9]*)?", goodbye)
    return resolver


def test_hello_default_name():
    assert hello(Request("GET", "/hello")).body == "Hello, my name is Inigo Montoya"


def test_hello_uses_query_name():
    name = "Buttercup"
    response = hello(Request("GET", "/hello", f"name={name}"))
    assert response.body == f"Hello, my name is {name}"


def test_goodbye_uses_path_segment():
    name = "Westley"
    assert goodbye(Request("GET", f"/goodbye/{name}")).body == f"Goodbye {name}"


def test_goodbye_without_segment_uses_default():
    assert goodbye(Request("GET", "/goodbye")).body.endswith("Inigo Montoya")
    assert goodbye(Request("GET", "/goodbye/")).body.endswith("Inigo Montoya")


def test_home_page():
    assert home_page(Request("GET", "/")).body == "The homepage."
    assert home_page(Request("GET", "/elsewhere")).status == HTTPStatus.NOT_FOUND


def test_not_found_response():
    response = not_found(Request())
    assert response.status == HTTPStatus.NOT_FOUND
    assert response.body == "404 page not found\n"


def test_path_resolver_exact_method(path_resolver):
    hit = path_resolver.resolve(Request("GET", "/hello"))
    assert hit.body == hello(Request("GET", "/hello")).body
    assert path_resolver.resolve(Request("POST", "/hello")).status == HTTPStatus.NOT_FOUND


def test_path_resolver_wildcard_method(path_resolver):
    response = path_resolver.resolve(Request("DELETE", "/goodbye/Fezzik"))
    assert response.body == goodbye(Request("DELETE", "/goodbye/Fezzik")).body


def test_path_resolver_star_does_not_cross_slash(path_resolver):
    response = path_resolver.resolve(Request("GET", "/goodbye/a/b"))
    assert response.status == HTTPStatus.NOT_FOUND


def test_path_resolver_question_mark_and_class():
    resolver = PathResolver()
    resolver.add("GET /item/[0-9]?", echo_path)
    assert resolver.resolve(Request("GET", "/item/5x")).body == "/item/5x"
    assert resolver.resolve(Request("GET", "/item/x5")).status == HTTPStatus.NOT_FOUND
    assert resolver.resolve(Request("GET", "/item/5/")).status == HTTPStatus.NOT_FOUND


def test_path_resolver_negated_class_and_escape():
    resolver = PathResolver()
    resolver.add("GET /[^a-c]\\*", echo_path)
    assert resolver.resolve(Request("GET", "/z*")).body == "/z*"
    assert resolver.resolve(Request("GET", "/b*")).status == HTTPStatus.NOT_FOUND
    assert resolver.resolve(Request("GET", "/zz")).status == HTTPStatus.NOT_FOUND


@pytest.mark.parametrize("pattern", ["GET /[", "GET /\\", "GET /[]", "GET /[a-]", "GET /[-a]"])
def test_path_resolver_rejects_bad_patterns(pattern):
    with pytest.raises(ValueError):
        PathResolver().add(pattern, echo_path)


def test_path_resolver_first_added_wins():
    resolver = PathResolver()
    resolver.add("GET /*", echo_path)
    resolver.add("GET /hello", hello)
    assert resolver.resolve(Request("GET", "/hello")).body == "/hello"


def test_regex_resolver_matches_method_alternatives(regex_resolver):
    head = regex_resolver.resolve(Request("HEAD", "/goodbye"))
    assert head.body == goodbye(Request("HEAD", "/goodbye")).body
    named = regex_resolver.resolve(Request("GET", "/goodbye/Vizzini"))
    assert named.body == goodbye(Request("GET", "/goodbye/Vizzini")).body


def test_regex_resolver_is_unanchored(regex_resolver):
    response = regex_resolver.resolve(Request("GET", "/hello/there"))
    assert response.body == hello(Request("GET", "/hello/there")).body


def test_regex_resolver_not_found(regex_resolver):
    response = regex_resolver.resolve(Request("POST", "/hello"))
    assert response.status == HTTPStatus.NOT_FOUND


def test_regex_resolver_rejects_invalid_expression():
    with pytest.raises(re.error):
        RegexResolver().add("GET /(", echo_path)