from enum import Enum

import pytest

from pathmux.methods_handler import MethodsHandler


def dummy(res, req):
    return None


def test_create_handlers():
    h = MethodsHandler("/dummy")
    h.post(dummy).get(dummy).method("CONNECT", dummy).put(dummy)

    assert h.method_supported("POST") is True
    assert h.method_supported("GET") is True
    assert h.method_supported("CONNECT") is True
    assert h.method_supported("PUT") is True

    assert h.method_supported("DELETE") is False
    assert h.method_supported("HEAD") is False
    assert h.method_supported("BREW") is False


def test_endpoint_propagation_no_description():
    h = MethodsHandler("/this/path/is/great")
    h.post(dummy).get(dummy).method("CONNECT", dummy).put(dummy)

    endpoints = {}
    h.propagate_endpoint(endpoints)

    assert "/this/path/is/great" in endpoints
    info, methods = endpoints["/this/path/is/great"]
    assert len(methods) == 4
    assert info == ""
    assert set(methods) == {"POST", "GET", "CONNECT", "PUT"}


def test_endpoint_propagation_with_description():
    h = MethodsHandler("/this/path/is/great", "This is an endpoint for great stuff")
    h.get(dummy).put(dummy).delete(dummy)

    endpoints = {}
    h.propagate_endpoint(endpoints)

    info, methods = endpoints["/this/path/is/great"]
    assert len(methods) == 3
    assert info == "This is an endpoint for great stuff"
    assert set(methods) == {"GET", "PUT", "DELETE"}


def test_propagation_replaces_existing_entry():
    endpoints = {"/a": ("old", ["PATCH"])}
    MethodsHandler("/a", "new").get(dummy).propagate_endpoint(endpoints)
    assert endpoints == {"/a": ("new", ["GET"])}


def test_chaining_returns_same_handler():
    h = MethodsHandler("/x")
    assert h.get(dummy) is h
    assert h.method("PATCH", dummy).head(dummy) is h


def test_getitem_returns_registered_handler():
    calls = []

    def record(res, req):
        calls.append((res, req))

    h = MethodsHandler("/x").get(record)
    registered = h["GET"]
    assert registered is record
    registered("res", "req")
    assert calls == [("res", "req")]


def test_getitem_unregistered_method_raises():
    h = MethodsHandler("/x").get(dummy)
    with pytest.raises(KeyError):
        _ = h["POST"]
    assert h["GET"] is dummy
    assert h.method_supported("POST") is False


def test_registering_again_overwrites():
    def first(res, req):
        return None

    def second(res, req):
        return None

    h = MethodsHandler("/x").get(first).get(second)
    assert h["GET"] is second
    endpoints = {}
    h.propagate_endpoint(endpoints)
    assert endpoints["/x"][1] == ["GET"]


def test_method_names_are_case_insensitive():
    h = MethodsHandler("/x").method("patch", dummy)
    assert h.method_supported("PATCH")
    assert "Patch" in h


def test_enum_methods_accepted():
    class Verb(Enum):
        GET = "GET"
        BREW = "BREW"

    h = MethodsHandler("/x").method(Verb.BREW, dummy)
    assert h.method_supported("BREW")
    assert h.method_supported(Verb.BREW)
    assert not h.method_supported(Verb.GET)


def test_empty_method_name_rejected():
    with pytest.raises(ValueError):
        MethodsHandler("/x").method("", dummy)


def test_path_and_info_kept():
    h = MethodsHandler("/this/path/is/great", "This is an endpoint for great stuff")
    assert h.path == "/this/path/is/great"
    assert h.info == "This is an endpoint for great stuff"